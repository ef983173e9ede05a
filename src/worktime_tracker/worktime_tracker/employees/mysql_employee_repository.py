from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

EMPLOYEE_COLUMNS = "employee_id, first_name, last_name, phone_number, email"


def row_to_employee(r: Dict[str, Any], prefix: str = "") -> Employee:
    return Employee(
        employee_id=int(r[f"{prefix}employee_id"]),
        first_name=r[f"{prefix}first_name"],
        last_name=r[f"{prefix}last_name"],
        phone_number=r.get(f"{prefix}phone_number"),
        email=r.get(f"{prefix}email"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees ORDER BY last_name, first_name")
            return [row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return row_to_employee(r) if r else None
