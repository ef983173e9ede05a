from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from ..employees.mysql_employee_repository import row_to_employee
from ..tasks.mysql_task_repository import row_to_task
from .model import WorkTimeData
from .repository import WorkTimeRepository

_SELECT_JOINED = """
    SELECT
        w.work_time_id,
        w.task_id,
        w.employee_id,
        w.work_date,
        w.start_time,
        w.stop_time,
        t.task_id AS t_task_id,
        t.name AS t_name,
        t.description AS t_description,
        e.employee_id AS e_employee_id,
        e.first_name AS e_first_name,
        e.last_name AS e_last_name,
        e.phone_number AS e_phone_number,
        e.email AS e_email
    FROM work_time_data w
    JOIN tasks t ON t.task_id = w.task_id
    JOIN employees e ON e.employee_id = w.employee_id
"""


def row_to_work_time(r: Dict[str, Any]) -> WorkTimeData:
    return WorkTimeData(
        work_time_id=int(r["work_time_id"]),
        task_id=int(r["task_id"]),
        employee_id=int(r["employee_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        start_time=normalize_mysql_time(r["start_time"]),
        stop_time=normalize_mysql_time(r["stop_time"]),
        task=row_to_task(r, prefix="t_") if r.get("t_task_id") is not None else None,
        employee=row_to_employee(r, prefix="e_") if r.get("e_employee_id") is not None else None,
    )


class MySQLWorkTimeRepository(WorkTimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _query(self, where: str = "", params: tuple = ()) -> Sequence[WorkTimeData]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_JOINED} {where} ORDER BY w.work_time_id", params)
            return [row_to_work_time(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[WorkTimeData]:
        return self._query()

    def list_by_employee(self, employee_id: int) -> Sequence[WorkTimeData]:
        return self._query("WHERE w.employee_id=%s", (int(employee_id),))

    def list_by_task(self, task_id: int) -> Sequence[WorkTimeData]:
        return self._query("WHERE w.task_id=%s", (int(task_id),))

    def get_by_id(self, work_time_id: int) -> Optional[WorkTimeData]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_JOINED} WHERE w.work_time_id=%s", (int(work_time_id),))
            r = fetchone(cur)
            return row_to_work_time(r) if r else None

    def insert(self, data: WorkTimeData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_time_data(task_id, employee_id, work_date, start_time, stop_time)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(data.task_id), int(data.employee_id), data.work_date, data.start_time, data.stop_time),
            )
            return int(cur.lastrowid)

    def update(self, data: WorkTimeData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_time_data
                SET task_id=%s, employee_id=%s, work_date=%s, start_time=%s, stop_time=%s
                WHERE work_time_id=%s
                """,
                (
                    int(data.task_id),
                    int(data.employee_id),
                    data.work_date,
                    data.start_time,
                    data.stop_time,
                    int(data.work_time_id),
                ),
            )
            return cur.rowcount > 0

    def delete(self, work_time_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_time_data WHERE work_time_id=%s", (int(work_time_id),))
            return cur.rowcount > 0
