from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Task
from .repository import TaskRepository

TASK_COLUMNS = "task_id, name, description"


def row_to_task(r: Dict[str, Any], prefix: str = "") -> Task:
    return Task(
        task_id=int(r[f"{prefix}task_id"]),
        name=r[f"{prefix}name"],
        description=r.get(f"{prefix}description"),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {TASK_COLUMNS} FROM tasks ORDER BY task_id")
            return [row_to_task(r) for r in fetchall(cur)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {TASK_COLUMNS} FROM tasks WHERE task_id=%s", (int(task_id),))
            r = fetchone(cur)
            return row_to_task(r) if r else None
