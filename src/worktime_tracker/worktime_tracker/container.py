from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_MYSQL_PORT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .worktime.mysql_worktime_repository import MySQLWorkTimeRepository
from .worktime.repository import WorkTimeRepository
from .worktime.service import WorkTimeManagementService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    tasks_repo: TaskRepository
    work_time_repo: WorkTimeRepository

    work_time_service: WorkTimeManagementService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", DEFAULT_MYSQL_PORT)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    employees_repo = MySQLEmployeeRepository(conn)
    tasks_repo = MySQLTaskRepository(conn)
    work_time_repo = MySQLWorkTimeRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        work_time_repo=work_time_repo,
        work_time_service=WorkTimeManagementService(work_time_repo),
    )
