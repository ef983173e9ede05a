from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..employees.model import Employee
from ..tasks.model import Task


@dataclass(frozen=True)
class WorkTimeData:
    """Persisted entity: one row of ``work_time_data``.

    ``task`` and ``employee`` are filled when the repository joins the related rows.
    """

    work_time_id: int
    task_id: int
    employee_id: int
    work_date: date
    start_time: time
    stop_time: time
    task: Optional[Task] = None
    employee: Optional[Employee] = None


@dataclass(frozen=True)
class WorkTimeDataModel:
    """Transport model exchanged with the HTTP layer.

    Fields are optional so a partially filled form can be bound and validated.
    ``work_time_id`` is 0 until the store assigns one.
    """

    work_time_id: int = 0
    task_id: Optional[int] = None
    employee_id: Optional[int] = None
    work_date: Optional[date] = None
    start_time: Optional[time] = None
    stop_time: Optional[time] = None
