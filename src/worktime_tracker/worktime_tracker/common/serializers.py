"""JSON shapes for the API (snake_case keys, ISO dates, HH:MM times)."""

from __future__ import annotations

from ..employees.model import Employee
from ..tasks.model import Task
from ..worktime.model import WorkTimeDataModel
from .datetime_utils import format_date, format_time


def employee_to_dict(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "first_name": e.first_name,
        "last_name": e.last_name,
        "phone_number": e.phone_number,
        "email": e.email,
    }


def task_to_dict(t: Task) -> dict:
    return {"task_id": t.task_id, "name": t.name, "description": t.description}


def work_time_to_dict(d: WorkTimeDataModel) -> dict:
    return {
        "work_time_id": d.work_time_id,
        "task_id": d.task_id,
        "employee_id": d.employee_id,
        "work_date": format_date(d.work_date),
        "start_time": format_time(d.start_time),
        "stop_time": format_time(d.stop_time),
    }
