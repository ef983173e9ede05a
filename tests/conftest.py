"""Shared fixtures: in-memory repositories and a Flask app wired to them."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, time
from typing import Optional

import pytest

from src.worktime_tracker.worktime_tracker.container import Container
from src.worktime_tracker.worktime_tracker.employees.model import Employee
from src.worktime_tracker.worktime_tracker.main import create_app
from src.worktime_tracker.worktime_tracker.tasks.model import Task
from src.worktime_tracker.worktime_tracker.worktime.model import WorkTimeData, WorkTimeDataModel
from src.worktime_tracker.worktime_tracker.worktime.service import WorkTimeManagementService


class InMemoryEmployees:
    def __init__(self, employees: list[Employee]):
        self.by_id = {e.employee_id: e for e in employees}

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(int(employee_id))


class InMemoryTasks:
    def __init__(self, tasks: list[Task]):
        self.by_id = {t.task_id: t for t in tasks}

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.by_id.get(int(task_id))


class InMemoryWorkTime:
    """Mimics the joined reads of the MySQL repository."""

    def __init__(self, employees: InMemoryEmployees, tasks: InMemoryTasks):
        self._employees = employees
        self._tasks = tasks
        self.rows: dict[int, WorkTimeData] = {}
        self._next_id = 1

    def _resolve(self, d: WorkTimeData) -> WorkTimeData:
        return replace(d, task=self._tasks.get_by_id(d.task_id), employee=self._employees.get_by_id(d.employee_id))

    def list_all(self):
        return [self._resolve(d) for d in self.rows.values()]

    def get_by_id(self, work_time_id: int) -> Optional[WorkTimeData]:
        d = self.rows.get(int(work_time_id))
        return self._resolve(d) if d else None

    def list_by_employee(self, employee_id: int):
        return [self._resolve(d) for d in self.rows.values() if d.employee_id == int(employee_id)]

    def list_by_task(self, task_id: int):
        return [self._resolve(d) for d in self.rows.values() if d.task_id == int(task_id)]

    def insert(self, data: WorkTimeData) -> int:
        new_id = self._next_id
        self._next_id += 1
        self.rows[new_id] = replace(data, work_time_id=new_id, task=None, employee=None)
        return new_id

    def update(self, data: WorkTimeData) -> bool:
        if data.work_time_id not in self.rows:
            return False
        self.rows[data.work_time_id] = replace(data, task=None, employee=None)
        return True

    def delete(self, work_time_id: int) -> bool:
        return self.rows.pop(int(work_time_id), None) is not None


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(employee_id=1, first_name="Anna", last_name="Kowalski", email="anna@example.com"),
            Employee(employee_id=2, first_name="Peter", last_name="Novak", phone_number="+420 777 123 456"),
            Employee(employee_id=3, first_name="Maria", last_name="Ivanova"),
        ]
    )


@pytest.fixture
def tasks_repo() -> InMemoryTasks:
    return InMemoryTasks(
        [
            Task(task_id=1, name="Requirements", description="Collect requirements"),
            Task(task_id=2, name="Implementation"),
        ]
    )


@pytest.fixture
def work_time_repo(employees_repo, tasks_repo) -> InMemoryWorkTime:
    return InMemoryWorkTime(employees_repo, tasks_repo)


@pytest.fixture
def service(work_time_repo) -> WorkTimeManagementService:
    return WorkTimeManagementService(work_time_repo)


@pytest.fixture
def container(employees_repo, tasks_repo, work_time_repo, service) -> Container:
    return Container(
        conn=None,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        work_time_repo=work_time_repo,
        work_time_service=service,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_entry() -> WorkTimeDataModel:
    return WorkTimeDataModel(
        task_id=1,
        employee_id=2,
        work_date=date(2024, 1, 10),
        start_time=time(9, 0),
        stop_time=time(17, 0),
    )
