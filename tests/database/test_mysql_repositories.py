from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from src.worktime_tracker.worktime_tracker.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.worktime_tracker.worktime_tracker.tasks.mysql_task_repository import MySQLTaskRepository
from src.worktime_tracker.worktime_tracker.worktime.model import WorkTimeData
from src.worktime_tracker.worktime_tracker.worktime.mysql_worktime_repository import MySQLWorkTimeRepository


class FakeCursor:
    def __init__(self, rows=None, *, rowcount=0, lastrowid=None, error=None):
        self._rows = list(rows or [])
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self._error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self._error:
            raise self._error

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary is True
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connection = FakeConnection(cursor)

    def connect(self):
        return self.connection


JOINED_ROW = {
    "work_time_id": 5,
    "task_id": 1,
    "employee_id": 2,
    "work_date": date(2024, 1, 10),
    "start_time": timedelta(hours=9),
    "stop_time": "17:30:00",
    "t_task_id": 1,
    "t_name": "Requirements",
    "t_description": None,
    "e_employee_id": 2,
    "e_first_name": "Peter",
    "e_last_name": "Novak",
    "e_phone_number": None,
    "e_email": "peter@example.com",
}


def test_get_by_id_maps_joined_row():
    factory = FakeConnFactory(FakeCursor([JOINED_ROW]))

    data = MySQLWorkTimeRepository(factory).get_by_id(5)

    assert data.work_time_id == 5
    assert data.start_time == time(9, 0)
    assert data.stop_time == time(17, 30)
    assert data.task.name == "Requirements"
    assert data.employee.email == "peter@example.com"
    sql, params = factory.cursor.executed[0]
    assert "WHERE w.work_time_id=%s" in sql
    assert params == (5,)
    assert factory.connection.committed and factory.connection.closed


def test_get_by_id_missing_returns_none():
    assert MySQLWorkTimeRepository(FakeConnFactory(FakeCursor([]))).get_by_id(1) is None


def test_list_by_employee_filters_on_employee():
    factory = FakeConnFactory(FakeCursor([JOINED_ROW]))

    rows = MySQLWorkTimeRepository(factory).list_by_employee(2)

    assert len(rows) == 1
    sql, params = factory.cursor.executed[0]
    assert "WHERE w.employee_id=%s" in sql
    assert params == (2,)


def test_insert_returns_generated_id():
    factory = FakeConnFactory(FakeCursor(lastrowid=12))
    entity = WorkTimeData(
        work_time_id=0,
        task_id=1,
        employee_id=2,
        work_date=date(2024, 1, 10),
        start_time=time(9, 0),
        stop_time=time(17, 0),
    )

    assert MySQLWorkTimeRepository(factory).insert(entity) == 12
    _, params = factory.cursor.executed[0]
    assert params == (1, 2, date(2024, 1, 10), time(9, 0), time(17, 0))
    assert factory.connection.committed


@pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
def test_update_and_delete_report_affected_rows(rowcount, expected):
    entity = WorkTimeData(
        work_time_id=3,
        task_id=1,
        employee_id=2,
        work_date=date(2024, 1, 10),
        start_time=time(9, 0),
        stop_time=time(17, 0),
    )

    assert MySQLWorkTimeRepository(FakeConnFactory(FakeCursor(rowcount=rowcount))).update(entity) is expected
    assert MySQLWorkTimeRepository(FakeConnFactory(FakeCursor(rowcount=rowcount))).delete(3) is expected


def test_error_rolls_back_and_propagates():
    factory = FakeConnFactory(FakeCursor(error=RuntimeError("fk violation")))

    with pytest.raises(RuntimeError):
        MySQLWorkTimeRepository(factory).delete(1)

    assert factory.connection.rolled_back
    assert not factory.connection.committed
    assert factory.connection.closed


def test_employee_and_task_repositories_map_rows():
    employees = MySQLEmployeeRepository(
        FakeConnFactory(
            FakeCursor(
                [{"employee_id": 1, "first_name": "Anna", "last_name": "Kowalski", "phone_number": None, "email": None}]
            )
        )
    ).list_all()
    tasks = MySQLTaskRepository(
        FakeConnFactory(FakeCursor([{"task_id": 4, "name": "Testing", "description": "Manual"}]))
    ).list_all()

    assert employees[0].full_name == "Anna Kowalski"
    assert tasks[0].task_id == 4
