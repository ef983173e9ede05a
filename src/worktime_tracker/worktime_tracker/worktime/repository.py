from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkTimeData


class WorkTimeRepository(Protocol):
    """Persistence boundary for work time entries.

    Every read returns entities with their task and employee resolved.
    Writes commit immediately.
    """

    def list_all(self) -> Sequence[WorkTimeData]:
        raise NotImplementedError

    def get_by_id(self, work_time_id: int) -> Optional[WorkTimeData]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[WorkTimeData]:
        raise NotImplementedError

    def list_by_task(self, task_id: int) -> Sequence[WorkTimeData]:
        raise NotImplementedError

    def insert(self, data: WorkTimeData) -> int:
        """Insert a row and return the generated work_time_id."""

        raise NotImplementedError

    def update(self, data: WorkTimeData) -> bool:
        """Overwrite all mutable columns of ``data.work_time_id``.

        Returns whether a row was affected.
        """

        raise NotImplementedError

    def delete(self, work_time_id: int) -> bool:
        raise NotImplementedError
