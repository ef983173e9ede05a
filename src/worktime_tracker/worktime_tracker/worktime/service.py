from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..core.exceptions import InvalidArgumentError, NotFoundError
from ..employees.model import Employee
from ..tasks.model import Task
from .model import WorkTimeData, WorkTimeDataModel
from .repository import WorkTimeRepository
from .validation import validate_work_time

logger = logging.getLogger(__name__)


class WorkTimeManagementService:
    """Use case: CRUD and relationship queries over work time entries.

    Translates between the persisted WorkTimeData and the transport WorkTimeDataModel.
    Misses on try_get/update/delete are reported through the return value;
    get_employee/get_task assume the entry exists and raise NotFoundError otherwise.
    """

    def __init__(self, work_time: WorkTimeRepository):
        self._work_time = work_time

    def list_all(self) -> List[WorkTimeDataModel]:
        return [self._to_model(d) for d in self._work_time.list_all()]

    def try_get(self, work_time_id: int) -> Tuple[bool, Optional[WorkTimeDataModel]]:
        entity = self._work_time.get_by_id(int(work_time_id))
        if entity is None:
            logger.debug("Work time %s not found", work_time_id)
            return False, None
        return True, self._to_model(entity)

    def create(self, data: Optional[WorkTimeDataModel]) -> int:
        if data is None:
            raise InvalidArgumentError("data must not be None")

        validate_work_time(data)
        work_time_id = self._work_time.insert(self._to_entity(data, work_time_id=0))
        logger.info("Created work time %s for employee %s on task %s", work_time_id, data.employee_id, data.task_id)
        return work_time_id

    def update(self, work_time_id: int, data: Optional[WorkTimeDataModel]) -> bool:
        if data is None:
            raise InvalidArgumentError("data must not be None")

        if self._work_time.get_by_id(int(work_time_id)) is None:
            logger.debug("Work time %s not found for update", work_time_id)
            return False

        validate_work_time(data)
        ok = self._work_time.update(self._to_entity(data, work_time_id=int(work_time_id)))
        logger.info("Updated work time %s (affected=%s)", work_time_id, ok)
        return ok

    def delete(self, work_time_id: int) -> bool:
        if self._work_time.get_by_id(int(work_time_id)) is None:
            logger.debug("Work time %s not found for delete", work_time_id)
            return False

        ok = self._work_time.delete(int(work_time_id))
        logger.info("Deleted work time %s (affected=%s)", work_time_id, ok)
        return ok

    def list_employees_for_task(self, task_id: int) -> List[Employee]:
        # One employee per entry, as a plain join returns them.
        return [d.employee for d in self._work_time.list_by_task(int(task_id)) if d.employee is not None]

    def list_tasks_for_employee(self, employee_id: int) -> List[Task]:
        return [d.task for d in self._work_time.list_by_employee(int(employee_id)) if d.task is not None]

    def list_for_employee(self, employee_id: int) -> List[WorkTimeDataModel]:
        return [self._to_model(d) for d in self._work_time.list_by_employee(int(employee_id))]

    def get_employee(self, work_time_id: int) -> Employee:
        entity = self._work_time.get_by_id(int(work_time_id))
        if entity is None or entity.employee is None:
            raise NotFoundError(f"Work time {work_time_id} was not found")
        return entity.employee

    def get_task(self, work_time_id: int) -> Task:
        entity = self._work_time.get_by_id(int(work_time_id))
        if entity is None or entity.task is None:
            raise NotFoundError(f"Work time {work_time_id} was not found")
        return entity.task

    @staticmethod
    def _to_model(data: WorkTimeData) -> WorkTimeDataModel:
        return WorkTimeDataModel(
            work_time_id=data.work_time_id,
            task_id=data.task_id,
            employee_id=data.employee_id,
            work_date=data.work_date,
            start_time=data.start_time,
            stop_time=data.stop_time,
        )

    @staticmethod
    def _to_entity(data: WorkTimeDataModel, *, work_time_id: int) -> WorkTimeData:
        return WorkTimeData(
            work_time_id=work_time_id,
            task_id=int(data.task_id),
            employee_id=int(data.employee_id),
            work_date=data.work_date,
            start_time=data.start_time,
            stop_time=data.stop_time,
        )
