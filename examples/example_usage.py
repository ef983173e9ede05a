"""Example: drive the work time service directly (no Flask).

Controllers stay thin; the rules live in WorkTimeManagementService.
"""

import importlib
from datetime import date, time

from config import get_settings_module

from src.worktime_tracker.worktime_tracker.container import build_container
from src.worktime_tracker.worktime_tracker.worktime.model import WorkTimeDataModel


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    service = container.work_time_service

    new_id = service.create(
        WorkTimeDataModel(
            task_id=1,
            employee_id=2,
            work_date=date(2024, 1, 10),
            start_time=time(9, 0),
            stop_time=time(17, 0),
        )
    )
    print(service.try_get(new_id))
    print(service.list_tasks_for_employee(2))
    print(service.delete(new_id))


if __name__ == "__main__":
    main()
