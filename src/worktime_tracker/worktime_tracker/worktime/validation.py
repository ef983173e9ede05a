"""Field-level rules for work time entries.

Errors are collected per field so a form can show each message next to its input.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.validators import require_positive_id, require_present
from ..core.exceptions import WorkTimeValidationError
from .model import WorkTimeDataModel

T = TypeVar("T")

FIELDS = ("task_id", "employee_id", "work_date", "start_time", "stop_time")

START_BEFORE_STOP = "Start time must be earlier than stop time"
STOP_AFTER_START = "Stop time must be later than start time"


def collect_errors(data: WorkTimeDataModel) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    require_positive_id(data.task_id, "task_id", errors)
    require_positive_id(data.employee_id, "employee_id", errors)
    require_present(data.work_date, "work_date", errors)
    require_present(data.start_time, "start_time", errors)
    require_present(data.stop_time, "stop_time", errors)

    # Both fields depend on each other, so the violation is reported on each.
    if data.start_time is not None and data.stop_time is not None and data.start_time >= data.stop_time:
        errors.setdefault("start_time", START_BEFORE_STOP)
        errors.setdefault("stop_time", STOP_AFTER_START)
    return errors


def validate_work_time(data: WorkTimeDataModel) -> None:
    errors = collect_errors(data)
    if errors:
        raise WorkTimeValidationError(errors)


def _parse(
    payload: Mapping[str, Any],
    field: str,
    parser: Callable[[Any], T],
    message: str,
    errors: Dict[str, str],
) -> Optional[T]:
    raw = payload.get(field)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return parser(raw)
    except (TypeError, ValueError):
        errors[field] = message
        return None


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("bool is not an id")
    if isinstance(value, str):
        return int(value.strip())
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("id must be an integer")
    return int(value)


def bind_work_time(payload: Mapping[str, Any], *, work_time_id: int = 0) -> WorkTimeDataModel:
    """Build a WorkTimeDataModel from raw form/JSON values and validate it.

    Format errors and rule errors are reported together in one WorkTimeValidationError.
    """

    errors: Dict[str, str] = {}
    data = WorkTimeDataModel(
        work_time_id=int(work_time_id),
        task_id=_parse(payload, "task_id", _to_int, "task_id must be an integer", errors),
        employee_id=_parse(payload, "employee_id", _to_int, "employee_id must be an integer", errors),
        work_date=_parse(payload, "work_date", lambda v: parse_iso_date(str(v)), "Invalid date (YYYY-MM-DD)", errors),
        start_time=_parse(payload, "start_time", lambda v: parse_clock_time(str(v)), "Invalid time (HH:MM)", errors),
        stop_time=_parse(payload, "stop_time", lambda v: parse_clock_time(str(v)), "Invalid time (HH:MM)", errors),
    )

    for field, message in collect_errors(data).items():
        errors.setdefault(field, message)
    if errors:
        raise WorkTimeValidationError(errors)
    return data
