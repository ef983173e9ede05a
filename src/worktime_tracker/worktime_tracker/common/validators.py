from __future__ import annotations

from typing import Any, Dict, Optional


def require_present(value: Any, field_name: str, errors: Dict[str, str]) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        errors.setdefault(field_name, f"{field_name} is required")


def require_positive_id(value: Optional[int], field_name: str, errors: Dict[str, str]) -> None:
    require_present(value, field_name, errors)
    if value is not None and int(value) <= 0:
        errors.setdefault(field_name, f"{field_name} is not valid")
