from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee who logs work time.

    Owned outside the work time module; read-only here.
    """

    employee_id: int
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
