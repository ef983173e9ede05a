from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Task:
    """Domain entity: a task employees log time against."""

    task_id: int
    name: str
    description: Optional[str] = None
