from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError
