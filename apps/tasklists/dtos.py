from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TaskListDTO:
    """
    Task list as seen by other apps.

    A reference built from a request carries only the id; `name` and
    `description` are filled in when the list is resolved from the store.
    """
    id: int
    name: Optional[str] = None
    description: str = ""

    @classmethod
    def ref(cls, task_list_id: int) -> "TaskListDTO":
        return cls(id=task_list_id)
