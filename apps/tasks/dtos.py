"""DTOs for Tasks app - the in-memory form of tasks and labels."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from apps.tasklists.dtos import TaskListDTO


@dataclass(frozen=True)
class LabelDTO:
    """Label projection: name and color only."""
    name: str
    color: str = ""


@dataclass(frozen=True)
class TaskDTO:
    """
    Task as handled by the service layer.

    `id` is None until the store assigns one. `labels` are matched by name
    when the task is written; colors on incoming labels are ignored.
    """
    id: Optional[int]
    title: str
    description: str
    due_date: Optional[date]
    status: str
    priority: str
    task_list: TaskListDTO
    updated_at: Optional[datetime] = None
    labels: Tuple[LabelDTO, ...] = field(default_factory=tuple)

    @property
    def label_names(self) -> Tuple[str, ...]:
        return tuple(label.name for label in self.labels)
