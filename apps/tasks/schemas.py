"""API Schemas for Tasks app - Ninja schemas for request/response validation."""
from datetime import date, datetime
from typing import List, Optional

from ninja import Schema
from pydantic import Field

from apps.tasklists.dtos import TaskListDTO
from .dtos import LabelDTO, TaskDTO
from .models import TaskPriority, TaskStatus


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(Schema):
    """Schema for creating/updating a task."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    due_date: Optional[date] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    task_list_id: int
    labels: List[str] = []  # Label names; each must already exist

    def to_dto(self) -> TaskDTO:
        # Duplicate names collapse to one label, first occurrence wins
        names = list(dict.fromkeys(self.labels))
        return TaskDTO(
            id=None,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            status=str(self.status),
            priority=str(self.priority),
            task_list=TaskListDTO.ref(self.task_list_id),
            labels=tuple(LabelDTO(name=name) for name in names),
        )


class LabelIn(Schema):
    """Schema for creating a label."""
    name: str = Field(..., min_length=1, max_length=50)
    color: str = Field(..., min_length=1, max_length=20)

    def to_dto(self) -> LabelDTO:
        return LabelDTO(name=self.name, color=self.color)


# =============================================================================
# Response Schemas
# =============================================================================

class LabelOut(Schema):
    name: str
    color: str


class TaskListOut(Schema):
    id: int
    name: Optional[str] = None
    description: str = ""


class TaskOut(Schema):
    id: int
    title: str
    description: str
    due_date: Optional[date]
    status: str
    priority: str
    updated_at: Optional[datetime]
    task_list: TaskListOut
    labels: List[LabelOut]

    @classmethod
    def from_dto(cls, task: TaskDTO) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
            priority=task.priority,
            updated_at=task.updated_at,
            task_list=TaskListOut(**task.task_list.__dict__),
            labels=[LabelOut(**label.__dict__) for label in task.labels],
        )
