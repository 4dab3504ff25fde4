"""
Store contract consumed by the task service.

One abstract repository per entity. Implementations live in
apps/tasks/backends/ and speak DTOs, never ORM rows:
- django_backend: Django ORM (default)
- memory_backend: process-local dictionaries, used as a test double
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from apps.tasklists.dtos import TaskListDTO
from .dtos import LabelDTO, TaskDTO


class TaskListRepository(ABC):
    """Id lookup of task lists; their lifecycle is managed elsewhere."""

    @abstractmethod
    def find_by_id(self, task_list_id: int) -> Optional[TaskListDTO]:
        pass


class LabelRepository(ABC):

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[LabelDTO]:
        pass

    @abstractmethod
    def find_by_color(self, color: str) -> Optional[LabelDTO]:
        pass

    @abstractmethod
    def find_all(self) -> List[LabelDTO]:
        pass

    @abstractmethod
    def save(self, label: LabelDTO) -> LabelDTO:
        """
        Insert a new label. Database-backed stores stamp its creation time.

        Raises AlreadyExists if the name or color is taken.
        """
        pass


class TaskRepository(ABC):

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[TaskDTO]:
        pass

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[TaskDTO]:
        pass

    @abstractmethod
    def find_all(self) -> List[TaskDTO]:
        """All tasks in ascending id order."""
        pass

    @abstractmethod
    def save(self, task: TaskDTO) -> TaskDTO:
        """
        Insert (task.id is None) or update a task and replace its label set.

        The owning list is resolved by id and labels by name; a missing one
        raises NotFound. A title held by another task raises AlreadyExists.

        Returns:
            The stored task as read back from the store.
        """
        pass

    @abstractmethod
    def delete_by_id(self, task_id: int) -> bool:
        """Delete a task. Returns False if there was nothing to delete."""
        pass
