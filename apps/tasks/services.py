"""
Task service - business rules for tasks and labels.

The service holds no state of its own; every call is one round of
checks followed by at most one write through the repositories.

Usage:
    from apps.tasks.services import get_task_service

    service = get_task_service()
    task = service.get_task(task_id)

Environment Configuration:
    TASK_STORE_BACKEND=django  # Django ORM (default)
    TASK_STORE_BACKEND=memory  # Process-local store, no database needed
"""
import logging
from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from django.conf import settings
from django.utils import timezone

from apps.core.exceptions import AlreadyExists, NotFound
from apps.tasklists.dtos import TaskListDTO
from .dtos import LabelDTO, TaskDTO
from .repositories import LabelRepository, TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """
    Create/read/update/delete for tasks, plus label creation and attachment.

    Uniqueness pre-checks here only give a precise error early; the store's
    unique indexes remain the guard against concurrent writers.
    """

    def __init__(self, tasks: TaskRepository, labels: LabelRepository):
        self.tasks = tasks
        self.labels = labels

    # =========================================================================
    # Tasks
    # =========================================================================

    def create_task(self, task: TaskDTO) -> TaskDTO:
        """
        Persist a new task.

        Raises:
            AlreadyExists: a task with the same title exists.
            NotFound: the task list or one of the labels does not exist.
        """
        if self.tasks.find_by_title(task.title) is not None:
            logger.warning(f"Rejected task create: title {task.title!r} already exists")
            raise AlreadyExists("Task already exists", field="title")

        created = self.tasks.save(replace(
            task,
            id=None,
            updated_at=task.updated_at or timezone.now(),
        ))
        logger.info(f"Created task {created.id} in list {created.task_list.id}")
        return created

    def get_all_tasks(self) -> List[TaskDTO]:
        return self.tasks.find_all()

    def get_task(self, task_id: int) -> TaskDTO:
        task = self.tasks.find_by_id(task_id)
        if task is None:
            raise NotFound("Task not found")
        return task

    def update_task(self, task_id: int, task: TaskDTO) -> TaskDTO:
        """
        Replace a task's fields and label set.

        The id and owning task list are kept from the stored task whatever
        the incoming DTO says; updated_at is set to the current time.

        Raises:
            NotFound: the task or one of the labels does not exist.
            AlreadyExists: the new title belongs to another task.
        """
        existing = self.get_task(task_id)

        holder = self.tasks.find_by_title(task.title)
        if holder is not None and holder.id != task_id:
            logger.warning(f"Rejected update of task {task_id}: title {task.title!r} taken by {holder.id}")
            raise AlreadyExists("Task already exists", field="title")

        now = timezone.now()
        # updated_at must advance even if the clock has not
        if existing.updated_at is not None and now <= existing.updated_at:
            now = existing.updated_at + timedelta(microseconds=1)

        updated = self.tasks.save(replace(
            existing,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
            priority=task.priority,
            labels=task.labels,
            updated_at=now,
        ))
        logger.info(f"Updated task {task_id}")
        return updated

    def delete_task(self, task_id: int) -> None:
        """Delete a task. Deleting an absent id is a no-op."""
        if self.tasks.delete_by_id(task_id):
            logger.info(f"Deleted task {task_id}")
        else:
            logger.info(f"Delete of task {task_id} ignored: not found")

    # =========================================================================
    # Labels
    # =========================================================================

    def create_label(self, label: LabelDTO) -> LabelDTO:
        """
        Raises:
            AlreadyExists: field="name" if the name is taken,
                field="color" if the color is taken.
        """
        if self.labels.find_by_name(label.name) is not None:
            logger.warning(f"Rejected label create: name {label.name!r} already exists")
            raise AlreadyExists("Label already exists", field="name")

        if self.labels.find_by_color(label.color) is not None:
            logger.warning(f"Rejected label create: color {label.color!r} already exists")
            raise AlreadyExists("Label color already exists", field="color")

        created = self.labels.save(label)
        logger.info(f"Created label {created.name!r} ({created.color})")
        return created

    def get_all_labels(self) -> List[LabelDTO]:
        return self.labels.find_all()

    def add_label_to_task(self, task_id: int, name: str) -> TaskDTO:
        """
        Attach an existing label to a task.

        Attaching a label the task already carries changes nothing.

        Raises:
            NotFound: the task or the label does not exist.
        """
        task = self.get_task(task_id)

        label = self.labels.find_by_name(name)
        if label is None:
            raise NotFound("Label not found")

        if name in task.label_names:
            logger.debug(f"Label {name!r} already attached to task {task_id}")
            return task

        updated = self.tasks.save(replace(task, labels=task.labels + (label,)))
        logger.info(f"Attached label {name!r} to task {task_id}")
        return updated


# =============================================================================
# Backend selection
# =============================================================================

# Lists available to the memory backend, which has no task list table
MEMORY_TASK_LISTS = [TaskListDTO(id=1, name="Inbox")]

_memory_service: Optional[TaskService] = None


def build_memory_service(task_lists: Optional[List[TaskListDTO]] = None) -> TaskService:
    """Build a TaskService over a fresh in-memory store."""
    from .backends.memory_backend import (
        InMemoryLabelRepository, InMemoryTaskListRepository, InMemoryTaskRepository,
    )
    labels = InMemoryLabelRepository()
    lists = InMemoryTaskListRepository(task_lists if task_lists is not None else MEMORY_TASK_LISTS)
    return TaskService(InMemoryTaskRepository(labels, lists), labels)


def get_task_service() -> TaskService:
    """Get a TaskService over the backend named by settings.TASK_STORE_BACKEND."""
    global _memory_service
    backend = getattr(settings, 'TASK_STORE_BACKEND', 'django')

    if backend == 'django':
        from .backends.django_backend import (
            DjangoLabelRepository, DjangoTaskListRepository, DjangoTaskRepository,
        )
        return TaskService(
            DjangoTaskRepository(DjangoTaskListRepository()),
            DjangoLabelRepository(),
        )
    elif backend == 'memory':
        # One store per process, otherwise writes vanish between requests
        if _memory_service is None:
            _memory_service = build_memory_service()
        return _memory_service
    else:
        raise ValueError(f"Unknown TASK_STORE_BACKEND: {backend}")
