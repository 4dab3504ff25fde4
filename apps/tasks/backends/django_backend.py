"""
Django ORM backend for the task store.

Unique indexes on Task.title, Label.name and Label.color are the final
word on uniqueness; an IntegrityError from one of them is reported as
AlreadyExists.
"""
import logging
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from apps.core.exceptions import AlreadyExists, NotFound
from apps.tasklists.dtos import TaskListDTO
from apps.tasklists.services import get_task_list_dto
from apps.tasks.dtos import LabelDTO, TaskDTO
from apps.tasks.mappers import domain_to_record, label_record_to_domain, record_to_domain
from apps.tasks.models import Label, Task
from apps.tasks.repositories import LabelRepository, TaskListRepository, TaskRepository

logger = logging.getLogger(__name__)


class DjangoTaskListRepository(TaskListRepository):

    def find_by_id(self, task_list_id: int) -> Optional[TaskListDTO]:
        return get_task_list_dto(task_list_id)


class DjangoLabelRepository(LabelRepository):

    def find_by_name(self, name: str) -> Optional[LabelDTO]:
        label = Label.objects.filter(name=name).first()
        return label_record_to_domain(label) if label else None

    def find_by_color(self, color: str) -> Optional[LabelDTO]:
        label = Label.objects.filter(color=color).first()
        return label_record_to_domain(label) if label else None

    def find_all(self) -> List[LabelDTO]:
        return [label_record_to_domain(label) for label in Label.objects.all()]

    def save(self, label: LabelDTO) -> LabelDTO:
        try:
            with transaction.atomic():
                record = Label.objects.create(
                    name=label.name,
                    color=label.color,
                    created_at=timezone.now(),
                )
        except IntegrityError as e:
            logger.warning(f"Label insert rejected by unique index: {e}")
            if Label.objects.filter(name=label.name).exists():
                raise AlreadyExists("Label already exists", field="name")
            raise AlreadyExists("Label color already exists", field="color")
        return label_record_to_domain(record)


class DjangoTaskRepository(TaskRepository):

    def __init__(self, task_lists: TaskListRepository):
        self.task_lists = task_lists

    def _queryset(self):
        return Task.objects.select_related('task_list').prefetch_related('labels')

    def find_by_id(self, task_id: int) -> Optional[TaskDTO]:
        record = self._queryset().filter(id=task_id).first()
        return record_to_domain(record) if record else None

    def find_by_title(self, title: str) -> Optional[TaskDTO]:
        record = self._queryset().filter(title=title).first()
        return record_to_domain(record) if record else None

    def find_all(self) -> List[TaskDTO]:
        return [record_to_domain(record) for record in self._queryset()]

    def save(self, task: TaskDTO) -> TaskDTO:
        existing = None
        if task.id is not None:
            existing = Task.objects.filter(id=task.id).first()
            if existing is None:
                raise NotFound("Task not found")

        record, labels = domain_to_record(task, self.task_lists, record=existing)

        try:
            with transaction.atomic():
                # An update must never fall back to INSERT if the row was deleted meanwhile
                record.save(force_update=existing is not None)
                record.labels.set(labels)
        except IntegrityError as e:
            logger.warning(f"Task write rejected by unique index: {e}")
            raise AlreadyExists("Task already exists", field="title")
        except DatabaseError as e:
            logger.warning(f"Update of task {task.id} matched no row: {e}")
            raise NotFound("Task not found")

        return record_to_domain(self._queryset().get(id=record.id))

    def delete_by_id(self, task_id: int) -> bool:
        deleted, _ = Task.objects.filter(id=task_id).delete()
        return deleted > 0
