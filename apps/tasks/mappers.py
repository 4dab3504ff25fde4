"""
Mapping between Task/Label ORM records and their DTOs.

Lookups go through the store on every call; nothing is cached.
"""
from typing import Iterable, List, Optional, Tuple

from apps.core.exceptions import NotFound
from apps.tasklists.services import task_list_to_dto
from .dtos import LabelDTO, TaskDTO
from .models import Label, Task
from .repositories import TaskListRepository


def label_record_to_domain(label: Label) -> LabelDTO:
    return LabelDTO(name=label.name, color=label.color)


def record_to_domain(record: Task) -> TaskDTO:
    """Convert a Task row (with its list and labels) into a TaskDTO."""
    return TaskDTO(
        id=record.id,
        title=record.title,
        description=record.description,
        due_date=record.due_date,
        status=record.status,
        priority=record.priority,
        task_list=task_list_to_dto(record.task_list),
        updated_at=record.updated_at,
        labels=tuple(label_record_to_domain(label) for label in record.labels.all()),
    )


def resolve_label_records(labels: Iterable[LabelDTO]) -> List[Label]:
    """
    Look up the Label row for each label by name.

    Labels are never created implicitly through a task write.
    """
    records = []
    for label in labels:
        try:
            records.append(Label.objects.get(name=label.name))
        except Label.DoesNotExist:
            raise NotFound(f"{label.name} Label not found")
    return records


def domain_to_record(
    task: TaskDTO,
    task_lists: TaskListRepository,
    record: Optional[Task] = None,
) -> Tuple[Task, List[Label]]:
    """
    Copy a TaskDTO onto a Task row, new or existing.

    Many-to-many rows cannot be assigned before the task row is saved, so the
    resolved label records are returned alongside it for the caller to set.

    Raises:
        NotFound: the task list or any named label does not exist.
    """
    labels = resolve_label_records(task.labels)

    if task_lists.find_by_id(task.task_list.id) is None:
        raise NotFound("Task list not found")

    if record is None:
        record = Task()

    record.title = task.title
    record.description = task.description
    record.due_date = task.due_date
    record.status = task.status
    record.priority = task.priority
    record.updated_at = task.updated_at
    record.task_list_id = task.task_list.id

    return record, labels
