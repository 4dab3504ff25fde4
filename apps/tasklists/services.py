from typing import Optional

from .models import TaskList
from .dtos import TaskListDTO


def get_task_list(task_list_id: int) -> Optional[TaskList]:
    """
    Get the TaskList record by id.
    Used by the tasks app to bind a task to its owning list.
    """
    try:
        return TaskList.objects.get(id=task_list_id)
    except TaskList.DoesNotExist:
        return None


def get_task_list_dto(task_list_id: int) -> Optional[TaskListDTO]:
    task_list = get_task_list(task_list_id)
    if task_list is None:
        return None
    return task_list_to_dto(task_list)


def task_list_to_dto(task_list: TaskList) -> TaskListDTO:
    return TaskListDTO(
        id=task_list.id,
        name=task_list.name,
        description=task_list.description,
    )
