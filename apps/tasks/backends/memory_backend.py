"""
In-memory backend for the task store.

Keeps DTOs in dictionaries and enforces the same unique and existence rules
as the database backend. Used as the service-layer test double and for
running the API without a database (TASK_STORE_BACKEND=memory).
"""
from dataclasses import replace
from typing import Dict, List, Optional

from apps.core.exceptions import AlreadyExists, NotFound
from apps.tasklists.dtos import TaskListDTO
from apps.tasks.dtos import LabelDTO, TaskDTO
from apps.tasks.repositories import LabelRepository, TaskListRepository, TaskRepository


class InMemoryTaskListRepository(TaskListRepository):

    def __init__(self, task_lists: Optional[List[TaskListDTO]] = None):
        self._task_lists: Dict[int, TaskListDTO] = {}
        for task_list in task_lists or []:
            self.add(task_list)

    def add(self, task_list: TaskListDTO) -> TaskListDTO:
        self._task_lists[task_list.id] = task_list
        return task_list

    def find_by_id(self, task_list_id: int) -> Optional[TaskListDTO]:
        return self._task_lists.get(task_list_id)


class InMemoryLabelRepository(LabelRepository):

    def __init__(self):
        # Keyed by name; insertion order is creation order
        self._labels: Dict[str, LabelDTO] = {}

    def find_by_name(self, name: str) -> Optional[LabelDTO]:
        return self._labels.get(name)

    def find_by_color(self, color: str) -> Optional[LabelDTO]:
        for label in self._labels.values():
            if label.color == color:
                return label
        return None

    def find_all(self) -> List[LabelDTO]:
        return list(self._labels.values())

    def save(self, label: LabelDTO) -> LabelDTO:
        if label.name in self._labels:
            raise AlreadyExists("Label already exists", field="name")
        if self.find_by_color(label.color) is not None:
            raise AlreadyExists("Label color already exists", field="color")
        stored = LabelDTO(name=label.name, color=label.color)
        self._labels[stored.name] = stored
        return stored


class InMemoryTaskRepository(TaskRepository):

    def __init__(self, labels: LabelRepository, task_lists: TaskListRepository):
        self.labels = labels
        self.task_lists = task_lists
        self._tasks: Dict[int, TaskDTO] = {}
        self._next_id = 1

    def find_by_id(self, task_id: int) -> Optional[TaskDTO]:
        return self._tasks.get(task_id)

    def find_by_title(self, title: str) -> Optional[TaskDTO]:
        for task in self._tasks.values():
            if task.title == title:
                return task
        return None

    def find_all(self) -> List[TaskDTO]:
        return [self._tasks[task_id] for task_id in sorted(self._tasks)]

    def save(self, task: TaskDTO) -> TaskDTO:
        if task.id is not None and task.id not in self._tasks:
            raise NotFound("Task not found")

        labels = []
        for label in task.labels:
            stored_label = self.labels.find_by_name(label.name)
            if stored_label is None:
                raise NotFound(f"{label.name} Label not found")
            if stored_label not in labels:
                labels.append(stored_label)

        task_list = self.task_lists.find_by_id(task.task_list.id)
        if task_list is None:
            raise NotFound("Task list not found")

        holder = self.find_by_title(task.title)
        if holder is not None and holder.id != task.id:
            raise AlreadyExists("Task already exists", field="title")

        task_id = task.id
        if task_id is None:
            task_id = self._next_id
            self._next_id += 1

        stored = replace(task, id=task_id, task_list=task_list, labels=tuple(labels))
        self._tasks[task_id] = stored
        return stored

    def delete_by_id(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None
