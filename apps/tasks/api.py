"""
Task API endpoints.

Provides CRUD operations for tasks, label creation/listing, and label
attachment. Service errors carry their own HTTP status:
- NotFound      -> 404
- AlreadyExists -> 409
"""
from typing import List

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.core.exceptions import ServiceError
from .schemas import LabelIn, LabelOut, TaskIn, TaskOut
from .services import get_task_service

router = Router(tags=["Tasks"])


# =============================================================================
# Label Endpoints
# =============================================================================
# Declared before /{task_id} routes so "labels" is never read as a task id.

@router.post("/labels", response={201: LabelOut})
def create_label(request: HttpRequest, payload: LabelIn):
    """Create a label. Name and color must both be unused."""
    try:
        label = get_task_service().create_label(payload.to_dto())
    except ServiceError as e:
        raise HttpError(e.status_code, str(e))
    return 201, LabelOut(**label.__dict__)


@router.get("/labels", response=List[LabelOut])
def list_labels(request: HttpRequest):
    """List all labels (name and color)."""
    return [LabelOut(**label.__dict__) for label in get_task_service().get_all_labels()]


# =============================================================================
# Task CRUD Endpoints
# =============================================================================

@router.post("", response={201: TaskOut})
def create_task(request: HttpRequest, payload: TaskIn):
    """
    Create a task in an existing task list.

    Labels are given by name and must already exist.
    """
    try:
        task = get_task_service().create_task(payload.to_dto())
    except ServiceError as e:
        raise HttpError(e.status_code, str(e))
    return 201, TaskOut.from_dto(task)


@router.get("", response=List[TaskOut])
def list_tasks(request: HttpRequest):
    """List all tasks in creation order."""
    return [TaskOut.from_dto(task) for task in get_task_service().get_all_tasks()]


@router.get("/{int:task_id}", response=TaskOut)
def get_task(request: HttpRequest, task_id: int):
    try:
        task = get_task_service().get_task(task_id)
    except ServiceError as e:
        raise HttpError(e.status_code, str(e))
    return TaskOut.from_dto(task)


@router.put("/{int:task_id}", response={204: None})
def update_task(request: HttpRequest, task_id: int, payload: TaskIn):
    """
    Replace a task's fields and labels.

    The task list cannot be changed here; `task_list_id` in the body is ignored.
    """
    try:
        get_task_service().update_task(task_id, payload.to_dto())
    except ServiceError as e:
        raise HttpError(e.status_code, str(e))
    return 204, None


@router.delete("/{int:task_id}", response={204: None})
def delete_task(request: HttpRequest, task_id: int):
    get_task_service().delete_task(task_id)
    return 204, None


@router.post("/{int:task_id}/add-label/{path:label_name}", response={204: None})
def add_label_to_task(request: HttpRequest, task_id: int, label_name: str):
    """
    Attach an existing label, by name, to a task. Re-attaching is a no-op.

    The name is the rest of the path, so names containing "/" resolve too.
    """
    try:
        get_task_service().add_label_to_task(task_id, label_name)
    except ServiceError as e:
        raise HttpError(e.status_code, str(e))
    return 204, None
