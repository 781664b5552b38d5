"""API endpoints for task management."""

from fastapi import APIRouter, HTTPException, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from typing import Any, Dict, List
import json

from tasklist.models import Task
from tasklist.store import TaskStore, get_store

router = APIRouter()

TASK_NOT_FOUND = "Task not found"

# Documents the body that decode_task reads by hand
TASK_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": Task.model_json_schema()}}
    }
}


async def decode_task(request: Request) -> Task:
    """Decode the request body into a Task whatever its Content-Type.

    A ``null`` body decodes to an empty task. Unreadable JSON and values
    of the wrong type raise RequestValidationError.
    """
    body = await request.body()
    try:
        data = json.loads(body)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}", "input": None}]
        )

    if data is None:
        data = {}

    try:
        return Task.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors()],
            body=data
        )


@router.get("/tasks")
async def list_tasks(store: TaskStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """List all tasks in insertion order."""
    return [task.to_dict() for task in store.list_tasks()]


@router.get("/tasks/{task_id}")
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    task = store.get_task(task_id)

    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return task.to_dict()


@router.post("/tasks", status_code=201, openapi_extra=TASK_BODY)
async def create_task(
    task: Task = Depends(decode_task),
    store: TaskStore = Depends(get_store)
):
    """Create a new task."""
    return store.create_task(task).to_dict()


@router.put("/tasks/{task_id}", openapi_extra=TASK_BODY)
async def update_task(
    task_id: str,
    task: Task = Depends(decode_task),
    store: TaskStore = Depends(get_store)
):
    """Replace a task. The stored id becomes whatever the body says."""
    updated = store.replace_task(task_id, task)

    if updated is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return updated.to_dict()


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    if not store.delete_task(task_id):
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return {"message": "Task deleted"}
