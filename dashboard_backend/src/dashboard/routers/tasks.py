from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..engine import filter_tasks
from ..models import PriorityFilter, StatusFilter
from ..repositories import TaskStore, get_task_store
from ..schemas import FilterCriteria, Task, TaskList
from ..utils import collection_envelope

router = APIRouter(
    prefix="/api/v1/tasks",
    tags=["tasks"],
)


def _get_store(store: TaskStore = Depends(get_task_store)) -> TaskStore:
    """
    Dependency wrapper for the task store to keep signatures clean.
    """
    return store


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=TaskList,
    summary="List Tasks",
    description=(
        "List tasks matching all given filters, in store order.\n\n"
        "Query parameters:\n"
        "- status: all, pending, in_progress, completed or overdue\n"
        "- priority: all, low, medium or high\n"
        "- q: case-insensitive search across title, description and assignee (not trimmed)\n\n"
        "An empty result is a valid response."
    ),
    responses={
        200: {"description": "List retrieved successfully"},
        422: {"description": "Invalid filter value"},
    },
)
def list_tasks(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status", description="Status filter"),
    priority_filter: PriorityFilter = Query(PriorityFilter.ALL, alias="priority", description="Priority filter"),
    q: str = Query("", description="Search text for title/description/assignee"),
    store: TaskStore = Depends(_get_store),
) -> TaskList:
    """
    List tasks filtered by status, priority and search text.
    """
    criteria = FilterCriteria(status=status_filter, priority=priority_filter, search=q)
    items = filter_tasks(store.snapshot(), criteria)
    return TaskList(**collection_envelope(items, criteria=criteria))


# PUBLIC_INTERFACE
@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get Task",
    description="Get a single task by ID.",
    responses={
        200: {"description": "Task found"},
        404: {"description": "Task not found"},
    },
)
def get_task(task_id: str, store: TaskStore = Depends(_get_store)) -> Task:
    """
    Retrieve a single task by its ID.
    """
    task = store.get(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task
