from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..dashboard import Dashboard
from ..engine import compute_statistics, derive_notifications, tasks_on_date
from ..models import PriorityFilter, StatusFilter
from ..repositories import TaskStore, get_task_store
from ..schemas import CalendarDay, DashboardView, FilterCriteria, NotificationList, Statistics
from ..settings import Settings, get_settings
from ..utils import collection_envelope, reference_time

router = APIRouter(
    prefix="/api/v1",
    tags=["dashboard"],
)


@lru_cache(maxsize=1)
def get_dashboard() -> Dashboard:
    """
    Dependency returning the process-wide dashboard over the configured store.

    One instance serves every request, so `Dashboard.latest` holds the view of
    the most recent /dashboard/ call.
    """
    return Dashboard(get_task_store(), get_settings())


# PUBLIC_INTERFACE
@router.get(
    "/notifications/",
    response_model=NotificationList,
    summary="List Notifications",
    description=(
        "Overdue and near-deadline notifications, in store order.\n\n"
        "Query parameters:\n"
        "- now: reference instant (ISO8601); defaults to the server's local time\n"
        "- limit: maximum number of items to return; total always counts all notifications"
    ),
)
def list_notifications(
    now: Optional[datetime] = Query(None, description="Reference instant"),
    limit: Optional[int] = Query(None, ge=0, description="Maximum number of items to return"),
    store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
) -> NotificationList:
    """
    Derive notifications for the current task snapshot.
    """
    notifications = derive_notifications(
        store.snapshot(),
        reference_time(now),
        deadline_window=settings.deadline_window_days,
    )
    items = notifications if limit is None else notifications[:limit]
    return NotificationList(**collection_envelope(items, total=len(notifications)))


# PUBLIC_INTERFACE
@router.get(
    "/statistics/",
    response_model=Statistics,
    summary="Task Statistics",
    description="Per-status counts and completion rate over all tasks.",
)
def get_statistics(store: TaskStore = Depends(get_task_store)) -> Statistics:
    """
    Compute statistics for the current task snapshot.
    """
    return compute_statistics(store.snapshot())


# PUBLIC_INTERFACE
@router.get(
    "/calendar/{day}",
    response_model=CalendarDay,
    summary="Tasks Due On Day",
    description="All tasks due on the given calendar day (YYYY-MM-DD), independent of list filters.",
    responses={
        200: {"description": "Tasks for the day (possibly empty)"},
        422: {"description": "Invalid date"},
    },
)
def get_calendar_day(day: date, store: TaskStore = Depends(get_task_store)) -> CalendarDay:
    """
    Look up the tasks due on one calendar day.
    """
    items = tasks_on_date(store.snapshot(), day)
    return CalendarDay(**collection_envelope(items, day=day))


# PUBLIC_INTERFACE
@router.get(
    "/dashboard/",
    response_model=DashboardView,
    summary="Dashboard View",
    description=(
        "Recompute the full dashboard: statistics, notifications, filtered tasks and the "
        "tasks of the selected day.\n\n"
        "Query parameters:\n"
        "- status, priority, q: list filters (see /api/v1/tasks/)\n"
        "- now: reference instant; defaults to the server's local time\n"
        "- date: selected calendar day; defaults to the day of 'now'"
    ),
)
def get_dashboard_view(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status", description="Status filter"),
    priority_filter: PriorityFilter = Query(PriorityFilter.ALL, alias="priority", description="Priority filter"),
    q: str = Query("", description="Search text for title/description/assignee"),
    now: Optional[datetime] = Query(None, description="Reference instant"),
    selected_date: Optional[date] = Query(None, alias="date", description="Selected calendar day"),
    dashboard: Dashboard = Depends(get_dashboard),
) -> DashboardView:
    """
    Run one recompute pass and return the resulting view.
    """
    criteria = FilterCriteria(status=status_filter, priority=priority_filter, search=q)
    return dashboard.recompute(criteria=criteria, now=now, selected_date=selected_date)
