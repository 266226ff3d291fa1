from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import NotificationType, PriorityFilter, StatusFilter, TaskPriority, TaskStatus
from .utils import to_naive_local

# Shared type for incoming due_date which can be a date, datetime, or ISO8601 string
DueDateInput = Union[date, datetime, str]


def _parse_due_date(value: Optional[DueDateInput]) -> datetime:
    """
    Internal helper to normalize due_date input into a naive local datetime.
    - If value is a string, attempt to parse via datetime.fromisoformat; if time is missing, set to 00:00.
    - If value is a date (not datetime), convert to datetime at 00:00.
    - If value is a datetime, return it (aware values are converted to local time).
    """
    if value is None:
        raise ValueError("due_date is required")

    if isinstance(value, datetime):
        return to_naive_local(value)

    if isinstance(value, date):
        # Promote a date to a datetime at midnight
        return datetime(value.year, value.month, value.day, 0, 0, 0)

    if isinstance(value, str):
        s = value.strip()
        try:
            return to_naive_local(datetime.fromisoformat(s))
        except ValueError:
            try:
                d = date.fromisoformat(s)
                return datetime(d.year, d.month, d.day, 0, 0, 0)
            except ValueError as e:
                raise ValueError(
                    "Invalid due_date format. Use ISO8601 date or datetime string (e.g., '2025-07-30' or '2025-07-30T13:45:00')."
                ) from e

    raise ValueError("Invalid type for due_date; expected date, datetime, or ISO8601 string.")


# PUBLIC_INTERFACE
class Task(BaseModel):
    """
    Immutable task record supplied by the task store.

    Construction validates every field: unknown statuses or priorities and
    unparsable due dates are rejected here, never inside the derivations.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "title": "Подготовить отчет по продажам",
                "description": "Анализ продаж за Q4 2024",
                "status": "in_progress",
                "priority": "high",
                "assignee": "Иванов А.А.",
                "due_date": "2025-07-30T00:00:00",
                "category": "Отчетность",
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the task", min_length=1)
    title: str = Field(..., description="Short title of the task")
    description: str = Field(..., description="Detailed description")
    status: TaskStatus = Field(..., description="Externally authored task status")
    priority: TaskPriority = Field(..., description="Task priority")
    assignee: str = Field(..., description="Person responsible for the task")
    due_date: datetime = Field(
        ...,
        description="Due date/time (local, timezone-naive). Accepts ISO8601 date or datetime; dates are set to 00:00",
    )
    category: str = Field(..., description="Free-text category label")

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: Optional[DueDateInput]) -> datetime:
        """
        Normalize due_date from str/date/datetime to a naive datetime.
        """
        return _parse_due_date(v)


# PUBLIC_INTERFACE
class Notification(BaseModel):
    """
    Transient alert derived from a task. Recomputed on every pass, never stored.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="'overdue-<task id>' or 'deadline-<task id>'")
    type: NotificationType = Field(..., description="Notification kind")
    task: Task = Field(..., description="Originating task")
    days: int = Field(..., description="Day count embedded in the message")
    message: str = Field(..., description="Human-readable notification text")


# PUBLIC_INTERFACE
class Statistics(BaseModel):
    """
    Per-status counts over a task sequence and the completion rate in percent.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "total": 5,
                "completed": 1,
                "in_progress": 1,
                "overdue": 1,
                "pending": 2,
                "completion_rate": 20,
            }
        },
    )

    total: int = Field(..., ge=0)
    completed: int = Field(..., ge=0)
    in_progress: int = Field(..., ge=0)
    overdue: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    completion_rate: int = Field(..., ge=0, le=100, description="round(100 * completed / total), 0 when empty")


# PUBLIC_INTERFACE
class FilterCriteria(BaseModel):
    """
    Conjunctive filter criteria. Search is a case-insensitive substring match
    against title, description and assignee; it is not trimmed.
    """

    model_config = ConfigDict(frozen=True)

    status: StatusFilter = Field(default=StatusFilter.ALL, description="Status filter or 'all'")
    priority: PriorityFilter = Field(default=PriorityFilter.ALL, description="Priority filter or 'all'")
    search: str = Field(default="", description="Search text for title/description/assignee")


# PUBLIC_INTERFACE
class DashboardView(BaseModel):
    """
    Result of one recompute pass over a single task snapshot.
    """

    model_config = ConfigDict(frozen=True)

    generated_at: datetime = Field(..., description="Reference 'now' used for the pass")
    criteria: FilterCriteria
    statistics: Statistics
    notifications: Tuple[Notification, ...]
    notification_preview: Tuple[Notification, ...] = Field(..., description="Leading notifications shown in the header")
    tasks: Tuple[Task, ...] = Field(..., description="Tasks matching the criteria, in store order")
    selected_date: date
    selected_date_tasks: Tuple[Task, ...] = Field(..., description="Tasks due on selected_date, unfiltered")


class TaskList(BaseModel):
    """Envelope for filtered task listings."""

    items: Tuple[Task, ...] = Field(..., description="Matching tasks")
    total: int = Field(..., description="Number of matching tasks")
    criteria: FilterCriteria = Field(..., description="Criteria that produced the listing")


class NotificationList(BaseModel):
    """Envelope for notification listings."""

    items: Tuple[Notification, ...] = Field(..., description="Notifications, possibly truncated by limit")
    total: int = Field(..., description="Number of notifications before truncation")


class CalendarDay(BaseModel):
    """Tasks due on one calendar day."""

    day: date
    items: Tuple[Task, ...]
    total: int
