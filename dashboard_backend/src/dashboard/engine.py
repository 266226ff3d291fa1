"""
Derivation engine for the task dashboard.

Every function here is pure: it reads a task sequence (plus explicit
parameters such as the reference instant or filter criteria) and returns a
fresh result. Nothing is cached between calls and no task is mutated.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from .models import NotificationType, PriorityFilter, StatusFilter, TaskStatus
from .schemas import FilterCriteria, Notification, Statistics, Task
from .utils import to_naive_local

DEFAULT_DEADLINE_WINDOW_DAYS = 2

_SECONDS_PER_DAY = 24 * 60 * 60

# Statuses the optional overdue transition may promote.
_OPEN_STATUSES = frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS})


# PUBLIC_INTERFACE
def days_until(due: datetime, now: datetime) -> int:
    """
    Return the whole number of days from `now` until `due`, rounding any
    fractional day up (a task due in one hour is 1 day away, one due an hour
    ago is 0 days away, one due 5 days ago is -5).
    """
    return math.ceil((due - now).total_seconds() / _SECONDS_PER_DAY)


def _overdue_notification(task: Task, days: int) -> Notification:
    elapsed = abs(days)
    return Notification(
        id=f"overdue-{task.id}",
        type=NotificationType.OVERDUE,
        task=task,
        days=elapsed,
        message=f'Task "{task.title}" is overdue by {elapsed} day(s).',
    )


def _deadline_notification(task: Task, days: int) -> Notification:
    return Notification(
        id=f"deadline-{task.id}",
        type=NotificationType.DEADLINE,
        task=task,
        days=days,
        message=f'Deadline for task "{task.title}" in {days} day(s).',
    )


# PUBLIC_INTERFACE
def derive_notifications(
    tasks: Iterable[Task],
    now: datetime,
    *,
    deadline_window: int = DEFAULT_DEADLINE_WINDOW_DAYS,
) -> Tuple[Notification, ...]:
    """
    Scan tasks in order and produce at most one notification per task.

    Rules:
    - status 'overdue' always yields an overdue notification, with the absolute
      day count, whatever the sign of the computed difference.
    - otherwise a task that is not completed and is due within
      0..deadline_window days yields a deadline notification.
    - everything else yields nothing.

    The stored status is authoritative: a pending task whose due date has
    passed is not reported as overdue here.
    """
    notifications: List[Notification] = []
    for task in tasks:
        days = days_until(task.due_date, now)
        if task.status == TaskStatus.OVERDUE:
            notifications.append(_overdue_notification(task, days))
        elif 0 <= days <= deadline_window and task.status != TaskStatus.COMPLETED:
            notifications.append(_deadline_notification(task, days))
    return tuple(notifications)


def _completion_rate(completed: int, total: int) -> int:
    if total == 0:
        return 0
    # Integer half-up rounding of 100 * completed / total.
    return (200 * completed + total) // (2 * total)


# PUBLIC_INTERFACE
def compute_statistics(tasks: Iterable[Task]) -> Statistics:
    """
    Count tasks per status and compute the completion rate.

    Raises:
        ValueError: if a task carries a status outside TaskStatus.
    """
    counts: Dict[TaskStatus, int] = {status: 0 for status in TaskStatus}
    total = 0
    for task in tasks:
        if task.status not in counts:
            raise ValueError(f"Unknown task status {task.status!r} for task {task.id!r}")
        counts[task.status] += 1
        total += 1

    completed = counts[TaskStatus.COMPLETED]
    return Statistics(
        total=total,
        completed=completed,
        in_progress=counts[TaskStatus.IN_PROGRESS],
        overdue=counts[TaskStatus.OVERDUE],
        pending=counts[TaskStatus.PENDING],
        completion_rate=_completion_rate(completed, total),
    )


def _matches_status(task: Task, wanted: StatusFilter) -> bool:
    if wanted == StatusFilter.ALL:
        return True
    return task.status.value == wanted.value


def _matches_priority(task: Task, wanted: PriorityFilter) -> bool:
    if wanted == PriorityFilter.ALL:
        return True
    return task.priority.value == wanted.value


def _matches_search(task: Task, needle: str) -> bool:
    if not needle:
        return True
    return (
        needle in task.title.lower()
        or needle in task.description.lower()
        or needle in task.assignee.lower()
    )


# PUBLIC_INTERFACE
def filter_tasks(tasks: Iterable[Task], criteria: FilterCriteria) -> Tuple[Task, ...]:
    """
    Return the tasks satisfying every predicate in `criteria`, in input order.

    Search text is compared case-insensitively against title, description and
    assignee; it is neither trimmed nor tokenized.
    """
    needle = criteria.search.lower()
    return tuple(
        task
        for task in tasks
        if _matches_status(task, criteria.status)
        and _matches_priority(task, criteria.priority)
        and _matches_search(task, needle)
    )


# PUBLIC_INTERFACE
def tasks_on_date(tasks: Iterable[Task], day: Union[date, datetime]) -> Tuple[Task, ...]:
    """
    Return the tasks due on the calendar day `day`, ignoring time of day.

    Filter criteria do not apply here; the calendar shows every task of the day.
    """
    if isinstance(day, datetime):
        day = to_naive_local(day).date()
    return tuple(task for task in tasks if task.due_date.date() == day)


# PUBLIC_INTERFACE
def apply_overdue_transition(tasks: Sequence[Task], now: datetime) -> Tuple[Task, ...]:
    """
    Optional rule: copy pending/in-progress tasks whose due date has passed
    with status 'overdue'. Other tasks are returned unchanged.

    Not part of the default derivations; the dashboard applies it only when
    AUTO_OVERDUE is enabled.
    """
    return tuple(
        task.model_copy(update={"status": TaskStatus.OVERDUE})
        if task.status in _OPEN_STATUSES and task.due_date < now
        else task
        for task in tasks
    )
