from __future__ import annotations

from enum import Enum


# PUBLIC_INTERFACE
class TaskStatus(str, Enum):
    """
    Closed set of task statuses.

    The status is authored outside the dashboard; derivations only read it.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


# PUBLIC_INTERFACE
class TaskPriority(str, Enum):
    """Closed set of task priorities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# PUBLIC_INTERFACE
class NotificationType(str, Enum):
    """Kinds of notifications derived from a task."""

    DEADLINE = "deadline"
    OVERDUE = "overdue"


# PUBLIC_INTERFACE
class StatusFilter(str, Enum):
    """Status filter values: 'all' or any TaskStatus value."""

    ALL = "all"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


# PUBLIC_INTERFACE
class PriorityFilter(str, Enum):
    """Priority filter values: 'all' or any TaskPriority value."""

    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
