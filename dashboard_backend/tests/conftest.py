from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Callable

import pytest

# Keep tests on the built-in seed tasks with default thresholds.
os.environ.pop("DASHBOARD_TASKS_FILE", None)
os.environ.setdefault("DEADLINE_WINDOW_DAYS", "2")
os.environ.setdefault("AUTO_OVERDUE", "false")
os.environ.setdefault("NOTIFICATION_PREVIEW_LIMIT", "3")

from src.dashboard.schemas import Task  # noqa: E402

# Reference instant used across tests; the seed tasks relative to it are:
# 1 in_progress due in 2 days, 2 pending due in 1 day, 3 overdue (3 days),
# 4 completed, 5 pending due in 8 days.
NOW = datetime(2025, 7, 28, 10, 0, 0)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """
    Factory for valid tasks; keyword arguments override the defaults.
    """
    counter = {"n": 0}

    def _make(**overrides: Any) -> Task:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "id": f"t{counter['n']}",
            "title": f"Task {counter['n']}",
            "description": "Something to do",
            "status": "pending",
            "priority": "medium",
            "assignee": "Петрова М.В.",
            "due_date": NOW,
            "category": "General",
        }
        fields.update(overrides)
        return Task(**fields)

    return _make
