from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from .engine import (
    apply_overdue_transition,
    compute_statistics,
    derive_notifications,
    filter_tasks,
    tasks_on_date,
)
from .repositories import TaskStore
from .schemas import DashboardView, FilterCriteria
from .settings import Settings
from .utils import reference_time

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Dashboard:
    """
    Explicit recompute entry point over a task store.

    The driver calls `recompute` whenever the tasks, the filter criteria, the
    reference time or the selected day change. Each call takes one snapshot,
    runs every derivation over it and replaces `latest` with the new view.
    """

    def __init__(self, store: TaskStore, settings: Settings) -> None:
        self._store = store
        self._settings = settings
        self._latest: Optional[DashboardView] = None

    @property
    def latest(self) -> Optional[DashboardView]:
        """Most recent view, or None before the first recompute."""
        return self._latest

    def recompute(
        self,
        criteria: Optional[FilterCriteria] = None,
        now: Optional[datetime] = None,
        selected_date: Optional[date] = None,
    ) -> DashboardView:
        criteria = criteria or FilterCriteria()
        now = reference_time(now)
        selected = selected_date or now.date()

        tasks = self._store.snapshot()
        if self._settings.auto_overdue:
            tasks = apply_overdue_transition(tasks, now)

        notifications = derive_notifications(
            tasks, now, deadline_window=self._settings.deadline_window_days
        )
        view = DashboardView(
            generated_at=now,
            criteria=criteria,
            statistics=compute_statistics(tasks),
            notifications=notifications,
            notification_preview=notifications[: self._settings.notification_preview_limit],
            tasks=filter_tasks(tasks, criteria),
            selected_date=selected,
            selected_date_tasks=tasks_on_date(tasks, selected),
        )
        logger.debug(
            "Recomputed dashboard: %d tasks, %d matching, %d notifications",
            len(tasks),
            len(view.tasks),
            len(view.notifications),
        )
        self._latest = view
        return view
