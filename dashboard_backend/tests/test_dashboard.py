from dataclasses import replace
from datetime import date, timedelta

import pytest

from src.dashboard.dashboard import Dashboard
from src.dashboard.models import NotificationType, TaskStatus
from src.dashboard.repositories import InMemoryTaskStore, parse_tasks
from src.dashboard.schemas import FilterCriteria
from src.dashboard.seed import SEED_TASKS
from src.dashboard.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        tasks_file=None,
        deadline_window_days=2,
        auto_overdue=False,
        notification_preview_limit=3,
        cors_allow_origins=["*"],
        log_level="INFO",
        log_file=None,
    )


@pytest.fixture()
def seed_store() -> InMemoryTaskStore:
    return InMemoryTaskStore(parse_tasks(SEED_TASKS))


class TestDashboardRecompute:
    def test_latest_is_empty_before_first_pass(self, seed_store, settings):
        assert Dashboard(seed_store, settings).latest is None

    def test_full_view_over_seed(self, seed_store, settings, now):
        dashboard = Dashboard(seed_store, settings)
        view = dashboard.recompute(now=now)

        assert dashboard.latest is view
        assert view.generated_at == now
        assert view.criteria == FilterCriteria()
        assert view.statistics.total == 5
        assert view.statistics.completion_rate == 20
        assert [n.id for n in view.notifications] == ["deadline-1", "deadline-2", "overdue-3"]
        assert [n.days for n in view.notifications] == [2, 1, 3]
        assert [t.id for t in view.tasks] == ["1", "2", "3", "4", "5"]
        # The selected day defaults to the day of 'now'
        assert view.selected_date == now.date()
        assert view.selected_date_tasks == ()

    def test_criteria_do_not_affect_other_derivations(self, seed_store, settings, now):
        view = Dashboard(seed_store, settings).recompute(
            criteria=FilterCriteria(status="completed"),
            now=now,
            selected_date=date(2025, 7, 29),
        )
        assert [t.id for t in view.tasks] == ["4"]
        assert view.statistics.total == 5
        assert len(view.notifications) == 3
        assert [t.id for t in view.selected_date_tasks] == ["2"]

    def test_each_pass_replaces_latest(self, seed_store, settings, now):
        dashboard = Dashboard(seed_store, settings)
        first = dashboard.recompute(now=now)
        second = dashboard.recompute(now=now + timedelta(days=10))
        assert dashboard.latest is second
        assert first is not second
        # Ten days later only the overdue-status task remains notable
        assert [n.id for n in second.notifications] == ["overdue-3"]
        assert [n.id for n in first.notifications] == ["deadline-1", "deadline-2", "overdue-3"]

    def test_notification_preview_limit(self, seed_store, settings, now):
        view = Dashboard(seed_store, replace(settings, notification_preview_limit=2)).recompute(now=now)
        assert len(view.notifications) == 3
        assert [n.id for n in view.notification_preview] == ["deadline-1", "deadline-2"]

    def test_deadline_window_from_settings(self, seed_store, settings, now):
        view = Dashboard(seed_store, replace(settings, deadline_window_days=8)).recompute(now=now)
        assert [n.id for n in view.notifications] == ["deadline-1", "deadline-2", "overdue-3", "deadline-5"]

    def test_auto_overdue_is_opt_in(self, make_task, settings, now):
        store = InMemoryTaskStore([make_task(id="late", status="pending", due_date=now - timedelta(days=4))])

        plain = Dashboard(store, settings).recompute(now=now)
        assert plain.notifications == ()
        assert plain.statistics.pending == 1

        auto = Dashboard(store, replace(settings, auto_overdue=True)).recompute(now=now)
        assert [(n.type, n.days) for n in auto.notifications] == [(NotificationType.OVERDUE, 4)]
        assert auto.statistics.overdue == 1
        # The store itself is never modified
        assert store.get("late").status == TaskStatus.PENDING

    def test_empty_store(self, settings, now):
        view = Dashboard(InMemoryTaskStore(), settings).recompute(now=now)
        assert view.statistics.total == 0
        assert view.statistics.completion_rate == 0
        assert view.notifications == ()
        assert view.tasks == ()
