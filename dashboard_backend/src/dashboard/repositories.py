from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from threading import RLock
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from .schemas import Task
from .seed import SEED_TASKS
from .settings import get_settings

logger = logging.getLogger(__name__)


class TaskLoadError(ValueError):
    """Raised when task records cannot be turned into a valid task store."""


# PUBLIC_INTERFACE
class TaskStore(ABC):
    """Abstract read-only contract for task sources."""

    @abstractmethod
    def snapshot(self) -> Tuple[Task, ...]:
        """Return a consistent, immutable copy of all tasks in store order."""

    @abstractmethod
    def get(self, task_id: str) -> Optional[Task]:
        """Return a Task by id, or None if not found."""

    def __len__(self) -> int:
        return len(self.snapshot())


class InMemoryTaskStore(TaskStore):
    """
    Thread-safe in-memory store over a fixed list of tasks.

    Duplicate ids are rejected at construction so that notification ids
    ('overdue-<id>', 'deadline-<id>') stay unique.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._lock = RLock()
        items: List[Task] = []
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                raise TaskLoadError(f"Duplicate task id {task.id!r}")
            seen.add(task.id)
            items.append(task)
        self._items: Tuple[Task, ...] = tuple(items)
        self._by_id: dict[str, Task] = {t.id: t for t in self._items}

    def snapshot(self) -> Tuple[Task, ...]:
        with self._lock:
            return self._items

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            return self._by_id.get(task_id)


# PUBLIC_INTERFACE
def parse_tasks(records: Iterable[Mapping[str, Any]], source: str = "<records>") -> List[Task]:
    """
    Validate raw task records into Task models.

    Raises:
        TaskLoadError naming the source and the index of the first bad record.
    """
    tasks: List[Task] = []
    for index, raw in enumerate(records):
        try:
            tasks.append(Task.model_validate(raw))
        except ValidationError as e:
            raise TaskLoadError(f"Invalid task #{index} in {source}: {e}") from e
    return tasks


# PUBLIC_INTERFACE
def load_tasks_file(path: str) -> List[Task]:
    """
    Read a JSON file containing a list of task objects.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TaskLoadError(f"Cannot read tasks file {path}: {e}") from e
    if not isinstance(payload, list):
        raise TaskLoadError(f"Tasks file {path} must contain a JSON list of task objects")
    return parse_tasks(payload, source=path)


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_task_store() -> TaskStore:
    """
    Factory returning the process-wide task store.
    - DASHBOARD_TASKS_FILE set: tasks loaded once from that JSON file
    - otherwise: the built-in demo tasks
    """
    settings = get_settings()
    if settings.tasks_file:
        tasks = load_tasks_file(settings.tasks_file)
        source = settings.tasks_file
    else:
        tasks = parse_tasks(SEED_TASKS, source="seed")
        source = "seed"
    store = InMemoryTaskStore(tasks)
    logger.info("Loaded %d tasks from %s", len(tasks), source)
    return store
