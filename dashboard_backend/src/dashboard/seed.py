from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

# Demo tasks shown by the dashboard when no tasks file is configured.
SEED_TASKS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Подготовить отчет по продажам",
        "description": "Анализ продаж за Q4 2024",
        "status": "in_progress",
        "priority": "high",
        "assignee": "Иванов А.А.",
        "due_date": datetime(2025, 7, 30),
        "category": "Отчетность",
    },
    {
        "id": "2",
        "title": "Организовать встречу с клиентом",
        "description": "Обсуждение нового проекта",
        "status": "pending",
        "priority": "medium",
        "assignee": "Петрова М.В.",
        "due_date": datetime(2025, 7, 29),
        "category": "Встречи",
    },
    {
        "id": "3",
        "title": "Обновить базу данных",
        "description": "Миграция на новую версию",
        "status": "overdue",
        "priority": "high",
        "assignee": "Сидоров П.И.",
        "due_date": datetime(2025, 7, 25),
        "category": "IT",
    },
    {
        "id": "4",
        "title": "Провести аудит безопасности",
        "description": "Проверка системы безопасности",
        "status": "completed",
        "priority": "high",
        "assignee": "Козлов В.С.",
        "due_date": datetime(2025, 7, 20),
        "category": "Безопасность",
    },
    {
        "id": "5",
        "title": "Написать техническую документацию",
        "description": "Документация для нового API",
        "status": "pending",
        "priority": "low",
        "assignee": "Морозова Е.Н.",
        "due_date": datetime(2025, 8, 5),
        "category": "Документация",
    },
]
