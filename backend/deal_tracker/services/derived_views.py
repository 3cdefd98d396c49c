"""
Производные представления для интерфейса.

Чистые функции над списками записей: флаг просрочки, порядок отображения,
счетчики. Ничего не сохраняют, пересчитываются при каждом чтении.
Статусы сравниваются без учета регистра.
"""
from collections import Counter
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from deal_tracker.core.clock import today as current_date, utcnow
from deal_tracker.models.communication import Communication
from deal_tracker.models.document import Document
from deal_tracker.models.property_deal import PropertyDeal
from deal_tracker.models.task import Task, COMPLETED_STATUS


def normalize_status(status: str) -> str:
    return status.lower()


def is_completed(task: Task) -> bool:
    return normalize_status(task.status) == COMPLETED_STATUS


def is_overdue(task: Task, today: Optional[date] = None) -> bool:
    """Срок прошел (по календарной дате) и задача не выполнена"""
    today = today or current_date()
    due_date = task.due_date
    if isinstance(due_date, datetime):
        due_date = due_date.date()
    return due_date < today and not is_completed(task)


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Невыполненные раньше выполненных, внутри группы - по сроку"""
    return sorted(tasks, key=lambda t: (is_completed(t), t.due_date))


def sort_communications(communications: Iterable[Communication]) -> List[Communication]:
    """Сначала самые свежие"""
    return sorted(communications, key=lambda c: c.date, reverse=True)


def sort_documents(documents: Iterable[Document]) -> List[Document]:
    return sorted(documents, key=lambda d: d.upload_date, reverse=True)


def count_completed(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if is_completed(t))


def count_overdue(tasks: Iterable[Task], today: Optional[date] = None) -> int:
    today = today or current_date()
    return sum(1 for t in tasks if is_overdue(t, today))


def filter_by_status(deals: Iterable[PropertyDeal], status: str) -> List[PropertyDeal]:
    wanted = normalize_status(status)
    return [d for d in deals if normalize_status(d.status) == wanted]


def status_breakdown(deals: Iterable[PropertyDeal]) -> Dict[str, int]:
    """Количество сделок по статусу; ключ - статус в нижнем регистре"""
    return dict(Counter(normalize_status(d.status) for d in deals))


def count_created_this_month(deals: Iterable[PropertyDeal], now: Optional[datetime] = None) -> int:
    now = now or utcnow()
    return sum(
        1 for d in deals
        if d.created_at.year == now.year and d.created_at.month == now.month
    )
