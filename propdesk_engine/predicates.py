# ## File: propdesk_engine/predicates.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: One boolean test per filter dimension. Only dimensions with an
#          active criterion produce a predicate; a record must pass all.

from datetime import date, timedelta
from typing import Callable, Dict, NamedTuple, Optional

from .filter_state import DueDateRange, FilterState
from .project_model import ProjectRecord

Predicate = Callable[[ProjectRecord], bool]


class DueWindow(NamedTuple):
    """Resolved due-date window. ``None`` bounds are open."""
    start: Optional[date]
    end: Optional[date]
    before: Optional[date] = None


def resolve_due_window(state: FilterState, today: date) -> Optional[DueWindow]:
    """
    Turn ``state.due_date_range`` into concrete bounds relative to ``today``.

    next7days / next20days are inclusive on both ends, overdue is strictly
    before today, custom is inclusive with either bound optional.
    """
    rng = state.due_date_range
    if rng is DueDateRange.NEXT_7_DAYS:
        return DueWindow(today, today + timedelta(days=7))
    if rng is DueDateRange.NEXT_20_DAYS:
        return DueWindow(today, today + timedelta(days=20))
    if rng is DueDateRange.OVERDUE:
        return DueWindow(None, None, before=today)
    if rng is DueDateRange.CUSTOM:
        return DueWindow(state.custom_start, state.custom_end)
    return None


def _in_window(due: date, window: DueWindow) -> bool:
    if window.before is not None and due >= window.before:
        return False
    if window.start is not None and due < window.start:
        return False
    if window.end is not None and due > window.end:
        return False
    return True


def build_predicates(state: FilterState, today: date) -> Dict[str, Predicate]:
    """Predicates for every non-empty dimension of ``state``, keyed by name."""
    predicates: Dict[str, Predicate] = {}

    if state.status:
        statuses = frozenset(state.status)
        predicates["status"] = lambda record: record.status in statuses

    if state.priority:
        levels = frozenset(state.priority)
        predicates["priority"] = lambda record: record.priority_level in levels

    if state.document_type:
        doc_types = frozenset(state.document_type)
        predicates["documentType"] = lambda record: record.document_type in doc_types

    if state.agency:
        needle = state.agency.lower()
        predicates["agency"] = lambda record: bool(record.agency) and needle in record.agency.lower()

    window = resolve_due_window(state, today)
    if window is not None:
        predicates["dueDate"] = lambda record: _in_window(record.due_date, window)

    return predicates
