# ## File: propdesk_engine/comparators.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Read-only registry mapping each sortable field to a sort-key function.

from typing import Any, Callable, Dict, Mapping, Optional

from .exceptions import NotFoundError
from .filter_state import SortKey
from .project_model import HealthStatus, ProjectRecord

SortKeyFn = Callable[[ProjectRecord], Any]

# green < yellow < red; anything unrecognised sorts after red
HEALTH_ORDER = {
    HealthStatus.GREEN: 1,
    HealthStatus.YELLOW: 2,
    HealthStatus.RED: 3,
}
UNKNOWN_HEALTH_RANK = 4


def _health_rank(record: ProjectRecord) -> int:
    return HEALTH_ORDER.get(record.health_status, UNKNOWN_HEALTH_RANK)


COMPARATORS: Dict[SortKey, SortKeyFn] = {
    SortKey.CREATED: lambda r: r.created_at.timestamp(),
    SortKey.NAME: lambda r: r.title.lower(),
    SortKey.DUE_DATE: lambda r: r.due_date,
    SortKey.TYPE: lambda r: r.document_type.lower(),
    SortKey.STATUS: lambda r: r.status.value,
    SortKey.OWNER: lambda r: r.owner.name.lower(),
    SortKey.PROGRESS: lambda r: r.progress_percentage,
    SortKey.HEALTH: _health_rank,
    SortKey.PRIORITY: lambda r: r.priority_level,
    SortKey.TEAM_SIZE: lambda r: r.team_size,
    SortKey.AGENCY: lambda r: (r.agency or "").lower(),
}


def get_sort_key(key, comparators: Optional[Mapping[SortKey, SortKeyFn]] = None) -> SortKeyFn:
    """
    Sort-key function for ``key``.

    ``comparators`` overrides entries of the built-in registry for this
    lookup only; the registry itself is never modified.
    """
    registry = {**COMPARATORS, **comparators} if comparators else COMPARATORS
    try:
        return registry[SortKey(key)]
    except (KeyError, ValueError):
        raise NotFoundError("No comparator registered for sort key", repr(key)) from None
