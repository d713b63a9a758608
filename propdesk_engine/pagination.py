# ## File: propdesk_engine/pagination.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Page slicing for the archived-projects list. Navigation flags are
#          derived from the total count and current page, never stored.

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from .config import ARCHIVE_DEFAULT_DAYS, ARCHIVE_MAX_PAGE_SIZE, ARCHIVE_PAGE_SIZE
from .exceptions import ValidationError

T = TypeVar("T")


def _check_page(page: int) -> int:
    if not isinstance(page, int) or isinstance(page, bool) or page < 1:
        raise ValidationError("Page must be a positive integer", repr(page))
    return page


def effective_limit(limit: Optional[int] = None) -> int:
    """Requested page size, defaulted and capped at the maximum."""
    if limit is None:
        limit = ARCHIVE_PAGE_SIZE
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        raise ValidationError("Page size must be a positive integer", repr(limit))
    return min(limit, ARCHIVE_MAX_PAGE_SIZE)


@dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total_count

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_dict(self) -> dict:
        """Same field names as the archived-projects API pagination block."""
        return {
            "page": self.page,
            "limit": self.limit,
            "totalCount": self.total_count,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    info: PageInfo


def paginate(records: Sequence[T], page: int = 1, limit: Optional[int] = None) -> Page:
    """
    Slice ``records`` to one page.

    A page past the end yields no items; ``has_prev`` stays true so the host
    can step back.
    """
    page = _check_page(page)
    limit = effective_limit(limit)
    records = list(records)
    info = PageInfo(page=page, limit=limit, total_count=len(records))
    return Page(items=records[info.offset:info.offset + limit], info=info)


def filter_archived(records: Iterable[T], days: int, now: Optional[datetime] = None,
                    archived_at: Callable[[T], Optional[datetime]] = None) -> List[T]:
    """
    Keep records archived within the last ``days`` days.

    ``archived_at`` extracts the archive timestamp; by default the
    ``archived_at`` attribute or mapping key. Records without one are dropped.
    """
    if not isinstance(days, int) or isinstance(days, bool) or days < 1:
        raise ValidationError("Days must be a positive number", repr(days))
    now = now or datetime.now()
    cutoff = now - timedelta(days=days)
    getter = archived_at or _default_archived_at

    kept = []
    for record in records:
        stamp = getter(record)
        # timestamp() so naive and offset-aware values compare
        if stamp is not None and stamp.timestamp() >= cutoff.timestamp():
            kept.append(record)
    return kept


def _default_archived_at(record: Any) -> Optional[datetime]:
    if isinstance(record, dict):
        value = record.get("archived_at")
    else:
        value = getattr(record, "archived_at", None)
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


@dataclass(frozen=True)
class ArchiveView:
    """Archived-list view state: the look-back window and the current page."""
    days: int = ARCHIVE_DEFAULT_DAYS
    page: int = 1
    limit: int = ARCHIVE_PAGE_SIZE

    def __post_init__(self):
        if not isinstance(self.days, int) or self.days < 1:
            raise ValidationError("Days must be a positive number", repr(self.days))
        _check_page(self.page)
        effective_limit(self.limit)

    def with_days(self, days: int) -> "ArchiveView":
        """Changing the window always returns to page 1."""
        return replace(self, days=days, page=1)

    def go_to(self, page: int) -> "ArchiveView":
        return replace(self, page=page)

    def next_page(self, total_count: int) -> "ArchiveView":
        info = PageInfo(self.page, effective_limit(self.limit), total_count)
        return replace(self, page=self.page + 1) if info.has_next else self

    def prev_page(self) -> "ArchiveView":
        return replace(self, page=self.page - 1) if self.page > 1 else self

    def query_params(self) -> dict:
        """Query string values for ``GET /api/projects/archived``."""
        return {"days": self.days, "page": self.page, "limit": effective_limit(self.limit)}

    def apply(self, records: Sequence[T], now: Optional[datetime] = None,
              archived_at: Callable[[T], Optional[datetime]] = None) -> Page:
        """Window then paginate an already-loaded archive list."""
        windowed = filter_archived(records, self.days, now=now, archived_at=archived_at)
        return paginate(windowed, self.page, self.limit)
