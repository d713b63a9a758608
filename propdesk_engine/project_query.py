"""
Project Query Engine
Version: 1.0.0
Date: 2026-10-18

Purpose: Filter, sort and summarise an in-memory project collection for the
Projects view.

Every function here is pure: inputs are never mutated and a new list is
returned, so the host can keep earlier snapshots for comparison or undo.
Recomputation is a single linear filter pass plus one stable sort, cheap
enough to rerun on each keystroke in the agency box.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Mapping, Optional

from .comparators import SortKeyFn, get_sort_key
from .filter_state import FilterState, SortKey, SortOrder, SortSpec
from .predicates import build_predicates
from .project_model import ProjectRecord
from .utils import get_logger

logger = get_logger(__name__)


def filter_projects(records: Iterable[ProjectRecord],
                    state: Optional[FilterState] = None,
                    today: Optional[date] = None) -> List[ProjectRecord]:
    """
    Keep records matching every active criterion of ``state``.

    Dimensions combine with AND, values inside one dimension with OR. An
    empty ``state`` keeps everything in input order.
    """
    state = state or FilterState()
    predicates = list(build_predicates(state, today or date.today()).values())
    if not predicates:
        return list(records)
    return [record for record in records if all(test(record) for test in predicates)]


def sort_projects(records: Iterable[ProjectRecord], spec: Optional[SortSpec] = None,
                  comparators: Optional[Mapping[SortKey, SortKeyFn]] = None) -> List[ProjectRecord]:
    """
    Order records by ``spec``. The sort is stable in both directions:
    records with equal keys keep their input order.

    ``comparators`` replaces sort-key functions for this call only.
    """
    spec = spec or SortSpec()
    key_fn = get_sort_key(spec.key, comparators)
    return sorted(records, key=key_fn, reverse=spec.order is SortOrder.DESC)


def filter_then_sort(records: Iterable[ProjectRecord],
                     state: Optional[FilterState] = None,
                     spec: Optional[SortSpec] = None,
                     today: Optional[date] = None,
                     comparators: Optional[Mapping[SortKey, SortKeyFn]] = None) -> List[ProjectRecord]:
    """Filter first, then sort the survivors."""
    filtered = filter_projects(records, state, today=today)
    result = sort_projects(filtered, spec, comparators)
    logger.debug(f"Project query kept {len(result)} record(s)")
    return result


@dataclass(frozen=True)
class QuerySummary:
    shown: int
    total: int
    active_filters: int

    @property
    def label(self) -> str:
        return f"{self.shown} of {self.total} projects shown"


@dataclass(frozen=True)
class ProjectQuery:
    """Filter + sort bundle the host holds in its view state."""
    state: FilterState = field(default_factory=FilterState)
    spec: SortSpec = field(default_factory=SortSpec)

    def run(self, records: Iterable[ProjectRecord], today: Optional[date] = None) -> List[ProjectRecord]:
        return filter_then_sort(records, self.state, self.spec, today=today)

    def summary(self, records: List[ProjectRecord], today: Optional[date] = None) -> QuerySummary:
        shown = len(filter_projects(records, self.state, today=today))
        return QuerySummary(shown=shown, total=len(records), active_filters=self.state.active_filter_count())

    def with_state(self, state: FilterState) -> "ProjectQuery":
        return ProjectQuery(state=state, spec=self.spec)

    def with_sort(self, key) -> "ProjectQuery":
        return ProjectQuery(state=self.state, spec=self.spec.toggle(key))

