"""
Filter and Sort State
Version: 1.0.0
Date: 2026-10-18

Purpose: Serializable value types describing what the Projects view shows:
the active filter criteria (FilterState) and the ordering (SortSpec).

The JSON shape matches what the browser client has always stored, e.g.::

    {"status": ["active"], "priority": [1, 2], "documentType": ["RFP"],
     "agency": "navy", "dueDateRange": "custom",
     "customDueDateStart": "2026-01-01", "customDueDateEnd": ""}
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .project_model import ProjectStatus


class DueDateRange(str, Enum):
    """Due-date windows offered by the filter panel."""
    NONE = "none"
    OVERDUE = "overdue"
    NEXT_7_DAYS = "next7days"
    NEXT_20_DAYS = "next20days"
    CUSTOM = "custom"


class SortKey(str, Enum):
    """Sortable project fields."""
    CREATED = "created"
    NAME = "name"
    DUE_DATE = "dueDate"
    TYPE = "type"
    STATUS = "status"
    OWNER = "owner"
    PROGRESS = "progress"
    HEALTH = "health"
    PRIORITY = "priority"
    TEAM_SIZE = "teamSize"
    AGENCY = "agency"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


# Nominal fields read naturally A->Z; everything else reads "most/latest first".
ASCENDING_SORT_KEYS = frozenset({
    SortKey.NAME, SortKey.TYPE, SortKey.OWNER, SortKey.AGENCY, SortKey.STATUS,
})


def default_order_for(key) -> SortOrder:
    """Order applied when the user switches to ``key``."""
    return SortOrder.ASC if SortKey(key) in ASCENDING_SORT_KEYS else SortOrder.DESC


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class FilterState(BaseModel):
    """Active filter criteria. Empty lists / strings impose no constraint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: List[ProjectStatus] = Field(default_factory=list, description="Allowed project statuses")
    priority: List[int] = Field(default_factory=list, description="Allowed priority levels (1 = highest)")
    document_type: List[str] = Field(default_factory=list, alias="documentType",
                                     description="Allowed document type codes, e.g. RFP")
    agency: str = Field(default="", description="Case-insensitive agency substring")
    due_date_range: DueDateRange = Field(default=DueDateRange.NONE, alias="dueDateRange")
    custom_start: Optional[date] = Field(default=None, alias="customDueDateStart")
    custom_end: Optional[date] = Field(default=None, alias="customDueDateEnd")

    @field_validator('due_date_range', mode='before')
    @classmethod
    def _empty_range_is_none(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return DueDateRange.NONE
        return v

    @field_validator('custom_start', 'custom_end', mode='before')
    @classmethod
    def _blank_dates(cls, v):
        return _blank_to_none(v)

    @field_validator('priority')
    @classmethod
    def _priority_range(cls, v: List[int]) -> List[int]:
        for level in v:
            if not 1 <= level <= 5:
                raise ValueError(f"Priority must be between 1 and 5, got {level}")
        return v

    @field_validator('agency', mode='before')
    @classmethod
    def _agency_text(cls, v):
        return "" if v is None else v

    @classmethod
    def from_dict(cls, data: dict) -> "FilterState":
        """Build from a stored/host dict, raising the engine ``ValidationError``."""
        try:
            return cls.model_validate(data or {})
        except PydanticValidationError as e:
            raise ValidationError("Invalid filter state", str(e)) from e

    def to_dict(self) -> dict:
        """Serialise to the stored JSON shape."""
        data = self.model_dump(mode="json", by_alias=True)
        data["dueDateRange"] = "" if self.due_date_range is DueDateRange.NONE else self.due_date_range.value
        data["customDueDateStart"] = data["customDueDateStart"] or ""
        data["customDueDateEnd"] = data["customDueDateEnd"] or ""
        return data

    def is_empty(self) -> bool:
        return self.active_filter_count() == 0

    def active_filter_count(self) -> int:
        """Number of active chips: one per selected value plus agency and due date."""
        return (
            len(self.status)
            + len(self.priority)
            + len(self.document_type)
            + (1 if self.agency else 0)
            + (1 if self.due_date_range is not DueDateRange.NONE else 0)
        )

    def changed(self, **updates) -> "FilterState":
        """Copy with ``updates`` applied and re-validated."""
        data = self.model_dump()
        data.update(updates)
        try:
            return FilterState.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError("Invalid filter update", str(e)) from e

    @classmethod
    def cleared(cls) -> "FilterState":
        return cls()


class SortSpec(BaseModel):
    """(key, order) pair selecting how filtered projects are ordered."""

    model_config = ConfigDict(frozen=True)

    key: SortKey = SortKey.CREATED
    order: SortOrder = SortOrder.DESC

    def toggle(self, key) -> "SortSpec":
        """
        Spec after the user picks ``key``: the same key flips the order, a new
        key starts at that key's default order.
        """
        try:
            new_key = SortKey(key)
        except ValueError:
            raise ValidationError("Unknown sort key", repr(key)) from None
        if new_key is self.key:
            return SortSpec(key=self.key, order=self.order.flipped())
        return SortSpec(key=new_key, order=default_order_for(new_key))

    def reversed(self) -> "SortSpec":
        return SortSpec(key=self.key, order=self.order.flipped())
