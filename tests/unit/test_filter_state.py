"""
Unit Tests for FilterState and SortSpec
Purpose: Stored JSON shape, validation, and the sort-header toggle rule
"""

from datetime import date

import pytest

from propdesk_engine.exceptions import ValidationError
from propdesk_engine.filter_state import (
    DueDateRange,
    FilterState,
    SortKey,
    SortOrder,
    SortSpec,
    default_order_for,
)
from propdesk_engine.project_model import ProjectStatus


class TestFilterState:

    def test_default_is_empty(self):
        state = FilterState()
        assert state.is_empty()
        assert state.active_filter_count() == 0
        assert state.due_date_range is DueDateRange.NONE

    def test_to_dict_matches_stored_shape(self):
        state = FilterState(status=["active"], priority=[1, 2], agency="navy")
        assert state.to_dict() == {
            "status": ["active"],
            "priority": [1, 2],
            "documentType": [],
            "agency": "navy",
            "dueDateRange": "",
            "customDueDateStart": "",
            "customDueDateEnd": "",
        }

    def test_from_stored_dict(self):
        state = FilterState.from_dict({
            "status": ["draft", "submitted"],
            "priority": [],
            "documentType": ["SOW"],
            "agency": "",
            "dueDateRange": "custom",
            "customDueDateStart": "2026-01-01",
            "customDueDateEnd": "",
        })
        assert state.status == [ProjectStatus.DRAFT, ProjectStatus.SUBMITTED]
        assert state.document_type == ["SOW"]
        assert state.due_date_range is DueDateRange.CUSTOM
        assert state.custom_start == date(2026, 1, 1)
        assert state.custom_end is None

    def test_dict_round_trip(self):
        state = FilterState(due_date_range="custom", custom_start=date(2026, 4, 1),
                            document_type=["RFQ"])
        assert FilterState.from_dict(state.to_dict()) == state

    def test_missing_keys_default(self):
        assert FilterState.from_dict({"agency": "gsa"}) == FilterState(agency="gsa")
        assert FilterState.from_dict(None) == FilterState()

    @pytest.mark.parametrize("data", [
        {"status": ["archived"]},
        {"priority": [0]},
        {"priority": [6]},
        {"dueDateRange": "nextYear"},
        {"customDueDateStart": "not-a-date"},
    ])
    def test_invalid_values_raise(self, data):
        with pytest.raises(ValidationError):
            FilterState.from_dict(data)

    def test_active_filter_count(self):
        state = FilterState(status=["active", "draft"], priority=[1], agency="army",
                            due_date_range="overdue")
        assert state.active_filter_count() == 5
        assert not state.is_empty()

    def test_changed_returns_new_state(self):
        state = FilterState(status=["active"])
        updated = state.changed(agency="gsa")
        assert updated.agency == "gsa"
        assert state.agency == ""
        assert updated.status == state.status

    def test_changed_validates(self):
        with pytest.raises(ValidationError):
            FilterState().changed(priority=[9])

    def test_cleared(self):
        assert FilterState.cleared().is_empty()

    def test_is_frozen(self):
        with pytest.raises(Exception):
            FilterState().agency = "navy"


class TestSortSpec:

    def test_default(self):
        spec = SortSpec()
        assert spec.key is SortKey.CREATED
        assert spec.order is SortOrder.DESC

    @pytest.mark.parametrize("key", ["name", "type", "owner", "agency", "status"])
    def test_nominal_keys_start_ascending(self, key):
        assert SortSpec().toggle(key).order is SortOrder.ASC
        assert default_order_for(key) is SortOrder.ASC

    @pytest.mark.parametrize("key", ["dueDate", "progress", "health", "priority", "teamSize"])
    def test_other_keys_start_descending(self, key):
        assert SortSpec().toggle(key).order is SortOrder.DESC

    def test_same_key_flips(self):
        spec = SortSpec(key="name", order="asc")
        assert spec.toggle("name") == SortSpec(key="name", order="desc")
        assert spec.toggle("name").toggle("name") == spec

    def test_current_key_created_flips(self):
        assert SortSpec().toggle("created").order is SortOrder.ASC

    def test_unknown_key(self):
        with pytest.raises(ValidationError):
            SortSpec().toggle("budget")

    def test_reversed(self):
        assert SortSpec().reversed() == SortSpec(key="created", order="asc")
