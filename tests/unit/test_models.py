from __future__ import annotations

import pytest
from pydantic import ValidationError

from roster.domain.models import (
    PersonnelRecord,
    QueryResult,
    QueryState,
    SortSpec,
    canonical_field,
    field_value,
)
from roster.errors import UnknownFieldError


def _record(**overrides) -> PersonnelRecord:
    data = {"employeeCode": "GEP900", "name": "Test Person"}
    data.update(overrides)
    return PersonnelRecord.with_defaults(data)


class TestPersonnelRecord:
    def test_with_defaults_fills_missing_fields(self):
        record = _record()
        assert record.id == "GEP900"
        assert record.function_group == "Consulting"
        assert record.sub_function == "Global Delivery"
        assert record.availability_90_days == 100
        assert record.skillset == ()

    def test_with_defaults_treats_none_as_absent_and_ignores_unknown_keys(self):
        record = _record(region=None, favouriteColour="blue", id="x-1")
        assert record.region == "APAC"
        assert record.id == "x-1"

    def test_with_defaults_uses_legacy_function_for_function_group(self):
        assert _record(function="KS").function_group == "KS"
        assert _record(function="KS", functionGroup="P-ops").function_group == "P-ops"

    def test_with_defaults_stringifies_numeric_identifiers(self):
        record = _record(employeeCode=901, id=7)
        assert record.employee_code == "901"
        assert record.id == "7"

    def test_skillset_accepts_a_single_string(self):
        assert _record(skillset="SAP").skillset == ("SAP",)
        assert _record(skillset=["SAP", "Power BI"]).skillset == ("SAP", "Power BI")

    def test_availability_outside_percent_range_is_rejected(self):
        with pytest.raises(ValidationError):
            _record(currentAvailability=150)

    def test_records_are_frozen(self):
        record = _record()
        with pytest.raises(ValidationError):
            record.name = "Someone Else"

    def test_to_wire_uses_camel_case_keys(self):
        wire = _record(skillset=["SAP"]).to_wire()
        assert wire["employeeCode"] == "GEP900"
        assert wire["availability30Days"] == 0
        assert wire["skillset"] == ["SAP"]
        assert "employee_code" not in wire


class TestFieldAccess:
    def test_canonical_field_accepts_alias_or_attribute(self):
        assert canonical_field("employee_code") == "employeeCode"
        assert canonical_field("employeeCode") == "employeeCode"
        assert canonical_field("location") == "location"

    def test_unknown_field_raises(self):
        with pytest.raises(UnknownFieldError) as excinfo:
            canonical_field("salary")
        assert excinfo.value.field == "salary"
        with pytest.raises(UnknownFieldError):
            field_value(_record(), "salary")

    def test_field_value_reads_by_alias(self):
        assert field_value(_record(), "availability60Days") == 50


class TestSortSpec:
    def test_toggle_cycles_asc_desc_asc(self):
        order = SortSpec()
        order = order.toggle("name")
        assert (order.key, order.direction) == ("name", "asc")
        order = order.toggle("name")
        assert (order.key, order.direction) == ("name", "desc")
        order = order.toggle("name")
        assert (order.key, order.direction) == ("name", "asc")

    def test_toggle_other_field_starts_ascending(self):
        order = SortSpec(key="name", direction="desc").toggle("location")
        assert (order.key, order.direction) == ("location", "asc")

    def test_toggle_normalizes_attribute_names(self):
        assert SortSpec().toggle("employee_code").key == "employeeCode"


class TestQueryState:
    def test_filter_change_resets_page(self):
        state = QueryState().with_page(3).with_filter("location", {"India – Mumbai"})
        assert state.page == 1
        assert state.filters == {"location": frozenset({"India – Mumbai"})}

    def test_empty_filter_clears_field(self):
        state = QueryState().with_filter("location", {"India – Mumbai"}).with_filter("location", [])
        assert state.filters == {}

    def test_search_and_page_size_reset_page(self):
        assert QueryState().with_page(4).with_search("GEP").page == 1
        state = QueryState().with_page(4).with_page_size(20)
        assert (state.page, state.page_size) == (1, 20)

    def test_sort_keeps_page(self):
        state = QueryState().with_page(2).toggle_sort("name")
        assert state.page == 2
        assert state.sort == SortSpec(key="name", direction="asc")

    def test_transitions_return_new_values(self):
        original = QueryState()
        changed = original.with_search("x")
        assert original.search_term == ""
        assert changed is not original

    def test_filters_cannot_be_mutated_in_place(self):
        state = QueryState().with_filter("location", {"India – Mumbai"})
        with pytest.raises(TypeError):
            state.filters["skillset"] = frozenset({"SAP"})
        with pytest.raises(TypeError):
            QueryState(filters={"location": {"India – Mumbai"}}).filters["location"] = frozenset()
        assert dict(state.filters) == {"location": frozenset({"India – Mumbai"})}

    def test_filters_passed_at_construction_are_copied(self):
        source = {"location": frozenset({"India – Mumbai"})}
        state = QueryState(filters=source)
        source["skillset"] = frozenset({"SAP"})
        assert "skillset" not in state.filters

    def test_invalid_page_and_size_are_rejected(self):
        with pytest.raises(ValueError):
            QueryState().with_page(0)
        with pytest.raises(ValueError):
            QueryState().with_page_size(0)


class TestQueryResult:
    def test_summary_mentions_unfiltered_total_only_when_filtered(self):
        unfiltered = QueryResult(records=(), total=50, total_records=50, page=6, page_size=10, page_count=5)
        filtered = QueryResult(records=(), total=4, total_records=50, page=1, page_size=10, page_count=1)
        assert unfiltered.summary() == "Showing 0 of 50 employees"
        assert filtered.summary() == "Showing 0 of 4 employees (filtered from 50 total)"
