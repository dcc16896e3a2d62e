from __future__ import annotations

import pytest

from roster.domain.models import PersonnelRecord, SortSpec
from roster.errors import UnknownFieldError
from roster.query.sorting import compare_values, sort_records


def _person(code: str, name: str, availability: int = 0) -> PersonnelRecord:
    return PersonnelRecord.with_defaults(
        {"employeeCode": code, "name": name, "currentAvailability": availability}
    )


@pytest.fixture()
def people():
    return [
        _person("B1", "Meera", 50),
        _person("B2", "Arjun", 100),
        _person("B3", "Ravi", 50),
        _person("B4", "Divya", 0),
    ]


def _codes(records):
    return [record.employee_code for record in records]


def test_compare_values_handles_each_type_pairing():
    assert compare_values(1, 2) < 0
    assert compare_values(2.5, 1) > 0
    assert compare_values(3, 3) == 0
    assert compare_values("a", "b") < 0
    assert compare_values("b", "a") > 0
    assert compare_values("a", 1) == 0
    assert compare_values(None, "a") == 0
    assert compare_values(True, 1) == 0


def test_empty_key_keeps_order(people):
    assert _codes(sort_records(people, SortSpec())) == ["B1", "B2", "B3", "B4"]


def test_sort_by_name_ascending_and_descending(people):
    assert _codes(sort_records(people, SortSpec(key="name"))) == ["B2", "B4", "B1", "B3"]
    assert _codes(sort_records(people, SortSpec(key="name", direction="desc"))) == ["B3", "B1", "B4", "B2"]


def test_numeric_sort_is_stable_in_both_directions(people):
    ascending = sort_records(people, SortSpec(key="currentAvailability"))
    descending = sort_records(people, SortSpec(key="currentAvailability", direction="desc"))
    assert _codes(ascending) == ["B4", "B1", "B3", "B2"]
    # Ties keep their input order rather than being reversed.
    assert _codes(descending) == ["B2", "B1", "B3", "B4"]


def test_sort_returns_new_list(people):
    ordered = sort_records(people, SortSpec(key="name"))
    assert ordered is not people
    assert _codes(people) == ["B1", "B2", "B3", "B4"]


def test_unknown_sort_field_raises(people):
    with pytest.raises(UnknownFieldError):
        sort_records(people, SortSpec(key="salary"))


def test_skillset_tuples_compare_equal(records):
    assert sort_records(records, SortSpec(key="skillset")) == records


def test_mixed_case_and_accented_names_sort_alphabetically():
    mixed = [_person(f"C{n}", name) for n, name in enumerate(["bob", "Alice", "Carol", "émile"])]

    ordered = sort_records(mixed, SortSpec(key="name"))

    assert [record.name for record in ordered] == ["Alice", "bob", "Carol", "émile"]


def test_case_only_differences_still_order_deterministically():
    assert compare_values("alice", "Alice") != 0
    assert compare_values("alice", "alice") == 0
