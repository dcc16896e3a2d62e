"""
Filter engine for the roster.

Applies a mapping of field -> accepted values to a record sequence. Criteria
compose conjunctively; absent or empty criteria are ignored. Output keeps the
input order, which makes filtering idempotent and leaves ordering to the sort
engine.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

from roster.domain.models import PersonnelRecord, canonical_field, field_value
from roster.query.matchers import matcher_for

FilterMapping = Mapping[str, Iterable[str]]


def apply_filters(records: Sequence[PersonnelRecord], filters: FilterMapping) -> List[PersonnelRecord]:
    """
    Return the records matching every non-empty criterion.

    Raises
    ------
    UnknownFieldError
        If a criterion names a field the record model does not have.
    InvalidFilterError
        If a date criterion carries a malformed range token.
    """
    predicates = []
    for field, values in filters.items():
        accepted = frozenset(values or ())
        if not accepted:
            continue
        matcher = matcher_for(field, accepted)
        predicates.append((canonical_field(field), matcher.build(accepted)))

    if not predicates:
        return list(records)

    return [
        record
        for record in records
        if all(predicate(field_value(record, field)) for field, predicate in predicates)
    ]


def apply_search(records: Sequence[PersonnelRecord], term: str) -> List[PersonnelRecord]:
    """Case-insensitive substring match on name or employee code."""
    if not term:
        return list(records)
    needle = term.lower()
    return [
        record
        for record in records
        if needle in record.name.lower() or needle in record.employee_code.lower()
    ]


def distinct_values(records: Iterable[PersonnelRecord], field: str) -> List[str]:
    """
    Sorted distinct option values of a field, as offered by a checkbox filter.

    Skills are flattened into individual options; empty values are dropped.
    """
    field = canonical_field(field)
    values = set()
    for record in records:
        value = field_value(record, field)
        if field == "skillset":
            values.update(skill for skill in value if skill)
            continue
        text = ", ".join(value) if isinstance(value, tuple) else str(value)
        if text:
            values.add(text)
    return sorted(values)


__all__ = ["FilterMapping", "apply_filters", "apply_search", "distinct_values"]
