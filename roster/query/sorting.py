"""
Sort engine for the roster.

Orders records by a single field. Strings compare case-insensitively under
the active locale's collation (ties broken case-sensitively), numbers
numerically, and any other pairing (mixed or missing types) compares equal so
the sort never fails on untrusted data. Python's sort is stable, so records
with equal keys keep their relative order.

The CLI switches LC_COLLATE to the user's locale at startup; library callers
own that choice.
"""

from __future__ import annotations

import locale
from functools import cmp_to_key
from numbers import Number
from typing import Any, List, Sequence

from roster.domain.models import PersonnelRecord, SortSpec, canonical_field, field_value


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison used by the sort engine."""
    if isinstance(left, str) and isinstance(right, str):
        return locale.strcoll(left.casefold(), right.casefold()) or locale.strcoll(left, right)
    if _is_number(left) and _is_number(right):
        difference = left - right
        return (difference > 0) - (difference < 0)
    return 0


def sort_records(records: Sequence[PersonnelRecord], sort: SortSpec) -> List[PersonnelRecord]:
    """
    Return a new list ordered by `sort`; an empty key leaves the order unchanged.

    Descending order negates the comparator rather than reversing the output,
    so ties keep their original order in both directions.
    """
    if not sort.key:
        return list(records)

    field = canonical_field(sort.key)
    sign = 1 if sort.direction == "asc" else -1

    def compare(left: PersonnelRecord, right: PersonnelRecord) -> int:
        return sign * compare_values(field_value(left, field), field_value(right, field))

    return sorted(records, key=cmp_to_key(compare))


__all__ = ["compare_values", "sort_records"]
