"""
Query orchestrator for the roster table.

Composes the filter engine, the free-text search, the sort engine and the
paginator into one deterministic pipeline:

    per-field filters -> free-text term -> sort -> page

Usage:
    from roster.query.orchestrator import execute

    result = execute(store.snapshot(), {"location": {"India – Mumbai"}}, "GEP01",
                     SortSpec(key="name"), page=1, page_size=10)
    print(result.summary())

The pipeline is pure and synchronous; callers own the "reset to page 1 when a
filter or the search term changes" rule, which `QueryState` encodes.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Optional

from roster.domain.models import (
    PersonnelRecord,
    QueryResult,
    QueryState,
    SortSpec,
    canonical_field,
    field_value,
)
from roster.query.filters import FilterMapping, apply_filters, apply_search
from roster.query.pagination import page_count, paginate
from roster.query.sorting import sort_records
from roster.utils.logging import get_logger

log = get_logger(__name__)


def execute(
    records: Iterable[PersonnelRecord],
    filters: Optional[FilterMapping] = None,
    search_term: str = "",
    sort: Optional[SortSpec] = None,
    page: int = 1,
    page_size: int = 10,
) -> QueryResult:
    """
    Run the full query pipeline over a snapshot of `records`.

    Parameters
    ----------
    records : iterable[PersonnelRecord]
        Collection to query; it is copied before any processing.
    filters : mapping | None
        Field -> accepted values. Empty sets mean "no constraint".
    search_term : str
        Free-text term matched against name or employee code.
    sort : SortSpec | None
        Active sort; None or an empty key keeps collection order.
    page : int
        1-based page index. Pages past the end return no records.
    page_size : int
        Records per page (> 0).

    Returns
    -------
    QueryResult
        The requested page plus post-filter total, collection total and page count.
    """
    snapshot = list(records)
    matched = apply_filters(snapshot, filters or {})
    matched = apply_search(matched, search_term)
    ordered = sort_records(matched, sort or SortSpec())

    total = len(ordered)
    result = QueryResult(
        records=tuple(paginate(ordered, page, page_size)),
        total=total,
        total_records=len(snapshot),
        page=page,
        page_size=page_size,
        page_count=page_count(total, page_size),
    )
    log.debug(
        "[QUERY] Executed",
        extra={
            "filters": sorted(field for field, values in (filters or {}).items() if values),
            "search_term": search_term,
            "sort_key": (sort.key if sort else ""),
            "page": page,
            "total": total,
        },
    )
    return result


def run_query(records: Iterable[PersonnelRecord], state: QueryState) -> QueryResult:
    """Execute the pipeline for an immutable `QueryState`."""
    return execute(
        records,
        filters=state.filters,
        search_term=state.search_term,
        sort=state.sort,
        page=state.page,
        page_size=state.page_size,
    )


def count_by(records: Iterable[PersonnelRecord], field: str) -> Dict[str, int]:
    """
    Distribution of a field's values, most common first.

    Skills are counted once per skill; empty values are reported as "Unassigned".
    """
    field = canonical_field(field)
    counts: Counter[str] = Counter()
    for record in records:
        value = field_value(record, field)
        if isinstance(value, tuple):
            counts.update(value or ("Unassigned",))
        else:
            counts[str(value) if value != "" else "Unassigned"] += 1
    return dict(counts.most_common())


__all__ = ["execute", "run_query", "count_by"]
