"""
Query engine package for the roster.

Re-exports the filter, sort and pagination building blocks and the
orchestrator so downstream code can import from `roster.query` directly.
"""

from roster.query.filters import apply_filters, apply_search, distinct_values
from roster.query.matchers import (
    AbstractFieldMatcher,
    DateRangeMatcher,
    ExactMatcher,
    FieldMatcher,
    SkillSetMatcher,
    SubstringMatcher,
    matcher_for,
)
from roster.query.orchestrator import count_by, execute, run_query
from roster.query.pagination import page_count, paginate
from roster.query.sorting import compare_values, sort_records

__all__ = [
    # Matchers
    "AbstractFieldMatcher",
    "FieldMatcher",
    "DateRangeMatcher",
    "ExactMatcher",
    "SkillSetMatcher",
    "SubstringMatcher",
    "matcher_for",
    # Engines
    "apply_filters",
    "apply_search",
    "distinct_values",
    "compare_values",
    "sort_records",
    "page_count",
    "paginate",
    # Orchestration
    "count_by",
    "execute",
    "run_query",
]
