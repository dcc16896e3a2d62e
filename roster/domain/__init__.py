"""
Domain package for the roster query engine.

Exports the personnel record schema and the immutable query-state values used
across the store, the query engine and the search pipeline. Keep this package
focused on data definitions and validation concerns.
"""

from roster.domain.models import (
    PersonnelRecord,
    QueryResult,
    QueryState,
    SortSpec,
    canonical_field,
    field_value,
)

__all__ = [
    "PersonnelRecord",
    "QueryResult",
    "QueryState",
    "SortSpec",
    "canonical_field",
    "field_value",
]
