"""
Roster - query engine and AI search for an employee allocation roster.

This package presents and manipulates personnel records (identity,
assignment, availability, skills, dates) and provides:

- A multi-field filter engine (skill sets, date ranges, substrings, exact values)
- Locale-aware single-field sorting and 1-based pagination
- A query orchestrator composing them into one deterministic pipeline
- A natural-language search client for a generative-text service
- A tiered recovery pipeline that turns free-form answers into validated records

The working set lives only in memory and is rebuilt from a static seed on
each run.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from roster.config import Settings, get_settings
from roster.domain.models import PersonnelRecord, QueryResult, QueryState, SortSpec
from roster.errors import (
    RecoveryError,
    RequestError,
    RosterError,
    ValidationEmpty,
)
from roster.query.orchestrator import count_by, execute, run_query
from roster.search.pipeline import SearchOutcome, SearchStatus
from roster.search.session import SearchSession
from roster.store import RecordStore
from roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "PersonnelRecord",
    "QueryResult",
    "QueryState",
    "SortSpec",
    "RecordStore",
    # Query
    "execute",
    "run_query",
    "count_by",
    # Search
    "SearchSession",
    "SearchOutcome",
    "SearchStatus",
    # Errors
    "RosterError",
    "RequestError",
    "RecoveryError",
    "ValidationEmpty",
    # Logging
    "configure_logging",
    "get_logger",
]
