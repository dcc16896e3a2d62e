"""
Exception taxonomy for the roster query engine and the AI search pipeline.

Query-side errors signal caller mistakes (unknown fields, malformed range
tokens, store identity violations). Search-side errors mark the terminal
states of one search invocation and are converted into user-facing outcomes
by `roster.search.session.SearchSession`.
"""

from __future__ import annotations

from typing import Any, List, Optional


class RosterError(Exception):
    """Base class for every error raised by this package."""


class UnknownFieldError(RosterError, ValueError):
    """A filter or sort referenced a field the personnel record does not have."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown personnel record field '{field}'")
        self.field = field


class InvalidFilterError(RosterError, ValueError):
    """A filter criterion could not be interpreted (e.g. a bad date range token)."""


class DuplicateRecordError(RosterError):
    """A record with the same id already exists in the store."""


class RecordNotFoundError(RosterError, KeyError):
    """No record with the requested id exists in the store."""


class RequestError(RosterError):
    """
    The search service call failed: transport error, non-2xx status, or an
    envelope without the expected answer text.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecoveryError(RosterError):
    """The service answer could not be parsed, even after the lenient repair pass."""


class ValidationEmpty(RosterError):
    """Parsing produced candidates but none satisfied the required-field contract."""

    def __init__(self, candidates: List[Any]) -> None:
        super().__init__(f"Response missing required fields ({len(candidates)} candidates rejected)")
        self.candidates = candidates


class SearchInProgressError(RosterError):
    """A search was requested while another one is still in flight."""


class EmptyQueryError(RosterError, ValueError):
    """The natural-language query was blank."""


__all__ = [
    "RosterError",
    "UnknownFieldError",
    "InvalidFilterError",
    "DuplicateRecordError",
    "RecordNotFoundError",
    "RequestError",
    "RecoveryError",
    "ValidationEmpty",
    "SearchInProgressError",
    "EmptyQueryError",
]
