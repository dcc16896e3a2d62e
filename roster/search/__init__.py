"""
AI search package for the roster.

Builds the natural-language search request, calls the generative-text
service, recovers structured candidates from its free-form answer and
validates them into personnel records.
"""

from roster.search.client import SearchClient
from roster.search.pipeline import SearchOutcome, SearchStatus, interpret_response
from roster.search.prompt import TEMPLATE_VERSION, build_prompt, build_request_body
from roster.search.recovery import ParseTier, RecoveryResult, recover
from roster.search.session import SearchSession, SessionState
from roster.search.validator import ValidationMode, ValidationResult, validate

__all__ = [
    "SearchClient",
    "SearchOutcome",
    "SearchStatus",
    "interpret_response",
    "TEMPLATE_VERSION",
    "build_prompt",
    "build_request_body",
    "ParseTier",
    "RecoveryResult",
    "recover",
    "SearchSession",
    "SessionState",
    "ValidationMode",
    "ValidationResult",
    "validate",
]
