"""
Interpretation of one raw search answer into a typed outcome.

Strict path first: tiers 1-3 plus strict validation. When the strict parse
fails, or yields candidates of which none pass strict validation, the answer
escalates once to the lenient tier with relaxed validation. An empty array
from the service is a legitimate "no matches", never an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from roster.domain.models import PersonnelRecord
from roster.errors import RecoveryError, ValidationEmpty
from roster.query.pagination import page_count, paginate
from roster.search.recovery import ParseTier, parse_lenient, parse_strict, prepare_payload
from roster.search.validator import ValidationMode, validate
from roster.utils.logging import get_logger

log = get_logger(__name__)

RECOVERY_ADVICE = (
    "Could not parse results from the AI response. "
    "Try simplifying your query or be more specific."
)


class SearchStatus(str, Enum):
    SUCCESS = "success"
    RECOVERED = "recovered"
    SERVICE_EMPTY = "service_empty"
    VALIDATION_EMPTY = "validation_empty"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchOutcome:
    """
    Terminal result of one search invocation.

    `message` is ready to show to the user; `error` names the failure kind
    ("request" or "recovery") for FAILED outcomes.
    """

    status: SearchStatus
    records: List[PersonnelRecord] = field(default_factory=list)
    rejected_count: int = 0
    message: str = ""
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def tier(self) -> Optional[ParseTier]:
        if self.status is SearchStatus.SUCCESS:
            return ParseTier.SUCCESS
        if self.status is SearchStatus.RECOVERED:
            return ParseTier.RECOVERED
        return None

    def page(self, page: int, page_size: int) -> List[PersonnelRecord]:
        return paginate(self.records, page, page_size)

    def page_count(self, page_size: int) -> int:
        return page_count(len(self.records), page_size)


def _found(status: SearchStatus, records: List[PersonnelRecord], rejected: int) -> SearchOutcome:
    message = f"Found {len(records)} matching employees"
    if status is SearchStatus.RECOVERED:
        message += " after fixing JSON"
    return SearchOutcome(status=status, records=records, rejected_count=rejected, message=message)


def service_empty() -> SearchOutcome:
    return SearchOutcome(
        status=SearchStatus.SERVICE_EMPTY,
        message="No matching results. Try a different search query.",
    )


def validation_empty(rejected: int) -> SearchOutcome:
    return SearchOutcome(
        status=SearchStatus.VALIDATION_EMPTY,
        rejected_count=rejected,
        message=(
            "The AI response could not be confirmed as valid employee records. "
            "Try a different search query."
        ),
    )


def failed(kind: str, message: str) -> SearchOutcome:
    return SearchOutcome(status=SearchStatus.FAILED, message=message, error=kind)


def _interpret_strict(payload: str) -> SearchOutcome:
    """
    Tiers 3 + strict validation.

    Raises
    ------
    ValueError
        If the payload does not parse strictly.
    ValidationEmpty
        If candidates were parsed but none pass strict validation.
    """
    candidates = parse_strict(payload)
    if not candidates:
        return service_empty()
    result = validate(candidates, ValidationMode.STRICT)
    if not result.records:
        raise ValidationEmpty(candidates)
    return _found(SearchStatus.SUCCESS, result.records, result.rejected_count)


def interpret_response(raw_text: str) -> SearchOutcome:
    """
    Turn the service's raw answer into a `SearchOutcome`.

    When the escalation was caused by validation and the textual repair breaks
    an already valid JSON payload (e.g. an apostrophe inside a value), the
    strictly parsed candidates go through lenient validation instead.

    Raises
    ------
    RecoveryError
        If the lenient tier cannot parse the payload either.
    """
    payload = prepare_payload(raw_text)
    strict_candidates: Optional[List[Any]] = None
    try:
        return _interpret_strict(payload)
    except ValidationEmpty as exc:
        strict_candidates = exc.candidates
        log.info(
            "[SEARCH ESCALATE] Strict validation rejected every candidate",
            extra={"candidates": len(exc.candidates)},
        )
    except ValueError as exc:
        log.info("[SEARCH ESCALATE] Strict parse failed", extra={"error": str(exc)})

    try:
        candidates = parse_lenient(payload)
    except RecoveryError:
        if strict_candidates is None:
            raise
        candidates = strict_candidates
    if not candidates:
        return service_empty()
    result = validate(candidates, ValidationMode.LENIENT)
    if not result.records:
        return validation_empty(result.rejected_count)
    log.info("[SEARCH RECOVERED] Lenient repair produced records", extra={"count": len(result.records)})
    return _found(SearchStatus.RECOVERED, result.records, result.rejected_count)


__all__ = [
    "RECOVERY_ADVICE",
    "SearchStatus",
    "SearchOutcome",
    "interpret_response",
    "service_empty",
    "validation_empty",
    "failed",
]
