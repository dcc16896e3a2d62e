"""
Validation of parsed search candidates.

Candidates arrive as loosely-typed dicts from an untrusted source. Each one
is checked against the required-field contract for its parse tier and, when
accepted, promoted to a `PersonnelRecord` with product defaults filling the
gaps. Candidates that fail the contract, or that cannot be promoted, are
counted as rejected. Lenient promotion resets malformed non-identity fields
to their defaults instead of rejecting the candidate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from pydantic import ValidationError

from roster.domain.models import FIELD_ALIASES, FIELD_NAMES, PersonnelRecord
from roster.utils.logging import get_logger

log = get_logger(__name__)

IDENTITY_FIELDS: Tuple[str, ...] = ("employeeCode", "name")
# Keys that must be present (null allowed) for a strictly parsed candidate.
STRICT_PRESENT_FIELDS: Tuple[str, ...] = ("employmentStatus", "functionGroup", "subFunction")


class ValidationMode(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class ValidationResult:
    records: List[PersonnelRecord] = field(default_factory=list)
    rejected_count: int = 0


def meets_contract(candidate: Any, mode: ValidationMode) -> bool:
    """Required-field check for one candidate."""
    if not isinstance(candidate, dict):
        return False
    if not all(candidate.get(key) for key in IDENTITY_FIELDS):
        return False
    if mode is ValidationMode.STRICT:
        return all(key in candidate for key in STRICT_PRESENT_FIELDS)
    return True


def _wire_key(key: str) -> str:
    name = FIELD_NAMES.get(key)
    return FIELD_ALIASES[name] if name else key


def promote(candidate: Mapping[str, Any], mode: ValidationMode) -> PersonnelRecord:
    """
    Build a record from an accepted candidate.

    In lenient mode, fields other than the identity pair that fail schema
    validation are dropped so the product defaults take their place, and the
    promotion is retried once.

    Raises
    ------
    ValidationError
        If promotion fails in strict mode, an identity field is malformed, or
        the retry fails as well.
    """
    try:
        return PersonnelRecord.with_defaults(candidate)
    except ValidationError as exc:
        if mode is ValidationMode.STRICT:
            raise
        malformed = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        if malformed.intersection(IDENTITY_FIELDS):
            raise
        log.info(
            "[VALIDATION] Resetting malformed fields to defaults",
            extra={
                "employee_code": str(candidate.get("employeeCode")),
                "fields": sorted(malformed),
            },
        )
    repaired: Dict[str, Any] = {
        key: value for key, value in candidate.items() if _wire_key(key) not in malformed
    }
    return PersonnelRecord.with_defaults(repaired)


def validate(candidates: Iterable[Any], mode: ValidationMode = ValidationMode.STRICT) -> ValidationResult:
    """
    Keep the candidates that satisfy the contract and promote them to records.

    Order of the accepted records follows the candidate order.
    """
    records: List[PersonnelRecord] = []
    rejected = 0
    for candidate in candidates:
        if not meets_contract(candidate, mode):
            rejected += 1
            continue
        try:
            records.append(promote(candidate, mode))
        except ValidationError as exc:
            rejected += 1
            log.warning(
                "[VALIDATION] Candidate could not be promoted to a record",
                extra={
                    "employee_code": str(candidate.get("employeeCode")),
                    "errors": exc.error_count(),
                },
            )
    if rejected:
        log.info(
            "[VALIDATION] Rejected candidates",
            extra={"mode": mode.value, "accepted": len(records), "rejected": rejected},
        )
    return ValidationResult(records=records, rejected_count=rejected)


__all__ = [
    "IDENTITY_FIELDS",
    "STRICT_PRESENT_FIELDS",
    "ValidationMode",
    "ValidationResult",
    "meets_contract",
    "promote",
    "validate",
]
