"""
Recovery of structured candidates from the search service's free-form answer.

The answer is not guaranteed to be well-formed JSON. Tiers run in order, each
more permissive than the last:

1. strip code-fence wrappers (with or without a language tag) and trim;
2. isolate the payload: the first `[ { ... } ]` array, else the first
   `{ ... }` object, else the whole text;
3. strict JSON parse (a bare object becomes a one-element list);
4. lenient repair: quote bare keys, turn single quotes into double quotes,
   parse once more. Failure here is terminal (`RecoveryError`).

The tier-4 repair is two regular expressions and nothing more; it is not a
general JSON5 parser.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from roster.errors import RecoveryError
from roster.utils.logging import get_logger

log = get_logger(__name__)

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
_FENCED_ANY = re.compile(r"```\s*([\s\S]*?)\s*```")
_ARRAY_OF_OBJECTS = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")
_OBJECT = re.compile(r"\{[\s\S]*\}")
_BARE_KEY = re.compile(r"(\w+)(?=:)")

RECOVERY_FAILED_MESSAGE = "could not parse results"


class ParseTier(str, Enum):
    SUCCESS = "success"
    RECOVERED = "recovered"


@dataclass(frozen=True)
class RecoveryResult:
    """Parsed candidates plus the tier that produced them."""

    tier: ParseTier
    candidates: List[Any] = field(default_factory=list)


def strip_wrappers(text: str) -> str:
    """Tier 1: drop ```json / ``` fences around the payload and trim."""
    cleaned = _FENCED_JSON.sub(r"\1", text)
    cleaned = _FENCED_ANY.sub(r"\1", cleaned)
    return cleaned.strip()


def isolate_payload(text: str) -> str:
    """Tier 2: locate the JSON-looking payload inside surrounding prose."""
    match = _ARRAY_OF_OBJECTS.search(text) or _OBJECT.search(text)
    return match.group(0) if match else text


def _as_candidate_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    raise ValueError("Response is not an object or array")


def parse_strict(payload: str) -> List[Any]:
    """
    Tier 3: standard JSON parse.

    Raises
    ------
    ValueError
        If the payload is not JSON or decodes to a scalar
        (`json.JSONDecodeError` is a `ValueError`).
    """
    return _as_candidate_list(json.loads(payload))


def repair_json(payload: str) -> str:
    """Tier 4 text surgery: quote bare keys, then single quotes -> double quotes."""
    return _BARE_KEY.sub(r'"\1"', payload).replace("'", '"')


def parse_lenient(payload: str) -> List[Any]:
    """
    Tier 4: repair and parse once.

    Raises
    ------
    RecoveryError
        If the repaired text still does not parse into an object or array.
    """
    repaired = repair_json(payload)
    try:
        return _as_candidate_list(json.loads(repaired))
    except ValueError as exc:
        log.warning(
            "[RECOVERY FAILED] Lenient repair did not produce JSON",
            extra={"error": str(exc), "payload_preview": payload[:200]},
        )
        raise RecoveryError(RECOVERY_FAILED_MESSAGE) from exc


def prepare_payload(raw_text: str) -> str:
    """Tiers 1 and 2."""
    return isolate_payload(strip_wrappers(raw_text))


def recover(raw_text: str) -> RecoveryResult:
    """
    Run every tier on a raw answer and return the tagged candidates.

    Raises
    ------
    RecoveryError
        If neither the strict nor the lenient parse succeeds.
    """
    payload = prepare_payload(raw_text)
    try:
        return RecoveryResult(tier=ParseTier.SUCCESS, candidates=parse_strict(payload))
    except ValueError as exc:
        log.info("[RECOVERY] Strict parse failed, trying lenient repair", extra={"error": str(exc)})
    return RecoveryResult(tier=ParseTier.RECOVERED, candidates=parse_lenient(payload))


__all__ = [
    "ParseTier",
    "RecoveryResult",
    "RECOVERY_FAILED_MESSAGE",
    "strip_wrappers",
    "isolate_payload",
    "prepare_payload",
    "parse_strict",
    "repair_json",
    "parse_lenient",
    "recover",
]
