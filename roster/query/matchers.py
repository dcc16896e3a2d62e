"""
Per-field matching rules for the filter engine.

Each personnel field is filtered with the comparison that fits its meaning:
skills by set intersection, dates by an inclusive ISO range token, string
fields by case-insensitive containment, and everything else by string-coerced
equality. Matchers implement the `FieldMatcher` protocol and are chosen by
`matcher_for`, so the filter engine itself stays agnostic of field semantics.
"""

from __future__ import annotations

import abc
from datetime import date
from typing import Any, Callable, Dict, FrozenSet, Protocol, Tuple, runtime_checkable

from roster.domain.models import DATE_FIELDS, SET_FIELDS, STRING_FIELDS, canonical_field
from roster.errors import InvalidFilterError

Predicate = Callable[[Any], bool]

RANGE_SEPARATOR = " to "


@runtime_checkable
class FieldMatcher(Protocol):
    """
    Common interface for field matchers.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the comparison.
    """

    name: str
    description: str

    def build(self, accepted: FrozenSet[str]) -> Predicate:
        """
        Compile the accepted values into a predicate over one record value.

        Parameters
        ----------
        accepted : frozenset[str]
            Non-empty set of accepted string representations.
        """
        ...


class AbstractFieldMatcher(abc.ABC):
    """
    Optional ABC helper for class-based matchers.
    """

    name: str
    description: str

    @abc.abstractmethod
    def build(self, accepted: FrozenSet[str]) -> Predicate:  # pragma: no cover - interface only
        raise NotImplementedError


class SkillSetMatcher(AbstractFieldMatcher):
    name = "skill_set"
    description = "Record skills intersect the accepted skills."

    def build(self, accepted: FrozenSet[str]) -> Predicate:
        def predicate(value: Any) -> bool:
            return bool(accepted.intersection(value or ()))

        return predicate


def parse_date_range(token: str) -> Tuple[str, str]:
    """
    Split a `"<from> to <to>"` token into its ISO bounds.

    Raises
    ------
    InvalidFilterError
        If the token has no separator or either bound is not a `YYYY-MM-DD` date.
    """
    if RANGE_SEPARATOR not in token:
        raise InvalidFilterError(f"Date range '{token}' must look like 'YYYY-MM-DD to YYYY-MM-DD'")
    start, end = (part.strip() for part in token.split(RANGE_SEPARATOR, 1))
    for bound in (start, end):
        try:
            canonical = date.fromisoformat(bound).isoformat()
        except ValueError:
            canonical = None
        # Stored dates are yyyy-mm-dd strings; other ISO spellings would compare wrongly.
        if canonical != bound:
            raise InvalidFilterError(f"Invalid date '{bound}' in range '{token}'")
    return start, end


class DateRangeMatcher(AbstractFieldMatcher):
    name = "date_range"
    description = "ISO date lies within an inclusive 'from to to' range."

    def build(self, accepted: FrozenSet[str]) -> Predicate:
        tokens = [value for value in accepted if RANGE_SEPARATOR in value]
        if len(tokens) != 1:
            raise InvalidFilterError(f"Expected exactly one date range token, got {sorted(accepted)}")
        start, end = parse_date_range(tokens[0])

        def predicate(value: Any) -> bool:
            # ISO dates order correctly as strings.
            if not value:
                return False
            return start <= value <= end

        return predicate


class SubstringMatcher(AbstractFieldMatcher):
    name = "substring"
    description = "Case-insensitive containment of any accepted value."

    def build(self, accepted: FrozenSet[str]) -> Predicate:
        needles = [value.lower() for value in accepted]

        def predicate(value: Any) -> bool:
            haystack = str(value).lower()
            return any(needle in haystack for needle in needles)

        return predicate


class ExactMatcher(AbstractFieldMatcher):
    name = "exact"
    description = "String-coerced equality with any accepted value."

    def build(self, accepted: FrozenSet[str]) -> Predicate:
        def predicate(value: Any) -> bool:
            return str(value) in accepted

        return predicate


def _matcher_registry() -> Dict[str, FieldMatcher]:
    """Registry of available matchers."""
    return {
        SkillSetMatcher.name: SkillSetMatcher(),
        DateRangeMatcher.name: DateRangeMatcher(),
        SubstringMatcher.name: SubstringMatcher(),
        ExactMatcher.name: ExactMatcher(),
    }


_MATCHERS = _matcher_registry()


def matcher_for(field: str, accepted: FrozenSet[str]) -> FieldMatcher:
    """
    Pick the matcher for a field and its criterion.

    Date fields only use range semantics when the criterion carries a range
    token; a plain date value falls back to exact equality.
    """
    field = canonical_field(field)
    if field in SET_FIELDS:
        return _MATCHERS[SkillSetMatcher.name]
    if field in DATE_FIELDS:
        if any(RANGE_SEPARATOR in value for value in accepted):
            return _MATCHERS[DateRangeMatcher.name]
        return _MATCHERS[ExactMatcher.name]
    if field in STRING_FIELDS:
        return _MATCHERS[SubstringMatcher.name]
    return _MATCHERS[ExactMatcher.name]


__all__ = [
    "FieldMatcher",
    "AbstractFieldMatcher",
    "SkillSetMatcher",
    "DateRangeMatcher",
    "SubstringMatcher",
    "ExactMatcher",
    "Predicate",
    "RANGE_SEPARATOR",
    "matcher_for",
    "parse_date_range",
]
