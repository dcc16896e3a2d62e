"""
Domain models for the roster query engine.

Defines the personnel record schema shared by the record store, the query
engine and the AI search pipeline, plus the immutable query-state values the
orchestrator threads through each call. Attribute names are snake_case; the
camelCase aliases are the wire names used by filters, sorting, the search
prompt and the service's JSON answers.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Literal, Mapping, Tuple

from pydantic import BaseModel, Field, field_validator

from roster.errors import UnknownFieldError

# Advisory value sets; the engine passes out-of-set values through untouched.
BILLABILITY_STATUSES = frozenset({"Allocated", "Billable", "Bench-assigned", "Investment"})
TAG_STATUSES = frozenset({"Confirmed", "Not Confirmed"})
LEGACY_STATUSES = frozenset(
    {"Allocated", "Billable", "Bench-shadow", "Bench-support", "Bench-unassigned"}
)


class PersonnelRecord(BaseModel):
    """
    One employee's allocation and availability profile.

    Records are never mutated; an edit is a full replacement keyed by `id`.
    """

    id: str = Field(..., description="Opaque unique identifier, never reassigned.")
    employee_code: str = Field(..., alias="employeeCode", description="Business identifier.")
    name: str = Field(..., description="Display name.")

    employment_status: str = Field("", alias="employmentStatus")
    function_group: str = Field("", alias="functionGroup")
    sub_function: str = Field("", alias="subFunction")
    region: str = Field("")
    job_title: str = Field("", alias="jobTitle")

    current_availability: int = Field(0, alias="currentAvailability", ge=0, le=100)
    availability_30_days: int = Field(0, alias="availability30Days", ge=0, le=100)
    availability_60_days: int = Field(0, alias="availability60Days", ge=0, le=100)
    availability_90_days: int = Field(0, alias="availability90Days", ge=0, le=100)
    availability_120_days: int = Field(0, alias="availability120Days", ge=0, le=100)

    primary_account: str = Field("", alias="primaryAccount")
    sow_name: str = Field("", alias="sowName")
    billability_status: str = Field("", alias="billabilityStatus")

    earliest_allocation_start_date: str = Field("", alias="earliestAllocationStartDate")
    earliest_start_date: str = Field("", alias="earliestStartDate")
    latest_end_date: str = Field("", alias="latestEndDate")
    expected_start_date: str = Field("", alias="expectedStartDate")
    date_of_joining: str = Field("", alias="dateOfJoining")

    tag_status: str = Field("", alias="tagStatus")
    tagged_for_project: str = Field("", alias="taggedForProject")
    sme_category: str = Field("", alias="smeCategory")
    comments: str = Field("")
    location: str = Field("")
    skillset: Tuple[str, ...] = Field(default_factory=tuple)

    # Legacy pair kept for older records.
    function: str = Field("")
    status: str = Field("")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("skillset", mode="before")
    @classmethod
    def _coerce_skillset(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,) if value else ()
        return value

    @classmethod
    def with_defaults(cls, data: Mapping[str, Any]) -> "PersonnelRecord":
        """
        Build a fully-populated record from a partial mapping.

        Keys may be aliases or attribute names. `None` counts as absent, numbers
        given for string fields are stringified, and `id` falls back to the
        employee code.
        """
        provided: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None or key not in FIELD_NAMES:
                continue
            alias = FIELD_ALIASES[FIELD_NAMES[key]]
            if alias in STRING_FIELDS and isinstance(value, (int, float)) and not isinstance(value, bool):
                value = str(value)
            provided[alias] = value

        merged: Dict[str, Any] = dict(RECORD_DEFAULTS)
        merged["functionGroup"] = provided.get("function") or RECORD_DEFAULTS["functionGroup"]
        merged.update(provided)
        if not merged.get("id"):
            merged["id"] = merged.get("employeeCode")
        return cls.model_validate(merged)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with camelCase keys and the skillset as a JSON array."""
        payload = self.model_dump(by_alias=True)
        payload["skillset"] = list(self.skillset)
        return payload


# attribute name -> alias, e.g. "employee_code" -> "employeeCode"
FIELD_ALIASES: Dict[str, str] = {
    name: (info.alias or name) for name, info in PersonnelRecord.model_fields.items()
}
# alias or attribute name -> attribute name
FIELD_NAMES: Dict[str, str] = {
    **{name: name for name in FIELD_ALIASES},
    **{alias: name for name, alias in FIELD_ALIASES.items()},
}

STRING_FIELDS = frozenset(
    FIELD_ALIASES[name]
    for name, info in PersonnelRecord.model_fields.items()
    if info.annotation is str
)
NUMERIC_FIELDS = frozenset(
    {
        "currentAvailability",
        "availability30Days",
        "availability60Days",
        "availability90Days",
        "availability120Days",
    }
)
DATE_FIELDS = frozenset(
    {
        "earliestAllocationStartDate",
        "earliestStartDate",
        "latestEndDate",
        "expectedStartDate",
        "dateOfJoining",
    }
)
SET_FIELDS = frozenset({"skillset"})
# Filtered as free-text "search" boxes in the roster table.
TEXT_SEARCH_FIELDS = frozenset({"name", "comments", "taggedForProject", "sowName"})

RECORD_DEFAULTS: Dict[str, Any] = {
    "employmentStatus": "Active",
    "functionGroup": "Consulting",
    "subFunction": "Global Delivery",
    "region": "APAC",
    "jobTitle": "Consultant",
    "currentAvailability": 0,
    "availability30Days": 0,
    "availability60Days": 50,
    "availability90Days": 100,
    "availability120Days": 100,
    "primaryAccount": "",
    "sowName": "",
    "billabilityStatus": "Allocated",
    "earliestAllocationStartDate": "2023-10-15",
    "earliestStartDate": "2023-10-15",
    "latestEndDate": "",
    "expectedStartDate": "2023-10-15",
    "dateOfJoining": "2019-06-12",
    "tagStatus": "Not Confirmed",
    "taggedForProject": "",
    "smeCategory": "",
    "comments": "",
}


def canonical_field(field: str) -> str:
    """Return the camelCase alias for an alias or attribute name."""
    try:
        return FIELD_ALIASES[FIELD_NAMES[field]]
    except KeyError:
        raise UnknownFieldError(field) from None


def field_value(record: PersonnelRecord, field: str) -> Any:
    """Read a record value by alias or attribute name."""
    try:
        name = FIELD_NAMES[field]
    except KeyError:
        raise UnknownFieldError(field) from None
    return getattr(record, name)


class SortSpec(BaseModel):
    """Single active sort: a field and a direction. An empty key means unsorted."""

    key: str = ""
    direction: Literal["asc", "desc"] = "asc"

    model_config = {"frozen": True}

    def toggle(self, field: str) -> "SortSpec":
        """Same field while ascending flips to descending; anything else starts ascending."""
        field = canonical_field(field)
        if self.key == field and self.direction == "asc":
            return SortSpec(key=field, direction="desc")
        return SortSpec(key=field, direction="asc")


class QueryState(BaseModel):
    """
    Immutable snapshot of the roster table's filter, search, sort and page state.

    Every transition returns a new value. Changing a filter, the search term or
    the page size resets the page to 1.
    """

    filters: Mapping[str, FrozenSet[str]] = Field(default_factory=lambda: MappingProxyType({}))
    search_term: str = ""
    sort: SortSpec = Field(default_factory=SortSpec)
    page: int = Field(1, ge=1)
    page_size: int = Field(10, gt=0)

    model_config = {"frozen": True}

    @field_validator("filters", mode="after")
    @classmethod
    def _freeze_filters(cls, value: Mapping[str, FrozenSet[str]]) -> Mapping[str, FrozenSet[str]]:
        return MappingProxyType(dict(value))

    def with_filter(self, field: str, values: Iterable[str]) -> "QueryState":
        accepted = frozenset(values)
        if not accepted:
            return self.clear_filter(field)
        filters = dict(self.filters)
        filters[canonical_field(field)] = accepted
        return self.model_copy(update={"filters": MappingProxyType(filters), "page": 1})

    def clear_filter(self, field: str) -> "QueryState":
        filters = dict(self.filters)
        filters.pop(canonical_field(field), None)
        return self.model_copy(update={"filters": MappingProxyType(filters), "page": 1})

    def with_search(self, term: str) -> "QueryState":
        return self.model_copy(update={"search_term": term, "page": 1})

    def toggle_sort(self, field: str) -> "QueryState":
        return self.model_copy(update={"sort": self.sort.toggle(field)})

    def with_page(self, page: int) -> "QueryState":
        if page < 1:
            raise ValueError(f"Page must be >= 1, got {page}")
        return self.model_copy(update={"page": page})

    def with_page_size(self, page_size: int) -> "QueryState":
        if page_size <= 0:
            raise ValueError(f"Page size must be > 0, got {page_size}")
        return self.model_copy(update={"page_size": page_size, "page": 1})


class QueryResult(BaseModel):
    """One page of query output plus the counts that drive pagination."""

    records: Tuple[PersonnelRecord, ...]
    total: int = Field(..., description="Matching records before pagination.")
    total_records: int = Field(..., description="Records in the collection before filtering.")
    page: int
    page_size: int
    page_count: int

    model_config = {"frozen": True}

    def summary(self) -> str:
        text = f"Showing {len(self.records)} of {self.total} employees"
        if self.total != self.total_records:
            text += f" (filtered from {self.total_records} total)"
        return text


__all__ = [
    "BILLABILITY_STATUSES",
    "TAG_STATUSES",
    "LEGACY_STATUSES",
    "PersonnelRecord",
    "FIELD_ALIASES",
    "FIELD_NAMES",
    "STRING_FIELDS",
    "NUMERIC_FIELDS",
    "DATE_FIELDS",
    "SET_FIELDS",
    "TEXT_SEARCH_FIELDS",
    "RECORD_DEFAULTS",
    "canonical_field",
    "field_value",
    "SortSpec",
    "QueryState",
    "QueryResult",
]
