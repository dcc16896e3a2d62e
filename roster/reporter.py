from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roster.domain.models import NUMERIC_FIELDS, PersonnelRecord, QueryResult, field_value
from roster.search.pipeline import SearchOutcome, SearchStatus

COLUMN_LABELS: Dict[str, str] = {
    "employeeCode": "Employee ID",
    "name": "Employee Name",
    "employmentStatus": "Employment Status",
    "functionGroup": "Function Group",
    "subFunction": "Sub-Function",
    "region": "Region",
    "jobTitle": "Job Title / Level",
    "currentAvailability": "Current Availability",
    "availability30Days": "Availability in 30 Days",
    "availability60Days": "Availability in 60 Days",
    "availability90Days": "Availability in 90 Days",
    "availability120Days": "Availability in 120 Days",
    "primaryAccount": "Primary Account",
    "sowName": "SOW Name",
    "billabilityStatus": "Billability Status",
    "earliestAllocationStartDate": "Earliest Allocation Start Date",
    "earliestStartDate": "Earliest Start Date",
    "latestEndDate": "Latest End Date",
    "expectedStartDate": "Expected Start Date",
    "dateOfJoining": "Date of Joining (DOJ)",
    "tagStatus": "Tag Status",
    "taggedForProject": "Tagged For Project",
    "smeCategory": "SME Category",
    "comments": "Comments",
    "location": "Location",
    "skillset": "Skillset",
}

# Columns that fit a terminal; pass `columns=` for anything else.
DEFAULT_COLUMNS: Tuple[str, ...] = (
    "employeeCode",
    "name",
    "functionGroup",
    "location",
    "billabilityStatus",
    "currentAvailability",
    "skillset",
)

_STATUS_STYLES = {
    SearchStatus.SUCCESS: "green",
    SearchStatus.RECOVERED: "yellow",
    SearchStatus.SERVICE_EMPTY: "cyan",
    SearchStatus.VALIDATION_EMPTY: "yellow",
    SearchStatus.FAILED: "bold red",
}


def single_skill(record: PersonnelRecord, fallback: str = "Power BI") -> PersonnelRecord:
    """
    Apply the one-skill-per-record display rule: keep the first skill, or the
    fallback when there is none. The engine itself keeps full skill sets.
    """
    skill = record.skillset[0] if record.skillset else fallback
    return record.model_copy(update={"skillset": (skill,)})


def format_value(value: object, field: str) -> str:
    """Cell text for one record value."""
    if value is None or value == "" or value == ():
        return "–"
    if field in NUMERIC_FIELDS:
        return f"{value}%"
    if isinstance(value, tuple):
        return ", ".join(value)
    return str(value)


def build_table(
    records: Sequence[PersonnelRecord],
    title: str,
    columns: Sequence[str] = DEFAULT_COLUMNS,
    caption: Optional[str] = None,
) -> Table:
    table = Table(title=title, box=box.ROUNDED, caption=caption)
    for column in columns:
        justify = "right" if column in NUMERIC_FIELDS else "left"
        style = "cyan" if column == "employeeCode" else None
        table.add_column(COLUMN_LABELS.get(column, column), justify=justify, style=style)
    for record in records:
        table.add_row(*(format_value(field_value(record, column), column) for column in columns))
    return table


def print_summary(result: QueryResult, console: Optional[Console] = None) -> None:
    """Print the "Showing N of T employees" line for a query page."""
    (console or Console()).print(result.summary())


def print_query_result(
    result: QueryResult,
    columns: Sequence[str] = DEFAULT_COLUMNS,
    console: Optional[Console] = None,
) -> None:
    """
    Render one roster page as a rich table followed by the summary line.
    """
    console = console or Console()

    if not result.records:
        console.print("[yellow]No employees match the current filters.[/yellow]")
        print_summary(result, console)
        return

    table = build_table(
        [single_skill(record) for record in result.records],
        title="Employee Roster",
        columns=columns,
        caption=f"Page {result.page} of {max(result.page_count, 1)}",
    )
    console.print(table)
    print_summary(result, console)


def print_search_outcome(
    outcome: SearchOutcome,
    page: int = 1,
    page_size: int = 5,
    columns: Sequence[str] = DEFAULT_COLUMNS,
    console: Optional[Console] = None,
) -> None:
    """
    Render an AI search outcome: the user-facing message, then the result page.
    """
    console = console or Console()
    style = _STATUS_STYLES.get(outcome.status, "white")
    console.print(f"[{style}]{escape(outcome.message)}[/{style}]")

    if not outcome.records:
        return

    table = build_table(
        [single_skill(record) for record in outcome.page(page, page_size)],
        title="AI Search Results",
        columns=columns,
        caption=f"Page {page} of {max(outcome.page_count(page_size), 1)}",
    )
    console.print(table)


def print_distribution(counts: Dict[str, int], field: str, console: Optional[Console] = None) -> None:
    """Render a value -> count distribution as a two-column table."""
    console = console or Console()
    table = Table(title=f"{COLUMN_LABELS.get(field, field)} Distribution", box=box.ROUNDED)
    table.add_column(COLUMN_LABELS.get(field, field), style="cyan")
    table.add_column("Employees", justify="right", style="magenta")
    for value, count in counts.items():
        table.add_row(value, str(count))
    console.print(table)


def print_options(values: List[str], field: str, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"[bold]{COLUMN_LABELS.get(field, field)}[/bold] options:")
    for value in values:
        console.print(f"  • {value}")


__all__ = [
    "COLUMN_LABELS",
    "DEFAULT_COLUMNS",
    "single_skill",
    "format_value",
    "build_table",
    "print_summary",
    "print_query_result",
    "print_search_outcome",
    "print_distribution",
    "print_options",
]
