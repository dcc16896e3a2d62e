from __future__ import annotations

import asyncio
import locale
import sys
from collections import defaultdict
from typing import Dict, List, Optional, Set

import typer

from roster.config import Settings, get_settings
from roster.domain.models import TEXT_SEARCH_FIELDS, SortSpec, canonical_field
from roster.errors import EmptyQueryError, InvalidFilterError, UnknownFieldError
from roster.query.filters import distinct_values
from roster.query.orchestrator import count_by, execute
from roster.reporter import (
    DEFAULT_COLUMNS,
    print_distribution,
    print_options,
    print_query_result,
    print_search_outcome,
)
from roster.search.pipeline import SearchStatus
from roster.search.session import SearchSession
from roster.store import RecordStore, out_of_whitelist
from roster.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Employee roster browser with manual filters and AI search.")
log = get_logger(__name__)


def _load_store(settings: Settings) -> RecordStore:
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    store = RecordStore.from_seed()
    if settings.search_allowed_locations:
        outliers = out_of_whitelist(store.snapshot(), settings.search_allowed_locations)
        if outliers:
            log.warning(
                "[STORE] Records outside the allowed locations",
                extra={"employee_codes": [record.employee_code for record in outliers]},
            )
    return store


def _parse_filters(raw_filters: List[str]) -> Dict[str, Set[str]]:
    filters: Dict[str, Set[str]] = defaultdict(set)
    for item in raw_filters:
        field, sep, value = item.partition("=")
        if not sep or not field.strip():
            raise typer.BadParameter(f"Filter '{item}' must look like field=value")
        filters[field.strip()].add(value.strip())
    return dict(filters)


def _parse_columns(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_COLUMNS)
    try:
        return [canonical_field(column.strip()) for column in raw.split(",") if column.strip()]
    except UnknownFieldError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | page_size={settings.page_size} "
        f"options={settings.page_size_options} | model={settings.search_model} "
        f"endpoint={settings.search_endpoint} | api_key={'set' if settings.search_api_key else 'missing'} "
        f"| locations={', '.join(settings.search_allowed_locations) or 'any'}"
    )


@app.command()
def query(
    filter_: List[str] = typer.Option(
        [],
        "--filter",
        "-f",
        help="Field filter as field=value; repeat for more values or fields. "
        "Dates accept 'YYYY-MM-DD to YYYY-MM-DD'.",
    ),
    search: str = typer.Option("", "--search", "-q", help="Free text matched on name or employee ID."),
    sort: str = typer.Option("", "--sort", "-s", help="Field to sort by."),
    descending: bool = typer.Option(False, "--desc", help="Sort descending."),
    page: int = typer.Option(1, "--page", "-p", min=1, help="1-based page number."),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", min=1, help="Rows per page (default from settings)."
    ),
    columns: Optional[str] = typer.Option(None, "--columns", "-c", help="Comma-separated fields to show."),
) -> None:
    """
    Filter, sort and page the roster.
    """
    settings = get_settings()
    store = _load_store(settings)
    sort_spec = SortSpec(key=sort, direction="desc" if descending else "asc")

    try:
        result = execute(
            store.snapshot(),
            _parse_filters(filter_),
            search,
            sort_spec,
            page=page,
            page_size=page_size or settings.page_size,
        )
    except (UnknownFieldError, InvalidFilterError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    print_query_result(result, columns=_parse_columns(columns))


@app.command()
def options(field: str = typer.Argument(..., help="Field to list filter options for.")) -> None:
    """
    List the distinct values offered by a field's checkbox filter.
    """
    store = _load_store(get_settings())
    try:
        field = canonical_field(field)
    except UnknownFieldError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if field in TEXT_SEARCH_FIELDS:
        typer.echo(f"'{field}' is a free-text filter; pass any substring with --filter {field}=...")
        return
    print_options(distinct_values(store.snapshot(), field), field)


@app.command()
def report(field: str = typer.Argument("billabilityStatus", help="Field to summarize.")) -> None:
    """
    Show how many employees fall under each value of a field.
    """
    store = _load_store(get_settings())
    try:
        counts = count_by(store.snapshot(), field)
        field = canonical_field(field)
    except UnknownFieldError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print_distribution(counts, field)


@app.command()
def ask(
    text: str = typer.Argument(..., help="Natural-language query, e.g. 'SAP experts in Hyderabad'."),
    page: int = typer.Option(1, "--page", "-p", min=1, help="1-based result page."),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", min=1, help="Results per page (default from settings)."
    ),
    columns: Optional[str] = typer.Option(None, "--columns", "-c", help="Comma-separated fields to show."),
) -> None:
    """
    Search the roster in natural language through the generative-text service.
    """
    settings = get_settings()
    store = _load_store(settings)
    session = SearchSession()

    try:
        outcome = asyncio.run(session.run(store.snapshot(), text))
    except EmptyQueryError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print_search_outcome(
        outcome,
        page=page,
        page_size=page_size or settings.search_page_size,
        columns=_parse_columns(columns),
    )
    if outcome.status is SearchStatus.FAILED:
        raise typer.Exit(code=1)


def _use_system_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        log.debug("[LOCALE] Keeping the C collation", extra={"error": str(exc)})


def main() -> None:
    _use_system_collation()
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
