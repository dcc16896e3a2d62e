from __future__ import annotations

from io import StringIO

from rich.console import Console

from roster.domain.models import PersonnelRecord
from roster.query.orchestrator import execute
from roster.reporter import (
    format_value,
    print_distribution,
    print_query_result,
    print_search_outcome,
    single_skill,
)
from roster.search.pipeline import failed, service_empty


def _console() -> Console:
    return Console(file=StringIO(), width=160, color_system=None)


def test_single_skill_keeps_first_or_falls_back():
    many = PersonnelRecord.with_defaults({"employeeCode": "X1", "name": "X", "skillset": ["SAP", "Power BI"]})
    none = PersonnelRecord.with_defaults({"employeeCode": "X2", "name": "Y"})
    assert single_skill(many).skillset == ("SAP",)
    assert single_skill(none).skillset == ("Power BI",)
    assert many.skillset == ("SAP", "Power BI")


def test_format_value():
    assert format_value("", "latestEndDate") == "–"
    assert format_value(50, "availability60Days") == "50%"
    assert format_value(("SAP",), "skillset") == "SAP"
    assert format_value("India – Mumbai", "location") == "India – Mumbai"


def test_query_page_renders_rows_and_summary(records):
    console = _console()
    print_query_result(execute(records, {"skillset": {"SAP"}}, page_size=3), console=console)
    output = console.file.getvalue()
    assert "Employee Roster" in output
    assert "GEP002" in output
    assert "(filtered from 50 total)" in output


def test_empty_outcomes_print_message_only():
    console = _console()
    print_search_outcome(service_empty(), console=console)
    print_search_outcome(failed("request", "API request failed: 503 - Service Unavailable"), console=console)
    output = console.file.getvalue()
    assert "No matching results" in output
    assert "API request failed: 503" in output
    assert "AI Search Results" not in output


def test_distribution_table_lists_counts():
    console = _console()
    print_distribution({"Allocated": 50}, "billabilityStatus", console=console)
    output = console.file.getvalue()
    assert "Billability Status Distribution" in output
    assert "50" in output
