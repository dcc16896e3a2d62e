from __future__ import annotations

from roster.search.validator import ValidationMode, meets_contract, validate

COMPLETE = {
    "employeeCode": "GEP001",
    "name": "Aditya Sharma",
    "employmentStatus": "Active",
    "functionGroup": "Consulting",
    "subFunction": "Global Delivery",
}
IDENTITY_ONLY = {"employeeCode": "GEP002", "name": "Priya Patel"}


def test_strict_mode_needs_identity_and_presence_fields():
    assert meets_contract(COMPLETE, ValidationMode.STRICT)
    assert not meets_contract(IDENTITY_ONLY, ValidationMode.STRICT)


def test_strict_mode_allows_null_presence_fields():
    candidate = {**COMPLETE, "subFunction": None}
    assert meets_contract(candidate, ValidationMode.STRICT)
    record = validate([candidate]).records[0]
    assert record.sub_function == "Global Delivery"


def test_lenient_mode_needs_identity_only():
    assert meets_contract(IDENTITY_ONLY, ValidationMode.LENIENT)
    assert not meets_contract({"employeeCode": "GEP003", "name": ""}, ValidationMode.LENIENT)
    assert not meets_contract({"name": "No Code"}, ValidationMode.LENIENT)


def test_non_objects_are_rejected():
    assert not meets_contract(["GEP001"], ValidationMode.LENIENT)
    assert not meets_contract("GEP001", ValidationMode.LENIENT)


def test_validate_promotes_with_defaults_and_keeps_order():
    result = validate([IDENTITY_ONLY, COMPLETE], ValidationMode.LENIENT)
    assert [record.employee_code for record in result.records] == ["GEP002", "GEP001"]
    assert result.rejected_count == 0
    assert result.records[0].function_group == "Consulting"
    assert result.records[0].id == "GEP002"


def test_validate_counts_rejections():
    result = validate([COMPLETE, IDENTITY_ONLY, 42])
    assert len(result.records) == 1
    assert result.rejected_count == 2


def test_strict_promotion_failure_is_rejected():
    result = validate([{**COMPLETE, "currentAvailability": 250}], ValidationMode.STRICT)
    assert result.records == []
    assert result.rejected_count == 1


def test_lenient_promotion_resets_malformed_fields_to_defaults():
    candidate = {**COMPLETE, "currentAvailability": "80%", "availability60Days": 250, "region": "EMEA"}

    result = validate([candidate], ValidationMode.LENIENT)

    assert result.rejected_count == 0
    record = result.records[0]
    assert record.current_availability == 0
    assert record.availability_60_days == 50
    assert record.region == "EMEA"


def test_lenient_promotion_accepts_snake_case_keys():
    result = validate([{**IDENTITY_ONLY, "current_availability": "full"}], ValidationMode.LENIENT)
    assert result.records[0].current_availability == 0


def test_malformed_identity_is_still_rejected_in_lenient_mode():
    result = validate([{"employeeCode": ["GEP001"], "name": "Aditya Sharma"}], ValidationMode.LENIENT)
    assert result.records == []
    assert result.rejected_count == 1
