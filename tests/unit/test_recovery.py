from __future__ import annotations

import pytest

from roster.errors import RecoveryError
from roster.search.recovery import (
    ParseTier,
    isolate_payload,
    parse_lenient,
    parse_strict,
    recover,
    repair_json,
    strip_wrappers,
)

FENCED = '```json\n[{"employeeCode": "GEP001", "name": "A"}]\n```'
UNTAGGED_FENCE = '```\n[{"employeeCode": "GEP001", "name": "A"}]\n```'
PROSE = 'Here are the matches:\n[{"employeeCode": "GEP001", "name": "A"}]\nHope this helps!'
LOOSE = "[{name:'A',employeeCode:'GEP001'}]"


class TestTiers:
    def test_strip_wrappers_removes_fences(self):
        assert strip_wrappers(FENCED) == '[{"employeeCode": "GEP001", "name": "A"}]'
        assert strip_wrappers(UNTAGGED_FENCE) == '[{"employeeCode": "GEP001", "name": "A"}]'
        assert strip_wrappers("  []  ") == "[]"

    def test_isolate_payload_prefers_array_of_objects(self):
        assert isolate_payload(PROSE) == '[{"employeeCode": "GEP001", "name": "A"}]'

    def test_isolate_payload_falls_back_to_object_then_text(self):
        assert isolate_payload('Result: {"name": "A"} done') == '{"name": "A"}'
        assert isolate_payload("[]") == "[]"
        assert isolate_payload("no json here") == "no json here"

    def test_parse_strict_wraps_single_object(self):
        assert parse_strict('{"name": "A"}') == [{"name": "A"}]
        assert parse_strict("[]") == []

    def test_parse_strict_rejects_scalars_and_garbage(self):
        with pytest.raises(ValueError):
            parse_strict('"just a string"')
        with pytest.raises(ValueError):
            parse_strict(LOOSE)

    def test_repair_json_quotes_keys_and_swaps_quotes(self):
        assert repair_json(LOOSE) == '[{"name":"A","employeeCode":"GEP001"}]'

    def test_repair_leaves_quoted_keys_alone(self):
        assert repair_json('{"name": "A"}') == '{"name": "A"}'

    def test_parse_lenient_raises_recovery_error(self):
        with pytest.raises(RecoveryError):
            parse_lenient("no json here")


class TestRecover:
    def test_fenced_json_is_strict_success(self):
        result = recover(FENCED)
        assert result.tier is ParseTier.SUCCESS
        assert result.candidates == [{"employeeCode": "GEP001", "name": "A"}]

    def test_prose_wrapped_json_is_strict_success(self):
        assert recover(PROSE).tier is ParseTier.SUCCESS

    def test_loose_json_is_recovered(self):
        result = recover(LOOSE)
        assert result.tier is ParseTier.RECOVERED
        assert result.candidates == [{"name": "A", "employeeCode": "GEP001"}]

    def test_unparseable_text_raises(self):
        with pytest.raises(RecoveryError):
            recover("I could not find anyone, sorry.")
