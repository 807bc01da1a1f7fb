"""Tests for CLI input snapshot loading."""

import pytest

from bascalc.cli.inputs import build_inputs, load_input_file, parse_assignments
from bascalc.exceptions import InputFileError


class TestParseAssignments:

    def test_pairs(self):
        assert parse_assignments(["flow=50", "unit=iwc"]) == {"flow": "50", "unit": "iwc"}

    def test_empty_value_and_embedded_equals(self):
        assert parse_assignments(["flow=", "note=a=b"]) == {"flow": "", "note": "a=b"}

    @pytest.mark.parametrize("item", ["flow", "=50"])
    def test_malformed(self, item):
        with pytest.raises(ValueError):
            parse_assignments([item])


class TestLoadInputFile:

    def test_yaml_values_stay_text(self, tmp_path):
        path = tmp_path / "in.yml"
        path.write_text("occupancy_end: 17:00\ncoast_minutes: 30\n", encoding="utf-8")
        assert load_input_file(path) == {"occupancy_end": "17:00", "coast_minutes": "30"}

    def test_json_values_become_text(self, tmp_path):
        path = tmp_path / "in.json"
        path.write_text('{"flow": 12.5, "unit": null}', encoding="utf-8")
        assert load_input_file(path) == {"flow": "12.5", "unit": ""}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_input_file(path) == {}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{flow: 1", encoding="utf-8")
        with pytest.raises(InputFileError) as exc_info:
            load_input_file(path)
        assert exc_info.value.context["path"] == str(path)

    def test_build_inputs_set_overrides_file(self, tmp_path):
        path = tmp_path / "in.yaml"
        path.write_text("flow: '50'\ndelta_p: '4'\n", encoding="utf-8")
        assert build_inputs(path, ["flow=75"]) == {"flow": "75", "delta_p": "4"}
