"""Tests for SumTypeService and definition loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from finset.config.settings import FinsetSettings
from finset.domain.types import EMPTY_SET, sequence
from finset.services.sumtype import SumTypeService, read_definition

STATE_MACHINE_TOML = """\
idle = []
loading = ["loading"]
success = ["done"]
error = ["timeout"]
"""


@pytest.fixture
def service(settings: FinsetSettings) -> SumTypeService:
    return SumTypeService(settings)


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    path = tmp_path / "traffic.toml"
    path.write_text(STATE_MACHINE_TOML, encoding="utf-8")
    return path


class TestReadDefinition:
    def test_toml(self, state_file: Path) -> None:
        assert read_definition(state_file)["error"] == ["timeout"]

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "option.json"
        path.write_text('{"some": [1, 2], "none": []}', encoding="utf-8")
        assert read_definition(path) == {"some": [1, 2], "none": []}

    def test_rejects_non_table(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="table"):
            read_definition(path)


class TestInspectFile:
    def test_state_machine(self, service: SumTypeService, state_file: Path) -> None:
        result = service.inspect_file(state_file)
        assert result.ok
        assert result.data["name"] == "traffic"
        assert result.data["tags"] == ["error", "idle", "loading", "success"]
        assert result.data["uninhabited"] == ["idle"]
        assert result.data["variant_count"] == 3
        assert result.data["pairwise_disjoint"] is True
        assert result.data["variants"][0] == {"tag": "error", "value": "timeout"}
        assert result.warnings == []

    def test_missing_file(self, service: SumTypeService, tmp_path: Path) -> None:
        result = service.inspect_file(tmp_path / "nope.toml")
        assert result.error is not None
        assert result.error.code == "INVALID_FILE"

    def test_invalid_toml(self, service: SumTypeService, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("idle = [", encoding="utf-8")
        result = service.inspect_file(path)
        assert result.error is not None
        assert result.error.code == "INVALID_FILE"

    def test_invalid_literal(self, service: SumTypeService, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('idle = "nothing"\n', encoding="utf-8")
        result = service.inspect_file(path)
        assert result.error is not None
        assert result.error.code == "INVALID_LITERAL"
        assert "'idle'" in result.error.message


class TestInspect:
    def test_exhaustive_handlers(self, service: SumTypeService, state_file: Path) -> None:
        result = service.inspect_file(state_file, ["idle", "loading", "success", "error"])
        assert result.data["exhaustive"] is True
        assert result.data["matched"] == 3

    def test_missing_handler(self, service: SumTypeService, state_file: Path) -> None:
        result = service.inspect_file(state_file, ["loading", "success", "error"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NON_EXHAUSTIVE"
        assert result.error.detail["missing"] == ["idle"]

    def test_unknown_handler(self, service: SumTypeService) -> None:
        result = service.inspect({"a": sequence([1])}, ["a", "b"])
        assert result.error is not None
        assert result.error.code == "UNKNOWN_TAG"
        assert result.error.detail["unknown"] == ["b"]

    def test_overlap_warns(self, service: SumTypeService) -> None:
        result = service.inspect({"a": sequence([1, 2]), "b": sequence([2])})
        assert result.ok
        assert result.data["pairwise_disjoint"] is False
        assert result.data["overlaps"] == [["a", "b"]]
        assert result.warnings == ["Tag domains overlap: a/b"]

    def test_overlap_fails_when_required(self, tmp_path: Path) -> None:
        settings = FinsetSettings.from_cli(start=tmp_path, sumtype={"require_disjoint": True})
        result = SumTypeService(settings).inspect({"a": sequence([1]), "b": sequence([1])})
        assert result.error is not None
        assert result.error.code == "OVERLAPPING_DOMAINS"

    def test_truncates_variants(self, tmp_path: Path) -> None:
        settings = FinsetSettings.from_cli(start=tmp_path, engine={"max_materialize": 2})
        result = SumTypeService(settings).inspect({"n": sequence([1, 2, 3]), "z": EMPTY_SET})
        assert result.data["variant_count"] == 3
        assert len(result.data["variants"]) == 2
        assert result.warnings == ["Showing 2 of 3 variants"]
