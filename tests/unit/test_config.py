"""Unit tests for dotscribe.config."""

import json
from pathlib import Path

import pytest

from dotscribe.config import (
    apply_config,
    ensure_initialized,
    is_initialized,
    load_config,
    save_config,
)
from dotscribe.keywords import KeywordFileError, canonical_keyword
from dotscribe.models import RenderConfig


class TestSaveLoadConfig:
    def test_save_creates_file(self, tmp_path: Path) -> None:
        path = save_config(RenderConfig(), tmp_path)
        assert path.exists()

    def test_save_creates_dotscribe_dir(self, tmp_path: Path) -> None:
        save_config(RenderConfig(), tmp_path)
        assert (tmp_path / ".dotscribe").is_dir()

    def test_roundtrip(self, tmp_path: Path) -> None:
        config = RenderConfig(indent=2, keyword_files=["keywords.yaml"])
        save_config(config, tmp_path)
        loaded = load_config(tmp_path)
        assert loaded.indent == 2
        assert loaded.keyword_files == ["keywords.yaml"]

    def test_load_nonexistent(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)

    def test_save_is_valid_json(self, tmp_path: Path) -> None:
        path = save_config(RenderConfig(indent=8), tmp_path)
        data = json.loads(path.read_text())
        assert data["indent"] == 8

    def test_load_fills_defaults(self, tmp_path: Path) -> None:
        (tmp_path / ".dotscribe").mkdir()
        (tmp_path / ".dotscribe" / "config.json").write_text("{}")
        loaded = load_config(tmp_path)
        assert loaded.indent == 4
        assert loaded.keyword_files == []


class TestInitialized:
    def test_not_initialized(self, tmp_project: Path) -> None:
        assert is_initialized(tmp_project) is False

    def test_initialized(self, initialized_project: Path) -> None:
        assert is_initialized(initialized_project) is True

    def test_ensure_raises(self, tmp_project: Path) -> None:
        with pytest.raises(RuntimeError, match="not initialized"):
            ensure_initialized(tmp_project)

    def test_ensure_returns_config(self, initialized_project: Path) -> None:
        assert ensure_initialized(initialized_project).indent == 4


class TestApplyConfig:
    def test_registers_relative_keyword_file(self, tmp_path: Path, keyword_file: Path) -> None:
        config = RenderConfig(keyword_files=[keyword_file.name])
        assert apply_config(config, tmp_path) == ["shape"]
        assert canonical_keyword("shape", "hexbox") == "hexbox"

    def test_absolute_path(self, tmp_path: Path, keyword_file: Path) -> None:
        config = RenderConfig(keyword_files=[str(keyword_file)])
        apply_config(config, tmp_path / "elsewhere")
        assert canonical_keyword("shape", "rhombus") == "Rhombus"

    def test_missing_file(self, tmp_path: Path) -> None:
        config = RenderConfig(keyword_files=["missing.yaml"])
        with pytest.raises(KeywordFileError):
            apply_config(config, tmp_path)
