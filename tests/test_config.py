"""Tests for docchunk.config module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docchunk.config import (
    CONFIG_FILE,
    ChunkingConfig,
    DocchunkConfig,
    default_config,
    load_config,
    save_config,
)
from docchunk.exceptions import ConfigError
from docchunk.ingest import MAX_FILE_SIZE
from docchunk.types import ChunkingOptions, ChunkingStrategy

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaultConfig:
    def test_default_has_all_sections(self):
        config = default_config()
        assert config.chunking is not None
        assert config.ingest is not None

    def test_default_chunking_values(self):
        config = default_config()
        assert config.chunking.max_chunk_size == 1000
        assert config.chunking.overlap_size == 200
        assert config.chunking.strategy == "recursive"

    def test_default_ingest_limit(self):
        assert default_config().ingest.max_file_size == MAX_FILE_SIZE

    def test_config_file_name(self):
        assert CONFIG_FILE == "docchunk.toml"

    def test_default_options_match_chunking_options(self):
        assert default_config().chunking.to_options() == ChunkingOptions()


class TestToOptions:
    def test_builds_validated_options(self):
        options = ChunkingConfig(max_chunk_size=300, overlap_size=0, strategy="Sentence").to_options()
        assert options.max_chunk_size == 300
        assert options.overlap_size == 0
        assert options.strategy is ChunkingStrategy.SENTENCE

    def test_invalid_size_raises(self):
        with pytest.raises(ConfigError, match="max_chunk_size"):
            ChunkingConfig(max_chunk_size=0).to_options()

    def test_unknown_strategy_falls_back(self):
        options = ChunkingConfig(strategy="semantic").to_options()
        assert options.strategy is ChunkingStrategy.RECURSIVE


class TestConfigRoundTrip:
    def test_save_and_load_defaults(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        original = default_config()
        save_config(original, path)
        assert load_config(path) == original

    def test_save_and_load_with_values(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        config = DocchunkConfig()
        config.chunking.max_chunk_size = 512
        config.chunking.overlap_size = 64
        config.chunking.strategy = "paragraph"
        config.ingest.max_file_size = 1024

        save_config(config, path)
        loaded = load_config(path)

        assert loaded.chunking.max_chunk_size == 512
        assert loaded.chunking.overlap_size == 64
        assert loaded.chunking.strategy == "paragraph"
        assert loaded.ingest.max_file_size == 1024

    def test_zero_overlap_survives_roundtrip(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        config = DocchunkConfig()
        config.chunking.overlap_size = 0
        save_config(config, path)
        assert load_config(path).chunking.overlap_size == 0

    def test_load_partial_toml_gets_defaults(self, tmp_path: Path):
        """A TOML with only [chunking] should get defaults for the rest."""
        path = tmp_path / CONFIG_FILE
        path.write_text("[chunking]\nmax_chunk_size = 400\n", encoding="utf-8")

        loaded = load_config(path)
        assert loaded.chunking.max_chunk_size == 400
        assert loaded.chunking.overlap_size == 200
        assert loaded.chunking.strategy == "recursive"
        assert loaded.ingest.max_file_size == MAX_FILE_SIZE

    def test_unknown_keys_and_sections_ignored(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text(
            '[chunking]\nstrategy = "sentence"\nmodel = "x"\n\n[embedding]\nprovider = "ollama"\n',
            encoding="utf-8",
        )
        loaded = load_config(path)
        assert loaded.chunking.strategy == "sentence"
        assert not hasattr(loaded, "embedding")

    def test_creates_parent_directories(self, tmp_path: Path):
        path = tmp_path / "deep" / "nested" / CONFIG_FILE
        save_config(default_config(), path)
        assert path.exists()

    def test_saved_file_is_toml_text(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        save_config(default_config(), path)
        text = path.read_text(encoding="utf-8")
        assert "[chunking]" in text
        assert 'strategy = "recursive"' in text
        assert "[ingest]" in text


class TestConfigErrors:
    def test_load_nonexistent_raises_config_error(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises_config_error(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("this is [not valid toml", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to load config"):
            load_config(path)

    def test_load_non_utf8_raises_config_error(self, tmp_path: Path):
        path = tmp_path / "latin.toml"
        path.write_bytes(b'[chunking]\nstrategy = "r\xe9cursive"\n')
        with pytest.raises(ConfigError):
            load_config(path)

    def test_section_must_be_table(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("chunking = 5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match=r"\[chunking\] must be a table"):
            load_config(path)

    @pytest.mark.parametrize("value", ['"big"', "0", "-5", "true"])
    def test_invalid_max_file_size_raises_config_error(self, tmp_path: Path, value: str):
        path = tmp_path / CONFIG_FILE
        path.write_text(f"[ingest]\nmax_file_size = {value}\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="max_file_size"):
            load_config(path)

    def test_save_into_file_path_raises_config_error(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to save config"):
            save_config(default_config(), blocker / CONFIG_FILE)
