"""Configuration system for docchunk.

Reads and writes a TOML file with typed dataclass sections and sensible
defaults for every value.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from docchunk.exceptions import ConfigError
from docchunk.ingest import MAX_FILE_SIZE
from docchunk.types import ChunkingOptions

if TYPE_CHECKING:
    from pathlib import Path

_T = TypeVar("_T")

__all__ = [
    "CONFIG_FILE",
    "ChunkingConfig",
    "DocchunkConfig",
    "IngestConfig",
    "default_config",
    "load_config",
    "save_config",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "docchunk.toml"


@dataclass
class ChunkingConfig:
    """[chunking] section."""

    max_chunk_size: int = 1000
    overlap_size: int = 200
    strategy: str = "recursive"

    def to_options(self) -> ChunkingOptions:
        """Build validated ``ChunkingOptions`` from this section.

        Raises:
            ConfigError: If a value is out of range.
        """
        return ChunkingOptions(
            max_chunk_size=self.max_chunk_size,
            overlap_size=self.overlap_size,
            strategy=self.strategy,
        )


@dataclass
class IngestConfig:
    """[ingest] section."""

    max_file_size: int = MAX_FILE_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.max_file_size, bool) or not isinstance(self.max_file_size, int):
            raise ConfigError(f"max_file_size must be an integer, got {self.max_file_size!r}")
        if self.max_file_size <= 0:
            raise ConfigError(f"max_file_size must be positive, got {self.max_file_size}")


@dataclass
class DocchunkConfig:
    """Root configuration combining all sections."""

    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    ingest: IngestConfig = field(default_factory=IngestConfig)


_SECTION_MAP: dict[str, type] = {
    "chunking": ChunkingConfig,
    "ingest": IngestConfig,
}


def default_config() -> DocchunkConfig:
    """Return a config with all default values."""
    return DocchunkConfig()


def _config_to_dict(config: DocchunkConfig) -> dict[str, object]:
    """Convert DocchunkConfig to a nested dict suitable for TOML serialization."""
    return {name: dict(vars(getattr(config, name))) for name in _SECTION_MAP}


def save_config(config: DocchunkConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    data = _config_to_dict(config)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            tomli_w.dump(data, f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], data: dict[str, object]) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys."""
    known_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    filtered = {k: v for k, v in data.items() if k in known_fields}
    return cls(**filtered)


def load_config(path: Path) -> DocchunkConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_bytes()
        data = tomllib.loads(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = DocchunkConfig()
    for name, cls in _SECTION_MAP.items():
        section = data.get(name)
        if section is None:
            continue
        if not isinstance(section, dict):
            raise ConfigError(f"Config section [{name}] must be a table in {path}")
        setattr(config, name, _load_section(cls, section))

    logger.info("Loaded config from %s", path)
    return config
