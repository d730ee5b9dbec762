"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_studio.models.resume import TemplateStyle

DB_PATH_ENV = "RESUME_STUDIO_DB"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StorageConfig:
    db_path: str = "~/.resume-studio/resumes.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class ExportConfig:
    default_template: str = "classic"
    output_dir: str = "./output"
    font_path: str | None = None  # TTF for non-Latin text; core fonts otherwise

    def __post_init__(self) -> None:
        valid = [s.value for s in TemplateStyle]
        if self.default_template not in valid:
            raise ValueError(
                f"export.default_template must be one of {valid}, got {self.default_template!r}"
            )

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"

    def __post_init__(self) -> None:
        if self.level.upper() not in _LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {list(_LOG_LEVELS)}, got {self.level!r}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper())


@dataclass(frozen=True)
class AppConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    ``RESUME_STUDIO_DB`` in the environment overrides ``storage.db_path``.
    """
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    storage = dict(raw.get("storage") or {})
    if os.environ.get(DB_PATH_ENV):
        storage["db_path"] = os.environ[DB_PATH_ENV]

    return AppConfig(
        storage=StorageConfig(**storage),
        export=ExportConfig(**(raw.get("export") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
