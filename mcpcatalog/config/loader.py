"""Load mcpcatalog.yaml and overlay MCPCATALOG_* environment settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from mcpcatalog.config.models import CatalogConfig, ExtractorConfig, SiteConfig

CONFIG_SECTIONS: dict[str, type[BaseModel]] = {
    "extractor": ExtractorConfig,
    "site": SiteConfig,
}


class ConfigLoadError(ValueError):
    """Raised when the catalog configuration cannot be used."""


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class YAMLConfigLoader:
    """Read mcpcatalog.yaml section by section."""

    DEFAULT_FILENAME = "mcpcatalog.yaml"
    PATH_ENV_VAR = "MCPCATALOG_CONFIG"

    @classmethod
    def resolve_path(cls, cli_path: str | None = None) -> Path:
        """Pick the config file: ``MCPCATALOG_CONFIG``, then ``--config``, then ./mcpcatalog.yaml."""
        for candidate in (os.environ.get(cls.PATH_ENV_VAR, ""), cli_path or ""):
            if candidate.strip():
                return Path(candidate.strip())
        return Path.cwd() / cls.DEFAULT_FILENAME

    @classmethod
    def read_sections(cls, path: str | Path | None = None) -> dict[str, dict[str, Any]]:
        """Return the file's sections, each validated against its model.

        A missing file, an empty file or an empty section contributes
        nothing, so defaults apply.

        Raises:
            ConfigLoadError: unparsable YAML, a non-mapping document or
                section, an unknown section name, or an invalid value.
        """
        target = Path(path) if path is not None else cls.resolve_path()
        if not target.is_file():
            return {}
        try:
            document = yaml.safe_load(target.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            where = f"{target}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(target)
            raise ConfigLoadError(f"Invalid YAML at {where}") from exc
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigLoadError(f"Config root must be mapping: {target}")

        sections: dict[str, dict[str, Any]] = {}
        for name, values in document.items():
            model = CONFIG_SECTIONS.get(str(name))
            if model is None:
                known = ", ".join(sorted(CONFIG_SECTIONS))
                raise ConfigLoadError(f"Unknown section '{name}' in {target} (expected: {known})")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ConfigLoadError(f"Section '{name}' in {target} must be a mapping")
            try:
                model.model_validate(values)
            except ValidationError as exc:
                raise ConfigLoadError(f"Invalid '{name}' section in {target}: {_describe(exc)}") from exc
            sections[str(name)] = values
        return sections


def load_config(cli_path: str | None = None) -> CatalogConfig:
    """Build the configuration: defaults, then the YAML file, then ``MCPCATALOG_*`` env vars."""
    sections = YAMLConfigLoader.read_sections(YAMLConfigLoader.resolve_path(cli_path))
    try:
        env_overrides = CatalogConfig().model_dump(exclude_unset=True)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid MCPCATALOG_* environment settings: {_describe(exc)}") from exc
    merged: dict[str, Any] = {}
    for name in CONFIG_SECTIONS:
        merged[name] = {**sections.get(name, {}), **env_overrides.get(name, {})}
    try:
        return CatalogConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid configuration: {_describe(exc)}") from exc
