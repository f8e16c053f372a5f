from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from didyoumean.suggest.errors import InvalidConfiguration


@dataclass(frozen=True)
class SuggestConfig:
    max_distance: int = 2
    max_results: int = 5
    case_sensitive: bool = False
    workers: int = 1

    def validate(self) -> "SuggestConfig":
        if self.max_distance < 0:
            raise InvalidConfiguration(f"max_distance must be >= 0, got {self.max_distance}")
        if self.max_results < 1:
            raise InvalidConfiguration(f"max_results must be >= 1, got {self.max_results}")
        if self.workers < 1:
            raise InvalidConfiguration(f"workers must be >= 1, got {self.workers}")
        return self


def load_yaml(path: Path) -> dict[str, Any]:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_suggest_config(path: Path | None = None, **overrides: Any) -> SuggestConfig:
    """Build a config from the ``suggest:`` section of a YAML file.

    Keyword overrides win over file values; ``None`` overrides are ignored so
    unset CLI options fall through to the file, then to the defaults.
    """
    cfg = SuggestConfig()
    section: dict[str, Any] = {}
    if path is not None:
        data = load_yaml(path)
        section = data.get("suggest", {}) if isinstance(data, dict) else {}
        if not isinstance(section, dict):
            raise InvalidConfiguration(f"'suggest' in {path} must be a mapping")

    known = {f.name for f in fields(SuggestConfig)}
    values: dict[str, Any] = {}
    for key, val in {**section, **{k: v for k, v in overrides.items() if v is not None}}.items():
        if key not in known:
            raise InvalidConfiguration(f"unknown suggest setting: {key}")
        if key == "case_sensitive":
            if not isinstance(val, bool):
                raise InvalidConfiguration(f"{key} must be true or false, got {val!r}")
        elif isinstance(val, bool) or not isinstance(val, int):
            raise InvalidConfiguration(f"{key} must be an integer, got {val!r}")
        values[key] = val
    return replace(cfg, **values)
