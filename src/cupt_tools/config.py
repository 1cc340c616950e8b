from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class CuptToolsConfig:
    """Configuration options for batch processing of Cupt files."""

    encoding: str = "utf-8"
    input_suffixes: List[str] = field(default_factory=lambda: [".cupt"])
    keep_types: List[str] = field(default_factory=list)
    fail_fast: bool = True
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(CuptToolsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in ("input_suffixes", "keep_types"):
        if key in kwargs:
            kwargs[key] = _string_list(key, kwargs[key])
    return kwargs


def _string_list(key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(item, str) for item in value
    ):
        raise ValueError(
            f"Configuration key '{key}' must be a string or a list of strings."
        )
    return list(value)


def config_from_dict(data: Mapping[str, Any] | None) -> CuptToolsConfig:
    """Build a CuptToolsConfig from a dictionary-like input."""
    if data is None:
        return CuptToolsConfig()
    return CuptToolsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> CuptToolsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> CuptToolsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return CuptToolsConfig()
    return config_from_yaml(path)
