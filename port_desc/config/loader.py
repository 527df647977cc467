from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.transport_protocol import TransportProtocol

"""Config loader for the port-desc command line.

Responsibilities:
- Load YAML config (config/port_desc.yml by default)
- Validate against the JSON schema shipped next to this module
- Apply defaults (bundled dataset, tcp, INFO, text output)
"""

DEFAULT_CONFIG_PATH = Path("config/port_desc.yml")
SCHEMA_RESOURCE = "config_schema.json"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class LookupConfig:
    dataset_path: str | None = None  # None: bundled excerpt
    default_protocol: TransportProtocol = TransportProtocol.TCP
    log_level: str = "INFO"
    output_format: str = "text"  # text | json


def _load_schema() -> dict[str, Any]:
    try:
        text = resources.files(__package__).joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"config schema not found: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema missing or unreadable, or the data violates it
            (unknown keys, wrong types, values outside the enums)
    """
    try:
        jsonschema.validate(data, _load_schema())
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> LookupConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    protocol = TransportProtocol.from_text(data.get("default_protocol", "tcp"))
    return LookupConfig(
        dataset_path=data.get("dataset_path"),
        default_protocol=protocol or TransportProtocol.TCP,
        log_level=data.get("log_level", "INFO"),
        output_format=data.get("output_format", "text"),
    )


def resolve_config(path: Path | None = None) -> LookupConfig:
    """Load an explicit config path, else the default one if present, else defaults."""
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return LookupConfig()
