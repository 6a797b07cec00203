"""Configuration for sync code validation.

Settings come from the environment (``.env`` files are honoured by the CLI
through python-dotenv):

- ``SYNCCODE_REGISTRY``: path to a device registry JSON file
- ``SYNCCODE_LOG_LEVEL``: logging level name for the CLI

Registry file format::

    {
      "devices": ["BTU", "CPU"],
      "descriptions": {"BTU": "Energy Sensor"},
      "models": {"BTU": "BTU-0100"}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pydantic import ValidationError

from .registry import HBX_REGISTRY, DeviceRegistry
from .schemas import RegistryFile

logger = logging.getLogger(__name__)

REGISTRY_ENV = "SYNCCODE_REGISTRY"
LOG_LEVEL_ENV = "SYNCCODE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class SyncCodeSettings:
    registry_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def level_number(self) -> int:
        return _sanitize_level(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SyncCodeSettings:
        env = os.environ if environ is None else environ
        raw_path = (env.get(REGISTRY_ENV) or "").strip()
        level = (env.get(LOG_LEVEL_ENV) or "").strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(level), int):
            logger.warning(
                "Ignoring unknown log level %r in %s; using %s",
                level,
                LOG_LEVEL_ENV,
                DEFAULT_LOG_LEVEL,
            )
            level = DEFAULT_LOG_LEVEL
        return cls(
            registry_path=Path(raw_path) if raw_path else None,
            log_level=level,
        )


def _sanitize_level(value: str) -> int:
    number = logging.getLevelName(value.upper())
    return number if isinstance(number, int) else logging.WARNING


def load_registry(path: Path | None) -> DeviceRegistry:
    """Load a device registry from a JSON file.

    Args:
        path: Registry file, or None for the built-in HBX registry

    Returns:
        The loaded registry, or the built-in registry when the file is
        missing or cannot be parsed.
    """
    if path is None:
        return HBX_REGISTRY
    if not path.exists():
        logger.info("No device registry found at %s; using built-in devices", path)
        return HBX_REGISTRY

    try:
        payload = RegistryFile.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.warning(
            "Failed to load device registry from %s: %s; using built-in devices",
            path,
            exc,
        )
        return HBX_REGISTRY

    registry = DeviceRegistry.from_dict(payload.model_dump())
    logger.info(
        "Loaded device registry from %s: %d device types", path, len(registry.devices)
    )
    return registry


def save_registry(path: Path, registry: DeviceRegistry) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(registry.to_dict(), indent=2)
    path.write_text(content, encoding="utf-8")
    logger.info("Saved device registry to %s", path)


__all__ = [
    "SyncCodeSettings",
    "load_registry",
    "save_registry",
    "REGISTRY_ENV",
    "LOG_LEVEL_ENV",
]
