"""Device type registry used to validate the device segment of a sync code.

A registry is immutable once built. Product lines that differ only in the
device types they ship are expressed as separate registries (usually loaded
from a JSON file, see ``synccode.config``) instead of separate validators.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"[A-Za-z]{3}")


def _freeze(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(
        {str(key).strip().upper(): value for key, value in (mapping or {}).items()}
    )


def _normalize_devices(devices: Iterable[str]) -> tuple[str, ...]:
    if isinstance(devices, str):
        raise TypeError("Registry devices must be a sequence of tokens, not a string")
    tokens: list[str] = []
    for entry in devices:
        value = entry.strip() if isinstance(entry, str) else ""
        if not _TOKEN_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid device token {entry!r}")
        upper = value.upper()
        if upper not in tokens:
            tokens.append(upper)
    return tuple(tokens)


@dataclass(frozen=True)
class DeviceRegistry:
    """Allowed device tokens plus their descriptions and model numbers.

    Tokens and table keys are stored uppercased; a malformed token raises
    ``ValueError``.
    """

    devices: tuple[str, ...]
    descriptions: Mapping[str, str] = field(default_factory=dict)
    models: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "devices", _normalize_devices(self.devices))
        object.__setattr__(self, "descriptions", _freeze(self.descriptions))
        object.__setattr__(self, "models", _freeze(self.models))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.upper() in self.devices

    def description(self, token: str) -> str | None:
        return self.descriptions.get(token.upper()) if isinstance(token, str) else None

    def model(self, token: str) -> str | None:
        return self.models.get(token.upper()) if isinstance(token, str) else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "devices": list(self.devices),
            "descriptions": dict(self.descriptions),
            "models": dict(self.models),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeviceRegistry:
        """Create a registry from loosely structured data.

        Tokens are uppercased and deduplicated, keeping their first position.
        Malformed tokens are dropped with a warning, as are description and
        model entries for tokens that are not listed in ``devices``.
        """
        raw_devices = data.get("devices", [])
        if not isinstance(raw_devices, (list, tuple)):
            raw_devices = []
        devices = _clean_tokens(raw_devices)

        return cls(
            devices=devices,
            descriptions=_clean_labels(data.get("descriptions"), devices, "description"),
            models=_clean_labels(data.get("models"), devices, "model"),
        )


def _clean_tokens(tokens: Iterable[object]) -> tuple[str, ...]:
    seen: set[str] = set()
    cleaned: list[str] = []
    for entry in tokens:
        value = str(entry).strip() if entry is not None else ""
        if not _TOKEN_PATTERN.fullmatch(value):
            logger.warning("Ignoring malformed device token %r", entry)
            continue
        upper = value.upper()
        if upper in seen:
            continue
        seen.add(upper)
        cleaned.append(upper)
    return tuple(cleaned)


def _clean_labels(
    payload: object, devices: tuple[str, ...], kind: str
) -> dict[str, str]:
    if not isinstance(payload, Mapping):
        return {}
    labels: dict[str, str] = {}
    for token, label in payload.items():
        key = str(token).strip().upper()
        if key not in devices:
            logger.warning("Ignoring %s for unregistered device %r", kind, token)
            continue
        if label is None:
            continue
        labels[key] = str(label)
    return labels


HBX_REGISTRY = DeviceRegistry(
    devices=(
        "BTU",
        "ENG",
        "CPU",
        "ECO",
        "FLO",
        "FLW",
        "PRE",
        "PRS",
        "RTR",
        "SNO",
        "SUN",
        "SGL",
        "THM",
        "ZON",
    ),
    descriptions={
        "BTU": "Energy Sensor",
        "CPU": "Boiler Controller",
        "ECO": "Geothermal Controller",
        "ENG": "Energy Sensor",
        "FLO": "Flow Sensor",
        "FLW": "Flow Sensor",
        "PRE": "Pressure Sensor",
        "PRS": "Pressure Sensor",
        "RTR": "Access Point",
        "SNO": "Snow-melt Controller",
        "SUN": "Solar Controller",
        "SGL": "Single-zone Thermostat",
        "THM": "Thermostat",
        "ZON": "Zone Controller",
    },
    models={
        "BTU": "BTU-0100",
        "CPU": "CPU-0600",
        "ECO": "ECO-0600",
        "ENG": "ENG-0100",
        "FLO": "FLO-0100",
        "FLW": "FLW-0100",
        "PRE": "PRE-0100",
        "PRS": "PRS-0100",
        "RTR": "RTR-0100",
        "SNO": "SNO-0600",
        "SUN": "SESF-3221",
        "SGL": "SGL-0600",
        "THM": "THM-0600",
        "ZON": "ZON-0600",
    },
)


__all__ = ["DeviceRegistry", "HBX_REGISTRY"]
