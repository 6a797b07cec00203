"""Tools for handling and validating HBX Controls device sync codes.

Sync code structure: Series, Device, Identifier ``[A][BTU]-[1234]`` -> ``ABTU-1234``.
The module level functions use the built-in HBX device registry; build a
``SyncCodeValidator`` with another ``DeviceRegistry`` for other product lines.
"""

from __future__ import annotations

from .errors import (
    DeviceFormatError,
    DeviceNotAllowedError,
    IdentifierError,
    MissingPartsError,
    SeriesError,
    StructureError,
    SyncCodeError,
)
from .registry import HBX_REGISTRY, DeviceRegistry
from .schemas import SyncCodeParts
from .types import SyncCode, ValidationResult
from .validator import SyncCodeValidator

default_validator = SyncCodeValidator(HBX_REGISTRY)

get_allowed_devices = default_validator.get_allowed_devices
get_device_descriptions = default_validator.get_device_descriptions
get_device_description = default_validator.get_device_description
get_device_models = default_validator.get_device_models
get_device_model = default_validator.get_device_model
split = default_validator.split
series = default_validator.series
device = default_validator.device
identifier = default_validator.identifier
validate = default_validator.validate
check = default_validator.check
is_valid = default_validator.is_valid
parse = default_validator.parse
make = default_validator.make
hyphenate = default_validator.hyphenate

__all__ = [
    "DeviceRegistry",
    "HBX_REGISTRY",
    "SyncCode",
    "SyncCodeParts",
    "SyncCodeValidator",
    "ValidationResult",
    "SyncCodeError",
    "StructureError",
    "SeriesError",
    "DeviceFormatError",
    "DeviceNotAllowedError",
    "IdentifierError",
    "MissingPartsError",
    "default_validator",
    "get_allowed_devices",
    "get_device_descriptions",
    "get_device_description",
    "get_device_models",
    "get_device_model",
    "split",
    "series",
    "device",
    "identifier",
    "validate",
    "check",
    "is_valid",
    "parse",
    "make",
    "hyphenate",
]
