"""Parsing and validation of device sync codes.

A sync code is ``[Series][Device]-[Identifier]``, for example ``ABTU-1234``:
a single series letter, a three letter device type drawn from the registry,
a hyphen and a four digit identifier. ``validate`` is the single definition
of a well-formed code; every other operation either feeds it or is built
from it.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

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

logger = logging.getLogger(__name__)

SEPARATOR = "-"
UNHYPHENATED_LENGTH = 8

_SERIES_PATTERN = re.compile(r"[A-Za-z]")
_DEVICE_PATTERN = re.compile(r"[A-Za-z]{3}")
_IDENTIFIER_PATTERN = re.compile(r"[0-9]{4}")

_PART_NAMES = ("series", "device", "identifier")


class SyncCodeValidator:
    """Validate and build sync codes against a device registry."""

    def __init__(self, registry: DeviceRegistry | None = None) -> None:
        self._registry = registry or HBX_REGISTRY

    @property
    def registry(self) -> DeviceRegistry:
        return self._registry

    def get_allowed_devices(self) -> tuple[str, ...]:
        return self._registry.devices

    def get_device_descriptions(self) -> Mapping[str, str]:
        return self._registry.descriptions

    def get_device_description(self, device: str) -> str | None:
        return self._registry.description(device)

    def get_device_models(self) -> Mapping[str, str]:
        return self._registry.models

    def get_device_model(self, device: str) -> str | None:
        return self._registry.model(device)

    def split(self, code: str) -> tuple[str, str]:
        """Split a code at its hyphen into prefix and identifier.

        Segment contents are not checked here.
        """
        if not isinstance(code, str):
            raise StructureError(f"Invalid sync code structure. ({code})", code)
        parts = code.split(SEPARATOR)
        if len(parts) != 2:
            raise StructureError(f"Invalid sync code structure. ({code})", code)
        return parts[0], parts[1]

    def series(self, code: str) -> str:
        series = code[:1] if isinstance(code, str) else ""
        if not _SERIES_PATTERN.fullmatch(series):
            raise SeriesError(f"Invalid sync code series. ({code})", code)
        return series.upper()

    def device(self, code: str) -> str:
        prefix, _ = self.split(code)
        device = prefix.strip()[1:]

        if not _DEVICE_PATTERN.fullmatch(device):
            raise DeviceFormatError(f"Invalid sync code device type. ({code})", code)

        device = device.upper()
        if device not in self._registry:
            raise DeviceNotAllowedError(f"Device type not allowed. ({code})", code)

        return device

    def identifier(self, code: str) -> str:
        """Return the four digit identifier.

        The value stays a string so leading zeros are kept; ``parse`` exposes
        the integer form.
        """
        _, identifier = self.split(code)
        identifier = identifier.strip()

        if not _IDENTIFIER_PATTERN.fullmatch(identifier):
            raise IdentifierError(f"Invalid sync code identifier. ({code})", code)

        return identifier

    def validate(self, code: str) -> str:
        """Validate every segment and return the canonical uppercase code.

        Raises the first ``SyncCodeError`` encountered, checking series,
        device and identifier in that order.
        """
        series = self.series(code)
        device = self.device(code)
        identifier = self.identifier(code)
        return f"{series}{device}{SEPARATOR}{identifier}".upper()

    def check(self, code: str) -> ValidationResult:
        try:
            canonical = self.validate(code)
        except SyncCodeError as exc:
            logger.debug("Rejected sync code %r: %s", code, exc)
            return ValidationResult(error=exc)
        return ValidationResult(code=canonical)

    def is_valid(self, code: str) -> bool:
        return self.check(code).ok

    def parse(self, code: str) -> SyncCode:
        canonical = self.validate(code)
        prefix, identifier = canonical.split(SEPARATOR)
        device = prefix[1:]
        return SyncCode(
            series=prefix[0],
            device=device,
            identifier=identifier,
            description=self._registry.description(device),
            model=self._registry.model(device),
        )

    def make(self, parts: Mapping[str, Any] | SyncCodeParts) -> str:
        """Build a sync code from its parts and validate the result.

        ``parts`` must provide non-empty ``series``, ``device`` and
        ``identifier`` values; the identifier may be an int but is not
        zero padded.
        """
        if isinstance(parts, SyncCodeParts):
            values: Mapping[str, Any] = parts.model_dump()
        elif isinstance(parts, Mapping):
            values = parts
        else:
            raise MissingPartsError(
                "Invalid sync code parts. Must be an object containing: "
                "series, device, identifier.",
                parts,
            )

        if not all(values.get(name) for name in _PART_NAMES):
            raise MissingPartsError(
                "Missing sync code parts. Must be an object containing: "
                "series, device, identifier.",
                parts,
            )

        raw = f"{values['series']}{values['device']}{SEPARATOR}{values['identifier']}"
        return self.validate(raw)

    def hyphenate(self, code: str) -> str:
        """Insert the hyphen into an eight character code that lacks one.

        Anything else, including non-string input, is returned unchanged; no
        validation is performed.
        """
        if not isinstance(code, str):
            return code
        if SEPARATOR not in code and len(code) == UNHYPHENATED_LENGTH:
            return code[:4] + SEPARATOR + code[4:]
        return code


__all__ = ["SyncCodeValidator", "SEPARATOR"]
