from __future__ import annotations

"""Exceptions raised when a sync code is rejected."""


class SyncCodeError(ValueError):
    """Base class for every rejected sync code."""

    def __init__(self, message: str, code: object = None) -> None:
        super().__init__(message)
        self.code = code


class StructureError(SyncCodeError):
    """The code does not split into exactly two hyphen-delimited segments."""


class SeriesError(SyncCodeError):
    """The first character is missing or is not a letter."""


class DeviceFormatError(SyncCodeError):
    """The device segment is not exactly three letters."""


class DeviceNotAllowedError(SyncCodeError):
    """The device segment is well formed but not a registered device type."""


class IdentifierError(SyncCodeError):
    """The identifier segment is not exactly four digits."""


class MissingPartsError(SyncCodeError):
    """``make`` was called without series, device and identifier."""


__all__ = [
    "SyncCodeError",
    "StructureError",
    "SeriesError",
    "DeviceFormatError",
    "DeviceNotAllowedError",
    "IdentifierError",
    "MissingPartsError",
]
