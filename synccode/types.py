from __future__ import annotations

from dataclasses import dataclass

from .errors import SyncCodeError


@dataclass(frozen=True)
class SyncCode:
    series: str
    device: str
    identifier: str
    description: str | None = None
    model: str | None = None

    @property
    def canonical(self) -> str:
        return f"{self.series}{self.device}-{self.identifier}"

    @property
    def number(self) -> int:
        """Identifier as an integer, for ordering units within a device type."""
        return int(self.identifier)

    def __str__(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class ValidationResult:
    """Either the canonical code or the error that rejected the input."""

    code: str | None = None
    error: SyncCodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.code is not None

    def __bool__(self) -> bool:
        return self.ok


__all__ = ["SyncCode", "ValidationResult"]
