from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class SyncCodeParts(BaseModel):
    series: str = Field(..., description="Single letter series prefix")
    device: str = Field(..., description="Three letter device type token")
    identifier: str | int = Field(..., description="Four digit unit identifier")


class RegistryFile(BaseModel):
    """Registry file layout; entries are cleaned by ``DeviceRegistry.from_dict``."""

    devices: List[Any] = Field(default_factory=list)
    descriptions: Dict[str, Any] = Field(default_factory=dict)
    models: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["SyncCodeParts", "RegistryFile"]
