"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OperationConfig:
    """One configured operation and its request type reference."""

    name: str
    request: str
    description: str = ""


@dataclass(frozen=True)
class OutputSettings:
    """Schema document rendering options."""

    indent: int = 2


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    operations: tuple[OperationConfig, ...]
    output: OutputSettings
