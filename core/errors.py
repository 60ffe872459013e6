#!/usr/bin/env python3
"""Unified error model for the slide deck server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class DeckError(Exception):
    """Base typed exception with stable error code and metadata."""

    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(DeckError):
    """Config file missing, unreadable or holding invalid values."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(code="CONFIG_ERROR", message=message, details=details)
