"""Data models for tagvalidator."""

from .base import ValidationResult

__all__ = [
    "ValidationResult",
]
