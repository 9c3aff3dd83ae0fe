"""Formatting utilities."""

from .datetime import calculate_age

__all__ = [
    "calculate_age",
]
