"""
Domain Models Package
Export all domain entities
"""

from .conversion import (
    DisplayItem,
    FeeBreakdown,
    RawInput,
    ValidatedInput,
)

__all__ = [
    "DisplayItem",
    "FeeBreakdown",
    "RawInput",
    "ValidatedInput",
]
