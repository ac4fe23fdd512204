"""
DOMAIN MODELS — CONVERSION

Pure, immutable data structures for one conversion invocation.
Nothing here outlives a single call.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RawInput:
    """
    The one or two whitespace-separated tokens typed into the launcher.
    """
    amount_text: Optional[str] = None
    bank_rate_text: Optional[str] = None

    @staticmethod
    def from_query(query: Optional[str]) -> "RawInput":
        tokens = (query or "").split()
        return RawInput(
            amount_text=tokens[0] if tokens else None,
            bank_rate_text=tokens[1] if len(tokens) > 1 else None,
        )


@dataclass(frozen=True)
class ValidatedInput:
    """
    Parsed amount and optional bank rate with validity flags.

    An absent bank rate is not invalid: ``bank_rate_present`` separates
    "not typed" from "typed but unusable".
    """
    amount: Optional[Decimal]
    bank_rate: Optional[Decimal]
    is_valid_amount: bool
    is_valid_bank_rate: bool
    bank_rate_present: bool = False

    @property
    def has_invalid_bank_rate(self) -> bool:
        return self.bank_rate_present and not self.is_valid_bank_rate


@dataclass(frozen=True)
class FeeBreakdown:
    """
    Deductions applied to a Capla transfer.
    net_amount is not clamped and may be negative.
    """
    tax: Decimal
    fixed_fee: Decimal
    total_deductions: Decimal
    net_amount: Decimal


@dataclass(frozen=True)
class DisplayItem:
    """
    One row of launcher output.
    """
    title: str
    subtitle: str
    arg: Optional[str] = None
    valid: bool = True

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": self.title,
            "subtitle": self.subtitle,
            "valid": self.valid,
        }
        if self.arg is not None:
            payload["arg"] = self.arg
        return payload
