"""
FEE CALCULATOR

Capla deducts a flat fee plus a proportional tax before converting.
No bounds checking: zero and negative amounts give a consistent,
possibly negative, net amount.
"""

from decimal import Decimal
from typing import Union

from capla_converter.domain.models import FeeBreakdown
from capla_converter.domain.services.input_normalizer import to_decimal

FIXED_FEE = Decimal("5")        # USD per transfer
TAX_RATE = Decimal("0.0015")    # 0.15%


def calculate_fees(amount: Union[Decimal, int, float, str]) -> FeeBreakdown:
    """
    Compute tax, deductions and net amount for a transfer.

    Args:
        amount: Amount in USD

    Returns:
        FeeBreakdown with net_amount = amount - FIXED_FEE - amount * TAX_RATE
    """
    amount = to_decimal(amount)
    tax = amount * TAX_RATE
    total_deductions = FIXED_FEE + tax

    return FeeBreakdown(
        tax=tax,
        fixed_fee=FIXED_FEE,
        total_deductions=total_deductions,
        net_amount=amount - total_deductions,
    )
