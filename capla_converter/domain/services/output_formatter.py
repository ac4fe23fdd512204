"""
OUTPUT FORMATTER

Builds launcher rows for a conversion.

ORDER (LOCKED):
1. Capla conversion (fees applied)
2. Bank conversion (no fees), only with a positive bank rate
3. Gain / loss of Capla against the bank, only with a positive bank rate
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional, Union

from capla_converter.domain.models import DisplayItem
from capla_converter.domain.services.fee_calculator import calculate_fees
from capla_converter.domain.services.input_normalizer import to_decimal

Number = Union[Decimal, int, float, str]

SOURCE_CURRENCY = "USD"
TARGET_CURRENCY = "DOP"
DIFFERENCE_SUBTITLE = "Difference between Capla and Bank rates"

_CENT = Decimal("0.01")


def format_amount(value: Number) -> str:
    """
    Render a number as "1,234.56", dropping a ".00" tail.

    Rounds half away from zero; the sign is kept ("-1,000"), except that a
    value rounding to zero renders as "0".
    """
    value = to_decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(_CENT, rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        rounded = abs(rounded)

    text = f"{rounded:,.2f}"
    if text.endswith(".00"):
        return text[:-3]
    return text


def build_output(
    amount: Number,
    primary_rate: Number,
    bank_rate: Optional[Number] = None,
) -> List[DisplayItem]:
    """
    Build the ordered display items for one conversion.

    Args:
        amount: USD amount typed by the user
        primary_rate: Capla USD -> DOP buy rate
        bank_rate: Optional comparison rate; ignored unless > 0

    Returns:
        1 item without a usable bank rate, otherwise 3
    """
    amount = to_decimal(amount)
    primary_rate = to_decimal(primary_rate)

    fees = calculate_fees(amount)
    capla_conversion = fees.net_amount * primary_rate

    items = [
        DisplayItem(
            title=(
                f"💱 Capla: {format_amount(amount)} {SOURCE_CURRENCY} = "
                f"{format_amount(capla_conversion)} {TARGET_CURRENCY}"
            ),
            subtitle=(
                f"Fees: ${format_amount(fees.fixed_fee)} + ${format_amount(fees.tax)} tax "
                f"= -${format_amount(fees.total_deductions)} | "
                f"Rate: {format_amount(primary_rate)} {TARGET_CURRENCY}"
            ),
            arg=format_amount(capla_conversion),
        )
    ]

    if bank_rate is None:
        return items
    bank_rate = to_decimal(bank_rate)
    if bank_rate <= 0:
        return items

    bank_conversion = amount * bank_rate
    items.append(
        DisplayItem(
            title=(
                f"🏦 Bank: {format_amount(amount)} {SOURCE_CURRENCY} = "
                f"{format_amount(bank_conversion)} {TARGET_CURRENCY}"
            ),
            subtitle=f"No fees | Rate: {format_amount(bank_rate)} {TARGET_CURRENCY}",
            arg=format_amount(bank_conversion),
        )
    )

    difference = capla_conversion - bank_conversion
    label = "📈 Gain" if difference > 0 else "📉 Loss"
    items.append(
        DisplayItem(
            title=f"{label}: {format_amount(abs(difference))} {TARGET_CURRENCY}",
            subtitle=DIFFERENCE_SUBTITLE,
            arg=format_amount(abs(difference)),
        )
    )

    return items
