"""Fixed-point money helpers.

Every amount that moves between the cart, shipping, orders and documents
layers is a ``Decimal`` quantized to cents. Floats are never accepted
silently: they are converted through ``str`` so ``39.75`` stays ``39.75``.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


class InvalidAmountError(ValueError):
    """Raised when a value cannot be interpreted as a money amount."""


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    else:
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return quantize_money(amount)


def quantize_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(amounts: Iterable[Decimal]) -> Decimal:
    return quantize_money(sum(amounts, ZERO))


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (dollars) into integer minor units (cents)."""
    return int((quantize_money(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def format_money(amount: Any, symbol: str = "$") -> str:
    return f"{symbol}{to_decimal(amount if amount is not None else ZERO):.2f}"
