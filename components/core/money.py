"""Helpers for fixed-point currency values."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from pydantic import AfterValidator, Field, PlainSerializer
from typing_extensions import Annotated

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Largest values the Numeric(12, 2) and Numeric(7, 2) columns can hold
MAX_AMOUNT = Decimal("9999999999.99")
MAX_RATE = Decimal("99999.99")


def to_currency(value: Union[Decimal, int, float, str, None]) -> Decimal:
    """Quantize a value to two decimal places, rounding half up."""
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _serialize(value: Decimal) -> str:
    return str(to_currency(value))


def _capped(value: Decimal, maximum: Decimal) -> Decimal:
    # Checked before rounding: quantizing a huge value overflows the decimal context
    if value > maximum:
        raise ValueError(f"must be at most {maximum}")
    return to_currency(value)


def _amount(value: Decimal) -> Decimal:
    return _capped(value, MAX_AMOUNT)


def _positive_amount(value: Decimal) -> Decimal:
    value = _amount(value)
    if value <= ZERO:
        raise ValueError("must be at least 0.01")
    return value


def _rate(value: Decimal) -> Decimal:
    return _capped(value, MAX_RATE)


# Stored/returned amounts: always rendered as "1234.50"
Money = Annotated[Decimal, PlainSerializer(_serialize, return_type=str, when_used="json")]

# Request amounts: strings or numbers, non-negative, rounded to cents
MoneyIn = Annotated[Decimal, Field(ge=0), AfterValidator(_amount)]

# Request amounts that are still positive once rounded to cents
PositiveMoneyIn = Annotated[Decimal, Field(gt=0), AfterValidator(_positive_amount)]

# Percent rates such as 19.99
RateIn = Annotated[Decimal, Field(ge=0), AfterValidator(_rate)]
