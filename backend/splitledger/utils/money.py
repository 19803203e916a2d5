"""Decimal helpers for money and share values."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    """
    Convert user input to Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    Raises ValueError for booleans, non-numbers and non-finite values.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, TypeError):
            raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def round_cents(value: Decimal) -> Decimal:
    """
    Round half-up to the nearest cent.

    Raises ValueError when the value has too many digits to hold cents.
    """
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Too large to round to cents: {value}")


def format_money(value: Decimal) -> str:
    """Render with two decimals, rounded half-up like every stored share."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return f"{value.quantize(CENT, rounding=ROUND_HALF_UP):f}"


def as_float(value: Decimal) -> float:
    """JSON-friendly representation of a money value."""
    return float(value)
