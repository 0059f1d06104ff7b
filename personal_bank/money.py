"""
Monetary amount helpers.

Balances and amounts are always Decimal, quantized to cents.
Never float: a float coming in from the outside is converted
through its string form before it touches a balance.

Storage keeps balances as integer cents. MAX_AMOUNT is the
largest cent count a signed 64-bit column can hold, and is the
ceiling for any amount or balance.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from personal_bank.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
MAX_AMOUNT = Decimal(2**63 - 1).scaleb(-2)


def to_amount(value) -> Decimal:
    """
    Coerce a user-supplied value to a cent-precision Decimal.

    Accepts Decimal, int, float or numeric strings. Raises
    ValueError for anything that is not a finite number, and
    InvalidAmountError (also a ValueError) for numbers larger
    than MAX_AMOUNT.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a monetary amount: {value!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")

    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(
            amount, f"Amount exceeds the maximum of {MAX_AMOUNT}."
        )

    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Not a monetary amount: {value!r}") from None


def to_minor_units(amount: Decimal) -> int:
    """Convert a cent-precision amount to an integer count of cents."""
    return int(to_amount(amount).scaleb(2))


def from_minor_units(cents: int) -> Decimal:
    """Convert an integer count of cents back to a Decimal amount."""
    return Decimal(cents).scaleb(-2).quantize(CENTS)


def format_amount(amount: Decimal) -> str:
    """Format for display with exactly two fraction digits."""
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


def format_log_amount(amount: Decimal) -> str:
    """
    Render an amount for a transaction log line.

    Shortest decimal form with at least one fraction digit,
    e.g. 40 -> "40.0", 12.50 -> "12.5", 0.25 -> "0.25".
    """
    text = format(amount.normalize(), "f")
    if "." not in text:
        text += ".0"
    return text
