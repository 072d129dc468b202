import math
from decimal import ROUND_HALF_UP, Context, Decimal

__all__ = [
    "divide",
    "asin",
    "acos",
    "round_half_up",
    "format_number",
    "format_fixed",
]


def divide(a: float, b: float) -> float:
    """Divide with IEEE-754 results for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def asin(value: float) -> float:
    """Arc sine returning NaN outside [-1, 1]."""
    if not -1.0 <= value <= 1.0:
        return math.nan
    return math.asin(value)


def acos(value: float) -> float:
    """Arc cosine returning NaN outside [-1, 1]."""
    if not -1.0 <= value <= 1.0:
        return math.nan
    return math.acos(value)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if not math.isfinite(value):
        return value
    result = float(math.floor(value))
    if value - result >= 0.5:
        result += 1.0
    if result == 0:
        return math.copysign(0.0, value)
    return result


def format_number(value: float) -> str:
    """Format number in its shortest round-trip form.

    Integral values are rendered without a fractional part and the
    exponent form is only used outside of [1e-6, 1e21).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return "{}{}e{}{}".format(sign, mantissa, "+" if e > 0 else "-", abs(e))


def format_fixed(value: float, digits: int) -> str:
    """Format number with exactly `digits` fractional digits.

    Ties are rounded away from zero on the exact binary value.
    """
    if not math.isfinite(value) or abs(value) >= 1e21:
        return format_number(value)
    digits = int(digits)
    if digits < 0:
        raise ValueError(f"Invalid number of digits: {digits!r}")
    if value == 0:
        value = 0.0  # drop negative zero
    quantum = Decimal(1).scaleb(-digits)
    context = Context(prec=digits + 32)
    result = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return format(result, "f")
