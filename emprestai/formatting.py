"""pt-BR display formatters and lenient input parsers.

Formatters never raise: malformed input falls back to a permissive
result (``0.0`` for unparseable money, the original text for phones
that cannot be formatted) so forms keep working while the user types.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_SYMBOL = "R$"
NBSP = "\u00a0"

_NON_DIGITS = re.compile(r"\D", re.ASCII)
_NON_NUMERIC = re.compile(r"[^\d,.\-]", re.ASCII)
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_MOBILE = re.compile(r"(\d{2})(\d{5})(\d{4})")
_LANDLINE = re.compile(r"(\d{2})(\d{4})(\d{4})")

_CENT = Decimal("0.01")


def only_digits(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", value)


def _group_ptbr(value: Decimal) -> str:
    """``1234.5`` -> ``1.234,50`` (sign not included)."""
    quantized = abs(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{quantized:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


def format_currency(value: float) -> str:
    """Format a value as Brazilian Real (``R$ 1.234,56``).

    The symbol is followed by a non-breaking space, as the pt-BR locale
    renders it.
    """
    amount = _to_decimal(value)
    body = _group_ptbr(amount)
    sign = "-" if amount < 0 and body != "0,00" else ""
    return f"{sign}{CURRENCY_SYMBOL}{NBSP}{body}"


def format_percentage(value: float) -> str:
    """Format a decimal fraction as a percentage (``0.025`` -> ``2,50%``)."""
    percent = _to_decimal(value) * 100
    body = _group_ptbr(percent)
    sign = "-" if percent < 0 and body != "0,00" else ""
    return f"{sign}{body}%"


def parse_currency_input(value: str) -> float:
    """Recover a number from free-typed currency text.

    Keeps digits, comma, dot and minus. When a comma is present the text
    is read as pt-BR: dots are thousands separators and the first comma
    is the decimal point. The longest leading number is parsed; anything
    that does not parse yields ``0.0``.

    >>> parse_currency_input("R$ 1.234,56")
    1234.56
    """
    cleaned = _NON_NUMERIC.sub("", value)
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)

    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    try:
        number = float(match.group())
    except ValueError:
        return 0.0
    # -0.0 reads as zero in forms
    return number or 0.0


def parse_money_input(value: str) -> float | None:
    """Read a masked money field where every digit is significant.

    Income fields are typed right-to-left as cents, so
    ``"R$ 3.500,00"`` is ``3500.0``. Returns ``None`` when there are no
    digits at all.
    """
    digits = only_digits(value)
    if not digits:
        return None
    try:
        return float(Decimal(digits) / 100)
    except InvalidOperation:
        return None


def format_phone(phone: str) -> str:
    """Format a Brazilian phone number for display.

    11 digits become ``(XX) XXXXX-XXXX``, 10 digits ``(XX) XXXX-XXXX``.
    Any other length returns ``phone`` unchanged.
    """
    digits = only_digits(phone)
    if len(digits) == 11:
        return _MOBILE.sub(r"(\1) \2-\3", digits, count=1)
    elif len(digits) == 10:
        return _LANDLINE.sub(r"(\1) \2-\3", digits, count=1)
    return phone
