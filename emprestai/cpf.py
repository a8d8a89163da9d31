"""CPF (Brazilian individual taxpayer ID) validation and formatting.

A CPF has 9 base digits followed by two modulo-11 check digits. The
first uses weights 10..2 over the base digits, the second weights 11..2
over the base digits plus the first check digit.
"""

from __future__ import annotations

import random
import re

from emprestai.formatting import only_digits

CPF_LENGTH = 11

_CPF_GROUPS = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")


def _check_digit(digits: list[int]) -> int:
    """Check digit for ``digits`` using descending weights ending at 2."""
    weights = range(len(digits) + 1, 1, -1)
    total = sum(d * w for d, w in zip(digits, weights))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


def validate_cpf(cpf: str) -> bool:
    """Return True when ``cpf`` carries two matching check digits.

    Punctuation is ignored. Sequences of a single repeated digit
    (``000.000.000-00``) pass the arithmetic but are not valid CPFs.
    """
    clean = only_digits(cpf)
    if len(clean) != CPF_LENGTH:
        return False
    if len(set(clean)) == 1:
        return False

    digits = [int(c) for c in clean]
    if _check_digit(digits[:9]) != digits[9]:
        return False
    return _check_digit(digits[:10]) == digits[10]


def format_cpf(cpf: str) -> str:
    """Format as ``XXX.XXX.XXX-XX``.

    Length is not validated: fewer than 11 digits come back as the bare
    digits, extra digits are appended after the formatted part.
    """
    clean = only_digits(cpf)
    return _CPF_GROUPS.sub(r"\1.\2.\3-\4", clean, count=1)


def generate_cpf(rng: random.Random | None = None) -> str:
    """Generate a valid unformatted CPF (11 digits)."""
    rng = rng or random.Random()
    while True:
        digits = [rng.randint(0, 9) for _ in range(9)]
        if len(set(digits)) > 1:
            break
    digits.append(_check_digit(digits))
    digits.append(_check_digit(digits))
    return "".join(str(d) for d in digits)
