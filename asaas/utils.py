from __future__ import annotations
import re
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional

from .debug import dprint

# ==============================================================================
# Money helpers (BRL, two decimals)
# ==============================================================================

_CENT = Decimal("0.01")


def to_money(amount: Decimal | str | int | float) -> Decimal:
    """
    Coerce to a Decimal rounded to cents (ROUND_HALF_UP).
    Floats go through str() to avoid binary artifacts.
    """
    if isinstance(amount, bool):
        raise TypeError("amount must be Decimal, str, int, or float")
    if isinstance(amount, Decimal):
        dec = amount
    elif isinstance(amount, int):
        dec = Decimal(amount)
    elif isinstance(amount, float):
        dec = Decimal(str(amount))
    elif isinstance(amount, str):
        try:
            dec = Decimal(amount.strip().replace(",", "."))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount string: {amount!r}") from e
    else:
        raise TypeError("amount must be Decimal, str, int, or float")
    return dec.quantize(_CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: Decimal | str | int | float) -> int:
    """12.34 -> 1234"""
    cents = int((to_money(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))
    dprint("utils.to_cents()", {"amount_in": str(amount), "cents_out": cents})
    return cents


def from_cents(cents: int) -> Decimal:
    """1234 -> Decimal('12.34')"""
    if not isinstance(cents, int) or isinstance(cents, bool):
        raise TypeError("cents must be an int")
    return (Decimal(cents) / 100).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_brl(amount: Decimal | str | int | float) -> str:
    """
    Format for display, Brazilian style: 1234.5 -> 'R$ 1.234,50'.
    """
    dec = to_money(amount)
    sign = "-" if dec < 0 else ""
    s = f"{abs(dec):,.2f}"  # 1,234.50
    s = s.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {s}"


# ==============================================================================
# CPF / CNPJ helpers
# ==============================================================================

_NON_DIGITS = re.compile(r"\D")


def only_digits(value: str) -> str:
    """Strip punctuation from documents, postal codes and phones."""
    if not isinstance(value, str):
        raise TypeError("value must be a string")
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str, weights: list[int]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def is_valid_cpf(value: str) -> bool:
    cpf = only_digits(value)
    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False
    d1 = _check_digit(cpf[:9], list(range(10, 1, -1)))
    d2 = _check_digit(cpf[:10], list(range(11, 1, -1)))
    return cpf[-2:] == f"{d1}{d2}"


def is_valid_cnpj(value: str) -> bool:
    cnpj = only_digits(value)
    if len(cnpj) != 14 or cnpj == cnpj[0] * 14:
        return False
    w1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    w2 = [6] + w1
    d1 = _check_digit(cnpj[:12], w1)
    d2 = _check_digit(cnpj[:13], w2)
    return cnpj[-2:] == f"{d1}{d2}"


def is_valid_cpf_cnpj(value: Optional[str]) -> bool:
    if not value:
        return False
    digits = only_digits(value)
    if len(digits) == 11:
        return is_valid_cpf(digits)
    if len(digits) == 14:
        return is_valid_cnpj(digits)
    return False


# ==============================================================================
# Time helpers
# ==============================================================================

def utcnow_iso() -> str:
    """
    ISO8601 UTC timestamp (seconds precision), e.g. '2025-09-13T12:34:56Z'.
    """
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


__all__ = [
    "to_money",
    "to_cents",
    "from_cents",
    "format_brl",
    "only_digits",
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_cpf_cnpj",
    "utcnow_iso",
]
