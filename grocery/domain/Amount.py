"""Amount value: either a numeric quantity or free-form text such as "to taste".

Recipe amounts arrive as strings. Parsing happens once, up front, and callers
branch on the variant instead of retrying the float conversion.
"""
from __future__ import annotations
import math
import re
from decimal import Decimal
from typing import Union

_DECIMAL_RE = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$')


class Numeric:
    is_numeric = True

    def __init__(self, value: float):
        self.value = float(value)

    def scaled(self, multiplier: float) -> "Numeric":
        return Numeric(self.value * multiplier)

    def plus(self, other: "Numeric") -> "Numeric":
        return Numeric(self.value + other.value)

    @property
    def is_finite(self) -> bool:
        '''False once scaling or summing overflowed to inf (or produced nan).'''
        return math.isfinite(self.value)

    def format(self) -> str:
        '''Natural decimal form: 3.0 -> "3", 0.5 -> "0.5", 0.00005 -> "0.00005".'''
        if not self.is_finite:
            return repr(self.value)
        if self.value.is_integer() and abs(self.value) < 1e21:
            return str(int(self.value))
        text = repr(self.value)
        if 'e' in text and abs(self.value) >= 1e-6:
            # Shortest round-trip digits, written positionally
            return format(Decimal(text), 'f')
        return text

    def __eq__(self, other) -> bool:
        return isinstance(other, Numeric) and other.value == self.value

    def __hash__(self) -> int:
        return hash(('numeric', self.value))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Numeric({self.value!r})"


class Freeform:
    is_numeric = False

    def __init__(self, text: str):
        self.text = text

    def format(self) -> str:
        return self.text

    def __eq__(self, other) -> bool:
        return isinstance(other, Freeform) and other.text == self.text

    def __hash__(self) -> int:
        return hash(('freeform', self.text))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Freeform({self.text!r})"


Amount = Union[Numeric, Freeform]


def parse_amount(raw) -> Amount:
    """Classify a raw amount.

    Numeric only when the trimmed text is a plain finite decimal literal
    ("2", "0.5", ".25", "1e3"). Fractions, ranges, "2 large", "nan" and empty
    strings stay Freeform and keep the raw text unchanged.
    """
    if isinstance(raw, bool):
        return Freeform(str(raw))
    if isinstance(raw, (int, float)):
        return Numeric(raw) if math.isfinite(raw) else Freeform(str(raw))
    text = '' if raw is None else str(raw)
    candidate = text.strip()
    if not _DECIMAL_RE.match(candidate):
        return Freeform(text)
    value = float(candidate)
    if not math.isfinite(value):  # "1e999"
        return Freeform(text)
    return Numeric(value)


__all__ = ['Amount', 'Numeric', 'Freeform', 'parse_amount']
