"""Complex numbers over any numeric component type."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


def _format_real(value: Any) -> str:
    """Format a real number in plain positional notation, without a trailing '.0'."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Complex:
    """A complex number with real part ``re`` and imaginary part ``im``."""

    re: Any
    im: Any

    def __add__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __radd__(self, other: object) -> "Complex":
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            return NotImplemented
        return Complex(self.re + other, self.im)

    def __mul__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __format__(self, spec: str) -> str:
        """Format as ``a + bi``; the ``#`` spec gives polar form ``r ∠ θ°``."""
        if spec == "":
            return str(self)
        if spec == "#":
            r, i = self.re, self.im
            magnitude = math.sqrt(r * r + i * i)
            angle = math.atan2(i, r) / math.pi * 180.0
            return f"{_format_real(magnitude)} ∠ {_format_real(angle)}°"
        raise ValueError(f"invalid format specifier {spec!r} for Complex")

    def __str__(self) -> str:
        sign = "-" if self.im < 0 else "+"
        return f"{_format_real(self.re)} {sign} {_format_real(abs(self.im))}i"