"""Mixed fractions (integer part plus numerator over denominator)."""

from __future__ import annotations

import re
import sys
from typing import Sequence

_INPUT_LIMIT = 31
_DELIMITERS = re.compile(r"[()/ .,]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


class Fraction:
    """A mixed fraction ``integer (numerator/denominator)``.

    A zero denominator given on construction is replaced by one.
    """

    __slots__ = ("integer", "numerator", "denominator")

    def __init__(self, *args: int) -> None:
        if len(args) > 3:
            raise TypeError(f"Fraction takes at most 3 arguments ({len(args)} given)")
        integer, numerator, denominator = 0, 0, 1
        if len(args) == 1:
            (integer,) = args
        elif len(args) == 2:
            numerator, denominator = args
        elif len(args) == 3:
            integer, numerator, denominator = args
        self.integer = int(integer)
        self.numerator = int(numerator)
        self.denominator = int(denominator) or 1

    @classmethod
    def _coerce(cls, value: object) -> Fraction | None:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return None

    def _copy(self) -> Fraction:
        clone = Fraction()
        clone.integer = self.integer
        clone.numerator = self.numerator
        clone.denominator = self.denominator
        return clone

    def _assign(self, other: Fraction) -> Fraction:
        self.integer = other.integer
        self.numerator = other.numerator
        self.denominator = other.denominator
        return self

    def to_improper(self) -> Fraction:
        """Fold the integer part into the numerator, in place."""
        self.numerator += self.integer * self.denominator
        self.integer = 0
        return self

    def to_proper(self) -> Fraction:
        """Move whole units out of the numerator into the integer part, in place."""
        whole = _trunc_div(self.numerator, self.denominator)
        self.integer += whole
        self.numerator -= whole * self.denominator
        return self

    def inverted(self) -> Fraction:
        """Return the reciprocal as an improper fraction."""
        result = self._copy().to_improper()
        result.numerator, result.denominator = result.denominator, result.numerator
        return result

    def increment(self) -> Fraction:
        """Add one to the integer part in place and return this fraction."""
        self.integer += 1
        return self

    def __int__(self) -> int:
        return self.integer + _trunc_div(self.numerator, self.denominator)

    def __str__(self) -> str:
        parts = []
        if self.integer:
            parts.append(str(self.integer))
        if self.numerator:
            body = f"{self.numerator}/{self.denominator}"
            parts.append(f"({body})" if self.integer else body)
        elif self.integer == 0:
            parts.append("0")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Fraction({self.integer}, {self.numerator}, {self.denominator})"

    def __mul__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        left = self._copy().to_improper()
        right = right._copy().to_improper()
        return Fraction(
            left.numerator * right.numerator,
            left.denominator * right.denominator,
        ).to_proper()

    def __truediv__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return self * right.inverted()

    def __imul__(self, other: object) -> Fraction:
        product = self.__mul__(other)
        if product is NotImplemented:
            return NotImplemented
        return self._assign(product)

    def __itruediv__(self, other: object) -> Fraction:
        quotient = self.__truediv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        return self._assign(quotient)

    def _cross(self, other: object) -> tuple[int, int] | None:
        right = self._coerce(other)
        if right is None:
            return None
        left = self._copy().to_improper()
        right = right._copy().to_improper()
        return left.numerator * right.denominator, right.numerator * left.denominator

    def __eq__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] == cross[1]

    def __lt__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] < cross[1]

    def __gt__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] > cross[1]

    def __le__(self, other: object) -> bool:
        greater = self.__gt__(other)
        if greater is NotImplemented:
            return NotImplemented
        return not greater

    def __ge__(self, other: object) -> bool:
        less = self.__lt__(other)
        if less is NotImplemented:
            return NotImplemented
        return not less

    __hash__ = None  # type: ignore[assignment]


def parse_fraction(text: str) -> Fraction:
    """Parse forms such as ``5``, ``1/2``, ``2(3/4)``, ``3 4/5``, ``3.4/5``, ``3,4/5``.

    Only the first line and its first 31 characters are read. Text with no
    tokens yields a zero fraction.
    """
    line = text.splitlines()[0] if text else ""
    line = line[:_INPUT_LIMIT]
    tokens = [token for token in _DELIMITERS.split(line) if token][:3]
    numbers = [_atoi(token) for token in tokens]
    return Fraction(*numbers)


def main(argv: Sequence[str] | None = None) -> int:
    """Print each argument parsed as a fraction, or a sample fraction if none."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        for arg in args:
            print(parse_fraction(arg))
    else:
        print(Fraction(2, 3, 4))
    return 0


if __name__ == "__main__":
    sys.exit(main())