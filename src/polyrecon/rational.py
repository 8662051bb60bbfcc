# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Exact rational numbers over arbitrary sized integers.

Every Rational is kept in lowest terms with a positive
denominator, so there is exactly one representation for
each value and equality is a plain comparison of the
numerator and denominator.
"""

import math
import functools
from typing import Union

Num = Union[int, 'Rational']


class DivisionByZero(ZeroDivisionError):
    pass


def _as_rational(other: Num) -> 'Rational':
    if isinstance(other, Rational):
        return other
    elif isinstance(other, int) and not isinstance(other, bool):
        return Rational(other)
    else:
        errmsg = f"Cannot use {repr(other)} as a Rational"
        raise NotImplementedError(errmsg)


@functools.total_ordering
class Rational:

    __slots__ = ('numer', 'denom')

    numer: int
    denom: int

    def __init__(self, numer: int, denom: int = 1) -> None:
        if denom == 0:
            raise DivisionByZero(f"Zero denominator for {numer}/{denom}")

        if denom < 0:
            numer = -numer
            denom = -denom

        # NOTE: math.gcd(0, denom) == denom, so zero is always 0/1
        g = math.gcd(numer, denom)
        object.__setattr__(self, 'numer', numer // g)
        object.__setattr__(self, 'denom', denom // g)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Rational is immutable, cannot set '{name}'")

    @staticmethod
    def parse(text: str) -> 'Rational':
        """Parse the output of str(Rational), ie. "N" or "N/D"."""
        numer, sep, denom = text.strip().partition("/")
        if sep:
            return Rational(int(numer), int(denom))
        else:
            return Rational(int(numer))

    def is_integer(self) -> bool:
        return self.denom == 1

    def to_int(self) -> int:
        if self.is_integer():
            return self.numer
        else:
            raise ValueError(f"Not an integer: {self}")

    def inverse(self) -> 'Rational':
        if self.numer == 0:
            raise DivisionByZero("Zero has no multiplicative inverse")
        return Rational(self.denom, self.numer)

    def __add__(self, other: Num) -> 'Rational':
        o = _as_rational(other)
        return Rational(self.numer * o.denom + o.numer * self.denom, self.denom * o.denom)

    def __radd__(self, other: int) -> 'Rational':
        return _as_rational(other) + self

    def __sub__(self, other: Num) -> 'Rational':
        o = _as_rational(other)
        return Rational(self.numer * o.denom - o.numer * self.denom, self.denom * o.denom)

    def __rsub__(self, other: int) -> 'Rational':
        return _as_rational(other) - self

    def __neg__(self) -> 'Rational':
        return Rational(-self.numer, self.denom)

    def __mul__(self, other: Num) -> 'Rational':
        o = _as_rational(other)
        return Rational(self.numer * o.numer, self.denom * o.denom)

    def __rmul__(self, other: int) -> 'Rational':
        return _as_rational(other) * self

    def __truediv__(self, other: Num) -> 'Rational':
        o = _as_rational(other)
        if o.numer == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return Rational(self.numer * o.denom, self.denom * o.numer)

    def __rtruediv__(self, other: int) -> 'Rational':
        return _as_rational(other) / self

    def __hash__(self) -> int:
        # consistent with int, since Rational(2) == 2
        if self.denom == 1:
            return hash(self.numer)
        else:
            return hash((self.numer, self.denom))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True

        if isinstance(other, Rational):
            return self.numer == other.numer and self.denom == other.denom
        elif isinstance(other, int) and not isinstance(other, bool):
            return self.denom == 1 and self.numer == other
        else:
            return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Rational, int)) and not isinstance(other, bool):
            o = _as_rational(other)
            return self.numer * o.denom < o.numer * self.denom
        else:
            return NotImplemented

    def __str__(self) -> str:
        if self.is_integer():
            return str(self.numer)
        else:
            return f"{self.numer}/{self.denom}"

    def __repr__(self) -> str:
        return f"Rational({self.numer}, {self.denom})"


ZERO = Rational(0)
ONE  = Rational(1)
