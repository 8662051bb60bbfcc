# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Polynomial calculation functions.

Mainly lagrange interpolation logic.

Helpful introduction: https://www.youtube.com/watch?v=kkMps3X_tEE
(Simple introduction to Shamir's Secret Sharing and Lagrange interpolation)

All arithmetic is done with exact rationals, no coefficient
is ever approximated.
"""

import logging
from typing import List
from typing import Tuple
from typing import Union
from typing import Iterator
from typing import Sequence

from .rational import ONE
from .rational import ZERO
from .rational import Rational

logger = logging.getLogger(__name__)


Scalar = Union[int, Rational]

# The coefficients of a polynomial are ordered in ascending
# powers of x, so coeffs = [2, 5, 3] represents 2x° + 5x¹ + 3x²
#
# Note that the constant term is the y value when we evaluate at
# x=0. This is also why other implementations call this value
# "intercept" or "y_intercept".
Coefficients = Tuple[Rational, ...]


def trim(coeffs: Sequence[Rational]) -> Coefficients:
    """Drop trailing zero coefficients.

    The zero polynomial is kept as a single coefficient.
    """
    end = len(coeffs)
    while end > 1 and coeffs[end - 1] == ZERO:
        end -= 1

    if end == 0:
        return (ZERO,)
    else:
        return tuple(coeffs[:end])


class Polynomial:

    __slots__ = ('coeffs',)

    coeffs: Coefficients

    def __init__(self, *coeffs: Scalar) -> None:
        trimmed = trim([Rational(c) if isinstance(c, int) else c for c in coeffs])
        object.__setattr__(self, 'coeffs', trimmed)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Polynomial is immutable, cannot set '{name}'")

    @staticmethod
    def from_coeffs(coeffs: Sequence[Rational]) -> 'Polynomial':
        return Polynomial(*coeffs)

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return self.coeffs == (ZERO,)

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[Rational]:
        return iter(self.coeffs)

    def __getitem__(self, idx: int) -> Rational:
        return self.coeffs[idx]

    def __call__(self, at_x: Scalar) -> Rational:
        return evaluate(self, at_x)

    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        return add(self, other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Polynomial):
            return self.coeffs == other.coeffs
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.coeffs)

    def __repr__(self) -> str:
        coeffs_str = ", ".join(str(c) for c in self.coeffs)
        return f"Polynomial({coeffs_str})"


ZERO_POLY = Polynomial(0)
ONE_POLY  = Polynomial(1)


def add(a: Polynomial, b: Polynomial) -> Polynomial:
    n = max(len(a), len(b))
    a_coeffs = a.coeffs + (ZERO,) * (n - len(a))
    b_coeffs = b.coeffs + (ZERO,) * (n - len(b))
    return Polynomial.from_coeffs([ac + bc for ac, bc in zip(a_coeffs, b_coeffs)])


def scale(a: Polynomial, scalar: Scalar) -> Polynomial:
    return Polynomial.from_coeffs([c * scalar for c in a.coeffs])


def mul_linear(a: Polynomial, c: Scalar) -> Polynomial:
    """Multiply polynomial a by the monic linear factor (x - c).

    Rather than building (x - c) as a polynomial, each coefficient
    a[i] contributes -c * a[i] to index i and a[i] to index i + 1.
    """
    neg_c = -Rational(c) if isinstance(c, int) else -c
    out: List[Rational] = [ZERO] * (len(a) + 1)
    for i in range(len(a) - 1, -1, -1):
        out[i    ] = out[i    ] + neg_c * a[i]
        out[i + 1] = out[i + 1] + a[i]
    return Polynomial.from_coeffs(out)


def evaluate(poly: Polynomial, at_x: Scalar) -> Rational:
    """Evaluate polynomial at x using Horner's method."""
    accu = ZERO
    for coeff in reversed(poly.coeffs):
        accu = coeff + accu * at_x
    return accu


def prod(vals: Sequence[Rational]) -> Rational:
    """Product of numbers.

    This is sometimes also denoted by Π (upper case PI).
    """
    accu = ONE
    for val in vals:
        accu *= val
    return accu


def _basis_polynomial(xs: Sequence[int], i: int) -> Polynomial:
    x_i    = xs[i]
    others = list(xs[:i]) + list(xs[i + 1 :])
    assert len(others) == len(xs) - 1

    numer = ONE_POLY
    for x_j in others:
        numer = mul_linear(numer, x_j)

    # NOTE: duplicate x values make a factor zero, which raises
    #   DivisionByZero here rather than producing a wrong result.
    denom = prod([Rational(x_i - x_j) for x_j in others])
    return scale(numer, ONE / denom)


def interpolate(xs: Sequence[int], ys: Sequence[int]) -> Polynomial:
    r"""Lagrange interpolation of the polynomial through (xs[i], ys[i]).

    # L_i(x) = \prod{ \frac{x - x_j}{x_i - x_j} }
    # \space
    # \text{for} \space j \not= i
    #
    # P(x) = \sum{ y_i L_i(x) }

    The result is the unique polynomial of degree <= len(xs) - 1.
    """
    if len(xs) != len(ys):
        errmsg = f"Mismatched number of x ({len(xs)}) and y ({len(ys)}) values"
        raise ValueError(errmsg)
    if len(xs) == 0:
        raise ValueError("Cannot interpolate without any points")

    accu = ZERO_POLY
    for i, y_i in enumerate(ys):
        basis = _basis_polynomial(xs, i)
        accu  = add(accu, scale(basis, y_i))

    logger.debug(f"interpolated degree {accu.degree} polynomial from {len(xs)} points")
    return accu
