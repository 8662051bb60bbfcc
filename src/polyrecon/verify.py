# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Check a recovered polynomial against all sample points."""

import logging
from typing import List
from typing import NamedTuple

from . import polynom
from . import common_types as ct
from .rational import Rational

logger = logging.getLogger(__name__)


class Mismatch(NamedTuple):

    x       : int
    expected: int
    actual  : Rational


class Verification(NamedTuple):

    verified  : bool
    mismatches: List[Mismatch]


def is_match(actual: Rational, expected: int) -> bool:
    return actual.is_integer() and actual.numer == expected


def verify(poly: polynom.Polynomial, points: ct.XYPoints) -> Verification:
    """Evaluate poly at every point and compare with the expected y.

    This includes the points used to construct poly. A mismatch
    is not an error, it is part of the result.
    """
    mismatches: List[Mismatch] = []
    for x, y in points:
        actual = polynom.evaluate(poly, x)
        if not is_match(actual, y):
            logger.info(f"mismatch at x={x}: expected={y} got={actual}")
            mismatches.append(Mismatch(x, y, actual))

    return Verification(verified=not mismatches, mismatches=mismatches)
