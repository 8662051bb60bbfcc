# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Types used across multiple modules."""

from typing import Any
from typing import Sequence
from typing import NamedTuple

# from typing import TypeAlias
TypeAlias = Any

Digits: TypeAlias = str
Base  : TypeAlias = int


class Point(NamedTuple):
    """A raw sample as found in the input document.

    The y value is only known after the digits are
    interpreted in the given base.
    """

    x     : int
    base  : Base
    digits: Digits


class XYPoint(NamedTuple):
    x: int
    y: int


Points  : TypeAlias = Sequence[Point]
XYPoints: TypeAlias = Sequence[XYPoint]
