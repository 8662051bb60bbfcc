# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Run parameters and their validation.

| Param     | Info                                                   |
| --------- | ------------------------------------------------------ |
| `n`       | declared number of points, only checked with a warning |
| `k`       | number of points used to construct the polynomial      |
| `use_all` | construct from all points (degree = count - 1)         |
"""

import os
import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


DEFAULT_INPUT_PATH = os.getenv('POLYRECON_INPUT', "data/sample.json")

DEFAULT_USE_ALL = os.getenv('POLYRECON_USE_ALL', "0") == "1"


class InvalidParameter(ValueError):
    pass


class Params(NamedTuple):

    n      : int
    k      : int
    use_all: bool = DEFAULT_USE_ALL


def check_point_count(n: int, num_points: int) -> bool:
    """Warn if the declared point count is off.

    A mismatch of n is tolerated, only k has to be valid.
    """
    if n == num_points:
        return True
    else:
        logger.warning(f"expected n={n} points, got {num_points}")
        return False


def num_points_to_use(params: Params, num_points: int) -> int:
    # k is validated even if use_all overrides it
    if not (1 <= params.k <= num_points):
        errmsg = f"Invalid k={params.k}, must be 1 <= k <= {num_points}"
        raise InvalidParameter(errmsg)

    if params.use_all:
        return num_points
    else:
        return params.k
