# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Recover a polynomial from sample points and verify it.

    points -> (x, y) -> interpolate first k -> verify all -> Reconstruction
"""

import logging
from typing import Any
from typing import Dict
from typing import List
from typing import NamedTuple

from . import params
from . import verify
from . import polynom
from . import enc_util
from . import common_types as ct
from .rational import Rational

logger = logging.getLogger(__name__)


class Reconstruction(NamedTuple):

    poly      : polynom.Polynomial
    verified  : bool
    mismatches: List[verify.Mismatch]
    num_points: int
    num_used  : int

    @property
    def degree(self) -> int:
        return self.poly.degree

    @property
    def coefficients(self) -> polynom.Coefficients:
        return self.poly.coeffs

    @property
    def value_at_zero(self) -> Rational:
        return self.poly.coeffs[0]

    def as_dict(self) -> Dict[str, Any]:
        # Integers are serialized as strings, since they can be
        # arbitrarily large.
        result: Dict[str, Any] = {
            'degree'       : self.degree,
            'coefficients' : [str(c) for c in self.coefficients],
            'value_at_zero': str(self.value_at_zero),
            'verified'     : self.verified,
            'mismatches'   : [
                {'x': str(m.x), 'expected': str(m.expected), 'actual': str(m.actual)}
                for m in self.mismatches
            ],
            'num_points': self.num_points,
            'num_used'  : self.num_used,
        }
        if self.value_at_zero.is_integer():
            result['value_at_zero_int'] = str(self.value_at_zero.to_int())
        if all(c.is_integer() for c in self.coefficients):
            result['coefficients_int'] = [str(c.to_int()) for c in self.coefficients]
        return result


def decode_points(points: ct.Points) -> List[ct.XYPoint]:
    """Sort points by x and convert their digits to integers.

    A single bad digit invalidates the whole sample set.
    """
    return [
        ct.XYPoint(p.x, enc_util.digits2int(p.digits, p.base))
        for p in sorted(points, key=lambda p: p.x)
    ]


def reconstruct_xy(xy_points: ct.XYPoints, num_used: int) -> Reconstruction:
    """Interpolate the first num_used points and verify against all."""
    used = xy_points[:num_used]
    poly = polynom.interpolate([p.x for p in used], [p.y for p in used])

    verification = verify.verify(poly, xy_points)
    return Reconstruction(
        poly=poly,
        verified=verification.verified,
        mismatches=verification.mismatches,
        num_points=len(xy_points),
        num_used=num_used,
    )


def reconstruct(points: ct.Points, run_params: params.Params) -> Reconstruction:
    params.check_point_count(run_params.n, len(points))
    num_used = params.num_points_to_use(run_params, len(points))

    xy_points = decode_points(points)
    logger.info(f"using {num_used} of {len(xy_points)} points")
    return reconstruct_xy(xy_points, num_used)
