# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI input/output reading/printing functions.

Input documents are JSON of the following form:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2" , "value": "111"},
        ...
    }
"""

import re
import json
import logging
import pathlib as pl
from typing import Any
from typing import Dict
from typing import List
from typing import Union
from typing import NamedTuple

from . import params
from . import reconstruct
from . import common_types as ct

logger = logging.getLogger(__name__)


KEYS_FIELD = 'keys'

INT_RE = re.compile(r"-?[0-9]+")


class MalformedInput(ValueError):
    pass


class SampleSet(NamedTuple):

    params: params.Params
    points: List[ct.Point]


def _parse_int(val: Any, what: str) -> int:
    # bool is an int subclass, but true/false is never a valid count
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    elif isinstance(val, str) and INT_RE.fullmatch(val.strip()):
        return int(val.strip())
    else:
        raise MalformedInput(f"Invalid {what}: {val!r}")


def _parse_field(obj: Dict[str, Any], field: str, what: str) -> Any:
    if field in obj:
        return obj[field]
    else:
        raise MalformedInput(f"Missing field '{field}' in {what}")


def _parse_point(key: str, entry: Any) -> ct.Point:
    x = _parse_int(key, "point key")
    if not isinstance(entry, dict):
        raise MalformedInput(f"Invalid entry for point {key}, expected an object")

    what   = f"point {key}"
    base   = _parse_int(_parse_field(entry, 'base', what), f"base of {what}")
    digits = _parse_field(entry, 'value', what)
    if not isinstance(digits, str):
        raise MalformedInput(f"Invalid value of {what}: {digits!r}")

    return ct.Point(x=x, base=base, digits=digits.strip())


def parse_sample_set(data: Any, use_all: bool = params.DEFAULT_USE_ALL) -> SampleSet:
    if not isinstance(data, dict):
        raise MalformedInput("Invalid document, expected an object")

    keys = _parse_field(data, KEYS_FIELD, "document")
    if not isinstance(keys, dict):
        raise MalformedInput(f"Invalid '{KEYS_FIELD}', expected an object")

    n = _parse_int(_parse_field(keys, 'n', KEYS_FIELD), "n")
    k = _parse_int(_parse_field(keys, 'k', KEYS_FIELD), "k")

    points = [_parse_point(key, entry) for key, entry in data.items() if key != KEYS_FIELD]
    points.sort(key=lambda p: p.x)

    logger.debug(f"parsed n={n} k={k} with {len(points)} points")
    return SampleSet(params=params.Params(n=n, k=k, use_all=use_all), points=points)


def load_sample_set(text: str, use_all: bool = params.DEFAULT_USE_ALL) -> SampleSet:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise MalformedInput(f"Invalid JSON: {err}") from err

    return parse_sample_set(data, use_all=use_all)


def read_sample_set(path: Union[str, pl.Path], use_all: bool = params.DEFAULT_USE_ALL) -> SampleSet:
    text = pl.Path(path).read_text(encoding="utf-8")
    return load_sample_set(text, use_all=use_all)


def format_json(result: reconstruct.Reconstruction) -> str:
    return json.dumps(result.as_dict(), indent=2)


def format_text(result: reconstruct.Reconstruction) -> List[str]:
    coeffs_str = ", ".join(str(c) for c in result.coefficients)
    lines = [
        f"degree: {result.degree}",
        f"coefficients (low->high): {coeffs_str}",
        f"f(0): {result.value_at_zero}",
        f"verified: {str(result.verified).lower()}",
    ]
    if result.mismatches:
        lines.append("mismatches: ")
        for m in result.mismatches:
            lines.append(f"  x={m.x} expected={m.expected} got={m.actual}")
    return lines
