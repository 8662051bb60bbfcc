# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Helper functions related to numeric base encoding/decoding."""

import string

from . import common_types as ct

DIGIT_CHARS = string.digits + string.ascii_lowercase

DIGIT_VALUES = {char: val for val, char in enumerate(DIGIT_CHARS)}

MIN_BASE = 2
MAX_BASE = len(DIGIT_CHARS)


class InvalidDigit(ValueError):
    pass


def _check_base(base: ct.Base) -> None:
    if not (MIN_BASE <= base <= MAX_BASE):
        errmsg = f"Invalid base {base}, must be {MIN_BASE} <= base <= {MAX_BASE}"
        raise InvalidDigit(errmsg)


def digit_value(char: str, base: ct.Base) -> int:
    val = DIGIT_VALUES.get(char.lower(), -1)
    if 0 <= val < base:
        return val
    else:
        raise InvalidDigit(f"Invalid digit '{char}' for base {base}")


def digits2int(digits: ct.Digits, base: ct.Base) -> int:
    r"""Convert a digit string to an (arbitrary sized) integer.

    Digits are parsed most significant first, using Horner's method:

        "1f" in base 16 == (0 * 16 + 1) * 16 + 15 == 31

    Only magnitudes are supported, there is no sign handling.
    """
    _check_base(base)
    if not digits:
        raise InvalidDigit(f"Empty digit string for base {base}")

    num = 0
    for char in digits:
        num = num * base + digit_value(char, base)
    return num


def int2digits(num: int, base: ct.Base) -> ct.Digits:
    """Render a non-negative integer as lower case digits in base."""
    _check_base(base)
    if num < 0:
        raise ValueError(f"Invalid num={num}, must be >= 0")

    if num == 0:
        return "0"

    chars = []
    while num:
        num, rem = divmod(num, base)
        chars.append(DIGIT_CHARS[rem])
    return "".join(reversed(chars))
