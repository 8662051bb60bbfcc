# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""polyrecon: Polynomial Reconstruction.

A cli app and library to recover a polynomial from mixed base
sample points using exact rational arithmetic.
"""

__version__ = "2022.1009-beta"
