#!/usr/bin/env python
# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""
__main__ module for polyrecon.

Enables use as module: $ python -m polyrecon
"""


if __name__ == '__main__':
    from . import cli

    cli.cli()
