#!/usr/bin/env python3
# This file is part of the polyrecon project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI/Imperative shell for polyrecon."""

import sys
import logging
from typing import NamedTuple

import click

from . import params
from . import cli_io
from . import enc_util
from . import reconstruct

click.disable_unicode_literals_warning = True  # type: ignore[attr-defined]


logger = logging.getLogger("polyrecon.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-16s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


_PREV_VERBOSITY: int = -1


def _configure_logging(verbosity: int = 0) -> None:
    # pylint: disable=global-statement
    global _PREV_VERBOSITY

    if verbosity <= _PREV_VERBOSITY:
        # allow function to be called multiple times
        return

    _PREV_VERBOSITY = verbosity

    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def echo(msg: str = "") -> bool:
    click.echo(msg)
    return True


def fail(err: Exception) -> None:
    click.echo(f"Error: {err}", err=True)
    sys.exit(1)


def _allow_large_int_strs() -> None:
    # Values can have many more digits than the default
    # int <-> str conversion limit of python >= 3.11.
    if hasattr(sys, 'set_int_max_str_digits'):
        sys.set_int_max_str_digits(0)


_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)

_opt_use_all = click.option(
    '--use-all/--first-k',
    default=params.DEFAULT_USE_ALL,
    show_default=True,
    help="Construct the polynomial from all points or only the first k.",
)

_opt_json = click.option(
    '--json',
    'as_json',
    is_flag=True,
    default=False,
    help="Print the result as JSON.",
)


@click.group(context_settings={'help_option_names': ["-h", "--help"]})
@_opt_verbose
def cli(verbose: int = 0) -> None:
    """CLI for polyrecon v2022.1009-beta."""
    _configure_logging(verbose)
    _allow_large_int_strs()


@cli.command()
@click.version_option(version="2022.1009-beta")
def version() -> None:
    """Show version number."""
    echo("polyrecon version: 2022.1009-beta")


@cli.command()
@click.argument(
    'input_path',
    type=click.Path(exists=True, dir_okay=False),
    default=params.DEFAULT_INPUT_PATH,
)
@_opt_use_all
@_opt_json
@_opt_verbose
def solve(
    input_path: str  = params.DEFAULT_INPUT_PATH,
    use_all   : bool = params.DEFAULT_USE_ALL,
    as_json   : bool = False,
    verbose   : int  = 0,
) -> None:
    """Recover the polynomial through the points of INPUT_PATH.

    A verification mismatch is reported, but it is not an error.
    """
    _configure_logging(verbose)
    logger.info(f"reading {input_path}")

    try:
        sample_set = cli_io.read_sample_set(input_path, use_all=use_all)
        result     = reconstruct.reconstruct(sample_set.points, sample_set.params)
    except (ValueError, ZeroDivisionError) as err:
        fail(err)
        return

    if as_json:
        echo(cli_io.format_json(result))
    else:
        echo("\n".join(cli_io.format_text(result)))


@cli.command()
@click.argument('digits', type=str)
@click.argument('base', type=int)
@click.option(
    '--to-base',
    type=int,
    default=10,
    show_default=True,
    help="Base of the printed result.",
)
@_opt_verbose
def convert(digits: str, base: int, to_base: int = 10, verbose: int = 0) -> None:
    """Convert DIGITS from BASE to another base."""
    _configure_logging(verbose)

    try:
        num = enc_util.digits2int(digits, base)
        out = enc_util.int2digits(num, to_base)
    except ValueError as err:
        fail(err)
        return

    echo(out)


if __name__ == '__main__':
    cli()
