#!/usr/bin/env python3
"""
Command-line parsing for the usage tool.

The tool takes no options of its own: everything from the first token on
is the command to run, passed through verbatim.
"""
import argparse
import sys
from typing import Optional, Sequence

from usage.models import Invocation


def build_usage_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="usage",
        description="Run a command and report its time and resource usage",
        add_help=False,
    )
    ap.add_argument("command",
                    help="Program to execute, looked up in PATH")
    ap.add_argument("args", nargs=argparse.REMAINDER,
                    help="Arguments passed to the program unchanged")
    return ap


def parse_usage_args(argv: Optional[Sequence[str]] = None) -> Invocation:
    """
    Parse the command line into an Invocation.

    argparse only guards against a missing command; the tokens themselves,
    including a leading '-' or a '--', go to the child untouched.

    Args:
        argv: Arguments after the program name (default: sys.argv[1:])

    Returns:
        Invocation: the command to measure

    Exits with status 2 and a usage message when no command is given.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        build_usage_parser().error("the following arguments are required: command")
    return Invocation(argv=tuple(argv))
