#!/usr/bin/env python

"""
Main entry point for the polynomial calculator. Run with --help for options.
"""

import sys
import argparse

from tripoly import common
from tripoly import logging
from tripoly import opts
from tripoly import session
from tripoly.parse import InputReader, ParseError

def run(argv=None):
    """Entry point for the tripoly executable.

    This procedure reads sys.argv (or `argv`), processes every operation in
    the input and writes the results.
    """

    parser = argparse.ArgumentParser(description='Arithmetic and long division on polynomials in x, y and z.')
    parser.add_argument("-o", "--output", metavar="FILE", type=str, default="-", help="Output file, use '-' for stdout (the default)")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    with common.open_maybe_stdin(args.file or "-") as f:
        input_text = f.read()

    try:
        with common.open_maybe_stdout(args.output) as out:
            with logging.task("session", input="stdin" if args.file is None else args.file):
                count = session.run_session(InputReader(input_text), out=out, err=sys.stderr)
    except ParseError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    finally:
        if logging.profile.value:
            logging.dump_profile()

    logging.log("Wrote {} results".format(count))
    return count
