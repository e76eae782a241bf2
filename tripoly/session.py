"""The read/dispatch/print loop.

Each round reads one operation token and two polynomials, applies the
operation and writes the result.  The token "#" (or the end of the input)
ends the session.
"""

import sys

from tripoly import logging
from tripoly.polynomials import add, subtract, multiply
from tripoly.division import divide, modulo
from tripoly.printing import write_polynomial

END_OF_SESSION = "#"

OPERATIONS = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "%": modulo,
}

def run_session(reader, out=None, err=None):
    """Process every round from `reader`, writing results to `out`.

    Unknown operations are reported on `err`; their polynomials are still
    read so that the following round starts at the right place.  A
    ParseError from the reader propagates to the caller.

    Returns the number of polynomials written.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    written = 0
    rounds = 0
    while True:
        op = reader.read_operation()
        if op is None or op == END_OF_SESSION:
            break
        rounds += 1
        with logging.task("round", number=rounds, op=op):
            p1 = reader.read_polynomial()
            p2 = reader.read_polynomial()
            f = OPERATIONS.get(op)
            if f is None:
                print("Unknown operation: {}".format(op), file=err)
                continue
            result = f(p1, p2)
            if logging.verbose.value:
                logging.event("{} {} {} = {}".format(p1, op, p2, result))
            write_polynomial(result, out)
            written += 1
    return written
