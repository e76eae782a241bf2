"""Output format for polynomials.

Each polynomial is written as a separator line followed by one line per term,
greatest term first:

    ---
    2 0 0 1.0000
    0 0 0 -4.0000

The zero polynomial is written as the single term line "0 0 0 0.0000".
"""

from tripoly.opts import Option

precision = Option("precision", int, 4,
    description="Number of decimal places printed for coefficients",
    metavar="N")

SEPARATOR = "---"

def format_term(ex, ey, ez, c, places=None):
    if places is None:
        places = precision.value
    return "{} {} {} {:.{places}f}".format(ex, ey, ez, c, places=places)

def format_polynomial(p, places=None):
    """The lines (without separator) that represent polynomial p."""
    if p.is_zero():
        return [format_term(0, 0, 0, 0.0, places)]
    return [format_term(*t, places=places) for t in p]

def write_polynomial(p, out, places=None):
    out.write(SEPARATOR + "\n")
    for line in format_polynomial(p, places):
        out.write(line + "\n")
