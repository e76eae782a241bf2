"""The term ordering.

Terms are ordered lexicographically by their exponent triple, with x most
significant, then y, then z.  Coefficients never take part in the ordering.
Polynomials store their terms in descending order, so the maximum comes
first.
"""

def exponents_of(t):
    """The (exp_x, exp_y, exp_z) triple of a Term, or t itself if it already
    is a triple."""
    if isinstance(t, tuple):
        return t
    return t.exponents

def compare_exponents(e1, e2):
    """Compare two exponent triples.

    Returns a positive number if e1 > e2, a negative number if e1 < e2, and
    zero if they are the same monomial.
    """
    for a, b in zip(e1, e2):
        if a != b:
            return a - b
    return 0

def compare(t1, t2):
    return compare_exponents(exponents_of(t1), exponents_of(t2))

def descending_key(t):
    """Sort key that puts the greatest monomial first.

        sorted(terms, key=descending_key)

    yields terms in polynomial storage order.
    """
    x, y, z = exponents_of(t)
    return (-x, -y, -z)
