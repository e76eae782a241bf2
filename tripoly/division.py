"""Multivariate long division by leading-term elimination.

The dividend is reduced by the divisor one leading term at a time, the same
way as univariate long division, generalized monomial-wise: at each step the
leading term of the remainder must be divisible (exponent by exponent) by the
leading term of the divisor.  As soon as it is not, reduction stops and the
current remainder is final.

Important functions:
 - divmod_polynomials: Polynomial, Polynomial -> DivisionResult
 - divide: the quotient only
 - modulo: the remainder only
"""

from collections import namedtuple

from tripoly import logging
from tripoly.polynomials import Polynomial, subtract, multiply_term, negligible

DivisionResult = namedtuple("DivisionResult", ["quotient", "remainder"])

def divmod_polynomials(a : Polynomial, b : Polynomial) -> DivisionResult:
    """Divide a by b.

    Returns (quotient, remainder) with a == b * quotient + remainder.  Neither
    input is modified.

    Dividing by the zero polynomial (or by one whose leading coefficient is
    negligible) is not an error: the quotient is zero and the remainder is a
    copy of a.
    """
    quotient = Polynomial()
    remainder = a.copy()
    lb = b.leading_term()
    if lb is None or negligible(lb.coeff):
        logging.event("divisor is zero; returning the dividend as remainder")
        return DivisionResult(quotient, remainder)

    # Every term of b except the leading one.  The leading term of each
    # product t*b exists only to cancel the leading term of the remainder,
    # so that term is dropped outright and only the rest is subtracted.
    b_rest = b.tail()

    steps = 0
    with logging.task("dividing", dividend_terms=len(a), divisor_terms=len(b)):
        while remainder:
            lr = remainder.leading_term()
            if not lb.divides(lr):
                logging.event("stopped: {} is not divisible by {}".format(lr, lb))
                break
            t = lr / lb
            if negligible(t.coeff):
                logging.event("stopped: quotient term {!r} underflows".format(t))
                break
            quotient.insert_term(t)
            remainder = subtract(remainder.tail(), multiply_term(t, b_rest))
            steps += 1
        logging.event("{} reduction steps; quotient has {} terms, remainder has {}".format(
            steps, len(quotient), len(remainder)))

    return DivisionResult(quotient, remainder)

def divide(a, b):
    return divmod_polynomials(a, b).quotient

def modulo(a, b):
    return divmod_polynomials(a, b).remainder
