"""Sparse polynomials in x, y and z with floating-point coefficients.

A Polynomial keeps its terms in canonical form:
 - strictly descending by the term ordering (see tripoly.ordering),
 - at most one term per exponent triple,
 - no term whose coefficient is smaller in magnitude than `epsilon`.

The empty polynomial is zero.  `Polynomial.insert` is the only way terms get
into a polynomial, so every result built here is canonical by construction.

Important functions:
 - add, subtract, multiply: combine two polynomials into a new one
 - multiply_term: scale a polynomial by a single term
"""

import bisect

from tripoly.opts import Option
from tripoly.ordering import descending_key, compare
from tripoly.terms import Term

epsilon = Option("epsilon", float, 1e-9,
    description="Coefficients smaller than this in magnitude are treated as zero",
    metavar="EPS")

def negligible(c):
    return abs(c) < epsilon.value

class Polynomial(object):
    # `_keys` parallels `_terms` and holds descending_key of each term, so
    # that it is sorted ascending and can be searched with bisect.
    __slots__ = ("_terms", "_keys")

    def __init__(self, terms=()):
        self._terms = []
        self._keys = []
        for t in terms:
            self.insert(*t)

    def insert(self, ex, ey, ez, c):
        """Add c * x^ex * y^ey * z^ez to this polynomial in place.

        A term with the same exponents absorbs the coefficient, and is
        removed if the two cancel out.  Negligible coefficients are ignored.
        """
        if negligible(c):
            return
        key = descending_key((ex, ey, ez))
        i = bisect.bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            old = self._terms[i]
            new_coeff = old.coeff + c
            if negligible(new_coeff):
                del self._terms[i]
                del self._keys[i]
            else:
                self._terms[i] = Term(ex, ey, ez, new_coeff)
            return
        self._terms.insert(i, Term(ex, ey, ez, c))
        self._keys.insert(i, key)

    def insert_term(self, t):
        self.insert(t.exp_x, t.exp_y, t.exp_z, t.coeff)

    @property
    def terms(self):
        return tuple(self._terms)

    def __iter__(self):
        return iter(self._terms)

    def __len__(self):
        return len(self._terms)

    def __bool__(self):
        return bool(self._terms)

    def is_zero(self):
        return not self._terms

    def leading_term(self):
        """The greatest term, or None for the zero polynomial."""
        return self._terms[0] if self._terms else None

    def copy(self):
        res = Polynomial()
        res._terms = list(self._terms)
        res._keys = list(self._keys)
        return res

    def tail(self):
        """A copy of this polynomial without its leading term."""
        res = Polynomial()
        res._terms = self._terms[1:]
        res._keys = self._keys[1:]
        return res

    def to_tuples(self):
        return [tuple(t) for t in self._terms]

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    # Polynomials are mutable (see `insert`).
    __hash__ = None

    def __repr__(self):
        return "Polynomial({!r})".format(self.to_tuples())

    def __str__(self):
        if not self._terms:
            return "0"
        s = str(self._terms[0])
        for t in self._terms[1:]:
            if t.coeff < 0:
                s += " - " + str(-t)
            else:
                s += " + " + str(t)
        return s

    def __neg__(self):
        return negate(self)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return multiply(self, other)
        if isinstance(other, Term):
            return multiply_term(other, self)
        if isinstance(other, (int, float)):
            return multiply_term(Term(0, 0, 0, other), self)
        return NotImplemented

    __rmul__ = __mul__

    def __divmod__(self, other):
        from tripoly.division import divmod_polynomials
        return tuple(divmod_polynomials(self, other))

    def __floordiv__(self, other):
        from tripoly.division import divide
        return divide(self, other)

    def __mod__(self, other):
        from tripoly.division import modulo
        return modulo(self, other)

def _merge(p1, p2, sign):
    """p1 + sign * p2, walking both term sequences in order."""
    res = Polynomial()
    terms1 = p1.terms
    terms2 = p2.terms
    i = j = 0
    while i < len(terms1) or j < len(terms2):
        if i < len(terms1) and j < len(terms2):
            cmp = compare(terms1[i], terms2[j])
        elif i < len(terms1):
            cmp = 1
        else:
            cmp = -1
        if cmp > 0:
            t = terms1[i]
            c = t.coeff
            i += 1
        elif cmp < 0:
            t = terms2[j]
            c = sign * t.coeff
            j += 1
        else:
            t = terms1[i]
            c = t.coeff + sign * terms2[j].coeff
            i += 1
            j += 1
        res.insert(t.exp_x, t.exp_y, t.exp_z, c)
    return res

def add(p1, p2):
    return _merge(p1, p2, 1)

def subtract(p1, p2):
    return _merge(p1, p2, -1)

def negate(p):
    return Polynomial(-t for t in p)

def multiply(p1, p2):
    res = Polynomial()
    for t1 in p1:
        for t2 in p2:
            res.insert_term(t1 * t2)
    return res

def multiply_term(t, p):
    """t * p for a single term t.  Products below epsilon are dropped."""
    res = Polynomial()
    if negligible(t.coeff):
        return res
    for u in p:
        res.insert_term(t * u)
    return res
