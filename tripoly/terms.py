"""Single terms c * x^i * y^j * z^k."""

class Term(object):
    """A term coeff * x^exp_x * y^exp_y * z^exp_z.

    Terms are values: they are never modified after construction.  Equality
    takes the coefficient into account; ordering (see tripoly.ordering) does
    not.
    """
    __slots__ = ("exp_x", "exp_y", "exp_z", "coeff")

    def __init__(self, exp_x, exp_y, exp_z, coeff):
        self.exp_x = int(exp_x)
        self.exp_y = int(exp_y)
        self.exp_z = int(exp_z)
        self.coeff = float(coeff)

    @property
    def exponents(self):
        return (self.exp_x, self.exp_y, self.exp_z)

    def __iter__(self):
        yield self.exp_x
        yield self.exp_y
        yield self.exp_z
        yield self.coeff

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.exponents == other.exponents and self.coeff == other.coeff

    def __hash__(self):
        return hash((self.exp_x, self.exp_y, self.exp_z, self.coeff))

    def __repr__(self):
        return "Term({}, {}, {}, {!r})".format(self.exp_x, self.exp_y, self.exp_z, self.coeff)

    def __str__(self):
        parts = []
        for var, e in zip("xyz", self.exponents):
            if e == 1:
                parts.append(var)
            elif e != 0:
                parts.append("{}^{}".format(var, e))
        if not parts:
            return "{:g}".format(self.coeff)
        if self.coeff == 1:
            return "*".join(parts)
        if self.coeff == -1:
            return "-" + "*".join(parts)
        return "{:g}*{}".format(self.coeff, "*".join(parts))

    def __neg__(self):
        return Term(self.exp_x, self.exp_y, self.exp_z, -self.coeff)

    def __mul__(self, other):
        if isinstance(other, Term):
            return Term(
                self.exp_x + other.exp_x,
                self.exp_y + other.exp_y,
                self.exp_z + other.exp_z,
                self.coeff * other.coeff)
        if isinstance(other, (int, float)):
            return Term(self.exp_x, self.exp_y, self.exp_z, self.coeff * other)
        return NotImplemented

    def divides(self, other):
        """Monomial divisibility: every exponent of self is at most the
        matching exponent of other.  Coefficients are ignored."""
        return all(a <= b for a, b in zip(self.exponents, other.exponents))

    def __truediv__(self, other):
        """The monomial quotient self / other.

        Exponents are subtracted component-wise and coefficients divided.
        The caller is responsible for checking `other.divides(self)` first;
        otherwise the result has negative exponents.
        """
        return Term(
            self.exp_x - other.exp_x,
            self.exp_y - other.exp_y,
            self.exp_z - other.exp_z,
            self.coeff / other.coeff)
