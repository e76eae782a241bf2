"""Reader for the polynomial input format.

The input is a stream of whitespace-separated tokens:

    <op> <poly> <poly> <op> <poly> <poly> ... #

where each <poly> is a term count N followed by N terms, and each term is
"exp_x exp_y exp_z coeff" (three integers and a number).

The important pieces are:
 - tokenize: str -> iterator of ply tokens
 - InputReader: pulls operations and polynomials off a token stream
 - parse_polynomial: str -> Polynomial
"""

# 3rd party
from ply import lex

# ours
from tripoly import logging
from tripoly.polynomials import Polynomial

class ParseError(Exception):
    """Malformed input.

    After one of these the framing of the rest of the input is unknown, so
    callers should give up on the whole stream.
    """
    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        super().__init__("on line {}: {}".format(line, message) if line is not None else message)

# Lexer ########################################################################

tokens = ("FLOAT", "INT", "SYMBOL")

def make_lexer():

    # ply discovers rules from the variables in scope.  Rules defined as
    # functions are tried in definition order, so FLOAT must come before INT
    # and both before SYMBOL ("-" alone is a symbol, "-2" is a number;
    # InputReader.read_operation splits such a number when it needs an operator).

    def t_FLOAT(t):
        r"[-+]?(?:\d+\.\d*(?:[eE][-+]?\d+)?|\.\d+(?:[eE][-+]?\d+)?|\d+[eE][-+]?\d+)"
        t.text = t.value
        t.value = float(t.value)
        return t

    def t_INT(t):
        r"[-+]?\d+"
        t.text = t.value
        t.value = int(t.value)
        return t

    def t_SYMBOL(t):
        r"\S"
        return t

    # Define a rule so we can track line numbers
    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r\f\v"

    def t_error(t):
        raise ParseError("illegal character {!r}".format(t.value[0]), t.lexer.lineno)

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Reader #######################################################################

class InputReader(object):
    def __init__(self, text):
        self._tokens = tokenize(text)
        # Tokens split off an operation and waiting to be read again.
        self._pushed_back = []
        self.line = 1

    def _next(self):
        if self._pushed_back:
            tok = self._pushed_back.pop()
        else:
            tok = next(self._tokens, None)
        if tok is not None:
            self.line = tok.lineno
        return tok

    def _expect(self, types, what):
        tok = self._next()
        if tok is None:
            raise ParseError("unexpected end of input; expected {}".format(what), self.line)
        if tok.type not in types:
            raise ParseError("expected {}, got {!r}".format(what, tok.value), tok.lineno)
        return tok.value

    def read_operation(self):
        """The next operation character, or None at the end of the input.

        The operation is a single character even when it is written flush
        against what follows: "-2 ..." is the operation "-" and then the term
        count 2.
        """
        tok = self._next()
        if tok is None:
            return None
        if tok.type == "SYMBOL":
            return tok.value
        op, rest = tok.text[0], tok.text[1:]
        if rest:
            for pushed in reversed(list(tokenize(rest))):
                pushed.lineno = tok.lineno
                self._pushed_back.append(pushed)
        return op

    def read_polynomial(self):
        n = self._expect(("INT",), "a number of terms")
        if n < 0:
            raise ParseError("number of terms must not be negative, got {}".format(n), self.line)
        p = Polynomial()
        for i in range(n):
            what = "term {} of {}".format(i + 1, n)
            ex = self._expect(("INT",), "the x exponent of " + what)
            ey = self._expect(("INT",), "the y exponent of " + what)
            ez = self._expect(("INT",), "the z exponent of " + what)
            c = self._expect(("INT", "FLOAT"), "the coefficient of " + what)
            p.insert(ex, ey, ez, float(c))
        logging.event("read {} terms into {} canonical terms".format(n, len(p)))
        return p

def parse_polynomial(text):
    """Parse a single polynomial ("N" followed by N terms).

    Trailing tokens are rejected.
    """
    reader = InputReader(text)
    p = reader.read_polynomial()
    extra = reader.read_operation()
    if extra is not None:
        raise ParseError("unexpected trailing input {!r}".format(extra), reader.line)
    return p
