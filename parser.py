from __future__ import annotations
from typing import Optional, Union

from errors import InvalidArgumentError, ParseError
from equation import Equation
from expression import Expression
from logging_config import get_logger
from rational import Rational

logger = get_logger("parser")

# =====================
# Lexer
# =====================

_OPERATORS = {"+", "-", "*", "/", "^", "(", ")", "="}
_WHITESPACE = " \t\r\n"


class Tok:
    def __init__(self, kind: str, lex: str = "", num: Rational | None = None, pos: int = 0):
        self.kind, self.lex, self.num, self.pos = kind, lex, num, pos

    def __repr__(self) -> str:
        return f"Tok({self.kind!r}, {self.lex!r}, pos={self.pos})"


class Lexer:
    """Splits algebraic text into operator, NUM and ID tokens, one at a time."""

    def __init__(self, text: str = "") -> None:
        self.input(text)

    def input(self, text: str) -> None:
        self.buf = text
        self.pos = 0

    def token(self) -> Optional[Tok]:
        """Return the next token, or None once the input is exhausted."""
        s, n = self.buf, len(self.buf)
        while self.pos < n and s[self.pos] in _WHITESPACE:
            self.pos += 1
        if self.pos >= n:
            return None

        c = s[self.pos]
        start = self.pos
        if c in _OPERATORS:
            self.pos += 1
            return Tok(c, c, pos=start)
        if c.isascii() and c.isdigit():
            return self._number()
        if c.isascii() and c.isalpha():
            j = start + 1
            while j < n and s[j].isascii() and s[j].isalnum():
                j += 1
            self.pos = j
            return Tok("ID", s[start:j], pos=start)
        raise ParseError(f"Token error at character {c} at position {start}", position=start)

    def _number(self) -> Tok:
        s, n = self.buf, len(self.buf)
        start = j = self.pos
        while j < n and s[j].isascii() and s[j].isdigit():
            j += 1
        whole = s[start:j]
        if j < n and s[j] == ".":
            k = j + 1
            while k < n and s[k].isascii() and s[k].isdigit():
                k += 1
            digits = s[j + 1:k]
            if not digits:
                raise ParseError(f"Decimal point without decimal digits at position {j}", position=j)
            # scale to an integer so the value stays exact
            value = Rational(int(whole + digits), 10 ** len(digits)).reduce()
            self.pos = k
            return Tok("NUM", s[start:k], value, start)
        self.pos = j
        return Tok("NUM", whole, Rational(int(whole), 1), start)


# =====================
# Recursive-descent parser
# =====================
#
# equation := expr [ '=' expr ]
# expr     := ['-'] term { ('+' | '-') term }
# term     := factor { '*' factor | '^' factor | '/' factor | factor }
# factor   := NUM | ID | '(' expr ')'


class Parser:
    def __init__(self) -> None:
        self.lexer = Lexer()
        self.current_token: Optional[Tok] = None

    def update(self) -> None:
        self.current_token = self.lexer.token()

    def _at(self, *kinds: str) -> bool:
        return self.current_token is not None and self.current_token.kind in kinds

    def _position(self) -> int:
        if self.current_token is None:
            return len(self.lexer.buf)
        return self.current_token.pos

    def match(self, kind: str) -> Tok:
        tok = self.current_token
        if tok is None or tok.kind != kind:
            found = "end of input" if tok is None else f"'{tok.lex}'"
            raise ParseError(
                f"Expected '{kind}' but found {found} at position {self._position()}",
                position=self._position(),
            )
        self.update()
        return tok

    def parse(self, text: str) -> Union[Expression, Equation]:
        self.lexer.input(text)
        try:
            self.update()
            result = self.parse_equation()
            if self.current_token is not None:
                tok = self.current_token
                raise ParseError(f"Unexpected token {tok.lex} at position {tok.pos}", position=tok.pos)
        except ParseError as e:
            logger.debug("failed to parse %r: %s", text, e)
            raise
        return result

    def parse_equation(self) -> Union[Expression, Equation]:
        lhs = self.parse_expr()
        if self._at("="):
            self.update()
            rhs = self.parse_expr()
            return Equation(lhs, rhs)
        return lhs

    def parse_expr(self) -> Expression:
        if self._at("-"):
            # no preceding term, so this minus negates the first term
            self.update()
            first = self.parse_term().multiply(-1)
        else:
            first = self.parse_term()
        return self.parse_expr_rest(first)

    def parse_expr_rest(self, expr: Expression) -> Expression:
        while self._at("+", "-"):
            op = self.current_token.kind
            self.update()
            term = self.parse_term()
            expr = expr.add(term) if op == "+" else expr.subtract(term)
        return expr

    def parse_term(self) -> Expression:
        return self.parse_term_rest(self.parse_factor())

    def parse_term_rest(self, factor: Expression) -> Expression:
        # products recurse to the right, so '^' and '/' apply to the factors since the last product
        if self._at("*"):
            self.update()
            return factor.multiply(self.parse_term_rest(self.parse_factor()))
        if self._at("^"):
            self.update()
            exponent = self._as_rational(self.parse_factor()).reduce()
            if not exponent.is_int():
                raise InvalidArgumentError(f"Invalid Argument ({exponent}): Exponent must be of type Integer.")
            return self.parse_term_rest(factor.pow(exponent.to_int()))
        if self._at("/"):
            self.update()
            divisor = self._as_rational(self.parse_factor())
            return self.parse_term_rest(factor.divide(divisor))
        if self._at("NUM", "ID", "("):
            # implicit multiplication
            return factor.multiply(self.parse_term_rest(self.parse_factor()))
        return factor

    def parse_factor(self) -> Expression:
        tok = self.current_token
        if tok is None:
            raise ParseError(
                f"Missing operand at end of input (position {self._position()})",
                position=self._position(),
            )
        if tok.kind == "NUM":
            return self.parse_number()
        if tok.kind == "ID":
            self.update()
            return Expression.variable(tok.lex)
        if tok.kind == "(":
            self.update()
            inner = self.parse_expr()
            self.match(")")
            return inner
        raise ParseError(f"Missing operand before '{tok.lex}' at position {tok.pos}", position=tok.pos)

    def parse_number(self) -> Expression:
        tok = self.match("NUM")
        return Expression.of(tok.num)

    @staticmethod
    def _as_rational(value: Expression) -> Rational:
        if len(value.terms) > 0:
            raise InvalidArgumentError(f"Invalid Argument ({value}): Divisor must be of type Integer or Fraction")
        return value.constant()


def parse(text: str) -> Union[Expression, Equation]:
    return Parser().parse(text)
