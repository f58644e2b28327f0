"""Exception types raised by the algebra engine.

Two families are kept apart:

- ``AlgebraError`` and its subclasses signal contract violations: a value of
  the wrong type or shape, a zero divisor, malformed input text.
- ``SolverError`` and its subclasses signal legitimate domain outcomes that
  ``Equation.solve_for`` reports by raising (an equation without a solution).
  ``Equation.solve`` returns these outcomes as values instead.
"""

from __future__ import annotations


class AlgebraError(Exception):
    """Base class for contract violations."""

    default_code = "ALGEBRA_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(AlgebraError, TypeError):
    """Raised when an operand is outside its accepted type or shape."""

    default_code = "INVALID_ARGUMENT"


class DivideByZeroError(AlgebraError, ZeroDivisionError):
    """Raised for a zero denominator or a zero divisor."""

    default_code = "DIVIDE_BY_ZERO"

    def __init__(self, message: str = "Divide By Zero", code: str | None = None):
        super().__init__(message, code)


class ParseError(AlgebraError, ValueError):
    """Raised when the lexer or parser rejects its input."""

    default_code = "PARSE_ERROR"

    def __init__(
        self, message: str, position: int | None = None, code: str | None = None
    ):
        self.position = position
        super().__init__(message, code)


class SolverError(Exception):
    """Base class for domain outcomes raised while solving."""

    default_code = "SOLVER_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NoSolutionError(SolverError):
    """Raised by ``solve_for`` when no value satisfies the equation."""

    default_code = "NO_SOLUTION"

    def __init__(self, message: str = "No Solution", code: str | None = None):
        super().__init__(message, code)
