from __future__ import annotations
from typing import Any, Dict, Union

from config import DEFAULT_MULTIPLICATION
from equation import Equation
from errors import InvalidArgumentError
from expression import Expression
from parser import Parser
from rational import Rational, is_int
from solver import ROOTS, VALUE, Solution, format_root

Parsed = Union[Expression, Equation]
Renderable = Union[Rational, Expression, Equation, Solution, list, tuple, int, float]


class CAS:
    """Entry point tying the parser, the solver and the renderers together.

    Rendering options given here become the defaults of ``to_tex`` and
    ``to_display``.
    """

    def __init__(self, multiplication: str = DEFAULT_MULTIPLICATION, implicit: bool = False) -> None:
        self.multiplication = multiplication
        self.implicit = implicit
        self._parser = Parser()

    def parse(self, expr: str) -> Parsed:
        return self._parser.parse(expr)

    def _as_parsed(self, expr: Any) -> Parsed:
        if isinstance(expr, str):
            return self.parse(expr)
        if isinstance(expr, (Expression, Equation)):
            return expr
        raise InvalidArgumentError(f"Invalid Argument ({expr}): Cannot handle value of type {type(expr).__name__}.")

    def solve(self, expr: Any, var: str) -> Solution:
        """Solve an equation for variable var.

        Args:
            expr: Equation text, Equation, or Expression (solved as expr = 0)
            var: Variable to solve for

        Returns:
            The Solution outcome
        """
        parsed = self._as_parsed(expr)
        if isinstance(parsed, Expression):
            parsed = Equation(parsed, 0)
        return parsed.solve(var)

    def eval(self, expr: Any, env: Dict[str, Any] | None = None) -> Parsed:
        return self._as_parsed(expr).eval(env or {})

    def simplify(self, expr: str) -> str:
        return self.to_display(self._as_parsed(expr))

    def to_tex(self, value: Renderable, multiplication: str | None = None) -> str:
        multiplication = multiplication or self.multiplication
        if isinstance(value, Solution):
            value = self._solution_value(value)
        if isinstance(value, (list, tuple)):
            return ",".join(self.to_tex(v, multiplication) for v in value)
        if isinstance(value, (Expression, Equation)):
            return value.to_tex(multiplication)
        if isinstance(value, Rational):
            return value.to_tex()
        return self._render_number(value)

    def to_display(self, value: Renderable, implicit: bool | None = None) -> str:
        implicit = self.implicit if implicit is None else implicit
        if isinstance(value, Solution):
            value = self._solution_value(value)
        if isinstance(value, (list, tuple)):
            return ",".join(self.to_display(v, implicit) for v in value)
        if isinstance(value, (Expression, Equation)):
            return value.to_string(implicit)
        if isinstance(value, Rational):
            return value.to_string()
        return self._render_number(value)

    @staticmethod
    def _solution_value(solution: Solution) -> Any:
        if solution.kind == ROOTS:
            return solution.roots
        if solution.kind == VALUE:
            return solution.value
        return str(solution)

    @staticmethod
    def _render_number(value: Any) -> str:
        if isinstance(value, str):
            return value
        if is_int(value) or isinstance(value, float):
            return format_root(value)
        raise InvalidArgumentError(f"Invalid Argument ({value}): Cannot render value of type {type(value).__name__}.")


# Create a default instance for module-level use
_default_cas = CAS()

def parse(expr: str) -> Parsed:
    return _default_cas.parse(expr)

def solve(expr: Any, var: str) -> Solution:
    return _default_cas.solve(expr, var)

def to_tex(value: Renderable, multiplication: str = DEFAULT_MULTIPLICATION) -> str:
    return _default_cas.to_tex(value, multiplication)

def to_display(value: Renderable, implicit: bool = False) -> str:
    return _default_cas.to_display(value, implicit)
