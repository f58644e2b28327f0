from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from config import DEFAULT_MULTIPLICATION
from errors import InvalidArgumentError, NoSolutionError
from expression import Expression
from logging_config import get_logger
from rational import Rational, is_int
from solver import ALL_REALS, NO_SOLUTION, ROOTS, UNDEFINED, Solution, solve_cubic, solve_quadratic
from term import Term, Variable

logger = get_logger("equation")

Side = Union[Expression, Rational, int]


@dataclass(frozen=True)
class Equation:
    """``lhs = rhs`` over two Expressions.

    An Equation is never solved in place: ``solve`` returns a Solution outcome
    and ``solve_for`` the bare result (Rational, Expression, list of roots or
    ``None``), raising NoSolutionError when no value satisfies it.
    """

    lhs: Expression
    rhs: Side

    def __post_init__(self):
        if not isinstance(self.lhs, Expression):
            raise InvalidArgumentError(
                f"Invalid Argument ({self.lhs}): Left-hand side must be of type Expression."
            )
        if isinstance(self.rhs, Rational) or is_int(self.rhs):
            object.__setattr__(self, "rhs", Expression.of(self.rhs))
        elif not isinstance(self.rhs, Expression):
            raise InvalidArgumentError(
                f"Invalid Argument ({self.rhs}): Right-hand side must be of type Expression, Fraction or Integer."
            )

    def difference(self) -> Expression:
        """Everything moved to the left: ``lhs - rhs``."""
        return self.lhs.subtract(self.rhs)

    def has_variable(self, name: str) -> bool:
        return self.lhs.has_variable(name) or self.rhs.has_variable(name)

    def max_degree(self) -> int:
        return max(self.lhs.max_degree(), self.rhs.max_degree())

    def max_degree_of_variable(self, name: str) -> int:
        return max(self.lhs.max_degree_of_variable(name), self.rhs.max_degree_of_variable(name))

    def has_no_cross_products(self) -> bool:
        return self.lhs.has_no_cross_products() and self.rhs.has_no_cross_products()

    def has_no_cross_products_with_variable(self, name: str) -> bool:
        return (
            self.lhs.has_no_cross_products_with_variable(name)
            and self.rhs.has_no_cross_products_with_variable(name)
        )

    def has_only_variable(self, name: str) -> bool:
        return self.lhs.has_only_variable(name) and self.rhs.has_only_variable(name)

    def is_linear(self) -> bool:
        return self.max_degree() == 1 and self.has_no_cross_products()

    def can_variable_be_isolated(self, name: str) -> bool:
        return self.max_degree_of_variable(name) == 1 and self.has_no_cross_products_with_variable(name)

    def is_quadratic(self, name: str) -> bool:
        diff = self.difference()
        return diff.has_only_variable(name) and diff.max_degree() == 2

    def is_cubic(self, name: str) -> bool:
        diff = self.difference()
        return diff.has_only_variable(name) and diff.max_degree() == 3

    def solve(self, variable: str) -> Solution:
        """Solve for ``variable`` and report the outcome as a Solution.

        Linear equations and equations where ``variable`` appears with degree
        one outside any cross product are rearranged symbolically. Otherwise
        ``lhs - rhs`` is solved as a quadratic or cubic when it is a polynomial
        in ``variable`` alone; any other shape is ``undefined``.

        Raises:
            InvalidArgumentError: ``variable`` does not occur in the equation
        """
        if not self.has_variable(variable):
            raise InvalidArgumentError(f"Invalid Argument ({variable}): Variable does not exist in the equation.")

        if self.is_linear() or self.can_variable_be_isolated(variable):
            logger.debug("isolating %s in %s", variable, self)
            return self._solve_isolated(variable)
        return self._solve_by_degree(variable)

    def _solve_isolated(self, variable: str) -> Solution:
        solving_for = Term.of(Variable(variable))
        new_lhs = Expression()
        new_rhs = Expression()

        for term in self.rhs.terms:
            if term.can_be_combined_with(solving_for):
                new_lhs = new_lhs.subtract(term)
            else:
                new_rhs = new_rhs.add(term)
        for term in self.lhs.terms:
            if term.can_be_combined_with(solving_for):
                new_lhs = new_lhs.add(term)
            else:
                new_rhs = new_rhs.subtract(term)

        new_rhs = new_rhs.subtract(self.lhs.constant()).add(self.rhs.constant())

        if len(new_lhs.terms) == 0:
            if new_rhs.constant() == new_lhs.constant():
                return Solution.all_reals(variable, isolated=True)
            return Solution.no_solution(variable, isolated=True)

        new_rhs = new_rhs.divide(new_lhs.terms[0].coefficient())
        if len(new_rhs.terms) == 0:
            return Solution.of_value(variable, new_rhs.constant().reduce())
        return Solution.of_value(variable, new_rhs.sort())

    def _solve_by_degree(self, variable: str) -> Solution:
        diff = self.difference()

        if len(diff.terms) == 0:
            if diff.constant().is_zero():
                return Solution.all_reals(variable)
            return Solution.no_solution(variable)

        if not diff.has_only_variable(variable):
            logger.debug("%s has other variables than %s, leaving unsolved", diff, variable)
            return Solution.undefined(variable)

        degree = diff.max_degree()
        if degree == 2:
            logger.debug("solving %s = 0 as a quadratic in %s", diff, variable)
            return Solution.of_roots(variable, solve_quadratic(*diff.quadratic_coefficients()))
        if degree == 3:
            logger.debug("solving %s = 0 as a cubic in %s", diff, variable)
            return Solution.of_roots(variable, solve_cubic(*diff.cubic_coefficients()))

        logger.debug("degree %d of %s is not supported", degree, diff)
        return Solution.undefined(variable)

    def solve_for(self, variable: str) -> Union[Rational, Expression, List[Any], None]:
        """Solve for ``variable``, returning the bare result.

        Returns the Rational or Expression value of an isolated variable,
        ``Rational(1)`` when every value satisfies a rearranged equation, the
        list of real roots of a quadratic or cubic (``[Rational(1)]`` when the
        difference vanishes), or ``None`` for an unsupported shape.

        Raises:
            InvalidArgumentError: ``variable`` does not occur in the equation
            NoSolutionError: no value satisfies the equation
        """
        solution = self.solve(variable)
        if solution.kind == NO_SOLUTION:
            raise NoSolutionError()
        if solution.kind == ALL_REALS:
            return Rational(1, 1) if solution.isolated else [Rational(1, 1)]
        if solution.kind == ROOTS:
            return solution.roots
        if solution.kind == UNDEFINED:
            return None
        return solution.value

    def eval(self, values: Dict[str, Any], simplify: bool = True) -> "Equation":
        return Equation(self.lhs.eval(values, simplify), self.rhs.eval(values, simplify))

    def to_string(self, implicit: bool = False) -> str:
        return f"{self.lhs.to_string(implicit)} = {self.rhs.to_string(implicit)}"

    def to_tex(self, multiplication: str = DEFAULT_MULTIPLICATION) -> str:
        return f"{self.lhs.to_tex(multiplication)} = {self.rhs.to_tex(multiplication)}"

    def __str__(self) -> str:
        return self.to_string()
