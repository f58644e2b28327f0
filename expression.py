from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from config import DEFAULT_MULTIPLICATION
from errors import DivideByZeroError, InvalidArgumentError
from rational import Rational, is_int
from term import Term, Variable

# Everything an arithmetic operation accepts as its right operand
Operand = Union["Expression", Term, Rational, int, str]


def _sort_key(term: Term) -> Tuple[int, int]:
    return (-term.max_degree(), -len(term.variables))


@dataclass(frozen=True)
class Expression:
    """A sum of terms plus a sum of constants.

    Operations never mutate ``self``; each returns a new Expression. Passing
    ``simplify=False`` keeps the raw, uncombined result so that intermediate
    forms can be inspected or rendered.
    """

    terms: Tuple[Term, ...] = ()
    constants: Tuple[Rational, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms))
        object.__setattr__(self, "constants", tuple(self.constants))

    @staticmethod
    def variable(name: str) -> "Expression":
        return Expression(terms=(Term.of(Variable(name)),))

    @staticmethod
    def of(value: Operand | None = None) -> "Expression":
        """Coerce an operand into an Expression.

        Strings become variables, integers and Rationals constants, a Term a
        one-term expression. Any other value (floats included) is rejected.
        """
        if value is None:
            return Expression()
        if isinstance(value, Expression):
            return value
        if isinstance(value, str):
            return Expression.variable(value)
        if isinstance(value, Term):
            return Expression(terms=(value,))
        if isinstance(value, Rational):
            return Expression(constants=(value,))
        if is_int(value):
            return Expression(constants=(Rational(value, 1),))
        raise InvalidArgumentError(
            f"Invalid Argument ({value}): Argument must be of type String, Expression, Term, Fraction or Integer."
        )

    def constant(self) -> Rational:
        total = Rational(0, 1)
        for c in self.constants:
            total = total.add(c)
        return total

    def simplify(self) -> "Expression":
        terms = sorted((t.simplify() for t in self.terms), key=_sort_key)
        terms = self._combine_like_terms(terms)
        constant = self.constant()
        kept: List[Term] = []
        for t in terms:
            if t.is_constant():
                constant = constant.add(t.coefficient())
            elif not t.coefficient().is_zero():
                kept.append(t)
        return Expression(tuple(kept), () if constant.is_zero() else (constant,))

    @staticmethod
    def _combine_like_terms(terms: List[Term]) -> List[Term]:
        combined: List[Term] = []
        for i, term in enumerate(terms):
            if any(term.can_be_combined_with(seen) for seen in combined):
                continue
            acc = term
            for other in terms[i + 1:]:
                if acc.can_be_combined_with(other):
                    acc = acc.add(other)
            combined.append(acc)
        return combined

    def sort(self) -> "Expression":
        return Expression(tuple(sorted(self.terms, key=_sort_key)), self.constants)

    def add(self, a: Operand, simplify: bool = True) -> "Expression":
        other = Expression.of(a)
        result = Expression(self.terms + other.terms, self.constants + other.constants).sort()
        return result.simplify() if simplify else result

    def subtract(self, a: Operand, simplify: bool = True) -> "Expression":
        negative = Expression.of(a).multiply(-1, simplify)
        return self.add(negative, simplify)

    def multiply(self, a: Operand, simplify: bool = True) -> "Expression":
        other = Expression.of(a)
        products: List[Term] = []
        for this_term in self.terms:
            for that_term in other.terms:
                products.append(this_term.multiply(that_term, simplify))
            for that_const in other.constants:
                products.append(this_term.multiply(that_const, simplify))
        for that_term in other.terms:
            for this_const in self.constants:
                products.append(that_term.multiply(this_const, simplify))
        # constant products are kept as variable-free terms until simplify moves them
        for this_const in self.constants:
            for that_const in other.constants:
                t = Term().multiply(that_const, False).multiply(this_const, False)
                products.append(t)
        result = Expression(tuple(products)).sort()
        return result.simplify() if simplify else result

    def divide(self, a: Operand, simplify: bool = True) -> "Expression":
        if isinstance(a, Rational) or is_int(a):
            if a == 0:
                raise DivideByZeroError()
            return Expression(
                tuple(t.divide(a, simplify) for t in self.terms),
                tuple(c.divide(a, simplify) for c in self.constants),
            )
        return self._divide_monomial(Expression.of(a), simplify)

    def _divide_monomial(self, a: "Expression", simplify: bool) -> "Expression":
        num = self.simplify()
        den = a.simplify()
        if len(den.terms) == 0 and len(den.constants) == 0:
            raise DivideByZeroError()
        if len(num.terms) + len(num.constants) != 1 or len(den.terms) + len(den.constants) != 1:
            raise InvalidArgumentError(
                f"Invalid Argument (({num})/({den})): Only monomial expressions can be divided."
            )
        num_term = num.terms[0] if num.terms else Term((), (num.constants[0],))
        den_term = den.terms[0] if den.terms else Term((), (den.constants[0],))
        coefficient = num_term.coefficient().divide(den_term.coefficient(), simplify)

        # cancel shared variables by the rule for division of powers
        num_vars = list(num_term.variables)
        den_vars = list(den_term.variables)
        for i, nv in enumerate(num_vars):
            for j, dv in enumerate(den_vars):
                if nv.name == dv.name:
                    num_vars[i] = nv.with_degree(nv.degree - dv.degree)
                    den_vars[j] = dv.with_degree(0)
        inverted = Term(tuple(v.with_degree(-v.degree) for v in den_vars), (Rational(1, 1),))
        quotient = Expression(terms=(Term(tuple(num_vars), (coefficient,)),))
        return quotient.multiply(Expression(terms=(inverted,)), simplify)

    def pow(self, exp: int, simplify: bool = True) -> "Expression":
        if not is_int(exp) or exp < 0:
            raise InvalidArgumentError(f"Invalid Argument ({exp}): Exponent must be a non-negative Integer.")
        if exp == 0:
            return Expression.of(1)
        result = self
        for _ in range(exp - 1):
            result = result.multiply(self, simplify)
        result = result.sort()
        return result.simplify() if simplify else result

    def eval(self, values: Dict[str, Any], simplify: bool = True) -> "Expression":
        result = Expression(constants=(self.constant(),) if simplify else self.constants)
        for t in self.terms:
            result = result.add(t.eval(values, simplify), simplify)
        return result

    def summation(self, variable: str, lower: int, upper: int, simplify: bool = True) -> "Expression":
        """Sum ``self`` evaluated at every integer ``variable`` in ``[lower, upper]``."""
        total = Expression()
        for i in range(lower, upper + 1):
            total = total.add(self.eval({variable: i}, simplify), simplify)
        return total

    def has_variable(self, name: str) -> bool:
        return any(t.has_variable(name) for t in self.terms)

    def has_only_variable(self, name: str) -> bool:
        return all(t.only_has_variable(name) for t in self.terms)

    def has_no_cross_products_with_variable(self, name: str) -> bool:
        return not any(t.has_variable(name) and not t.only_has_variable(name) for t in self.terms)

    def has_no_cross_products(self) -> bool:
        return all(len(t.variable_names()) <= 1 for t in self.terms)

    def max_degree(self) -> int:
        return max([1] + [t.max_degree() for t in self.terms])

    def max_degree_of_variable(self, name: str) -> int:
        return max([1] + [t.max_degree_of_variable(name) for t in self.terms])

    def _coefficients_by_degree(self, degree: int) -> List[Rational]:
        # Only meaningful once everything sits on one side of an equation
        coeffs = [Rational(0, 1)] * (degree + 1)
        for t in self.terms:
            d = t.max_degree()
            if 1 <= d <= degree:
                coeffs[degree - d] = t.coefficient()
        coeffs[degree] = self.constant()
        return coeffs

    def quadratic_coefficients(self) -> Tuple[Rational, Rational, Rational]:
        a, b, c = self._coefficients_by_degree(2)
        return a, b, c

    def cubic_coefficients(self) -> Tuple[Rational, Rational, Rational, Rational]:
        a, b, c, d = self._coefficients_by_degree(3)
        return a, b, c, d

    def _render(self, terms: List[str], constants: List[str]) -> str:
        s = "".join(terms) + "".join(constants)
        if s.startswith(" - "):
            return f"-{s[3:]}"
        if s.startswith(" + "):
            return s[3:]
        return "0"

    def to_string(self, implicit: bool = False) -> str:
        return self._render(
            [(" - " if t.coefficients[0].is_negative() else " + ") + t.to_string(implicit) for t in self.terms],
            [(" - " if c.is_negative() else " + ") + c.abs().to_string() for c in self.constants],
        )

    def to_tex(self, multiplication: str = DEFAULT_MULTIPLICATION) -> str:
        return self._render(
            [(" - " if t.coefficients[0].is_negative() else " + ") + t.to_tex(multiplication) for t in self.terms],
            [(" - " if c.is_negative() else " + ") + c.abs().to_tex() for c in self.constants],
        )

    def __add__(self, rhs: Operand) -> "Expression":
        return self.add(rhs)

    def __radd__(self, lhs: Operand) -> "Expression":
        return Expression.of(lhs).add(self)

    def __sub__(self, rhs: Operand) -> "Expression":
        return self.subtract(rhs)

    def __rsub__(self, lhs: Operand) -> "Expression":
        return Expression.of(lhs).subtract(self)

    def __mul__(self, rhs: Operand) -> "Expression":
        return self.multiply(rhs)

    def __rmul__(self, lhs: Operand) -> "Expression":
        return Expression.of(lhs).multiply(self)

    def __truediv__(self, rhs: Operand) -> "Expression":
        return self.divide(rhs)

    def __pow__(self, exp: int) -> "Expression":
        return self.pow(exp)

    def __neg__(self) -> "Expression":
        return self.multiply(-1)

    def __str__(self) -> str:
        return self.to_string()
