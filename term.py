from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Tuple

from config import DEFAULT_MULTIPLICATION, GREEK_LETTERS
from errors import DivideByZeroError, InvalidArgumentError
from rational import Rational, is_int

if TYPE_CHECKING:
	from expression import Expression


@dataclass(frozen=True)
class Variable:
	name: str
	degree: int = 1
	def __post_init__(self) -> None:
		if not isinstance(self.name, str):
			raise InvalidArgumentError(
				f"Invalid Argument ({self.name}): Variable initalizer must be of type String."
			)
		if not is_int(self.degree):
			raise InvalidArgumentError(f"Invalid Argument ({self.degree}): Degree must be of type Integer.")
	def with_degree(self, degree: int) -> Variable:
		return Variable(self.name, degree)
	def to_string(self) -> str:
		if self.degree == 0:
			return ""
		if self.degree == 1:
			return self.name
		return f"{self.name}^{self.degree}"
	def to_tex(self) -> str:
		name = f"\\{self.name}" if self.name in GREEK_LETTERS else self.name
		if self.degree == 0:
			return ""
		if self.degree == 1:
			return name
		return f"{name}^{{{self.degree}}}"
	def __str__(self) -> str:
		return self.to_string()


@dataclass(frozen=True)
class Term:
	"""A monomial: variable factors times coefficient factors.

	Factors are kept as given until ``simplify()`` collapses them, so that
	unsimplified products such as ``3 * 5x`` or ``xx`` can still be rendered.
	"""
	variables: Tuple[Variable, ...] = ()
	coefficients: Tuple[Rational, ...] = field(default_factory=lambda: (Rational(1, 1),))
	def __post_init__(self) -> None:
		object.__setattr__(self, "variables", tuple(self.variables))
		object.__setattr__(self, "coefficients", tuple(self.coefficients))
		for v in self.variables:
			if not isinstance(v, Variable):
				raise InvalidArgumentError(f"Invalid Argument ({v}): Term initializer must be of type Variable.")
		for c in self.coefficients:
			if not isinstance(c, Rational):
				raise InvalidArgumentError(f"Invalid Argument ({c}): Coefficient must be of type Fraction.")
	@staticmethod
	def of(variable: Variable | None = None) -> Term:
		if variable is None:
			return Term()
		if not isinstance(variable, Variable):
			raise InvalidArgumentError(
				f"Invalid Argument ({variable}): Term initializer must be of type Variable."
			)
		return Term((variable,))
	def coefficient(self) -> Rational:
		result = Rational(1, 1)
		for c in self.coefficients:
			result = result.multiply(c)
		return result
	def simplify(self) -> Term:
		return Term(self.combine_vars().variables, (self.coefficient(),)).sort()
	def combine_vars(self) -> Term:
		# sum degrees per name in order of first appearance, cancelled factors vanish
		degrees: Dict[str, int] = {}
		for v in self.variables:
			degrees[v.name] = degrees.get(v.name, 0) + v.degree
		variables = tuple(Variable(name, d) for name, d in degrees.items() if d != 0)
		return Term(variables, self.coefficients)
	def sort(self) -> Term:
		return Term(tuple(sorted(self.variables, key=lambda v: -v.degree)), self.coefficients)
	def can_be_combined_with(self, other: Term) -> bool:
		return Counter((v.name, v.degree) for v in self.variables) == Counter(
			(v.name, v.degree) for v in other.variables
		)
	def add(self, other: Term) -> Term:
		if isinstance(other, Term) and self.can_be_combined_with(other):
			return Term(self.variables, (self.coefficient().add(other.coefficient()),))
		raise InvalidArgumentError(f"Invalid Argument ({other}): Summand must be a like term.")
	def subtract(self, other: Term) -> Term:
		if isinstance(other, Term) and self.can_be_combined_with(other):
			return Term(self.variables, (self.coefficient().subtract(other.coefficient()),))
		raise InvalidArgumentError(f"Invalid Argument ({other}): Subtrahend must be a like term.")
	def multiply(self, other: Term | Rational | int, simplify: bool = True) -> Term:
		if isinstance(other, Term):
			result = Term(self.variables + other.variables, other.coefficients + self.coefficients)
		elif isinstance(other, Rational) or is_int(other):
			c = other if isinstance(other, Rational) else Rational(other, 1)
			if len(self.variables) == 0:
				result = Term(self.variables, self.coefficients + (c,))
			else:
				result = Term(self.variables, (c,) + self.coefficients)
		else:
			raise InvalidArgumentError(
				f"Invalid Argument ({other}): Multiplicand must be of type Term, Fraction or Integer."
			)
		return result.simplify() if simplify else result
	def divide(self, other: Rational | int, simplify: bool = True) -> Term:
		if not (isinstance(other, Rational) or is_int(other)):
			raise InvalidArgumentError(f"Invalid Argument ({other}): Argument must be of type Fraction or Integer.")
		if other == 0:
			raise DivideByZeroError()
		if simplify:
			return Term(self.variables, (self.coefficient().divide(other),))
		# dividing one factor divides the product
		first = self.coefficients[0].divide(other, False)
		return Term(self.variables, (first,) + self.coefficients[1:])
	def eval(self, values: Dict[str, Any], simplify: bool = True) -> "Expression":
		# Local import to avoid circular dependency at module load time
		from expression import Expression
		exp = Expression.of(1)
		for c in self.coefficients:
			exp = exp.multiply(c, simplify)
		for v in self.variables:
			if v.name in values:
				sub = values[v.name]
				if isinstance(sub, Expression):
					ev = sub.pow(v.degree, simplify)
				elif isinstance(sub, Rational):
					ev = sub.pow(v.degree, simplify)
				elif is_int(sub):
					ev = Rational(sub, 1).pow(v.degree, simplify)
				else:
					raise InvalidArgumentError(
						f"Invalid Argument ({sub}): Can only evaluate Expressions or Fractions."
					)
			else:
				ev = Expression(terms=(Term((v,)),))
			exp = exp.multiply(ev, simplify)
		return exp
	def has_variable(self, name: str) -> bool:
		return any(v.name == name for v in self.variables)
	def only_has_variable(self, name: str) -> bool:
		return all(v.name == name for v in self.variables)
	def variable_names(self) -> set:
		return {v.name for v in self.variables}
	def max_degree(self) -> int:
		# total degree of the monomial
		return sum(v.degree for v in self.variables)
	def max_degree_of_variable(self, name: str) -> int:
		return sum(v.degree for v in self.variables if v.name == name)
	def is_constant(self) -> bool:
		return len(self.variables) == 0
	def to_string(self, implicit: bool = False) -> str:
		s = " * ".join(c.to_string() for c in self.coefficients if not c.is_unit())
		for v in self.variables:
			vs = v.to_string()
			if implicit and s:
				s = f"{s}*{vs}" if vs else s
			else:
				s += vs
		# the sign is rendered by the enclosing expression
		return s[1:] if s.startswith("-") else s
	def to_tex(self, multiplication: str = DEFAULT_MULTIPLICATION) -> str:
		op = f" \\{multiplication} "
		s = op.join(c.to_tex() for c in self.coefficients if not c.is_unit())
		s += "".join(v.to_tex() for v in self.variables)
		if s.startswith("-"):
			s = s[1:]
		elif s.startswith("\\frac{-"):
			s = "\\frac{" + s[len("\\frac{-"):]
		return s
	def __str__(self) -> str:
		return self.to_string()
