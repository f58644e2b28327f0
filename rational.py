from __future__ import annotations
from fractions import Fraction
from math import gcd, isqrt

from errors import DivideByZeroError, InvalidArgumentError


def is_int(value: object) -> bool:
	return isinstance(value, int) and not isinstance(value, bool)


def _icbrt(n: int) -> int:
	# floor of the real cube root of a non-negative integer
	if n < 2:
		return n
	x = 1 << ((n.bit_length() + 2) // 3)
	while True:
		y = (2 * x + n // (x * x)) // 3
		if y >= x:
			return x
		x = y


class Rational:
	"""Exact fraction of two integers.

	The stored pair is only canonical after ``reduce()``; arithmetic reduces by
	default and keeps the raw pair when called with ``simplify=False``.
	"""
	__slots__ = ("_num", "_den")
	def __init__(self, num: int | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction) and den is None:
			num, den = num.numerator, num.denominator
		if den is None:
			den = 1
		if not is_int(num) or not is_int(den):
			raise InvalidArgumentError(
				f"Invalid Argument ({num}, {den}): Divisor and dividend must be of type Integer."
			)
		if den == 0:
			raise DivideByZeroError()
		self._num = num
		self._den = den
	def numerator(self) -> int:
		return self._num
	def denominator(self) -> int:
		return self._den
	def reduce(self) -> Rational:
		if self._num == 0:
			return Rational(0, 1)
		g = gcd(self._num, self._den)
		num, den = self._num // g, self._den // g
		if den < 0:
			num, den = -num, -den
		return Rational(num, den)
	@staticmethod
	def _operand(value: Rational | int, role: str) -> tuple[int, int]:
		if isinstance(value, Rational):
			return value._num, value._den
		if is_int(value):
			return value, 1
		raise InvalidArgumentError(
			f"Invalid Argument ({value}): {role} must be of type Fraction or Integer."
		)
	def add(self, other: Rational | int, simplify: bool = True) -> Rational:
		a, b = self._operand(other, "Summand")
		if self._den == b:
			result = Rational(self._num + a, b)
		else:
			# scale both sides to the least common multiple of the denominators
			m = self._den * b // gcd(self._den, b)
			result = Rational(self._num * (m // self._den) + a * (m // b), m)
		return result.reduce() if simplify else result
	def subtract(self, other: Rational | int, simplify: bool = True) -> Rational:
		a, b = self._operand(other, "Subtrahend")
		return self.add(Rational(-a, b), simplify)
	def multiply(self, other: Rational | int, simplify: bool = True) -> Rational:
		a, b = self._operand(other, "Multiplicand")
		result = Rational(self._num * a, self._den * b)
		return result.reduce() if simplify else result
	def divide(self, other: Rational | int, simplify: bool = True) -> Rational:
		a, b = self._operand(other, "Divisor")
		if a == 0:
			raise DivideByZeroError()
		return self.multiply(Rational(b, a), simplify)
	def pow(self, exp: int, simplify: bool = True) -> Rational:
		if not is_int(exp):
			raise InvalidArgumentError(f"Invalid Argument ({exp}): Exponent must be of type Integer.")
		if exp >= 0:
			result = Rational(self._num ** exp, self._den ** exp)
		else:
			if self._num == 0:
				raise DivideByZeroError()
			result = Rational(self._den ** -exp, self._num ** -exp)
		return result.reduce() if simplify else result
	def abs(self) -> Rational:
		return Rational(abs(self._num), abs(self._den))
	def __add__(self, other: Rational | int) -> Rational:
		return self.add(other)
	def __radd__(self, other: int) -> Rational:
		return self.add(other)
	def __sub__(self, other: Rational | int) -> Rational:
		return self.subtract(other)
	def __rsub__(self, other: int) -> Rational:
		return Rational(other).subtract(self)
	def __mul__(self, other: Rational | int) -> Rational:
		return self.multiply(other)
	def __rmul__(self, other: int) -> Rational:
		return self.multiply(other)
	def __truediv__(self, other: Rational | int) -> Rational:
		return self.divide(other)
	def __rtruediv__(self, other: int) -> Rational:
		return Rational(other).divide(self)
	def __neg__(self) -> Rational:
		return Rational(-self._num, self._den)
	def __pow__(self, exp: int) -> Rational:
		return self.pow(exp)
	def __abs__(self) -> Rational:
		return self.abs().reduce()
	def to_fraction(self) -> Fraction:
		return Fraction(self._num, self._den)
	def __float__(self) -> float:
		return self._num / self._den
	def __eq__(self, other: object) -> bool:
		if is_int(other):
			other = Rational(other)
		if not isinstance(other, Rational):
			return False
		a, b = self.reduce(), other.reduce()
		return a._num == b._num and a._den == b._den
	def __hash__(self) -> int:
		r = self.reduce()
		return hash(Fraction(r._num, r._den))
	def __lt__(self, other: Rational | int) -> bool:
		return self.to_fraction() < Rational(*self._operand(other, "Operand")).to_fraction()
	def __le__(self, other: Rational | int) -> bool:
		return self.to_fraction() <= Rational(*self._operand(other, "Operand")).to_fraction()
	def __gt__(self, other: Rational | int) -> bool:
		return self.to_fraction() > Rational(*self._operand(other, "Operand")).to_fraction()
	def __ge__(self, other: Rational | int) -> bool:
		return self.to_fraction() >= Rational(*self._operand(other, "Operand")).to_fraction()
	def is_zero(self) -> bool:
		return self._num == 0
	def is_negative(self) -> bool:
		return (self._num < 0) != (self._den < 0) and self._num != 0
	def is_int(self) -> bool:
		return self._num % self._den == 0
	def to_int(self) -> int:
		r = self.reduce()
		return r._num // r._den
	def is_unit(self) -> bool:
		# structural check, an unreduced 2/2 is not a unit
		return abs(self._num) == 1 and abs(self._den) == 1
	def is_square_root_rational(self) -> bool:
		# numerator and denominator are tested independently, without reducing
		if self._num == 0:
			return True
		if self._num < 0 or self._den < 0:
			return False
		return isqrt(self._num) ** 2 == self._num and isqrt(self._den) ** 2 == self._den
	def is_cube_root_rational(self) -> bool:
		if self._num == 0:
			return True
		num, den = abs(self._num), abs(self._den)
		return _icbrt(num) ** 3 == num and _icbrt(den) ** 3 == den
	def sqrt(self) -> Rational:
		if not self.is_square_root_rational():
			raise InvalidArgumentError(f"Invalid Argument ({self}): Square root is not rational.")
		return Rational(isqrt(self._num), isqrt(self._den))
	def to_string(self) -> str:
		if self._num == 0:
			return "0"
		if self._den == 1:
			return str(self._num)
		if self._den == -1:
			return str(-self._num)
		return f"{self._num}/{self._den}"
	def to_tex(self) -> str:
		if self._num == 0:
			return "0"
		if self._den == 1:
			return str(self._num)
		if self._den == -1:
			return str(-self._num)
		return f"\\frac{{{self._num}}}{{{self._den}}}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self._num}, {self._den})"
