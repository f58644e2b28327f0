from __future__ import annotations
from dataclasses import dataclass

from errors import InvalidArgumentError
from expression import Expression
from rational import Rational, is_int


def _as_rational(value: Rational | int, role: str) -> Rational:
    if isinstance(value, Rational):
        return value
    if is_int(value):
        return Rational(value, 1)
    raise InvalidArgumentError(f"Invalid Argument ({value}): {role} must be of type Fraction or Integer.")


@dataclass(frozen=True)
class Complex:
    """``real + imaginary * i`` with exact Rational parts."""

    real: Rational
    imaginary: Rational

    def __post_init__(self):
        object.__setattr__(self, "real", _as_rational(self.real, "Real part"))
        object.__setattr__(self, "imaginary", _as_rational(self.imaginary, "Imaginary part"))

    @staticmethod
    def _operand(value: "Complex" | Rational | int) -> "Complex":
        if isinstance(value, Complex):
            return value
        if isinstance(value, Rational) or is_int(value):
            return Complex(value, 0)
        raise InvalidArgumentError(f"Invalid Argument ({value}): Operand must be of type Complex, Fraction or Integer.")

    def add(self, other: "Complex" | Rational | int) -> "Complex":
        o = self._operand(other)
        return Complex(self.real.add(o.real), self.imaginary.add(o.imaginary))

    def subtract(self, other: "Complex" | Rational | int) -> "Complex":
        o = self._operand(other)
        return Complex(self.real.subtract(o.real), self.imaginary.subtract(o.imaginary))

    def multiply(self, other: "Complex" | Rational | int) -> "Complex":
        o = self._operand(other)
        # expand (a + bi)(c + di) as a polynomial in i, then apply i^2 = -1
        first = Expression.variable("i").multiply(self.imaginary).add(self.real)
        second = Expression.variable("i").multiply(o.imaginary).add(o.real)
        i2, i1, constant = first.multiply(second).quadratic_coefficients()
        return Complex(constant.subtract(i2), i1)

    def conjugate(self) -> "Complex":
        return Complex(self.real, self.imaginary.multiply(-1))

    def divide(self, other: "Complex" | Rational | int) -> "Complex":
        o = self._operand(other)
        # |o|^2 is zero only for a zero divisor, Rational.divide raises then
        norm = o.multiply(o.conjugate()).real
        numerator = self.multiply(o.conjugate())
        return Complex(numerator.real.divide(norm), numerator.imaginary.divide(norm))

    def to_string(self) -> str:
        if self.imaginary.is_zero():
            return self.real.to_string()
        imaginary = "i" if self.imaginary.abs().is_unit() else f"{self.imaginary.abs().to_string()}i"
        if self.real.is_zero():
            return f"-{imaginary}" if self.imaginary.is_negative() else imaginary
        sign = "-" if self.imaginary.is_negative() else "+"
        return f"{self.real.to_string()} {sign} {imaginary}"

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __str__(self) -> str:
        return self.to_string()
