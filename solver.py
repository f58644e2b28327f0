"""
Symbolic Solver Module

This module provides the closed-form root formulas used by Equation.solve:
quadratics through the discriminant, cubics through the classical
discriminant, Cardano's formula and the trigonometric method. Roots stay
exact Rationals whenever the formulas allow it and fall back to floats
otherwise.
"""
from __future__ import annotations
from typing import List, Union, Optional
from dataclasses import dataclass, field
import math

import numpy as np

from config import SNAP_TOLERANCE
from logging_config import get_logger
from rational import Rational

logger = get_logger("solver")

Root = Union[Rational, float]

VALUE = "value"
ROOTS = "roots"
ALL_REALS = "all_reals"
NO_SOLUTION = "no_solution"
UNDEFINED = "undefined"


@dataclass
class Solution:
    """Outcome of solving an equation for one variable.

    ``kind`` tells callers which branch they are in:

    - ``value``: ``value`` holds a Rational, or an Expression in the other
      variables when the target was isolated symbolically.
    - ``roots``: ``roots`` holds the real roots of a quadratic or cubic; an
      empty list means there are no real roots.
    - ``all_reals``: every value satisfies the equation.
    - ``no_solution``: no value satisfies the equation.
    - ``undefined``: the equation's shape is outside what the solver handles.
    """
    variable: str
    kind: str
    value: Optional[object] = None
    roots: List[Root] = field(default_factory=list)
    isolated: bool = False

    def __str__(self) -> str:
        if self.kind == ALL_REALS:
            return f"{self.variable} ∈ ℝ"
        if self.kind == NO_SOLUTION:
            return "No solution"
        if self.kind == UNDEFINED:
            return f"{self.variable} = ?"
        if self.kind == ROOTS:
            if not self.roots:
                return "No real roots"
            return ", ".join(f"{self.variable} = {format_root(r)}" for r in self.roots)
        return f"{self.variable} = {self.value}"

    @property
    def is_solved(self) -> bool:
        return self.kind in (VALUE, ROOTS)

    @staticmethod
    def of_value(var: str, value: object) -> "Solution":
        return Solution(var, VALUE, value=value, isolated=True)

    @staticmethod
    def of_roots(var: str, roots: List[Root]) -> "Solution":
        return Solution(var, ROOTS, roots=list(roots))

    @staticmethod
    def all_reals(var: str, isolated: bool = False) -> "Solution":
        """Represents infinitely many solutions."""
        return Solution(var, ALL_REALS, isolated=isolated)

    @staticmethod
    def no_solution(var: str, isolated: bool = False) -> "Solution":
        """Represents no solution."""
        return Solution(var, NO_SOLUTION, isolated=isolated)

    @staticmethod
    def undefined(var: str) -> "Solution":
        return Solution(var, UNDEFINED)


def format_root(root: object) -> str:
    """Render a root, dropping the ``.0`` of integral floats."""
    if isinstance(root, float) and root.is_integer():
        return str(int(root))
    return str(root)


def snap_to_integer(root: float, tolerance: float = SNAP_TOLERANCE, guide: Optional[float] = None) -> float:
    """
    Absorb floating error on roots that should be integers.

    A negative root snaps down to its floor, a positive root up to its
    ceiling, when it lies within ``tolerance`` of it. ``guide`` selects the
    negative branch by another root's sign, which is how the third root of the
    trigonometric cubic method has always been corrected.

    Args:
        root: Root to correct
        tolerance: Maximal distance to the integer
        guide: Value whose sign selects the negative branch (defaults to root)

    Returns:
        The corrected root as a float
    """
    sign_of = root if guide is None else guide
    if sign_of < 0:
        floor = math.floor(root)
        if root - floor < tolerance:
            return float(floor)
    elif root > 0:
        ceil = math.ceil(root)
        if ceil - root < tolerance:
            return float(ceil)
    return root


class SymbolicSolver:
    """Closed-form solver for quadratic and cubic polynomials."""

    def __init__(self, snap_tolerance: float = SNAP_TOLERANCE) -> None:
        self.snap_tolerance = snap_tolerance

    def solve_quadratic(self, a: Rational, b: Rational, c: Rational) -> List[Root]:
        """
        Solve quadratic equation: ax² + bx + c = 0

        Uses the quadratic formula x = (-b ± √(b² - 4ac)) / 2a with the
        discriminant computed exactly.

        Args:
            a: Coefficient of x², non-zero
            b: Coefficient of x
            c: Constant term

        Returns:
            [] when there are no real roots, one reduced Rational for a double
            root, otherwise two roots ordered (-b - √Δ)/2a, (-b + √Δ)/2a, exact
            when √Δ is rational and floats when it is not
        """
        discriminant = b.pow(2).subtract(a.multiply(c).multiply(4))

        if discriminant.is_negative():
            return []

        two_a = a.multiply(2)
        neg_b = b.multiply(-1)

        if discriminant.is_zero():
            return [neg_b.divide(two_a).reduce()]

        if discriminant.is_square_root_rational():
            sqrt_disc = discriminant.sqrt()
            root1 = neg_b.subtract(sqrt_disc).divide(two_a)
            root2 = neg_b.add(sqrt_disc).divide(two_a)
            return [root1.reduce(), root2.reduce()]

        # Irrational roots
        logger.debug("discriminant %s has no rational root, using floats", discriminant)
        sqrt_disc = np.sqrt(float(discriminant))
        fa, fb = float(a), float(b)
        root1 = (-fb - sqrt_disc) / (2 * fa)
        root2 = (-fb + sqrt_disc) / (2 * fa)
        return [float(root1), float(root2)]

    def cubic_discriminants(self, a: Rational, b: Rational, c: Rational, d: Rational) -> tuple[Rational, Rational]:
        """
        Compute D = 18abcd - 4b³d + b²c² - 4ac³ - 27a²d² and D0 = b² - 3ac.
        """
        D = a.multiply(b).multiply(c).multiply(d).multiply(18)
        D = D.subtract(b.pow(3).multiply(d).multiply(4))
        D = D.add(b.pow(2).multiply(c.pow(2)))
        D = D.subtract(a.multiply(c.pow(3)).multiply(4))
        D = D.subtract(a.pow(2).multiply(d.pow(2)).multiply(27))

        D0 = b.pow(2).subtract(a.multiply(c).multiply(3))
        return D, D0

    def solve_cubic(self, a: Rational, b: Rational, c: Rational, d: Rational) -> List[Root]:
        """
        Solve cubic equation: ax³ + bx² + cx + d = 0

        When the discriminant D vanishes the repeated roots are exact. Otherwise
        the equation is reduced to the depressed cubic t³ + ft + g = 0 and
        solved in floating point: Cardano's formula when only one root is real
        (h > 0), the trigonometric method when all three are (h <= 0).

        Args:
            a: Coefficient of x³, non-zero
            b: Coefficient of x²
            c: Coefficient of x
            d: Constant term

        Returns:
            List of real roots; three float roots are sorted ascending
        """
        D, D0 = self.cubic_discriminants(a, b, c, d)

        if D.is_zero():
            # One distinct real root: -b / 3a
            if D0.is_zero():
                return [b.multiply(-1).divide(a.multiply(3)).reduce()]

            # Two distinct real roots
            # (4abc - 9a²d - b³) / aD0 and (9ad - bc) / 2D0
            root1 = a.multiply(b).multiply(c).multiply(4)
            root1 = root1.subtract(a.pow(2).multiply(d).multiply(9))
            root1 = root1.subtract(b.pow(3))
            root1 = root1.divide(a.multiply(D0))

            root2 = a.multiply(d).multiply(9).subtract(b.multiply(c)).divide(D0.multiply(2))
            return [root1.reduce(), root2.reduce()]

        fa, fb, fc, fd = float(a), float(b), float(c), float(d)
        f = (3 * (fc / fa) - fb ** 2 / fa ** 2) / 3
        g = (2 * fb ** 3) / fa ** 3
        g -= (9 * fb * fc) / fa ** 2
        g += (27 * fd) / fa
        g /= 27
        h = g ** 2 / 4 + f ** 3 / 27
        shift = fb / (3 * fa)

        if h > 0:
            logger.debug("cubic has one real root (h=%g)", h)
            R = -(g / 2) + np.sqrt(h)
            S = np.cbrt(R)
            T = -(g / 2) - np.sqrt(h)
            U = np.cbrt(T)
            root1 = float(S + U - shift)
            return [snap_to_integer(root1, self.snap_tolerance)]

        logger.debug("cubic has three real roots (h=%g)", h)
        i = np.sqrt(g ** 2 / 4 - h)
        j = np.cbrt(i)
        # rounding can push the cosine argument just outside [-1, 1]
        k = np.arccos(np.clip(-(g / (2 * i)), -1.0, 1.0))
        L = -j
        M = np.cos(k / 3)
        N = np.sqrt(3) * np.sin(k / 3)
        P = -shift

        root1 = snap_to_integer(float(2 * j * np.cos(k / 3) - shift), self.snap_tolerance)
        root2 = snap_to_integer(float(L * (M + N) + P), self.snap_tolerance)
        root3 = snap_to_integer(float(L * (M - N) + P), self.snap_tolerance, guide=root1)

        return sorted([root1, root2, root3])


# Create a default instance for module-level use
_default_solver = SymbolicSolver()

def solve_quadratic(a: Rational, b: Rational, c: Rational) -> List[Root]:
    return _default_solver.solve_quadratic(a, b, c)

def solve_cubic(a: Rational, b: Rational, c: Rational, d: Rational) -> List[Root]:
    return _default_solver.solve_cubic(a, b, c, d)
