"""Unit tests for equation module."""

import unittest

from cas import to_display
from equation import Equation
from errors import InvalidArgumentError, NoSolutionError
from expression import Expression
from parser import parse
from rational import Rational
from solver import ALL_REALS, NO_SOLUTION, ROOTS, UNDEFINED, VALUE
from term import Term, Variable


class TestConstruction(unittest.TestCase):
    """Test Equation construction and rendering."""

    def test_rhs_coercion(self):
        lhs = parse("1/5x + 4/5")
        eq = Equation(lhs, Rational(3, 4))
        self.assertEqual(eq.to_string(), "1/5x + 4/5 = 3/4")
        self.assertEqual(Equation(lhs, 2).to_string(), "1/5x + 4/5 = 2")

    def test_invalid_sides(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            Equation(Rational(1, 4), Expression.variable("x"))
        self.assertIn("Left-hand side", str(ctx.exception))
        with self.assertRaises(InvalidArgumentError) as ctx:
            Equation(Expression.variable("x"), 0.25)
        self.assertIn("Right-hand side", str(ctx.exception))

    def test_implicit_rendering(self):
        ab = Expression(terms=(Term((Variable("a"), Variable("b"))),))
        cd = Expression(terms=(Term((Variable("c"), Variable("d"))),))
        eq = Equation(ab, cd)
        self.assertEqual(eq.to_string(), "ab = cd")
        self.assertEqual(eq.to_string(True), "a*b = c*d")

    def test_tex(self):
        eq = parse("1/5x + 4/5 = x - 1/6")
        self.assertEqual(eq.to_tex(), "\\frac{1}{5}x + \\frac{4}{5} = x - \\frac{1}{6}")


class TestShapePredicates(unittest.TestCase):
    """Test classification used to pick the solving path."""

    def test_linear(self):
        eq = parse("2x + y = 3")
        self.assertTrue(eq.is_linear())
        self.assertTrue(eq.can_variable_be_isolated("x"))
        self.assertEqual(eq.max_degree(), 1)

    def test_isolable_with_cross_products_elsewhere(self):
        eq = parse("x + y*z = 3")
        self.assertFalse(eq.is_linear())
        self.assertTrue(eq.can_variable_be_isolated("x"))
        self.assertFalse(eq.can_variable_be_isolated("y"))

    def test_quadratic_and_cubic(self):
        eq = parse("x^2 + 2x = 1")
        self.assertTrue(eq.is_quadratic("x"))
        self.assertFalse(eq.is_cubic("x"))
        self.assertFalse(eq.is_linear())
        self.assertTrue(parse("x^3 = x").is_cubic("x"))
        self.assertFalse(parse("x^2 + y = 1").is_quadratic("x"))

    def test_degree_queries(self):
        eq = parse("x^2*y = y^3")
        self.assertEqual(eq.max_degree(), 3)
        self.assertEqual(eq.max_degree_of_variable("y"), 3)
        self.assertFalse(eq.has_no_cross_products())
        self.assertFalse(eq.has_no_cross_products_with_variable("x"))
        self.assertFalse(eq.has_only_variable("x"))
        self.assertTrue(parse("x^2 = x").has_only_variable("x"))


class TestSolveFor(unittest.TestCase):
    """Test the legacy solve_for contract."""

    def test_linear_rational(self):
        self.assertEqual(parse("1/5x + 4/5 = x - 1/6").solve_for("x"), Rational(29, 24))

    def test_symbolic(self):
        self.assertEqual(parse("a + b = c + d").solve_for("a").to_string(), "c + d - b")
        self.assertEqual(parse("a^2 + b = c + d").solve_for("b").to_string(), "-a^2 + c + d")
        self.assertEqual(parse("2x + 4y = 6").solve_for("x").to_string(), "-2y + 3")

    def test_quadratic(self):
        self.assertEqual(parse("x^2 + x - 2 = 0").solve_for("x"), [-2, 1])
        roots = parse("x^2 + 4x + 2 = 0").solve_for("x")
        self.assertAlmostEqual(roots[0], -3.41421, places=5)
        self.assertAlmostEqual(roots[1], -0.58579, places=5)
        self.assertEqual(parse("x^2 + 1 = 0").solve_for("x"), [])

    def test_cubic(self):
        self.assertEqual(parse("x^3 - 3x^2 + 3x - 1 = 0").solve_for("x"), [1])
        self.assertEqual(parse("x^3 - 3x + 2 = 0").solve_for("x"), [-2, 1])

        roots = parse("(x + 2)(x + 3)(x + 4) = 0").solve_for("x")
        self.assertEqual(roots, [-4.0, -3.0, -2.0])
        self.assertEqual(to_display(roots), "-4,-3,-2")

        roots = parse("(2x + 2)(x + 3)(x + 4) = 0").solve_for("x")
        self.assertEqual(roots, [-4.0, -3.0, -1.0])
        self.assertEqual(to_display(roots), "-4,-3,-1")

    def test_cubic_single_real_root(self):
        roots = parse("x^3 - 3x^2 + 3x - 1 = 15").solve_for("x")
        self.assertEqual(len(roots), 1)
        self.assertAlmostEqual(roots[0], 3.46621207433047, places=9)

        roots = parse("x^3 - 2x = 4").solve_for("x")
        self.assertAlmostEqual(roots[0], 2, places=9)

    def test_no_solution(self):
        with self.assertRaises(NoSolutionError):
            parse("x = x + 2").solve_for("x")
        with self.assertRaises(NoSolutionError):
            parse("x^2 = x^2 + 1").solve_for("x")

    def test_infinite_solutions(self):
        result = parse("x = x").solve_for("x")
        self.assertIsInstance(result, Rational)
        self.assertEqual(result, Rational(1))
        self.assertEqual(parse("x^2 = x^2").solve_for("x"), [Rational(1)])

    def test_unsupported_shapes(self):
        self.assertIsNone(parse("x*y = 2").solve_for("x"))
        self.assertIsNone(parse("x^2 + x + y = 4").solve_for("x"))
        self.assertIsNone(parse("x^4 = 1").solve_for("x"))

    def test_unknown_variable(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            parse("x = 2").solve_for("y")
        self.assertEqual(str(ctx.exception), "Invalid Argument (y): Variable does not exist in the equation.")


class TestSolve(unittest.TestCase):
    """Test the Solution outcome channel."""

    def test_kinds(self):
        cases = [
            ("1/5x + 4/5 = x - 1/6", VALUE),
            ("x^2 + x - 2 = 0", ROOTS),
            ("x^2 + 1 = 0", ROOTS),
            ("x = x", ALL_REALS),
            ("x = x + 2", NO_SOLUTION),
            ("x*y = 2", UNDEFINED),
        ]
        for text, kind in cases:
            with self.subTest(text=text):
                self.assertEqual(parse(text).solve("x").kind, kind)

    def test_value_and_roots(self):
        solution = parse("1/5x + 4/5 = x - 1/6").solve("x")
        self.assertEqual(solution.value, Rational(29, 24))
        self.assertTrue(solution.isolated)
        self.assertEqual(parse("x^2 + x - 2 = 0").solve("x").roots, [-2, 1])
        self.assertEqual(parse("x^2 + 1 = 0").solve("x").roots, [])

    def test_no_solution_is_not_raised(self):
        solution = parse("x = x + 2").solve("x")
        self.assertFalse(solution.is_solved)
        self.assertEqual(str(solution), "No solution")


class TestEval(unittest.TestCase):
    """Test substitution into both sides."""

    def test_eval_rational(self):
        self.assertEqual(parse("x = y + 2").eval({"x": 2}).to_string(), "2 = y + 2")

    def test_eval_expression(self):
        eq = parse("x + 2 = 2").eval({"x": parse("y + 2")})
        self.assertIsInstance(eq, Equation)
        self.assertEqual(eq.to_string(), "y + 4 = 2")


if __name__ == "__main__":
    unittest.main()
