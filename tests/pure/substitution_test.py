import unittest

from lamred.lang.error import InternalShapeError
from lamred.pure.parser import parse
from lamred.pure.substitution import alpha_convert, fresh_name, occurs_in, substitute
from lamred.pure.term import Abstraction, Application, Variable


class OccursInTestCase(unittest.TestCase):

    def test_occurs_in(self):
        should_pass = [("x", "x"), ("x", "λx.y"), ("y", "λx.y"), ("x", "f (g x)"), ("f", "f a")]
        for name, expr in should_pass:
            self.assertTrue(occurs_in(name, parse(expr)), (name, expr))

        should_fail = [("z", "x"), ("z", "λx.y"), ("z", "f (g x)"), ("x0", "λx.x")]
        for name, expr in should_fail:
            self.assertFalse(occurs_in(name, parse(expr)), (name, expr))

    def test_not_a_term(self):
        self.assertRaises(InternalShapeError, occurs_in, "x", "x")


class FreshNameTestCase(unittest.TestCase):

    def test_fresh_name(self):
        self.assertEqual("y", fresh_name("y", parse("x")))
        self.assertEqual("x0", fresh_name("x", parse("x")))
        self.assertEqual("x0", fresh_name("x", parse("λx.y")))

        taken = Application(Application(Variable("x"), Variable("x0")), Variable("x1"))
        self.assertEqual("x2", fresh_name("x", taken))

    def test_several_contexts(self):
        self.assertEqual("x1", fresh_name("x", parse("x"), Variable("x0")))
        self.assertEqual("x", fresh_name("x"))


class AlphaConvertTestCase(unittest.TestCase):

    def test_alpha_convert(self):
        cases = {
            ("λx.x y", "x", "z"): parse("λz.z y"),
            ("y", "x", "z"): parse("y"),
            ("f (λx.x) x", "x", "v"): parse("f (λv.v) v"),
            ("λx.λx.x", "x", "w"): parse("λw.λw.w"),
        }
        for (expr, old, new), expected in cases.items():
            self.assertEqual(expected, alpha_convert(parse(expr), old, new), expr)

        self.assertEqual(Abstraction("x0", Variable("x0")), alpha_convert(parse("λx.x"), "x", "x0"))

    def test_untouched_subtrees_are_shared(self):
        term = parse("f (λx.x)")
        self.assertIs(term.func, alpha_convert(term, "x", "y").func)
        self.assertIs(term.func, substitute(term, "x", Variable("y")).func)
        self.assertIs(term.arg, substitute(term, "x", Variable("y")).arg)

    def test_not_a_term(self):
        self.assertRaises(InternalShapeError, alpha_convert, 42, "x", "y")


class SubstituteTestCase(unittest.TestCase):

    def test_substitute(self):
        cases = {
            ("x", "x", "y"): "y",
            ("z", "x", "y"): "z",
            ("x y", "x", "λz.z"): "(λz.z) y",
            ("λz.x z", "x", "y"): "λz.y z",
            ("f x (λy.x)", "x", "a b"): "f (a b) (λy.a b)",
        }
        for (expr, name, value), expected in cases.items():
            self.assertEqual(parse(expected), substitute(parse(expr), name, parse(value)), expr)

    def test_shadowed(self):
        term = parse("λx.x")
        self.assertIs(term, substitute(term, "x", parse("λy.y")))
        self.assertEqual(parse("λx.x"), substitute(term, "x", parse("x")))

        self.assertEqual(parse("a (λx.x)"), substitute(parse("x (λx.x)"), "x", parse("a")))

    def test_capture_avoidance(self):
        self.assertEqual(Abstraction("x0", Variable("x")), substitute(parse("λx.y"), "y", Variable("x")))
        self.assertEqual("λx0.x", str(substitute(parse("λx.y"), "y", Variable("x"))))
        self.assertNotEqual(parse("λx.x"), substitute(parse("λx.y"), "y", Variable("x")))

        expected = Abstraction("x0", Application(Variable("x"), Variable("x0")))
        self.assertEqual(expected, substitute(parse("λx.y x"), "y", Variable("x")))

    def test_fresh_name_avoids_body(self):
        term = Abstraction("x", Application(Variable("y"), Variable("x0")))
        expected = Abstraction("x1", Application(Variable("x"), Variable("x0")))
        self.assertEqual(expected, substitute(term, "y", Variable("x")))

    def test_conservative_renaming(self):
        # x only occurs bound in the value, so renaming is not needed, but harmless
        result = substitute(parse("λx.y x"), "y", parse("λx.x"))
        self.assertEqual(Abstraction("x0", Application(parse("λx.x"), Variable("x0"))), result)

    def test_not_a_term(self):
        self.assertRaises(InternalShapeError, substitute, None, "x", Variable("y"))


if __name__ == '__main__':
    unittest.main()
