import unittest

from debruijn.term import (Abstraction, Application, Variable, abstraction, abstractions, application, applications,
                           is_term, variable)


class TermTestCase(unittest.TestCase):

    def test_constructors(self):
        self.assertEqual(Variable(1), variable(1))
        self.assertEqual(Abstraction(Variable(1)), abstraction(variable(1)))
        self.assertEqual(Application(Variable(1), Variable(2)), application(variable(1), variable(2)))

    def test_abstractions(self):
        cases = {
            0: Variable(1),
            1: Abstraction(Variable(1)),
            3: Abstraction(Abstraction(Abstraction(Variable(1)))),
        }
        for count, expected in cases.items():
            self.assertEqual(expected, abstractions(count, Variable(1)), count)

    def test_applications(self):
        should_raise = [(), (Variable(1),)]
        for case in should_raise:
            self.assertRaises(ValueError, applications, *case)

        one, two, three = Variable(1), Variable(2), Variable(3)
        self.assertEqual(Application(one, two), applications(one, two))
        self.assertEqual(Application(Application(one, two), three), applications(one, two, three))

    def test_equality(self):
        self.assertEqual(abstractions(2, Variable(2)), abstractions(2, Variable(2)))
        self.assertNotEqual(abstractions(2, Variable(2)), abstractions(2, Variable(1)))
        self.assertNotEqual(Variable(1), Abstraction(Variable(1)))

        terms = {abstractions(2, Variable(2)), abstractions(2, Variable(2)), abstraction(Variable(1))}
        self.assertEqual(2, len(terms))

    def test_is_term(self):
        should_fail = [1, "λ1", None, [Variable(1)]]
        for case in should_fail:
            self.assertFalse(is_term(case), case)

        should_pass = [Variable(1), abstraction(Variable(1)), application(Variable(1), Variable(1))]
        for case in should_pass:
            self.assertTrue(is_term(case), case)

    def test_expr(self):
        v = Variable
        cases = {
            "1": v(1),
            "c": v(12),
            "λ1": abstraction(v(1)),
            "λλ2": abstractions(2, v(2)),
            "12": application(v(1), v(2)),
            "123": applications(v(1), v(2), v(3)),
            "1(23)": application(v(1), application(v(2), v(3))),
            "(λ1)2": application(abstraction(v(1)), v(2)),
            "1(λ1)": application(v(1), abstraction(v(1))),
            "(λ1)(λ1)": application(abstraction(v(1)), abstraction(v(1))),
            "λ12": abstraction(application(v(1), v(2))),
            "λλλ31(21)": abstractions(3, applications(v(3), v(1), application(v(2), v(1)))),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, case.expr, expected)
            self.assertEqual(expected, str(case), expected)

    def test_repr(self):
        self.assertEqual("Abstraction(body=Variable(index=1))", repr(abstraction(Variable(1))))


if __name__ == '__main__':
    unittest.main()
