"""Natural numbers encoded as Church numerals: n is the function that applies its first argument n times to its second
one. Numerals and arithmetic are written using λ-term syntax and parsed, thus keeping everything as pure as possible.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from debruijn.lang.boolean import fls, tru
from debruijn.lang.error import GenericException
from debruijn.pure.lexical import parse
from debruijn.term import Abstraction, Application, Variable, abstraction, applications


def zero():
    """ZERO := λfx.x = λλ1"""
    return parse("λλ1")


def one():
    """ONE := λfx.f x = λλ21"""
    return parse("λλ21")


def succ():
    """SUCC := λnfx.f (n f x) = λλλ2(321)"""
    return parse("λλλ2(321)")


def pred():
    """PRED := λnfx.n (λgh.h (g f)) (λu.x) (λu.u) = λλλ3(λλ1(24))(λ2)(λ1)"""
    return parse("λλλ3(λλ1(24))(λ2)(λ1)")


def add():
    """ADD := λmnfx.m f (n f x) = λλλλ42(321)"""
    return parse("λλλλ42(321)")


def sub():
    """SUB := λmn.n PRED m = λλ1 PRED 2 (0 if n > m)"""
    return parse(f"λλ1({pred()})2")


def mul():
    """MUL := λmnf.m (n f) = λλλ3(21)"""
    return parse("λλλ3(21)")


def pow_():
    """POW := λbe.e b = λλ12"""
    return parse("λλ12")


def is_zero():
    """IS_ZERO := λn.n (λx.FALSE) TRUE = λ1 (λ FALSE) TRUE"""
    return abstraction(applications(Variable(1), abstraction(fls()), tru()))


def cnumber(num):
    """Returns num as a Church numeral (cnum = Church numeral)."""
    try:
        assert not isinstance(num, (float, bool))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", str(num), internal=True)

    body = Variable(1)
    for __ in range(num):
        body = Application(Variable(2), body)

    return Abstraction(Abstraction(body))


def number(cnum):
    """Returns int given λ-term cnum. If cnum isn't a Church numeral, returns None."""
    try:
        assert isinstance(cnum, Abstraction) and isinstance(cnum.body, Abstraction)
    except AssertionError:
        return None

    num = 0
    nth_body = cnum.body.body
    while isinstance(nth_body, Application):
        if nth_body.function != Variable(2):
            return None

        nth_body = nth_body.argument
        num += 1

    return num if nth_body == Variable(1) else None
