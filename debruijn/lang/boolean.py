"""Church-encoded booleans: a boolean is a function that chooses between its two arguments. Like the numerals, they
are written using λ-term syntax and parsed, keeping everything as pure as possible.

Source: https://en.wikipedia.org/wiki/Church_encoding#Church_Booleans
"""

from debruijn.pure.lexical import parse
from debruijn.term import Variable, abstraction, abstractions, application, applications


def tru():
    """TRUE := λab.a = λλ2"""
    return parse("λλ2")


def fls():
    """FALSE := λab.b = λλ1"""
    return parse("λλ1")


def and_():
    """AND := λpq.p q p = λλ212"""
    return parse("λλ212")


def or_():
    """OR := λpq.p p q = λλ221"""
    return parse("λλ221")


def not_():
    """NOT := λp.p FALSE TRUE = λ1 FALSE TRUE"""
    return abstraction(applications(Variable(1), fls(), tru()))


def xor():
    """XOR := λab.a (NOT b) b = λλ2((NOT)1)1"""
    return abstractions(2, applications(Variable(2), application(not_(), Variable(1)), Variable(1)))


def if_else():
    """IF_ELSE := λpab.p a b = λλλ321"""
    return parse("λλλ321")


def to_cbool(value):
    """Returns TRUE or FALSE given a Python bool."""
    return tru() if value else fls()


def from_cbool(cbool):
    """Returns True/False given a Church boolean, or None if cbool isn't one."""
    if cbool == tru():
        return True
    elif cbool == fls():
        return False
    return None
