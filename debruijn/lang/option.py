"""Church-encoded option type: an option takes a default and a function, and returns either the default (if empty) or
the function applied to its contents.
"""

from debruijn.lang.boolean import fls, tru
from debruijn.pure.lexical import parse
from debruijn.pure.reduction import shift
from debruijn.term import Variable, abstraction, abstractions, application, applications


def none():
    """NONE := λns.n = λλ2 = TRUE"""
    return tru()


def some():
    """SOME := λans.s a = λλλ13"""
    return parse("λλλ13")


def is_none():
    """IS_NONE := λa.a TRUE (λx.FALSE) = λ1 TRUE (λ FALSE)"""
    return abstraction(applications(Variable(1), tru(), abstraction(fls())))


def is_some():
    """IS_SOME := λa.a FALSE (λx.TRUE) = λ1 FALSE (λ TRUE)"""
    return abstraction(applications(Variable(1), fls(), abstraction(tru())))


def map_():
    """Applies a function to the contents of an option, or returns NONE if it is empty.

    MAP := λfm.m NONE (λx.SOME (f x)) = λλ1 NONE (λλλ1(53))
    """
    return abstractions(2, applications(
        Variable(1),
        none(),
        abstractions(3, application(Variable(1), application(Variable(5), Variable(3))))
    ))


def map_or():
    """Returns the second argument applied to the contents of the option, or the first argument if it is empty.

    MAP_OR := λdfm.m d f = λλλ132
    """
    return parse("λλλ132")


def unwrap_or():
    """Returns the contents of the option, or the first argument if it is empty.

    UNWRAP_OR := λdm.m d I = λλ12(λ1)
    """
    return parse("λλ12(λ1)")


def to_coption(value):
    """Returns NONE if value is None, otherwise an option containing λ-term value."""
    if value is None:
        return none()
    return abstractions(2, application(Variable(1), shift(value, 2)))
