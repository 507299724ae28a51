"""Standard terms: closed λ-terms named after their role.

    - SKI: https://en.wikipedia.org/wiki/SKI_combinator_calculus
    - Iota: https://en.wikipedia.org/wiki/Iota_and_Jot
    - BCKW: https://en.wikipedia.org/wiki/B,_C,_K,_W_system
    - the looping combinator ω and the divergent combinator Ω
    - the fixed-point combinator Y: https://en.wikipedia.org/wiki/Fixed-point_combinator

Every function returns a fresh term, written with named variables and then with De Bruijn indices in its docstring.
"""

from debruijn.term import Variable, abstraction, abstractions, application, applications


def i():
    """I - the identity combinator.

    I := λx.x = λ1
    """
    return abstraction(Variable(1))


def k():
    """K - the constant / discarding combinator.

    K := λxy.x = λλ2 = TRUE
    """
    return abstractions(2, Variable(2))


def s():
    """S - the substitution combinator.

    S := λxyz.x z (y z) = λλλ31(21)
    """
    return abstractions(3, applications(Variable(3), Variable(1), application(Variable(2), Variable(1))))


def iota():
    """ι - the universal combinator.

    ι := λx.x S K = λ1SK
    """
    return abstraction(applications(Variable(1), s(), k()))


def b():
    """B - the composition combinator.

    B := λxyz.x (y z) = λλλ3(21)
    """
    return abstractions(3, application(Variable(3), application(Variable(2), Variable(1))))


def c():
    """C - the swapping combinator.

    C := λxyz.x z y = λλλ312
    """
    return abstractions(3, applications(Variable(3), Variable(1), Variable(2)))


def w():
    """W - the duplicating combinator.

    W := λxy.x y y = λλ211
    """
    return abstractions(2, applications(Variable(2), Variable(1), Variable(1)))


def om():
    """ω - the looping combinator.

    ω := λx.x x = λ11
    """
    return abstraction(application(Variable(1), Variable(1)))


def omm():
    """Ω - the divergent combinator. Has no normal form: it reduces to itself.

    Ω := ω ω = (λ11)(λ11)
    """
    return application(om(), om())


def y():
    """Y - the fixed-point combinator.

    Y := λg.(λx.g (x x)) (λx.g (x x)) = λ(λ2(11))(λ2(11))
    """
    half = abstraction(application(Variable(2), application(Variable(1), Variable(1))))
    return abstraction(application(half, half))
