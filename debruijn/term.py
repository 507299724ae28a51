"""Lambda terms with De Bruijn indices: variables, abstractions and applications.

Variables carry no names. Instead, a variable's index counts the abstractions that have to be crossed (outward) to
reach the one that binds it, so that `λx.λy.x` is written `λλ2` and `λx.x` is written `λ1`.

The three kinds of term are independent frozen dataclasses: they compare and hash structurally, so two terms are
equal iff they are the same term (De Bruijn terms need no alpha-equivalence). Every term has an `expr` attribute, the
canonical (minimal) textual form understood by `debruijn.pure.lexical.parse`:

```
<term> ::= <index>            ; single hexadecimal digit
         | "λ" <term>         ; abstraction bodies extend as far right as possible
         | <term> <term>      ; application, associating by left: 1234 = (((1 2) 3) 4)
```

Source: https://en.wikipedia.org/wiki/De_Bruijn_index
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Variable:
    """Variable bound by the index-th enclosing abstraction (1 = nearest)."""
    index: int

    @property
    def expr(self):
        return format(self.index, "x")

    def __str__(self):
        return self.expr


@dataclass(frozen=True)
class Abstraction:
    """Abstraction binding a single (unnamed) variable in body."""
    body: "Term"

    @property
    def expr(self):
        return f"λ{self.body.expr}"

    def __str__(self):
        return self.expr


@dataclass(frozen=True)
class Application:
    """Application of function to argument."""
    function: "Term"
    argument: "Term"

    @property
    def expr(self):
        function, argument = self.function.expr, self.argument.expr

        if isinstance(self.function, Abstraction):
            function = f"({function})"
        if not isinstance(self.argument, Variable):
            argument = f"({argument})"

        return function + argument

    def __str__(self):
        return self.expr


Term = Union[Variable, Abstraction, Application]


def is_term(obj):
    """Whether or not obj is a lambda term."""
    return isinstance(obj, (Variable, Abstraction, Application))


def variable(index):
    return Variable(index)


def abstraction(body):
    return Abstraction(body)


def application(function, argument):
    return Application(function, argument)


def abstractions(count, body):
    """Wraps body in count abstractions: abstractions(3, body) == λλλ body."""
    for __ in range(count):
        body = Abstraction(body)
    return body


def applications(*terms):
    """Left-associative application of terms: applications(a, b, c) == ((a b) c)."""
    if len(terms) < 2:
        raise ValueError("applications expects at least two terms")

    function, *arguments = terms
    for argument in arguments:
        function = Application(function, argument)
    return function
