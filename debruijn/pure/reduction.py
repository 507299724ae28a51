"""Beta reduction of De Bruijn λ-terms.

With De Bruijn indices there is no alpha conversion: capture is avoided by shifting indices instead. Contracting a
redex (λM) N substitutes N (shifted up by one, since it moves under M's binder) for variable 1 in M, then shifts the
result down by one, since M's binder is gone:

```
(λM) N  ->  shift(substitute(M, 1, shift(N, 1)), -1)
```

Evaluation orders (which redex is contracted next):
    - NOR: normal order, leftmost outermost redex first, reducing under abstractions. Finds the normal form whenever
      there is one.
    - CBN: call by name, leftmost outermost, but never under abstractions (weak head normal form).
    - APP: applicative order, leftmost innermost, reducing under abstractions.
    - CBV: call by value, leftmost innermost, but never under abstractions (weak normal form).

Sources: https://en.wikipedia.org/wiki/De_Bruijn_index#Formal_definition,
         https://en.wikipedia.org/wiki/Lambda_calculus#Reduction_strategies
"""

from enum import Enum

from debruijn.lang.error import GenericException
from debruijn.term import Abstraction, Application, Variable, is_term


class Order(Enum):
    NOR = "nor"
    CBN = "cbn"
    APP = "app"
    CBV = "cbv"

    @property
    def outermost(self):
        """Whether or not redexes are contracted before their subterms."""
        return self in (Order.NOR, Order.CBN)

    @property
    def under_abstractions(self):
        """Whether or not abstraction bodies are reduced."""
        return self in (Order.NOR, Order.APP)


def shift(term, by, cutoff=0):
    """Adds by to every variable in term that is free above cutoff binders."""
    if isinstance(term, Variable):
        return Variable(term.index + by) if term.index > cutoff else term
    elif isinstance(term, Abstraction):
        return Abstraction(shift(term.body, by, cutoff + 1))
    return Application(shift(term.function, by, cutoff), shift(term.argument, by, cutoff))


def substitute(term, index, value):
    """Replaces every occurence of variable index in term with value. Indices in value are shifted as it moves under
    abstractions.
    """
    if isinstance(term, Variable):
        return value if term.index == index else term
    elif isinstance(term, Abstraction):
        return Abstraction(substitute(term.body, index + 1, shift(value, 1)))
    return Application(substitute(term.function, index, value), substitute(term.argument, index, value))


def is_redex(term):
    """Whether or not term is of the form (λM) N."""
    return isinstance(term, Application) and isinstance(term.function, Abstraction)


def contract(redex):
    """Contracts a single redex (λM) N to M[1 := N]."""
    if not is_redex(redex):
        raise GenericException("'{}' is not a redex", redex)

    body, argument = redex.function.body, redex.argument
    return shift(substitute(body, 1, shift(argument, 1)), -1)


def step(term, order=Order.NOR):
    """Contracts the next redex of term (according to order). Returns None if there are no redexes left to contract
    under order.
    """
    if isinstance(term, Variable):
        return None

    elif isinstance(term, Abstraction):
        if not order.under_abstractions:
            return None
        body = step(term.body, order)
        return None if body is None else Abstraction(body)

    if order.outermost and is_redex(term):
        return contract(term)

    function = step(term.function, order)
    if function is not None:
        return Application(function, term.argument)

    if order is not Order.CBN:
        argument = step(term.argument, order)
        if argument is not None:
            return Application(term.function, argument)

    if is_redex(term):
        return contract(term)
    return None


class Reducer:
    """Repeatedly steps a λ-term under a given evaluation order. limit caps the number of steps (0 means no limit)."""
    DEFAULT_LIMIT = 0

    def __init__(self, term, order=Order.NOR, limit=DEFAULT_LIMIT):
        if not is_term(term):
            raise GenericException("expected λ-term, got '{}'", repr(term), internal=True)
        if limit < 0:
            raise GenericException("expected non-negative reduction limit, got '{}'", limit, internal=True)

        self.original_term = term
        self.tree = term
        self.order = order
        self.limit = limit

        self.steps = 0
        self.reduced = False

    def beta_reduce(self, error_handler=None):
        """In-place beta reduction of self.tree. error_handler (if given) is notified of every step and warned if the
        reduction stops before reaching a normal form.
        """
        while not self.limit or self.steps < self.limit:
            reduced = step(self.tree, self.order)
            if reduced is None:
                self.reduced = True
                break

            self.steps += 1
            if error_handler is not None:
                error_handler.register_step("β", reduced)

            if reduced == self.tree:
                if error_handler is not None:
                    error_handler.warn("'{}' does not have a beta-normal form", self.original_term)
                break

            self.tree = reduced

        else:
            if step(self.tree, self.order) is None:
                self.reduced = True
            elif error_handler is not None:
                msg = "'{}' was not fully reduced within " + str(self.limit) + " steps"
                error_handler.warn(msg, self.original_term)

        return self.tree

    def __repr__(self):
        return f"Reducer({repr(self.tree)}, order={self.order.name}, steps={self.steps})"

    def __str__(self):
        return str(self.tree)


def beta(term, order=Order.NOR, limit=0):
    """Returns term reduced under order, taking at most limit steps (0 means no limit)."""
    return Reducer(term, order, limit).beta_reduce()


def normalize(term):
    """Returns the normal form of term using normal-order reduction. Does not terminate if there isn't one."""
    return beta(term, Order.NOR)
