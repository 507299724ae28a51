r"""Pure lambda calculus parser: turns source text into a `debruijn.term` λ-term.

Variables are De Bruijn indices, so there are no names to bind and an abstraction is just a λ. Formally,

```
<expr> ::= ( <lambda> | <number> | "(" <expr> ")" )*   ; juxtaposition is application, associating by left
<lambda> ::= "λ" | "\"                                  ; interchangeable: \ is one byte and easier to type
<number> ::= [0-9a-fA-F]                                ; single hexadecimal digit
```

Whitespace is insignificant. All λs found at one nesting level become curried binders around the (left-folded)
application of everything else found at that level, so `λλλ2(321)` is `λ λ λ (2 ((3 2) 1))`.

Parsing happens in three passes, none of which keep any state between calls:
    1. tokenize: text -> list of Tokens/Numbers
    2. get_ast: tokens -> Sequence tree that only mirrors parenthesis nesting
    3. fold_exprs: Sequence -> λ-term, resolving implicit application and curried abstraction

Source: https://en.wikipedia.org/wiki/De_Bruijn_index
"""

from dataclasses import dataclass
from enum import Enum
import string

from debruijn.lang.error import GenericException
from debruijn.term import abstraction, application, variable


LAMBDAS = ("λ", "\\")
SEPARATORS = "\x1c\x1d\x1e\x1f"  # str.isspace counts these, but they are not Unicode whitespace


class ParseError(GenericException):
    """Superclass for every error that parse can raise."""


class InvalidCharacter(ParseError):
    """Raised by tokenize when a character is not a lambda, parenthesis, hex digit or whitespace. position counts λ
    as two (its UTF-8 width) and every other character as one.
    """

    def __init__(self, position, char, original_expr="", start=0):
        self.position = position
        self.char = char

        msg = "'{}' contains invalid character '{}' at position " + str(position)
        super().__init__(msg, (original_expr, char), start=start, end=start + 1)


class InvalidExpression(ParseError):
    """Raised when the top level of a parsed expression is not a Sequence."""

    def __init__(self, original_expr=""):
        super().__init__("'{}' is not a valid λ-term", original_expr)


class EmptyExpression(ParseError):
    """Raised when an expression, or any parenthesized part of it, has nothing to apply or abstract over."""

    def __init__(self, original_expr=""):
        super().__init__("'{}' contains an empty λ-term", original_expr)


class Token(Enum):
    LAMBDA = "λ"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class Number:
    """Variable token. value is always a single hex digit (0-15)."""
    value: int


@dataclass(frozen=True)
class AbstractionMarker:
    """A λ read within a Sequence. Not yet wrapped around anything."""


@dataclass(frozen=True)
class Variable:
    index: int


@dataclass(frozen=True)
class Sequence:
    """Everything between a pair of parentheses (or the whole expression). Doesn't yet distinguish grouping from
    application.
    """
    exprs: tuple = ()


ABSTRACTION = AbstractionMarker()


def tokenize(expr):
    """Converts expr to a list of tokens in a single pass. Raises InvalidCharacter on the first character that isn't a
    lambda, parenthesis, hex digit or whitespace.
    """
    tokens = []
    position = 0

    for idx, char in enumerate(expr):
        if char in LAMBDAS:
            tokens.append(Token.LAMBDA)
        elif char == "(":
            tokens.append(Token.LPAREN)
        elif char == ")":
            tokens.append(Token.RPAREN)
        elif char in string.hexdigits:
            tokens.append(Number(int(char, 16)))
        elif not char.isspace() or char in SEPARATORS:
            raise InvalidCharacter(position, char, expr, idx)

        position += 2 if char == "λ" else 1

    return tokens


def _get_ast(tokens, pos):
    """Builds the Sequence starting at tokens[pos]. Returns it along with the position it stopped at: either the
    closing parenthesis that ended it or len(tokens).
    """
    exprs = []

    while pos < len(tokens):
        token = tokens[pos]

        if token is Token.LAMBDA:
            exprs.append(ABSTRACTION)
        elif token is Token.LPAREN:
            subtree, pos = _get_ast(tokens, pos + 1)
            exprs.append(subtree)
        elif token is Token.RPAREN:
            return Sequence(tuple(exprs)), pos
        else:
            exprs.append(Variable(token.value))

        pos += 1

    return Sequence(tuple(exprs)), pos


def get_ast(tokens, original_expr=""):
    """Recursive descent over tokens. Parentheses only need to be balanced from the left: an unclosed "(" runs to the
    end of tokens, while a stray ")" ends the enclosing Sequence early (at the top level, everything after it is
    ignored).
    """
    if not tokens:
        raise EmptyExpression(original_expr)

    ast, __ = _get_ast(tokens, 0)
    return ast


def fold_terms(terms, original_expr=""):
    """Left-associative application of terms: [a, b, c] -> ((a b) c)."""
    if not terms:
        raise EmptyExpression(original_expr)

    term, *arguments = terms
    for argument in arguments:
        term = application(term, argument)
    return term


def fold_exprs(exprs, original_expr=""):
    """Turns the contents of a single Sequence into a λ-term. Nested Sequences are folded first, the resulting
    operands are applied to one another, and finally one abstraction is wrapped around the result per λ found at this
    level.
    """
    stack = []
    output = []

    for expr in exprs:
        if isinstance(expr, AbstractionMarker):
            stack.append(expr)
        elif isinstance(expr, Sequence):
            output.append(fold_exprs(expr.exprs, original_expr))
        else:
            output.append(variable(expr.index))

    term = fold_terms(output, original_expr)

    while stack:
        stack.pop()
        term = abstraction(term)

    return term


def parse(expr):
    """Parses expr to a λ-term. λ can be written either with the greek letter or a backslash.

    >>> str(parse("λ λ λ 2 (3 2 1)"))
    'λλλ2(321)'
    >>> parse("\\\\\\\\\\\\2(321)") == parse("λλλ2(321)")
    True
    """
    tokens = tokenize(expr)
    ast = get_ast(tokens, expr)

    if not isinstance(ast, Sequence):
        raise InvalidExpression(expr)

    return fold_exprs(ast.exprs, expr)
