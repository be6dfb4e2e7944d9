"""
Domain: Peano arithmetic by backward chaining.

Numbers are 0, s(0), s(s(0)), ...

    add(0, Y, Y).
    add(s(X), Y, s(Z)) :- add(X, Y, Z).
    mul(0, Y, 0).
    mul(s(X), Y, Z)    :- mul(X, Y, W), add(W, Y, Z).

The facts contain variables; they are renamed apart on every use just
like rules.
"""

from ..core.clauses import KnowledgeBase, Literal, Rule
from ..core.terms import Constant, Function, Variable

ZERO = Constant("0")
X, Y, Z, W = (Variable(n) for n in "XYZW")


def s(term):
    return Function("s", (term,))


def numeral(n: int):
    """s^n(0)"""
    term = ZERO
    for _ in range(n):
        term = s(term)
    return term


def to_int(term):
    """Inverse of numeral(); None if term is not a closed numeral."""
    n = 0
    while isinstance(term, Function) and term.functor == "s" and term.arity == 1:
        n += 1
        term = term.args[0]
    return n if term == ZERO else None


def make_peano_kb() -> KnowledgeBase:
    facts = [
        Literal("add", (ZERO, Y, Y)),
        Literal("mul", (ZERO, Y, ZERO)),
    ]
    rules = [
        Rule(Literal("add", (s(X), Y, s(Z))),
             (Literal("add", (X, Y, Z)),),
             label="addition step"),
        Rule(Literal("mul", (s(X), Y, Z)),
             (Literal("mul", (X, Y, W)), Literal("add", (W, Y, Z))),
             label="multiplication step"),
    ]
    return KnowledgeBase(facts, rules, name="peano")


PEANO_QUERIES = [
    Literal("add", (numeral(1), numeral(1), Variable("Sum"))),
    Literal("add", (numeral(2), numeral(3), numeral(5))),
    Literal("add", (numeral(2), numeral(2), numeral(5))),
    Literal("mul", (numeral(2), numeral(3), Variable("Product"))),
]
