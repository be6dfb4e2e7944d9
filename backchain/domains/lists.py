"""
Domain: List predicates over cons/nil lists.

    append(nil, L, L).
    append(cons(H, T), L, cons(H, R)) :- append(T, L, R).
    member(X, cons(X, T)).
    member(X, cons(H, T)) :- member(X, T).
    last(cons(X, nil), X).
    last(cons(H, T), X) :- last(T, X).

member/2 on a variable element answers with the first element only: the
prover commits to the first fact match.
"""

from ..core.clauses import KnowledgeBase, Literal, Rule
from ..core.terms import NIL, Constant, Function, Variable, make_list

H, T, L, R, X = (Variable(n) for n in ("H", "T", "L", "R", "X"))


def cons(head, tail):
    return Function("cons", (head, tail))


def _names(*names):
    return make_list([Constant(n) for n in names])


def make_lists_kb() -> KnowledgeBase:
    facts = [
        Literal("append", (NIL, L, L)),
        Literal("member", (X, cons(X, T))),
        Literal("last", (cons(X, NIL), X)),
    ]
    rules = [
        Rule(Literal("append", (cons(H, T), L, cons(H, R))),
             (Literal("append", (T, L, R)),),
             label="append step"),
        Rule(Literal("member", (X, cons(H, T))),
             (Literal("member", (X, T)),),
             label="member step"),
        Rule(Literal("last", (cons(H, T), X)),
             (Literal("last", (T, X)),),
             label="last step"),
    ]
    return KnowledgeBase(facts, rules, name="lists")


LISTS_QUERIES = [
    Literal("append", (_names("a", "b"), _names("c"), Variable("Joined"))),
    Literal("member", (Constant("c"), _names("a", "b", "c"))),
    Literal("member", (Constant("z"), _names("a", "b", "c"))),
    Literal("member", (Variable("First"), _names("a", "b", "c"))),
    Literal("last", (_names("a", "b", "c"), Variable("Last"))),
]
