"""
Domain: Fact order decides the answer.

    likes(mary, wine).
    likes(mary, cheese).
    food(cheese).
    likes_food(P, F) :- likes(P, F), food(F).

likes_food(mary, F) is not proved: likes(mary, F) commits to wine, food(wine)
fails, and the prover never goes back to try cheese. Asking with F already
bound to cheese succeeds.
"""

from ..core.clauses import KnowledgeBase, Literal, Rule
from ..core.terms import Constant, Variable

P, F = Variable("P"), Variable("F")
MARY, WINE, CHEESE = Constant("mary"), Constant("wine"), Constant("cheese")


def make_order_kb() -> KnowledgeBase:
    facts = [
        Literal("likes", (MARY, WINE)),
        Literal("likes", (MARY, CHEESE)),
        Literal("food", (CHEESE,)),
    ]
    rules = [
        Rule(Literal("likes_food", (P, F)),
             (Literal("likes", (P, F)), Literal("food", (F,))),
             label="likes food"),
    ]
    return KnowledgeBase(facts, rules, name="order")


ORDER_QUERIES = [
    Literal("likes_food", (MARY, Variable("What"))),
    Literal("likes_food", (MARY, CHEESE)),
]
