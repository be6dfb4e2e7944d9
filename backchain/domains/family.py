"""
Domain: Family relations.

    parent(tom, bob).   parent(bob, ann).
    grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
    ancestor(X, Y)    :- parent(X, Y).
    ancestor(X, Z)    :- parent(X, Y), ancestor(Y, Z).

ancestor/2 is recursive, so each level of the proof uses its own renamed
copy of the rule.
"""

from ..core.clauses import KnowledgeBase, Literal, Rule
from ..core.terms import Constant, Variable

X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")


def parent(a, b) -> Literal:
    return Literal("parent", (a, b))


def make_family_kb(extra_parents=()) -> KnowledgeBase:
    """
    The tom -> bob -> ann family. extra_parents is a list of (parent, child)
    name pairs appended after the built-in facts.
    """
    facts = [
        parent(Constant("tom"), Constant("bob")),
        parent(Constant("bob"), Constant("ann")),
    ]
    facts += [parent(Constant(p), Constant(c)) for p, c in extra_parents]

    rules = [
        Rule(Literal("grandparent", (X, Z)),
             (parent(X, Y), parent(Y, Z)),
             label="grandparent"),
        Rule(Literal("ancestor", (X, Y)),
             (parent(X, Y),),
             label="ancestor base"),
        Rule(Literal("ancestor", (X, Z)),
             (parent(X, Y), Literal("ancestor", (Y, Z))),
             label="ancestor step"),
    ]
    return KnowledgeBase(facts, rules, name="family")


FAMILY_QUERIES = [
    Literal("grandparent", (Constant("tom"), Constant("ann"))),
    Literal("grandparent", (Constant("ann"), Constant("tom"))),
    Literal("grandparent", (Constant("tom"), Variable("Who"))),
    Literal("ancestor", (Constant("tom"), Constant("ann"))),
    Literal("ancestor", (Variable("Who"), Constant("ann"))),
]
