"""
Unification with occurs check, threaded through persistent substitutions.

Every function here takes the substitution built so far and returns either
a new Substitution (a most general unifier extending it) or None. A None
coming in goes straight back out, so failures can be chained without
checking each step:

    sub = unify_terms(a1, b1, EMPTY)
    sub = unify_terms(a2, b2, sub)      # None stays None

Nothing passed in is ever modified.
"""

from .clauses import Literal
from .substitution import EMPTY, Substitution
from .terms import Constant, Function, Variable


def occurs_in(name: str, term, sub: Substitution = EMPTY) -> bool:
    """Does variable `name` occur in term once sub has been applied?"""
    term = sub.walk(term)
    if isinstance(term, Variable):
        return term.name == name
    if isinstance(term, Function):
        return any(occurs_in(name, arg, sub) for arg in term.args)
    return False


def unify_terms(t1, t2, sub=EMPTY):
    """
    Unify two terms under sub.

    Bound variables are dereferenced first, so a variable that already has
    a value is never bound a second time.
    """
    if sub is None:
        return None

    t1 = sub.walk(t1)
    t2 = sub.walk(t2)

    if isinstance(t1, Variable):
        return _bind(t1, t2, sub)
    if isinstance(t2, Variable):
        return _bind(t2, t1, sub)

    if isinstance(t1, Constant) and isinstance(t2, Constant):
        return sub if t1.value == t2.value else None

    if isinstance(t1, Function) and isinstance(t2, Function):
        return unify_functions(t1, t2, sub)

    return None  # constant against function


def _bind(var: Variable, term, sub: Substitution):
    if isinstance(term, Variable):
        if term.name == var.name:
            return sub
        return sub.extend(var.name, term)
    if isinstance(term, Function) and occurs_in(var.name, term, sub):
        return None  # X = f(..X..) has no finite solution
    return sub.extend(var.name, term)


def unify_functions(f1: Function, f2: Function, sub=EMPTY):
    """Same functor, then pairwise argument unification."""
    if sub is None:
        return None
    if f1.functor != f2.functor:
        return None
    return unify_lists(f1.args, f2.args, sub)


def unify_lists(ts1, ts2, sub=EMPTY):
    """
    Unify two term sequences pairwise, left to right, threading sub.
    Sequences of different length never unify.
    """
    if sub is None:
        return None
    if len(ts1) != len(ts2):
        return None
    for a1, a2 in zip(ts1, ts2):
        sub = unify_terms(a1, a2, sub)
        if sub is None:
            return None
    return sub


def unify_literals(lit1: Literal, lit2: Literal, sub=EMPTY):
    """Same predicate symbol, then argument-list unification."""
    if sub is None:
        return None
    if lit1.predicate != lit2.predicate:
        return None
    return unify_lists(lit1.args, lit2.args, sub)


def unify(x, y, sub=EMPTY):
    """Dispatch on what is being unified: literals, term sequences, or terms."""
    if isinstance(x, Literal) and isinstance(y, Literal):
        return unify_literals(x, y, sub)
    if isinstance(x, (list, tuple)) and isinstance(y, (list, tuple)):
        return unify_lists(x, y, sub)
    if isinstance(x, Function) and isinstance(y, Function):
        return unify_functions(x, y, sub)
    return unify_terms(x, y, sub)
