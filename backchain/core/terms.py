"""
Terms: the closed sum type everything else is built from.

A term is exactly one of:
    Constant("tom")                          -> an opaque atomic value
    Variable("X")                            -> a named placeholder
    Function("s", (Constant("0"),))          -> functor applied to arguments

Terms are frozen dataclasses, so they hash, compare structurally, and are
never changed in place. Substitution produces new terms.

Lists use the reserved functor "cons" and the constant "nil":
    [a, b]  ==  cons(a, cons(b, nil))
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union


@dataclass(frozen=True)
class Constant:
    """An atomic value. Equal iff the values are equal."""
    value: Any

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Variable:
    """A logical variable. Two variables are the same iff their names match."""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"variable name must be a non-empty string, got {self.name!r}")

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Function:
    """A functor applied to an ordered tuple of argument terms."""
    functor: str
    args: tuple = ()

    def __post_init__(self):
        if not self.functor:
            raise ValueError("function term needs a functor")
        args = tuple(self.args)
        for arg in args:
            if not is_term(arg):
                raise TypeError(f"argument of {self.functor} is not a term: {arg!r}")
        object.__setattr__(self, "args", args)

    @property
    def arity(self) -> int:
        return len(self.args)

    def __str__(self):
        if is_list_cell(self):
            return _format_list(self)
        if not self.args:
            return f"{self.functor}()"
        return f"{self.functor}({', '.join(str(a) for a in self.args)})"


Term = Union[Constant, Variable, Function]

LIST_FUNCTOR = "cons"
NIL = Constant("nil")


def is_term(obj) -> bool:
    return isinstance(obj, (Constant, Variable, Function))


def is_variable(term) -> bool:
    return isinstance(term, Variable)


def is_function(term) -> bool:
    return isinstance(term, Function)


def variables(term) -> set:
    """Names of the variables occurring anywhere in term."""
    if isinstance(term, Variable):
        return {term.name}
    if isinstance(term, Function):
        names = set()
        for arg in term.args:
            names |= variables(arg)
        return names
    return set()


def is_ground(term) -> bool:
    """True if term contains no variables."""
    if isinstance(term, Variable):
        return False
    if isinstance(term, Function):
        return all(is_ground(arg) for arg in term.args)
    return True


def rename_term(term, var_map: dict):
    """Replace variables by name using var_map. Unmapped variables stay."""
    if isinstance(term, Variable):
        return var_map.get(term.name, term)
    if isinstance(term, Function):
        return Function(term.functor, tuple(rename_term(arg, var_map) for arg in term.args))
    return term


# ── Lists ────────────────────────────────────────────────────────────────────

def make_list(items: Iterable, tail: Term = NIL) -> Term:
    """Build cons(x1, cons(x2, ... tail)) from a sequence of terms."""
    result = tail
    for item in reversed(list(items)):
        result = Function(LIST_FUNCTOR, (item, result))
    return result


def is_list_cell(term) -> bool:
    return (isinstance(term, Function)
            and term.functor == LIST_FUNCTOR
            and term.arity == 2)


def list_items(term) -> Optional[tuple]:
    """
    Elements of a proper list term, or None if term is not a proper list
    (an open tail variable or a non-nil tail).
    """
    items = []
    while is_list_cell(term):
        items.append(term.args[0])
        term = term.args[1]
    if term != NIL:
        return None
    return tuple(items)


def _format_list(term) -> str:
    """[a, b], or [a, b | T] for an open or improper tail."""
    items = []
    while is_list_cell(term):
        items.append(str(term.args[0]))
        term = term.args[1]
    if term == NIL:
        return f"[{', '.join(items)}]"
    return f"[{', '.join(items)} | {term}]"
