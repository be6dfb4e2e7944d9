"""
Substitutions (binding lists) as persistent values.

A Substitution is a chain of binding frames, newest first. extend() never
touches the receiver: it returns a new Substitution whose frame points back
at the old chain, so every earlier snapshot stays valid and shares its
frames with the later ones.

    s0 = EMPTY
    s1 = s0.extend("X", Constant("tom"))
    s2 = s1.extend("Y", Variable("X"))
    s2.apply(Variable("Y"))   -> Constant("tom")
    len(s0), len(s1), len(s2) -> 0, 1, 2

A variable name is bound at most once along a chain.

Frames are shared, but each Substitution keeps its own name -> term index
for constant-time lookup, and extend() copies it: one extension costs time
and memory linear in the number of bindings.
"""

from typing import NamedTuple, Optional

from .terms import Function, Variable, is_term


class _Frame(NamedTuple):
    name: str
    term: object
    parent: Optional["_Frame"]


class Substitution:
    """Ordered, append-only mapping from variable names to terms."""

    __slots__ = ("_head", "_size", "_index")

    def __init__(self, bindings=None):
        self._head = None
        self._size = 0
        self._index = {}
        for name, term in (bindings.items() if isinstance(bindings, dict) else bindings or ()):
            self._push(name, term)

    def _push(self, name, term):
        # Only called while the object is still private to its creator.
        if name in self._index:
            raise ValueError(f"variable {name} is already bound to {self._index[name]}")
        if not is_term(term):
            raise TypeError(f"cannot bind {name} to non-term {term!r}")
        self._head = _Frame(name, term, self._head)
        self._size += 1
        self._index[name] = term

    # ── Lookup ──────────────────────────────────────────────────────────

    def lookup(self, name: str):
        """The term name is bound to, or None."""
        return self._index.get(name)

    def __contains__(self, name) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        """Variable names in the order they were bound."""
        return (name for name, _ in self.items())

    def items(self) -> list:
        frames = []
        frame = self._head
        while frame is not None:
            frames.append((frame.name, frame.term))
            frame = frame.parent
        frames.reverse()
        return frames

    def to_dict(self) -> dict:
        return dict(self.items())

    # ── Extension ───────────────────────────────────────────────────────

    def extend(self, name: str, term) -> "Substitution":
        """
        New substitution with name -> term added. The receiver is unchanged.
        Raises ValueError if name is already bound.
        """
        new = Substitution()
        # The frame chain is shared; the lookup index is copied on extend.
        new._head, new._size, new._index = self._head, self._size, dict(self._index)
        new._push(name, term)
        return new

    # ── Application ─────────────────────────────────────────────────────

    def walk(self, term):
        """Follow variable-to-term bindings until an unbound variable or non-variable."""
        while isinstance(term, Variable) and term.name in self._index:
            term = self._index[term.name]
        return term

    def apply(self, obj):
        """
        Apply the substitution to a term, a Literal, or a sequence of either.
        Follows chains transitively. Returns new objects; never mutates.
        """
        if isinstance(obj, (list, tuple)):
            return type(obj)(self.apply(x) for x in obj)
        if is_term(obj):
            return self._apply_term(obj)
        substitute = getattr(obj, "substitute", None)
        if substitute is not None:
            return substitute(self)
        raise TypeError(f"cannot apply a substitution to {obj!r}")

    def _apply_term(self, term):
        term = self.walk(term)
        if isinstance(term, Function):
            return Function(term.functor, tuple(self._apply_term(arg) for arg in term.args))
        return term

    # ── Dunder ──────────────────────────────────────────────────────────

    def __eq__(self, other):
        return isinstance(other, Substitution) and self.items() == other.items()

    def __hash__(self):
        return hash(tuple(self.items()))

    def __repr__(self):
        pairs = ", ".join(f"{name}={term}" for name, term in self.items())
        return f"Substitution({pairs})"


EMPTY = Substitution()
