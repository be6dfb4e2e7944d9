"""
Literals, rules, and the knowledge base.

    Literal("parent", (Constant("tom"), Constant("bob")))   -> parent(tom, bob)

    Rule(consequent=Literal("grandparent", (X, Z)),
         antecedents=(Literal("parent", (X, Y)), Literal("parent", (Y, Z))))
                                  -> grandparent(X, Z) :- parent(X, Y), parent(Y, Z).

A KnowledgeBase is an ordered tuple of facts and an ordered tuple of rules.
The order is the order the prover tries them in.
"""

from dataclasses import dataclass, field

from .terms import is_ground as term_is_ground
from .terms import Variable, is_term, rename_term, variables as term_variables


@dataclass(frozen=True)
class Literal:
    """A predicate symbol applied to an ordered tuple of terms."""
    predicate: str
    args: tuple = ()

    def __post_init__(self):
        if not self.predicate:
            raise ValueError("literal needs a predicate symbol")
        args = tuple(self.args)
        for arg in args:
            if not is_term(arg):
                raise TypeError(f"argument of {self.predicate} is not a term: {arg!r}")
        object.__setattr__(self, "args", args)

    @property
    def arity(self) -> int:
        return len(self.args)

    def variables(self) -> set:
        names = set()
        for arg in self.args:
            names |= term_variables(arg)
        return names

    def is_ground(self) -> bool:
        return all(term_is_ground(arg) for arg in self.args)

    def rename(self, var_map: dict) -> "Literal":
        return Literal(self.predicate, tuple(rename_term(arg, var_map) for arg in self.args))

    def substitute(self, sub) -> "Literal":
        return Literal(self.predicate, sub.apply(self.args))

    def __str__(self):
        if not self.args:
            return self.predicate
        return f"{self.predicate}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class Rule:
    """
    A Horn clause: antecedents => consequent.

    Rules are built once and never changed. Every use in a proof goes
    through standardize_apart() so two uses never share variables.
    """
    consequent: Literal
    antecedents: tuple = ()
    label: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "antecedents", tuple(self.antecedents))

    @property
    def predicate(self) -> str:
        return self.consequent.predicate

    def variables(self) -> set:
        names = self.consequent.variables()
        for lit in self.antecedents:
            names |= lit.variables()
        return names

    def standardize_apart(self, suffix: str) -> "Rule":
        """
        Copy of this rule with every variable renamed by appending suffix.
        Consequent and antecedents share one renaming.
        """
        var_map = {name: _renamed(name, suffix) for name in self.variables()}
        return Rule(
            consequent=self.consequent.rename(var_map),
            antecedents=tuple(lit.rename(var_map) for lit in self.antecedents),
            label=self.label,
        )

    def __str__(self):
        if not self.antecedents:
            return f"{self.consequent}."
        body = ", ".join(str(lit) for lit in self.antecedents)
        return f"{self.consequent} :- {body}."


def standardize_literal(literal: Literal, suffix: str) -> Literal:
    """Rename every variable of a single literal (used for non-ground facts)."""
    return literal.rename({name: _renamed(name, suffix) for name in literal.variables()})


def _renamed(name: str, suffix: str):
    return Variable(name + suffix)


@dataclass(frozen=True)
class KnowledgeBase:
    """
    Facts and rules, in trial order. Read-only once built.

    Facts may contain variables; rules are definite clauses.
    """
    facts: tuple = ()
    rules: tuple = ()
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "facts", tuple(self.facts))
        object.__setattr__(self, "rules", tuple(self.rules))

    def rules_for(self, predicate: str):
        """Rules whose consequent uses predicate, in stored order."""
        return (rule for rule in self.rules if rule.predicate == predicate)

    def __len__(self):
        return len(self.facts) + len(self.rules)
