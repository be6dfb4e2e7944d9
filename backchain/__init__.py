"""
backchain: a backward-chaining prover over first-order definite clauses.

Facts and Horn-clause rules go into a read-only KnowledgeBase; a Prover
answers goal literals by depth-first backward chaining with unification,
committing to the first fact or rule that works. Results are persistent
Substitutions, or None when no proof is found.

Usage:
    python -m backchain --domain family
    python -m backchain --domain peano
    python -m backchain --domain lists
    python -m backchain --domain order --trace
"""

from .core.terms import Constant, Variable, Function, NIL, make_list, list_items
from .core.substitution import Substitution, EMPTY
from .core.clauses import Literal, Rule, KnowledgeBase
from .core.unification import (
    occurs_in, unify, unify_terms, unify_functions, unify_lists, unify_literals,
)
from .inference.prove import Prover, ask, answer
from .visualization import format_bindings, print_knowledge_base, print_answer, print_trace

__all__ = [
    "Constant", "Variable", "Function", "NIL", "make_list", "list_items",
    "Substitution", "EMPTY",
    "Literal", "Rule", "KnowledgeBase",
    "occurs_in", "unify", "unify_terms", "unify_functions", "unify_lists", "unify_literals",
    "Prover", "ask", "answer",
    "format_bindings", "print_knowledge_base", "print_answer", "print_trace",
]
