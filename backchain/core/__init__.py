from .terms import (
    Constant, Variable, Function, Term,
    LIST_FUNCTOR, NIL,
    is_term, is_variable, is_function, variables, is_ground, rename_term,
    make_list, list_items,
)
from .substitution import Substitution, EMPTY
from .clauses import Literal, Rule, KnowledgeBase, standardize_literal
from .unification import (
    occurs_in, unify, unify_terms, unify_functions, unify_lists, unify_literals,
)

__all__ = [
    "Constant", "Variable", "Function", "Term",
    "LIST_FUNCTOR", "NIL",
    "is_term", "is_variable", "is_function", "variables", "is_ground", "rename_term",
    "make_list", "list_items",
    "Substitution", "EMPTY",
    "Literal", "Rule", "KnowledgeBase", "standardize_literal",
    "occurs_in", "unify", "unify_terms", "unify_functions", "unify_lists", "unify_literals",
]
