"""
Domain registry.

Each domain is a dict describing a demo knowledge base:
    make_kb:      () -> KnowledgeBase
    queries:      list[Literal] asked in order by the CLI
    description:  str
"""

from .family import make_family_kb, FAMILY_QUERIES
from .peano import make_peano_kb, PEANO_QUERIES
from .lists import make_lists_kb, LISTS_QUERIES
from .order import make_order_kb, ORDER_QUERIES


DOMAINS = {
    "family": {
        "make_kb":     make_family_kb,
        "queries":     FAMILY_QUERIES,
        "description": "Parents, grandparents and recursive ancestors",
    },
    "peano": {
        "make_kb":     make_peano_kb,
        "queries":     PEANO_QUERIES,
        "description": "Addition and multiplication over s(...) numerals",
    },
    "lists": {
        "make_kb":     make_lists_kb,
        "queries":     LISTS_QUERIES,
        "description": "append, member and last over cons/nil lists",
    },
    "order": {
        "make_kb":     make_order_kb,
        "queries":     ORDER_QUERIES,
        "description": "First fact match is final: no backtracking over facts",
    },
}
