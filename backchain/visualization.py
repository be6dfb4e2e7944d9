"""
Visualization and reporting utilities.
"""

from .core.clauses import KnowledgeBase


def format_bindings(bindings: dict) -> str:
    """X = tom, Z = ann"""
    if not bindings:
        return "(no variables)"
    return ", ".join(f"{name} = {term}" for name, term in bindings.items())


def print_knowledge_base(kb: KnowledgeBase):
    """Print facts and rules in trial order."""
    print(f"\n{'='*60}")
    if kb.name:
        print(f"Knowledge base: {kb.name}")
    print(f"Facts ({len(kb.facts)}):")
    for fact in kb.facts:
        print(f"  {fact}.")
    print(f"Rules ({len(kb.rules)}):")
    for rule in kb.rules:
        label = f"   [{rule.label}]" if rule.label else ""
        print(f"  {rule}{label}")
    print(f"{'='*60}")


def print_answer(goal, bindings):
    """Report one query result: the bindings if proved, else a plain no."""
    if bindings is None:
        print(f"  ?- {goal}.   no proof found")
    else:
        print(f"  ?- {goal}.   yes: {format_bindings(bindings)}")


def print_trace(trace: list):
    """Print a Prover.trace, indented by depth."""
    print(f"\n{'='*60}")
    print("Search trace:")
    print(f"{'='*60}")
    for entry in trace:
        indent = "  " * entry["depth"]
        detail = f"  by {entry['detail']}" if entry["detail"] else ""
        print(f"  {indent}{entry['event']:<11} {entry['goal']}{detail}")
