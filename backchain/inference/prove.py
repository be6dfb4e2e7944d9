"""
Backward chaining over a knowledge base of definite clauses.

To prove a goal literal:
    1. Try the facts in order. The first one that unifies wins, and the
       prover commits to it: a later fact is never tried, even if the goals
       that follow then fail.
    2. Otherwise try the rules in order. For a rule whose consequent has the
       goal's predicate, rename its variables apart, unify the goal with the
       consequent, and prove the antecedents left to right. The first rule
       whose antecedents are all proved wins.
    3. Otherwise the goal is not proved.

This is strictly depth-first with no choice points, so it is incomplete:
"not proved" means "not proved by this search", never "false". The order of
facts and rules in the knowledge base decides what gets proved.

There is no depth bound unless one is asked for. A rule set that is not
well-founded recurses until Python raises RecursionError.
"""

import itertools
from typing import Optional

from ..core.clauses import KnowledgeBase, Literal, standardize_literal
from ..core.substitution import EMPTY, Substitution
from ..core.terms import Variable, variables
from ..core.unification import unify_literals


class Prover:
    """
    One query session against a read-only KnowledgeBase.

    Args:
        kb:          facts and rules, tried in stored order
        max_depth:   optional bound on rule nesting; None means unbounded
        verbose:     print each step of the search
        keep_trace:  record each step in self.trace

    Renamed variables never clash with a name already in play: every
    variable of a top-level goal or starting substitution is reserved,
    and a suffix is skipped if any name it would produce is reserved.
    """

    def __init__(self, kb: KnowledgeBase, max_depth: Optional[int] = None,
                 verbose: bool = False, keep_trace: bool = False):
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.kb = kb
        self.max_depth = max_depth
        self.verbose = verbose
        self.keep_trace = keep_trace
        self.trace = []
        self.depth_limit_hit = False
        self._suffixes = itertools.count(1)
        self._in_play = set()

    # ── Entry points ────────────────────────────────────────────────────

    def ask(self, goal: Literal, sub: Substitution = EMPTY) -> Optional[Substitution]:
        """Prove a single goal. Returns the final substitution or None."""
        return self.prove_literal(goal, sub)

    def ask_all(self, goals, sub: Substitution = EMPTY) -> Optional[Substitution]:
        """Prove a conjunction of goals, left to right."""
        return self.prove_conjunction(list(goals), sub)

    def ask_facts(self, goal: Literal, sub: Substitution = EMPTY) -> Optional[Substitution]:
        """
        The unifier of goal with the first matching fact, or None.
        Facts with variables are renamed apart before each attempt.
        """
        if sub is None:
            return None
        self._reserve([goal], sub)
        return self._match_facts(goal, sub)

    # ── Search ──────────────────────────────────────────────────────────

    def prove_literal(self, goal: Literal, sub: Substitution,
                      depth: int = 0) -> Optional[Substitution]:
        if sub is None:
            return None
        if depth == 0:
            self._reserve([goal], sub)
        if self.max_depth is not None and depth > self.max_depth:
            self.depth_limit_hit = True
            self._log(depth, "depth_limit", goal, sub)
            return None

        self._log(depth, "goal", goal, sub)

        result = self._match_facts(goal, sub)
        if result is not None:
            self._log(depth, "fact", goal, result)
            return result

        for rule in self.kb.rules_for(goal.predicate):
            renamed = rule.standardize_apart(self._fresh_suffix(rule.variables()))
            head_sub = unify_literals(goal, renamed.consequent, sub)
            if head_sub is None:
                continue
            self._log(depth, "rule", goal, head_sub, detail=str(renamed))
            result = self.prove_conjunction(list(renamed.antecedents), head_sub, depth + 1)
            if result is not None:
                return result

        self._log(depth, "fail", goal, sub)
        return None

    def prove_conjunction(self, goals: list, sub: Substitution,
                          depth: int = 0) -> Optional[Substitution]:
        if sub is None:
            return None
        if depth == 0:
            self._reserve(goals, sub)
        if not goals:
            return sub
        first, rest = goals[0], goals[1:]
        first_sub = self.prove_literal(first, sub, depth)
        if first_sub is None:
            return None
        return self.prove_conjunction(rest, first_sub, depth)

    # ── Internals ───────────────────────────────────────────────────────

    def _match_facts(self, goal, sub):
        for fact in self.kb.facts:
            if fact.predicate != goal.predicate:
                continue
            if not fact.is_ground():
                fact = standardize_literal(fact, self._fresh_suffix(fact.variables()))
            result = unify_literals(goal, fact, sub)
            if result is not None:
                return result
        return None

    def _reserve(self, goals, sub):
        for lit in goals:
            self._in_play |= lit.variables()
        for name, term in sub.items():
            self._in_play.add(name)
            self._in_play |= variables(term)

    def _fresh_suffix(self, names) -> str:
        while True:
            suffix = f"_{next(self._suffixes)}"
            renamed = {name + suffix for name in names}
            if renamed.isdisjoint(self._in_play):
                self._in_play |= renamed
                return suffix

    def _log(self, depth, event, goal, sub, detail=""):
        if not (self.verbose or self.keep_trace):
            return
        shown = str(sub.apply(goal))
        if self.keep_trace:
            self.trace.append({
                "depth": depth,
                "event": event,
                "goal": shown,
                "detail": detail,
            })
        if self.verbose:
            indent = "  " * depth
            marks = {"goal": "?", "fact": "+", "rule": ">", "fail": "x", "depth_limit": "!"}
            line = f"{indent}[{marks[event]}] {shown}"
            if detail:
                line += f"   by {detail}"
            print(line)


def ask(kb: KnowledgeBase, goal: Literal, sub: Substitution = EMPTY,
        **kwargs) -> Optional[Substitution]:
    """Prove goal against kb with a fresh Prover. kwargs go to Prover."""
    return Prover(kb, **kwargs).ask(goal, sub)


def answer(goal, sub: Optional[Substitution]) -> Optional[dict]:
    """
    The bindings a caller asked about: each variable of the query goal
    (a Literal or a list of them), fully applied, in order of appearance.
    None if the proof failed.
    """
    if sub is None:
        return None
    goals = goal if isinstance(goal, (list, tuple)) else [goal]
    names = []
    for lit in goals:
        for arg in lit.args:
            _collect_names(arg, names)
    return {name: sub.apply(Variable(name)) for name in names}


def _collect_names(term, names: list):
    if isinstance(term, Variable):
        if term.name not in names:
            names.append(term.name)
        return
    for arg in getattr(term, "args", ()):
        _collect_names(arg, names)
