"""
Integration tests for the family domain.
"""

from backchain.core.clauses import Literal
from backchain.core.terms import Constant, Variable
from backchain.inference.prove import Prover, ask, answer
from backchain.domains.family import make_family_kb, FAMILY_QUERIES


tom, bob, ann = Constant("tom"), Constant("bob"), Constant("ann")


class TestFamily:
    def test_canned_queries(self):
        kb = make_family_kb()
        assert [ask(kb, q) is not None for q in FAMILY_QUERIES] == [True, False, True, True, True]

    def test_ancestor_who(self):
        goal = Literal("ancestor", (Variable("Who"), ann))
        assert answer(goal, ask(make_family_kb(), goal)) == {"Who": bob}

    def test_deep_ancestor_chain(self):
        chain = [("ann", "dan"), ("dan", "eve"), ("eve", "fay")]
        kb = make_family_kb(extra_parents=chain)
        assert ask(kb, Literal("ancestor", (tom, Constant("fay")))) is not None

    def test_recursion_uses_fresh_variables_per_level(self):
        chain = [("ann", "dan"), ("dan", "eve")]
        prover = Prover(make_family_kb(extra_parents=chain))
        sub = prover.ask(Literal("ancestor", (tom, Constant("eve"))))
        assert sub is not None
        renamed = {name for name in sub if name.startswith("Y_")}
        assert len(renamed) >= 3
