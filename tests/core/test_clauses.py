"""
Unit tests for literals, rules, and the knowledge base.
"""

import pytest

from backchain.core.terms import Constant, Variable, Function
from backchain.core.clauses import Literal, Rule, KnowledgeBase, standardize_literal


X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")
tom, bob = Constant("tom"), Constant("bob")

GRANDPARENT = Rule(
    Literal("grandparent", (X, Z)),
    (Literal("parent", (X, Y)), Literal("parent", (Y, Z))),
    label="grandparent",
)


class TestLiteral:
    def test_arity_and_variables(self):
        lit = Literal("p", (X, Function("f", (Y, tom))))
        assert lit.arity == 2
        assert lit.variables() == {"X", "Y"}
        assert not lit.is_ground()
        assert Literal("p", (tom,)).is_ground()

    def test_needs_predicate(self):
        with pytest.raises(ValueError):
            Literal("", (tom,))

    def test_rejects_non_terms(self):
        with pytest.raises(TypeError):
            Literal("p", ("tom",))

    def test_str(self):
        assert str(Literal("parent", (tom, X))) == "parent(tom, X)"
        assert str(Literal("rain")) == "rain"


class TestRule:
    def test_variables_cover_consequent_and_antecedents(self):
        assert GRANDPARENT.variables() == {"X", "Y", "Z"}

    def test_standardize_apart_renames_everything_consistently(self):
        renamed = GRANDPARENT.standardize_apart("_7")
        assert renamed.variables() == {"X_7", "Y_7", "Z_7"}
        assert renamed.consequent == Literal("grandparent", (Variable("X_7"), Variable("Z_7")))
        assert renamed.antecedents[0] == Literal("parent", (Variable("X_7"), Variable("Y_7")))
        assert renamed.antecedents[1] == Literal("parent", (Variable("Y_7"), Variable("Z_7")))

    def test_standardize_apart_leaves_original(self):
        GRANDPARENT.standardize_apart("_1")
        assert GRANDPARENT.variables() == {"X", "Y", "Z"}

    def test_different_suffixes_disjoint(self):
        left = GRANDPARENT.standardize_apart("_L").variables()
        right = GRANDPARENT.standardize_apart("_R").variables()
        assert left.isdisjoint(right)

    def test_constants_unchanged(self):
        rule = Rule(Literal("p", (tom, X)), (Literal("q", (X, bob)),))
        renamed = rule.standardize_apart("_1")
        assert renamed.consequent.args[0] == tom
        assert renamed.antecedents[0].args[1] == bob

    def test_str(self):
        assert str(GRANDPARENT) == "grandparent(X, Z) :- parent(X, Y), parent(Y, Z)."

    def test_label_does_not_affect_equality(self):
        assert Rule(Literal("p", (X,)), label="one") == Rule(Literal("p", (X,)), label="two")


class TestStandardizeLiteral:
    def test_renames_fact_variables(self):
        fact = Literal("append", (Constant("nil"), X, X))
        assert standardize_literal(fact, "_3") == Literal(
            "append", (Constant("nil"), Variable("X_3"), Variable("X_3")))


class TestKnowledgeBase:
    def test_order_is_kept(self):
        facts = [Literal("parent", (tom, bob)), Literal("parent", (bob, tom))]
        kb = KnowledgeBase(facts, [GRANDPARENT])
        assert kb.facts == tuple(facts)
        assert kb.rules == (GRANDPARENT,)
        assert len(kb) == 3

    def test_rules_for_filters_by_consequent_predicate(self):
        other = Rule(Literal("ancestor", (X, Y)), (Literal("parent", (X, Y)),))
        kb = KnowledgeBase([], [other, GRANDPARENT, other])
        assert list(kb.rules_for("grandparent")) == [GRANDPARENT]
        assert list(kb.rules_for("ancestor")) == [other, other]
        assert list(kb.rules_for("parent")) == []

    def test_read_only(self):
        kb = KnowledgeBase([], [])
        with pytest.raises(Exception):
            kb.facts = (Literal("p"),)
