"""
Unit tests for the term model and list helpers.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from backchain.core.terms import (
    Constant, Variable, Function, NIL,
    is_term, is_variable, is_function, variables, is_ground, rename_term,
    make_list, list_items,
)


a, b = Constant("a"), Constant("b")
X, Y = Variable("X"), Variable("Y")


class TestVariants:
    def test_each_term_is_exactly_one_variant(self):
        for term in (a, X, Function("f", (a,))):
            kinds = [isinstance(term, k) for k in (Constant, Variable, Function)]
            assert kinds.count(True) == 1

    def test_variables_equal_by_name(self):
        assert Variable("X") == Variable("X")
        assert Variable("X") != Variable("Y")
        assert hash(Variable("X")) == hash(Variable("X"))

    def test_constants_equal_by_value(self):
        assert Constant(7) == Constant(7)
        assert Constant("tom") != Constant("bob")

    def test_constant_is_not_variable_of_same_name(self):
        assert Constant("X") != Variable("X")

    def test_terms_are_immutable(self):
        with pytest.raises(Exception):
            X.name = "Y"
        with pytest.raises(Exception):
            Function("f", (a,)).functor = "g"

    def test_function_args_become_tuple(self):
        term = Function("f", [a, X])
        assert term.args == (a, X)
        assert term.arity == 2

    def test_function_rejects_non_terms(self):
        with pytest.raises(TypeError):
            Function("f", ("a",))

    def test_function_needs_functor(self):
        with pytest.raises(ValueError):
            Function("", (a,))

    def test_variable_needs_name(self):
        with pytest.raises(ValueError):
            Variable("")

    def test_predicates(self):
        assert is_term(a) and is_term(X) and is_term(Function("f"))
        assert not is_term("a")
        assert is_variable(X) and not is_variable(a)
        assert is_function(Function("f", (a,))) and not is_function(a)


class TestVariablesAndGround:
    def test_variables_collects_nested_names(self):
        term = Function("f", (X, Function("g", (Y, a, X))))
        assert variables(term) == {"X", "Y"}

    def test_constant_has_no_variables(self):
        assert variables(a) == set()

    def test_ground(self):
        assert is_ground(a)
        assert is_ground(Function("f", (a, Function("g", (b,)))))
        assert not is_ground(Function("f", (a, Function("g", (X,)))))

    def test_rename_term(self):
        term = Function("f", (X, Y, a))
        renamed = rename_term(term, {"X": Variable("X_1")})
        assert renamed == Function("f", (Variable("X_1"), Y, a))
        assert term == Function("f", (X, Y, a))


class TestLists:
    def test_make_list_nests_cons_cells(self):
        assert make_list([a, b]) == Function("cons", (a, Function("cons", (b, NIL))))

    def test_empty_list_is_nil(self):
        assert make_list([]) == NIL
        assert list_items(NIL) == ()

    def test_open_tail(self):
        term = make_list([a], tail=X)
        assert list_items(term) is None
        assert str(term) == "[a | X]"

    def test_formatting(self):
        assert str(make_list([a, b])) == "[a, b]"
        assert str(Function("f", (a, Function("g", (X,))))) == "f(a, g(X))"

    @given(st.lists(st.text(alphabet="abc", min_size=1, max_size=3), max_size=5))
    def test_list_items_reads_back_make_list(self, names):
        items = tuple(Constant(n) for n in names)
        assert list_items(make_list(items)) == items
