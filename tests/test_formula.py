"""Tests for CNF formula structures and evaluation."""

import itertools

import numpy as np
import pytest

from gen_alg import (
    Clause,
    Formula,
    FormulaEvaluation,
    InconsistentNumOfClausesError,
    InconsistentNumOfVarsError,
    Literal,
    VarOutOfBoundsError,
)


class TestLiteral:
    """Tests for Literal."""

    def test_from_positive_int(self) -> None:
        assert Literal.from_int(4) == Literal(4, negated=False)

    def test_from_negative_int(self) -> None:
        assert Literal.from_int(-4) == Literal(4, negated=True)

    def test_int_round_trip(self) -> None:
        """int() gives back the signed DIMACS value."""
        assert int(Literal.from_int(-7)) == -7
        assert int(Literal.from_int(7)) == 7

    def test_rejects_zero(self) -> None:
        """0 terminates clauses and is never a literal."""
        with pytest.raises(ValueError, match="terminator"):
            Literal.from_int(0)

    def test_rejects_var_below_one(self) -> None:
        """Variables are 1-indexed."""
        with pytest.raises(ValueError, match="var must be >= 1"):
            Literal(0)

    def test_satisfaction(self) -> None:
        """Var(i) reads valuation[i-1]; NegatedVar(i) negates it."""
        valuation = [True, False]
        assert Literal(1).is_satisfied_by(valuation) is True
        assert Literal(2).is_satisfied_by(valuation) is False
        assert Literal(1, negated=True).is_satisfied_by(valuation) is False
        assert Literal(2, negated=True).is_satisfied_by(valuation) is True

    def test_outside_valuation(self) -> None:
        """A variable beyond the valuation is inapplicable."""
        assert Literal(3).is_satisfied_by([True, True]) is None


class TestClause:
    """Tests for Clause."""

    def test_equality_ignores_order(self) -> None:
        assert Clause.from_ints([1, -3]) == Clause.from_ints([-3, 1])

    def test_equality_ignores_duplicates(self) -> None:
        assert Clause.from_ints([1, 1, 2]) == Clause.from_ints([2, 1])

    def test_negation_matters(self) -> None:
        assert Clause.from_ints([1, 3]) != Clause.from_ints([1, -3])

    def test_hash_consistent_with_equality(self) -> None:
        assert len({Clause.from_ints([1, 2]), Clause.from_ints([2, 1])}) == 1

    def test_order_preserved(self) -> None:
        """Literal order is kept for display."""
        clause = Clause.from_ints([3, -1, 2])
        assert [int(lit) for lit in clause] == [3, -1, 2]
        assert len(clause) == 3

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one literal"):
            Clause([])

    def test_evaluate(self) -> None:
        clause = Clause.from_ints([1, -3])
        assert clause.evaluate([False, True, False]) is True
        assert clause.evaluate([False, True, True]) is False

    def test_evaluate_outside_valuation(self) -> None:
        """Any literal outside the valuation makes the clause inapplicable."""
        assert Clause.from_ints([1, 5]).evaluate([True, True]) is None


class TestFormulaConstruction:
    """Tests for Formula invariants."""

    def test_valid(self) -> None:
        formula = Formula(3, 2, [Clause.from_ints([1, -3]), Clause.from_ints([2, 3])])
        assert formula.num_vars == 3
        assert formula.num_clauses == 2
        assert isinstance(formula.clauses, tuple)

    def test_clause_count_mismatch(self) -> None:
        with pytest.raises(InconsistentNumOfClausesError):
            Formula(2, 2, [Clause.from_ints([1, 2])])

    def test_var_count_mismatch(self) -> None:
        with pytest.raises(InconsistentNumOfVarsError):
            Formula(3, 1, [Clause.from_ints([1, 2])])

    def test_var_out_of_range(self) -> None:
        with pytest.raises(VarOutOfBoundsError):
            Formula(2, 1, [Clause.from_ints([1, 5])])

    def test_empty_formula(self) -> None:
        """A formula with no variables and no clauses is valid."""
        formula = Formula(0, 0, [])
        assert formula.clauses == ()

    def test_rejects_negative_counts(self) -> None:
        with pytest.raises(ValueError, match="num_vars must be non-negative"):
            Formula(-1, 0, [])

    def test_frozen(self) -> None:
        formula = Formula(1, 1, [Clause.from_ints([1])])
        with pytest.raises(AttributeError):
            formula.num_vars = 2

    def test_to_dimacs(self) -> None:
        formula = Formula(3, 2, [Clause.from_ints([1, -3]), Clause.from_ints([2, 3])])
        assert formula.to_dimacs() == "p cnf 3 2\n1 -3 0\n2 3 0\n"


class TestFormulaEvaluate:
    """Tests for Formula.evaluate."""

    def test_satisfying_assignment(self, small_formula: Formula) -> None:
        result = small_formula.evaluate([True, True, False])
        assert result == FormulaEvaluation(solved=True, num_true=2, num_false=0)

    def test_partially_satisfying_assignment(self, small_formula: Formula) -> None:
        result = small_formula.evaluate([False, False, True])
        assert result == FormulaEvaluation(solved=False, num_true=1, num_false=1)

    def test_accepts_numpy_valuation(self, small_formula: Formula) -> None:
        result = small_formula.evaluate(np.array([True, True, False]))
        assert result.solved

    @pytest.mark.parametrize("valuation", [[], [True, True], [True, True, False, True]])
    def test_length_mismatch_is_none(self, small_formula: Formula, valuation: list[bool]) -> None:
        """A valuation of the wrong length is inapplicable, not an error."""
        assert small_formula.evaluate(valuation) is None

    def test_counts_always_add_up(self, three_clause_formula: Formula) -> None:
        """num_true + num_false == num_clauses and solved iff num_false == 0."""
        for valuation in itertools.product([False, True], repeat=3):
            result = three_clause_formula.evaluate(list(valuation))
            assert result.num_true + result.num_false == three_clause_formula.num_clauses
            assert result.solved == (result.num_false == 0)

    def test_matches_clause_evaluation(self, three_clause_formula: Formula) -> None:
        """Vectorised evaluation agrees with clause-by-clause evaluation."""
        for valuation in itertools.product([False, True], repeat=3):
            expected_true = sum(clause.evaluate(valuation) for clause in three_clause_formula.clauses)
            assert three_clause_formula.evaluate(list(valuation)).num_true == expected_true

    def test_empty_formula_is_solved(self) -> None:
        result = Formula(0, 0, []).evaluate([])
        assert result == FormulaEvaluation(solved=True, num_true=0, num_false=0)


class TestFormulaCountUnsatisfied:
    """Tests for the batched Formula.count_unsatisfied."""

    def test_matches_evaluate(self, three_clause_formula: Formula, rng: np.random.Generator) -> None:
        valuations = rng.random((50, 3)) < 0.5
        counts = three_clause_formula.count_unsatisfied(valuations)

        expected = [three_clause_formula.evaluate(row).num_false for row in valuations]
        np.testing.assert_array_equal(counts, expected)

    def test_wrong_width_is_none(self, three_clause_formula: Formula) -> None:
        assert three_clause_formula.count_unsatisfied(np.zeros((4, 2), dtype=bool)) is None

    def test_no_rows(self, three_clause_formula: Formula) -> None:
        counts = three_clause_formula.count_unsatisfied(np.zeros((0, 3), dtype=bool))
        assert counts.shape == (0,)

    def test_no_rows_any_width(self, three_clause_formula: Formula) -> None:
        """An empty batch has no valuation to mismatch."""
        counts = three_clause_formula.count_unsatisfied(np.zeros((0, 5), dtype=bool))
        assert counts.shape == (0,)
        assert counts.dtype == np.int64
