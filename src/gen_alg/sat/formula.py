"""CNF formula data structures and evaluation.

- Literal: a possibly negated reference to a 1-indexed boolean variable
- Clause: a non-empty disjunction of literals
- Formula: a conjunction of clauses over variables 1..num_vars
- FormulaEvaluation: clause counts for one valuation

A Formula checks the same structural invariants the DIMACS parser does, so
every Formula in existence satisfies them: exactly ``num_clauses`` clauses,
and the variables used are exactly ``1..num_vars``.

Evaluation is vectorised: the literals of all clauses are flattened into
index/sign arrays once, at construction, and a valuation (or a whole matrix
of valuations) is scored with a gather and a segmented ``logical_or``.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from gen_alg.errors import (
    InconsistentNumOfClausesError,
    InconsistentNumOfVarsError,
    VarOutOfBoundsError,
)


@dataclass(frozen=True)
class Literal:
    """Reference to variable ``var`` (1-indexed), negated if ``negated``.

    Example:
        >>> Literal.from_int(-3)
        Literal(var=3, negated=True)
        >>> int(Literal(2))
        2
    """

    var: int
    negated: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.var, (int, np.integer)) or isinstance(self.var, bool):
            raise TypeError(f"var must be an integer, got {type(self.var).__name__}")
        if self.var < 1:
            raise ValueError(f"var must be >= 1, got {self.var}")
        object.__setattr__(self, "var", int(self.var))
        object.__setattr__(self, "negated", bool(self.negated))

    @classmethod
    def from_int(cls, value: int) -> "Literal":
        """Convert a nonzero signed DIMACS integer to a literal."""
        if value == 0:
            raise ValueError("0 is a clause terminator, not a literal")
        return cls(abs(value), negated=value < 0)

    def __int__(self) -> int:
        return -self.var if self.negated else self.var

    def is_satisfied_by(self, valuation: Sequence[bool]) -> bool | None:
        """Return whether the valuation satisfies this literal.

        Returns None when the variable lies outside the valuation.
        """
        if self.var > len(valuation):
            return None
        return bool(valuation[self.var - 1]) != self.negated


class Clause:
    """Disjunction of literals.

    Literal order is kept for evaluation and display. Equality and hashing
    ignore order and duplicates: two clauses are equal when they hold the
    same set of literals.

    Example:
        >>> Clause([Literal(1), Literal(3, negated=True)]) == Clause([Literal(3, True), Literal(1)])
        True
    """

    __slots__ = ("_literals",)

    def __init__(self, literals: Iterable[Literal]) -> None:
        literals = tuple(literals)
        if not literals:
            raise ValueError("a clause needs at least one literal")
        for lit in literals:
            if not isinstance(lit, Literal):
                raise TypeError(f"clause members must be Literal, got {type(lit).__name__}")
        self._literals = literals

    @classmethod
    def from_ints(cls, values: Iterable[int]) -> "Clause":
        """Build a clause from nonzero signed DIMACS integers."""
        return cls(Literal.from_int(v) for v in values)

    @property
    def literals(self) -> tuple[Literal, ...]:
        return self._literals

    def as_set(self) -> frozenset[Literal]:
        return frozenset(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self.as_set() == other.as_set()

    def __hash__(self) -> int:
        return hash(self.as_set())

    def __repr__(self) -> str:
        return f"Clause({[int(lit) for lit in self._literals]})"

    def evaluate(self, valuation: Sequence[bool]) -> bool | None:
        """Return True if any literal is satisfied.

        Returns None if any literal references a variable outside the
        valuation, regardless of the other literals.
        """
        results = [lit.is_satisfied_by(valuation) for lit in self._literals]
        if any(r is None for r in results):
            return None
        return any(results)


@dataclass(frozen=True)
class FormulaEvaluation:
    """Result of evaluating one valuation against a formula.

    Attributes:
        solved: True when every clause is satisfied.
        num_true: Number of satisfied clauses.
        num_false: Number of falsified clauses.
    """

    solved: bool
    num_true: int
    num_false: int


@dataclass(frozen=True)
class Formula:
    """Immutable CNF formula.

    Attributes:
        num_vars: Number of variables; variables are exactly 1..num_vars.
        num_clauses: Number of clauses.
        clauses: The clauses, in input order.

    Raises:
        InconsistentNumOfClausesError: If len(clauses) != num_clauses.
        InconsistentNumOfVarsError: If the number of distinct variables != num_vars.
        VarOutOfBoundsError: If the largest variable id != num_vars.

    Example:
        >>> f = Formula(3, 2, [Clause.from_ints([1, -3]), Clause.from_ints([2, 3])])
        >>> f.evaluate([True, True, False])
        FormulaEvaluation(solved=True, num_true=2, num_false=0)
    """

    num_vars: int
    num_clauses: int
    clauses: tuple[Clause, ...]

    def __post_init__(self) -> None:
        for name in ("num_vars", "num_clauses"):
            value = getattr(self, name)
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        clauses = tuple(self.clauses)
        for clause in clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"clauses must contain Clause objects, got {type(clause).__name__}")
        object.__setattr__(self, "clauses", clauses)

        if len(clauses) != self.num_clauses:
            raise InconsistentNumOfClausesError(
                f"header declares {self.num_clauses} clauses, found {len(clauses)}"
            )
        variables = {lit.var for clause in clauses for lit in clause}
        if len(variables) != self.num_vars:
            raise InconsistentNumOfVarsError(
                f"header declares {self.num_vars} variables, found {len(variables)} distinct"
            )
        max_var = max(variables, default=0)
        if max_var != self.num_vars:
            raise VarOutOfBoundsError(f"variable {max_var} does not match declared range 1..{self.num_vars}")

        lits = [lit for clause in clauses for lit in clause]
        object.__setattr__(self, "_lit_index", np.array([lit.var - 1 for lit in lits], dtype=np.intp))
        object.__setattr__(self, "_lit_negated", np.array([lit.negated for lit in lits], dtype=np.bool_))
        starts = np.cumsum([0] + [len(clause) for clause in clauses[:-1]]) if clauses else np.empty(0)
        object.__setattr__(self, "_clause_starts", np.asarray(starts, dtype=np.intp))
        object.__setattr__(self, "_max_var", max_var)

    def _clause_values(self, values: np.ndarray) -> np.ndarray | None:
        """Satisfaction of every clause for each row of a 2-D boolean array.

        Returns None if a literal falls outside the rows.
        """
        if self._max_var > values.shape[1]:
            return None
        if self.num_clauses == 0 or values.shape[0] == 0:
            return np.zeros((values.shape[0], self.num_clauses), dtype=np.bool_)
        lit_values = values[:, self._lit_index] != self._lit_negated
        return np.logical_or.reduceat(lit_values, self._clause_starts, axis=1)

    def evaluate(self, valuation: Sequence[bool] | np.ndarray) -> FormulaEvaluation | None:
        """Score one valuation.

        Args:
            valuation: One boolean per variable; ``valuation[i - 1]`` is the
                value of variable i.

        Returns:
            FormulaEvaluation, or None if len(valuation) != num_vars.
        """
        values = np.asarray(valuation, dtype=np.bool_)
        if values.ndim != 1 or values.shape[0] != self.num_vars:
            return None

        clause_values = self._clause_values(values[np.newaxis, :])
        if clause_values is None:
            return None

        num_true = int(np.count_nonzero(clause_values))
        return FormulaEvaluation(
            solved=num_true == self.num_clauses,
            num_true=num_true,
            num_false=self.num_clauses - num_true,
        )

    def count_unsatisfied(self, valuations: np.ndarray) -> np.ndarray | None:
        """Count falsified clauses for each row of a valuation matrix.

        Args:
            valuations: Boolean array of shape (n, num_vars).

        Returns:
            Integer array of shape (n,), or None if the matrix does not have
            num_vars columns. A matrix with no rows always yields an empty
            array, since there is no valuation to mismatch.

        Example:
            >>> f = Formula(2, 2, [Clause.from_ints([1]), Clause.from_ints([-2])])
            >>> f.count_unsatisfied(np.array([[True, False], [False, True]]))
            array([0, 2])
        """
        values = np.asarray(valuations, dtype=np.bool_)
        if values.ndim == 2 and values.shape[0] == 0:
            return np.zeros(0, dtype=np.int64)
        if values.ndim != 2 or values.shape[1] != self.num_vars:
            return None

        clause_values = self._clause_values(values)
        if clause_values is None:
            return None
        return self.num_clauses - np.count_nonzero(clause_values, axis=1).astype(np.int64)

    def to_dimacs(self) -> str:
        """Render the formula in DIMACS CNF text format."""
        lines = [f"p cnf {self.num_vars} {self.num_clauses}"]
        lines.extend(" ".join(str(int(lit)) for lit in clause) + " 0" for clause in self.clauses)
        return "\n".join(lines) + "\n"
