"""Boolean satisfiability: CNF formulas and the DIMACS CNF parser."""

from gen_alg.sat.dimacs import parse_dimacs, parse_dimacs_string
from gen_alg.sat.formula import Clause, Formula, FormulaEvaluation, Literal

__all__ = ["Literal", "Clause", "Formula", "FormulaEvaluation", "parse_dimacs", "parse_dimacs_string"]
