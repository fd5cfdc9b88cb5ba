"""Exception types raised by gen_alg.

Two families of errors exist:

- ConfigError: an encoding descriptor, generator or run configuration
  violates its invariants (negative dimension, inverted bounds, unknown
  encoding type, ...).
- FormulaParsingError: a DIMACS CNF stream could not be turned into a
  valid Formula. One subclass per failure kind so callers can catch
  exactly what they care about.

Both derive from ValueError so code that already guards against bad
values keeps working.
"""


class ConfigError(ValueError):
    """Invalid encoding, generator or run configuration."""


class FormulaParsingError(ValueError):
    """Base class for DIMACS CNF parsing failures.

    Attributes:
        line: 1-based line number where the failure was detected, or None
            when the failure concerns the formula as a whole.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class FormulaIOError(FormulaParsingError):
    """Reading the underlying stream failed."""


class TokenParseError(FormulaParsingError):
    """A header or clause token is not a valid integer."""


class NoHeaderError(FormulaParsingError):
    """The stream contains no lines at all."""


class InvalidHeaderError(FormulaParsingError):
    """The first line is not of the form ``p cnf <num_vars> <num_clauses>``."""


class EmptyClauseError(FormulaParsingError):
    """A clause line holds no literal before its terminating 0."""


class InconsistentNumOfVarsError(FormulaParsingError):
    """The number of distinct variables differs from the header."""


class InconsistentNumOfClausesError(FormulaParsingError):
    """The number of clauses differs from the header."""


class VarOutOfBoundsError(FormulaParsingError):
    """Variable ids are not exactly the range 1..num_vars."""
