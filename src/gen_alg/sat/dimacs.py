"""DIMACS CNF parser.

Accepted format::

    p cnf <num_vars> <num_clauses>
    c a comment line
    1 -3 0
    2 3 0
    %

The first line must be the header. Afterwards, blank lines and lines
starting with ``c`` are skipped, a line starting with ``%`` ends the input,
and every other line is one clause: signed integers terminated by ``0``.
Anything after the ``0`` on the same line is ignored.

The stream is read once, line by line. Every failure raises a subclass of
FormulaParsingError; nothing partial is ever returned.
"""

import io
import logging
import re
from collections.abc import Iterable, Iterator

from gen_alg.errors import (
    EmptyClauseError,
    FormulaIOError,
    InvalidHeaderError,
    NoHeaderError,
    TokenParseError,
)
from gen_alg.sat.formula import Clause, Formula, Literal

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _read_lines(source: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line_number, stripped_line), lifting OSError to FormulaIOError."""
    lines = iter(source)
    lineno = 0
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise FormulaIOError(f"failed to read input: {e}", line=lineno + 1) from e
        lineno += 1
        yield lineno, line.strip()


def _parse_int(token: str, lineno: int) -> int:
    # int() alone would also take "1_0" and non-ASCII digits.
    if not _INT_TOKEN.fullmatch(token):
        raise TokenParseError(f"invalid integer {token!r}", line=lineno)
    return int(token)


def _parse_header(line: str, lineno: int) -> tuple[int, int]:
    parts = line.split()
    if len(parts) < 4 or parts[0] != "p" or parts[1] != "cnf":
        raise InvalidHeaderError(f"expected 'p cnf <num_vars> <num_clauses>', got {line!r}", line=lineno)

    num_vars = _parse_int(parts[2], lineno)
    num_clauses = _parse_int(parts[3], lineno)
    if num_vars < 0 or num_clauses < 0:
        raise TokenParseError(f"header counts must be non-negative, got {num_vars} {num_clauses}", line=lineno)
    return num_vars, num_clauses


def _parse_clause(line: str, lineno: int) -> Clause:
    literals = []
    for token in line.split():
        value = _parse_int(token, lineno)
        if value == 0:
            break
        literals.append(Literal.from_int(value))

    if not literals:
        raise EmptyClauseError("clause has no literals", line=lineno)
    return Clause(literals)


def parse_dimacs(source: Iterable[str]) -> Formula:
    """Parse a DIMACS CNF stream into a Formula.

    Args:
        source: Iterable of text lines, e.g. an open text file or io.StringIO.

    Returns:
        The parsed Formula.

    Raises:
        NoHeaderError: If the stream is empty.
        InvalidHeaderError: If the first line is not ``p cnf <vars> <clauses>``.
        TokenParseError: If a header count or clause token is not an integer.
        EmptyClauseError: If a clause line has no literal before ``0``.
        InconsistentNumOfClausesError: If the clause count differs from the header.
        InconsistentNumOfVarsError: If the distinct variable count differs from the header.
        VarOutOfBoundsError: If the variables are not exactly 1..num_vars.
        FormulaIOError: If reading the stream fails.

    Example:
        >>> f = parse_dimacs(io.StringIO("p cnf 3 2\\n1 -3 0\\n2 3 0\\n%"))
        >>> f.num_vars, f.num_clauses
        (3, 2)
    """
    lines = _read_lines(source)

    header = next(lines, None)
    if header is None:
        raise NoHeaderError("input is empty")
    num_vars, num_clauses = _parse_header(header[1], header[0])

    clauses: list[Clause] = []
    for lineno, line in lines:
        if line.startswith("%"):
            break
        if not line or line.startswith("c"):
            continue
        clauses.append(_parse_clause(line, lineno))

    formula = Formula(num_vars=num_vars, num_clauses=num_clauses, clauses=clauses)
    logger.debug("parsed CNF formula with %d variables and %d clauses", num_vars, num_clauses)
    return formula


def parse_dimacs_string(text: str) -> Formula:
    """Parse DIMACS CNF text held in a string. See parse_dimacs."""
    return parse_dimacs(io.StringIO(text))
