"""Raw cell strings → numeric Matrix and Vector.

A cell is either a plain decimal (``"."`` or ``","`` as separator, optional
exponent) or an exact fraction literal ``p/q``.  If any cell is a fraction
literal, or the precision setting asks for exact arithmetic, the whole
system is promoted to :class:`~lgsolver.fraction.Fraction`.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from lgsolver.fraction import Fraction
from lgsolver.language import text

_DECIMAL = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')
_FRACTION = re.compile(r'^([+-]?\d+)\s*/\s*([+-]?\d+)$')


class InputError(ValueError):
    """A Matrix or Vector cell could not be used."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.row = row
        self.col = col


class MatrixInputError(InputError):
    def __init__(self, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(text("error_matrix"), row, col)


class VectorInputError(InputError):
    def __init__(self, row: Optional[int] = None):
        super().__init__(text("error_vector"), row)


@dataclass(frozen=True)
class ParsedSystem:
    matrix: list
    vector: list
    exact: bool

    @property
    def rows(self) -> int:
        return len(self.matrix)

    @property
    def cols(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0


def parse_cell(raw) -> Optional[object]:
    """Parse one cell; returns a float, a Fraction, or None if unusable.

    Values that overflow to infinity (``"1e400"``) and NaN are unusable.
    """
    if isinstance(raw, Fraction):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            value = float(raw)
        except OverflowError:
            return None
        return value if math.isfinite(value) else None
    s = str(raw).strip().replace(" ", "")
    m = _FRACTION.match(s)
    if m:
        numerator, denominator = int(m.group(1)), int(m.group(2))
        if denominator == 0:
            return None
        return Fraction(numerator, denominator)
    s = s.replace(",", ".")
    if _DECIMAL.match(s):
        value = float(s)
        return value if math.isfinite(value) else None
    return None


def parse_system(matrix_cells, vector_cells, exact: bool = False) -> ParsedSystem:
    """Validate and convert raw input.

    Raises :class:`MatrixInputError` or :class:`VectorInputError` for the
    first unusable cell; shape problems are reported the same way.
    """
    if not matrix_cells or not matrix_cells[0]:
        raise MatrixInputError()
    width = len(matrix_cells[0])

    matrix = []
    for i, row in enumerate(matrix_cells):
        if len(row) != width:
            raise MatrixInputError(i)
        parsed_row = []
        for j, raw in enumerate(row):
            value = parse_cell(raw)
            if value is None:
                raise MatrixInputError(i, j)
            parsed_row.append(value)
        matrix.append(parsed_row)

    if len(vector_cells) != len(matrix):
        raise VectorInputError()
    vector = []
    for i, raw in enumerate(vector_cells):
        value = parse_cell(raw)
        if value is None:
            raise VectorInputError(i)
        vector.append(value)

    if not exact:
        exact = any(isinstance(v, Fraction) for v in vector) or any(
            isinstance(v, Fraction) for row in matrix for v in row
        )
    if exact:
        matrix = [[Fraction.from_number(v) for v in row] for row in matrix]
        vector = [Fraction.from_number(v) for v in vector]

    return ParsedSystem(matrix, vector, exact)


def split_rows(source: str) -> list[list[str]]:
    """Split ``"1 2; 3 4"`` into ``[["1", "2"], ["3", "4"]]``."""
    rows = [r.split() for r in source.split(";")]
    return [r for r in rows if r]
