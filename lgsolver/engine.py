"""Gauss-Jordan elimination with a narrated trace.

The system M|b is carried through the elimination as an immutable
:class:`EliminationState`; every row or column operation returns a new
state.  Columns are processed left to right.  For column ``c`` the engine

1. makes ``a[c][c]`` non-zero, swapping rows, columns or both if needed,
2. divides row ``c`` by ``a[c][c]`` so the pivot becomes 1,
3. adds multiples of row ``c`` to every other row to clear column ``c``.

If no non-zero entry is left in the remaining submatrix, elimination stops
and the column index is reported as the rank-deficiency point.  All number
crunching goes through a :class:`~lgsolver.field.Field`, so the same code
serves floats and exact fractions.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from lgsolver.field import Field
from lgsolver.permutation import Permutation
from lgsolver.trace import Narration, Snapshot, narrate, row_highlight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationState:
    matrix: tuple
    vector: tuple
    permutation: Permutation

    @classmethod
    def start(cls, matrix, vector, field: Field) -> "EliminationState":
        """Initial state with every cell coerced into *field*."""
        m = tuple(tuple(field.coerce(v) for v in row) for row in matrix)
        b = tuple(field.coerce(v) for v in vector)
        cols = len(m[0]) if m else 0
        return cls(m, b, Permutation.identity(cols))

    @property
    def rows(self) -> int:
        return len(self.matrix)

    @property
    def cols(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    def cell(self, row: int, col: int):
        return self.matrix[row][col]

    # ── Elementary operations ───────────────────────────────────────────

    def swap_rows(self, r1: int, r2: int) -> "EliminationState":
        m = list(self.matrix)
        b = list(self.vector)
        m[r1], m[r2] = m[r2], m[r1]
        b[r1], b[r2] = b[r2], b[r1]
        return EliminationState(tuple(m), tuple(b), self.permutation)

    def swap_cols(self, c1: int, c2: int) -> "EliminationState":
        m = []
        for row in self.matrix:
            row = list(row)
            row[c1], row[c2] = row[c2], row[c1]
            m.append(tuple(row))
        return EliminationState(tuple(m), self.vector, self.permutation.swap(c1, c2))

    def scale_row(self, row: int, divisor, field: Field) -> "EliminationState":
        """Divide row *row* (and its right-hand side) by *divisor*."""
        m = list(self.matrix)
        b = list(self.vector)
        m[row] = tuple(field.div(v, divisor) for v in m[row])
        b[row] = field.div(b[row], divisor)
        return EliminationState(tuple(m), tuple(b), self.permutation)

    def add_multiple(self, source: int, target: int, factor, start: int,
                     field: Field) -> "EliminationState":
        """row[target] += factor * row[source], from column *start* on."""
        m = list(self.matrix)
        b = list(self.vector)
        src = m[source]
        m[target] = tuple(
            v if k < start else field.add(v, field.mul(factor, src[k]))
            for k, v in enumerate(m[target])
        )
        b[target] = field.add(b[target], field.mul(factor, b[source]))
        return EliminationState(tuple(m), tuple(b), self.permutation)

    # ── Snapshots ───────────────────────────────────────────────────────

    def snapshot(self, roles=None) -> Snapshot:
        return Snapshot(self.matrix, self.vector, dict(roles or {}))

    def highlight(self, row: int, col: int) -> Snapshot:
        return row_highlight(self.matrix, self.vector, row, col)


@dataclass(frozen=True)
class ColumnStep:
    state: EliminationState
    completed: bool
    narrations: tuple


@dataclass(frozen=True)
class EliminationResult:
    state: EliminationState
    rank_deficient_at: Optional[int]
    narrations: tuple
    field: Field

    @property
    def matrix(self):
        return self.state.matrix

    @property
    def vector(self):
        return self.state.vector

    @property
    def permutation(self) -> Permutation:
        return self.state.permutation

    @property
    def rank(self) -> int:
        """Number of pivots produced."""
        if self.rank_deficient_at is not None:
            return self.rank_deficient_at
        return min(self.state.rows, self.state.cols)


# ── Pivot search ────────────────────────────────────────────────────────

def _nonzero_below(state, col, field):
    for r in range(col + 1, state.rows):
        if not field.is_zero(state.cell(r, col)):
            return r
    return None


def _nonzero_right(state, col, field):
    for k in range(col + 1, state.cols):
        if not field.is_zero(state.cell(col, k)):
            return k
    return None


def _nonzero_submatrix(state, col, field):
    for r in range(col + 1, state.rows):
        for k in range(col + 1, state.cols):
            if not field.is_zero(state.cell(r, k)):
                return r, k
    return None


def find_pivot(state: EliminationState, col: int, field: Field):
    """Bring a non-zero entry to ``(col, col)``.

    Tries a row swap, then a column swap, then both.  Returns
    ``(state, found, narrations)``.
    """
    row = _nonzero_below(state, col, field)
    if row is not None:
        state = state.swap_rows(col, row)
        logger.debug("column %d: swapping rows %d and %d", col, col, row)
        return state, True, [narrate("swap_rows", state.snapshot(), first=col, second=row)]

    other = _nonzero_right(state, col, field)
    if other is not None:
        state = state.swap_cols(col, other)
        logger.debug("column %d: swapping columns %d and %d", col, col, other)
        return state, True, [narrate("swap_cols", state.snapshot(), first=col, second=other)]

    found = _nonzero_submatrix(state, col, field)
    if found is not None:
        row, other = found
        state = state.swap_rows(col, row).swap_cols(col, other)
        logger.debug("column %d: swapping rows %d/%d and columns %d/%d",
                     col, col, row, col, other)
        return state, True, [narrate("swap_rows_and_cols", state.snapshot(),
                                     first=col, second=row,
                                     first_col=col, second_col=other)]

    return state, False, []


# ── Column processing ───────────────────────────────────────────────────

def _normalize_pivot(state, col, field):
    pivot = state.cell(col, col)
    state = state.scale_row(col, pivot, field)
    magnitude = field.abs(pivot)
    note = narrate(
        "scale_row", state.highlight(col, col),
        row=col,
        negative=field.is_negative(pivot),
        magnitude=magnitude,
        inverse=field.inv(magnitude),
        integral=field.is_integral(magnitude),
    )
    return state, note


def clear_column(state: EliminationState, col: int, field: Field):
    """Zero column *col* in every row except the pivot row."""
    notes = []
    for j in range(state.rows):
        if j == col or field.is_zero(state.cell(j, col)):
            continue
        factor = field.neg(state.cell(j, col))
        state = state.add_multiple(col, j, factor, col, field)
        notes.append(narrate("add_row", state.highlight(j, col),
                             factor=factor, source=col, target=j))
    if not notes:
        notes.append(narrate("already_the_case"))
    return state, notes


def process_column(state: EliminationState, col: int, field: Field) -> ColumnStep:
    """Run one Gauss-Jordan step on column *col*."""
    notes: list[Narration] = [narrate("column", col=col), narrate("pivot_heading", col=col)]

    if field.is_one(state.cell(col, col)):
        notes.append(narrate("already_the_case"))
    else:
        if field.is_zero(state.cell(col, col)):
            state, found, swap_notes = find_pivot(state, col, field)
            notes.extend(swap_notes)
            if not found:
                notes.append(narrate("not_possible", col=col))
                logger.debug("column %d: no pivot left, stopping", col)
                return ColumnStep(state, False, tuple(notes))
        if not field.is_one(state.cell(col, col)):
            state, note = _normalize_pivot(state, col, field)
            notes.append(note)

    notes.append(narrate("zeros_heading", col=col))
    state, clear_notes = clear_column(state, col, field)
    notes.extend(clear_notes)
    return ColumnStep(state, True, tuple(notes))


def eliminate(matrix, vector, field: Field) -> EliminationResult:
    """Reduce M|b as far as possible and narrate every step."""
    state = EliminationState.start(matrix, vector, field)
    notes = [narrate("initial_system", state.snapshot())]
    deficient_at = None

    for col in range(min(state.rows, state.cols)):
        step = process_column(state, col, field)
        state = step.state
        notes.extend(step.narrations)
        if not step.completed:
            deficient_at = col
            break

    logger.debug("elimination finished: %d×%d, rank deficient at %s",
                 state.rows, state.cols, deficient_at)
    return EliminationResult(state, deficient_at, tuple(notes), field)
