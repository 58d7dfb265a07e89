"""Narrated derivation steps.

The engine and the assembler emit :class:`Narration` events: a step kind,
its arguments and an optional :class:`Snapshot` of the system with abstract
highlight roles per cell.  A :class:`Trace` renders every event into both
output forms as it is appended, so the two documents always describe the
same sequence of steps.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

# ── Highlight roles ─────────────────────────────────────────────────────
# Colors are chosen by the presentation layer (see ``lgsolver.themes``).

ACTIVE_ROW = "active_row"
ACTIVE_CELL = "active_cell"
PIVOT = "pivot"
FREE_COLUMN = "free_column"
RIGHT_HAND_SIDE = "right_hand_side"
ZERO_ROW = "zero_row"
CONTRADICTION = "contradiction"

ROLES = (ACTIVE_ROW, ACTIVE_CELL, PIVOT, FREE_COLUMN,
         RIGHT_HAND_SIDE, ZERO_ROW, CONTRADICTION)


@dataclass(frozen=True)
class Snapshot:
    """Copy of M|b at one point of the derivation.

    ``roles`` maps ``(row, col)`` to a highlight role; ``col == len(row)``
    addresses the right-hand-side entry of that row.
    """

    matrix: tuple
    vector: tuple
    roles: Mapping[tuple, str] = field(default_factory=dict)

    @property
    def rows(self) -> int:
        return len(self.matrix)

    @property
    def cols(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    def role(self, row: int, col: int) -> Optional[str]:
        return self.roles.get((row, col))


def row_highlight(matrix, vector, row: int, col: int) -> Snapshot:
    """Snapshot with *row* marked active and its cell in *col* emphasised."""
    cols = len(matrix[0]) if matrix else 0
    roles = {(row, j): ACTIVE_ROW for j in range(cols + 1)}
    roles[(row, col)] = ACTIVE_CELL
    return Snapshot(tuple(matrix), tuple(vector), roles)


@dataclass(frozen=True)
class Narration:
    kind: str
    args: Mapping[str, Any] = field(default_factory=dict)
    snapshot: Optional[Snapshot] = None


def narrate(kind: str, snapshot: Optional[Snapshot] = None, **args) -> Narration:
    return Narration(kind, args, snapshot)


@dataclass(frozen=True)
class TraceStep:
    narration: Narration
    markup: str
    latex: str

    @property
    def kind(self) -> str:
        return self.narration.kind


class Trace:
    """Ordered steps, each rendered by the markup and the LaTeX renderer."""

    def __init__(self, markup_renderer, latex_renderer):
        self._markup = markup_renderer
        self._latex = latex_renderer
        self.steps: list[TraceStep] = []

    def append(self, narration: Narration) -> TraceStep:
        step = TraceStep(
            narration,
            self._markup.render(narration),
            self._latex.render(narration),
        )
        self.steps.append(step)
        return step

    def extend(self, narrations) -> None:
        for narration in narrations:
            self.append(narration)

    def kinds(self) -> list[str]:
        return [s.kind for s in self.steps]

    @property
    def markup(self) -> str:
        return "".join(s.markup for s in self.steps)

    @property
    def latex(self) -> str:
        return "".join(s.latex for s in self.steps)

    def __len__(self):
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)
