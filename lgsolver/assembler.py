"""Turn a reduced system into a classified, narrated solution set."""

import logging
from dataclasses import dataclass
from typing import Optional

from lgsolver.engine import EliminationResult
from lgsolver.field import Field
from lgsolver.formatting import DEFAULT_FORMAT, NumberFormat, round_value
from lgsolver.permutation import Permutation
from lgsolver.trace import (
    CONTRADICTION, FREE_COLUMN, PIVOT, RIGHT_HAND_SIDE, ZERO_ROW,
    Snapshot, narrate,
)

logger = logging.getLogger(__name__)

UNIQUE = "unique"
INFINITE = "infinite"
NO_SOLUTION = "none"


@dataclass(frozen=True)
class Solution:
    classification: str
    rank: int
    permutation: Permutation
    particular: Optional[list] = None       # original variable order
    basis: tuple = ()
    swapped_particular: Optional[list] = None   # elimination column order
    contradiction_row: Optional[int] = None
    contradiction_value: object = None
    narrations: tuple = ()

    @property
    def free_variables(self) -> int:
        return len(self.basis)


def zone_snapshot(result: EliminationResult) -> Snapshot:
    """Reduced system with pivot, free-column, right-hand-side and zero-row zones."""
    field = result.field
    rank = result.rank
    m, b = result.matrix, result.vector
    cols = result.state.cols
    roles = {}
    for i in range(len(m)):
        if i < rank:
            roles[(i, cols)] = RIGHT_HAND_SIDE
            for j in range(cols):
                if j >= rank:
                    roles[(i, j)] = FREE_COLUMN
                elif i == j:
                    roles[(i, j)] = PIVOT
        else:
            for j in range(cols):
                roles[(i, j)] = ZERO_ROW
            roles[(i, cols)] = ZERO_ROW if field.is_zero(b[i]) else CONTRADICTION
    return Snapshot(m, b, roles)


def _solution_vectors(result: EliminationResult):
    field = result.field
    m, b = result.matrix, result.vector
    rows, cols = result.state.rows, result.state.cols
    rank = result.rank

    known = min(cols, rows)
    particular = [b[i] for i in range(known)] + [field.zero] * (cols - known)

    basis = []
    free = cols - rank
    for i in range(free):
        vec = [field.neg(m[j][rank + i]) for j in range(rank)]
        vec += [field.one if k == i else field.zero for k in range(free)]
        basis.append(vec)
    return particular, basis


def assemble(result: EliminationResult) -> Solution:
    """Classify the reduced system and build its solution set.

    Rows from the rank on must read ``0 = 0``; the first one that does not
    is reported as a contradiction.  Otherwise the right-hand side is the
    particular solution and every free column contributes one basis vector
    of the null space.  Column swaps are undone at the end.
    """
    field = result.field
    rank = result.rank
    b = result.vector
    rows, cols = result.state.rows, result.state.cols
    perm = result.permutation

    notes = [narrate("solution_heading"), narrate("reduced_system", zone_snapshot(result))]

    for i in range(rank, rows):
        if not field.is_zero(b[i]):
            logger.info("system has no solution: row %d reads 0 = %s", i, b[i])
            notes.append(narrate("no_solution", row=i, value=b[i]))
            return Solution(NO_SOLUTION, rank, perm,
                            contradiction_row=i, contradiction_value=b[i],
                            narrations=tuple(notes))

    free = cols - rank
    if free:
        notes.append(narrate("underdetermined", free=free, variables=cols, rank=rank))
    else:
        notes.append(narrate("unique_solution"))

    particular, basis = _solution_vectors(result)
    vectors = [particular] + basis

    if perm.is_identity:
        notes.append(narrate("solution_set", vectors=vectors, name="x",
                             colored=True, rank=rank, final=True))
        final = vectors
    else:
        final = [perm.restore(v, field.zero) for v in vectors]
        notes.append(narrate("reswap_before"))
        notes.append(narrate("solution_set", vectors=vectors, name="x*",
                             colored=True, rank=rank, final=False))
        notes.append(narrate("reswap", mapping=perm.mapping()))
        notes.append(narrate("final_solution"))
        notes.append(narrate("solution_set", vectors=final, name="x",
                             colored=False, rank=rank, final=True))

    classification = INFINITE if free else UNIQUE
    logger.info("system classified as %s (rank %d, %d free)", classification, rank, free)
    return Solution(
        classification, rank, perm,
        particular=final[0],
        basis=tuple(final[1:]),
        swapped_particular=particular,
        narrations=tuple(notes),
    )


# ── Verification ────────────────────────────────────────────────────────

def verify(matrix, vector, solution: Solution, field: Field,
           fmt: NumberFormat = DEFAULT_FORMAT) -> tuple[list, bool]:
    """Substitute the solution back into the original system.

    *matrix* and *vector* must already be coerced into *field*.  Returns the
    verification steps and whether every check passed.
    """
    if solution.classification == NO_SOLUTION:
        return [], True

    steps = [{
        "description": "Substitute into every equation",
        "expression": "Checking…",
        "explanation": "We plug the particular solution back into each original equation.",
    }]
    all_ok = True

    for i, (row, rhs) in enumerate(zip(matrix, vector)):
        lhs = field.dot(row, solution.particular)
        ok = field.close(lhs, rhs)
        all_ok = all_ok and ok
        steps.append({
            "description": f"Equation ({i + 1})",
            "expression": (
                f"LHS = {round_value(lhs, fmt)},  RHS = {round_value(rhs, fmt)}"
                f"  →  {'✓' if ok else '✗'}"
            ),
            "explanation": (
                f"Both sides equal {round_value(lhs, fmt)}."
                if ok else "Sides differ; please check the input."
            ),
        })

    for k, direction in enumerate(solution.basis, 1):
        ok = all(field.close(field.dot(row, direction), field.zero) for row in matrix)
        all_ok = all_ok and ok
        steps.append({
            "description": f"Direction λ{k}",
            "expression": f"M·v{k} = 0  →  {'✓' if ok else '✗'}",
            "explanation": (
                "Adding any multiple of this vector keeps every equation satisfied."
                if ok else "This direction does not solve the homogeneous system."
            ),
        })

    steps.append({
        "description": "All equations verified" if all_ok else "Verification failed",
        "expression": "All equations satisfied  ✓" if all_ok else "Some equations are not satisfied  ✗",
        "explanation": "The solution is correct." if all_ok else (
            "Rounding in floating point mode can cause this; try exact fractions."
        ),
    })
    for i, s in enumerate(steps, 1):
        s["step_number"] = i
    return steps, all_ok
