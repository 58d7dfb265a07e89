"""Entry points: solve a system and produce both narrated documents."""

import logging
import time
from datetime import datetime

from lgsolver.assembler import INFINITE, NO_SOLUTION, assemble, verify
from lgsolver.config import EXACT, load_settings
from lgsolver.engine import EliminationState, eliminate
from lgsolver.field import field_for
from lgsolver.formatting import NumberFormat, round_value
from lgsolver.language import STEP_TITLES
from lgsolver.parsing import InputError, parse_system
from lgsolver.render.latex import LatexRenderer
from lgsolver.render.markup import MarkupRenderer
from lgsolver.trace import Trace

logger = logging.getLogger(__name__)


def _vector_str(values, fmt) -> str:
    return "(" + ", ".join(round_value(v, fmt) for v in values) + ")"


def _final_answer(solution, fmt) -> str:
    if solution.classification == NO_SOLUTION:
        return (
            "No solution. The system is inconsistent:\n"
            f"row {solution.contradiction_row + 1} reads "
            f"0 = {round_value(solution.contradiction_value, fmt)}."
        )
    if solution.classification == INFINITE:
        terms = [_vector_str(solution.particular, fmt)]
        terms += [f"λ{k}·{_vector_str(v, fmt)}" for k, v in enumerate(solution.basis, 1)]
        params = ", ".join(f"λ{k}" for k in range(1, len(solution.basis) + 1))
        return f"x = {' + '.join(terms)}\nfor any real {params}"
    return "\n".join(
        f"x{j} = {round_value(v, fmt)}" for j, v in enumerate(solution.particular, 1)
    )


def solve_system(matrix_cells, vector_cells, precision=3, **options) -> dict:
    """
    Solve ``Mx = b`` by Gauss-Jordan elimination.

    *matrix_cells* / *vector_cells* hold raw cell strings (or numbers).
    *precision* is a digit count or ``"exact"``; further *options* are
    ``theme``, ``decimal_separator`` and ``group_separator``.

    Returns a dict with trail-format sections:
      - given, method, steps, classification, solution, final_answer,
        verification_steps, markup, latex, summary

    Raises :class:`~lgsolver.parsing.InputError` for unusable input.
    """
    t_start = time.perf_counter()
    settings = load_settings({"precision": precision, **options})
    parsed = parse_system(matrix_cells, vector_cells, exact=settings.exact)
    field = field_for(parsed.exact)
    fmt = NumberFormat.from_settings(settings)
    logger.debug("solving %d×%d system with %s", parsed.rows, parsed.cols, field.name)

    result = eliminate(parsed.matrix, parsed.vector, field)
    solution = assemble(result)

    trace = Trace(MarkupRenderer(fmt, settings.theme), LatexRenderer(fmt))
    trace.extend(result.narrations)
    trace.extend(solution.narrations)

    original = EliminationState.start(parsed.matrix, parsed.vector, field)
    verification_steps, ok = verify(original.matrix, original.vector, solution, field, fmt)

    steps = []
    for i, step in enumerate(trace, 1):
        steps.append({
            "step_number": i,
            "kind": step.kind,
            "description": STEP_TITLES[step.kind],
            "markup": step.markup,
            "latex": step.latex,
        })

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)

    return {
        "given": {
            "problem": "Solve the linear equation system Mx = b",
            "inputs": {
                "rows": str(parsed.rows),
                "columns": str(parsed.cols),
                "mode": field.name,
                "precision": EXACT if settings.exact else str(settings.precision),
            },
        },
        "method": {
            "name": "Gauss-Jordan Elimination",
            "description": (
                "Create a 1 on the diagonal of each column and zeros everywhere "
                "else in that column, swapping rows or columns when needed."
            ),
            "parameters": {
                "pivoting": "first non-zero entry (rows, then columns, then both)",
                "approach": "Pivot → Normalize row → Clear column → Read off solution",
            },
        },
        "steps": steps,
        "classification": solution.classification,
        "solution": {
            "particular": solution.particular,
            "basis": list(solution.basis),
            "permutation": list(solution.permutation),
            "rank": solution.rank,
        },
        "final_answer": _final_answer(solution, fmt),
        "verification_steps": verification_steps,
        "markup": MarkupRenderer(fmt, settings.theme).document(trace.markup),
        "latex": LatexRenderer(fmt).document(trace.latex),
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "rank": solution.rank,
            "free_variables": solution.free_variables,
            "validation_status": "pass" if ok else "fail",
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "arithmetic": field.name,
        },
    }


def solve_documents(matrix_cells, vector_cells, precision=3, **options) -> tuple[str, str]:
    """Return ``(markup, latex)``; both are the error message on bad input."""
    try:
        result = solve_system(matrix_cells, vector_cells, precision, **options)
    except InputError as exc:
        logger.info("input rejected: %s", exc.message)
        return exc.message, exc.message
    return result["markup"], result["latex"]
