import pytest

from lgsolver import engine
from lgsolver.field import FloatField, FractionField
from lgsolver.fraction import Fraction
from lgsolver.trace import ACTIVE_CELL, ACTIVE_ROW


def _kinds(narrations) -> list[str]:
    return [n.kind for n in narrations]


def test_state_operations_return_new_states() -> None:
    field = FloatField()
    state = engine.EliminationState.start([[1, 2], [3, 4]], [5, 6], field)
    swapped = state.swap_rows(0, 1)
    assert state.matrix == ((1.0, 2.0), (3.0, 4.0))
    assert swapped.matrix == ((3.0, 4.0), (1.0, 2.0))
    assert swapped.vector == (6.0, 5.0)

    cols = state.swap_cols(0, 1)
    assert cols.matrix == ((2.0, 1.0), (4.0, 3.0))
    assert cols.permutation == [1, 0]
    assert state.permutation == [0, 1]

    scaled = state.scale_row(1, 2.0, field)
    assert scaled.matrix[1] == (1.5, 2.0)
    assert scaled.vector[1] == 3.0

    added = state.add_multiple(0, 1, -3.0, 0, field)
    assert added.matrix[1] == (0.0, -2.0)
    assert added.vector[1] == -9.0


def test_eliminate_unique_two_by_two() -> None:
    result = engine.eliminate([[1, 2], [3, 4]], [5, 6], FloatField())
    assert result.rank_deficient_at is None
    assert result.rank == 2
    assert result.matrix == ((1.0, 0.0), (0.0, 1.0))
    assert result.vector[0] == pytest.approx(-4.0)
    assert result.vector[1] == pytest.approx(4.5)
    assert _kinds(result.narrations) == [
        "initial_system",
        "column", "pivot_heading", "already_the_case", "zeros_heading", "add_row",
        "column", "pivot_heading", "scale_row", "zeros_heading", "add_row",
    ]


def test_narration_arguments_for_scale_and_add() -> None:
    result = engine.eliminate([[1, 2], [3, 4]], [5, 6], FloatField())
    add_first = result.narrations[5]
    assert add_first.args == {"factor": -3.0, "source": 0, "target": 1}
    assert add_first.snapshot.role(1, 0) == ACTIVE_CELL
    assert add_first.snapshot.role(1, 2) == ACTIVE_ROW
    assert add_first.snapshot.role(0, 0) is None

    scale = result.narrations[8]
    assert scale.args["row"] == 1
    assert scale.args["negative"] is True
    assert scale.args["magnitude"] == pytest.approx(2.0)
    assert scale.args["inverse"] == pytest.approx(0.5)
    assert scale.args["integral"] is True


def test_identity_matrix_needs_no_operations() -> None:
    result = engine.eliminate([[1, 0], [0, 1]], [7, 8], FloatField())
    assert "add_row" not in _kinds(result.narrations)
    assert "scale_row" not in _kinds(result.narrations)
    assert _kinds(result.narrations).count("already_the_case") == 4
    assert result.vector == (7.0, 8.0)


def test_row_swap_when_pivot_is_zero() -> None:
    result = engine.eliminate([[0, 1], [1, 0]], [3, 5], FloatField())
    kinds = _kinds(result.narrations)
    assert kinds[3] == "swap_rows"
    assert result.narrations[3].args == {"first": 0, "second": 1}
    assert result.vector == (5.0, 3.0)
    assert result.permutation.is_identity


def test_column_swap_when_column_below_is_zero() -> None:
    result = engine.eliminate([[0, 1], [0, 2]], [3, 6], FloatField())
    kinds = _kinds(result.narrations)
    assert "swap_cols" in kinds
    assert result.permutation == [1, 0]
    assert result.rank_deficient_at == 1
    assert result.rank == 1
    assert kinds[-1] == "not_possible"


def test_row_and_column_swap_from_submatrix() -> None:
    result = engine.eliminate([[0, 0], [0, 5]], [0, 10], FloatField())
    swap = [n for n in result.narrations if n.kind == "swap_rows_and_cols"]
    assert len(swap) == 1
    assert swap[0].args == {"first": 0, "second": 1, "first_col": 0, "second_col": 1}
    assert result.permutation == [1, 0]
    assert result.vector[0] == pytest.approx(2.0)
    assert result.rank == 1


def test_zero_matrix_stops_at_first_column() -> None:
    result = engine.eliminate([[0, 0], [0, 0]], [0, 0], FloatField())
    assert result.rank_deficient_at == 0
    assert result.rank == 0
    assert _kinds(result.narrations)[-1] == "not_possible"


def test_find_pivot_reports_failure() -> None:
    field = FloatField()
    state = engine.EliminationState.start([[1, 0], [0, 0]], [1, 0], field)
    new_state, found, notes = engine.find_pivot(state, 1, field)
    assert found is False
    assert notes == []
    assert new_state is state


def test_float_tolerance_treats_tiny_values_as_zero() -> None:
    result = engine.eliminate([[1, 1], [1, 1 + 1e-15]], [1, 1], FloatField())
    assert result.rank_deficient_at == 1


def test_exact_elimination_keeps_fractions() -> None:
    field = FractionField()
    result = engine.eliminate(
        [[1, 1], [1, -1]], [Fraction(1, 3), Fraction(1, 6)], field
    )
    assert result.vector == (Fraction(1, 4), Fraction(1, 12))
    assert all(isinstance(v, Fraction) for row in result.matrix for v in row)


def test_rectangular_systems_process_min_dimension() -> None:
    wide = engine.eliminate([[1, 2, 3]], [4], FloatField())
    assert wide.rank == 1
    assert _kinds(wide.narrations).count("column") == 1

    tall = engine.eliminate([[1], [2], [3]], [1, 2, 4], FloatField())
    assert tall.rank == 1
    assert tall.vector == (1.0, 0.0, 1.0)
