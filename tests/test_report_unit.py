import pytest
from sympy import Matrix, Rational

from lgsolver import report, solve_documents, solve_system
from lgsolver.render import LatexRenderer, MarkupRenderer
from lgsolver.trace import narrate

REQUIRED_FIELDS = {
    "given",
    "method",
    "steps",
    "classification",
    "solution",
    "final_answer",
    "verification_steps",
    "markup",
    "latex",
    "summary",
}


def test_solve_system_required_fields_and_summary() -> None:
    result = solve_system([["1", "2"], ["3", "4"]], ["5", "6"])
    assert REQUIRED_FIELDS <= set(result)
    assert result["classification"] == "unique"
    assert result["final_answer"] == "x1 = -4\nx2 = 4.5"
    assert result["given"]["inputs"]["precision"] == "3"

    summary = result["summary"]
    assert summary["total_steps"] == len(result["steps"]) == 15
    assert summary["rank"] == 2
    assert summary["free_variables"] == 0
    assert summary["validation_status"] == "pass"
    assert summary["arithmetic"] == "floating point"
    assert summary["runtime_ms"] >= 0


def test_steps_are_numbered_and_rendered_twice() -> None:
    result = solve_system([["1", "2"], ["3", "4"]], ["5", "6"])
    steps = result["steps"]
    assert [s["step_number"] for s in steps] == list(range(1, len(steps) + 1))
    for step in steps:
        assert step["description"]
        assert step["markup"]
        assert step["latex"]
    assert [s["kind"] for s in steps][:3] == ["initial_system", "column", "pivot_heading"]


def test_markup_document_narrates_operations() -> None:
    markup, _ = solve_documents([["1", "2"], ["3", "4"]], ["5", "6"])
    assert markup.startswith('<div class="lgs-report">')
    assert "Add (-3) times row 1 to row 2." in markup
    assert "Multiply row 2 by -1/2." in markup
    assert "The system has exactly one solution." in markup
    assert "#DDFFDD" in markup


def test_latex_document_is_standalone() -> None:
    _, latex = solve_documents([["1", "2"], ["3", "4"]], ["5", "6"])
    assert latex.startswith("\\documentclass")
    assert latex.rstrip().endswith("\\end{document}")
    assert "\\usepackage[table]{xcolor}" in latex
    assert "\\definecolor{lgsactiverow}{HTML}{DDFFDD}" in latex
    assert "Add $\\left(-3\\right)$ times row 1 to row 2." in latex
    assert "Multiply row 2 by $-\\frac{1}{2}$." in latex
    assert "\\boxed{" in latex
    assert latex.count("\\section*{Column") == 2


def test_dark_theme_only_changes_markup_colors() -> None:
    light_markup, light_latex = solve_documents([["1", "2"], ["3", "4"]], ["5", "6"])
    dark_markup, dark_latex = solve_documents([["1", "2"], ["3", "4"]], ["5", "6"], theme="dark")
    assert "#115511" in dark_markup
    assert "#115511" not in light_markup
    assert light_latex == dark_latex


def test_exact_mode_via_fraction_literal() -> None:
    result = solve_system([["1", "1"], ["1", "-1"]], ["1/3", "1/6"])
    assert result["summary"]["arithmetic"] == "exact fractions"
    assert result["final_answer"] == "x1 = 1/4\nx2 = 1/12"
    assert "\\frac{1}{12}" in result["latex"]
    assert result["summary"]["validation_status"] == "pass"


def test_exact_mode_via_precision_setting() -> None:
    result = solve_system([["2", "0"], ["0", "3"]], ["1", "1"], precision="exact")
    assert result["given"]["inputs"]["precision"] == "exact"
    assert result["final_answer"] == "x1 = 1/2\nx2 = 1/3"


def test_precision_controls_float_digits() -> None:
    result = solve_system([["3"]], ["1"], precision=5)
    assert result["final_answer"] == "x1 = 0.33333"
    result = solve_system([["3"]], ["1"], precision=1)
    assert result["final_answer"] == "x1 = 0.3"


def test_infinite_and_inconsistent_answers() -> None:
    infinite = solve_system([["1", "1"], ["2", "2"]], ["2", "4"])
    assert infinite["classification"] == "infinite"
    assert infinite["final_answer"] == "x = (2, 0) + λ1·(-1, 1)\nfor any real λ1"
    assert infinite["summary"]["free_variables"] == 1

    none = solve_system([["1", "1"], ["1", "1"]], ["1", "2"])
    assert none["classification"] == "none"
    assert none["final_answer"].endswith("row 2 reads 0 = 1.")
    assert none["verification_steps"] == []
    assert "therefore the system has no solution" in none["markup"]


def test_column_swap_is_narrated_in_both_documents() -> None:
    markup, latex = solve_documents([["0", "1"], ["0", "2"]], ["3", "6"])
    assert "Swapping of the columns 1 and 2." in markup
    assert "Swapping of the columns 1 and 2." in latex
    assert "Sorting back the columns:" in markup
    assert "x^{*}" in latex


@pytest.mark.parametrize(
    "matrix,vector,message",
    [
        ([["1", "a"]], ["1"], "The specified values in the matrix M are invalid."),
        ([["1", "2"]], ["b"], "The specified values in the vector b are invalid."),
    ],
)
def test_solve_documents_returns_error_message(matrix, vector, message) -> None:
    assert solve_documents(matrix, vector) == (message, message)


def test_solve_system_raises_on_bad_input() -> None:
    with pytest.raises(ValueError):
        solve_system([["1", "a"]], ["1"])


def test_unknown_narration_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown narration kind"):
        MarkupRenderer().render(narrate("bogus"))
    with pytest.raises(ValueError):
        LatexRenderer().render(narrate("bogus"))


def test_step_titles_cover_every_emitted_kind() -> None:
    result = solve_system([["0", "0"], ["0", "5"]], ["0", "10"])
    kinds = {s["kind"] for s in result["steps"]}
    assert kinds <= set(report.STEP_TITLES)


def test_overflowing_input_gives_the_matrix_message() -> None:
    message = "The specified values in the matrix M are invalid."
    assert solve_documents([["1e400"]], ["1"], "exact") == (message, message)


def test_exact_mode_with_long_decimals_finishes() -> None:
    matrix = [
        ["0.1234567", "0.7654321", "0.3141593"],
        ["0.2718282", "0.1414214", "0.5772157"],
        ["0.6931472", "0.1732051", "0.2236068"],
    ]
    vector = ["1", "2", "3"]
    result = solve_system(matrix, vector, precision="exact")
    assert result["classification"] == "unique"
    assert result["summary"]["validation_status"] == "pass"

    expected = Matrix([[Rational(c) for c in row] for row in matrix]).LUsolve(
        Matrix([Rational(v) for v in vector])
    )
    got = [Rational(v.numerator, v.denominator) for v in result["solution"]["particular"]]
    assert got == list(expected)


def test_contradiction_uses_theme_palette() -> None:
    markup, _ = solve_documents([["1", "1"], ["1", "1"]], ["1", "2"])
    assert "color: #FF0000;" in markup
    assert "color: red" not in markup
