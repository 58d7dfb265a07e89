"""English narration strings shared by the markup and LaTeX renderers.

Placeholders are filled with renderer-specific fragments (numbers,
subscripted entries), so the wording itself stays identical in both
documents.
"""

TEXT = {
    "initial_system": "Initial system",
    "column": "Column {col}",
    "generation_of": "Generation of {entry}",
    "generation_of_zeros": "Generation of zeros in {entry} for {condition}",
    "already_the_case": "Is already the case.",
    "swap_rows": "Swapping of the rows {first} and {second}.",
    "swap_cols": "Swapping of the columns {first} and {second}.",
    "swap_rows_and_cols": (
        "Swapping of the rows {first} and {second} "
        "and at the same time of the columns {first_col} and {second_col}."
    ),
    "not_possible": "Is not possible.",
    "scale_row": "Multiply row {row} by {factor}.",
    "add_row": "Add {factor} times row {source} to row {target}.",
    "solution_heading": "Solution of the linear equation system",
    "no_solution": "In row {row} we have {equation}, therefore the system has no solution.",
    "underdetermined": "The system is {free} times underdetermined.",
    "underdetermined_reason": (
        "(The system has {variables} variables, but only {rank} linearly independent rows.)"
    ),
    "underdetermined_space": (
        "The solution space is a linear combination of the columns marked as free "
        "with switched signs, shifted by the vector of the right-hand side."
    ),
    "unique_solution": "The system has exactly one solution.",
    "unique_solution_rhs": (
        "The right-hand side of the system after the last Gauss step is the solution vector."
    ),
    "reswap_before": "Before sorting back the columns:",
    "reswap": "Sorting back the columns:",
    "final_solution": "Final solution of the system:",
    "error_matrix": "The specified values in the matrix M are invalid.",
    "error_vector": "The specified values in the vector b are invalid.",
    "document_title": "Linear equation system solver",
}


def text(key: str, **values) -> str:
    """Look up *key* and fill its placeholders."""
    return TEXT[key].format(**values)


# Short plain-text titles for the step list of a result dict.
STEP_TITLES = {
    "initial_system": "Initial system",
    "column": "Next column",
    "pivot_heading": "Make the pivot 1",
    "zeros_heading": "Clear the pivot column",
    "already_the_case": "Already the case",
    "swap_rows": "Swap rows",
    "swap_cols": "Swap columns",
    "swap_rows_and_cols": "Swap rows and columns",
    "not_possible": "No pivot available",
    "scale_row": "Scale the pivot row",
    "add_row": "Add a multiple of the pivot row",
    "solution_heading": "Solution",
    "reduced_system": "Reduced system",
    "no_solution": "Contradiction",
    "underdetermined": "Underdetermined system",
    "unique_solution": "Unique solution",
    "reswap_before": "Solution in swapped column order",
    "reswap": "Sort columns back",
    "final_solution": "Final solution",
    "solution_set": "Solution set",
}
