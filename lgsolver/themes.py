"""
Colour definitions for the highlight roles.

The engine only tags cells with abstract roles (see ``lgsolver.trace``);
this module decides what they look like.  The markup report follows the
chosen light/dark palette, the LaTeX report always uses ``PRINT_PALETTE``.
"""

from lgsolver import trace

# ── Immutable palette dicts ────────────────────────────────────────────────

LIGHT_PALETTE = {
    trace.ACTIVE_ROW:      "#DDFFDD",
    trace.ACTIVE_CELL:     "#FFCCCC",
    trace.PIVOT:           "#FFBBBB",
    trace.FREE_COLUMN:     "#AAFFAA",
    trace.RIGHT_HAND_SIDE: "#AAAAFF",
    trace.ZERO_ROW:        "#D3D3D3",
    trace.CONTRADICTION:   "#FF0000",
}

DARK_PALETTE = {
    trace.ACTIVE_ROW:      "#115511",
    trace.ACTIVE_CELL:     "#551111",
    trace.PIVOT:           "#551111",
    trace.FREE_COLUMN:     "#115511",
    trace.RIGHT_HAND_SIDE: "#111155",
    trace.ZERO_ROW:        "#555555",
    trace.CONTRADICTION:   "#FF0000",
}

PRINT_PALETTE = LIGHT_PALETTE

# Table chrome that does not depend on a role.
BORDER = "lightgray"
SEPARATOR = "black"
SOLUTION_BORDER = "green"


def palette(theme: str) -> dict:
    """Return the palette dict for *theme* (``"dark"`` or ``"light"``)."""
    return DARK_PALETTE if theme == "dark" else LIGHT_PALETTE


def latex_color_name(role: str) -> str:
    """Name under which *role* is defined in the LaTeX preamble."""
    return "lgs" + role.replace("_", "")


def latex_color_definitions() -> str:
    """``\\definecolor`` lines for every role of the print palette."""
    return "".join(
        f"\\definecolor{{{latex_color_name(role)}}}{{HTML}}{{{color.lstrip('#')}}}\n"
        for role, color in PRINT_PALETTE.items()
    )
