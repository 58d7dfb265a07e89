"""LaTeX renderer producing a standalone, compilable derivation."""

from lgsolver import themes
from lgsolver.formatting import latex_value
from lgsolver.language import text
from lgsolver.render.base import Renderer
from lgsolver.trace import FREE_COLUMN, RIGHT_HAND_SIDE, Snapshot

PREAMBLE = (
    "\\documentclass[a4paper]{article}\n"
    "\\usepackage[utf8]{inputenc}\n"
    "\\usepackage{amsmath}\n"
    "\\usepackage{amssymb}\n"
    "\\usepackage[table]{xcolor}\n"
    "\\setlength{\\parindent}{0pt}\n"
)


class LatexRenderer(Renderer):

    # ── Building blocks ─────────────────────────────────────────────────

    def num(self, value, math_mode: bool = False) -> str:
        return latex_value(value, self.fmt, math_mode)

    @staticmethod
    def _cell(content: str, role) -> str:
        if role is None:
            return content
        return f"\\cellcolor{{{themes.latex_color_name(role)}}}{content}"

    def matrix(self, snapshot: Snapshot) -> str:
        """M|b as an ``array`` with a vertical rule before the right-hand side."""
        cols = snapshot.cols
        lines = []
        for i, (row, rhs) in enumerate(zip(snapshot.matrix, snapshot.vector)):
            cells = [self._cell(self.num(v), snapshot.role(i, j)) for j, v in enumerate(row)]
            cells.append(self._cell(self.num(rhs), snapshot.role(i, cols)))
            lines.append(" & ".join(cells) + " \\\\")
        spec = "r" * cols + "|r"
        return (
            "\\[\n"
            f"\\left(\\begin{{array}}{{{spec}}}\n"
            + "\n".join(lines) + "\n"
            "\\end{array}\\right)\n"
            "\\]\n"
        )

    @staticmethod
    def _par(content: str) -> str:
        return f"{content}\n\n"

    @staticmethod
    def _entry(row, col) -> str:
        return f"a_{{{row},{col}}}"

    # ── Elimination steps ───────────────────────────────────────────────

    def _render_initial_system(self, n):
        return f"\\section*{{{text('initial_system')}}}\n" + self.matrix(n.snapshot)

    def _render_column(self, n):
        return f"\\section*{{{text('column', col=n.args['col'] + 1)}}}\n"

    def _render_pivot_heading(self, n):
        c = n.args["col"] + 1
        heading = text("generation_of", entry=f"${self._entry(c, c)}=1$")
        return f"\\subsection*{{{heading}}}\n"

    def _render_zeros_heading(self, n):
        c = n.args["col"] + 1
        heading = text("generation_of_zeros", entry=f"${self._entry('i', c)}$",
                       condition=f"$i\\neq {c}$")
        return f"\\subsection*{{{heading}}}\n"

    def _render_already_the_case(self, n):
        return self._par(text("already_the_case"))

    def _render_not_possible(self, n):
        return self._par(text("not_possible"))

    def _render_swap_rows(self, n):
        a = n.args
        return (self._par(text("swap_rows", first=a["first"] + 1, second=a["second"] + 1))
                + self.matrix(n.snapshot))

    def _render_swap_cols(self, n):
        a = n.args
        return (self._par(text("swap_cols", first=a["first"] + 1, second=a["second"] + 1))
                + self.matrix(n.snapshot))

    def _render_swap_rows_and_cols(self, n):
        a = n.args
        sentence = text("swap_rows_and_cols",
                        first=a["first"] + 1, second=a["second"] + 1,
                        first_col=a["first_col"] + 1, second_col=a["second_col"] + 1)
        return self._par(sentence) + self.matrix(n.snapshot)

    def _render_scale_row(self, n):
        a = n.args
        sign = "-" if a["negative"] else ""
        factor = f"{sign}\\frac{{1}}{{{self.num(a['magnitude'])}}}"
        if not a["integral"]:
            factor += f"={sign}{self.num(a['inverse'])}"
        return (self._par(text("scale_row", row=a["row"] + 1, factor=f"${factor}$"))
                + self.matrix(n.snapshot))

    def _render_add_row(self, n):
        a = n.args
        factor = self.num(a["factor"])
        if self._is_negative(a["factor"]):
            factor = f"\\left({factor}\\right)"
        sentence = text("add_row", factor=f"${factor}$",
                        source=a["source"] + 1, target=a["target"] + 1)
        return self._par(sentence) + self.matrix(n.snapshot)

    # ── Solution ────────────────────────────────────────────────────────

    def _render_solution_heading(self, n):
        return f"\\section*{{{text('solution_heading')}}}\n"

    def _render_reduced_system(self, n):
        return self.matrix(n.snapshot)

    def _render_no_solution(self, n):
        a = n.args
        color = themes.latex_color_name("contradiction")
        equation = f"$\\textcolor{{{color}}}{{0={self.num(a['value'])}}}$"
        return self._par(text("no_solution", row=a["row"] + 1, equation=equation))

    def _render_underdetermined(self, n):
        a = n.args
        return self._par(
            text("underdetermined", free=a["free"]) + "\\\\\n"
            + text("underdetermined_reason", variables=a["variables"], rank=a["rank"]) + "\\\\\n"
            + text("underdetermined_space")
        )

    def _render_unique_solution(self, n):
        return self._par(text("unique_solution") + "\\\\\n" + text("unique_solution_rhs"))

    def _render_reswap_before(self, n):
        return self._par(text("reswap_before"))

    def _render_reswap(self, n):
        pairs = ", ".join(f"${i + 1}\\to {p + 1}$" for i, p in n.args["mapping"])
        return self._par(f"{text('reswap')} {pairs}")

    def _render_final_solution(self, n):
        return self._par(text("final_solution"))

    def _render_solution_set(self, n):
        a = n.args
        vectors, rank = a["vectors"], a["rank"]
        name = a["name"].replace("*", "^{*}")
        parts = []
        for k, vec in enumerate(vectors):
            entries = []
            for i, value in enumerate(vec):
                entry = self.num(value)
                if a["colored"] and i < rank:
                    role = RIGHT_HAND_SIDE if k == 0 else FREE_COLUMN
                    entry = f"\\colorbox{{{themes.latex_color_name(role)}}}{{${entry}$}}"
                entries.append(entry)
            column = "\\begin{pmatrix}" + " \\\\ ".join(entries) + "\\end{pmatrix}"
            parts.append(column if k == 0 else f"\\lambda_{{{k}}}{column}")
        body = f"{name} = " + " + ".join(parts)
        if len(vectors) > 1:
            body += ",\\quad " + ", ".join(f"\\lambda_{{{k}}}" for k in range(1, len(vectors))) + " \\in \\mathbb{R}"
        if a["final"]:
            body = f"\\boxed{{{body}}}"
        return f"\\[\n{body}\n\\]\n"

    def document(self, body: str) -> str:
        return (
            PREAMBLE
            + themes.latex_color_definitions()
            + f"\\title{{{text('document_title')}}}\n"
            + "\\date{}\n"
            + "\\begin{document}\n"
            + "\\maketitle\n"
            + body
            + "\\end{document}\n"
        )
