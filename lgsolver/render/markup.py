"""HTML fragment renderer for interactive display."""

from html import escape

from lgsolver import themes
from lgsolver.formatting import DEFAULT_FORMAT, NumberFormat, round_value
from lgsolver.language import text
from lgsolver.render.base import Renderer
from lgsolver.trace import CONTRADICTION, FREE_COLUMN, RIGHT_HAND_SIDE, Snapshot

_TABLE_OPEN = ("<table style=\"border-collapse: collapse; "
               f"border: 1px solid {themes.BORDER}; margin-bottom: 10px;\">\n")


class MarkupRenderer(Renderer):

    def __init__(self, fmt: NumberFormat = DEFAULT_FORMAT, theme: str = "light"):
        super().__init__(fmt)
        self.colors = themes.palette(theme)

    # ── Building blocks ─────────────────────────────────────────────────

    def num(self, value) -> str:
        return round_value(value, self.fmt)

    def _background(self, role) -> str:
        if role is None:
            return ""
        return f" background-color: {self.colors[role]};"

    def table(self, snapshot: Snapshot) -> str:
        """M|b as a table, with a vertical rule before the right-hand side."""
        cols = snapshot.cols
        out = [_TABLE_OPEN]
        for i, (row, rhs) in enumerate(zip(snapshot.matrix, snapshot.vector)):
            out.append("<tr>")
            for j, value in enumerate(row):
                rule = f" border-right: 1px solid {themes.SEPARATOR};" if j == cols - 1 else ""
                out.append(
                    f"<td style=\"padding: 5px; border: 1px solid {themes.BORDER};"
                    f"{rule}{self._background(snapshot.role(i, j))}\">{self.num(value)}</td>\n"
                )
            out.append(
                f"<td style=\"padding: 5px; padding-left: 10px; border: 1px solid {themes.BORDER};"
                f"{self._background(snapshot.role(i, cols))}\">{self.num(rhs)}</td>\n"
            )
            out.append("</tr>\n")
        out.append("</table>\n")
        return "".join(out)

    @staticmethod
    def _p(content: str) -> str:
        return f"<p>{content}</p>\n"

    @staticmethod
    def _entry(row, col) -> str:
        return f"a<sub>{row},{col}</sub>"

    # ── Elimination steps ───────────────────────────────────────────────

    def _render_initial_system(self, n):
        return f"<h3>{text('initial_system')}</h3>\n" + self.table(n.snapshot)

    def _render_column(self, n):
        return f"<hr><h3>{text('column', col=n.args['col'] + 1)}</h3>\n"

    def _render_pivot_heading(self, n):
        c = n.args["col"] + 1
        return f"<h4>{text('generation_of', entry=self._entry(c, c) + '=1')}</h4>\n"

    def _render_zeros_heading(self, n):
        c = n.args["col"] + 1
        heading = text("generation_of_zeros", entry=self._entry("i", c), condition=f"i&ne;{c}")
        return f"<h4>{heading}</h4>\n"

    def _render_already_the_case(self, n):
        return self._p(text("already_the_case"))

    def _render_not_possible(self, n):
        return self._p(text("not_possible"))

    def _render_swap_rows(self, n):
        a = n.args
        return (self._p(text("swap_rows", first=a["first"] + 1, second=a["second"] + 1))
                + self.table(n.snapshot))

    def _render_swap_cols(self, n):
        a = n.args
        return (self._p(text("swap_cols", first=a["first"] + 1, second=a["second"] + 1))
                + self.table(n.snapshot))

    def _render_swap_rows_and_cols(self, n):
        a = n.args
        sentence = text("swap_rows_and_cols",
                        first=a["first"] + 1, second=a["second"] + 1,
                        first_col=a["first_col"] + 1, second_col=a["second_col"] + 1)
        return self._p(sentence) + self.table(n.snapshot)

    def _render_scale_row(self, n):
        a = n.args
        sign = "-" if a["negative"] else ""
        magnitude = self.num(a["magnitude"])
        if a["integral"]:
            factor = f"{sign}1/{magnitude}"
        else:
            if self._is_compound(a["magnitude"]):
                magnitude = f"({magnitude})"
            factor = f"{sign}1/{magnitude}={sign}{self.num(a['inverse'])}"
        return self._p(text("scale_row", row=a["row"] + 1, factor=factor)) + self.table(n.snapshot)

    def _render_add_row(self, n):
        a = n.args
        factor = self.num(a["factor"])
        if self._is_negative(a["factor"]):
            factor = f"({factor})"
        sentence = text("add_row", factor=factor, source=a["source"] + 1, target=a["target"] + 1)
        return self._p(sentence) + self.table(n.snapshot)

    # ── Solution ────────────────────────────────────────────────────────

    def _render_solution_heading(self, n):
        return f"<hr><h3>{text('solution_heading')}</h3>\n"

    def _render_reduced_system(self, n):
        return self.table(n.snapshot)

    def _render_no_solution(self, n):
        a = n.args
        equation = f"<span style=\"color: {self.colors[CONTRADICTION]};\">0={self.num(a['value'])}</span>"
        return self._p(text("no_solution", row=a["row"] + 1, equation=equation))

    def _render_underdetermined(self, n):
        a = n.args
        return self._p(
            text("underdetermined", free=a["free"]) + "<br>"
            + text("underdetermined_reason", variables=a["variables"], rank=a["rank"]) + "<br>"
            + text("underdetermined_space")
        )

    def _render_unique_solution(self, n):
        return self._p(text("unique_solution") + "<br>" + text("unique_solution_rhs"))

    def _render_reswap_before(self, n):
        return self._p(text("reswap_before"))

    def _render_reswap(self, n):
        pairs = ", ".join(f"{i + 1}&rarr;{p + 1}" for i, p in n.args["mapping"])
        return self._p(f"{text('reswap')} {pairs}")

    def _render_final_solution(self, n):
        return self._p(text("final_solution"))

    def _render_solution_set(self, n):
        a = n.args
        vectors, rank = a["vectors"], a["rank"]
        size = len(vectors[0])
        out = ["<table style=\"border-collapse: collapse;\">\n"]
        for i in range(size):
            out.append("<tr>\n")
            if i == 0:
                out.append(f"<td rowspan=\"{size}\">{escape(a['name'])}=</td>\n")
            for k, vec in enumerate(vectors):
                if i == 0:
                    if k > 0:
                        out.append(f"<td rowspan=\"{size}\">&nbsp;+&lambda;<sub>{k}</sub>&nbsp;</td>\n")
                    out.append(f"<td rowspan=\"{size}\"><span style=\"font-size: {size}00%\">(</span></td>\n")
                color = ""
                if a["colored"] and i < rank:
                    color = self._background(RIGHT_HAND_SIDE if k == 0 else FREE_COLUMN)
                out.append(f"<td style=\"border: 1px solid {themes.BORDER};{color}\">{self.num(vec[i])}</td>\n")
                if i == 0:
                    out.append(f"<td rowspan=\"{size}\"><span style=\"font-size: {size}00%\">)</span></td>\n")
            out.append("</tr>\n")
        out.append("</table>\n")
        body = "".join(out)
        if a["final"]:
            return f"<div style=\"border: 1px solid {themes.SOLUTION_BORDER}; padding: 10px;\">\n{body}</div>\n"
        return body

    def document(self, body: str) -> str:
        return f"<div class=\"lgs-report\">\n{body}</div>\n"
