"""Shared dispatch for the report renderers."""

from lgsolver.formatting import DEFAULT_FORMAT, NumberFormat
from lgsolver.fraction import Fraction
from lgsolver.trace import Narration


class Renderer:
    """Turns a :class:`Narration` into a document fragment.

    Subclasses implement one ``_render_<kind>`` method per narration kind.
    """

    def __init__(self, fmt: NumberFormat = DEFAULT_FORMAT):
        self.fmt = fmt

    def render(self, narration: Narration) -> str:
        handler = getattr(self, f"_render_{narration.kind}", None)
        if handler is None:
            raise ValueError(f"Unknown narration kind: {narration.kind!r}")
        return handler(narration)

    def document(self, body: str) -> str:
        return body

    @staticmethod
    def _is_negative(value) -> bool:
        return value < 0

    @staticmethod
    def _is_compound(value) -> bool:
        """True for values that need brackets when used as a divisor."""
        return isinstance(value, Fraction) and value.denominator != 1
