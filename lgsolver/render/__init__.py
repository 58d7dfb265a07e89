from lgsolver.render.latex import LatexRenderer
from lgsolver.render.markup import MarkupRenderer

__all__ = ["LatexRenderer", "MarkupRenderer"]
