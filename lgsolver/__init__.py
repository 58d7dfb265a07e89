"""
lgsolver — Gauss-Jordan solver for linear equation systems.

Produces a step-by-step derivation as an HTML fragment and as a
standalone LaTeX document.
"""

import logging

from lgsolver.fraction import Fraction
from lgsolver.parsing import InputError, MatrixInputError, VectorInputError
from lgsolver.report import solve_documents, solve_system

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Fraction",
    "InputError",
    "MatrixInputError",
    "VectorInputError",
    "solve_documents",
    "solve_system",
]
