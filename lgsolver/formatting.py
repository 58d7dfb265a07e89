"""Numeric formatting for the markup and LaTeX reports."""

from dataclasses import dataclass

from lgsolver.fraction import Fraction


@dataclass(frozen=True)
class NumberFormat:
    precision: int = 3
    decimal_separator: str = "."
    group_separator: str = ","

    @classmethod
    def from_settings(cls, settings) -> "NumberFormat":
        return cls(
            precision=settings.digits,
            decimal_separator=settings.decimal_separator,
            group_separator=settings.group_separator,
        )


DEFAULT_FORMAT = NumberFormat()


def _fmt_float(value: float, fmt: NumberFormat) -> str:
    """Format with *precision* digits, grouping, then strip trailing zeros."""
    s = f"{value:,.{fmt.precision}f}"
    # Swap Python's "," / "." for the configured separators in one pass.
    s = s.translate(str.maketrans({",": fmt.group_separator, ".": fmt.decimal_separator}))
    if fmt.decimal_separator in s:
        s = s.rstrip("0").rstrip(fmt.decimal_separator)
    return "0" if s == "-0" else s


def _fmt_int(value: int, fmt: NumberFormat) -> str:
    """Exact grouping for integers of any size."""
    return f"{value:,d}".replace(",", fmt.group_separator)


def round_value(value, fmt: NumberFormat = DEFAULT_FORMAT) -> str:
    """Locale-style display string for a float or a Fraction.

    >>> round_value(2.50000)
    '2.5'
    >>> round_value(Fraction(-3, 4))
    '-3/4'
    """
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return _fmt_int(value.numerator, fmt)
        return f"{_fmt_int(value.numerator, fmt)}/{_fmt_int(value.denominator, fmt)}"
    if isinstance(value, int):
        return _fmt_int(value, fmt)
    return _fmt_float(value, fmt)


_LATEX_SEPARATORS = str.maketrans({",": "{,}", " ": "\\,", "'": "{'}"})


def _escape_separators(s: str) -> str:
    # In math mode "," is punctuation and would be followed by a space.
    return s.translate(_LATEX_SEPARATORS)


def latex_value(value, fmt: NumberFormat = DEFAULT_FORMAT, math_mode: bool = False) -> str:
    """LaTeX source for a float or a Fraction.

    With *math_mode* the result is wrapped in ``$...$`` so it can be used in
    running text; without it the caller must already be in math mode.
    """
    if isinstance(value, Fraction) and value.denominator != 1:
        num = _escape_separators(round_value(abs(value.numerator), fmt))
        den = _escape_separators(round_value(value.denominator, fmt))
        sign = "-" if value.numerator < 0 else ""
        s = f"{sign}\\frac{{{num}}}{{{den}}}"
    else:
        s = _escape_separators(round_value(value, fmt))
    return f"${s}$" if math_mode else s
