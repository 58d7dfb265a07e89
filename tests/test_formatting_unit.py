import pytest

from lgsolver.config import load_settings
from lgsolver.formatting import DEFAULT_FORMAT, NumberFormat, latex_value, round_value
from lgsolver.fraction import Fraction


@pytest.mark.parametrize(
    "value,expected",
    [
        (2.5, "2.5"),
        (2.0, "2"),
        (-0.0, "0"),
        (-0.0001, "0"),
        (1 / 3, "0.333"),
        (2 / 3, "0.667"),
        (1234567.5, "1,234,567.5"),
        (-4.0, "-4"),
        (7, "7"),
    ],
)
def test_round_value_floats(value, expected) -> None:
    assert round_value(value) == expected


def test_round_value_respects_precision_and_separators() -> None:
    fmt = NumberFormat(precision=5, decimal_separator=",", group_separator=".")
    assert round_value(1 / 3, fmt) == "0,33333"
    assert round_value(12345.25, fmt) == "12.345,25"
    assert round_value(1 / 3, NumberFormat(precision=1)) == "0.3"


def test_round_value_fractions() -> None:
    assert round_value(Fraction(-3, 4)) == "-3/4"
    assert round_value(Fraction(8, 2)) == "4"
    assert round_value(Fraction(1000, 3)) == "1,000/3"


def test_latex_value() -> None:
    assert latex_value(Fraction(-3, 4)) == "-\\frac{3}{4}"
    assert latex_value(Fraction(3, 4), math_mode=True) == "$\\frac{3}{4}$"
    assert latex_value(Fraction(5)) == "5"
    assert latex_value(4.5) == "4.5"
    assert latex_value(1234.5) == "1{,}234.5"


def test_latex_value_escapes_custom_separators() -> None:
    fmt = NumberFormat(precision=2, decimal_separator=",", group_separator=" ")
    assert latex_value(1234.5, fmt) == "1\\,234{,}5"


def test_number_format_from_settings() -> None:
    fmt = NumberFormat.from_settings(load_settings(
        {"precision": 6, "decimal_separator": ",", "group_separator": "."}
    ))
    assert fmt.precision == 6
    assert fmt.decimal_separator == ","
    exact = NumberFormat.from_settings(load_settings({"precision": "exact"}))
    assert exact.precision == DEFAULT_FORMAT.precision


def test_fraction_parts_beyond_float_range_are_exact() -> None:
    big = Fraction(3 ** 40, 7)
    assert round_value(big) == "12,157,665,459,056,928,801/7"
    assert round_value(Fraction(10 ** 400 + 1, 3)).endswith("001/3")
    assert latex_value(big) == "\\frac{12{,}157{,}665{,}459{,}056{,}928{,}801}{7}"
    fmt = NumberFormat(decimal_separator=",", group_separator=".")
    assert round_value(Fraction(-(2 ** 60))) == "-1,152,921,504,606,846,976"
    assert round_value(Fraction(-(2 ** 60)), fmt) == "-1.152.921.504.606.846.976"
