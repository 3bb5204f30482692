# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from molcodec.io import C_NUMERIC_FORMAT, NumericFormat


@pytest.mark.parametrize(
    "string, ref_value",
    [
        ("    0.0000", 0.0),
        ("   -1.2500", -1.25),
        ("  +12.5   ", 12.5),
        ("3", 3.0),
        ("3.", 3.0),
        (".5", 0.5),
        ("  1.5e-3", 0.0015),
    ],
)
def test_parse_float(string, ref_value):
    assert C_NUMERIC_FORMAT.parse_float(string) == pytest.approx(ref_value)


@pytest.mark.parametrize(
    "string",
    [
        "",
        "    ",
        "1,25",
        "1.2.3",
        "- 1.0",
        "abc",
        "nan",
        "inf",
        "1.0x",
        # Exceeds the range of a float
        "    1e999 ",
        "-1e999",
    ],
)
def test_parse_invalid_float(string):
    with pytest.raises(ValueError):
        C_NUMERIC_FORMAT.parse_float(string)


@pytest.mark.parametrize(
    "string, ref_value", [("  0", 0), (" 12", 12), ("999", 999), ("  +7", 7)]
)
def test_parse_unsigned(string, ref_value):
    assert C_NUMERIC_FORMAT.parse_unsigned(string) == ref_value


@pytest.mark.parametrize("string", ["", "   ", "12 ", " -1", "1.0", "  x", "1 2"])
def test_parse_invalid_unsigned(string):
    """
    Only right-justified unsigned integers spanning the entire field are
    accepted.
    """
    with pytest.raises(ValueError):
        C_NUMERIC_FORMAT.parse_unsigned(string)


@pytest.mark.parametrize(
    "value, ref_string",
    [
        (0.0, "    0.0000"),
        (-1.25, "   -1.2500"),
        (3.14159, "    3.1416"),
        (-12345.6789, "-12345.6789"),
    ],
)
def test_format_fixed(value, ref_string):
    assert C_NUMERIC_FORMAT.format_fixed(value, 10, 4) == ref_string


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_format_non_finite(value):
    with pytest.raises(ValueError):
        C_NUMERIC_FORMAT.format_fixed(value, 10, 4)


def test_custom_decimal_point():
    """
    A format with a comma as decimal point must use the comma in both
    directions and reject the *C* representation.
    """
    numeric_format = NumericFormat(",")
    assert numeric_format.parse_float("   -1,2500") == -1.25
    assert numeric_format.format_fixed(-1.25, 10, 4) == "   -1,2500"
    with pytest.raises(ValueError):
        numeric_format.parse_float("   -1.2500")
    # The global default is unaffected
    assert C_NUMERIC_FORMAT.format_fixed(-1.25, 10, 4) == "   -1.2500"


def test_format_equality():
    assert NumericFormat() == C_NUMERIC_FORMAT
    assert NumericFormat(",") != C_NUMERIC_FORMAT


@pytest.mark.parametrize("decimal_point", ["", "..", "1"])
def test_invalid_decimal_point(decimal_point):
    with pytest.raises(ValueError):
        NumericFormat(decimal_point)
