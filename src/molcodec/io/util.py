# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Common functions used by the file format subpackages.
"""

__name__ = "molcodec.io"
__author__ = "The molcodec contributors"
__all__ = ["NumericFormat", "C_NUMERIC_FORMAT"]

import math
import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class NumericFormat:
    """
    The rules for parsing and formatting numbers in fixed column
    text files.

    An instance is passed explicitly to the readers and writers of this
    package, so numeric conversion never depends on the locale of the
    host or any other global state and is safe to use from concurrent
    threads.

    Parameters
    ----------
    decimal_point : str, optional
        The character separating integer and fractional digits.
        By default, ``"."`` as in the *C* locale.

    Examples
    --------

    >>> print(C_NUMERIC_FORMAT.parse_float("   -1.2500"))
    -1.25
    >>> print(C_NUMERIC_FORMAT.parse_unsigned(" 12"))
    12
    >>> print(f"[{C_NUMERIC_FORMAT.format_fixed(3.14159, 10, 4)}]")
    [    3.1416]
    """

    decimal_point: str = "."
    _float_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.decimal_point) != 1 or self.decimal_point.isdigit():
            raise ValueError(
                f"'{self.decimal_point}' is not a valid decimal point character"
            )
        point = re.escape(self.decimal_point)
        # Leading and trailing blanks are part of fixed width fields
        pattern = re.compile(
            rf"[ \t]*[+-]?(?:[0-9]+(?:{point}[0-9]*)?|{point}[0-9]+)"
            r"(?:[eE][+-]?[0-9]+)?[ \t]*"
        )
        object.__setattr__(self, "_float_pattern", pattern)

    def parse_float(self, string):
        """
        Parse a decimal floating point number.

        Parameters
        ----------
        string : str
            The field to be parsed.
            Surrounding blanks are allowed.

        Returns
        -------
        value : float
            The parsed number.

        Raises
        ------
        ValueError
            If the field is not a finite decimal number in this format.
        """
        if self._float_pattern.fullmatch(string) is None:
            raise ValueError(f"'{string}' is not a valid decimal number")
        value = float(string.strip().replace(self.decimal_point, "."))
        # Exponents may exceed the range of a float
        if not math.isfinite(value):
            raise ValueError(f"'{string}' exceeds the range of a float")
        return value

    def parse_unsigned(self, string):
        """
        Parse an unsigned integer, that spans the entire field.

        In contrast to :func:`int()` trailing blanks are not accepted,
        i.e. in fixed width fields the number must be right-justified.

        Parameters
        ----------
        string : str
            The field to be parsed.

        Returns
        -------
        value : int
            The parsed number.

        Raises
        ------
        ValueError
            If the field does not contain a right-justified unsigned
            integer.
        """
        if _UNSIGNED_PATTERN.fullmatch(string) is None:
            raise ValueError(f"'{string}' is not a valid unsigned integer")
        return int(string)

    def format_fixed(self, value, width, precision):
        """
        Format a number with a fixed number of decimal places,
        right-justified in a field of the given width.

        Parameters
        ----------
        value : float
            The value to be formatted.
        width : int
            The minimum width of the field.
        precision : int
            The number of decimal places.

        Returns
        -------
        string : str
            The formatted number.
            It is longer than `width`, if the number does not fit into
            the field.
        """
        if not math.isfinite(value):
            raise ValueError(f"Cannot format non-finite value {value}")
        string = f"{value:>{width}.{precision}f}"
        if self.decimal_point != ".":
            string = string.replace(".", self.decimal_point)
        return string


_UNSIGNED_PATTERN = re.compile(r"[ \t]*\+?[0-9]+")

C_NUMERIC_FORMAT = NumericFormat()
