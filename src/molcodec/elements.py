# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Translation between chemical element symbols and atomic numbers.
"""

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = ["ElementTable", "UnknownElementError", "default_element_table"]

import json
from os.path import dirname, join, realpath


class UnknownElementError(KeyError):
    """
    Indicates that an element symbol or atomic number is not contained
    in an :class:`ElementTable`.
    """

    pass


class ElementTable:
    """
    An immutable lookup table between element symbols and atomic
    numbers.

    In the data model of this package an element is identified by its
    atomic number.
    File formats however refer to elements by their symbol, hence the
    file readers and writers take an :class:`ElementTable` (or any other
    object providing :meth:`element_for_symbol()` and :meth:`symbol()`)
    to translate between both representations.

    Parameters
    ----------
    records : iterable of tuple(str, int, float)
        The known elements, each given as symbol, atomic number and
        standard atomic weight.
        Symbols are expected in their conventional capitalization,
        i.e. the first character upper case, the remaining characters
        lower case.

    Examples
    --------

    >>> table = ElementTable([("H", 1, 1.008), ("C", 6, 12.011)])
    >>> print(table.element_for_symbol("C"))
    6
    >>> print(table.symbol(1))
    H
    >>> print("Cl" in table)
    False
    """

    def __init__(self, records):
        symbol_to_number = {}
        number_to_symbol = {}
        masses = {}
        for symbol, number, mass in records:
            number = int(number)
            if symbol in symbol_to_number:
                raise ValueError(f"Duplicate element symbol '{symbol}'")
            if number in number_to_symbol:
                raise ValueError(f"Duplicate atomic number {number}")
            symbol_to_number[symbol] = number
            number_to_symbol[number] = symbol
            masses[number] = float(mass)
        self._symbol_to_number = symbol_to_number
        self._number_to_symbol = number_to_symbol
        self._masses = masses

    @staticmethod
    def from_json(file_path):
        """
        Load an :class:`ElementTable` from a JSON file.

        The file contains an object that maps each element symbol to an
        object with the keys ``number`` and ``mass``.

        Parameters
        ----------
        file_path : str
            The path to the JSON file.

        Returns
        -------
        table : ElementTable
            The loaded table.
        """
        with open(file_path, "r") as file:
            content = json.load(file)
        return ElementTable(
            (symbol, entry["number"], entry["mass"])
            for symbol, entry in content.items()
        )

    def element_for_symbol(self, symbol):
        """
        Get the atomic number for an element symbol.

        Parameters
        ----------
        symbol : str
            The element symbol.
            The lookup is case sensitive, e.g. ``"Cl"`` is found,
            but ``"CL"`` is not.

        Returns
        -------
        number : int
            The atomic number.

        Raises
        ------
        UnknownElementError
            If the symbol is not contained in the table.
        """
        try:
            return self._symbol_to_number[symbol]
        except KeyError:
            raise UnknownElementError(f"'{symbol}' is not a known element")

    def symbol(self, number):
        """
        Get the element symbol for an atomic number.

        Parameters
        ----------
        number : int
            The atomic number.

        Returns
        -------
        symbol : str
            The element symbol.

        Raises
        ------
        UnknownElementError
            If the atomic number is not contained in the table.
        """
        try:
            return self._number_to_symbol[int(number)]
        except KeyError:
            raise UnknownElementError(f"{number} is not a known atomic number")

    def mass(self, number):
        """
        Get the standard atomic weight in *u* for an atomic number.
        """
        try:
            return self._masses[int(number)]
        except KeyError:
            raise UnknownElementError(f"{number} is not a known atomic number")

    def __contains__(self, symbol):
        return symbol in self._symbol_to_number

    def __len__(self):
        return len(self._symbol_to_number)

    def __iter__(self):
        return iter(self._symbol_to_number)


_info_dir = dirname(realpath(__file__))
# Standard atomic weights are taken from the IUPAC table (2021),
# for elements without stable isotopes the mass number of the most
# stable isotope is given
_DEFAULT_TABLE = ElementTable.from_json(join(_info_dir, "elements.json"))


def default_element_table():
    """
    Get the :class:`ElementTable` containing all elements up to
    *Oganesson*.

    The table is loaded once on import and shared by all callers.

    Returns
    -------
    table : ElementTable
        The default table.
    """
    return _DEFAULT_TABLE
