# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Functions for parsing and writing an :class:`AtomCollection` and a
:class:`BondOrderCollection` from/to *MDL* connection tables (Ctab).
"""

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"
__all__ = ["read_structure_from_ctab", "write_structure_to_ctab"]

import warnings
import numpy as np
from molcodec.atoms import AtomCollection
from molcodec.bonds import BondOrderCollection
from molcodec.constants import ANGSTROM_PER_BOHR, BOHR_PER_ANGSTROM
from molcodec.elements import default_element_table
from molcodec.error import (
    BadStructureError,
    FormatMismatchError,
    UnsupportedVersionError,
)
from molcodec.io.mol.bondorder import (
    bond_order_from_specifier,
    compute_valences,
    discretize_bond_order,
    is_bond_line_order,
)
from molcodec.io.util import C_NUMERIC_FORMAT

SUPPORTED_VERSION = "V2000"
TERMINATOR_LINE = "M END"

# Eleven 3-character fields and at least a 5-character version string
MIN_COUNTS_LINE_LENGTH = 38
# Coordinates, a blank and the 3-character element symbol
MIN_ATOM_LINE_LENGTH = 34
# Two atom indices and the bond type
MIN_BOND_LINE_LENGTH = 9
# Width and decimal places of the Atom block coordinates
COORD_WIDTH = 10
COORD_PRECISION = 4
# The counts are written into 3-character fields
MAX_COUNT = 999
# Number of additional properties lines, 999 marks them as unsupported
N_PROPERTIES_PLACEHOLDER = 999


def read_structure_from_ctab(
    ctab_lines, element_table=None, numeric_format=C_NUMERIC_FORMAT
):
    """
    Parse a *MDL* connection table (Ctab) in ``V2000`` format to obtain
    an :class:`AtomCollection` and a :class:`BondOrderCollection`.

    Lines preceding the *counts* line, that do not qualify as *counts*
    line, are skipped with a warning.
    Lines following the *Bond block* are ignored.

    Parameters
    ----------
    ctab_lines : lines of str
        The lines containing the *ctab*.
        The first line that qualifies as *counts* line marks the
        beginning of the *ctab*.
    element_table : ElementTable, optional
        Used to obtain the atomic number for the element symbols.
        By default, :func:`default_element_table()` is used.
    numeric_format : NumericFormat, optional
        The format of the numbers in the file.

    Returns
    -------
    atoms : AtomCollection
        The atoms with their positions converted to *bohr*.
    bonds : BondOrderCollection
        The bond orders between the atoms.
        Only single, double and triple bonds are read.

    Raises
    ------
    FormatMismatchError
        If no *counts* line is found or any atom or bond line is
        malformed.
    UnsupportedVersionError
        If the *counts* line declares the ``V3000`` format.
    """
    if element_table is None:
        element_table = default_element_table()
    lines = iter(ctab_lines)

    n_atoms, n_bonds, version = _find_counts_line(lines, numeric_format)
    match version:
        case "V2000":
            pass
        case "V3000":
            raise UnsupportedVersionError("V3000 CTAB format is not supported")
        case "":
            raise FormatMismatchError("CTAB counts line misses version")
        case unknown_version:
            raise FormatMismatchError(f"Unknown CTAB version '{unknown_version}'")

    atoms = AtomCollection(n_atoms)
    for i in range(n_atoms):
        element, position = _parse_atom_line(
            next(lines, ""), element_table, numeric_format
        )
        atoms.set_element(i, element)
        atoms.set_position(i, position * BOHR_PER_ANGSTROM)

    bonds = BondOrderCollection(n_atoms)
    for _ in range(n_bonds):
        i, j, specifier = _parse_bond_line(next(lines, ""), n_atoms, numeric_format)
        order = bond_order_from_specifier(specifier)
        # Aromatic, query and other bond types have no bond order
        if order is not None:
            bonds.set_order(i, j, order)

    return atoms, bonds


def write_structure_to_ctab(
    atoms,
    bonds=None,
    version=SUPPORTED_VERSION,
    element_table=None,
    numeric_format=C_NUMERIC_FORMAT,
):
    """
    Convert an :class:`AtomCollection` and optionally a
    :class:`BondOrderCollection` into a *MDL* connection table (Ctab).

    Parameters
    ----------
    atoms : AtomCollection
        The atoms to be written.
        The positions are converted from *bohr* into *angstrom*.
    bonds : BondOrderCollection, optional
        The bond orders between the atoms.
        Bond orders are rounded to the nearest integer and only single,
        double and triple bonds are written into the *Bond block*.
        By default, no *Bond block* is written.
    version : str, optional
        The version of the CTAB format.
        Only ``"V2000"`` is supported.
    element_table : ElementTable, optional
        Used to obtain the element symbols for the atomic numbers.
        By default, :func:`default_element_table()` is used.
    numeric_format : NumericFormat, optional
        The format of the numbers in the file.

    Returns
    -------
    ctab_lines : list of str
        The lines containing the *ctab*.
        The lines begin with the *counts* line and end with the
        ``M END`` line.

    Raises
    ------
    ValueError
        If the version is not ``"V2000"`` or the number of atoms or
        bonds exceeds the fixed size columns.
    BadStructureError
        If the structure cannot be represented in the file, e.g. due to
        non-finite or too large coordinates.
    """
    if version != SUPPORTED_VERSION:
        raise ValueError(
            f"Unsupported CTAB version '{version}', "
            f"only '{SUPPORTED_VERSION}' can be written"
        )
    if element_table is None:
        element_table = default_element_table()
    n_atoms = atoms.array_length()
    if n_atoms > MAX_COUNT:
        raise ValueError(
            f"{n_atoms} atoms are too many for V2000 format, "
            f"the maximum is {MAX_COUNT}"
        )
    if not np.isfinite(atoms.positions).all():
        raise BadStructureError("Input AtomCollection has non-finite positions")

    if bonds is None:
        valences = np.zeros(n_atoms, dtype=int)
    else:
        if bonds.atom_count() != n_atoms:
            raise BadStructureError(
                f"BondOrderCollection refers to {bonds.atom_count()} atoms, "
                f"but AtomCollection contains {n_atoms} atoms"
            )
        if not np.isfinite(bonds.as_matrix()).all():
            raise BadStructureError(
                "Input BondOrderCollection has non-finite bond orders"
            )
        valences = compute_valences(bonds)
    # Each bond is counted for both of its atoms
    n_bonds = int(np.sum(valences)) // 2
    if n_bonds > MAX_COUNT:
        raise ValueError(
            f"{n_bonds} bonds are too many for V2000 format, "
            f"the maximum is {MAX_COUNT}"
        )

    symbols = [_get_symbol(element_table, element) for element in atoms.elements]
    coord_strings = _format_coord(atoms.positions * ANGSTROM_PER_BOHR, numeric_format)

    counts_line = (
        f"{n_atoms:>3d}{n_bonds:>3d}"
        + f"{0:>3d}" * 8
        + f"{N_PROPERTIES_PLACEHOLDER:>3d}"
        + f"{version:>6}"
    )

    atom_lines = [
        f"{coord_strings[i, 0]}{coord_strings[i, 1]}{coord_strings[i, 2]}"
        f" {symbols[i]:<3}"
        f"{0:>2d}"  # Mass difference -> unused
        + f"{0:>3d}" * 4  # Charge, stereo parity, H count, stereo care box
        + f"{valences[i]:>3d}"
        + f"{0:>3d}" * 6  # More unused fields
        for i in range(n_atoms)
    ]

    bond_lines = []
    if bonds is not None:
        for i, j, order in bonds.as_array():
            if is_bond_line_order(order):
                bond_lines.append(
                    f"{i + 1:>3d}{j + 1:>3d}{discretize_bond_order(order):>3d}"
                    + f"{0:>3d}" * 4
                )

    return [counts_line] + atom_lines + bond_lines + [TERMINATOR_LINE]


def _find_counts_line(lines, numeric_format):
    """
    Consume lines until a valid *counts* line is found.

    Returns the number of atoms, the number of bonds and the version
    string of the *counts* line.
    """
    n_skipped = 0
    for line in lines:
        if len(line) >= MIN_COUNTS_LINE_LENGTH:
            try:
                n_atoms = numeric_format.parse_unsigned(line[0:3])
                n_bonds = numeric_format.parse_unsigned(line[3:6])
            except ValueError:
                pass
            else:
                if n_skipped > 0:
                    warnings.warn(
                        f"Skipped {n_skipped} line(s) preceding the CTAB counts line"
                    )
                return n_atoms, n_bonds, line[33:].replace(" ", "")
        n_skipped += 1
    raise FormatMismatchError("File does not contain a valid CTAB counts line")


def _parse_atom_line(line, element_table, numeric_format):
    if len(line) < MIN_ATOM_LINE_LENGTH:
        raise FormatMismatchError(
            f"Atom line '{line}' is shorter than {MIN_ATOM_LINE_LENGTH} characters"
        )
    try:
        position = np.array(
            [
                numeric_format.parse_float(line[0:10]),
                numeric_format.parse_float(line[10:20]),
                numeric_format.parse_float(line[20:30]),
            ]
        )
    except ValueError as e:
        raise FormatMismatchError(f"Invalid coordinates in atom line '{line}'") from e

    symbol = line[31:34].replace(" ", "").capitalize()
    try:
        element = element_table.element_for_symbol(symbol)
    except (KeyError, ValueError) as e:
        # Any resolver failure is a format violation
        raise FormatMismatchError(f"Unknown element symbol '{symbol}'") from e
    return element, position


def _parse_bond_line(line, n_atoms, numeric_format):
    if len(line) < MIN_BOND_LINE_LENGTH:
        raise FormatMismatchError(
            f"Bond line '{line}' is shorter than {MIN_BOND_LINE_LENGTH} characters"
        )
    try:
        # MOL file indices are 1-based
        i = numeric_format.parse_unsigned(line[0:3]) - 1
        j = numeric_format.parse_unsigned(line[3:6]) - 1
        specifier = numeric_format.parse_unsigned(line[6:9])
    except ValueError as e:
        raise FormatMismatchError(f"Invalid bond line '{line}'") from e
    for index in (i, j):
        if index < 0 or index >= n_atoms:
            raise FormatMismatchError(
                f"Bond line '{line}' refers to atom {index + 1}, "
                f"but only {n_atoms} atoms are present"
            )
    if i == j:
        raise FormatMismatchError(f"Bond line '{line}' bonds an atom to itself")
    return i, j, specifier


def _get_symbol(element_table, element):
    try:
        symbol = element_table.symbol(element)
    except (KeyError, ValueError) as e:
        raise BadStructureError(f"No element symbol for atomic number {element}") from e
    if len(symbol) > 3:
        raise BadStructureError(
            f"Element symbol '{symbol}' exceeds the 3 available columns"
        )
    return symbol


def _format_coord(coord, numeric_format):
    """
    Format the *angstrom* coordinates into the fixed width columns of
    the *Atom block*.
    """
    coord_strings = np.empty(coord.shape, dtype=object)
    for index, value in np.ndenumerate(coord):
        string = numeric_format.format_fixed(value, COORD_WIDTH, COORD_PRECISION)
        if len(string) > COORD_WIDTH:
            raise BadStructureError(
                f"{COORD_WIDTH} columns are available for coordinates, "
                f"but {value:.{COORD_PRECISION}f} angstrom would require "
                f"{len(string)}"
            )
        coord_strings[index] = string
    return coord_strings
