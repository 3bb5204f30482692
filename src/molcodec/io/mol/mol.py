# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"
__all__ = ["MOLFile"]

from molcodec.file import TextFile
from molcodec.io.mol.ctab import (
    SUPPORTED_VERSION,
    read_structure_from_ctab,
    write_structure_to_ctab,
)
from molcodec.io.mol.header import Header
from molcodec.io.util import C_NUMERIC_FORMAT

# Number of header lines
N_HEADER = 3


class MOLFile(TextFile):
    """
    This class represents a file in MOL format, that is used to store
    structure information for small molecules.

    Only the element and position of each atom and the single, double
    and triple bonds between the atoms are read from the file.
    Positions are given in *angstrom* in the file, but in *bohr* in the
    :class:`AtomCollection`.

    Attributes
    ----------
    header : Header
        The header of the MOL file.

    Examples
    --------

    >>> atoms = AtomCollection.from_arrays([6, 8], [[0, 0, 0], [2.3, 0, 0]])
    >>> bonds = BondOrderCollection(2)
    >>> bonds.set_order(0, 1, 1.9)
    >>> mol_file = MOLFile()
    >>> mol_file.set_structure(atoms, bonds)
    >>> print("\\n".join(mol_file.lines[3:]))
      2  1  0  0  0  0  0  0  0  0999 V2000
        0.0000    0.0000    0.0000 C   0  0  0  0  0  1  0  0  0  0  0  0
        1.2171    0.0000    0.0000 O   0  0  0  0  0  1  0  0  0  0  0  0
      1  2  2  0  0  0  0
    M END
    """

    def __init__(self):
        super().__init__()
        # empty header lines
        self.lines = [""] * N_HEADER
        self._header = None

    @classmethod
    def read(cls, file):
        mol_file = super().read(file)
        mol_file._header = None
        return mol_file

    @property
    def header(self):
        if self._header is None:
            self._header = Header.deserialize("\n".join(self.lines[0:N_HEADER]) + "\n")
        return self._header

    @header.setter
    def header(self, header):
        self._header = header
        header_lines = self._header.serialize().splitlines()
        if len(self.lines) < N_HEADER:
            self.lines += [""] * (N_HEADER - len(self.lines))
        self.lines[0:N_HEADER] = header_lines

    def get_structure(self, element_table=None, numeric_format=C_NUMERIC_FORMAT):
        """
        Get an :class:`AtomCollection` and a :class:`BondOrderCollection`
        from the MOL file.

        The three header lines are skipped without validation.
        If the following line is not a valid *counts* line, subsequent
        lines are skipped until a valid *counts* line is found.

        Parameters
        ----------
        element_table : ElementTable, optional
            Used to obtain the atomic number for the element symbols.
            By default, :func:`default_element_table()` is used.
        numeric_format : NumericFormat, optional
            The format of the numbers in the file.

        Returns
        -------
        atoms : AtomCollection
            The atoms with positions in *bohr*.
        bonds : BondOrderCollection
            The bond orders between the atoms.

        Raises
        ------
        FormatMismatchError
            If the file is malformed.
        UnsupportedVersionError
            If the file uses the ``V3000`` format.
        """
        return read_structure_from_ctab(
            self.lines[N_HEADER:], element_table, numeric_format
        )

    def set_structure(
        self,
        atoms,
        bonds=None,
        version=SUPPORTED_VERSION,
        element_table=None,
        numeric_format=C_NUMERIC_FORMAT,
    ):
        """
        Set the :class:`AtomCollection` and optionally the
        :class:`BondOrderCollection` for the file.

        The header lines are kept.

        Parameters
        ----------
        atoms : AtomCollection
            The atoms to be saved into this file.
        bonds : BondOrderCollection, optional
            The bond orders between the atoms.
            Bond orders are rounded to the nearest integer and only
            single, double and triple bonds are written.
            By default, no bonds are written.
        version : str, optional
            The version of the CTAB format.
            Only ``"V2000"`` is supported.
        element_table : ElementTable, optional
            Used to obtain the element symbols for the atomic numbers.
            By default, :func:`default_element_table()` is used.
        numeric_format : NumericFormat, optional
            The format of the numbers in the file.
        """
        ctab_lines = write_structure_to_ctab(
            atoms, bonds, version, element_table, numeric_format
        )
        header_lines = (self.lines[:N_HEADER] + [""] * N_HEADER)[:N_HEADER]
        self.lines = header_lines + ctab_lines
