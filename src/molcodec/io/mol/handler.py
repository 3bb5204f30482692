# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A stream handler, that maps the logical format name ``"mol"`` to the
MOL file reader and writer.
"""

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"
__all__ = ["SupportType", "ReadResult", "MOLStreamHandler"]

import enum
from dataclasses import dataclass
from molcodec.error import FormatUnsupportedError, MolfileError
from molcodec.io.mol.ctab import SUPPORTED_VERSION
from molcodec.io.mol.header import Header
from molcodec.io.mol.mol import MOLFile
from molcodec.io.util import C_NUMERIC_FORMAT


class SupportType(enum.Flag):
    """
    The operations a stream handler supports for a format.
    """

    READ_ONLY = 1
    WRITE_ONLY = 2
    READ_WRITE = 3


@dataclass(frozen=True)
class ReadResult:
    """
    The outcome of :meth:`MOLStreamHandler.try_read()`.

    Either `atoms` and `bonds` are set or `error` is set.

    Attributes
    ----------
    atoms : AtomCollection or None
        The atoms read from the file.
    bonds : BondOrderCollection or None
        The bond orders read from the file.
    error : MolfileError or None
        The error that occurred during reading.
    """

    atoms: ... = None
    bonds: ... = None
    error: ... = None

    @property
    def ok(self):
        return self.error is None

    @property
    def error_kind(self):
        """
        The :class:`ErrorKind` of the error, or None if reading was
        successful.
        """
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self):
        """
        Get the read structure or raise the error that occurred.

        Returns
        -------
        atoms : AtomCollection
            The atoms read from the file.
        bonds : BondOrderCollection
            The bond orders read from the file.
        """
        if self.error is not None:
            raise self.error
        return self.atoms, self.bonds


class MOLStreamHandler:
    """
    Read and write structures in MOL format by format name.

    This class is the entry point for code that selects a file format
    handler by a logical format name:
    Every method checks the given format name and raises a
    :class:`FormatUnsupportedError` for any name other than ``"mol"``.

    Parameters
    ----------
    element_table : ElementTable, optional
        Used to translate between element symbols and atomic numbers.
        By default, :func:`default_element_table()` is used.
    numeric_format : NumericFormat, optional
        The format of the numbers in the file.

    Examples
    --------

    >>> handler = MOLStreamHandler()
    >>> print(handler.supports("mol"))
    True
    >>> print(handler.supports("xyz"))
    False
    """

    MODEL = "MOLStreamHandler"
    FORMAT_NAME = "mol"

    def __init__(self, element_table=None, numeric_format=C_NUMERIC_FORMAT):
        self._element_table = element_table
        self._numeric_format = numeric_format

    def name(self):
        return MOLStreamHandler.MODEL

    def formats(self):
        """
        Get the supported formats.

        Returns
        -------
        formats : list of tuple(str, SupportType)
            The supported format names and the supported operations for
            each format.
        """
        return [(MOLStreamHandler.FORMAT_NAME, SupportType.READ_WRITE)]

    def supports(self, format_name, operation=SupportType.READ_WRITE):
        """
        Check whether an operation is supported for a format.

        Parameters
        ----------
        format_name : str
            The logical format name.
        operation : SupportType, optional
            The requested operation(s).

        Returns
        -------
        is_supported : bool
            True, if all requested operations are supported for the
            format.
        """
        for name, support in self.formats():
            if name == format_name and (operation & support) == operation:
                return True
        return False

    def read(self, file, format_name):
        """
        Read atoms and bond orders from a file.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
        format_name : str
            The logical format name.
            Must be ``"mol"``.

        Returns
        -------
        atoms : AtomCollection
            The atoms with positions in *bohr*.
        bonds : BondOrderCollection
            The bond orders between the atoms.

        Raises
        ------
        FormatUnsupportedError
            If the format name is not ``"mol"``.
        FormatMismatchError
            If the file is malformed.
        UnsupportedVersionError
            If the file uses the ``V3000`` format.
        """
        self._check_format(format_name, SupportType.READ_ONLY)
        mol_file = MOLFile.read(file)
        return mol_file.get_structure(self._element_table, self._numeric_format)

    def try_read(self, file, format_name):
        """
        Read atoms and bond orders from a file without raising on
        failure.

        In contrast to :meth:`read()` a :class:`FormatUnsupportedError`,
        :class:`FormatMismatchError` or :class:`UnsupportedVersionError`
        is returned as part of the result instead of being raised.
        Errors unrelated to the file format, e.g. a missing file, are
        still raised.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
        format_name : str
            The logical format name.

        Returns
        -------
        result : ReadResult
            The read structure or the error.
        """
        try:
            atoms, bonds = self.read(file, format_name)
        except MolfileError as e:
            return ReadResult(error=e)
        return ReadResult(atoms=atoms, bonds=bonds)

    def write(self, file, format_name, atoms, bonds=None):
        """
        Write atoms and optionally bond orders into a file.

        The file gets a default header containing a placeholder name
        and the time of writing.

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be written to.
        format_name : str
            The logical format name.
            Must be ``"mol"``.
        atoms : AtomCollection
            The atoms to be written.
        bonds : BondOrderCollection, optional
            The bond orders between the atoms.

        Raises
        ------
        FormatUnsupportedError
            If the format name is not ``"mol"``.
        """
        self._check_format(format_name, SupportType.WRITE_ONLY)
        mol_file = MOLFile()
        mol_file.header = Header.default()
        mol_file.set_structure(
            atoms,
            bonds,
            SUPPORTED_VERSION,
            self._element_table,
            self._numeric_format,
        )
        mol_file.write(file)

    def _check_format(self, format_name, operation):
        if not self.supports(format_name, operation):
            raise FormatUnsupportedError(
                f"Format '{format_name}' is not supported by {self.name()}"
            )
