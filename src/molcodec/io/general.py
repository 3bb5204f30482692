# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains a convenience function for loading structures from
general structure files.
"""

__name__ = "molcodec.io"
__author__ = "The molcodec contributors"
__all__ = ["load_structure", "save_structure"]

import os.path
from molcodec.error import FormatUnsupportedError


def load_structure(file_path, **kwargs):
    """
    Load an :class:`AtomCollection` and a :class:`BondOrderCollection`
    from a structure file without the need to manually instantiate a
    file object.

    Internally this function uses a file object, based on the file
    extension.

    Parameters
    ----------
    file_path : str
        The path to structure file.
    **kwargs
        Additional parameters will be passed to the
        :func:`get_structure()` method of the file object.

    Returns
    -------
    atoms : AtomCollection
        The atoms with positions in *bohr*.
    bonds : BondOrderCollection
        The bond orders between the atoms.

    Raises
    ------
    FormatUnsupportedError
        If the file format (i.e. the file extension) is unknown.
    """
    # We only need the suffix here
    _, suffix = os.path.splitext(file_path)
    match suffix:
        case ".mol":
            from molcodec.io.mol import MOLFile

            file = MOLFile.read(file_path)
            return file.get_structure(**kwargs)
        case unknown_suffix:
            raise FormatUnsupportedError(f"Unknown file format '{unknown_suffix}'")


def save_structure(file_path, atoms, bonds=None, **kwargs):
    """
    Save an :class:`AtomCollection` and optionally a
    :class:`BondOrderCollection` to a structure file without the need
    to manually instantiate a file object.

    Internally this function uses a file object, based on the file
    extension.

    Parameters
    ----------
    file_path : str
        The path to structure file.
    atoms : AtomCollection
        The atoms to be saved.
    bonds : BondOrderCollection, optional
        The bond orders to be saved.
    **kwargs
        Additional parameters will be passed to the respective
        `set_structure` method.

    Raises
    ------
    FormatUnsupportedError
        If the file format (i.e. the file extension) is unknown.
    """
    # We only need the suffix here
    _, suffix = os.path.splitext(file_path)
    match suffix:
        case ".mol":
            from molcodec.io.mol import Header, MOLFile

            file = MOLFile()
            file.set_structure(atoms, bonds, **kwargs)
            file.header = Header.default()
            file.write(file_path)
        case unknown_suffix:
            raise FormatUnsupportedError(f"Unknown file format '{unknown_suffix}'")
