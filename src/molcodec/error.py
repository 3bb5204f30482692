# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the *molcodec* package.
"""

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = [
    "ErrorKind",
    "MolfileError",
    "FormatUnsupportedError",
    "FormatMismatchError",
    "UnsupportedVersionError",
    "BadStructureError",
]

import enum
from .file import InvalidFileError


class ErrorKind(enum.Enum):
    """
    The kinds of failures, a file format handler can report.

    - ``FORMAT_UNSUPPORTED`` - The requested format name is not handled.
    - ``FORMAT_MISMATCH`` - The file content violates the format.
    - ``UNSUPPORTED_VERSION`` - The file declares a format version that
      is recognized, but not implemented.
    """

    FORMAT_UNSUPPORTED = "format-unsupported"
    FORMAT_MISMATCH = "format-mismatch"
    UNSUPPORTED_VERSION = "unsupported-version"


class MolfileError(Exception):
    """
    Base class for the errors, that carry an :class:`ErrorKind`.
    """

    kind = None


class FormatUnsupportedError(MolfileError, ValueError):
    """
    Indicates that a requested format name is not supported by a
    file format handler.
    """

    kind = ErrorKind.FORMAT_UNSUPPORTED


class FormatMismatchError(MolfileError, InvalidFileError):
    """
    Indicates that a file does not follow the structure of the format,
    it is read as.
    """

    kind = ErrorKind.FORMAT_MISMATCH


class UnsupportedVersionError(MolfileError, InvalidFileError):
    """
    Indicates that a file declares a format version, that cannot be
    read.
    """

    kind = ErrorKind.UNSUPPORTED_VERSION


class BadStructureError(Exception):
    """
    Indicates that a structure is not suitable for a certain operation,
    e.g. it cannot be represented in the fixed columns of a file.
    """

    pass
