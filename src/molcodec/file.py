# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = ["TextFile", "InvalidFileError"]

import abc
import copy
import io
from os import PathLike


class TextFile(metaclass=abc.ABCMeta):
    """
    Base class for line based text files.

    The constructor creates an empty file, that can be filled with data
    using the class specific setter methods.
    Conversely, the class method :func:`read()` reads a file from disk
    (or a file-like object from other sources).
    The text content is kept as list of strings, one for each line
    without the line break.

    Attributes
    ----------
    lines : list of str
        The lines of the text file.
        PROTECTED: Do not modify from outside.
    """

    def __init__(self):
        self.lines = []

    @classmethod
    def read(cls, file, *args, **kwargs):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be read.
            Alternatively a file path can be supplied.
            File objects must be opened in *text* mode.

        Returns
        -------
        file : TextFile
            An instance from the respective :class:`TextFile` subclass
            representing the parsed file.
        """
        # File name
        if is_open_compatible(file):
            with open(file, "r") as f:
                lines = f.read().splitlines()
        # File object
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            lines = file.read().splitlines()
        file_object = cls(*args, **kwargs)
        file_object.lines = lines
        return file_object

    def write(self, file):
        """
        Write the contents of this object into a file
        (or file-like object).

        Parameters
        ----------
        file : file-like object or str or PathLike
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        if is_open_compatible(file):
            with open(file, "w") as f:
                f.write("\n".join(self.lines) + "\n")
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            file.write("\n".join(self.lines) + "\n")

    def copy(self):
        """
        Copy the file object.

        Returns
        -------
        copy : TextFile
            A copy of this object with an independent list of lines.
        """
        clone = self.__copy_create__()
        clone.lines = copy.copy(self.lines)
        return clone

    def __copy_create__(self):
        return type(self)()

    def __str__(self):
        return "\n".join(self.lines)


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
