# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"
__all__ = ["Header"]

import datetime
import warnings
from dataclasses import dataclass

_DATE_FORMAT = "%m%d%y%H%M"

DEFAULT_MOL_NAME = "Unnamed Molecule"
# Placeholder for the author's initials
DEFAULT_INITIALS = "##"
DEFAULT_PROGRAM = "molcodec"
MAX_MOL_NAME_LENGTH = 80


@dataclass
class Header:
    """
    The three header lines of a MOL file.

    Parameters
    ----------
    mol_name : str, optional
        The name of the molecule.
    initials : str, optional
        The author's initials. Maximum length is 2.
    program : str, optional
        The program name. Maximum length is 8.
    time : datetime, optional
        The time of file creation.
    dimensions : str, optional
        Dimensional code, e.g. ``"3D"``. Maximum length is 2.
    scaling_factors : str, optional
        Scaling factors. Maximum length is 12.
    energy : str, optional
        Energy from modeling program. Maximum length is 12.
    registry_number : str, optional
        MDL registry number. Maximum length is 6.
    comments : str, optional
        Additional comments.

    Attributes
    ----------
    mol_name, initials, program, time, dimensions, scaling_factors, energy, registry_number, comments
        Same as the parameters.
    """

    mol_name: ... = ""
    initials: ... = ""
    program: ... = ""
    time: ... = None
    dimensions: ... = ""
    scaling_factors: ... = ""
    energy: ... = ""
    registry_number: ... = ""
    comments: ... = ""

    @staticmethod
    def default():
        """
        Create the header that is written by default.

        It contains a placeholder molecule name and initials, this
        package as program name, the current local time and the
        ``"3D"`` dimensional code.

        Returns
        -------
        header : Header
            The default header.
        """
        return Header(
            mol_name=DEFAULT_MOL_NAME,
            initials=DEFAULT_INITIALS,
            program=DEFAULT_PROGRAM,
            time=datetime.datetime.now(),
            dimensions="3D",
        )

    @staticmethod
    def deserialize(text):
        # Missing header lines are treated as empty
        mol_name, program_line, comments = (text.splitlines() + [""] * 3)[:3]
        fields = {
            name: program_line[start:stop].strip()
            for name, (start, stop) in _PROGRAM_LINE_COLUMNS.items()
        }
        fields["time"] = _parse_time(program_line[10:20])
        return Header(
            mol_name=mol_name.strip(), comments=comments.strip(), **fields
        )

    def serialize(self):
        if len(self.mol_name) > MAX_MOL_NAME_LENGTH:
            raise ValueError(
                f"Molecule name must not exceed {MAX_MOL_NAME_LENGTH} characters"
            )
        time_string = "" if self.time is None else self.time.strftime(_DATE_FORMAT)
        # Shorter values are padded, longer values are truncated
        program_line = ""
        for name, (start, stop) in _PROGRAM_LINE_COLUMNS.items():
            if name == "dimensions":
                program_line += f"{time_string:>10.10}"
            width = stop - start
            program_line += f"{getattr(self, name):>{width}.{width}}"
        # Absent optional fields at the end of the line are omitted
        return "\n".join([self.mol_name, program_line.rstrip(), self.comments]) + "\n"


# Columns of the text fields in the program line,
# the time occupies the columns 10 to 20
_PROGRAM_LINE_COLUMNS = {
    "initials": (0, 2),
    "program": (2, 10),
    "dimensions": (20, 22),
    "scaling_factors": (22, 34),
    "energy": (34, 46),
    "registry_number": (46, 52),
}


def _parse_time(time_string):
    if time_string.strip() == "":
        return None
    try:
        return datetime.datetime.strptime(time_string, _DATE_FORMAT)
    except ValueError:
        warnings.warn(f"Invalid time format '{time_string}' in file header")
        return None
