# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The MOL format is used to depict atom positions and bonds for small
molecules.
This subpackage is used for reading and writing an
:class:`AtomCollection` and a :class:`BondOrderCollection` in the
``V2000`` variant of this format.

Continuous bond orders are rounded to single, double and triple bonds
when a file is written, see :mod:`molcodec.io.mol.bondorder`.
"""

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"

from .bondorder import *
from .ctab import *
from .handler import *
from .header import *
from .mol import *
