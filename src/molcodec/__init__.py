# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *molcodec*.

It contains the data model shared by the file format subpackages:
the :class:`AtomCollection` holding element identities and positions,
the :class:`BondOrderCollection` holding continuous bond orders
and the :class:`ElementTable` that translates between element symbols
and atomic numbers.
Reading and writing files is provided by the :mod:`molcodec.io`
subpackage.
"""

__version__ = "1.0.0"
__name__ = "molcodec"
__author__ = "The molcodec contributors"

from .atoms import *
from .bonds import *
from .constants import *
from .elements import *
from .error import *
from .file import *
