# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for reading and writing structure files.

Files can be read and written either via the file class of the
respective format subpackage, e.g. :class:`molcodec.io.mol.MOLFile`,
or via the convenience functions :func:`load_structure()` and
:func:`save_structure()`, that choose the format based on the file
suffix.
"""

__name__ = "molcodec.io"
__author__ = "The molcodec contributors"

from .general import *
from .util import *
