# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Physical constants for the conversion between the internal length unit
(bohr) and the unit used in structure files (angstrom).
"""

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = ["ANGSTROM_PER_BOHR", "BOHR_PER_ANGSTROM"]

# CODATA 2018 value of the Bohr radius in angstrom
ANGSTROM_PER_BOHR = 0.529177210903
BOHR_PER_ANGSTROM = 1 / ANGSTROM_PER_BOHR
