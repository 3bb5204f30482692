# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the :class:`AtomCollection`, the container for
element identities and atom positions.
"""

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = ["AtomCollection"]

import numbers
import numpy as np


class AtomCollection:
    """
    An ordered collection of atoms, each represented by its element and
    its position.

    Instead of using a list of atom objects, this class uses *NumPy*
    arrays: The elements are stored as atomic numbers in an integer
    array, the positions in a *(n x 3)* float array.
    The index of an atom in the collection is used as reference by
    a :class:`BondOrderCollection`, hence the order of atoms is
    significant.

    All positions are given in atomic units (*bohr*).

    Parameters
    ----------
    length : int
        The number of atoms in the collection.
        All atoms are initialized with the unset element ``0`` at the
        origin.

    Attributes
    ----------
    elements : ndarray, dtype=int, shape=(n,)
        The atomic numbers of the atoms.
    positions : ndarray, dtype=float, shape=(n,3)
        The positions of the atoms in *bohr*.

    Examples
    --------

    >>> atoms = AtomCollection(2)
    >>> atoms.set_element(0, 6)
    >>> atoms.set_element(1, 8)
    >>> atoms.set_position(1, [2.13, 0.0, 0.0])
    >>> print(atoms.elements)
    [6 8]
    >>> print(atoms.get_position(1).tolist())
    [2.13, 0.0, 0.0]
    """

    def __init__(self, length):
        if length < 0:
            raise ValueError("The number of atoms must not be negative")
        self._length = int(length)
        self._elements = np.zeros(self._length, dtype=int)
        self._positions = np.zeros((self._length, 3), dtype=float)

    @staticmethod
    def from_arrays(elements, positions):
        """
        Create an :class:`AtomCollection` from existing arrays.

        Parameters
        ----------
        elements : array-like of int, shape=(n,)
            The atomic numbers.
        positions : array-like of float, shape=(n,3)
            The positions in *bohr*.

        Returns
        -------
        atoms : AtomCollection
            The new collection.
            The arrays are copied.
        """
        elements = np.asarray(elements)
        atoms = AtomCollection(len(elements))
        atoms.elements = elements
        atoms.positions = positions
        return atoms

    def array_length(self):
        """
        Get the number of atoms in the collection.

        Returns
        -------
        length : int
            The number of atoms.
        """
        return self._length

    @property
    def elements(self):
        return self._elements

    @elements.setter
    def elements(self, value):
        value = np.asarray(value)
        if value.shape != (self._length,):
            raise IndexError(
                f"Expected shape ({self._length},) for elements, "
                f"but got {value.shape}"
            )
        self._elements = value.astype(int, copy=True)

    @property
    def positions(self):
        return self._positions

    @positions.setter
    def positions(self, value):
        value = np.asarray(value, dtype=float)
        if value.shape != (self._length, 3):
            raise IndexError(
                f"Expected shape ({self._length}, 3) for positions, "
                f"but got {value.shape}"
            )
        self._positions = value.copy()

    def get_element(self, index):
        return int(self._elements[self._check_index(index)])

    def set_element(self, index, element):
        self._elements[self._check_index(index)] = element

    def get_position(self, index):
        # Return a copy to keep the collection unaffected
        return self._positions[self._check_index(index)].copy()

    def set_position(self, index, position):
        position = np.asarray(position, dtype=float)
        if position.shape != (3,):
            raise IndexError(
                f"Expected shape (3,) for a position, but got {position.shape}"
            )
        self._positions[self._check_index(index)] = position

    def copy(self):
        """
        Copy the collection.

        Returns
        -------
        copy : AtomCollection
            A deep copy of this object.
        """
        return AtomCollection.from_arrays(self._elements, self._positions)

    def _check_index(self, index):
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"Index must be integer, not '{type(index).__name__}'")
        if index < -self._length or index >= self._length:
            raise IndexError(
                f"Index {index} is out of range for {self._length} atoms"
            )
        return index

    def __iter__(self):
        """
        Iterate over the atoms as *(element, position)* tuples.
        """
        for i in range(self._length):
            yield int(self._elements[i]), self._positions[i].copy()

    def __len__(self):
        return self._length

    def __eq__(self, item):
        if not isinstance(item, AtomCollection):
            return False
        if self._length != item._length:
            return False
        return bool(
            np.array_equal(self._elements, item._elements)
            and np.array_equal(self._positions, item._positions)
        )

    def __str__(self):
        return "\n".join(
            f"{element:>3d} {x:>10.4f} {y:>10.4f} {z:>10.4f}"
            for element, (x, y, z) in zip(self._elements, self._positions)
        )

    def __repr__(self):
        return (
            f"AtomCollection.from_arrays({self._elements.tolist()!r}, "
            f"{self._positions.tolist()!r})"
        )
