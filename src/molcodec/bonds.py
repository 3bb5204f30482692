# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the :class:`BondOrderCollection`, that stores
continuous bond orders between the atoms of an :class:`AtomCollection`.
"""

__name__ = "molcodec"
__author__ = "The molcodec contributors"
__all__ = ["BondOrderCollection"]

import numbers
import numpy as np


class BondOrderCollection:
    """
    A symmetric collection of continuous bond orders between pairs of
    atoms.

    Each unordered pair of distinct atom indices *(i, j)* is associated
    with a real valued bond order, where a bond order of ``0`` means,
    that the atoms are not bonded.
    Hence, the absence of a bond and a bond with order ``0`` are
    equivalent.
    Self bonds are not allowed.

    Internally the bond orders are stored in a dense symmetric
    *(n x n)* matrix.

    Parameters
    ----------
    atom_count : int, optional
        The number of atoms the bond orders refer to.

    Examples
    --------

    >>> bonds = BondOrderCollection(3)
    >>> bonds.set_order(0, 1, 1.0)
    >>> bonds.set_order(2, 1, 1.5)
    >>> print(bonds.get_order(1, 2))
    1.5
    >>> print(bonds.as_array())
    [(0, 1, 1.0), (1, 2, 1.5)]
    """

    def __init__(self, atom_count=0):
        if atom_count < 0:
            raise ValueError("The number of atoms must not be negative")
        self._orders = np.zeros((atom_count, atom_count), dtype=float)

    def atom_count(self):
        """
        Get the number of atoms the collection refers to.

        Returns
        -------
        atom_count : int
            The number of atoms.
        """
        return self._orders.shape[0]

    def resize(self, atom_count):
        """
        Change the number of atoms the collection refers to.

        Bond orders between atoms that are still within the new size
        are kept, all other bond orders are removed.

        Parameters
        ----------
        atom_count : int
            The new number of atoms.
        """
        if atom_count < 0:
            raise ValueError("The number of atoms must not be negative")
        new_orders = np.zeros((atom_count, atom_count), dtype=float)
        n_kept = min(atom_count, self.atom_count())
        new_orders[:n_kept, :n_kept] = self._orders[:n_kept, :n_kept]
        self._orders = new_orders

    def get_order(self, atom_index1, atom_index2):
        """
        Get the bond order between two atoms.

        Parameters
        ----------
        atom_index1, atom_index2 : int
            The indices of the atoms.

        Returns
        -------
        order : float
            The bond order, ``0`` if the atoms are not bonded.
        """
        i, j = self._check_pair(atom_index1, atom_index2)
        return float(self._orders[i, j])

    def set_order(self, atom_index1, atom_index2, order):
        """
        Set the bond order between two atoms.

        Parameters
        ----------
        atom_index1, atom_index2 : int
            The indices of the atoms.
            The order of both indices is irrelevant.
        order : float
            The bond order.
            ``0`` removes the bond.
        """
        i, j = self._check_pair(atom_index1, atom_index2)
        self._orders[i, j] = order
        self._orders[j, i] = order

    def get_bond_count(self):
        """
        Get the number of atom pairs with a non-zero bond order.

        Returns
        -------
        count : int
            The number of bonds.
        """
        return int(np.count_nonzero(np.triu(self._orders, k=1)))

    def as_array(self):
        """
        Get all bonds with a non-zero bond order.

        Returns
        -------
        bonds : list of tuple(int, int, float)
            The bonds as *(i, j, order)* tuples with *i < j*,
            sorted by *i* and subsequently by *j*.
        """
        rows, cols = np.nonzero(np.triu(self._orders, k=1))
        return [
            (int(i), int(j), float(self._orders[i, j])) for i, j in zip(rows, cols)
        ]

    def as_matrix(self):
        """
        Get the bond orders as symmetric matrix.

        Returns
        -------
        matrix : ndarray, dtype=float, shape=(n,n)
            A copy of the bond order matrix.
        """
        return self._orders.copy()

    def empty(self):
        """
        Check whether the collection contains no bond at all.
        """
        return not np.any(self._orders)

    def copy(self):
        clone = BondOrderCollection()
        clone._orders = self._orders.copy()
        return clone

    def _check_pair(self, atom_index1, atom_index2):
        n_atoms = self.atom_count()
        for index in (atom_index1, atom_index2):
            if not isinstance(index, numbers.Integral):
                raise TypeError(
                    f"Index must be integer, not '{type(index).__name__}'"
                )
            if index < 0 or index >= n_atoms:
                raise IndexError(
                    f"Index {index} is out of range for {n_atoms} atoms"
                )
        if atom_index1 == atom_index2:
            raise IndexError(f"Atom {atom_index1} cannot be bonded to itself")
        return int(atom_index1), int(atom_index2)

    def __eq__(self, item):
        if not isinstance(item, BondOrderCollection):
            return False
        return bool(np.array_equal(self._orders, item._orders))

    def __str__(self):
        return "\n".join(
            f"{i:>3d} {j:>3d} {order:>6.3f}" for i, j, order in self.as_array()
        )
