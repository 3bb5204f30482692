# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Conversion between continuous bond orders and the integer bond types of
*MDL* connection tables.

Two different predicates are used when writing a file:
A bond line is written for bonds whose bond order rounds to a supported
bond type (:func:`is_bond_line_order()`), while the valence field of the
*Atom block* counts bonds whose bond order is within the range of
supported bond types (:func:`counts_towards_valence()`).
"""

__name__ = "molcodec.io.mol"
__author__ = "The molcodec contributors"
__all__ = [
    "MIN_BOND_TYPE",
    "MAX_BOND_TYPE",
    "discretize_bond_order",
    "is_bond_line_order",
    "counts_towards_valence",
    "compute_valences",
    "bond_order_from_specifier",
]

import numpy as np

# Single, double and triple bonds
MIN_BOND_TYPE = 1
MAX_BOND_TYPE = 3


def discretize_bond_order(order):
    """
    Round a continuous bond order to the nearest integer.

    Halfway cases are rounded away from zero, i.e. ``2.5`` becomes ``3``
    and ``3.5`` becomes ``4``.

    Parameters
    ----------
    order : float or ndarray, dtype=float
        The bond order(s).

    Returns
    -------
    discrete_order : int or ndarray, dtype=int
        The rounded bond order(s).

    Examples
    --------

    >>> print(discretize_bond_order(0.5))
    1
    >>> print(discretize_bond_order(np.array([0.49999, 2.5, 3.5])))
    [0 3 4]
    """
    discrete_order = _round_half_away(order)
    if discrete_order.ndim == 0:
        return int(discrete_order)
    return discrete_order.astype(int)


def is_bond_line_order(order):
    """
    Check whether a bond with the given continuous bond order is
    written as line into the *Bond block*.

    Parameters
    ----------
    order : float or ndarray, dtype=float
        The bond order(s).

    Returns
    -------
    is_written : bool or ndarray, dtype=bool
        True, if the rounded bond order is a single, double or triple
        bond.
    """
    # Compared as float, since huge orders overflow an integer cast
    discrete_order = _round_half_away(order)
    is_written = (discrete_order >= MIN_BOND_TYPE) & (discrete_order <= MAX_BOND_TYPE)
    if np.ndim(is_written) == 0:
        return bool(is_written)
    return is_written


def counts_towards_valence(order):
    """
    Check whether a bond with the given continuous bond order is
    counted in the valence field of the *Atom block*.

    Parameters
    ----------
    order : float or ndarray, dtype=float
        The bond order(s).

    Returns
    -------
    is_counted : bool or ndarray, dtype=bool
        True, if ``0.5 <= order < 3.5``.
    """
    order = np.asarray(order, dtype=float)
    is_counted = (order >= MIN_BOND_TYPE - 0.5) & (order < MAX_BOND_TYPE + 0.5)
    if is_counted.ndim == 0:
        return bool(is_counted)
    return is_counted


def compute_valences(bonds):
    """
    Count for each atom the incident bonds that are considered in the
    valence field of the *Atom block*.

    Parameters
    ----------
    bonds : BondOrderCollection
        The bond orders.

    Returns
    -------
    valences : ndarray, dtype=int
        The number of counted bonds for each atom.
    """
    orders = bonds.as_matrix()
    # Each unordered pair is only evaluated once
    is_counted = np.triu(counts_towards_valence(orders), k=1)
    return (
        np.count_nonzero(is_counted, axis=0) + np.count_nonzero(is_counted, axis=1)
    ).astype(int)


def _round_half_away(order):
    """
    Round to the nearest integer, halfway cases away from zero.

    In contrast to ``floor(abs(order) + 0.5)`` this is exact for all
    finite values, e.g. the largest value below ``0.5`` becomes ``0``.
    """
    order = np.asarray(order, dtype=float)
    # The fractional part is exact in floating point arithmetic
    truncated = np.trunc(order)
    return truncated + np.where(
        np.abs(order - truncated) >= 0.5, np.sign(order), 0.0
    )


def bond_order_from_specifier(specifier):
    """
    Convert the bond type of a *Bond block* line into a continuous bond
    order.

    Parameters
    ----------
    specifier : int
        The bond type.

    Returns
    -------
    order : float or None
        The bond order, or None if the bond type is not a single,
        double or triple bond.
    """
    if MIN_BOND_TYPE <= specifier <= MAX_BOND_TYPE:
        return float(specifier)
    return None
