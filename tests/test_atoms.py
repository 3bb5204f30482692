# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import molcodec


@pytest.fixture
def atoms():
    return molcodec.AtomCollection.from_arrays(
        [6, 8, 1], [[0.0, 0.0, 0.0], [2.3, 0.0, 0.0], [-1.1, 1.7, 0.0]]
    )


def test_empty():
    atoms = molcodec.AtomCollection(0)
    assert atoms.array_length() == 0
    assert atoms.elements.shape == (0,)
    assert atoms.positions.shape == (0, 3)
    assert list(atoms) == []


def test_initial_values():
    atoms = molcodec.AtomCollection(2)
    assert atoms.elements.tolist() == [0, 0]
    assert atoms.positions.tolist() == [[0, 0, 0], [0, 0, 0]]


def test_negative_length():
    with pytest.raises(ValueError):
        molcodec.AtomCollection(-1)


def test_access(atoms):
    assert len(atoms) == 3
    assert atoms.get_element(1) == 8
    assert atoms.get_position(2).tolist() == [-1.1, 1.7, 0.0]

    atoms.set_element(2, 17)
    atoms.set_position(2, [0.5, 0.5, 0.5])
    assert atoms.elements.tolist() == [6, 8, 17]
    assert atoms.positions[2].tolist() == [0.5, 0.5, 0.5]


def test_returned_position_is_copy(atoms):
    """
    Modifying a position obtained from the collection must not alter
    the collection.
    """
    position = atoms.get_position(1)
    position[:] = 42
    assert atoms.get_position(1).tolist() == [2.3, 0.0, 0.0]


@pytest.mark.parametrize("index", [3, -4])
def test_index_out_of_range(atoms, index):
    with pytest.raises(IndexError):
        atoms.get_element(index)
    with pytest.raises(IndexError):
        atoms.set_position(index, [0, 0, 0])


def test_non_integer_index(atoms):
    with pytest.raises(TypeError):
        atoms.get_element(1.0)


def test_invalid_shapes(atoms):
    with pytest.raises(IndexError):
        atoms.elements = [1, 2]
    with pytest.raises(IndexError):
        atoms.positions = np.zeros((3, 2))
    with pytest.raises(IndexError):
        atoms.set_position(0, [1, 2])
    with pytest.raises(IndexError):
        molcodec.AtomCollection.from_arrays([1, 1], np.zeros((3, 3)))


def test_iteration(atoms):
    elements = []
    positions = []
    for element, position in atoms:
        elements.append(element)
        positions.append(position.tolist())
    assert elements == atoms.elements.tolist()
    assert positions == atoms.positions.tolist()


def test_copy(atoms):
    clone = atoms.copy()
    assert clone == atoms
    clone.set_element(0, 7)
    assert clone != atoms
    assert atoms.get_element(0) == 6


def test_from_arrays_copies_input():
    elements = np.array([1, 1])
    positions = np.zeros((2, 3))
    atoms = molcodec.AtomCollection.from_arrays(elements, positions)
    elements[0] = 2
    positions[0, 0] = 1.0
    assert atoms.get_element(0) == 1
    assert atoms.get_position(0).tolist() == [0, 0, 0]


def test_equality(atoms):
    assert atoms != molcodec.AtomCollection(3)
    assert atoms != molcodec.AtomCollection(2)
    assert atoms != "Not an AtomCollection"


def test_repr(atoms):
    assert eval(repr(atoms), {"AtomCollection": molcodec.AtomCollection}) == atoms
