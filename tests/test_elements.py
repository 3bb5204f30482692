# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import json
from os.path import join
import pytest
import molcodec


@pytest.mark.parametrize(
    "symbol, number",
    [("H", 1), ("C", 6), ("Cl", 17), ("Fe", 26), ("U", 92), ("Og", 118)],
)
def test_default_table(symbol, number):
    table = molcodec.default_element_table()
    assert table.element_for_symbol(symbol) == number
    assert table.symbol(number) == symbol


def test_default_table_complete():
    table = molcodec.default_element_table()
    assert len(table) == 118
    assert sorted(table.element_for_symbol(symbol) for symbol in table) == list(
        range(1, 119)
    )


def test_default_table_is_shared():
    assert molcodec.default_element_table() is molcodec.default_element_table()


def test_mass():
    table = molcodec.default_element_table()
    assert table.mass(6) == pytest.approx(12.011)
    assert table.mass(1) == pytest.approx(1.008)


def test_case_sensitivity():
    table = molcodec.default_element_table()
    assert "Cl" in table
    assert "CL" not in table
    with pytest.raises(molcodec.UnknownElementError):
        table.element_for_symbol("CL")


@pytest.mark.parametrize("symbol", ["", "Xx", "D", "T", "*"])
def test_unknown_symbol(symbol):
    with pytest.raises(KeyError):
        molcodec.default_element_table().element_for_symbol(symbol)


@pytest.mark.parametrize("number", [0, -1, 119])
def test_unknown_number(number):
    table = molcodec.default_element_table()
    with pytest.raises(molcodec.UnknownElementError):
        table.symbol(number)
    with pytest.raises(molcodec.UnknownElementError):
        table.mass(number)


def test_duplicates():
    with pytest.raises(ValueError):
        molcodec.ElementTable([("H", 1, 1.008), ("H", 2, 4.003)])
    with pytest.raises(ValueError):
        molcodec.ElementTable([("H", 1, 1.008), ("He", 1, 4.003)])


def test_from_json(tmp_path):
    path = join(tmp_path, "elements.json")
    with open(path, "w") as file:
        json.dump({"X": {"number": 200, "mass": 500.0}}, file)
    table = molcodec.ElementTable.from_json(path)
    assert len(table) == 1
    assert table.element_for_symbol("X") == 200
    assert table.mass(200) == 500.0
