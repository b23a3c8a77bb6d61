"""Tests for molgraph.elements: element property lookup."""

import pytest

from molgraph.colour import RGB
from molgraph.elements import (
    COVALENT_RADII_PICOMETERS,
    DEFAULT_COLOUR,
    DEFAULT_COVALENT_RADIUS,
    DEFAULT_MAXIMAL_VALENCE,
    ELEMENT_COLOURS,
    ELEMENTS,
    MAXIMAL_VALENCES,
    atomic_number,
    covalent_radius,
    element_colour,
    element_symbol,
    maximal_valence,
)
from molgraph.exceptions import UnknownElementSymbol


class TestTables:
    def test_element_count(self):
        assert len(ELEMENTS) == 118
        assert ELEMENTS[0] == "H"
        assert ELEMENTS[-1] == "Og"

    def test_symbols_unique(self):
        assert len(set(ELEMENTS)) == len(ELEMENTS)

    def test_populated_ranges(self):
        # Radii run H..Rn, valences H..Sr, colours H..Cl.
        assert len(COVALENT_RADII_PICOMETERS) == 86
        assert len(MAXIMAL_VALENCES) == 38
        assert len(ELEMENT_COLOURS) == 17


class TestAtomicNumber:
    @pytest.mark.parametrize("symbol, z", [
        ("H", 1), ("He", 2), ("C", 6), ("Cl", 17), ("Fe", 26),
        ("Rn", 86), ("Og", 118),
    ])
    def test_known_symbols(self, symbol, z):
        assert atomic_number(symbol) == z

    def test_round_trip_with_element_symbol(self):
        for z in range(1, 119):
            assert atomic_number(element_symbol(z)) == z

    @pytest.mark.parametrize("symbol", ["Xx", "", "CL", "c", "h", " H"])
    def test_unknown_symbol_raises(self, symbol):
        with pytest.raises(UnknownElementSymbol) as excinfo:
            atomic_number(symbol)
        assert excinfo.value.symbol == symbol

    def test_unknown_symbol_is_value_error(self):
        with pytest.raises(ValueError, match="Unknown element symbol: 'Xx'"):
            atomic_number("Xx")


class TestCovalentRadius:
    def test_hydrogen(self):
        assert covalent_radius(1) == pytest.approx(0.31)

    def test_carbon(self):
        assert covalent_radius(6) == pytest.approx(0.76)

    def test_potassium(self):
        assert covalent_radius(19) == pytest.approx(2.03)

    def test_krypton(self):
        assert covalent_radius(36) == pytest.approx(1.16)

    def test_radon_is_last_tabulated(self):
        assert covalent_radius(86) == pytest.approx(1.50)

    def test_francium_uses_default(self):
        assert covalent_radius(87) == DEFAULT_COVALENT_RADIUS == 2.0

    def test_oganesson_uses_default(self):
        assert covalent_radius(118) == DEFAULT_COVALENT_RADIUS

    @pytest.mark.parametrize("z", [0, -1, 119])
    def test_out_of_range_raises(self, z):
        with pytest.raises(ValueError, match="atomic_number"):
            covalent_radius(z)


class TestMaximalValence:
    @pytest.mark.parametrize("z, valence", [
        (1, 1), (2, 0), (6, 4), (7, 5), (8, 2), (10, 0), (16, 6), (18, 0),
        (38, 2),
    ])
    def test_tabulated(self, z, valence):
        assert maximal_valence(z) == valence

    def test_beyond_table_uses_default(self):
        assert maximal_valence(39) == DEFAULT_MAXIMAL_VALENCE == 6
        assert maximal_valence(87) == DEFAULT_MAXIMAL_VALENCE


class TestElementColour:
    def test_oxygen_is_red(self):
        assert element_colour(8) == RGB(255, 0, 0)

    def test_chlorine_is_last_tabulated(self):
        assert element_colour(17) == RGB(0, 244, 0)

    def test_beyond_table_uses_default(self):
        assert element_colour(18) == DEFAULT_COLOUR
        assert element_colour(87) == RGB(252, 252, 252)
