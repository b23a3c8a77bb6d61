"""Tests for molgraph.parser: XYZ file parsing."""

import pytest

from molgraph.exceptions import XYZFormatError
from molgraph.parser import AtomRecord, parse_atom_line, parse_xyz, parse_xyz_title


class TestParseXYZ:
    def test_ch4_symbols(self, ch4_xyz_path):
        records = parse_xyz(ch4_xyz_path)
        assert [r.symbol for r in records] == ["C", "H", "H", "H", "H"]

    def test_ch4_coords(self, ch4_xyz_path):
        records = parse_xyz(ch4_xyz_path)
        assert records[0] == AtomRecord("C", 0.0, 0.0, 0.0)
        assert records[1] == AtomRecord("H", 0.6291, 0.6291, 0.6291)

    def test_path_as_string(self, h2o_xyz_path):
        assert len(parse_xyz(str(h2o_xyz_path))) == 3

    def test_from_string(self):
        records = parse_xyz("1\ntitle\nX 1.0 2.0 3.0\n")
        assert records == [AtomRecord("X", 1.0, 2.0, 3.0)]

    def test_symbols_not_validated(self):
        assert parse_xyz("1\n\nXx 0 0 0")[0].symbol == "Xx"

    def test_crlf(self):
        assert parse_xyz("2\r\ntitle\r\nH 0 0 0\r\nH 0 0 0.74\r\n") == parse_xyz(
            "2\ntitle\nH 0 0 0\nH 0 0 0.74\n")

    def test_blank_lines_skipped(self):
        records = parse_xyz("2\n\n\nH 0 0 0\n   \nH 0 0 0.74\n\n\n")
        assert len(records) == 2

    def test_title_line_skipped_even_if_atom_like(self):
        records = parse_xyz("1\nC 9.0 9.0 9.0\nH 0 0 0\n")
        assert records == [AtomRecord("H", 0.0, 0.0, 0.0)]

    def test_extra_columns_ignored(self):
        records = parse_xyz("1\n\nO 1.0 2.0 3.0 -0.834\n")
        assert records == [AtomRecord("O", 1.0, 2.0, 3.0)]

    def test_empty_molecule(self):
        assert parse_xyz("0\nnothing here\n") == []

    def test_bad_count_raises(self):
        with pytest.raises(XYZFormatError, match="line 1.*atom count 'two'"):
            parse_xyz("two\n\nH 0 0 0\nH 0 0 1\n")

    def test_empty_text_raises(self):
        with pytest.raises(XYZFormatError, match="atom count"):
            parse_xyz("")

    def test_too_few_atoms_raises(self):
        with pytest.raises(XYZFormatError, match="declared 3 atoms but found 1"):
            parse_xyz("3\n\nH 0 0 0\n")

    def test_too_many_atoms_raises(self):
        with pytest.raises(XYZFormatError, match="declared 1 atoms but found 2"):
            parse_xyz("1\n\nH 0 0 0\nH 0 0 1\n")

    def test_bad_coordinate_reports_line(self):
        with pytest.raises(XYZFormatError, match="line 4.*z coordinate") as excinfo:
            parse_xyz("2\n\nH 0 0 0\nH 0 0 nope\n")
        assert excinfo.value.line_number == 4

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_xyz("x\n")


class TestParseAtomLine:
    def test_record_fields(self):
        record = parse_atom_line("Cl  -1.5  0.25  3e-1")
        assert record.symbol == "Cl"
        assert (record.x, record.y, record.z) == (-1.5, 0.25, 0.3)

    def test_too_few_columns(self):
        with pytest.raises(XYZFormatError, match="three coordinates"):
            parse_atom_line("H 1.0")


class TestParseTitle:
    def test_title(self, ch4_xyz_path):
        assert parse_xyz_title(ch4_xyz_path) == "methane"

    def test_missing_title(self):
        assert parse_xyz_title("0") == ""
