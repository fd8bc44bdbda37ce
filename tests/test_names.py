"""Tests for the Unicode name table."""
import json

import pytest

from utf8play.engine import names
from utf8play.engine.names import NameEntry, NameTable, normalize_code


class TestNormalizeCode:
    @pytest.mark.parametrize("code,expected", [
        ("0", "0000"),
        ("00", "0000"),
        ("41", "0041"),
        ("0041", "0041"),
        ("00000", "0000"),
        ("00000041", "0041"),
        ("1F600", "1F600"),
        ("01F600", "1F600"),
        ("10FFFF", "10FFFF"),
    ])
    def test_normalize(self, code, expected):
        assert normalize_code(code) == expected

    def test_case_preserved(self):
        assert normalize_code("20ac") == "20ac"


class TestLookup:
    """Lookups against the fixture table."""

    def test_zero_forms(self, name_table):
        for code in ("0", "00", "0000", "00000"):
            assert name_table.lookup(code) == NameEntry("0000", "<control>")

    def test_same_entry_for_padded_forms(self, name_table):
        entries = {name_table.lookup(c) for c in ("41", "0041", "00000041")}
        assert entries == {NameEntry("0041", "LATIN CAPITAL LETTER A")}

    def test_five_digit(self, name_table):
        assert name_table.name("1F600") == "GRINNING FACE"
        assert name_table.name("01F600") == "GRINNING FACE"

    def test_miss(self, name_table):
        assert name_table.lookup("XXXX") is None
        assert name_table.name("XXXX") is None

    def test_case_sensitive(self, name_table):
        assert name_table.lookup("20ac") is None
        assert name_table.lookup("20AC").name == "EURO SIGN"

    def test_contains(self, name_table):
        assert "41" in name_table
        assert "42" not in name_table

    def test_len(self, name_table):
        assert len(name_table) == 6


class TestImmutability:
    def test_entries_read_only(self, name_table):
        with pytest.raises(TypeError):
            name_table.entries["0042"] = NameEntry("0042", "LATIN CAPITAL LETTER B")

    def test_entry_frozen(self, name_table):
        with pytest.raises(AttributeError):
            name_table.lookup("41").name = "OTHER"


class TestLoading:
    def test_from_rows(self):
        table = NameTable.from_rows([("00A2", "CENT SIGN")])
        assert table.name("A2") == "CENT SIGN"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="build-names"):
            NameTable.from_json(tmp_path / "missing.json")

    def test_from_db(self, monkeypatch):
        from utf8play.db import postgres

        monkeypatch.setattr(postgres, "load_names",
                            lambda conn: [("0041", "LATIN CAPITAL LETTER A")])
        table = NameTable.from_db(object())
        assert table.name("41") == "LATIN CAPITAL LETTER A"


class TestDefaultTable:
    @pytest.fixture(autouse=True)
    def clear_cache(self):
        names.default_table.cache_clear()
        yield
        names.default_table.cache_clear()

    def test_env_override(self, monkeypatch, names_path):
        monkeypatch.setenv(names.TABLE_PATH_ENV, str(names_path))
        assert names.table_path() == names_path
        assert names.lookup_unicode("20AC").name == "EURO SIGN"

    def test_loaded_once(self, monkeypatch, tmp_path):
        path = tmp_path / "names.json"
        path.write_text(json.dumps([{"code": "0041", "name": "A"}]))
        monkeypatch.setenv(names.TABLE_PATH_ENV, str(path))
        first = names.default_table()
        path.write_text(json.dumps([]))
        assert names.default_table() is first
        assert names.lookup_unicode("41").name == "A"

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv(names.TABLE_PATH_ENV, raising=False)
        assert names.table_path() == names.DEFAULT_TABLE_PATH
        assert names.DEFAULT_TABLE_PATH.name == "unicode_names.json"
