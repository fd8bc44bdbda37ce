"""Shared fixtures and markers for utf8play tests."""

from pathlib import Path

import pytest

from utf8play.engine.names import NameTable

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    config.addinivalue_line("markers", "db: requires PostgreSQL connection")


@pytest.fixture
def names_path():
    return FIXTURES / "unicode_names.json"


@pytest.fixture
def name_table(names_path):
    return NameTable.from_json(names_path)


@pytest.fixture
def unicode_data_path():
    return FIXTURES / "UnicodeData-sample.txt"
