import pytest

from tablemerger import TableMerger
from tablemerger.core.functions import TableTextCodec


SIMPLE_TABLE = "\n".join([
    "| a | b | c |",
    "|---|---|---|",
    "| 1 | 2 | 3 |",
])

DOCUMENT = "\n".join([
    "# Title",
    "",
    "Some text",
    "",
    "| a | b | c |",
    "|---|---|---|",
    "| 1 | 2 | 3 |",
    "",
    "After",
    "",
])


@pytest.fixture
def codec():
    return TableTextCodec()


@pytest.fixture
def merger():
    return TableMerger()


@pytest.fixture
def simple_table():
    return SIMPLE_TABLE


@pytest.fixture
def document():
    return DOCUMENT


@pytest.fixture
def grid_3x3():
    return [
        ["h1", "h2", "h3"],
        ["a", "b", "c"],
        ["d", "e", "f"],
    ]
