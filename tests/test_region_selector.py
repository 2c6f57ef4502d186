import pytest

from tablemerger.core.functions import (
    CellCoordinate,
    ErrorReason,
    Rectangle,
    RegionSelector,
    SelectionError,
    column_index_at,
    coordinates_from_cursor_range,
)


TABLE_LINES = [
    "| a | b | c |",
    "|---|---|---|",
    "| 1 | 2 | 3 |",
    "| 4 | 5 | 6 |",
]


@pytest.mark.parametrize("coordinates", [set(), {(1, 1)}, [(1, 1), (1, 1)]])
def test_fewer_than_two_cells_is_empty_selection(coordinates):
    with pytest.raises(SelectionError) as exc_info:
        RegionSelector().normalize(coordinates)
    assert exc_info.value.reason == ErrorReason.EMPTY


def test_normalize_horizontal_pair():
    assert RegionSelector().normalize({(1, 0), (1, 1)}) == Rectangle(1, 1, 0, 1)


def test_l_shape_becomes_bounding_rectangle():
    rect = RegionSelector().normalize({(1, 0), (2, 0), (2, 1)})
    assert rect == Rectangle(min_row=1, max_row=2, min_col=0, max_col=1)


def test_scattered_cells_become_bounding_rectangle():
    rect = RegionSelector().normalize({(3, 2), (1, 0)})
    assert (rect.row_count, rect.col_count) == (3, 3)


def test_strict_rejects_l_shape():
    with pytest.raises(SelectionError) as exc_info:
        RegionSelector(strict=True).normalize({(1, 0), (2, 0), (2, 1)})
    assert exc_info.value.reason == ErrorReason.NOT_RECTANGULAR


def test_strict_accepts_full_rectangle():
    rect = RegionSelector(strict=True).normalize({(1, 0), (1, 1), (2, 0), (2, 1)})
    assert rect.cell_count == 4


def test_rectangle_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Rectangle(min_row=2, max_row=1, min_col=0, max_col=0)


def test_rectangle_coordinates_are_row_major():
    coords = list(Rectangle(1, 2, 0, 1).coordinates())
    assert coords == [(1, 0), (1, 1), (2, 0), (2, 1)]


@pytest.mark.parametrize("ch, expected", [(0, 0), (2, 0), (4, 0), (6, 1), (10, 2), (100, 2)])
def test_column_index_at(ch, expected):
    assert column_index_at("| a | b | c |", ch) == expected


def test_cursor_range_maps_to_cells():
    coords = coordinates_from_cursor_range(TABLE_LINES, (2, 2), (3, 6))
    assert coords == {
        CellCoordinate(1, 0), CellCoordinate(1, 1),
        CellCoordinate(2, 0), CellCoordinate(2, 1),
    }


def test_cursor_range_with_document_offset_and_reversed_ends():
    coords = coordinates_from_cursor_range(TABLE_LINES, (12, 10), (12, 6), first_line=10)
    assert coords == {CellCoordinate(1, 1), CellCoordinate(1, 2)}


def test_cursor_range_skips_separator_line():
    coords = coordinates_from_cursor_range(TABLE_LINES, (0, 2), (2, 2))
    assert coords == {CellCoordinate(0, 0), CellCoordinate(1, 0)}


def test_cursor_range_counts_dash_body_rows():
    lines = TABLE_LINES[:3] + ["| - | - | - |", "| 7 | 8 | 9 |"]
    coords = coordinates_from_cursor_range(lines, (3, 2), (4, 2))
    assert coords == {CellCoordinate(2, 0), CellCoordinate(3, 0)}
