import copy

from tablemerger.core.constants import ContinuationStyle
from tablemerger.core.functions import (
    MergeEngine,
    MergeRegion,
    MergeRegionTracker,
    Rectangle,
    TableMergeConfig,
)


def _merged_regions(grid):
    return [region for region in MergeRegionTracker().detect_regions(grid) if region.is_merged]


def _covered_cells(regions):
    return sum(region.rowspan * region.colspan for region in regions)


def test_horizontal_merge_becomes_colspan():
    grid = [["a", "b", "c"], ["1 2", "", "3"]]
    regions = MergeRegionTracker().detect_regions(grid)
    assert len(regions) == 5
    assert _merged_regions(grid) == [MergeRegion(1, 0, rowspan=1, colspan=2, content="1 2")]


def test_empty_first_column_continues_upward():
    grid = [["h1", "h2"], ["a", "b"], ["", "c"], ["", "d"]]
    assert _merged_regions(grid) == [MergeRegion(1, 0, rowspan=3, colspan=1, content="a")]


def test_caret_marker_continues_upward_mid_row():
    grid = [["h1", "h2", "h3"], ["x", "y", "z"], ["p", "^^", "q"]]
    assert _merged_regions(grid) == [MergeRegion(1, 1, rowspan=2, colspan=1, content="y")]


def test_empty_cell_prefers_left_neighbour():
    grid = [["h1", "h2", "h3"], ["x", "y", "z"], ["p", "", "q"]]
    assert _merged_regions(grid) == [MergeRegion(2, 0, rowspan=1, colspan=2, content="p")]


def test_caret_block_merge_is_tracked_as_one_region(grid_3x3):
    engine = MergeEngine(TableMergeConfig(continuation_style=ContinuationStyle.CARET))
    merged = engine.merge(grid_3x3, Rectangle(1, 2, 1, 2))
    assert _merged_regions(merged) == [MergeRegion(1, 1, rowspan=2, colspan=2, content="b c e f")]


def test_blank_cell_without_owner_is_standalone():
    grid = [["", "h2"], ["a", "b"]]
    regions = MergeRegionTracker().detect_regions(grid)
    assert regions[0] == MergeRegion(0, 0, rowspan=1, colspan=1, content="")
    assert not any(region.is_merged for region in regions)


def test_partial_blank_row_does_not_extend_region():
    grid = [["h1", "h2", "h3"], ["wide", "", "z"], ["", "x", "q"]]
    regions = MergeRegionTracker().detect_regions(grid)
    wide = regions[3]
    assert (wide.rowspan, wide.colspan) == (1, 2)
    assert regions[4].content == "z"
    assert regions[5] == MergeRegion(2, 0, content="")


def test_every_cell_belongs_to_one_region(grid_3x3):
    merged = MergeEngine().merge(grid_3x3, Rectangle(1, 2, 0, 1))
    regions = MergeRegionTracker().detect_regions(merged)
    assert _covered_cells(regions) == 9
    assert all(sum(region.covers(r, c) for region in regions) == 1
               for r in range(3) for c in range(3))


def test_detect_does_not_modify_grid():
    grid = [["h1", "h2"], ["a", ""], ["^^", "c"]]
    original = copy.deepcopy(grid)
    MergeRegionTracker().detect_regions(grid)
    assert grid == original


def test_region_at_walks_right_then_down():
    grid = [["h1", "h2", "h3"], ["x", "", "z"], ["", "", "q"], ["p", "", "r"]]
    region = MergeRegionTracker().region_at(grid, 1, 0)
    assert (region.rowspan, region.colspan) == (2, 2)
    assert region.to_rectangle() == Rectangle(1, 2, 0, 1)


def test_build_table_data_drops_covered_cells():
    grid = [["a", "b", "c"], ["1 2", "", "3"]]
    table = MergeRegionTracker().build_table_data(grid)
    assert (table.num_rows, table.num_cols) == (2, 3)
    assert [len(row) for row in table.rows] == [3, 2]
    assert all(cell.is_header for cell in table.rows[0])
    assert table.rows[1][0].col_span == 2
    assert table.rows[1][1].col_index == 2
    assert table.metadata["merged_regions"] == 1


def test_caret_marker_with_leftover_text_continues_upward():
    grid = [["h1", "h2"], ["a", "b"], ["^^ old", "c"]]
    assert _merged_regions(grid) == [MergeRegion(1, 0, rowspan=2, colspan=1, content="a")]
