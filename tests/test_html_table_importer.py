import pytest

from tablemerger.core.constants import ContinuationStyle
from tablemerger.core.functions import (
    ErrorReason,
    MergeRegionTracker,
    ParseError,
    TableProcessor,
    html_table_to_grid,
)


def test_colspan_becomes_blank_cells():
    html = """
    <table>
      <tr><th>a</th><th>b</th><th>c</th></tr>
      <tr><td colspan="2">1 2</td><td>3</td></tr>
    </table>
    """
    assert html_table_to_grid(html) == [["a", "b", "c"], ["1 2", "", "3"]]


def test_rowspan_with_caret_style():
    html = (
        "<table><tr><th>h1</th><th>h2</th></tr>"
        "<tr><td rowspan='2'>a</td><td>b</td></tr>"
        "<tr><td>c</td></tr></table>"
    )
    assert html_table_to_grid(html, ContinuationStyle.CARET) == [
        ["h1", "h2"], ["a", "b"], ["^^", "c"],
    ]
    assert html_table_to_grid(html)[2] == ["", "c"]


def test_cell_text_is_normalized_and_pipes_escaped():
    html = "<table><tr><th>x</th></tr><tr><td> a\n  |  b </td></tr></table>"
    assert html_table_to_grid(html)[1] == ["a \\| b"]


def test_invalid_span_values_fall_back_to_one():
    html = "<table><tr><th colspan='x'>a</th><th>b</th></tr><tr><td>1</td><td>2</td></tr></table>"
    assert html_table_to_grid(html) == [["a", "b"], ["1", "2"]]


def test_missing_table_is_parse_error():
    with pytest.raises(ParseError) as exc_info:
        html_table_to_grid("<p>no table here</p>")
    assert exc_info.value.reason == ErrorReason.TOO_FEW_ROWS


def test_single_row_table_is_parse_error():
    with pytest.raises(ParseError):
        html_table_to_grid("<table><tr><td>a</td></tr></table>")


@pytest.mark.parametrize("grid, style", [
    ([["a", "b", "c"], ["1 2", "", "3"]], ContinuationStyle.BLANK),
    ([["h1", "h2", "h3"], ["x", "y", "z"], ["p", "^^", "q"]], ContinuationStyle.CARET),
    ([["h1", "h2", "h3"], ["x", "y", ""], ["^^", "", "q"]], ContinuationStyle.CARET),
])
def test_rendered_html_imports_back_to_same_grid(grid, style):
    html = TableProcessor().format_table(MergeRegionTracker().build_table_data(grid))
    assert html_table_to_grid(html, style) == grid
