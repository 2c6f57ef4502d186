import pytest

from tablemerger.core.functions import ErrorReason, ParseError


def test_parse_drops_separator_and_trims(codec, simple_table):
    assert codec.parse(simple_table.splitlines()) == [
        ["a", "b", "c"],
        ["1", "2", "3"],
    ]


def test_parse_accepts_text_block(codec, simple_table):
    assert codec.parse(simple_table) == codec.parse_text(simple_table)


def test_parse_drops_aligned_separator(codec):
    grid = codec.parse(["| a | b |", "| :--- | ---: |", "| 1 | 2 |"])
    assert grid == [["a", "b"], ["1", "2"]]


def test_parse_header_only_is_too_few_rows(codec):
    with pytest.raises(ParseError) as exc_info:
        codec.parse(["| a | b |", "|---|---|"])
    assert exc_info.value.reason == ErrorReason.TOO_FEW_ROWS


def test_parse_pads_short_rows(codec):
    grid = codec.parse(["| a | b | c |", "|---|---|---|", "| 1 |"])
    assert grid[1] == ["1", "", ""]


def test_parse_rejects_rows_wider_than_header(codec):
    with pytest.raises(ParseError) as exc_info:
        codec.parse(["| a | b |", "|---|---|", "| 1 | 2 | 3 |"])
    assert exc_info.value.reason == ErrorReason.MALFORMED_ROW


def test_parse_keeps_empty_body_row(codec):
    grid = codec.parse(["| a | b |", "|---|---|", "|  |  |", "| 1 | 2 |"])
    assert grid == [["a", "b"], ["", ""], ["1", "2"]]


def test_parse_keeps_escaped_pipes(codec):
    grid = codec.parse(["| a \\| b | c |", "|---|---|", "| 1 | 2 |"])
    assert grid[0] == ["a \\| b", "c"]


def test_parse_keeps_text_after_continuation_marker(codec):
    grid = codec.parse(["| a | b |", "|---|---|", "| 1 | 2 |", "| ^^ old | 3 |"])
    assert grid[2] == ["^^ old", "3"]


def test_parse_keeps_dash_body_rows(codec):
    grid = codec.parse(["| a | b |", "|---|---|", "| 1 | 2 |", "| - | - |", "| --- | :-: |"])
    assert grid == [["a", "b"], ["1", "2"], ["-", "-"], ["---", ":-:"]]


def test_parse_row_without_trailing_pipe(codec):
    grid = codec.parse(["| a | b", "|---|---", "| 1 | 2"])
    assert grid == [["a", "b"], ["1", "2"]]


def test_parse_ignores_blank_lines(codec):
    grid = codec.parse(["| a |", "", "|---|", "| 1 |", "   "])
    assert grid == [["a"], ["1"]]


def test_serialize_regenerates_plain_separator(codec):
    text = codec.serialize([["a", "b"], ["1", "2"]])
    assert text == "| a | b |\n| --- | --- |\n| 1 | 2 |"


def test_serialize_empty_cell_keeps_column(codec):
    text = codec.serialize([["a", "b", "c"], ["1 2", "", "3"]])
    assert text.splitlines()[2] == "| 1 2 |  | 3 |"


def test_serialize_pads_short_rows(codec):
    text = codec.serialize([["a", "b"], ["1"]])
    assert text.splitlines()[2] == "| 1 |  |"


def test_serialize_empty_grid(codec):
    assert codec.serialize([]) == ""


def test_alignment_colons_are_not_preserved(codec):
    text = codec.serialize(codec.parse(["| a |", "|:---:|", "| 1 |"]))
    assert text.splitlines()[1] == "| --- |"


@pytest.mark.parametrize("grid", [
    [["a", "b", "c"], ["1", "2", "3"]],
    [["a", "b", "c"], ["1 2", "", "3"], ["", "", "x"]],
    [["", "h"], ["^^", "v"], ["x \\| y", ""]],
    [["a", "b"], ["1", "2"], ["-", "-"], ["3", "4"]],
    [["a", "b"], ["x", "y"], ["^^ old", "5"]],
])
def test_parse_reproduces_serialized_grid(codec, grid):
    assert codec.parse_text(codec.serialize(grid)) == grid


def test_serialize_is_idempotent(codec):
    messy = "|a|b|\n|:-|-:|\n|  1   |2|\n| 3 |"
    once = codec.serialize(codec.parse_text(messy))
    twice = codec.serialize(codec.parse_text(once))
    assert once == twice
    assert once == "| a | b |\n| --- | --- |\n| 1 | 2 |\n| 3 |  |"
