"""Tests for utils/display.py"""

import logging

from quad_tree import Kind, parse_encoding
from utils.display import display_summary, summarize


def test_summarize():
    summary = summarize(parse_encoding("((....)#/#)"))
    assert summary.leaves_by_kind == {Kind.BLACK: 4, Kind.GREY: 1, Kind.WHITE: 2}
    assert summary.leaves == 7
    assert summary.splits == 2
    assert summary.depth == 3
    assert summary.encoded_size == 14
    assert summary.text_length == 11


def test_summary_skips_demoted_regions():
    root = parse_encoding("((....)#/#)")
    root.children[0].kind = Kind.BLACK
    summary = summarize(root)
    assert summary.leaves == 4
    assert summary.splits == 1
    assert summary.depth == 2


def test_display_summary_logs(caplog):
    with caplog.at_level(logging.INFO):
        display_summary(parse_encoding("(.#.#)"), "Built")
    assert "Built: 4 leaves (2 black, 2 white), 1 splits, depth 2, 8 units, 6 characters" in caplog.text
