import logging

import pytest

from app.services.html_extraction import (
    cell_text,
    find_section_table,
    parse_html,
    parse_leading_number,
    select_text,
    text_or_none,
)

from conftest import TORRE_HTML


@pytest.mark.parametrize(
    "text, expected",
    [
        ("23,4 km/h", 23.4),
        ("7", 7.0),
        ("12.5 hPa", 12.5),
        ("  8 km/h ", 8.0),
        ("km/h", None),
        ("", None),
        (None, None),
        ("-3 km/h", None),
    ],
)
def test_parse_leading_number(text, expected):
    assert parse_leading_number(text) == expected


def test_text_or_none_trims_and_nulls_empty():
    assert text_or_none("  NNE ") == "NNE"
    assert text_or_none("   ") is None
    assert text_or_none(None) is None


def test_find_section_table_matches_by_label():
    doc = parse_html(TORRE_HTML)

    table = find_section_table(doc, "Viento")

    assert table is not None
    assert cell_text(table, 0, 1) == "23,4 km/h"
    assert cell_text(table, 3, 1) == "41 km/h"


def test_find_section_table_first_match_wins():
    doc = parse_html(
        """
        <div class="variable"><div class="nombre"> Lluvia </div>
          <table class="valores"><tr><td>a</td><td>first</td></tr></table></div>
        <div class="variable"><div class="nombre">Lluvia</div>
          <table class="valores"><tr><td>a</td><td>second</td></tr></table></div>
        """
    )

    assert cell_text(find_section_table(doc, "Lluvia"), 0, 1) == "first"


def test_find_section_table_is_case_sensitive(caplog):
    doc = parse_html(TORRE_HTML)

    with caplog.at_level(logging.WARNING):
        assert find_section_table(doc, "viento") is None

    assert "not found" in caplog.text


def test_find_section_table_without_table_returns_none():
    doc = parse_html('<div class="variable"><div class="nombre">Viento</div><p>sin datos</p></div>')

    assert find_section_table(doc, "Viento") is None


def test_cell_text_out_of_range_is_none(caplog):
    table = find_section_table(parse_html(TORRE_HTML), "Viento")

    with caplog.at_level(logging.WARNING):
        assert cell_text(table, 10, 1) is None
        assert cell_text(table, 0, 5) is None

    assert cell_text(None, 0, 0) is None
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_select_text():
    doc = parse_html('<table class="tabla"><tr><td class="actual"> 1013 hPa </td></tr></table>')

    assert select_text(doc, ".actual") == "1013 hPa"
    assert select_text(doc, ".missing") is None
    assert select_text(None, ".actual") is None
