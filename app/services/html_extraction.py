"""
Field extraction helpers for the UNLP dashboard pages.

The pages render a fixed list of `.variable` blocks, each with a `.nombre`
label and a nested values table. Block order differs between the tower and
field pages, so sections are addressed by label and cells by (row, column)
inside the matched table.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

LEADING_NUMBER = re.compile(r"^\d+(?:[.,]\d+)?")


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def find_section_table(
    doc: BeautifulSoup | Tag,
    label: str,
    table_selector: str = "table.valores",
) -> Optional[Tag]:
    """
    Return the values table of the first `.variable` block labelled `label`.

    The label comparison is exact and case-sensitive on the trimmed text of
    the block's first `.nombre` element. Returns None when no block matches
    or the matching block has no table.
    """
    for block in doc.select(".variable"):
        name = block.select_one(".nombre")
        if name is None or name.get_text().strip() != label:
            continue

        table = block.select_one(table_selector)
        if table is None:
            logger.warning("Section %r has no %r table", label, table_selector)
        return table

    logger.warning("Section %r not found", label)
    return None


def cell_text(table: Optional[Tag], row: int, col: int) -> Optional[str]:
    """
    Trimmed text of the cell at (row, col), counting `tr`/`td` descendants in
    document order. None when the table is missing or the coordinate does not
    resolve.
    """
    if table is None:
        return None

    rows = table.find_all("tr")
    if row >= len(rows):
        logger.warning("Row %d not found (table has %d rows)", row, len(rows))
        return None

    cells = rows[row].find_all("td")
    if col >= len(cells):
        logger.warning("Cell (%d, %d) not found (row has %d cells)", row, col, len(cells))
        return None

    return cells[col].get_text().strip()


def select_text(section: Optional[Tag], selector: str) -> Optional[str]:
    if section is None:
        return None

    el = section.select_one(selector)
    if el is None:
        logger.warning("No element matches %r", selector)
        return None

    return el.get_text().strip()


def text_or_none(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def parse_leading_number(text: Optional[str]) -> Optional[float]:
    """
    Parse the number at the start of a rendered value.

    "23,4 km/h" -> 23.4, "7" -> 7.0, "km/h" -> None.
    """
    if not text:
        return None

    match = LEADING_NUMBER.match(text.strip())
    if not match:
        return None

    return float(match.group(0).replace(",", "."))
