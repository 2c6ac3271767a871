"""Split raw sheet CSV exports into rows of trimmed field values."""
from __future__ import annotations

import re
from typing import List

# A comma separates fields only when an even number of quotes follows it on
# the line, i.e. it is not inside a quoted value.
_FIELD_SEPARATOR = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')


def _clean_field(raw: str) -> str:
    value = raw.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def split_line(line: str) -> List[str]:
    """Split one CSV line into cleaned field values.

    Only balanced double quotes protect commas. Escaped quotes and values
    spanning several lines are not supported.
    """

    return [_clean_field(value) for value in _FIELD_SEPARATOR.split(line)]


def parse_rows(text: str) -> List[List[str]]:
    """Return the data rows of ``text`` in line order, without the header."""

    lines = text.strip().split("\n")
    return [split_line(line) for line in lines[1:]]
