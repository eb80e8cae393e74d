"""Line classifiers for the block segmenter.

Each classifier looks at one raw source line and answers a single
question about it. They hold no state, so block rules can combine them
freely and tests can exercise them in isolation.
"""

import re

FENCE_MARKER = "```"
TABLE_DELIMITER = "|"

# Marker plus exactly one whitespace character; matched against stripped lines
_BULLET_ITEM = re.compile(r"[-*•]\s")
_NUMBERED_ITEM = re.compile(r"[0-9]+\.\s")


def is_blank(line: str) -> bool:
    return not line.strip()


def has_pipe(line: str) -> bool:
    return TABLE_DELIMITER in line


def is_fence(line: str) -> bool:
    """Check if a line opens a code fence (stripped text starts with the marker)."""
    return line.strip().startswith(FENCE_MARKER)


def is_closing_fence(line: str) -> bool:
    """Check if a line closes a code fence (stripped text is exactly the marker)."""
    return line.strip() == FENCE_MARKER


def fence_info(line: str) -> str | None:
    """Return the first word after an opening fence marker, if any.

    >>> fence_info("```python title")
    'python'
    >>> fence_info("```") is None
    True
    """
    rest = line.strip()[len(FENCE_MARKER) :].split()
    return rest[0] if rest else None


def match_bullet_item(line: str) -> str | None:
    """Return the item text of a bulleted line, or None.

    The two-character marker prefix is removed; anything after it is kept.

    >>> match_bullet_item("  • milk")
    'milk'
    >>> match_bullet_item("**bold** start") is None
    True
    """
    stripped = line.strip()
    if _BULLET_ITEM.match(stripped):
        return stripped[2:]
    return None


def match_numbered_item(line: str) -> str | None:
    """Return the item text of a numbered line, or None.

    >>> match_numbered_item("12. twelfth")
    'twelfth'
    >>> match_numbered_item("3.14 is pi") is None
    True
    """
    stripped = line.strip()
    match = _NUMBERED_ITEM.match(stripped)
    if match:
        return stripped[match.end() :]
    return None


def starts_list_item(line: str) -> bool:
    return match_bullet_item(line) is not None or match_numbered_item(line) is not None


def continues_paragraph(line: str) -> bool:
    """Check if a line can extend the paragraph above it.

    A paragraph stops at blank lines and at any line that could start
    another block: a list item, a pipe-bearing line, or a fence.
    """
    return not (is_blank(line) or starts_list_item(line) or has_pipe(line) or is_fence(line))


def split_table_row(line: str) -> tuple[str, ...]:
    """Split a table line into stripped cells.

    Empty fragments at either end are dropped, however many outer pipes
    produced them; empty cells between non-empty cells are kept.

    >>> split_table_row("| a | | b |")
    ('a', '', 'b')
    >>> split_table_row("|| a ||")
    ('a',)
    >>> split_table_row("x|y")
    ('x', 'y')
    """
    cells = [cell.strip() for cell in line.split(TABLE_DELIMITER)]
    while cells and not cells[0]:
        cells.pop(0)
    while cells and not cells[-1]:
        cells.pop()
    return tuple(cells)


def list_marker_length(line: str) -> int:
    """Length of the list marker opening a stripped line, or 0.

    The whitespace after the marker is not counted.

    >>> list_marker_length("10. ten")
    3
    """
    match = _BULLET_ITEM.match(line) or _NUMBERED_ITEM.match(line)
    return match.end() - 1 if match else 0
