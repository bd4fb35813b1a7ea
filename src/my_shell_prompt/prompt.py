from __future__ import annotations
from .buffer import MAX_LINE_SIZE, PromptBuffer, encode
from .styles import Painter

#: Glyph shown at the start of every row
PREFIX = "▒ "

#: Width of the banner below the last row
FOOTER_WIDTH = 40

#: Character on the line the user types on
PROMPT_CHAR = "℁"


def add_row_to_prompt(buffer: PromptBuffer, row: str, paint: Painter) -> None:
    """
    Append ``row`` to ``buffer`` as a complete line, preceded by the painted
    row glyph.  If the line is too long or does not fit in the buffer, nothing
    is appended.
    """
    line = paint(PREFIX) + paint.escape(row)
    if len(encode(line)) < MAX_LINE_SIZE:
        buffer.append(line + "\n")


def add_bottom_row(buffer: PromptBuffer, paint: Painter) -> None:
    buffer.append(paint("▔" * FOOTER_WIDTH))


def add_prompt_char(buffer: PromptBuffer, paint: Painter) -> None:
    buffer.append("\n" + paint.escape(PROMPT_CHAR) + "\n")
