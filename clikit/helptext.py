"""Help text layout: indent-aware word wrapping and two-column table alignment."""

from __future__ import annotations

import re
from typing import TextIO

HELP_TEXT_LINE_WIDTH = 80
TAB_LENGTH = 8
TABLE_PADDING = 2

# Whitespace as understood by the help layout: space, tab, newline, form feed, return.
_WHITESPACE = "\t\n\f\r "
_WHITESPACE_RUN = re.compile(r"[\t\n\f\r ]+")
_NON_WHITESPACE = re.compile(r"[^\t\n\f\r ]")
_LEADING_WHITESPACE = re.compile(r"^[\t\n\f\r ]*")


def regexp_split_after(regex: re.Pattern[str] | str, text: str) -> list[str]:
    """Split ``text`` after each match of ``regex``, keeping the delimiters.

    Each piece carries its trailing delimiter, e.g. "one two" -> ["one ", "two"].
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    ends = [match.end() for match in pattern.finditer(text)]
    if not ends:
        return [text]
    pieces = []
    start = 0
    for end in ends:
        pieces.append(text[start:end])
        start = end
    if start != len(text):
        pieces.append(text[start:])
    return pieces


def tab_aware_string_length(text: str, tab_length: int) -> int:
    """Return the length of ``text`` counting each tab as ``tab_length`` characters."""
    return len(text.replace("\t", " " * tab_length))


def indent_aware_wrap_text(text: str, line_width: int, indent: str) -> str:
    """Wrap ``text`` at ``line_width``, starting every continuation line with ``indent``."""
    words = regexp_split_after(_WHITESPACE_RUN, text)
    wrapped = words[0]
    current_length = tab_aware_string_length(wrapped, TAB_LENGTH)
    for word in words[1:]:
        word_length = tab_aware_string_length(word, TAB_LENGTH)
        trimmed_length = tab_aware_string_length(word.strip(), TAB_LENGTH)
        if current_length + trimmed_length > line_width:
            next_line = indent + word
            wrapped = wrapped.rstrip() + "\n" + next_line
            current_length = tab_aware_string_length(next_line, TAB_LENGTH)
        else:
            wrapped += word
            current_length += word_length
    return wrapped.rstrip()


def help_table_aware_determine_indent(text: str, table_delimiter_re: str) -> str:
    """Return the indent for continuation lines of ``text``.

    In a two-column table row the indent reaches the second column; otherwise it
    is the line's leading whitespace.
    """
    match = re.search(table_delimiter_re, text)
    if match:
        return _NON_WHITESPACE.sub(" ", text[: match.end()])
    leading = _LEADING_WHITESPACE.match(text)
    return leading.group(0) if leading else ""


def prefixed_first_flag_name(full_name: str) -> str:
    """Return the first of comma-separated flag names with its dash prefix."""
    first = full_name.split(",")[0].strip()
    return ("-" if len(first) == 1 else "--") + first


def _align_columns(text: str) -> str:
    """Align tab-separated cells into columns, padding each by TABLE_PADDING spaces."""
    rows = [line.split("\t") for line in text.split("\n")]
    out: list[str] = []

    def write(widths: list[int], first: int, last: int) -> None:
        for cells in rows[first:last]:
            out.append(
                "".join(
                    cell.ljust(widths[index]) if index < len(widths) else cell
                    for index, cell in enumerate(cells)
                )
            )

    def layout(widths: list[int], first: int, last: int) -> None:
        column = len(widths)
        row = first
        while row < last:
            if column >= len(rows[row]) - 1:
                row += 1
                continue
            write(widths, first, row)
            first = row
            width = 0
            while row < last and column < len(rows[row]) - 1:
                width = max(width, len(rows[row][column]) + TABLE_PADDING)
                row += 1
            layout(widths + [width], first, row)
            first = row
            row += 1
        write(widths, first, last)

    layout([], 0, len(rows))
    return "\n".join(out)


def wrapped_help_printer(out: TextIO, text: str, line_width: int = HELP_TEXT_LINE_WIDTH) -> None:
    """Write help ``text`` to ``out`` wrapped at ``line_width`` with aligned tables."""
    lines = [
        indent_aware_wrap_text(
            line, line_width, help_table_aware_determine_indent(line, "\t+")
        )
        for line in text.split("\n")
    ]
    out.write(_align_columns("\n".join(lines) + "\n"))