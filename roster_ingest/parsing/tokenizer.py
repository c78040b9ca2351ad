from __future__ import annotations

import re

"""Row tokenizer and document line splitting.

Quoting rules understood by :func:`parse_row`:

- Outside quotes, ``"`` opens a quoted section unless it is immediately
  preceded by a backslash. An escaped quote is kept as literal content
  together with its backslash (``\\"`` stays ``\\"``).
- Inside quotes a doubled quote ``""`` is one literal ``"`` and any other
  ``"`` closes the section; a backslash there is ordinary content. This is
  the convention the exporter writes, so exported rows re-tokenize to the
  same fields.
- A separator outside quotes ends the field. Fields are trimmed.
- An unclosed quote turns the remainder of the line into a single field.
"""

__all__ = [
    "BOM",
    "SEPARATOR",
    "parse_row",
    "split_lines",
]

BOM = "\ufeff"
SEPARATOR = ","
QUOTE = '"'
ESCAPE = "\\"

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Strip a leading BOM, split on ``\\r?\\n`` and drop blank lines."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return [line for line in _LINE_BREAK_RE.split(text) if line.strip() != ""]


def parse_row(line: str, separator: str = SEPARATOR) -> list[str]:
    """Split one document line into trimmed field strings.

    Args:
        line: Raw line without its line terminator
        separator: Field separator character

    Returns:
        Ordered list of fields; always at least one element
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if in_quotes:
            if ch != QUOTE:
                current.append(ch)
            elif i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = False
        elif ch == QUOTE and (i == 0 or line[i - 1] != ESCAPE):
            in_quotes = True
        elif ch == separator:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current).strip())
    return fields
