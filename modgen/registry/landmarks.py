"""Text landmarks inside registry files.

Registry files are treated as plain text.  Each finder returns the offset at
which new text should be inserted, or ``None`` when the landmark is absent
so the caller can skip that insertion instead of guessing.
"""

from __future__ import annotations

import re

_IMPORT_LINE = re.compile(r"^import\b", re.MULTILINE)


def find_import_insertion_point(text: str) -> int | None:
    """Offset of the line that follows the last import statement.

    Only lines that start with ``import`` count.  A named import that opens
    a brace and closes it on a later line ends on the closing line.  When the
    statement is the last line of a file without a trailing newline the
    returned offset is ``len(text)``.
    """
    last = None
    for last in _IMPORT_LINE.finditer(text):
        pass
    if last is None:
        return None

    line_end = _line_end(text, last.start())
    line = text[last.start():line_end]
    if line.count("{") > line.count("}"):
        closing = text.find("}", line_end)
        if closing != -1:
            line_end = _line_end(text, closing)

    return min(line_end + 1, len(text))


def find_array_insertion_point(text: str, decl_name: str) -> int | None:
    """Offset just after ``[`` in ``const <decl_name> = [``.

    ``let``/``var`` and a type annotation (``const routes: TRoute[] = [``) are
    accepted.  The declaration and its bracket must be on the same line.
    """
    pattern = re.compile(
        rf"\b(?:const|let|var)[ \t]+{re.escape(decl_name)}[ \t]*"
        rf"(?::[^=\n]+)?=[ \t]*\["
    )
    match = pattern.search(text)
    if match is None:
        return None
    return match.end()


def find_object_block_end(text: str, key: str) -> int | None:
    """Offset right after the last entry of the ``<key>: { ... }`` block.

    The first ``key: {`` block is used and its body runs to the first closing
    brace.  The offset points just past the body's last non-whitespace
    character, so inserted entries land before the closing brace's line.
    Bodies that contain a nested ``{`` are rejected; the first ``}`` would
    not be their end.
    """
    pattern = re.compile(
        rf"""(?<![\w$])["']?{re.escape(key)}["']?\s*:\s*\{{(.*?)\}}""",
        re.DOTALL,
    )
    match = pattern.search(text)
    if match is None:
        return None
    body = match.group(1)
    if "{" in body:
        return None
    return match.start(1) + len(body.rstrip())


def sibling_indent_after(text: str, offset: int) -> str | None:
    """Indentation of the entry on the line following *offset*.

    Returns ``None`` when *offset* is not at the end of its line or the next
    line is blank or closes the collection.
    """
    line_end = text.find("\n", offset)
    if line_end == -1 or text[offset:line_end].strip():
        return None
    next_line = text[line_end + 1:_line_end(text, line_end + 1)]
    stripped = next_line.lstrip()
    if not stripped or stripped[0] in "]})":
        return None
    return next_line[: len(next_line) - len(stripped)]


def sibling_indent_before(text: str, offset: int) -> str | None:
    """Indentation of the entry line that ends at *offset*.

    Returns ``None`` when that line is the one opening the collection.
    """
    line_start = text.rfind("\n", 0, offset) + 1
    line = text[line_start:offset]
    stripped = line.lstrip()
    if not stripped or "{" in stripped:
        return None
    return line[: len(line) - len(stripped)]


def _line_end(text: str, offset: int) -> int:
    """Offset of the newline ending the line at *offset* (``len(text)`` if none)."""
    end = text.find("\n", offset)
    return len(text) if end == -1 else end
