"""Comment stripping for C-style source files.

Removes ``/* ... */`` and ``// ...`` comments while leaving string literals
alone, so that text inside a literal such as ``"http://example.com"`` is
never mistaken for a comment.
"""

from __future__ import annotations

from enum import Enum, auto

LINE_TERMINATOR = "\n"


class _State(Enum):
    NORMAL = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    STRING_LITERAL = auto()


def _string_literal_end(text: str, start: int) -> int | None:
    """End index of the ``"...`` literal opened at start, or None.

    A backslash escapes the next character, unless the literal can only close
    on its line by reading that backslash as a plain character (so
    ``"C:\\dir\\"`` is one literal).
    """
    line_end = text.find(LINE_TERMINATOR, start + 1)
    if line_end < 0:
        line_end = len(text)

    # closes[k]: a closing quote is reachable from start + k
    closes = [False] * (line_end - start + 2)
    for p in range(line_end - 1, start, -1):
        k = p - start
        if text[p] == '"':
            closes[k] = True
        elif text[p] == "\\" and p + 1 < line_end and closes[k + 2]:
            closes[k] = True
        else:
            closes[k] = closes[k + 1]

    if not closes[1]:
        return None
    p = start + 1
    while text[p] != '"':
        if text[p] == "\\" and p + 1 < line_end and closes[p - start + 2]:
            p += 2
        else:
            p += 1
    return p + 1


def strip_comments(text: str) -> str:
    """Remove block and line comments from source text.

    Each line comment is replaced by a line terminator so the line count of
    the text is kept. Ordinary ``"..."`` literals (backslash escapes, single
    line) and verbatim ``@"..."`` literals (``""`` is a literal quote, may span
    lines) are copied unchanged.

    An opener whose literal or comment never closes is copied as plain text
    and scanning resumes on the next character.

    Args:
        text: Source text to clean

    Returns:
        The text without comments. Empty or whitespace-only input is returned
        as is.
    """
    if not text.strip():
        return text

    # Terminate the last line so a trailing line comment ends like any other
    text += LINE_TERMINATOR
    n = len(text)

    out: list[str] = []
    state = _State.NORMAL
    start = 0  # index of the opener of the current comment or literal
    verbatim = False
    segment_end = -1  # end of the last closed verbatim segment
    string_end = -1  # end of the current ordinary literal
    # Once an opener is known not to close, no later opener of that kind can
    block_unclosed = False
    verbatim_unclosed = False

    i = 0
    while i < n:
        ch = text[i]

        if state is _State.NORMAL:
            if ch == "/" and text.startswith("/*", i) and not block_unclosed:
                state, start = _State.BLOCK_COMMENT, i
                i += 2
            elif ch == "/" and text.startswith("//", i):
                state = _State.LINE_COMMENT
                i += 2
            elif ch == '"':
                string_end = _string_literal_end(text, i)
                if string_end is None:
                    # Never closes on this line: just a quote character
                    out.append(ch)
                else:
                    state, start, verbatim = _State.STRING_LITERAL, i, False
                i += 1
            elif ch == "@" and text.startswith('@"', i) and not verbatim_unclosed:
                state, start, verbatim = _State.STRING_LITERAL, i, True
                segment_end = -1
                i += 2
            else:
                out.append(ch)
                i += 1

        elif state is _State.LINE_COMMENT:
            if ch == LINE_TERMINATOR:
                out.append(LINE_TERMINATOR)
                state = _State.NORMAL
            i += 1

        elif state is _State.BLOCK_COMMENT:
            if ch == "*" and text.startswith("*/", i):
                state = _State.NORMAL
                i += 2
            else:
                i += 1

        elif verbatim:
            if ch == '"':
                segment_end = i + 1
                if text.startswith('""', i):
                    # Doubled quote: the closing quote opens the next segment
                    i += 1
                else:
                    out.append(text[start:segment_end])
                    state = _State.NORMAL
            i += 1

        else:
            i += 1
            if i == string_end:
                out.append(text[start:string_end])
                state = _State.NORMAL

        if i >= n and state is not _State.NORMAL:
            if state is _State.BLOCK_COMMENT:
                block_unclosed = True
                out.append("/")
                i = start + 1
            elif state is _State.STRING_LITERAL:
                if segment_end > 0:
                    # Keep the segments that did close
                    out.append(text[start:segment_end])
                    i = segment_end
                else:
                    verbatim_unclosed = True
                    out.append("@")
                    i = start + 1
            state = _State.NORMAL

    # Drop the terminator appended above
    stripped = "".join(out)
    if stripped.endswith(LINE_TERMINATOR):
        stripped = stripped[: -len(LINE_TERMINATOR)]
    return stripped
