"""Source preprocessor — comment stripping, line splitting, alias expansion.

Responsibilities
----------------
- Strip inline comments (# …), by default keeping a # inside a quoted string
- Trim every line and drop the ones left empty
- Number statements by their physical source line
- Split a statement into its keyword and argument
- Apply alias keywords from the [COMMANDS] section of the settings file
"""
from __future__ import annotations

from typing import Iterator

from claro.core.prefix import COMMENT_PREFIX, QUOTE_CHAR
from claro.core.statements import Statement

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_comment(line: str, quote_aware: bool = True) -> str:
    """Return line with trailing comment (# …) removed.

    With ``quote_aware`` a '#' that appears inside a double-quoted string
    is kept. Without it the first '#' anywhere starts the comment.
    """
    if not quote_aware:
        return line.split(COMMENT_PREFIX, 1)[0]
    in_str = False
    for i, ch in enumerate(line):
        if ch == QUOTE_CHAR:
            in_str = not in_str
        elif ch == COMMENT_PREFIX and not in_str:
            return line[:i]
    return line


def clean_line(line: str, quote_aware: bool = True) -> str:
    """Strip the comment, then the surrounding whitespace."""
    return strip_comment(line, quote_aware).strip()


def preprocess(text: str, quote_aware: bool = True) -> Iterator[Statement]:
    """Yield one Statement per non-empty line of ``text``.

    Lines end at "\n" only (a trailing "\r" is dropped), so other
    control characters stay inside the statement. Line numbers are
    1-based physical positions, so blank and comment lines still count.
    """
    for num, raw in enumerate(text.split("\n"), start=1):
        line = clean_line(raw.rstrip("\r"), quote_aware)
        if line:
            yield Statement(line, num)


def split_command(line: str) -> tuple[str, str]:
    """Split ``line`` into (keyword, argument).

    >>> split_command('PRINT "hi there"')
    ('PRINT', '"hi there"')
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def unquote(text: str) -> str:
    """Drop a leading quote and, if one is left at the end, a trailing quote.

    No escape processing. Text without a leading quote is returned as is.
    """
    if not text.startswith(QUOTE_CHAR):
        return text
    text = text[1:]
    if text.endswith(QUOTE_CHAR):
        text = text[:-1]
    return text


def expand_alias(keyword: str, sugar_map: dict[str, str]) -> str:
    """Replace an alias keyword with its canonical equivalent.

    ``sugar_map`` keys and values must already be upper-case
    (see SettingsManager.syntax_sugar). An alias whose target is not a
    known command is ignored.

    Examples
    --------
    >>> expand_alias("ECHO", {"ECHO": "PRINT"})
    'PRINT'
    """
    # Imported here to avoid a cycle: the executor uses this module.
    from claro.core.executor import is_command

    canonical = sugar_map.get(keyword.upper())
    if canonical is not None and is_command(canonical):
        return canonical
    return keyword
