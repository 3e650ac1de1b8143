"""
Statement locator for JavaScript/TypeScript source text.

Finds import statements for a named binding without parsing the file.
Only single-line import statements are recognized; anything else is
reported as absent and left to the caller to handle.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Characters that may continue a JavaScript identifier
_IDENT_CHARS = r"\w$"

IMPORT_LINE_RE = re.compile(r"^import\b.*$", re.MULTILINE)

# `import <clause> from '<module>'` on a single line
_IMPORT_CLAUSE_RE = re.compile(
    r"^import[ \t]*(?P<clause>[^'\"\n]*?)[ \t]*\bfrom[ \t]*['\"].*$",
    re.MULTILINE,
)


@dataclass(frozen=True)
class ImportMatch:
    """
    A located import of a single symbol.

    Offsets are absolute positions in the searched text. For a standalone
    import the excise span is the whole line; for a non-standalone import
    it covers only the symbol and one adjacent separator.
    """

    line_start: int
    line_end: int
    line: str
    standalone: bool
    excise_start: int
    excise_end: int


def _symbol_re(symbol: str) -> str:
    return rf"(?<![{_IDENT_CHARS}]){re.escape(symbol)}(?![{_IDENT_CHARS}])"


def find_standalone_import(text: str, symbol: str) -> ImportMatch | None:
    """
    Find `import symbol from ...` or `import { symbol } from ...`.

    Args:
        text: Source text to search
        symbol: Binding name to look for

    Returns:
        The first matching line, or None
    """
    pattern = re.compile(
        rf"^import[ \t{{]+{_symbol_re(symbol)}[ \t}}]*\bfrom\b.*$",
        re.MULTILINE,
    )
    match = pattern.search(text)
    if match is None:
        return None
    return ImportMatch(
        line_start=match.start(),
        line_end=match.end(),
        line=match.group(0),
        standalone=True,
        excise_start=match.start(),
        excise_end=match.end(),
    )


def find_non_standalone_import(text: str, symbol: str) -> ImportMatch | None:
    """
    Find an import line that binds `symbol` among other names.

    The excise span covers the symbol together with the comma that follows
    it, or the comma before it when the symbol is last in its list.

    Args:
        text: Source text to search
        symbol: Binding name to look for

    Returns:
        The first matching line, or None
    """
    symbol_pattern = re.compile(_symbol_re(symbol))
    for line_match in _IMPORT_CLAUSE_RE.finditer(text):
        clause_start = line_match.start("clause")
        clause = line_match.group("clause")
        found = symbol_pattern.search(clause)
        if found is None:
            continue
        # Either side of an `X as Y` rename has no safe excision
        if re.search(r"\bas[ \t]*$", clause[: found.start()]) or re.match(
            r"[ \t]+as\b", clause[found.end() :]
        ):
            continue

        start = clause_start + found.start()
        end = clause_start + found.end()

        after = re.compile(r"[ \t]*,[ \t]*").match(text, end)
        if after is not None:
            end = after.end()
        else:
            before = re.search(r",[ \t]*$", text[clause_start:start])
            if before is None:
                # Sole binding in a brace group of a default import: `import A, { S }`
                group = re.search(r",[ \t]*\{[ \t]*$", text[clause_start:start])
                closing = re.compile(r"[ \t]*\}").match(text, end)
                if group is None or closing is None:
                    continue
                start = clause_start + group.start()
                end = closing.end()
            else:
                start = clause_start + before.start()

        return ImportMatch(
            line_start=line_match.start(),
            line_end=line_match.end(),
            line=line_match.group(0),
            standalone=False,
            excise_start=start,
            excise_end=end,
        )
    return None


def find_import(text: str, symbol: str) -> ImportMatch | None:
    """
    Locate the import of `symbol`, standalone form first.

    Args:
        text: Source text to search
        symbol: Binding name to look for

    Returns:
        ImportMatch for the first standalone import, else the first
        non-standalone import, else None when the symbol is not imported
    """
    return find_standalone_import(text, symbol) or find_non_standalone_import(
        text, symbol
    )


def find_import_lines(text: str) -> list[re.Match[str]]:
    """Return every line that starts with `import`."""
    return list(IMPORT_LINE_RE.finditer(text))


def find_last_import_end(text: str) -> int | None:
    """
    Offset just past the last import statement, or None if there is none.

    An import whose first line opens a brace without closing it continues
    up to the first following line that closes it.
    """
    lines = find_import_lines(text)
    if not lines:
        return None

    last = lines[-1]
    end = last.end()
    if last.group(0).count("{") > last.group(0).count("}"):
        closing = re.compile(r"^[^\n]*\}[^\n]*$", re.MULTILINE).search(text, end)
        if closing is not None:
            end = closing.end()
    return end
