"""
Statement rewriter for JavaScript/TypeScript source text.

Every function here is a pure text transform and is safe to re-run:
applying it to its own output leaves the text unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from .locator import find_import, find_last_import_end

logger = logging.getLogger(__name__)


class InstallOptions(NamedTuple):
    """Configuration object passed to the router install directive."""

    default_language: str | None = None
    translations: str | None = None
    localized_urls: str | None = None

    def render(self) -> str:
        """Render as a JavaScript object literal, or "" when empty."""
        entries: list[str] = []
        if self.default_language:
            entries.append(f"  defaultLanguage: '{self.default_language}',")
        if self.translations:
            entries.append(f"  translations: {self.translations},")
        if self.localized_urls:
            entries.append(f"  localizedURLs: {self.localized_urls},")
        if not entries:
            return ""
        return "{\n" + "\n".join(entries) + "\n}"


def _insert_after_imports(text: str, line: str) -> str:
    end = find_last_import_end(text)
    if end is None:
        return f"{line}\n{text}"
    return f"{text[:end]}\n{line}{text[end:]}"


def add_import(text: str, symbol: str, import_line: str) -> str:
    """
    Make `import_line` the one import that provides `symbol`.

    An existing standalone import of the symbol is replaced in place. If
    the symbol is imported together with other bindings, it is cut out of
    that statement and `import_line` is added after the last import.
    Otherwise `import_line` is added after the last import, or at the top
    of a file without imports.

    Args:
        text: Source text
        symbol: Binding the new import provides
        import_line: Complete import statement to add

    Returns:
        The rewritten text
    """
    if import_line in text:
        logger.debug(f"Import already present: {import_line}")
        return text

    match = find_import(text, symbol)

    if match is None:
        return _insert_after_imports(text, import_line)

    if match.standalone:
        return text[: match.line_start] + import_line + text[match.line_end :]

    logger.debug(f"Removing {symbol} from: {match.line}")
    excised = text[: match.excise_start] + text[match.excise_end :]
    return _insert_after_imports(excised, import_line)


def replace_install_directive(
    text: str,
    host: str,
    source: str,
    target: str,
    options: InstallOptions | None = None,
) -> str:
    """
    Swap the first `<host>.use(<source>)` call for the localized router.

    Args:
        text: Source text
        host: Framework object the plugin is installed on, e.g. "Vue"
        source: Router being replaced, e.g. "VueRouter"
        target: Localized router, e.g. "LangRouter"
        options: Optional install configuration rendered as a second argument

    Returns:
        The rewritten text, unchanged when no such call exists
    """
    pattern = re.compile(
        rf"(?<![\w$.]){re.escape(host)}\s*\.\s*use\(\s*{re.escape(source)}\s*\)"
    )
    rendered = options.render() if options else ""
    replacement = f"{host}.use({target}, {rendered})" if rendered else f"{host}.use({target})"
    return pattern.sub(lambda _: replacement, text, count=1)


def replace_construction(text: str, source: str, target: str) -> str:
    """
    Swap the first `new <source>` for `new <target>`.

    Args:
        text: Source text
        source: Constructor being replaced
        target: Replacement constructor

    Returns:
        The rewritten text, unchanged when no such statement exists
    """
    pattern = re.compile(rf"\bnew\s+{re.escape(source)}(?![\w$])")
    return pattern.sub(lambda _: f"new {target}", text, count=1)


def has_install_directive(text: str, host: str, name: str) -> bool:
    """Whether `<host>.use(<name>` appears anywhere in the text."""
    return (
        re.search(
            rf"(?<![\w$.]){re.escape(host)}\s*\.\s*use\(\s*{re.escape(name)}(?![\w$])",
            text,
        )
        is not None
    )


def has_construction(text: str, name: str) -> bool:
    """Whether `new <name>` appears anywhere in the text."""
    return re.search(rf"\bnew\s+{re.escape(name)}(?![\w$])", text) is not None


def inject_root_option(text: str, option: str, host: str = "Vue") -> str:
    """
    Add `option` as the first property of the root `new <host>({ ... })`.

    The property takes the indentation of the line that follows the opening
    brace. Nothing changes when the option is already listed or when there
    is no root instance in the file.

    Args:
        text: Source text
        option: Shorthand property to inject, e.g. "i18n"
        host: Framework constructor name

    Returns:
        The rewritten text
    """
    opening = re.compile(rf"\bnew\s+{re.escape(host)}\s*\(\s*\{{")
    match = opening.search(text)
    if match is None:
        logger.debug(f"No new {host}({{...}}) found")
        return text

    # Only the first level of the options literal is inspected
    top_level: list[str] = []
    depth = 0
    for char in text[match.end() :]:
        if char in "{[(":
            depth += 1
        elif char in "}])":
            if depth == 0:
                break
            depth -= 1
        elif depth == 0:
            top_level.append(char)
    body = "".join(top_level) + "\n"
    if re.search(rf"(?<![\w$.]){re.escape(option)}(?![\w$])\s*[,:\n]", body):
        return text

    indent_match = re.compile(r"[ \t]*\n([ \t]+)\S").match(text, match.end())
    indent = indent_match.group(1) if indent_match else "  "
    return f"{text[: match.end()]}\n{indent}{option},{text[match.end() :]}"
