"""
Markup rewriting for Vue single file components.

Tags are renamed with plain pattern matching. Regions that must keep their
original markup are swapped out for placeholders first and restored after
the rename, so no markup parser is needed.
"""

from __future__ import annotations

import itertools
import logging
import re
import time

logger = logging.getLogger(__name__)

LANGUAGE_SWITCHER_SNIPPET = """
    <language-switcher v-slot="{ links }">
      <router-link :to="link.url" v-for="link in links" :key="link.langIndex">
        <span>{{ link.langName }}</span>
      </router-link>
    </language-switcher>"""

NAV_DIV_RE = re.compile(r"<div\b[^>]*\bid=\"nav\"[^>]*>")
DIV_RE = re.compile(r"<div\b[^>]*>")

_placeholder_counter = itertools.count()


def _placeholder() -> str:
    return f"__lang_router_excluded_{next(_placeholder_counter)}_{time.time_ns()}__"


def _exclusion_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    # Self-closing tag, or opening tag up to the first closing tag after it
    return re.compile(
        rf"<{name}(?=[\s/>])[^<>]*?/>|<{name}(?=[\s/>])[\s\S]*?</{name}\s*>"
    )


def rewrite_markup_tag(text: str, from_tag: str, to_tag: str, exclusion_tag: str) -> str:
    """
    Rename every `from_tag` element outside of `exclusion_tag` regions.

    Exclusion regions are matched in order, each opening tag pairing with
    the first closing tag after it. Nested exclusion regions are not
    supported.

    Args:
        text: Markup text
        from_tag: Tag name to rename, e.g. "router-link"
        to_tag: New tag name, e.g. "localized-link"
        exclusion_tag: Tag whose content is left untouched

    Returns:
        The rewritten text
    """
    preserved: dict[str, str] = {}

    def _stash(match: re.Match[str]) -> str:
        token = _placeholder()
        preserved[token] = match.group(0)
        return token

    masked = _exclusion_re(exclusion_tag).sub(_stash, text)
    if preserved:
        logger.debug(f"Excluded {len(preserved)} <{exclusion_tag}> region(s)")

    name = re.escape(from_tag)
    masked = re.sub(rf"<{name}(?=[\s/>])", f"<{to_tag}", masked)
    masked = re.sub(rf"</{name}(\s*)>", rf"</{to_tag}\1>", masked)

    for token, original in preserved.items():
        masked = masked.replace(token, original, 1)
    return masked


def insert_after_tag(
    text: str,
    snippet: str,
    preferred: re.Pattern[str] = NAV_DIV_RE,
    fallback: re.Pattern[str] = DIV_RE,
) -> str:
    """
    Insert `snippet` right after the first opening tag matching `preferred`,
    or after the first one matching `fallback`.

    Args:
        text: Markup text
        snippet: Markup to insert
        preferred: Opening tag pattern tried first
        fallback: Opening tag pattern used when `preferred` has no match

    Returns:
        The rewritten text, unchanged when neither pattern matches
    """
    match = preferred.search(text) or fallback.search(text)
    if match is None:
        return text
    return text[: match.end()] + snippet + text[match.end() :]


def contains_tag(text: str, tag: str) -> bool:
    """Whether an opening `tag` element occurs in the text."""
    return re.search(rf"<{re.escape(tag)}(?=[\s/>])", text) is not None
