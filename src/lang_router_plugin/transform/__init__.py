"""
Source transformation package for the lang router plugin.

Pattern based locate-and-rewrite rules for the handful of statement
shapes the plugin edits: imports, router install and construction calls,
root Vue options, and navigation link markup.
"""

from .locator import (
    ImportMatch,
    find_import,
    find_import_lines,
    find_last_import_end,
    find_non_standalone_import,
    find_standalone_import,
)
from .rewriter import (
    InstallOptions,
    add_import,
    has_construction,
    has_install_directive,
    inject_root_option,
    replace_construction,
    replace_install_directive,
)
from .markup import (
    LANGUAGE_SWITCHER_SNIPPET,
    contains_tag,
    insert_after_tag,
    rewrite_markup_tag,
)

__all__ = [
    # Locator
    "ImportMatch",
    "find_import",
    "find_import_lines",
    "find_last_import_end",
    "find_non_standalone_import",
    "find_standalone_import",
    # Rewriter
    "InstallOptions",
    "add_import",
    "has_construction",
    "has_install_directive",
    "inject_root_option",
    "replace_construction",
    "replace_install_directive",
    # Markup
    "LANGUAGE_SWITCHER_SNIPPET",
    "contains_tag",
    "insert_after_tag",
    "rewrite_markup_tag",
]
