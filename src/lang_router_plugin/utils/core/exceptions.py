"""
Exception types raised by the lang router plugin.

Each error carries a category and severity so the entry point can decide
between stopping the run and reporting a manual follow-up step.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """How badly an error affects the generation pass."""

    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Which part of the pass an error comes from."""

    PRECONDITION = "precondition"
    CONFIGURATION = "configuration"
    TEMPLATE = "template"
    UNKNOWN = "unknown"


class LangRouterPluginError(Exception):
    """
    Base class for errors the plugin reports to the user.

    Subclasses fix the category, severity and whether the pass can go on
    after the error; `user_message` is the single line shown on the console.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message: str = user_message or message
        self.context: object | None = context


class PreconditionError(LangRouterPluginError):
    """
    The target project cannot be augmented.

    Raised when vue-router is missing, the Vue major version is not 2, or
    package.json cannot be read. Nothing is written after this error.
    """

    category = ErrorCategory.PRECONDITION
    severity = ErrorSeverity.CRITICAL
    recoverable = False


class ConfigurationError(LangRouterPluginError):
    """The plugin configuration file is missing or invalid."""

    category = ErrorCategory.CONFIGURATION
    severity = ErrorSeverity.HIGH
    recoverable = False


class TemplateError(LangRouterPluginError):
    """Example files could not be rendered; the source rewrites still run."""

    category = ErrorCategory.TEMPLATE
