"""Interactive questions asked before the project is modified."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm

from .config.schema import PluginOptions

QUESTIONS: dict[str, str] = {
    "render_template": "Add example files for language routing?",
    "rewrite_router_link": "Rewrite <router-link> to <localized-link> in App.vue?",
    "add_language_switcher": "Add <language-switcher> example to App.vue?",
}


def ask_options(
    defaults: PluginOptions,
    assume_yes: bool = False,
    console: Console | None = None,
) -> PluginOptions:
    """
    Ask one yes/no question per feature switch.

    Args:
        defaults: Answers preselected in each prompt
        assume_yes: Return the defaults without prompting
        console: Console to prompt on (defaults to a new stdout console)

    Returns:
        PluginOptions with the user's answers
    """
    if assume_yes:
        return defaults

    answers: dict[str, bool] = {}
    for field, question in QUESTIONS.items():
        default: bool = getattr(defaults, field)
        answers[field] = Confirm.ask(question, default=default, console=console)
    return PluginOptions(**answers)
