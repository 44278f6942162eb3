"""
Prompt registry — text templates shipped as package data.

Templates live in ``bruh/core/data/prompts/`` and use
``string.Template`` placeholders (``$name``).  Substitution is "safe":
stray ``$`` signs (shell snippets in the navi reference) are left alone.

Usage::

    from bruh.core.data import PromptRegistry

    prompts = PromptRegistry()
    text = prompts.render("commit_message", status=..., changed_files=...)
"""

from __future__ import annotations

import logging
from functools import cache
from pathlib import Path
from string import Template

logger = logging.getLogger(__name__)

_PROMPTS_DIR = Path(__file__).parent / "prompts"


@cache
def _load_text(filename: str) -> str:
    path = _PROMPTS_DIR / filename
    text = path.read_text(encoding="utf-8")
    logger.debug("Loaded prompt template %s (%d chars)", filename, len(text))
    return text


class PromptRegistry:
    """Loads and renders the prompt templates."""

    def template(self, name: str) -> str:
        """Raw template text for ``<name>.txt``."""
        return _load_text(f"{name}.txt")

    @property
    def navi_syntax(self) -> str:
        """The navi cheatsheet syntax reference embedded in addcheat prompts."""
        return _load_text("navi_syntax.md").rstrip()

    def render(self, name: str, **values: str) -> str:
        return Template(self.template(name)).safe_substitute(values).rstrip()
