"""
models.py

Value types passed between the loader, the snippet synthesizer and the composer.
All of them are frozen; a render call never mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipeConfig:
    """Parameters of one recipe as written by a page author."""

    recipe_name: str
    recipe_display_name: str
    artifact: str
    intellij_wrapper_name: str | None = None
    intellij_description: str | None = None
    requires_yaml_install: bool = False


@dataclass(frozen=True)
class ResolvedRecipe:
    """
    A `RecipeConfig` with every default applied and the artifact coordinate split.

    Snippet functions only ever see this type, so they never deal with overrides.
    """

    config: RecipeConfig
    group_id: str
    artifact_id: str
    wrapper_name: str
    description: str


@dataclass(frozen=True)
class Variant:
    """
    One tab of rendered instructions.

    `body` is the tab's own content: the command or manifest text for the
    front-end, or plain prose when there is nothing to paste. `markdown` is the
    full tab as shown on a page, with intro prose and fenced, titled code blocks.
    """

    label: str
    title: str
    body: str
    markdown: str
