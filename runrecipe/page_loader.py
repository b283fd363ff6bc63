"""
page_loader.py

Responsibility: read recipe parameters from a documentation page.

Accepted inputs:
- A Markdown/MDX page starting with YAML front matter delimited by '---'.
- A plain YAML file.

The recipe keys may sit at the top level or under a `run_recipe` mapping, and may
use the component's camelCase prop names or their snake_case equivalents.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from runrecipe.models import RecipeConfig

logger = logging.getLogger(__name__)


class PageError(ValueError):
    pass


# snake_case field -> camelCase prop name
_FIELD_ALIASES = {
    "recipe_name": "recipeName",
    "recipe_display_name": "recipeDisplayName",
    "artifact": "artifact",
    "intellij_wrapper_name": "intellijWrapperName",
    "intellij_description": "intellijDescription",
    "requires_yaml_install": "requiresYamlInstall",
}

_REQUIRED = ("recipe_name", "recipe_display_name", "artifact")

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0", ""}


def _split_front_matter(text: str) -> tuple[str | None, str]:
    """
    If the page begins with YAML front matter delimited by '---', return its text.
    Returns (front_matter_text_or_none, remaining_page_text).
    """
    if not text.startswith("---\n"):
        return None, text

    end = text.find("\n---\n", 4)
    if end == -1:
        if text.rstrip().endswith("\n---"):
            end = text.rstrip().rfind("\n---")
        else:
            raise PageError("Front matter starts with '---' but no closing '---' was found.")

    return text[4:end], text[end + len("\n---\n") :]


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise PageError(f"`{key}` must be a boolean, got {value!r}")


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def parse_recipe_data(data: dict[str, Any]) -> RecipeConfig:
    """Build a RecipeConfig from an already-parsed mapping."""
    if not isinstance(data, dict):
        raise PageError("Recipe parameters must be a mapping/object.")

    nested = data.get("run_recipe", data.get("runRecipe"))
    if nested is not None:
        if not isinstance(nested, dict):
            raise PageError("`run_recipe` must be a mapping/object when provided.")
        data = nested

    values: dict[str, Any] = {}
    for field_name, prop_name in _FIELD_ALIASES.items():
        if field_name in data:
            values[field_name] = data[field_name]
        elif prop_name in data:
            values[field_name] = data[prop_name]

    missing = [_FIELD_ALIASES[f] for f in _REQUIRED if not str(values.get(f) or "").strip()]
    if missing:
        raise PageError(f"Recipe parameters are missing: {', '.join(missing)}")

    return RecipeConfig(
        recipe_name=str(values["recipe_name"]).strip(),
        recipe_display_name=str(values["recipe_display_name"]).strip(),
        artifact=str(values["artifact"]).strip(),
        intellij_wrapper_name=_optional_str(values.get("intellij_wrapper_name")),
        intellij_description=_optional_str(values.get("intellij_description")),
        requires_yaml_install=_as_bool(values.get("requires_yaml_install"), "requiresYamlInstall"),
    )


def load_page_data(page_path: str | Path) -> dict[str, Any]:
    """Read the raw recipe mapping from a page or YAML file."""
    path = Path(page_path)
    if not path.exists():
        raise PageError(f"Page does not exist: {path}")
    text = path.read_text(encoding="utf-8")

    front_matter, _rest = _split_front_matter(text)
    if front_matter is None and path.suffix.lower() not in (".yml", ".yaml"):
        raise PageError(f"Page has no YAML front matter: {path}")

    try:
        data = yaml.safe_load(front_matter if front_matter is not None else text) or {}
    except yaml.YAMLError as e:
        raise PageError(f"Invalid YAML in {path}") from e
    if not isinstance(data, dict):
        raise PageError("Front matter must be a mapping/object at the top level.")

    logger.debug("Loaded recipe parameters from %s", path)
    return data


def load_recipe_config(page_path: str | Path) -> RecipeConfig:
    return parse_recipe_data(load_page_data(page_path))
