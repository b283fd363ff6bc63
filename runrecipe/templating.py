"""
templating.py

Responsibility: render small Jinja2 string templates deterministically.

Rules:
- Undefined variables are errors (`StrictUndefined`), never empty strings.
- No autoescaping: output is shell, XML, Groovy, YAML or Markdown source text,
  and values are interpolated verbatim.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, StrictUndefined, Template


class RenderError(RuntimeError):
    pass


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)


@lru_cache(maxsize=None)
def _compile(source: str) -> Template:
    return _env.from_string(source)


def render_string(source: str, context: dict[str, Any]) -> str:
    """Render `source` with `context`, surfacing any failure as a RenderError."""
    try:
        return _compile(source).render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {source.splitlines()[0] if source else ''!r}") from e
