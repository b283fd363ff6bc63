"""
cli.py

Responsibility: CLI entrypoint for runrecipe.

High-level flow (single command `render`):
1) Read recipe parameters from a page's front matter (optional)
2) Apply CLI overrides -> `RecipeConfig`
3) Compose the variants
4) Print them as MDX tabs, Markdown sections or JSON on stdout

This module should orchestrate behavior but keep concerns isolated:
- Page parsing: `page_loader.py`
- Variant composition: `composer.py`
- Layout: `mdx.py`
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any

from runrecipe import __version__
from runrecipe.composer import compose
from runrecipe.mdx import render_sections, render_tabs
from runrecipe.models import Variant
from runrecipe.page_loader import load_page_data, parse_recipe_data

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


_OVERRIDES = (
    ("recipe_name", "recipe_name"),
    ("display_name", "recipe_display_name"),
    ("artifact", "artifact"),
    ("wrapper_name", "intellij_wrapper_name"),
    ("description", "intellij_description"),
    ("requires_yaml_install", "requires_yaml_install"),
)


def _collect_data(args: argparse.Namespace) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if args.page:
        raw = load_page_data(args.page)
        nested = raw.get("run_recipe", raw.get("runRecipe"))
        data.update(nested if isinstance(nested, dict) else raw)

    # CLI overrides
    for arg_name, field_name in _OVERRIDES:
        value = getattr(args, arg_name)
        if value is not None:
            data[field_name] = value

    if not data:
        raise CLIError("Provide a page or --recipe-name/--display-name/--artifact")
    return data


def _format(variants: list[Variant], fmt: str, *, with_imports: bool) -> str:
    if fmt == "mdx":
        return render_tabs(variants, with_imports=with_imports)
    if fmt == "markdown":
        return render_sections(variants)
    if fmt == "json":
        return json.dumps([dataclasses.asdict(v) for v in variants], indent=2)
    raise CLIError(f"Unknown format: {fmt}")


def render_cmd(args: argparse.Namespace) -> int:
    config = parse_recipe_data(_collect_data(args))
    variants = compose(config)
    sys.stdout.write(_format(variants, args.format, with_imports=not bool(args.no_imports)) + "\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="runrecipe", description="Render OpenRewrite recipe run instructions")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="Render run instructions for one recipe")
    r.add_argument("page", nargs="?", default=None, help="Markdown page with YAML front matter, or a YAML file")
    r.add_argument("--format", choices=("mdx", "markdown", "json"), default="mdx", help="Output format (default: mdx)")
    r.add_argument("--no-imports", action="store_true", help="Omit the Tabs/TabItem import lines in MDX output")

    r.add_argument("--recipe-name", default=None, help="Fully qualified recipe name (overrides the page)")
    r.add_argument("--display-name", default=None, help="Human-readable recipe name (overrides the page)")
    r.add_argument("--artifact", default=None, help="Recipe artifact as group:artifact (overrides the page)")
    r.add_argument("--wrapper-name", default=None, help="IntelliJ rewrite.yml recipe name")
    r.add_argument("--description", default=None, help="IntelliJ rewrite.yml description")
    r.add_argument(
        "--requires-yaml-install",
        dest="requires_yaml_install",
        action="store_true",
        default=None,
        help="The recipe must be installed from a rewrite.yml file",
    )
    r.add_argument(
        "--no-requires-yaml-install",
        dest="requires_yaml_install",
        action="store_false",
        help="The recipe is available from its artifact alone",
    )

    r.set_defaults(func=render_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except (ValueError, RuntimeError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
