"""
runrecipe package

Synthesizes the "how to run this recipe" instructions shown on tutorial pages,
one tab per automation front-end.

Key responsibilities are split across modules:
- `naming.py`: default IntelliJ wrapper name / description derivation
- `snippets.py`: coordinate splitting and the literal command/manifest snippets
- `composer.py`: ordered variants (label, title, body) for one recipe
- `mdx.py`: lay the variants out as Docusaurus tabs
- `page_loader.py`: read recipe parameters from a page's YAML front matter
- `cli.py`: CLI entrypoint (load -> compose -> print)
"""

from __future__ import annotations

from runrecipe.composer import compose
from runrecipe.models import RecipeConfig, Variant
from runrecipe.snippets import MalformedCoordinateError

__all__ = ["MalformedCoordinateError", "RecipeConfig", "Variant", "__version__", "compose"]

__version__ = "0.1.0"
