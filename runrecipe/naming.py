"""
naming.py

Defaults for the IntelliJ `rewrite.yml` wrapper recipe.
"""

from __future__ import annotations

import re

WRAPPER_NAMESPACE = "com.github.timtebeek"
DESCRIPTION_SUFFIX = " and apply best practices to assertions."

_WHITESPACE = re.compile(r"\s+")


def derive_wrapper_name(display_name: str) -> str:
    """
    Build a dotted wrapper identifier from a display name.

    >>> derive_wrapper_name("Adopt AssertJ")
    'com.github.timtebeek.AdoptAssertJ'
    """
    return f"{WRAPPER_NAMESPACE}.{_WHITESPACE.sub('', display_name)}"


def derive_description(display_name: str) -> str:
    return f"{display_name}{DESCRIPTION_SUFFIX}"
