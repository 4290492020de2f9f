"""Identifier derivation for module names.

A module name such as ``userProfile`` is used verbatim for file names and
URL paths, while generated code also needs a snake-case identifier
(``user_profile``) and a Pascal-case type name (``UserProfile``).
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field


_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[-_]+")
_SPACED_WORD = re.compile(r"\s+(.)([A-Za-z0-9_]*)")


class Identifiers(BaseModel):
    """The raw module name plus the identifiers derived from it."""

    raw: str = Field(..., min_length=1, description="Module name as given by the user")
    snake: str = Field(..., description="snake_case identifier")
    pascal: str = Field(..., description="PascalCase type name")


def to_snake(name: str) -> str:
    """Convert ``userProfile`` or ``user profile`` to ``user_profile``.

    An underscore goes in at every lower-to-upper boundary, whitespace runs
    collapse to a single underscore, and the result is lower-cased.
    """
    result = _CASE_BOUNDARY.sub(r"\1_\2", name)
    result = _WHITESPACE.sub("_", result)
    return result.lower()


def to_pascal(name: str) -> str:
    """Convert ``user-profile``, ``user_profile`` or ``userProfile`` to ``UserProfile``.

    Hyphens and underscores act as word separators.  Every word after a
    separator is capitalised with the rest lower-cased; the first word only
    has its leading character upper-cased, so existing camel humps survive.
    """
    result = _SEPARATORS.sub(" ", name)
    result = _SPACED_WORD.sub(
        lambda m: m.group(1).upper() + m.group(2).lower(), result
    )
    return result[:1].upper() + result[1:]


def derive_identifiers(raw_name: str) -> Identifiers:
    """Build the :class:`Identifiers` for *raw_name*."""
    return Identifiers(raw=raw_name, snake=to_snake(raw_name), pascal=to_pascal(raw_name))
