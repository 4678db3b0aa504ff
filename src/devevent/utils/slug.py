"""Slug generation and validation utilities."""

import re

SLUG_PATTERN = re.compile(r"[a-z0-9-]+")

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Turn a title into a URL-safe slug.

    Args:
        title: Free-form title, e.g. "React Summit 2025!"

    Returns:
        Lowercase slug like "react-summit-2025", or "" if nothing survives.
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def is_valid_slug(slug: str) -> bool:
    """Check a slug contains only lowercase letters, digits and hyphens."""
    return SLUG_PATTERN.fullmatch(slug) is not None


def next_available_slug(base: str, taken: set[str]) -> str:
    """Return base, or base-2, base-3... whichever is not taken."""
    if base not in taken:
        return base
    suffix = 2
    while f"{base}-{suffix}" in taken:
        suffix += 1
    return f"{base}-{suffix}"
