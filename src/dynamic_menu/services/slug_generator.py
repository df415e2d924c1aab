"""Slug generation for menu display names."""

import hashlib
from collections.abc import Callable

from slugify import slugify

SlugGenerator = Callable[[str], str]


def generate_slug(name: str) -> str:
    """Derive a URL-safe slug from a display name.

    Deterministic: the same name always yields the same slug. Names with no
    characters slugify keeps (e.g. "!!!") fall back to ``menu-`` plus a short
    digest of the name, so the slug is never empty.

    Args:
        name: Menu display name

    Returns:
        Lowercase, hyphen-separated ASCII slug
    """
    slug = slugify(name)
    if slug:
        return slug
    return f"menu-{hashlib.sha1(name.encode('utf-8')).hexdigest()[:8]}"
