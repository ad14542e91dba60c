"""Check sidebar groups against the documentation content tree.

The site generator discovers pages itself; this only confirms that every
sidebar group points at an existing directory so a broken tree fails before
the build starts.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .config import SiteConfigError

if typ.TYPE_CHECKING:
    from .config import SidebarGroup, SiteConfig

DEFAULT_CONTENT_ROOT = Path("src/content/docs")


def missing_directories(config: SiteConfig, content_root: Path) -> list[SidebarGroup]:
    """Return the groups whose directory is absent, in sidebar order."""
    return [
        group
        for group in config.sidebar
        if not (content_root / group.directory).is_dir()
    ]


def ensure_content_tree(config: SiteConfig, content_root: Path) -> None:
    """Raise :class:`SiteConfigError` when any sidebar directory is missing."""
    missing = missing_directories(config, content_root)
    if not missing:
        return
    listing = ", ".join(f"{group.label} ({group.directory})" for group in missing)
    msg = f"Sidebar directories missing under '{content_root}': {listing}"
    raise SiteConfigError(msg)


__all__ = ["DEFAULT_CONTENT_ROOT", "ensure_content_tree", "missing_directories"]
