"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SidebarGroup, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _social_pairs(payload: typ.Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    """Return the social links as ordered (platform, url) pairs."""
    return tuple(payload.items())


def _build_social(payload: object) -> tuple[tuple[str, str], ...]:
    """Build the platform-to-URL pairs from a YAML payload."""
    match payload:
        case dict() as data:
            pass
        case None:
            return _social_pairs({})
        case _:
            msg = "Site 'social' must be a mapping of platform to URL."
            raise SiteConfigError(msg)
    links: dict[str, str] = {}
    for platform, url in data.items():
        text = _optional_str(url) if isinstance(url, str) else None
        if not text:
            msg = f"Social link '{platform}' requires a non-empty URL."
            raise SiteConfigError(msg)
        links[str(platform)] = text
    return _social_pairs(links)


def _build_sidebar(entries: object) -> tuple[SidebarGroup, ...]:
    """Build sidebar groups from a YAML list, preserving authored order."""
    match entries:
        case list() as items if items:
            pass
        case _:
            msg = "Site 'sidebar' must be a non-empty list of groups."
            raise SiteConfigError(msg)
    groups: list[SidebarGroup] = []
    for index, entry in enumerate(items):
        match entry:
            case {"label": label, "autogenerate": {"directory": directory}}:
                pass
            case _:
                msg = (
                    f"Sidebar entry {index} requires 'label' and "
                    "'autogenerate.directory'."
                )
                raise SiteConfigError(msg)
        label_text = _optional_str(label)
        directory_text = _optional_str(directory)
        if not label_text or not directory_text:
            msg = f"Sidebar entry {index} has an empty label or directory."
            raise SiteConfigError(msg)
        groups.append(SidebarGroup(label=label_text, directory=directory_text))
    return tuple(groups)


__all__ = ["_build_sidebar", "_build_social", "_optional_str", "_social_pairs"]
