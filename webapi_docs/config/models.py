"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

DeploymentTarget = typ.Literal["static", "vercel"]
DEPLOYMENT_TARGETS: tuple[str, ...] = typ.get_args(DeploymentTarget)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """A labelled sidebar section populated from a content directory."""

    label: str
    directory: str


@dc.dataclass(frozen=True, slots=True)
class DeploymentAdapter:
    """Opaque handle to a hosting integration wired into the build.

    Attributes
    ----------
    name : str
        Hosting platform identifier (for example ``"vercel"``).
    package : str
        Package providing the integration to the build tool.
    import_name : str
        Identifier the integration is imported under in the build config.
    """

    name: str
    package: str
    import_name: str


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The options value handed to the site generator at build start."""

    title: str
    social_links: tuple[tuple[str, str], ...]
    sidebar: tuple[SidebarGroup, ...]
    adapter: DeploymentAdapter | None = None

    @property
    def social(self) -> typ.Mapping[str, str]:
        """Return a read-only platform-to-URL view of the social links."""
        return types.MappingProxyType(dict(self.social_links))

    def get_group(self, label: str) -> SidebarGroup:
        """Return the sidebar group with the given label."""
        for group in self.sidebar:
            if group.label == label:
                return group
        available = ", ".join(group.label for group in self.sidebar)
        msg = f"Unknown sidebar group '{label}'. Known groups: {available}"
        raise KeyError(msg)

    @property
    def directories(self) -> list[str]:
        """Return the source directory of every group in sidebar order."""
        return [group.directory for group in self.sidebar]


__all__ = [
    "DEPLOYMENT_TARGETS",
    "DeploymentAdapter",
    "DeploymentTarget",
    "SidebarGroup",
    "SiteConfig",
    "SiteConfigError",
]
