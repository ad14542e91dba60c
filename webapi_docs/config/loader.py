"""Build the documentation site configuration."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .adapters import resolve_adapter
from .helpers import _build_sidebar, _build_social, _optional_str, _social_pairs
from .models import DeploymentTarget, SidebarGroup, SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

SITE_TITLE = "Web API with .NET"
SOURCE_REPOSITORY_URL = "https://github.com/withastro/starlight"
DEFAULT_TARGET: DeploymentTarget = "static"


def load(deployment_target: DeploymentTarget = DEFAULT_TARGET) -> SiteConfig:
    """Return the site configuration for the requested deployment target.

    Parameters
    ----------
    deployment_target : DeploymentTarget, optional
        ``"static"`` (default) for a plain static build, or ``"vercel"`` to
        wire the Vercel hosting adapter.

    Returns
    -------
    SiteConfig
        A freshly built configuration. Sidebar directories are not checked
        against the content tree.

    Raises
    ------
    SiteConfigError
        If ``deployment_target`` is not a known target.

    Examples
    --------
    >>> from webapi_docs.config import load
    >>> [group.directory for group in load().sidebar]
    ['courses', 'how-to', 'explainers']
    >>> load("vercel").adapter.name
    'vercel'
    """
    return SiteConfig(
        title=SITE_TITLE,
        social_links=_social_pairs({"github": SOURCE_REPOSITORY_URL}),
        sidebar=(
            SidebarGroup(label="Courses", directory="courses"),
            SidebarGroup(label="Guides", directory="how-to"),
            SidebarGroup(label="Explainers", directory="explainers"),
        ),
        adapter=resolve_adapter(deployment_target),
    )


def load_site_config(
    path: Path, *, deployment_target: DeploymentTarget | None = None
) -> SiteConfig:
    """Load a site configuration from a YAML file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML file (for example ``site.yaml``).
    deployment_target : DeploymentTarget or None, optional
        Overrides the file's ``deployment_target`` key. When both are absent
        the static target is used.

    Returns
    -------
    SiteConfig
        Parsed configuration with the sidebar in authored order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the title is missing, a social link or sidebar group is malformed,
        or the deployment target is unknown.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)

    if deployment_target is not None:
        target: str = deployment_target
    else:
        target = _optional_str(raw.get("deployment_target")) or DEFAULT_TARGET

    return SiteConfig(
        title=title,
        social_links=_build_social(raw.get("social")),
        sidebar=_build_sidebar(raw.get("sidebar")),
        adapter=resolve_adapter(target),
    )


__all__ = [
    "DEFAULT_TARGET",
    "SITE_TITLE",
    "SOURCE_REPOSITORY_URL",
    "load",
    "load_site_config",
]
