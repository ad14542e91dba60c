"""Site configuration for the Web API with .NET documentation site.

The primary entry point is :func:`load`, which returns the built-in
:class:`SiteConfig` for a deployment target. :func:`load_site_config` reads the
same shape from a YAML file so a different site can reuse the tooling.

Examples
--------
>>> from webapi_docs.config import load
>>> site = load("vercel")
>>> site.title
'Web API with .NET'
>>> site.get_group("Guides").directory
'how-to'
"""

from .adapters import ADAPTER_FACTORIES, resolve_adapter, vercel
from .loader import DEFAULT_TARGET, load, load_site_config
from .models import (
    DEPLOYMENT_TARGETS,
    DeploymentAdapter,
    DeploymentTarget,
    SidebarGroup,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "ADAPTER_FACTORIES",
    "DEFAULT_TARGET",
    "DEPLOYMENT_TARGETS",
    "DeploymentAdapter",
    "DeploymentTarget",
    "SidebarGroup",
    "SiteConfig",
    "SiteConfigError",
    "load",
    "load_site_config",
    "resolve_adapter",
    "vercel",
]
