"""Hosting integrations that can be wired into the site build."""

from __future__ import annotations

import collections.abc as cabc

from .models import (
    DEPLOYMENT_TARGETS,
    DeploymentAdapter,
    DeploymentTarget,
    SiteConfigError,
)

VERCEL_PACKAGE = "@astrojs/vercel"


def vercel() -> DeploymentAdapter:
    """Return the Vercel integration handle."""
    return DeploymentAdapter(name="vercel", package=VERCEL_PACKAGE, import_name="vercel")


ADAPTER_FACTORIES: dict[str, cabc.Callable[[], DeploymentAdapter]] = {
    "vercel": vercel,
}


def resolve_adapter(target: DeploymentTarget | str) -> DeploymentAdapter | None:
    """Return the adapter for ``target``, or None for a plain static build.

    Raises
    ------
    SiteConfigError
        If ``target`` is not a known deployment target.
    """
    if target not in DEPLOYMENT_TARGETS:
        known = ", ".join(DEPLOYMENT_TARGETS)
        msg = f"Unknown deployment target '{target}'. Known targets: {known}"
        raise SiteConfigError(msg)
    factory = ADAPTER_FACTORIES.get(target)
    if factory is None:
        return None
    return factory()


__all__ = ["ADAPTER_FACTORIES", "VERCEL_PACKAGE", "resolve_adapter", "vercel"]
