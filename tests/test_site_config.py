"""Unit tests for the built-in site configuration.

These tests pin the options value handed to the site generator: the title, the
single GitHub social link, the three sidebar groups in authored order, and the
presence of the hosting adapter only in the Vercel variant.
"""

from __future__ import annotations

import dataclasses as dc

import pytest

from webapi_docs.config import (
    DEPLOYMENT_TARGETS,
    SidebarGroup,
    SiteConfigError,
    load,
    resolve_adapter,
    vercel,
)

EXPECTED_SIDEBAR = [
    ("Courses", "courses"),
    ("Guides", "how-to"),
    ("Explainers", "explainers"),
]


@pytest.mark.parametrize("target", DEPLOYMENT_TARGETS)
def test_sidebar_groups_are_ordered(target: str) -> None:
    """Both variants expose Courses, Guides, Explainers in that order."""
    site = load(target)
    actual = [(group.label, group.directory) for group in site.sidebar]
    assert actual == EXPECTED_SIDEBAR, f"unexpected sidebar for {target}: {actual!r}"


@pytest.mark.parametrize("target", DEPLOYMENT_TARGETS)
def test_title_and_social_link(target: str) -> None:
    """The title is fixed and exactly one GitHub link is configured."""
    site = load(target)
    assert site.title == "Web API with .NET"
    assert list(site.social) == ["github"], (
        f"expected a single github entry, got {dict(site.social)!r}"
    )
    assert site.social["github"].startswith("https://github.com/")


def test_static_variant_has_no_adapter() -> None:
    """The default static build wires no hosting adapter."""
    assert load().adapter is None
    assert load("static").adapter is None


def test_vercel_variant_wires_adapter() -> None:
    """The Vercel build embeds the handle returned by the adapter factory."""
    site = load("vercel")
    assert site.adapter is not None, "expected a deployment adapter for vercel"
    assert site.adapter == vercel()
    assert site.adapter.package == "@astrojs/vercel"


@pytest.mark.parametrize("target", DEPLOYMENT_TARGETS)
def test_repeated_loads_are_equal(target: str) -> None:
    """Two loads in one process yield distinct but deep-equal values."""
    first = load(target)
    second = load(target)
    assert first == second
    assert first is not second


def test_site_config_is_immutable() -> None:
    """The configuration cannot be mutated after construction."""
    site = load()
    with pytest.raises(dc.FrozenInstanceError):
        site.title = "Other"  # type: ignore[misc]
    with pytest.raises(dc.FrozenInstanceError):
        site.sidebar[0].directory = "elsewhere"  # type: ignore[misc]
    with pytest.raises(TypeError):
        site.social["mastodon"] = "https://example.invalid"  # type: ignore[index]


def test_get_group_by_label() -> None:
    """Groups are addressable by label and unknown labels list the known ones."""
    site = load()
    assert site.get_group("Guides") == SidebarGroup(label="Guides", directory="how-to")
    with pytest.raises(KeyError, match="Courses, Guides, Explainers"):
        site.get_group("Tutorials")
    assert site.directories == ["courses", "how-to", "explainers"]


def test_unknown_target_is_rejected() -> None:
    """Targets outside the known set raise SiteConfigError."""
    with pytest.raises(SiteConfigError, match="Unknown deployment target 'netlify'"):
        load("netlify")  # type: ignore[arg-type]
    with pytest.raises(SiteConfigError):
        resolve_adapter("")


@pytest.mark.parametrize("target", DEPLOYMENT_TARGETS)
def test_site_config_is_hashable(target: str) -> None:
    """Equal configurations hash alike and collapse in a set."""
    first = load(target)
    second = load(target)
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first.social_links == (("github", "https://github.com/withastro/starlight"),)
