"""Render the site configuration into the build tool's option formats.

The build tool recognises an options mapping with ``title``, ``social``,
``sidebar`` and an optional ``adapter``. This module produces that mapping
(:func:`to_options`), a JSON rendering of it, and a complete
``astro.config.mjs`` module rendered from ``webapi_docs/templates``.

>>> from webapi_docs.config import load
>>> from webapi_docs.export import to_options
>>> to_options(load())["sidebar"][1]
{'label': 'Guides', 'autogenerate': {'directory': 'how-to'}}
>>> "adapter" in to_options(load("vercel"))
True
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from .config import SiteConfig

ASTRO_CONFIG_TEMPLATE = "astro_config.jinja"


def to_options(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the options mapping consumed by the build tool."""
    options: dict[str, typ.Any] = {
        "title": config.title,
        "social": dict(config.social),
        "sidebar": [
            {"label": group.label, "autogenerate": {"directory": group.directory}}
            for group in config.sidebar
        ],
    }
    if config.adapter is not None:
        options["adapter"] = {
            "name": config.adapter.name,
            "package": config.adapter.package,
        }
    return options


def render_options_json(config: SiteConfig) -> str:
    """Return the options mapping as indented JSON ending with a newline."""
    return json.dumps(to_options(config), indent=2) + "\n"


class AstroConfigRenderer:
    """Render an ``astro.config.mjs`` module from a site configuration."""

    def __init__(
        self, config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Configuration produced by :func:`webapi_docs.config.load` or
            :func:`webapi_docs.config.load_site_config`.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``webapi_docs/templates`` directory when ``None``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - renders JavaScript, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(ASTRO_CONFIG_TEMPLATE)

    def render(self) -> str:
        """Return the rendered module source."""
        source = self.template.render(config=self.config, adapter=self.config.adapter)
        if not source.endswith("\n"):
            source += "\n"
        return source

    def run(self, output: Path) -> Path:
        """Write the rendered module to ``output`` and return the path."""
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(), encoding="utf-8")
        return output


__all__ = [
    "ASTRO_CONFIG_TEMPLATE",
    "AstroConfigRenderer",
    "render_options_json",
    "to_options",
]
