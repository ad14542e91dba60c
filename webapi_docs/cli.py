"""Cyclopts CLI entrypoint for the Web API with .NET documentation site.

The ``docs-site`` console script defined here prints the site options the
generator consumes, writes them to ``astro.config.mjs`` (or JSON), and checks
that every sidebar group points at an existing content directory. Options can
also be supplied through ``INPUT_*`` environment variables, which keeps CI
workflows free of long command lines.

Examples
--------
Write the Vercel variant of the build config:

>>> from webapi_docs.cli import app
>>> app(["emit", "--target", "vercel"])  # doctest: +SKIP

Check the content tree before a build:

>>> app(["check", "--content-root", "src/content/docs"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    DEFAULT_TARGET,
    DeploymentTarget,
    SiteConfig,
    load,
    load_site_config,
)
from .content import DEFAULT_CONTENT_ROOT, ensure_content_tree, missing_directories
from .export import AstroConfigRenderer, render_options_json

DEFAULT_OUTPUT = Path("astro.config.mjs")

OutputFormat = typ.Literal["mjs", "json"]

app = App(name="docs-site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

TargetOption = typ.Annotated[
    DeploymentTarget | None,
    Parameter(
        help="Deployment target: 'static' or 'vercel'", env_var="INPUT_TARGET"
    ),
]
ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Optional YAML site config", env_var="INPUT_CONFIG"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_site_config(
    config: Path | None, target: DeploymentTarget | None
) -> SiteConfig:
    """Load the YAML config when given, otherwise the built-in site config."""
    if config is not None:
        return load_site_config(config, deployment_target=target)
    return load(DEFAULT_TARGET if target is None else target)


@app.command(help="Print the site options as JSON.")
def show(*, target: TargetOption = None, config: ConfigOption = None) -> None:
    """Print the options mapping handed to the site generator."""
    site_config = _resolve_site_config(config, target)
    print(render_options_json(site_config), end="")


@app.command(help="Write the site generator config file.")
def emit(
    *,
    target: TargetOption = None,
    config: ConfigOption = None,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the config", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    output_format: typ.Annotated[
        OutputFormat,
        Parameter(
            name="--format",
            help="'mjs' for an Astro config module, 'json' for plain options",
            env_var="INPUT_FORMAT",
        ),
    ] = "mjs",
) -> None:
    """Render the site configuration to disk.

    Parameters
    ----------
    target : DeploymentTarget or None, optional
        Deployment target; the YAML file's ``deployment_target`` or
        ``"static"`` applies when omitted.
    config : Path or None, optional
        YAML site config to load instead of the built-in configuration.
    output : Path, optional
        Destination file; defaults to ``astro.config.mjs``.
    output_format : {"mjs", "json"}, optional
        Rendering used for the file.

    Returns
    -------
    None
        Writes the file and prints its path.
    """
    site_config = _resolve_site_config(config, target)
    if output_format == "json":
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(render_options_json(site_config), encoding="utf-8")
        written = output
    else:
        written = AstroConfigRenderer(site_config).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Check that every sidebar directory exists.")
def check(
    *,
    target: TargetOption = None,
    config: ConfigOption = None,
    content_root: typ.Annotated[
        Path,
        Parameter(help="Root of the docs content tree", env_var="INPUT_CONTENT_ROOT"),
    ] = DEFAULT_CONTENT_ROOT,
) -> None:
    """Report each sidebar group and fail when a directory is missing.

    Raises
    ------
    SiteConfigError
        If one or more sidebar directories are absent under ``content_root``.
    """
    site_config = _resolve_site_config(config, target)
    missing = {group.label for group in missing_directories(site_config, content_root)}
    for group in site_config.sidebar:
        status = "missing" if group.label in missing else "ok"
        print(f"{status} {group.label} -> {_format_path(content_root / group.directory)}")
    ensure_content_tree(site_config, content_root)


def main() -> None:
    """Invoke the Cyclopts application behind the ``docs-site`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
