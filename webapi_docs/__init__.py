"""Site configuration tooling for the Web API with .NET documentation site.

This package builds the options value handed to the static site generator and
exposes the ``docs-site`` CLI used locally and in CI to render it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``load``: Return the built-in site configuration for a deployment target.

Examples
--------
>>> from webapi_docs import load
>>> load().title
'Web API with .NET'
>>> from webapi_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .config import load

__all__ = ["app", "load", "main"]
