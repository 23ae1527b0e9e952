"""Navigation, routing and gallery data for component-library example pages.

This package turns the flat content records of an examples documentation site
into the structures its pages need: the grouped and ordered sider menu, the
section (example, API, design) a requested path resolves to, and the
categorized demo gallery. It also exposes the ``example-pages`` CLI used by
the site build.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from example_pages import main
>>> main()  # doctest: +SKIP
>>> from example_pages import app
>>> app.name  # doctest: +SKIP
('example-pages',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
