"""Cyclopts CLI entrypoint for resolving example-site navigation data.

The ``example-pages`` console script loads ``site.yaml``, the markdown content
tree and the gallery demo listing, then prints the JSON payloads the site's
presentation layer consumes: the navigation menu, the routing decision for a
requested path, the categorized gallery, or a full page payload combining
them. Typical usage is ``example-pages page /en/examples/bar/basic/API`` from
the site build.

Examples
--------
Print the menu for the Chinese locale with the ``bar`` group expanded:

>>> from example_pages.cli import app
>>> app.run(
...     ["menu", "--locale", "zh", "--active", "/zh/examples/bar/basic"]
... )  # doctest: +SKIP

Resolve a request:

>>> from example_pages.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .content import load_content_records, load_demos
from .icons import IconResolver
from .page import ExamplePageBuilder
from .router import resolve_active_section

DEFAULT_CONFIG = Path("config/site.yaml")
NOT_FOUND: dict[str, bool] = {"found": False}

app = App(name="example-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]
LocaleOption = typ.Annotated[
    str | None,
    Parameter(help="Locale code (defaults to the configured locale)", env_var="INPUT_LOCALE"),
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log resolution details to stderr")
]


def _configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when ``verbose`` is set."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _emit(payload: object) -> None:
    """Print ``payload`` as indented JSON."""
    encoded = msgspec_json.format(msgspec_json.encode(payload), indent=2)
    print(encoded.decode("utf-8"))


def _load_builder(site_config: SiteConfig) -> ExamplePageBuilder:
    """Load content and demos described by ``site_config`` into a page builder."""
    records = load_content_records(site_config.content_dir)
    demos = load_demos(site_config.demos_file)
    return ExamplePageBuilder(
        records,
        site_config.examples,
        demos,
        icons=IconResolver(script_url=site_config.icon_script_url),
        screenshot_placeholder=site_config.screenshot_placeholder,
    )


@app.command(help="Print the navigation menu for a locale.")
def menu(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    locale: LocaleOption = None,
    active: typ.Annotated[
        str | None,
        Parameter(help="Identifier of the active page", env_var="INPUT_ACTIVE"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the navigation menu JSON.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration (overridable via
        ``INPUT_CONFIG``).
    locale : str or None, optional
        Locale whose groups are listed; the configured default when ``None``.
    active : str or None, optional
        Identifier of the page being viewed; expands its groups and marks it
        selected.
    verbose : bool, optional
        Enable debug logging.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    builder = _load_builder(site_config)
    nav = builder.menu(site_config.resolve_locale(locale), active)
    _emit(nav.to_dict())


@app.command(help="Resolve a requested path to its content section.")
def route(
    path: str,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Print the routing decision for ``path``, or ``{"found": false}``.

    Parameters
    ----------
    path : str
        Requested URL path, e.g. ``/en/examples/bar/basic/API``.
    config : Path, optional
        Path to the ``site.yaml`` configuration.
    verbose : bool, optional
        Enable debug logging.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    records = load_content_records(site_config.content_dir)
    active = resolve_active_section(path, records)
    if active is None:
        _emit(NOT_FOUND)
        return
    _emit({"found": True, **active.to_dict()})


@app.command(help="Print the categorized gallery for a locale.")
def gallery(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    locale: LocaleOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the gallery categories JSON."""
    _configure_logging(verbose)
    site_config = load_site_config(config)
    builder = _load_builder(site_config)
    categories = builder.gallery(site_config.resolve_locale(locale))
    _emit([category.to_dict() for category in categories])


@app.command(help="Print the full page payload for a requested path.")
def page(
    path: str,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    locale: LocaleOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the page payload for ``path``, or ``{"found": false}``.

    Parameters
    ----------
    path : str
        Requested URL path; ``.../examples/gallery`` selects the gallery view.
    config : Path, optional
        Path to the ``site.yaml`` configuration.
    locale : str or None, optional
        Active locale; the configured default when ``None``.
    verbose : bool, optional
        Enable debug logging.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    builder = _load_builder(site_config)
    result = builder.build(path, site_config.resolve_locale(locale))
    _emit(result.to_dict() if result else NOT_FOUND)


def main() -> None:
    """Invoke the Cyclopts application behind the ``example-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
