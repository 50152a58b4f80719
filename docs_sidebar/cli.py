"""Cyclopts CLI entrypoint for resolving documentation navigation.

The ``docs-sidebar`` console script defined here loads a site YAML file (pages
plus theme options), resolves navigation for it, and prints the result as JSON.
Typical usage runs ``docs-sidebar check`` in CI to catch sidebar entries that
point at missing pages, and ``docs-sidebar sidebar`` to inspect the tree a page
will render.

Examples
--------
Print the sidebar of the guide landing page:

>>> from docs_sidebar.cli import app
>>> app(["sidebar", "--site", "site.yaml", "--page", "/guide/"])  # doctest: +SKIP

Fail the build when any sidebar reference is dangling:

>>> app(["check", "--site", "site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import SidebarConfigError, SiteData, load_site_data
from .models import GroupNode, UnresolvedNode
from .navbar import resolve_nav_link_item
from .sidebar import resolve_sidebar_items

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavigationNode

DEFAULT_SITE = Path("site.yaml")

app = App(name="docs-sidebar", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    """Send library diagnostics to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(site: Path) -> SiteData:
    """Load the site file or exit with status 2 and a readable message."""
    try:
        return load_site_data(site)
    except (FileNotFoundError, TypeError, SidebarConfigError, YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def iter_unresolved(nodes: cabc.Iterable[NavigationNode]) -> cabc.Iterator[str]:
    """Yield the raw path of every unresolved reference in ``nodes``."""
    for node in nodes:
        if isinstance(node, UnresolvedNode):
            yield node.raw_path
        elif isinstance(node, GroupNode):
            yield from iter_unresolved(node.children)


@app.command(help="Print the resolved sidebar of one page as JSON.")
def sidebar(
    *,
    page: typ.Annotated[str, Parameter(help="Page path", env_var="INPUT_PAGE")],
    site: typ.Annotated[
        Path, Parameter(help="Path to site file", env_var="INPUT_SITE")
    ] = DEFAULT_SITE,
    locale: typ.Annotated[
        str | None, Parameter(help="Locale path, e.g. /zh/", env_var="INPUT_LOCALE")
    ] = None,
    verbose: bool = False,
) -> None:
    """Resolve and print the sidebar for ``page``.

    Parameters
    ----------
    page : str
        Output or regular path of the page (``/guide/intro.html`` and
        ``/guide/intro.md`` both match).
    site : Path, optional
        Path to the site YAML file (overridable via ``INPUT_SITE``).
    locale : str or None, optional
        Locale path selecting a locale-specific sidebar.
    verbose : bool, optional
        Emit debug logging on stderr.

    Raises
    ------
    SystemExit
        With status 2 when the site cannot be loaded or the page is unknown.
    """
    _configure_logging(verbose=verbose)
    site_data = _load(site)
    target = site_data.find_page(page)
    if target is None:
        print(f"error: no page matches {page!r}", file=sys.stderr)
        raise SystemExit(2)
    nodes = resolve_sidebar_items(target, target.regular_path, site_data, locale)
    _print_json([node.to_dict() for node in nodes])


@app.command(help="Resolve every page's sidebar and report dangling references.")
def check(
    *,
    site: typ.Annotated[
        Path, Parameter(help="Path to site file", env_var="INPUT_SITE")
    ] = DEFAULT_SITE,
    locale: typ.Annotated[
        str | None, Parameter(help="Locale path, e.g. /zh/", env_var="INPUT_LOCALE")
    ] = None,
    verbose: bool = False,
) -> None:
    """Exit with status 1 when any sidebar entry matches no page.

    Each dangling reference is printed once, however many pages share the
    sidebar that declares it.
    """
    _configure_logging(verbose=verbose)
    site_data = _load(site)
    missing: dict[str, None] = {}
    for page in site_data.pages:
        nodes = resolve_sidebar_items(page, page.regular_path, site_data, locale)
        missing.update(dict.fromkeys(iter_unresolved(nodes)))
    for raw_path in missing:
        print(f"unresolved: {raw_path}")
    if missing:
        raise SystemExit(1)
    print(f"ok: {len(site_data.pages)} pages checked")


@app.command(help="Print the resolved navbar as JSON.")
def nav(
    *,
    site: typ.Annotated[
        Path, Parameter(help="Path to site file", env_var="INPUT_SITE")
    ] = DEFAULT_SITE,
    locale: typ.Annotated[
        str | None, Parameter(help="Locale path, e.g. /zh/", env_var="INPUT_LOCALE")
    ] = None,
) -> None:
    """Resolve and print the navbar for the site or one of its locales."""
    site_data = _load(site)
    theme = site_data.theme_config.for_locale(locale)
    items = theme.nav or site_data.theme_config.nav
    _print_json([resolve_nav_link_item(item).to_dict() for item in items])


def main() -> None:
    """Invoke the Cyclopts application behind the ``docs-sidebar`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
