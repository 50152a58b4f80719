"""Resolve declared sidebar configuration into navigation trees.

The entry point is :func:`resolve_sidebar_items`, which picks the sidebar that
applies to a page and turns it into a list of navigation nodes:

* ``"auto"`` builds in-page anchors from the page's headings;
* ``"wiki"`` mirrors the directory layout of the page set;
* a list or ``prefix -> list`` mapping is matched against the route and each
  declared item is resolved against the page set.

Examples
--------
>>> from docs_sidebar.config import SiteData, ThemeConfig, decode_sidebar_config
>>> from docs_sidebar.models import Page
>>> page = Page(path="/guide/", regular_path="/guide/", title="Guide", key="g")
>>> theme = ThemeConfig(sidebar=decode_sidebar_config({"/guide/": [""]}))
>>> site = SiteData(pages=[page], theme_config=theme)
>>> [node.path for node in resolve_sidebar_items(page, "/guide/", site)]
['/guide/']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import AUTO_SIDEBAR, WIKI_SIDEBAR
from .category_tree import resolve_category_tree
from .config import PageLink, SidebarGroup, TitledPageLink
from .headings import resolve_headers
from .locator import resolve_page
from .matcher import resolve_matching_config
from .models import GroupNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SidebarConfig, SidebarItem, SiteData, ThemeConfig
    from .models import NavigationNode, Page

logger = logging.getLogger(__name__)


def resolve_item(
    item: SidebarItem,
    pages: cabc.Sequence[Page],
    base: str | None,
    depth: int = 1,
) -> NavigationNode:
    """Resolve one declared sidebar item.

    Parameters
    ----------
    item : SidebarItem
        Decoded sidebar entry.
    pages : Sequence[Page]
        Page set that references are looked up in.
    base : str or None
        Prefix that relative references resolve against.
    depth : int, optional
        Nesting depth of ``item``; top-level items are at depth ``1``.

    Returns
    -------
    NavigationNode
        A page, external or placeholder node for links, or a
        :class:`GroupNode` for entries that declare ``children``.
    """
    match item:
        case PageLink(path=path):
            return resolve_page(pages, path, base)
        case TitledPageLink(path=path, title=title):
            return dc.replace(resolve_page(pages, path, base), title=title)
        case SidebarGroup(children=None, path=str() as path):
            node = resolve_page(pages, path, base)
            if item.title is None:
                return node
            return dc.replace(node, title=item.title)
        case SidebarGroup():
            return GroupNode(
                title=item.title,
                path=item.path,
                collapsable=item.collapsable,
                sidebar_depth=item.sidebar_depth,
                depth=depth,
                children=[
                    resolve_item(child, pages, base, depth + 1)
                    for child in item.children or ()
                ],
            )
        case _:
            msg = f"Unsupported sidebar item: {item!r}"
            raise TypeError(msg)


def select_sidebar_config(
    page: Page, theme_config: ThemeConfig, locale_path: str | None = None
) -> SidebarConfig | None:
    """Return the sidebar configuration that applies to ``page``.

    Lookups run in order and the first configured value wins: the page's
    ``sidebar`` frontmatter override (decoded into :attr:`Page.sidebar` when
    the page is built), the locale's theme config (the global config when the
    locale is unknown), then the global theme config. ``sidebar: false`` in
    frontmatter disables the sidebar for that page.
    """
    if page.sidebar is False:
        return None
    if page.sidebar is not None:
        return page.sidebar
    locale_config = theme_config.for_locale(locale_path)
    if locale_config.sidebar is not None:
        return locale_config.sidebar
    return theme_config.sidebar


def resolve_sidebar(
    config: SidebarConfig | None,
    page: Page,
    regular_path: str,
    pages: cabc.Sequence[Page],
) -> list[NavigationNode]:
    """Resolve an already selected sidebar configuration for ``page``."""
    if config is None:
        return []
    if config == AUTO_SIDEBAR:
        logger.debug("Resolving auto sidebar for %s", page.path)
        return list(resolve_headers(page))
    if config == WIKI_SIDEBAR:
        logger.debug("Resolving wiki sidebar for %s", page.path)
        return resolve_category_tree(page.path, pages)
    if isinstance(config, str):
        msg = f"Unknown sidebar mode: {config!r}"
        raise ValueError(msg)

    section = resolve_matching_config(regular_path, config)
    if section is None:
        logger.debug("No sidebar section matches %s", regular_path)
        return []
    logger.debug("Sidebar section %s matches %s", section.base, regular_path)
    return [resolve_item(item, pages, section.base) for item in section.items]


def resolve_sidebar_items(
    page: Page,
    regular_path: str,
    site: SiteData,
    locale_path: str | None = None,
) -> list[NavigationNode]:
    """Return the navigation tree shown beside ``page``.

    Parameters
    ----------
    page : Page
        Page being rendered.
    regular_path : str
        Route path used to match multi-section sidebars.
    site : SiteData
        All pages plus the accepted theme configuration.
    locale_path : str, optional
        Locale prefix (for example ``/zh/``) selecting a locale override.

    Returns
    -------
    list[NavigationNode]
        Resolved nodes; empty when no sidebar applies.
    """
    config = select_sidebar_config(page, site.theme_config, locale_path)
    return resolve_sidebar(config, page, regular_path, site.pages)


__all__ = [
    "resolve_item",
    "resolve_sidebar",
    "resolve_sidebar_items",
    "select_sidebar_config",
]
