"""Resolve documentation pages into sidebars and category trees.

This package turns a flat list of pages (path, title, heading outline) plus a
small declarative sidebar configuration into navigation trees. It never reads
page content or renders HTML; callers supply :class:`Page` records and receive
lists of navigation nodes.

Exports
-------
- ``resolve_sidebar_items``: Select and resolve the sidebar for a page.
- ``resolve_page``: Map one raw reference onto a page node.
- ``resolve_category_tree``: Build the directory-mirroring ``wiki`` sidebar.
- ``group_headers``: Nest headings under their level-two parent.
- ``app``/``main``: The ``docs-sidebar`` Cyclopts application.

Examples
--------
>>> from docs_sidebar import group_headers, Heading
>>> grouped = group_headers([Heading(2, "A"), Heading(3, "A.1"), Heading(2, "B")])
>>> [(h.title, [c.title for c in h.children]) for h in grouped]
[('A', ['A.1']), ('B', [])]
"""

from __future__ import annotations

from .category_tree import resolve_category_tree
from .cli import app, main
from .headings import group_headers, resolve_headers
from .locator import resolve_page
from .matcher import SidebarMatch, resolve_matching_config
from .models import (
    AutoNode,
    ExternalNode,
    GroupNode,
    Heading,
    NavigationNode,
    Page,
    PageNode,
    Route,
    UnresolvedNode,
)
from .navbar import NavLink, resolve_nav_link_item
from .paths import (
    ensure_ext,
    get_hash,
    is_active,
    is_external,
    is_mailto,
    is_tel,
    normalize,
)
from .relative_path import resolve_path
from .sidebar import (
    resolve_item,
    resolve_sidebar,
    resolve_sidebar_items,
    select_sidebar_config,
)

__all__ = [
    "AutoNode",
    "ExternalNode",
    "GroupNode",
    "Heading",
    "NavLink",
    "NavigationNode",
    "Page",
    "PageNode",
    "Route",
    "SidebarMatch",
    "UnresolvedNode",
    "app",
    "ensure_ext",
    "get_hash",
    "group_headers",
    "is_active",
    "is_external",
    "is_mailto",
    "is_tel",
    "main",
    "normalize",
    "resolve_category_tree",
    "resolve_headers",
    "resolve_item",
    "resolve_matching_config",
    "resolve_nav_link_item",
    "resolve_page",
    "resolve_path",
    "resolve_sidebar",
    "resolve_sidebar_items",
    "select_sidebar_config",
]
