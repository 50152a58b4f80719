"""Build ``wiki`` navigation that mirrors the directory layout of the pages.

Every page under the top-level directory of the current page is placed in a
tree of directory nodes. Directory index pages (paths ending in ``/``) title
and link their directory; other pages become leaves of their directory.

Examples
--------
>>> from docs_sidebar.models import Page
>>> pages = [
...     Page(path="/guide/", regular_path="/guide/", title="Guide", key="g"),
...     Page(path="/guide/a.html", regular_path="/guide/a.md", title="A", key="a"),
... ]
>>> [node.title for node in resolve_category_tree("/guide/a.html", pages)]
['Guide']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .models import GroupNode, PageNode
from .paths import resolve_dir_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavigationNode, Page

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class _Directory:
    """Pages collected for one directory while walking the page set."""

    index: Page | None = None
    pages: list[Page] = dc.field(default_factory=list)
    dirs: dict[str, _Directory] = dc.field(default_factory=dict)


def resolve_main_category(path: str) -> str | None:
    """Return the top-level directory prefix of ``path``.

    ``/guide/intro.html`` yields ``/guide/``. Paths with no directory below
    the root (``/about.html``) yield ``None``.
    """
    segments = path.split("/")
    if len(segments) > 2:
        return f"/{segments[1]}/"
    return None


def resolve_category_tree(
    path: str, pages: cabc.Iterable[Page]
) -> list[NavigationNode]:
    """Return the directory-mirroring navigation tree around ``path``.

    Parameters
    ----------
    path : str
        Output path of the current page; its first segment selects the scope.
    pages : Iterable[Page]
        All pages of the site. The collection is not reordered in place.

    Returns
    -------
    list[NavigationNode]
        One node per top-level directory (the scope directory itself), or an
        empty list when ``path`` has no scope.
    """
    main_dir = resolve_main_category(path)
    if main_dir is None:
        return []
    logger.debug("Building category tree for %s", main_dir)

    root = _Directory()
    placed_keys: set[str] = set()
    for page in sorted(pages, key=lambda candidate: candidate.title or ""):
        if not page.path.startswith(main_dir) or page.key in placed_keys:
            continue
        placed_keys.add(page.key)
        parent = root
        for segment in resolve_dir_path(page.path).split("/")[1:-1]:
            parent = parent.dirs.setdefault(segment, _Directory())
        if page.path.endswith("/"):
            parent.index = page
        else:
            parent.pages.append(page)
    return _tree_links(root.dirs)


def _tree_links(dirs: dict[str, _Directory]) -> list[NavigationNode]:
    """Convert collected directories into navigation nodes."""
    links: list[NavigationNode] = []
    for name, directory in dirs.items():
        title = (directory.index.title if directory.index else None) or name
        link = directory.index.path if directory.index else None
        if not directory.dirs and not directory.pages and link is not None:
            links.append(PageNode(path=link, title=title))
            continue
        group = GroupNode(title=title, path=link, collapsable=False)
        group.children.extend(_tree_links(directory.dirs))
        group.children.extend(
            PageNode(path=page.path, title=page.title) for page in directory.pages
        )
        links.append(group)
    return links


__all__ = ["resolve_category_tree", "resolve_main_category"]
