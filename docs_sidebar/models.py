"""Dataclasses describing pages, headings, routes, and navigation nodes.

Pages and headings are the read-only input supplied by the page-loading
collaborator. Navigation nodes are the output produced by the sidebar
resolvers; each variant carries a class-level ``type`` tag so renderers can
dispatch on it, and ``to_dict`` serializes a node tree for JSON consumers.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .config.models import SidebarConfig


@dc.dataclass(slots=True)
class Heading:
    """A heading extracted from a page outline.

    Attributes
    ----------
    level : int
        Heading depth; ``2`` for ``<h2>``, ``3`` for ``<h3>`` and so on.
    title : str
        Rendered heading text.
    slug : str
        Anchor identifier used in ``#fragment`` links.
    children : list[Heading]
        Nested headings. Empty on input; populated by
        :func:`docs_sidebar.headings.group_headers`.
    """

    level: int
    title: str
    slug: str = ""
    children: list[Heading] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the heading and its children."""
        result: dict[str, typ.Any] = {
            "level": self.level,
            "title": self.title,
            "slug": self.slug,
        }
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dc.dataclass(slots=True)
class Page:
    """Resolved metadata for a single documentation source file.

    Attributes
    ----------
    path : str
        Output-facing URL path (for example ``/guide/intro.html``).
    regular_path : str
        Path before link-suffix normalization, used for matching sidebar
        references.
    title : str
        Page title.
    key : str
        Identifier that is stable per source file.
    frontmatter : dict[str, Any]
        Parsed frontmatter; only the ``sidebar`` key is consulted here.
    headers : list[Heading]
        Flat, document-order heading outline.
    sidebar : SidebarConfig, False or None
        Decoded ``sidebar`` frontmatter override, set on construction.
        ``False`` disables the sidebar; ``None`` means no override.

    Raises
    ------
    SidebarConfigError
        If the ``sidebar`` frontmatter override is malformed.
    """

    path: str
    regular_path: str
    title: str
    key: str
    frontmatter: dict[str, typ.Any] = dc.field(default_factory=dict)
    headers: list[Heading] = dc.field(default_factory=list)
    sidebar: SidebarConfig | typ.Literal[False] | None = dc.field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if "sidebar" not in self.frontmatter:
            return
        override = self.frontmatter["sidebar"]
        if override is False:
            self.sidebar = False
            return
        from .config.helpers import decode_sidebar_config

        self.sidebar = decode_sidebar_config(
            override, f"{self.path} frontmatter.sidebar"
        )


@dc.dataclass(slots=True)
class Route:
    """The route currently displayed, used for active-link checks."""

    path: str
    hash: str = ""


@dc.dataclass(slots=True)
class ExternalNode:
    """Link to a target outside the page set (``https:``, ``mailto:`` ...)."""

    type: typ.ClassVar[str] = "external"

    path: str
    title: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the node."""
        return _compact({"type": self.type, "path": self.path, "title": self.title})


@dc.dataclass(slots=True)
class PageNode:
    """Link to a page of the site, overlaid with its output path."""

    type: typ.ClassVar[str] = "page"

    path: str
    title: str | None
    key: str | None = None
    regular_path: str | None = None
    headers: list[Heading] = dc.field(default_factory=list)
    frontmatter: dict[str, typ.Any] = dc.field(default_factory=dict)

    @classmethod
    def from_page(cls, page: Page, path: str) -> PageNode:
        """Copy ``page`` into a node whose ``path`` is replaced by ``path``."""
        return cls(
            path=path,
            title=page.title,
            key=page.key,
            regular_path=page.regular_path,
            headers=list(page.headers),
            frontmatter=dict(page.frontmatter),
        )

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the node."""
        return _compact(
            {
                "type": self.type,
                "path": self.path,
                "title": self.title,
                "key": self.key,
                "regular_path": self.regular_path,
                "headers": [header.to_dict() for header in self.headers] or None,
            }
        )


@dc.dataclass(slots=True)
class AutoNode:
    """In-page anchor derived from a page's level-two heading."""

    type: typ.ClassVar[str] = "auto"

    path: str
    title: str
    base_path: str
    children: list[Heading] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the node."""
        return {
            "type": self.type,
            "path": self.path,
            "title": self.title,
            "base_path": self.base_path,
            "children": [child.to_dict() for child in self.children],
        }


@dc.dataclass(slots=True)
class GroupNode:
    """A titled group of navigation nodes.

    ``path`` is ``None`` when the group header does not link to a page and
    should render as an unlinked heading.
    """

    type: typ.ClassVar[str] = "group"

    title: str | None
    path: str | None = None
    collapsable: bool = False
    sidebar_depth: int | None = None
    depth: int = 1
    children: list[NavigationNode] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the group and its children."""
        result = _compact(
            {
                "type": self.type,
                "title": self.title,
                "path": self.path,
                "collapsable": self.collapsable,
                "sidebar_depth": self.sidebar_depth,
                "depth": self.depth,
            }
        )
        result["children"] = [child.to_dict() for child in self.children]
        return result


@dc.dataclass(slots=True)
class UnresolvedNode:
    """Placeholder substituted for a reference that matched no page.

    Renderers skip it; ``raw_path`` keeps the failed reference around for
    diagnostics.
    """

    type: typ.ClassVar[str | None] = None

    raw_path: str
    title: str | None = None
    path: typ.ClassVar[None] = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the placeholder."""
        return _compact({"unresolved": self.raw_path, "title": self.title})


NavigationNode = ExternalNode | PageNode | AutoNode | GroupNode | UnresolvedNode


def _compact(payload: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Drop ``None`` values from ``payload``."""
    return {key: value for key, value in payload.items() if value is not None}


__all__ = [
    "AutoNode",
    "ExternalNode",
    "GroupNode",
    "Heading",
    "NavigationNode",
    "Page",
    "PageNode",
    "Route",
    "UnresolvedNode",
]
