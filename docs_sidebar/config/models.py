"""Typed dataclasses describing accepted sidebar and theme configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ..paths import normalize

if typ.TYPE_CHECKING:
    from ..models import Page


class SidebarConfigError(ValueError):
    """Raised when sidebar or site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class PageLink:
    """Sidebar entry declared as a bare page path."""

    path: str


@dc.dataclass(frozen=True, slots=True)
class TitledPageLink:
    """Sidebar entry declared as a ``[path, title]`` pair."""

    path: str
    title: str


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Sidebar entry declared as a mapping.

    Attributes
    ----------
    title : str or None
        Display title; overrides the page title when the entry is a link.
    path : str or None
        Page the entry (or the group header) links to.
    sidebar_depth : int or None
        Heading levels the renderer expands below linked pages.
    collapsable : bool
        Whether the group can be collapsed; only ``False`` disables it.
    children : tuple[SidebarItem, ...] or None
        Nested entries. ``None`` means the mapping declared no children and
        resolves to a page link; an empty tuple is an explicit empty group.
    """

    title: str | None = None
    path: str | None = None
    sidebar_depth: int | None = None
    collapsable: bool = True
    children: tuple[SidebarItem, ...] | None = None


SidebarItem = PageLink | TitledPageLink | SidebarGroup
SidebarSection = list[SidebarItem]
SidebarConfig = str | SidebarSection | dict[str, SidebarSection]


@dc.dataclass(frozen=True, slots=True)
class NavLinkItem:
    """Navbar entry declared in the theme configuration."""

    text: str
    link: str | None = None
    items: tuple[NavLinkItem, ...] = ()


@dc.dataclass(slots=True)
class ThemeConfig:
    """Theme options relevant to navigation.

    Attributes
    ----------
    sidebar : SidebarConfig or None
        ``"auto"``, ``"wiki"``, a list of items, or a mapping of path prefix to
        item lists. ``None`` when no sidebar is configured.
    nav : list[NavLinkItem]
        Navbar entries.
    locales : dict[str, ThemeConfig]
        Per-locale overrides keyed by locale path (for example ``/zh/``).
    """

    sidebar: SidebarConfig | None = None
    nav: list[NavLinkItem] = dc.field(default_factory=list)
    locales: dict[str, ThemeConfig] = dc.field(default_factory=dict)

    def for_locale(self, locale_path: str | None) -> ThemeConfig:
        """Return the locale override for ``locale_path`` or this config."""
        if locale_path and self.locales:
            return self.locales.get(locale_path) or self
        return self


@dc.dataclass(slots=True)
class SiteData:
    """All pages of a site together with its theme configuration."""

    pages: list[Page]
    theme_config: ThemeConfig = dc.field(default_factory=ThemeConfig)

    def find_page(self, path: str) -> Page | None:
        """Return the page whose path or regular path matches ``path``."""
        target = normalize(path)
        for page in self.pages:
            if target in (normalize(page.path), normalize(page.regular_path)):
                return page
        return None


__all__ = [
    "NavLinkItem",
    "PageLink",
    "SidebarConfig",
    "SidebarConfigError",
    "SidebarGroup",
    "SidebarItem",
    "SidebarSection",
    "SiteData",
    "ThemeConfig",
    "TitledPageLink",
]
