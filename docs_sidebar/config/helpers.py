"""Utility helpers that decode raw configuration into typed sidebar items.

Decoding happens once, when configuration is accepted. Resolvers then match on
the decoded variants instead of inspecting raw shapes on every recursive call.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import SIDEBAR_MODES
from ..models import Heading, Page
from .models import (
    NavLinkItem,
    PageLink,
    SidebarConfig,
    SidebarConfigError,
    SidebarGroup,
    SidebarItem,
    TitledPageLink,
)


def _optional_str(value: object | None, location: str) -> str | None:
    """Return ``value`` when it is a string or ``None``, otherwise raise."""
    if value is None or isinstance(value, str):
        return value
    msg = f"{location} must be a string, got {type(value).__name__}."
    raise SidebarConfigError(msg)


def _optional_int(value: object | None, location: str) -> int | None:
    """Return ``value`` when it is an integer or ``None``, otherwise raise."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{location} must be an integer, got {type(value).__name__}."
        raise SidebarConfigError(msg)
    return value


def decode_sidebar_item(raw: object, location: str = "sidebar") -> SidebarItem:
    """Decode one raw sidebar entry.

    Parameters
    ----------
    raw : object
        A page path string, a ``[path, title]`` pair, or a mapping with
        ``path``, ``title``, ``sidebarDepth`` (or ``sidebar_depth``),
        ``collapsable`` and ``children`` keys.
    location : str, optional
        Human-readable position of the entry used in error messages.

    Returns
    -------
    SidebarItem
        The decoded :class:`PageLink`, :class:`TitledPageLink` or
        :class:`SidebarGroup`.

    Raises
    ------
    SidebarConfigError
        If the entry has any other shape, a pair does not hold exactly two
        strings, or a mapping declares neither ``path`` nor ``children``.
    """
    match raw:
        case str():
            return PageLink(raw)
        case [str() as path, str() as title]:
            return TitledPageLink(path, title)
        case cabc.Mapping():
            return _decode_group(raw, location)
        case cabc.Sequence():
            msg = f"{location} must be a [path, title] pair of strings."
            raise SidebarConfigError(msg)
        case _:
            msg = (
                f"{location} must be a string, a [path, title] pair or a mapping, "
                f"got {type(raw).__name__}."
            )
            raise SidebarConfigError(msg)


def _decode_group(raw: cabc.Mapping[str, typ.Any], location: str) -> SidebarGroup:
    """Decode a mapping-shaped sidebar entry."""
    path = _optional_str(raw.get("path"), f"{location}.path")
    title = _optional_str(raw.get("title"), f"{location}.title")
    raw_children = raw.get("children")
    if path is None and raw_children is None:
        msg = f"{location} must declare 'path' or 'children'."
        raise SidebarConfigError(msg)

    children: tuple[SidebarItem, ...] | None = None
    if raw_children is not None:
        if isinstance(raw_children, str) or not isinstance(raw_children, cabc.Sequence):
            msg = f"{location}.children must be a list."
            raise SidebarConfigError(msg)
        children = tuple(
            decode_sidebar_item(child, f"{location}.children[{index}]")
            for index, child in enumerate(raw_children)
        )

    depth_key = "sidebarDepth" if "sidebarDepth" in raw else "sidebar_depth"
    return SidebarGroup(
        title=title,
        path=path,
        sidebar_depth=_optional_int(raw.get(depth_key), f"{location}.{depth_key}"),
        collapsable=raw.get("collapsable") is not False,
        children=children,
    )


def _decode_section(raw: object, location: str) -> list[SidebarItem]:
    """Decode a list of sidebar entries."""
    if isinstance(raw, str) or not isinstance(raw, cabc.Sequence):
        msg = f"{location} must be a list of sidebar items."
        raise SidebarConfigError(msg)
    return [
        decode_sidebar_item(item, f"{location}[{index}]")
        for index, item in enumerate(raw)
    ]


def decode_sidebar_config(
    raw: object, location: str = "sidebar"
) -> SidebarConfig | None:
    """Decode a raw sidebar configuration value.

    Returns ``None`` for a missing or ``false`` value, the mode string for
    ``"auto"`` and ``"wiki"``, a list of items for a single-section sidebar, or
    an ordered ``prefix -> items`` mapping for a multi-section sidebar.

    Raises
    ------
    SidebarConfigError
        If the value is an unknown mode string or has an unsupported shape.
    """
    match raw:
        case None | False:
            return None
        case str() if raw in SIDEBAR_MODES:
            return raw
        case str():
            modes = ", ".join(sorted(SIDEBAR_MODES))
            msg = f"{location} must be one of {modes} when given as a string."
            raise SidebarConfigError(msg)
        case cabc.Mapping():
            return {
                str(prefix): _decode_section(items, f"{location}[{prefix!r}]")
                for prefix, items in raw.items()
            }
        case _:
            return _decode_section(raw, location)


def decode_nav_item(raw: object, location: str = "nav") -> NavLinkItem:
    """Decode one navbar entry with ``text``, ``link`` and nested ``items``."""
    if not isinstance(raw, cabc.Mapping):
        msg = f"{location} must be a mapping."
        raise SidebarConfigError(msg)
    text = _optional_str(raw.get("text"), f"{location}.text")
    if not text:
        msg = f"{location} is missing 'text'."
        raise SidebarConfigError(msg)
    raw_items = raw.get("items") or []
    if isinstance(raw_items, str) or not isinstance(raw_items, cabc.Sequence):
        msg = f"{location}.items must be a list."
        raise SidebarConfigError(msg)
    return NavLinkItem(
        text=text,
        link=_optional_str(raw.get("link"), f"{location}.link"),
        items=tuple(
            decode_nav_item(item, f"{location}.items[{index}]")
            for index, item in enumerate(raw_items)
        ),
    )


def build_heading(raw: object, location: str) -> Heading:
    """Build a flat :class:`Heading` from its mapping form."""
    if not isinstance(raw, cabc.Mapping):
        msg = f"{location} must be a mapping."
        raise SidebarConfigError(msg)
    level = raw.get("level")
    if isinstance(level, bool) or not isinstance(level, int):
        msg = f"{location}.level must be an integer."
        raise SidebarConfigError(msg)
    return Heading(
        level=level,
        title=str(raw.get("title", "")),
        slug=str(raw.get("slug", "")),
    )


def build_page(raw: object, location: str = "page") -> Page:
    """Build a :class:`Page` from its mapping form.

    ``regular_path`` and ``key`` both default to ``path``. The
    ``frontmatter.sidebar`` override is decoded when the :class:`Page` is
    constructed, so a bad override fails here rather than mid-resolution.
    """
    if not isinstance(raw, cabc.Mapping):
        msg = f"{location} must be a mapping."
        raise SidebarConfigError(msg)
    path = _optional_str(raw.get("path"), f"{location}.path")
    if not path:
        msg = f"{location} is missing 'path'."
        raise SidebarConfigError(msg)
    regular_path = _optional_str(raw.get("regular_path"), f"{location}.regular_path")
    regular_path = regular_path or path
    frontmatter = dict(raw.get("frontmatter") or {})
    raw_headers = raw.get("headers") or []
    return Page(
        path=path,
        regular_path=regular_path,
        title=str(raw.get("title") or ""),
        key=str(raw.get("key") or path),
        frontmatter=frontmatter,
        headers=[
            build_heading(header, f"{location}.headers[{index}]")
            for index, header in enumerate(raw_headers)
        ],
    )


__all__ = [
    "build_heading",
    "build_page",
    "decode_nav_item",
    "decode_sidebar_config",
    "decode_sidebar_item",
]
