"""Derive in-page navigation from a page's heading outline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import AutoNode, GroupNode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Heading, NavigationNode, Page


def group_headers(headers: cabc.Iterable[Heading]) -> list[Heading]:
    """Nest deeper headings under the level-two heading that precedes them.

    Parameters
    ----------
    headers : Iterable[Heading]
        Flat, document-order headings. The input objects are not modified.

    Returns
    -------
    list[Heading]
        Copies of the level-two headings, each carrying the headings that
        follow it up to the next level-two heading as ``children``. Deeper
        headings that appear before the first level-two heading are dropped.
    """
    grouped: list[Heading] = []
    current: Heading | None = None
    for header in headers:
        if header.level == 2:
            current = dc.replace(header, children=[])
            grouped.append(current)
        elif current is not None:
            current.children.append(dc.replace(header, children=[]))
    return grouped


def resolve_headers(page: Page) -> list[GroupNode]:
    """Return the ``auto`` sidebar for ``page``.

    The result is a single non-collapsible group titled after the page with one
    :class:`AutoNode` per level-two heading.
    """
    children: list[NavigationNode] = [
        AutoNode(
            path=f"{page.path}#{header.slug}",
            title=header.title,
            base_path=page.path,
            children=header.children,
        )
        for header in group_headers(page.headers)
    ]
    return [
        GroupNode(
            title=page.title,
            path=None,
            collapsable=False,
            children=children,
        )
    ]


__all__ = ["group_headers", "resolve_headers"]
