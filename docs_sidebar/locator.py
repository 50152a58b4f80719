"""Map raw sidebar references onto concrete pages."""

from __future__ import annotations

import logging
import typing as typ

from .models import ExternalNode, PageNode, UnresolvedNode
from .paths import ensure_ext, is_external, normalize
from .relative_path import resolve_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Page

logger = logging.getLogger(__name__)


def resolve_page(
    pages: cabc.Sequence[Page], raw_path: str, base: str | None = None
) -> ExternalNode | PageNode | UnresolvedNode:
    """Resolve ``raw_path`` to a navigation node.

    Parameters
    ----------
    pages : Sequence[Page]
        Candidate pages, scanned in order; the first match wins.
    raw_path : str
        Reference as written in the sidebar configuration.
    base : str, optional
        Path that relative references are resolved against. References are
        used verbatim when ``None``.

    Returns
    -------
    ExternalNode | PageNode | UnresolvedNode
        An :class:`ExternalNode` for outbound links, a :class:`PageNode`
        copied from the matching page with its ``path`` in ``.html`` form, or
        an :class:`UnresolvedNode` placeholder when nothing matches.

    Notes
    -----
    A miss is logged once at ``ERROR`` level and never raises, so one dangling
    reference does not blank out the rest of the navigation.
    """
    if is_external(raw_path):
        return ExternalNode(path=raw_path)
    if base:
        raw_path = resolve_path(raw_path, base)
    target = normalize(raw_path)
    for page in pages:
        if normalize(page.regular_path) == target:
            return PageNode.from_page(page, ensure_ext(page.path))
    logger.error(
        'No matching page found for sidebar item "%s"',
        raw_path,
        extra={"raw_path": raw_path},
    )
    return UnresolvedNode(raw_path=raw_path)


__all__ = ["resolve_page"]
