"""Pick the sidebar section that applies to a route.

Multi-section sidebars map path prefixes to item lists. Prefixes are tried in
declaration order and the first one that prefixes the route wins, so
configuration should list specific prefixes (``/guide/advanced/``) before
general ones (``/``).

Examples
--------
>>> from docs_sidebar.config import PageLink
>>> from docs_sidebar.matcher import resolve_matching_config
>>> config = {"/guide/": [PageLink("intro")], "/": [PageLink("")]}
>>> resolve_matching_config("/guide/intro", config).base
'/guide/'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from urllib.parse import quote

from ._constants import URI_SAFE_CHARS
from .paths import ensure_ending_slash

if typ.TYPE_CHECKING:
    from .config import SidebarItem


@dc.dataclass(slots=True)
class SidebarMatch:
    """The sidebar section selected for a route.

    Attributes
    ----------
    base : str
        Prefix the section was declared under; relative item paths resolve
        against it.
    items : list[SidebarItem]
        Declared items of the section.
    """

    base: str
    items: list[SidebarItem]


def resolve_matching_config(
    regular_path: str,
    config: cabc.Sequence[SidebarItem] | cabc.Mapping[str, cabc.Sequence[SidebarItem]],
) -> SidebarMatch | None:
    """Return the sidebar section matching ``regular_path``.

    A plain sequence is a single section rooted at ``/``. For a mapping, the
    first prefix (URI-encoded) that starts the route path wins, after the route
    has been given a trailing slash unless it ends in ``/`` or ``.html``.
    Returns ``None`` when no prefix applies.
    """
    if not isinstance(config, cabc.Mapping):
        return SidebarMatch(base="/", items=list(config))
    route = ensure_ending_slash(regular_path)
    for base, items in config.items():
        if route.startswith(quote(base, safe=URI_SAFE_CHARS)):
            return SidebarMatch(base=base, items=list(items))
    return None


__all__ = ["SidebarMatch", "resolve_matching_config"]
