"""Canonicalize documentation link paths.

The helpers here turn the many spellings of a page reference (``/guide/a``,
``/guide/a.md``, ``/guide/a.html#intro``, ``/guide/a%20b.md``) into a single
comparison key, classify outbound links, and compute the ``.html`` form used by
rendered navigation.

Examples
--------
>>> from docs_sidebar.paths import ensure_ext, normalize
>>> normalize("/guide/intro.md#setup")
'/guide/intro'
>>> ensure_ext("/guide/intro.md#setup")
'/guide/intro.html#setup'
>>> ensure_ext("/guide/")
'/guide/'
"""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import unquote

from ._constants import (
    ENDING_SLASH_OR_HTML_PATTERN,
    ENDING_SLASH_PATTERN,
    EXT_PATTERN,
    HASH_PATTERN,
    MAILTO_PATTERN,
    OUTBOUND_PATTERN,
    RESERVED_ESCAPE_PATTERN,
    TEL_PATTERN,
)

if typ.TYPE_CHECKING:
    from .models import Route


def _unquote_unreserved(path: str) -> str:
    """Percent-decode ``path`` but keep escapes of URI-reserved characters.

    >>> _unquote_unreserved("/a%20b/c%23d%2Fe")
    '/a b/c%23d%2Fe'
    """
    parts = RESERVED_ESCAPE_PATTERN.split(path)
    # Odd indices hold the reserved escapes captured by the split.
    return "".join(
        part if index % 2 else unquote(part) for index, part in enumerate(parts)
    )


def _decode(path: str) -> str:
    """Percent-decode ``path`` until it stops changing."""
    decoded = _unquote_unreserved(path)
    while decoded != path:
        path = decoded
        decoded = _unquote_unreserved(path)
    return decoded


def normalize(path: str) -> str:
    """Return the canonical comparison key for ``path``.

    The path is percent-decoded, its ``#fragment`` is dropped, and any trailing
    ``.md``/``.html`` extension is stripped (case-insensitively). Escapes of
    reserved characters such as ``%23`` and ``%2F`` stay encoded, so an
    encoded ``#`` is never mistaken for a fragment.

    >>> normalize("/guide/c%23.md")
    '/guide/c%23'
    """
    decoded = HASH_PATTERN.sub("", _decode(path))
    return EXT_PATTERN.sub("", decoded)


def get_hash(path: str) -> str | None:
    """Return the ``#fragment`` of ``path`` including the ``#``, if any."""
    match = HASH_PATTERN.search(path)
    if match:
        return match.group(0)
    return None


def is_external(path: str) -> bool:
    """Return whether ``path`` starts with a URI scheme such as ``https:``."""
    return bool(OUTBOUND_PATTERN.match(path))


def is_mailto(path: str) -> bool:
    """Return whether ``path`` is a ``mailto:`` link."""
    return bool(MAILTO_PATTERN.match(path))


def is_tel(path: str) -> bool:
    """Return whether ``path`` is a ``tel:`` link."""
    return bool(TEL_PATTERN.match(path))


def ensure_ext(path: str) -> str:
    """Return the ``.html`` link form of an internal ``path``.

    External links and directory-like paths (ending in ``/`` once normalized)
    are returned unchanged. Any ``#fragment`` is preserved.
    """
    if is_external(path):
        return path
    hash_fragment = get_hash(path) or ""
    normalized = normalize(path)
    if ENDING_SLASH_PATTERN.search(normalized):
        return path
    return f"{normalized}.html{hash_fragment}"


def is_active(route: Route, path: str) -> bool:
    """Return whether the link ``path`` points at the current ``route``.

    A link without a fragment matches any fragment on the route's page. A link
    with a fragment must match the route's decoded fragment exactly.
    """
    route_hash = unquote(route.hash or "")
    link_hash = get_hash(path)
    if link_hash and route_hash != link_hash:
        return False
    return normalize(route.path) == normalize(path)


def ensure_ending_slash(path: str) -> str:
    """Append ``/`` to ``path`` unless it already ends in ``/`` or ``.html``."""
    if ENDING_SLASH_OR_HTML_PATTERN.search(path):
        return path
    return f"{path}/"


def resolve_dir_path(path: str) -> str:
    """Return the directory containing ``path`` with a trailing slash.

    Directory-like paths (ending in ``/``) are their own directory.

    >>> resolve_dir_path("/guide/intro.html")
    '/guide/'
    >>> resolve_dir_path("/guide/")
    '/guide/'
    """
    if path.endswith("/"):
        return path
    return _with_slash(posixpath.dirname(path))


def resolve_parent_path(path: str) -> str:
    """Return the parent directory of ``path`` with a trailing slash.

    >>> resolve_parent_path("/guide/sub/")
    '/guide/'
    >>> resolve_parent_path("/guide/intro.html")
    '/guide/'
    """
    if path.endswith("/"):
        return _with_slash(posixpath.dirname(path[:-1]))
    return _with_slash(posixpath.dirname(path))


def _with_slash(directory: str) -> str:
    """Append a slash unless ``directory`` is already the root."""
    return directory if directory.endswith("/") else f"{directory}/"


__all__ = [
    "ensure_ending_slash",
    "ensure_ext",
    "get_hash",
    "is_active",
    "is_external",
    "is_mailto",
    "is_tel",
    "normalize",
    "resolve_dir_path",
    "resolve_parent_path",
]
