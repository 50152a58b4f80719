"""Resolve relative sidebar references against a base path.

This is filesystem-style path algebra rather than URL resolution: ``..`` and
``.`` segments are folded over a stack of base segments, and the result always
starts with ``/``. Protocol-relative ``//`` references, query strings (beyond a
bare ``?query`` suffix) and percent-encoding are left to the caller.

Examples
--------
>>> from docs_sidebar.relative_path import resolve_path
>>> resolve_path("../b.md", "/guide/a.md")
'/b.md'
>>> resolve_path("./c.md", "/guide/a.md")
'/guide/c.md'
>>> resolve_path("intro", "/guide/", append=True)
'/guide/intro'
"""

from __future__ import annotations


def resolve_path(relative: str, base: str, *, append: bool = False) -> str:
    """Return ``relative`` resolved against ``base`` as an absolute path.

    Parameters
    ----------
    relative : str
        Reference to resolve. Absolute references (leading ``/``) are returned
        unchanged; ``?query`` and ``#fragment`` references are appended to
        ``base``.
    base : str
        Path the reference is relative to. By default it is treated as a
        file-like reference, so its last segment is dropped before resolving.
    append : bool, optional
        Treat ``base`` as a directory and keep its last segment. A base with a
        trailing slash already ends in an empty segment, which is dropped
        either way.

    Returns
    -------
    str
        The resolved path, always starting with ``/``.
    """
    if relative.startswith("/"):
        return relative
    if relative.startswith(("?", "#")):
        return base + relative

    stack = base.split("/")
    if not append or not stack[-1]:
        stack.pop()

    for segment in relative.removeprefix("/").split("/"):
        if segment == "..":
            if stack:
                stack.pop()
        elif segment != ".":
            stack.append(segment)

    if not stack or stack[0] != "":
        stack.insert(0, "")
    return "/".join(stack)


__all__ = ["resolve_path"]
