"""Resolve navbar entries into renderable links and dropdowns."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .paths import ensure_ext, is_external

if typ.TYPE_CHECKING:
    from .config import NavLinkItem


@dc.dataclass(slots=True)
class NavLink:
    """A navbar entry ready for rendering.

    Attributes
    ----------
    type : str
        ``"links"`` for a dropdown with nested items, ``"link"`` otherwise.
    text : str
        Label shown in the navbar.
    link : str or None
        Target in ``.html`` form for internal pages, unchanged for outbound
        links. ``None`` for dropdown headers without a target.
    items : list[NavLink]
        Nested entries of a dropdown.
    """

    type: str
    text: str
    link: str | None = None
    items: list[NavLink] = dc.field(default_factory=list)

    @property
    def external(self) -> bool:
        """Whether the link leaves the site."""
        return self.link is not None and is_external(self.link)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the entry."""
        result: dict[str, typ.Any] = {"type": self.type, "text": self.text}
        if self.link is not None:
            result["link"] = self.link
        if self.items:
            result["items"] = [item.to_dict() for item in self.items]
        return result


def resolve_nav_link_item(item: NavLinkItem) -> NavLink:
    """Tag ``item`` as a ``links`` dropdown or a single ``link``."""
    return NavLink(
        type="links" if item.items else "link",
        text=item.text,
        link=ensure_ext(item.link) if item.link is not None else None,
        items=[resolve_nav_link_item(child) for child in item.items],
    )


__all__ = ["NavLink", "resolve_nav_link_item"]
