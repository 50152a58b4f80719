"""Load site data YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ruamel.yaml import YAML

from .helpers import build_page, decode_nav_item, decode_sidebar_config
from .models import SidebarConfigError, SiteData, ThemeConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_data(path: Path) -> SiteData:
    """Load the YAML document describing a site's pages and theme.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site file. The document holds a ``theme``
        mapping (``sidebar``, ``nav``, ``locales``) and a ``pages`` list.

    Returns
    -------
    SiteData
        Pages and the accepted theme configuration, with every sidebar entry
        decoded.

    Raises
    ------
    FileNotFoundError
        If the site file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SidebarConfigError
        If pages or sidebar configuration are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_sidebar.config import load_site_data
    >>> site = load_site_data(Path("site.yaml"))  # doctest: +SKIP
    >>> site.pages[0].path  # doctest: +SKIP
    '/guide/'
    """
    if not path.exists():
        msg = f"Site file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_site_data(loaded)


def build_site_data(raw: cabc.Mapping[str, typ.Any]) -> SiteData:
    """Build :class:`SiteData` from an already parsed mapping."""
    pages_raw = raw.get("pages") or []
    if isinstance(pages_raw, str) or not isinstance(pages_raw, cabc.Sequence):
        msg = "'pages' must be a list of page mappings."
        raise SidebarConfigError(msg)
    pages = [
        build_page(payload, f"pages[{index}]")
        for index, payload in enumerate(pages_raw)
    ]
    theme_config = build_theme_config(raw.get("theme") or {})
    return SiteData(pages=pages, theme_config=theme_config)


def build_theme_config(
    payload: cabc.Mapping[str, typ.Any], location: str = "theme"
) -> ThemeConfig:
    """Build a :class:`ThemeConfig`, decoding sidebars of every locale."""
    if not isinstance(payload, cabc.Mapping):
        msg = f"'{location}' must be a mapping."
        raise SidebarConfigError(msg)
    nav_raw = payload.get("nav") or []
    if isinstance(nav_raw, str) or not isinstance(nav_raw, cabc.Sequence):
        msg = f"{location}.nav must be a list."
        raise SidebarConfigError(msg)
    locales_raw = payload.get("locales") or {}
    if not isinstance(locales_raw, cabc.Mapping):
        msg = f"{location}.locales must be a mapping."
        raise SidebarConfigError(msg)
    return ThemeConfig(
        sidebar=decode_sidebar_config(payload.get("sidebar"), f"{location}.sidebar"),
        nav=[
            decode_nav_item(item, f"{location}.nav[{index}]")
            for index, item in enumerate(nav_raw)
        ],
        locales={
            str(locale): build_theme_config(
                locale_payload or {}, f"{location}.locales[{locale!r}]"
            )
            for locale, locale_payload in locales_raw.items()
        },
    )


__all__ = ["build_site_data", "build_theme_config", "load_site_data"]
