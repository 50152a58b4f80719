"""Accept and validate sidebar configuration for docs_sidebar.

This subpackage parses a site YAML file (pages plus theme options), decodes
every sidebar entry into a tagged union (:class:`PageLink`,
:class:`TitledPageLink`, :class:`SidebarGroup`) and returns a :class:`SiteData`
ready for resolution. Malformed entries fail here, with the position of the
offending entry in the message, instead of halfway through a tree walk.

Examples
--------
>>> from docs_sidebar.config import decode_sidebar_config
>>> decode_sidebar_config(["/guide/", ["/guide/setup", "Setup"]])
[PageLink(path='/guide/'), TitledPageLink(path='/guide/setup', title='Setup')]
>>> decode_sidebar_config("auto")
'auto'
"""

from .helpers import (
    build_heading,
    build_page,
    decode_nav_item,
    decode_sidebar_config,
    decode_sidebar_item,
)
from .loader import build_site_data, build_theme_config, load_site_data
from .models import (
    NavLinkItem,
    PageLink,
    SidebarConfig,
    SidebarConfigError,
    SidebarGroup,
    SidebarItem,
    SidebarSection,
    SiteData,
    ThemeConfig,
    TitledPageLink,
)

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
    "build_heading",
    "build_page",
    "build_site_data",
    "build_theme_config",
    "decode_nav_item",
    "decode_sidebar_config",
    "decode_sidebar_item",
    "load_site_data",
]
