"""Unit tests for sidebar configuration acceptance and site loading.

Malformed sidebar entries must be rejected when configuration is accepted,
with a message that locates the offending entry.

Usage
-----
Run ``pytest tests/test_config.py -v``. No special fixtures are required
beyond pytest's built-in ``tmp_path``.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_sidebar.config import (
    NavLinkItem,
    PageLink,
    SidebarConfigError,
    SidebarGroup,
    TitledPageLink,
    build_page,
    build_theme_config,
    decode_sidebar_config,
    decode_sidebar_item,
    load_site_data,
)
from docs_sidebar.models import Heading

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_decode_item_variants() -> None:
    """Strings, pairs and mappings decode to their tagged variants."""
    assert decode_sidebar_item("/guide/") == PageLink("/guide/")
    assert decode_sidebar_item(["/guide/", "Guide"]) == TitledPageLink("/guide/", "Guide")
    assert decode_sidebar_item(("/a", "A")) == TitledPageLink("/a", "A")
    assert decode_sidebar_item({"path": "/a", "title": "A"}) == SidebarGroup(
        title="A", path="/a"
    )


def test_decode_group_options() -> None:
    """Group options and nested children are decoded recursively."""
    group = decode_sidebar_item(
        {
            "title": "Guide",
            "collapsable": False,
            "sidebar_depth": 2,
            "children": ["", ["setup", "Setup"]],
        }
    )
    assert group == SidebarGroup(
        title="Guide",
        sidebar_depth=2,
        collapsable=False,
        children=(PageLink(""), TitledPageLink("setup", "Setup")),
    )


def test_decode_group_accepts_camel_case_depth() -> None:
    """``sidebarDepth`` is read as well as ``sidebar_depth``."""
    group = decode_sidebar_item({"title": "G", "sidebarDepth": 2, "children": []})
    assert isinstance(group, SidebarGroup)
    assert group.sidebar_depth == 2
    with pytest.raises(SidebarConfigError, match=r"sidebar\.sidebarDepth"):
        decode_sidebar_item({"path": "/a", "sidebarDepth": "deep"})


def test_decode_empty_children_is_declared() -> None:
    """An empty children list differs from an absent one."""
    group = decode_sidebar_item({"path": "/a", "children": []})
    assert isinstance(group, SidebarGroup)
    assert group.children == ()


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        (42, "must be a string"),
        (["/a"], "pair"),
        (["/a", "A", "extra"], "pair"),
        (["/a", 1], "pair"),
        ({"title": "Orphan"}, "must declare 'path' or 'children'"),
        ({"path": 3}, r"sidebar\.path must be a string"),
        ({"path": "/a", "sidebar_depth": "2"}, "must be an integer"),
        ({"children": "oops"}, "children must be a list"),
    ],
)
def test_decode_rejects_malformed_items(raw: object, message: str) -> None:
    """Unknown shapes fail fast with a located message."""
    with pytest.raises(SidebarConfigError, match=message):
        decode_sidebar_item(raw)


def test_nested_error_reports_location() -> None:
    """Errors inside sections name the prefix and index of the entry."""
    with pytest.raises(SidebarConfigError, match=r"sidebar\['/guide/'\]\[1\]"):
        decode_sidebar_config({"/guide/": ["", 7]})


def test_decode_sidebar_config_shapes() -> None:
    """Modes, lists and mappings are accepted; other strings are not."""
    assert decode_sidebar_config(None) is None
    assert decode_sidebar_config(False) is None
    assert decode_sidebar_config("auto") == "auto"
    assert decode_sidebar_config("wiki") == "wiki"
    assert decode_sidebar_config(["/a"]) == [PageLink("/a")]
    assert decode_sidebar_config({"/a/": ["x"]}) == {"/a/": [PageLink("x")]}
    with pytest.raises(SidebarConfigError, match="auto, wiki"):
        decode_sidebar_config("sometimes")
    with pytest.raises(SidebarConfigError, match="list of sidebar items"):
        decode_sidebar_config({"/a/": "x"})


def test_build_page_defaults() -> None:
    """regular_path and key both default to path."""
    page = build_page(
        {"path": "/a.html", "title": "A", "headers": [{"level": 2, "title": "H"}]}
    )
    assert page.regular_path == "/a.html"
    assert page.key == "/a.html"
    assert page.headers == [Heading(level=2, title="H", slug="")]
    assert page.sidebar is None


def test_build_page_key_ignores_regular_path() -> None:
    """An explicit regular_path does not change the default key."""
    page = build_page({"path": "/a.html", "regular_path": "/a.md", "title": "A"})
    assert page.key == "/a.html"


def test_build_page_requires_path() -> None:
    """Pages without a path are rejected."""
    with pytest.raises(SidebarConfigError, match="missing 'path'"):
        build_page({"title": "A"}, "pages[0]")


def test_build_page_validates_frontmatter_sidebar() -> None:
    """A bad frontmatter sidebar fails while loading the page."""
    with pytest.raises(SidebarConfigError, match="frontmatter"):
        build_page({"path": "/a", "frontmatter": {"sidebar": "bogus"}})


def test_build_page_decodes_frontmatter_sidebar() -> None:
    """A valid frontmatter sidebar is stored decoded on the page."""
    page = build_page({"path": "/a", "frontmatter": {"sidebar": {"/a/": ["x"]}}})
    assert page.sidebar == {"/a/": [PageLink("x")]}
    disabled = build_page({"path": "/b", "frontmatter": {"sidebar": False}})
    assert disabled.sidebar is False


def test_build_theme_config_locales_and_nav() -> None:
    """Locales nest theme configs and nav entries are decoded."""
    theme = build_theme_config(
        {
            "sidebar": "auto",
            "nav": [
                {"text": "Guide", "link": "/guide/"},
                {"text": "More", "items": [{"text": "API", "link": "/api/"}]},
            ],
            "locales": {"/zh/": {"sidebar": ["/zh/"]}},
        }
    )
    assert theme.sidebar == "auto"
    assert theme.nav[1] == NavLinkItem(
        text="More", items=(NavLinkItem(text="API", link="/api/"),)
    )
    assert theme.for_locale("/zh/").sidebar == [PageLink("/zh/")]
    assert theme.for_locale("/de/") is theme
    assert theme.for_locale(None) is theme


def test_load_site_data(tmp_path: Path) -> None:
    """The YAML loader builds pages and a decoded theme."""
    site_file = tmp_path / "site.yaml"
    site_file.write_text(
        """
theme:
  sidebar:
    /guide/:
      - ""
      - [setup, Setup]
pages:
  - path: /guide/
    title: Guide
  - path: /guide/setup.html
    regular_path: /guide/setup.md
    title: Setup
    key: v-setup
    headers:
      - {level: 2, title: Install, slug: install}
""".strip()
        + "\n",
        encoding="utf-8",
    )
    site = load_site_data(site_file)
    assert [page.path for page in site.pages] == ["/guide/", "/guide/setup.html"]
    assert site.pages[1].key == "v-setup"
    assert site.theme_config.sidebar == {
        "/guide/": [PageLink(""), TitledPageLink("setup", "Setup")]
    }
    assert site.find_page("/guide/setup.md") is site.pages[1]
    assert site.find_page("/nowhere") is None


def test_load_site_data_missing_file(tmp_path: Path) -> None:
    """A missing site file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_data(tmp_path / "absent.yaml")


def test_load_site_data_requires_mapping(tmp_path: Path) -> None:
    """A non-mapping document is rejected."""
    site_file = tmp_path / "site.yaml"
    site_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_site_data(site_file)
