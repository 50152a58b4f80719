"""Shared fixtures for docs_sidebar tests.

The ``site_pages`` fixture models a small documentation site with a guide
section (including a nested directory), an API section, and a root page.
Tests that need a single page build one with :func:`make_page`.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_sidebar.models import Heading, Page


def make_page(
    path: str,
    title: str,
    *,
    regular_path: str | None = None,
    key: str | None = None,
    frontmatter: dict[str, typ.Any] | None = None,
    headers: list[Heading] | None = None,
) -> Page:
    """Construct a Page whose regular path is the ``.md`` source path."""
    if regular_path is None:
        regular_path = path if path.endswith("/") else path.removesuffix(".html") + ".md"
    return Page(
        path=path,
        regular_path=regular_path,
        title=title,
        key=key or regular_path,
        frontmatter=frontmatter or {},
        headers=headers or [],
    )


@pytest.fixture
def site_pages() -> list[Page]:
    """Return the pages of a small sample site."""
    return [
        make_page("/", "Home"),
        make_page("/guide/", "Guide"),
        make_page("/guide/getting-started.html", "Getting Started"),
        make_page("/guide/configuration.html", "Configuration"),
        make_page("/guide/advanced/", "Advanced"),
        make_page("/guide/advanced/plugins.html", "Plugins"),
        make_page("/api/", "API"),
        make_page("/api/node.html", "Node API"),
    ]


@pytest.fixture
def page_factory() -> typ.Callable[..., Page]:
    """Return :func:`make_page` for tests that build their own page sets."""
    return make_page
