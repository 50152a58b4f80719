"""Unit tests for the path normalization helpers.

These tests pin down how link paths are canonicalized for comparison, how
outbound links are detected, how the ``.html`` link form is derived, and when a
navigation entry counts as active for a route.

Usage
-----
Run ``pytest tests/test_paths.py -v`` to execute the suite.
"""

from __future__ import annotations

import pytest

from docs_sidebar.models import Route
from docs_sidebar.paths import (
    ensure_ending_slash,
    ensure_ext,
    get_hash,
    is_active,
    is_external,
    is_mailto,
    is_tel,
    normalize,
    resolve_dir_path,
    resolve_parent_path,
)

SAMPLE_PATHS = [
    "/guide/intro.md",
    "/guide/intro.html#setup",
    "/guide/",
    "/guide/My%20Page.MD",
    "/guide/a.md.html",
    "/guide/%2541",
    "/guide/c%23.md",
    "/guide/a%2Fb.md",
    "https://example.com/docs.html",
    "",
]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/guide/intro.md", "/guide/intro"),
        ("/guide/intro.html", "/guide/intro"),
        ("/guide/intro.HTML", "/guide/intro"),
        ("/guide/intro.md#setup", "/guide/intro"),
        ("/guide/My%20Page.md", "/guide/My Page"),
        ("/guide/", "/guide/"),
        ("/guide/intro", "/guide/intro"),
    ],
)
def test_normalize_strips_hash_and_extension(path: str, expected: str) -> None:
    """normalize should decode, drop the fragment and strip extensions."""
    assert normalize(path) == expected, f"unexpected key for {path!r}"


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_normalize_is_idempotent(path: str) -> None:
    """Normalizing twice should equal normalizing once."""
    once = normalize(path)
    assert normalize(once) == once, f"normalize not idempotent for {path!r}"


def test_normalize_keeps_reserved_escapes() -> None:
    """Encoded reserved characters stay encoded and never start a fragment."""
    assert normalize("/guide/c%23.md") == "/guide/c%23"
    assert normalize("/guide/a%2Fb.md") == "/guide/a%2Fb"
    assert normalize("/guide/c%2523.md") == "/guide/c%23"
    assert normalize("/guide/caf%C3%A9%3F.md") == "/guide/café%3F"


def test_get_hash() -> None:
    """get_hash should return the fragment including ``#`` or None."""
    assert get_hash("/guide/intro.html#setup") == "#setup"
    assert get_hash("/guide/intro.html") is None


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("https://example.com", True),
        ("HTTP://example.com", True),
        ("mailto:team@example.com", True),
        ("tel:+100", True),
        ("/guide/", False),
        ("guide/intro.md", False),
        ("./a:b", False),
    ],
)
def test_is_external(path: str, expected: bool) -> None:
    """Only paths opening with a letters-only scheme are external."""
    assert is_external(path) is expected


def test_mailto_and_tel_detection() -> None:
    """mailto: and tel: links are recognized by prefix."""
    assert is_mailto("mailto:team@example.com")
    assert not is_mailto("https://example.com/mailto:x")
    assert is_tel("tel:+100")
    assert not is_tel("/tel:+100")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/guide/intro.md", "/guide/intro.html"),
        ("/guide/intro", "/guide/intro.html"),
        ("/guide/intro.md#setup", "/guide/intro.html#setup"),
        ("/guide/", "/guide/"),
        ("/guide/#top", "/guide/#top"),
        ("https://example.com/a.md", "https://example.com/a.md"),
        ("mailto:team@example.com", "mailto:team@example.com"),
        ("tel:+100", "tel:+100"),
        ("/guide/c%23.md", "/guide/c%23.html"),
        ("/guide/c%23.md#intro", "/guide/c%23.html#intro"),
    ],
)
def test_ensure_ext(path: str, expected: str) -> None:
    """ensure_ext should add ``.html`` to internal file paths only."""
    assert ensure_ext(path) == expected


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_ensure_ext_is_idempotent(path: str) -> None:
    """Applying ensure_ext twice should equal applying it once."""
    once = ensure_ext(path)
    assert ensure_ext(once) == once, f"ensure_ext not idempotent for {path!r}"


def test_is_active_matches_same_page_without_hashes() -> None:
    """A link without fragments is active on its own page."""
    assert is_active(Route(path="/guide/"), "/guide/")


def test_is_active_rejects_different_hash() -> None:
    """A link whose fragment differs from the route fragment is inactive."""
    assert not is_active(Route(path="/guide/", hash="#a"), "/guide/#b")


def test_is_active_link_without_hash_matches_any_route_hash() -> None:
    """A fragment-less link stays active whatever the route fragment is."""
    assert is_active(Route(path="/guide/", hash="#a"), "/guide/")
    assert is_active(Route(path="/guide/intro.html", hash="#b"), "/guide/intro.md")


def test_is_active_decodes_route_hash() -> None:
    """The route fragment is percent-decoded before comparison."""
    route = Route(path="/guide/", hash="#caf%C3%A9")
    assert is_active(route, "/guide/#café")


def test_is_active_requires_same_page() -> None:
    """Links to other pages are never active."""
    assert not is_active(Route(path="/guide/a.html"), "/guide/b.html")


def test_ensure_ending_slash() -> None:
    """Routes gain a trailing slash unless they end in ``/`` or ``.html``."""
    assert ensure_ending_slash("/guide") == "/guide/"
    assert ensure_ending_slash("/guide/") == "/guide/"
    assert ensure_ending_slash("/guide/a.html") == "/guide/a.html"


def test_directory_helpers() -> None:
    """Directory and parent helpers keep a trailing slash."""
    assert resolve_dir_path("/guide/sub/b.html") == "/guide/sub/"
    assert resolve_dir_path("/guide/sub/") == "/guide/sub/"
    assert resolve_parent_path("/guide/sub/") == "/guide/"
    assert resolve_parent_path("/guide/sub/b.html") == "/guide/sub/"
    assert resolve_parent_path("/guide/") == "/"
