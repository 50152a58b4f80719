"""Common literal values used across docs_sidebar.

These constants keep the path patterns and sidebar mode names centralized so
the resolvers, the configuration loader, and tests can import the same values
without drifting. Intended for internal use within the docs_sidebar package.

Examples
--------
>>> from docs_sidebar import _constants
>>> bool(_constants.OUTBOUND_PATTERN.match("https://example.com"))
True
>>> _constants.EXT_PATTERN.sub("", "/guide/intro.md")
'/guide/intro'
"""

import re

HASH_PATTERN = re.compile(r"#.*$", re.DOTALL)
EXT_PATTERN = re.compile(r"(\.(md|html))+$", re.IGNORECASE)
ENDING_SLASH_PATTERN = re.compile(r"/$")
ENDING_SLASH_OR_HTML_PATTERN = re.compile(r"(\.html|/)$")
OUTBOUND_PATTERN = re.compile(r"^[a-z]+:", re.IGNORECASE)
MAILTO_PATTERN = re.compile(r"^mailto:")
TEL_PATTERN = re.compile(r"^tel:")
# Escapes of ``# $ & + , / : ; = ? @``, which ``decodeURI`` leaves encoded.
RESERVED_ESCAPE_PATTERN = re.compile(r"(%(?:2[346BCFbcf]|3[ABDFabdf]|40))")

AUTO_SIDEBAR = "auto"
WIKI_SIDEBAR = "wiki"
SIDEBAR_MODES = frozenset({AUTO_SIDEBAR, WIKI_SIDEBAR})

# Characters left untouched by JavaScript's ``encodeURI``.
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"
