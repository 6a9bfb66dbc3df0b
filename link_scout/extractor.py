# File: link_scout/extractor.py
"""link_scout.extractor: the quoted URL/path matcher shared by page and script scanning.

The default grammar is one regular expression built from five named
sub-rules, each matching a different shape of reference enclosed in quote
characters::

    absolute_url   "https://host.tld/path", "//cdn.host.tld/x"
    relative_path  "/api/v1/users", "./x", "../y"
    file_path      "static/js/app.min.js?v=1", "user/login.action"
    deep_path      "api/v2/accounts"
    filename       "config.json", "index.php?id=1"

Matches are returned exactly as found, surrounding quotes included; the
aggregator strips them when results are finalized.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence, Tuple

__all__: Sequence[str] = (
    "EXTENSIONS",
    "RULES",
    "DEFAULT_PATTERN",
    "Extractor",
    "default_extractor",
    "extract",
)

#: extensions recognised by the ``filename`` rule
EXTENSIONS: Tuple[str, ...] = ("php", "asp", "aspx", "jsp", "json", "action", "html", "js", "txt", "xml")

_QUOTE = r"""(?:"|')"""
_QUERY = r"""(?:[\?|#][^"|']{0,}|)"""

#: named sub-rules, tried in this order at every position
RULES: Tuple[Tuple[str, str], ...] = (
    ("absolute_url", r"""(?:[a-zA-Z]{1,10}://|//)[^"'/]{1,}\.[a-zA-Z]{2,}[^"']{0,}"""),
    ("relative_path", r"""(?:/|\.\./|\./)[^"'><,;| *()(%%$^/\\\[\]][^"'><,;|()]{1,}"""),
    ("file_path", r"""[a-zA-Z0-9_\-/]{1,}/[a-zA-Z0-9_\-/]{1,}\.(?:[a-zA-Z]{1,4}|action)""" + _QUERY),
    ("deep_path", r"""[a-zA-Z0-9_\-/]{1,}/[a-zA-Z0-9_\-/]{3,}""" + _QUERY),
    ("filename", r"""[a-zA-Z0-9_\-]{1,}\.(?:""" + "|".join(EXTENSIONS) + ")" + _QUERY),
)


def _build_pattern(rules: Sequence[Tuple[str, str]]) -> str:
    alternatives = "|".join(f"(?P<{name}>{body})" for name, body in rules)
    return f"{_QUOTE}(?:{alternatives}){_QUOTE}"


DEFAULT_PATTERN: str = _build_pattern(RULES)


class Extractor:
    """Finds quoted URL-like substrings in arbitrary text (HTML or script bodies)."""

    def __init__(self, pattern: Optional[str] = None) -> None:
        self.pattern: str = pattern or DEFAULT_PATTERN
        self._regex = re.compile(self.pattern)

    def findall(self, text: str) -> List[str]:
        """Return every non-overlapping match in order of appearance."""
        if not text:
            return []
        return [m.group(0) for m in self._regex.finditer(text)]

    def iter_matches(self, text: str) -> Iterator[Tuple[str, str]]:
        """Yield ``(rule_name, match)``; custom patterns without named groups report ``"custom"``."""
        for m in self._regex.finditer(text or ""):
            yield m.lastgroup or "custom", m.group(0)

    def __repr__(self) -> str:
        kind = "default" if self.pattern == DEFAULT_PATTERN else "custom"
        return f"<Extractor pattern={kind}>"


default_extractor = Extractor()


def extract(text: str) -> List[str]:
    """Apply the shared default extractor to *text*."""
    return default_extractor.findall(text)
