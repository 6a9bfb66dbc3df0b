# File: link_scout/utils.py
"""link_scout.utils: seed normalization, script reference resolution and small list helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Iterable, List, Optional, Sequence, Union
from urllib.parse import urlparse

from link_scout.logger import logger

__all__: Sequence[str] = (
    "normalize_url",
    "origin_of",
    "strip_quotes",
    "resolve_reference",
    "read_targets",
    "parse_lines",
    "remove_duplicates",
)

_SCHEMES = ("http://", "https://")
_QUOTES = "\"'"
_MIN_REFERENCE_LEN = 5


def normalize_url(value: str) -> str:
    """Turn a seed domain into a fetchable base URL (``https://`` unless a scheme is given)."""
    value = value.strip()
    if value.startswith(_SCHEMES):
        return value
    return "https://" + value


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` of *url*, without path, query or fragment."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def strip_quotes(value: str) -> str:
    """Remove every single and double quote character from *value*."""
    return value.translate({ord(q): None for q in _QUOTES})


def resolve_reference(reference: str, base_url: str) -> Optional[str]:
    """Resolve a discovered script reference against the seed *base_url*.

    Returns ``None`` for anything that cannot be a script path: too short,
    without ``.js``, or in a form other than absolute, protocol-relative or
    root-relative.
    """
    ref = strip_quotes(reference).strip()
    if len(ref) < _MIN_REFERENCE_LEN or ".js" not in ref:
        return None
    if ref.startswith(_SCHEMES):
        return ref
    if ref.startswith("//"):
        return "https:" + ref
    if ref.startswith("/"):
        return origin_of(base_url) + ref
    logger.debug("Discarded script reference %r (unsupported form)", ref)
    return None


def read_targets(path: Union[str, Path]) -> List[str]:
    """Read a newline-separated targets file, returning non-empty stripped lines."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("Targets list not found: %s", p)
        raise FileNotFoundError(f"Targets file not found: {p}")
    targets = parse_lines(p.read_text(encoding="utf-8").splitlines())
    logger.debug("Loaded %d targets from %s", len(targets), p)
    return targets


def parse_lines(lines: Iterable[str]) -> List[str]:
    return [line.strip() for line in lines if line.strip()]


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Remove duplicates while preserving first-seen order."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique
