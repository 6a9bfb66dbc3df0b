# File: link_scout/report/__init__.py
"""link_scout.report: output rendering (text or JSON lines) and saving to a file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from link_scout.crawler.models import MatchResult
from link_scout.report.json_report import render_json


def render_text(records: Iterable[MatchResult]) -> List[str]:
    """Bare values, one per line."""
    return [record.value for record in records]


def render_lines(records: Iterable[MatchResult], output_format: str = "text") -> List[str]:
    """Render *records* in the selected output format (``text`` or ``json``)."""
    if output_format == "json":
        return render_json(records)
    if output_format == "text":
        return render_text(records)
    raise ValueError(f"Unknown output format: {output_format}")


def save_lines(lines: Iterable[str], path: Union[str, Path]) -> Path:
    """Write *lines* to *path*, newline-terminated, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        for line in lines:
            fh.write(line + "\n")
    return p


__all__ = ["render_text", "render_json", "render_lines", "save_lines"]
