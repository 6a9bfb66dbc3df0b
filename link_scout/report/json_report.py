# link_scout/report/json_report.py

"""
JSON-lines rendering of finalized results: one ``{"url", "value"}`` object per line.
"""
import json
from typing import Iterable, List

from link_scout.crawler.models import MatchResult


def render_json(records: Iterable[MatchResult]) -> List[str]:
    """
    Render each record as a compact JSON object.

    :param records: finalized MatchResult values
    :return: one JSON document per record

    Example:
    ```python
    from link_scout.report.json_report import render_json
    for line in render_json(aggregator.finalize_records()):
        print(line)
    ```
    """
    return [
        json.dumps({"url": record.source, "value": record.value}, ensure_ascii=False)
        for record in records
    ]
