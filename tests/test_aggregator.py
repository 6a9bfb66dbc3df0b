# File: tests/test_aggregator.py
import random
import threading

from link_scout.aggregator import ResultAggregator
from link_scout.crawler.models import MatchResult


def test_finalize_strips_quotes_and_dedups():
    agg = ResultAggregator()
    agg.add("https://a.com/1.js", '"/api/login"')
    agg.add("https://a.com/2.js", "'/api/login'")
    agg.add("https://a.com/2.js", '"/api/logout"')
    assert agg.finalize() == ["/api/login", "/api/logout"]


def test_finalize_records_keep_first_source():
    agg = ResultAggregator()
    agg.add("https://a.com/1.js", '"/api/login"')
    agg.add("https://a.com/2.js", '"/api/login"')
    assert agg.finalize_records() == [MatchResult("https://a.com/1.js", "/api/login")]


def test_filter_applied():
    agg = ResultAggregator(filter="api")
    agg.add("s", '"/api/users"')
    agg.add("s", '"/static/logo.png"')
    agg.add("s", '"/api/users"')
    assert agg.finalize() == ["/api/users"]


def test_empty_filter_is_ignored():
    agg = ResultAggregator(filter="")
    agg.add("s", '"/x/y"')
    assert agg.finalize() == ["/x/y"]


def test_records_snapshot_in_append_order():
    agg = ResultAggregator()
    agg.add("a", "1")
    agg.add("b", "2")
    snapshot = agg.records
    agg.add("c", "3")
    assert [r.source for r in snapshot] == ["a", "b"]
    assert len(agg) == 3


def test_concurrent_adds_never_duplicate():
    agg = ResultAggregator()
    values = [f'"/api/{i % 50}"' for i in range(1000)]

    def worker(chunk):
        for value in chunk:
            agg.add("https://a.com/x.js", value)

    random.shuffle(values)
    threads = [threading.Thread(target=worker, args=(values[i::8],)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    final = agg.finalize()
    assert len(agg) == 1000
    assert len(final) == len(set(final)) == 50
    assert set(final) == {f"/api/{i}" for i in range(50)}
