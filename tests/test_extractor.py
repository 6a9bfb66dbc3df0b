# File: tests/test_extractor.py
import pytest

from link_scout.extractor import DEFAULT_PATTERN, EXTENSIONS, Extractor, extract


@pytest.mark.parametrize(
    "text,rule",
    [
        ('"https://api.example.com/v1/users"', "absolute_url"),
        ("'//cdn.example.com/lib.js'", "absolute_url"),
        ('"/api/v1/users"', "relative_path"),
        ('"./config.js"', "relative_path"),
        ('"../lib/x"', "relative_path"),
        ('"static/js/app.js?v=2"', "file_path"),
        ('"user/login.action"', "file_path"),
        ('"api/v2/accounts"', "deep_path"),
        ('"config.json"', "filename"),
        ("'index.php?id=1'", "filename"),
    ],
)
def test_named_rules(text, rule):
    matches = list(Extractor().iter_matches(text))
    assert matches == [(rule, text)]


@pytest.mark.parametrize("ext", EXTENSIONS)
def test_filename_extensions(ext):
    text = f'"file.{ext}"'
    assert list(Extractor().iter_matches(text)) == [("filename", text)]


@pytest.mark.parametrize("text", ['"hello world"', '"a"', "'en'", '"file.exe"', "no quotes /api/x"])
def test_non_matches(text):
    assert extract(text) == []


def test_matches_in_order_of_appearance():
    text = 'var a = "/first"; var b = \'second/path/here\'; var c = "third.json";'
    assert extract(text) == ['"/first"', "'second/path/here'", '"third.json"']


def test_deterministic_on_same_input():
    text = 'fetch("/api/login"); load("//cdn.example.com/a.js"); x = "v1/items/list";'
    first = extract(text)
    assert first
    assert extract(text) == first


def test_inline_fetch_call():
    assert extract('fetch("/api/v1/users")') == ['"/api/v1/users"']


def test_empty_text():
    assert extract("") == []
    assert list(Extractor().iter_matches("")) == []


def test_custom_pattern():
    extractor = Extractor(r"'(\w+)'")
    assert extractor.findall("x = 'token'; y = \"other\"") == ["'token'"]
    assert list(extractor.iter_matches("'abc'")) == [("custom", "'abc'")]
    assert extractor.pattern != DEFAULT_PATTERN
