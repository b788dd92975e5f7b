import pytest

from linkshort.core.errors import InvalidURL
from linkshort.utils.urls import canonicalize


@pytest.mark.parametrize("raw, expected", [
    ("www.example.com", "https://example.com"),
    ("example.com/x", "https://example.com/x"),
    ("http://www.example.com/a?b=c#d", "http://example.com/a?b=c#d"),
    ("HTTPS://Example.COM/Path", "https://example.com/Path"),
    ("example.com:8080/app", "https://example.com:8080/app"),
    ("  https://sub.example.co.uk  ", "https://sub.example.co.uk"),
    ("https://user:pw@www.example.com/", "https://user:pw@example.com/"),
])
def test_canonicalize(raw, expected):
    assert canonicalize(raw) == expected


@pytest.mark.parametrize("raw", [
    "a..b",
    "",
    "localhost",
    "https://www",
    "https://www.www",
    "example.com.",
    ".example.com",
    "ftp://example.com",
    "javascript:alert(1)",
    "https://example.com:99999",
    "https://example.com/" + "a" * 2100,
])
def test_canonicalize_rejects(raw):
    with pytest.raises(InvalidURL):
        canonicalize(raw)


@pytest.mark.parametrize("raw", [
    "www.example.com",
    "example.com/x?y=1",
    "http://Example.org:81/p",
    "https://www.github.com/user/repo",
    "www.www.example.com/x",
])
def test_canonicalize_is_idempotent(raw):
    once = canonicalize(raw)
    assert canonicalize(once) == once


def test_repeated_www_labels_are_stripped():
    once = canonicalize("https://www.www.example.com")
    assert once == "https://example.com"
    assert canonicalize(once) == once
    assert canonicalize("https://wwwexample.com") == "https://wwwexample.com"
