"""Tests for document parsing, base URI derivation and remote fetching."""

import logging

import pytest
from pyld.jsonld import JsonLdError

from json_os.loader import document_base, fetch_document, parse_document


def _loader(document, document_url=None):
    """Build a PyLD-style document loader that records requested URLs."""
    calls = []

    def loader(url, options=None):
        calls.append(url)
        return {
            "contextUrl": None,
            "documentUrl": document_url or url,
            "document": document,
        }

    loader.calls = calls
    return loader


def _failing_loader(url, options=None):
    raise JsonLdError(
        "Could not retrieve a JSON-LD document from the URL.",
        "jsonld.LoadDocumentError",
        {"url": url},
        code="loading document failed",
    )


class TestParseDocument:
    def test_valid(self):
        assert parse_document('{"name": "x"}') == {"name": "x"}

    def test_invalid_json_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="json_os.loader"):
            assert parse_document("{not json") is None
        assert "Invalid JSON-LD" in caplog.text

    def test_empty_text(self):
        assert parse_document("") is None

    def test_non_object_root(self):
        assert parse_document("[1, 2]") is None


class TestDocumentBase:
    def test_strips_fragment(self):
        assert document_base("http://x/doc.jsonld#frag") == "http://x/doc.jsonld"

    def test_relative_to_page(self):
        assert document_base("data.jsonld", "http://x/dir/page.html#top") == "http://x/dir/data.jsonld"

    def test_absolute_ignores_page(self):
        assert document_base("https://y/a.jsonld", "http://x/page") == "https://y/a.jsonld"


class TestFetchDocument:
    def test_returns_document_and_base(self):
        loader = _loader({"@type": "http://schema.org/Thing"})
        doc, base = fetch_document("http://x/a.jsonld#me", document_loader=loader)
        assert doc == {"@type": "http://schema.org/Thing"}
        assert base == "http://x/a.jsonld"
        assert loader.calls == ["http://x/a.jsonld"]

    def test_base_follows_redirect(self):
        loader = _loader({"name": "x"}, document_url="http://moved/a.jsonld")
        _, base = fetch_document("http://x/a.jsonld", document_loader=loader)
        assert base == "http://moved/a.jsonld"

    def test_relative_url(self):
        loader = _loader({"name": "x"})
        fetch_document("a.jsonld", "http://x/dir/index.html", document_loader=loader)
        assert loader.calls == ["http://x/dir/a.jsonld"]

    def test_text_document_parsed(self):
        loader = _loader('{"name": "x"}')
        doc, _ = fetch_document("http://x/a", document_loader=loader)
        assert doc == {"name": "x"}

    def test_loader_error_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="json_os.loader"):
            assert fetch_document("http://x/a", document_loader=_failing_loader) is None
        assert "Failed to fetch http://x/a" in caplog.text

    def test_non_object_document(self):
        assert fetch_document("http://x/a", document_loader=_loader([1, 2])) is None
