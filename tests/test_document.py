"""Tests for the markup and header accessors."""

from document import PageDocument, build_header_map


class TestPageDocument:
    def test_element_text(self):
        doc = PageDocument("<html><head><title>Hello</title></head></html>")

        assert doc.element_text("title") == "Hello"
        assert doc.element_text("h1") is None

    def test_attribute_first_match(self):
        doc = PageDocument('<meta name="a" content="first"><meta name="a" content="second">')

        assert doc.attribute('meta[name="a"]', "content") == "first"
        assert doc.attribute('meta[name="a"]', "missing") is None
        assert doc.attribute('meta[name="b"]', "content") is None

    def test_multi_word_rel_kept_as_string(self):
        doc = PageDocument('<link rel="shortcut icon" href="/f.ico">')

        assert doc.attribute('link[rel="shortcut icon"]', "href") == "/f.ico"
        assert doc.first('link[rel="shortcut icon"]')["attrs"]["rel"] == "shortcut icon"

    def test_all_matching_returns_text_and_attrs(self):
        doc = PageDocument(
            '<script type="application/ld+json">{"a": 1}</script>'
            '<script type="application/ld+json">{"b": 2}</script>'
            "<script>var x;</script>"
        )
        blocks = doc.all_matching('script[type="application/ld+json"]')

        assert [b["text"] for b in blocks] == ['{"a": 1}', '{"b": 2}']
        assert blocks[0]["attrs"] == {"type": "application/ld+json"}

    def test_malformed_markup_is_tolerated(self):
        doc = PageDocument("<html><head><title>Broken<meta name='x' content='y'></head><body><div></p>")
        assert doc.all_matching("div") is not None

    def test_empty_markup(self):
        doc = PageDocument("")

        assert doc.first("html") is None
        assert doc.all_matching("meta") == []


class TestHeaderMap:
    def test_case_insensitive_lookup(self):
        headers = build_header_map({"Content-Security-Policy": "default-src 'self'"})

        assert headers.get("content-security-policy") == "default-src 'self'"
        assert headers["CONTENT-SECURITY-POLICY"] == "default-src 'self'"
        assert headers.get("x-missing") is None

    def test_accepts_pairs_and_none(self):
        assert build_header_map([("X-A", "1")]).get("x-a") == "1"
        assert len(build_header_map(None)) == 0
