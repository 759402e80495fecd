"""Tests for reference rewriting."""

import pytest
from bs4 import BeautifulSoup
from pagecut.conversion.references import Location, rewrite_references, rewrite_value

PAGE_URL = "https://foo.bar/blog/2024/article.html"


@pytest.fixture
def location():
    """Location of a nested blog article."""
    return Location.parse(PAGE_URL)


class TestLocation:
    """Tests for Location.parse."""

    def test_components(self, location):
        """Test domain, directory and full URL of a page URL."""
        assert location.domain == "https://foo.bar"
        assert location.directory == "https://foo.bar/blog/2024"
        assert location.full_url == PAGE_URL

    def test_trailing_slash_is_stripped_before_final_segment(self):
        """Test that a trailing slash does not count as an empty final segment."""
        location = Location.parse("https://foo.bar/docs/guide/")
        assert location.directory == "https://foo.bar/docs"

    def test_root_url(self):
        """Test a URL without a path."""
        location = Location.parse("http://foo.bar")
        assert location.domain == "http://foo.bar"
        assert location.directory == "http://foo.bar"

    def test_fragment_dropped_from_full_url(self):
        """Test that the page's own fragment is not part of the full URL."""
        location = Location.parse("https://foo.bar/a.html?x=1#top")
        assert location.full_url == "https://foo.bar/a.html?x=1"

    def test_port_kept_in_domain(self):
        """Test that a port stays part of the domain."""
        location = Location.parse("http://localhost:8080/docs/index.html")
        assert location.domain == "http://localhost:8080"

    @pytest.mark.parametrize(
        "url",
        ["not a url", "ftp://foo.bar/file.html", "/relative/path.html", "https:///nohost", ""],
    )
    def test_unrecognized_urls(self, url):
        """Test that URLs without an http(s) scheme and host give no location."""
        assert Location.parse(url) is None


class TestRewriteValue:
    """Tests for the individual rewrite rules."""

    def test_relative_value(self, location):
        """Test relative values are prefixed with the directory."""
        assert rewrite_value("src", "images/foo.jpg", location) == "https://foo.bar/blog/2024/images/foo.jpg"
        assert rewrite_value("href", "other.html", location) == "https://foo.bar/blog/2024/other.html"

    def test_dot_relative_value(self, location):
        """Test that ../ values are prefixed as-is."""
        assert rewrite_value("href", "../index.html", location) == "https://foo.bar/blog/2024/../index.html"

    def test_absolute_path_value(self, location):
        """Test absolute paths are prefixed with the domain."""
        assert rewrite_value("src", "/images/foo.jpg", location) == "https://foo.bar/images/foo.jpg"

    def test_anchor_on_link(self, location):
        """Test anchors on href get the full page URL."""
        assert rewrite_value("href", "#setup", location) == PAGE_URL + "#setup"

    def test_anchor_on_resource_untouched(self, location):
        """Test anchors on src are never rewritten."""
        assert rewrite_value("src", "#setup", location) == "#setup"

    @pytest.mark.parametrize(
        "value",
        [
            "https://other.site/page",
            "http://other.site/page",
            "mailto:someone@foo.bar",
            "tel:+123456",
            "data:image/png;base64,AAAA",
            "javascript:void(0)",
            "images/odd:name.png",
        ],
    )
    def test_values_with_colon_untouched(self, location, value):
        """Test anything containing a colon is treated as scheme-qualified."""
        assert rewrite_value("href", value, location) == value
        assert rewrite_value("src", value, location) == value

    def test_protocol_relative_untouched(self, location):
        """Test //host values are left alone."""
        assert rewrite_value("src", "//cdn.foo.bar/lib.js", location) == "//cdn.foo.bar/lib.js"

    def test_empty_value_untouched(self, location):
        """Test empty values are left alone."""
        assert rewrite_value("href", "", location) == ""


class TestRewriteReferences:
    """Tests for whole-document rewriting."""

    def test_rewrites_all_rules(self, location):
        """Test a document exercising every rule."""
        document = (
            '<p><a href="next.html">Next</a> <a href="/about">About</a> '
            '<a href="#top">Top</a> <img src="img/a.png"> <img src="/img/b.png"></p>'
        )

        result = rewrite_references(document, location)

        assert 'href="https://foo.bar/blog/2024/next.html"' in result
        assert 'href="https://foo.bar/about"' in result
        assert f'href="{PAGE_URL}#top"' in result
        assert 'src="https://foo.bar/blog/2024/img/a.png"' in result
        assert 'src="https://foo.bar/img/b.png"' in result

    def test_unquoted_attributes(self, location):
        """Test that unquoted attribute values are rewritten too."""
        result = rewrite_references("<a href=other.html>x</a><img src=/img/a.png>", location)

        assert 'href="https://foo.bar/blog/2024/other.html"' in result
        assert 'src="https://foo.bar/img/a.png"' in result

    def test_code_samples_untouched(self, location):
        """Test that markup shown as text in code samples is not rewritten."""
        document = '<a href="x.html">x</a><pre><code>&lt;img src="logo.png"&gt;</code></pre>'

        result = rewrite_references(document, location)

        assert 'href="https://foo.bar/blog/2024/x.html"' in result
        assert '&lt;img src="logo.png"&gt;' in result
        assert "https://foo.bar/blog/2024/logo.png" not in result

    def test_code_sample_only_document_unchanged(self, location):
        """Test that a document whose only references are in code text is returned as-is."""
        document = '<pre><code>&lt;img src="logo.png"&gt;</code></pre>'
        assert rewrite_references(document, location) == document

    def test_script_body_untouched(self, location):
        """Test that attribute-like text in scripts is not rewritten."""
        document = "<script>var tpl = '<img src=\"x.png\">';</script><img src=\"y.png\">"

        result = rewrite_references(document, location)

        assert 'src="https://foo.bar/blog/2024/y.png"' in result
        assert '<img src="x.png">' in result

    def test_document_without_rewrites_untouched(self, location):
        """Test that documents needing no rewriting come back byte-identical."""
        document = (
            "<html>\n  <body class='x'>\n"
            '    <a  HREF = "https://example.com/x" title="t">x</a>\n'
            "    <img src='mailto:a@b.c' alt=\"y\">\n"
            "  </body>\n</html>\n"
        )

        assert rewrite_references(document, location) == document

    def test_single_quoted_attribute(self, location):
        """Test single-quoted attributes are rewritten."""
        result = rewrite_references("<img src='pic.png'>", location)
        assert 'src="https://foo.bar/blog/2024/pic.png"' in result

    def test_uppercase_attribute_name(self, location):
        """Test that attribute names are matched case-insensitively."""
        result = rewrite_references('<A HREF="next.html">n</A>', location)
        assert 'href="https://foo.bar/blog/2024/next.html"' in result

    def test_prefixed_attributes_ignored(self, location):
        """Test data-src and similar attributes are not rewritten."""
        document = '<img data-src="lazy.png" src="real.png">'

        result = rewrite_references(document, location)

        assert 'data-src="lazy.png"' in result
        assert 'src="https://foo.bar/blog/2024/real.png"' in result

    def test_qualified_values_kept_when_document_changes(self, location):
        """Test that scheme-qualified values keep their value next to rewritten ones."""
        document = (
            '<a href="https://other.site/p?a=1&amp;b=2">o</a> '
            '<a href="mailto:a@b.c">m</a> <img src="data:image/png;base64,AAAA"> <a href="n.html">n</a>'
        )

        soup = BeautifulSoup(rewrite_references(document, location), "html.parser")

        assert [a["href"] for a in soup.find_all("a")] == [
            "https://other.site/p?a=1&b=2",
            "mailto:a@b.c",
            "https://foo.bar/blog/2024/n.html",
        ]
        assert soup.img["src"] == "data:image/png;base64,AAAA"

    def test_qualified_output_is_stable(self, location):
        """Test a second pass leaves values qualified by the first one alone."""
        once = rewrite_references('<a href="a.html">a</a>', location)
        twice = rewrite_references(once, location)
        assert once == twice

    def test_document_without_references(self, location):
        """Test documents without references come back unchanged."""
        document = "<p>No links here.</p>"
        assert rewrite_references(document, location) == document
