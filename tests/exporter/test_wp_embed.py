"""Tests for the WordPress embed component."""

import json

import pytest
from bs4 import BeautifulSoup

from exporter.components import WPEmbed, embed_components, extract_embed

EMBED_HTML = (
    '<figure class="wp-block-embed is-type-wp-embed is-provider-example">'
    '<div class="wp-block-embed__wrapper">'
    '<blockquote class="wp-embedded-content">'
    '<a href="https://example.com/x">Example</a>'
    "</blockquote></div></figure>"
)


def first_node(markup):
    return next(BeautifulSoup(markup, "html.parser").children)


class TestNodeMatches:
    """Tests for WPEmbed.node_matches."""

    def test_matches_embed_figure(self):
        assert WPEmbed.node_matches(first_node(EMBED_HTML)) is True

    @pytest.mark.parametrize(
        "markup",
        [
            '<figure class="wp-block-image"><img src="https://example.com/a.jpg"></figure>',
            '<div class="is-type-wp-embed"><a href="https://example.com/x">x</a></div>',
            "<figure><a href=\"https://example.com/x\">x</a></figure>",
            '<figure class="is-type-wp-embed-extra"></figure>',
        ],
    )
    def test_rejects_other_nodes(self, markup):
        """Test only figures carrying the embed class match."""
        assert WPEmbed.node_matches(first_node(markup)) is False

    def test_rejects_text_nodes(self):
        assert WPEmbed.node_matches(first_node("just text")) is False


class TestExtractEmbed:
    """Tests for extract_embed and embed_components."""

    def test_heading_and_caption(self):
        """Test the link text becomes the heading and the host the caption."""
        heading, body = embed_components('<a href="https://example.com/x">Example</a>')

        assert heading == {"role": "heading2", "text": "Example"}
        assert body["role"] == "body"
        assert body["format"] == "html"
        assert body["textStyle"] == {"fontSize": 14}
        assert 'href="https://example.com/x"' in body["text"]
        assert "View on example.com." in body["text"]

    def test_no_url(self):
        """Test input without an http(s) URL yields empty fields."""
        heading, body = embed_components('<a href="/relative/path">Local</a>')

        assert heading["text"] == ""
        assert body["text"] == ""

    @pytest.mark.parametrize("markup", ["", None, "<figure>", "https://", 'http://[bad"'])
    def test_malformed_input_never_raises(self, markup):
        """Test unparseable input degrades to empty strings."""
        heading, body = embed_components(markup)
        assert heading["text"] == ""
        assert body["text"] == ""

    def test_url_without_anchor(self):
        """Test a bare URL still gets a caption but no title."""
        extraction = extract_embed('<div data-src="https://example.org/post">')

        assert extraction.url == "https://example.org/post"
        assert extraction.host == "example.org"
        assert extraction.link_text == ""
        assert "View on example.org." in extraction.caption

    def test_url_is_escaped(self):
        """Test the URL is escaped for the href attribute."""
        extraction = extract_embed('<a href="https://example.com/?a=1&b=<2>">Q</a>')
        assert 'href="https://example.com/?a=1&amp;b=&lt;2&gt;"' in extraction.caption

    def test_host_keeps_case(self):
        """Test the caption shows the host as written in the URL."""
        extraction = extract_embed('<a href="https://Example.COM/x">X</a>')
        assert extraction.caption == '<a href="https://Example.COM/x">View on Example.COM.</a>'

    @pytest.mark.parametrize(
        "url, host",
        [
            ("https://user:pw@Blog.example.org:8443/p", "Blog.example.org"),
            ("http://[::1]:8080/p", "[::1]"),
        ],
    )
    def test_host_drops_userinfo_and_port(self, url, host):
        assert extract_embed(f'<a href="{url}">X</a>').host == host

    def test_multiline_link_text(self):
        """Test link text spanning lines is captured whole."""
        extraction = extract_embed('<a href="https://example.com/x">First\nSecond</a>')
        assert extraction.link_text == "First\nSecond"

    def test_first_url_wins(self):
        """Test the first URL in the fragment is used."""
        extraction = extract_embed(
            '<a href="https://one.example/a">One</a><a href="https://two.example/b">Two</a>'
        )
        assert extraction.host == "one.example"
        assert extraction.link_text == "One"


class TestWPEmbedComponent:
    """Tests for the WPEmbed component JSON."""

    def test_container_json(self):
        """Test the component wraps heading and caption in a container."""
        component = WPEmbed(EMBED_HTML)
        json_data = component.to_array()

        assert json_data["role"] == "container"
        assert [c["role"] for c in json_data["components"]] == ["heading2", "body"]
        assert json_data["components"][0]["text"] == "Example"

    def test_registered_spec(self):
        """Test the spec template keeps its token."""
        component = WPEmbed(EMBED_HTML)
        spec = component.specs["wp-embed-json"]

        assert spec["label"] == "WP_Embed JSON"
        assert spec["spec"] == {"role": "container", "components": "#components#"}

    def test_to_json(self):
        """Test the JSON string round-trips to the same structure."""
        component = WPEmbed(EMBED_HTML)
        assert json.loads(component.to_json()) == component.to_array()

    def test_empty_embed(self):
        """Test an embed without a URL still produces both components."""
        json_data = WPEmbed('<figure class="is-type-wp-embed"></figure>').to_array()
        assert [c["text"] for c in json_data["components"]] == ["", ""]
