"""WordPress embed blocks as an Apple News heading + link caption.

A `<figure class="is-type-wp-embed">` holds an embed of another WordPress
post. Apple News cannot render the embed, so it becomes the embedded post's
title followed by a "View on <host>." link.
"""

import html
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from bs4 import Tag

from .base import Component

URL_PATTERN = re.compile(r'https?://[^"]+')
ANCHOR_PATTERN = re.compile(r"<\s*?a href\b[^>]*>(.*?)</a\b[^>]*>", re.DOTALL)

CAPTION_FONT_SIZE = 14


@dataclass(frozen=True)
class EmbedExtraction:
    """What could be scraped from an embed fragment.

    Attributes:
        url: First http(s) URL in the fragment, or ""
        host: Host of that URL, or ""
        link_text: Inner HTML of the first link, or "" (only read when
            the URL has a host)
    """

    url: str = ""
    host: str = ""
    link_text: str = ""

    @property
    def caption(self) -> str:
        if not self.host:
            return ""
        return (
            f'<a href="{html.escape(self.url, quote=True)}">'
            f"View on {html.escape(self.host)}.</a>"
        )


def _host(url: str) -> str:
    """Host part of url as written, without userinfo or port."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return ""

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host.partition("]")[0] + "]"
    return host.partition(":")[0]


def extract_embed(fragment: str) -> EmbedExtraction:
    """Scrape the URL and link text out of an embed fragment.

    Never raises; anything that cannot be found is left empty.
    """
    url_match = URL_PATTERN.search(fragment or "")
    if not url_match:
        return EmbedExtraction()

    url = url_match.group(0)
    host = _host(url)
    if not host:
        return EmbedExtraction(url=url)

    anchor_match = ANCHOR_PATTERN.search(fragment)
    return EmbedExtraction(
        url=url,
        host=host,
        link_text=anchor_match.group(1) if anchor_match else "",
    )


def embed_components(fragment: str) -> list[dict[str, Any]]:
    """Build the heading and caption components for an embed fragment."""
    extraction = extract_embed(fragment)
    return [
        {
            "role": "heading2",
            "text": extraction.link_text,
        },
        {
            "role": "body",
            "text": extraction.caption,
            "format": "html",
            "textStyle": {
                "fontSize": CAPTION_FONT_SIZE,
            },
        },
    ]


class WPEmbed(Component):
    """Component for WordPress post embeds."""

    @classmethod
    def node_matches(cls, node: Tag) -> bool:
        return (
            isinstance(node, Tag)
            and node.name == "figure"
            and cls.node_has_class(node, "is-type-wp-embed")
        )

    def register_specs(self) -> None:
        self.register_spec(
            "wp-embed-json",
            "WP_Embed JSON",
            {
                "role": "container",
                "components": "#components#",
            },
        )

    def build(self, fragment: str) -> None:
        self.register_json("wp-embed-json", {"#components#": embed_components(fragment)})
