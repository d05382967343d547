"""Apple News components built from post HTML."""

from .base import Component
from .wp_embed import EmbedExtraction, WPEmbed, embed_components, extract_embed

__all__ = [
    "Component",
    "EmbedExtraction",
    "WPEmbed",
    "embed_components",
    "extract_embed",
]
