"""Shared constants for apple-news-sync.

For environment-based configuration (database settings, API credentials),
use the env module:
    from common.env import env
    prefix = env.table_prefix()
"""

from pathlib import Path

DATA_DIR = Path("./data")

# Rows returned per scan page
BATCH_SIZE = 100

# Width of one range probe, in pages
PROBE_MULTIPLIER = 10

# Meta key holding the Apple News article ID of a published post
API_ID_META_KEY = "apple_news_api_id"

# Local postmeta key -> Apple News API article field
POSTMETA_MAP: dict[str, str] = {
    "apple_news_api_created_at": "createdAt",
    "apple_news_api_id": "id",
    "apple_news_is_preview": "isPreview",
    "apple_news_is_sponsored": "isSponsored",
    "apple_news_api_modified_at": "modifiedAt",
    "apple_news_api_revision": "revision",
    "apple_news_api_share_url": "shareUrl",
}
