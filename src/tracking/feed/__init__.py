"""Event feed abstraction — pluggable sources of tracking events."""

import os
from pathlib import Path

from tracking.feed.port import FeedPort, FeedUnavailable

SAMPLE_FEED = Path(__file__).parent / "data" / "sample_feed.txt"

_feed_instance = None


def get_feed() -> FeedPort:
    """Return the configured feed adapter (singleton).

    Reads the packaged sample feed by default. Point TRACKING_FEED at
    another file to replay a different feed.
    """
    global _feed_instance
    if _feed_instance is None:
        from tracking.feed.file_adapter import FileFeed

        _feed_instance = FileFeed(os.environ.get("TRACKING_FEED") or SAMPLE_FEED)
    return _feed_instance


def reset_feed():
    """Reset the feed singleton (useful for testing)."""
    global _feed_instance
    _feed_instance = None


__all__ = ["FeedPort", "FeedUnavailable", "SAMPLE_FEED", "get_feed", "reset_feed"]
