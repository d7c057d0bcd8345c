"""Static feed adapter — in-memory lines for testing and demos.

Configurable availability so the feed-unavailable path can be exercised
without touching the filesystem.
"""

from collections.abc import Iterable

from tracking.feed.port import FeedPort, FeedUnavailable


class StaticFeed(FeedPort):
    """Feed backed by a fixed list of lines."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)
        self.available = True

    @classmethod
    def from_text(cls, text: str) -> "StaticFeed":
        return cls(text.splitlines())

    @property
    def name(self) -> str:
        return "static"

    def configure(self, available: bool = True) -> None:
        self.available = available

    def open(self) -> list[str]:
        if not self.available:
            raise FeedUnavailable("Static feed is configured as unavailable")
        return list(self.lines)
