"""File feed adapter — reads a UTF-8 text file, one event per line."""

from pathlib import Path

from tracking.feed.port import FeedPort, FeedUnavailable


class FileFeed(FeedPort):
    def __init__(self, path: str | Path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def open(self) -> list[str]:
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise FeedUnavailable(f"Cannot read feed {self.path}: {exc}") from exc
