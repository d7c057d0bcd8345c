"""Feed port — abstract interface for tracking event sources.

The simulator programs against the port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class FeedUnavailable(Exception):
    """The event feed could not be opened."""


class FeedPort(ABC):
    """Abstract interface for event feed adapters."""

    @abstractmethod
    def open(self) -> Iterable[str]:
        """Open the feed and return its lines in feed order.

        Raises:
            FeedUnavailable: If the source cannot be read.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source name used in log lines."""
        ...
