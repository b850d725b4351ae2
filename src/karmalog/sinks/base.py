"""Abstract base class for output sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from karmalog.models import FeedTarget


class Sink(ABC):
    """Base class for all multi-target message sinks."""

    @abstractmethod
    def put(self, targets: Sequence[FeedTarget], lines: Sequence[str]) -> None:
        """Deliver lines, in order, to every (network, channel) target."""
        ...
