"""Feed sequencing — order raw feed items and hand them to a dispatcher."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from karmalog.models import FeedItem, FeedTarget
from karmalog.registry import FeedRegistry

REVISION_RE = re.compile(r"\?r=([0-9]+)")


class Dispatcher(Protocol):
    def __call__(
        self,
        project: str,
        targets: list[FeedTarget],
        revision: str | None,
        item: FeedItem,
    ) -> None: ...


def textual_timestamp(item: FeedItem) -> str:
    """Default ordering key: the raw ``updated`` string.

    Only correct for fixed-width, zero-padded timestamps such as ISO 8601 UTC.
    """
    return item.updated


def extract_revision(link: str) -> str | None:
    match = REVISION_RE.search(link)
    return match.group(1) if match else None


class FeedSequencer:
    """Deterministic ordering of one project's feed items.

    No "already seen" filtering happens here. ``process`` returns the newest
    ordering key so a caller can track a watermark, but suppressing repeats is
    entirely up to the dispatcher.
    """

    def __init__(
        self,
        registry: FeedRegistry,
        key: Callable[[FeedItem], Any] = textual_timestamp,
        on_complete: Callable[[str], None] | None = None,
    ) -> None:
        self._registry = registry
        self._key = key
        self._on_complete = on_complete

    def order(self, items: Iterable[FeedItem]) -> list[tuple[str | None, FeedItem]]:
        """Ascending (revision, item) pairs."""
        return [(extract_revision(item.link), item) for item in sorted(items, key=self._key)]

    def process(self, project: str, items: Iterable[FeedItem], dispatch: Dispatcher) -> Any:
        ordered = self.order(items)
        targets = self._registry.targets(project)
        for revision, item in ordered:
            dispatch(project, targets, revision, item)
        if self._on_complete is not None:
            self._on_complete(project)
        return self._key(ordered[-1][1]) if ordered else None
