"""Abstract base classes for karma sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any

from karmalog.aliases import AliasTable
from karmalog.karma import KarmaEmitter
from karmalog.models import FeedItem, FeedTarget
from karmalog.registry import FeedRegistry
from karmalog.sequencer import Dispatcher, FeedSequencer
from karmalog.sinks.base import Sink


class FeedSource(KarmaEmitter, ABC):
    """Base class for version-control feeds that emit commit karma."""

    def __init__(
        self,
        aliases: AliasTable,
        sink: Sink,
        registry: FeedRegistry,
        sequencer: FeedSequencer | None = None,
    ) -> None:
        super().__init__(aliases, sink)
        self.registry = registry
        self.sequencer = sequencer or FeedSequencer(registry)

    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this feed source."""
        ...

    @abstractmethod
    def try_link(self, url: str, target: FeedTarget | tuple[str, str] | None = None) -> str | None:
        """Register a project URL. Returns the project name, or None if unrecognised."""
        ...

    @abstractmethod
    def feed_url(self, project: str) -> str:
        """Where the external fetcher should poll for this project."""
        ...

    @abstractmethod
    def format_item(self, feed_id: str, revision: str | None, item: FeedItem) -> list[str]:
        """Render one feed entry to karma lines."""
        ...

    def process_feed(
        self,
        project: str,
        items: Iterable[FeedItem],
        dispatch: Dispatcher | None = None,
    ) -> Any:
        """Sequence one project's entries, oldest first, into ``dispatch``.

        Without a dispatcher every entry is emitted. Returns the newest timestamp.
        """
        return self.sequencer.process(project, items, dispatch or self.output_item)

    def output_item(
        self,
        feed_id: str,
        targets: Sequence[FeedTarget],
        revision: str | None,
        item: FeedItem,
    ) -> None:
        self.sink.put(targets, self.format_item(feed_id, revision, item))


class TicketSource(KarmaEmitter):
    """Ticket trackers that emit ticket karma."""

    def __init__(self, aliases: AliasTable, sink: Sink, prefix: str | None = None) -> None:
        super().__init__(aliases, sink)
        self.prefix = prefix

    def output_ticket(
        self,
        targets: Sequence[FeedTarget],
        ticket: int | str,
        action: str,
        user: str | None = None,
        summary: str | None = None,
        url: str | None = None,
    ) -> None:
        self.emit_ticket_karma(
            targets,
            prefix=self.prefix,
            ticket=ticket,
            user=user,
            summary=summary,
            action=action,
            url=url,
        )
