"""Bot composition — credits refresh → feed poll → dispatch → sink."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from karmalog.aliases import AliasTable
from karmalog.config import KarmalogConfig
from karmalog.models import FeedItem
from karmalog.registry import FeedRegistry
from karmalog.sequencer import Dispatcher, FeedSequencer
from karmalog.sinks.base import Sink
from karmalog.sinks.stdout import StdoutSink
from karmalog.sources.atom import parse_atom_feed
from karmalog.sources.base import FeedSource, TicketSource
from karmalog.sources.googlecode import GoogleCodeSource

logger = logging.getLogger("karmalog.bot")


class KarmaBot:
    """Owns the alias table, target registry and sources for one process.

    Fetching and timers live with the host: it calls ``refresh_credits`` and
    ``poll`` with whatever text it fetched, or None when the fetch failed.
    """

    def __init__(
        self,
        config: KarmalogConfig,
        sink: Sink | None = None,
        dispatch: Dispatcher | None = None,
    ) -> None:
        self._config = config
        self.aliases = AliasTable()
        self.registry = FeedRegistry()
        self.sink = sink or StdoutSink()
        self._dispatch = dispatch
        self._started: set[tuple[str, str]] = set()
        self._sources = self._build_sources()
        self.tickets = TicketSource(self.aliases, self.sink)
        self._register_feeds()

    def _build_sources(self) -> dict[str, FeedSource]:
        googlecode_sequencer = FeedSequencer(
            self.registry,
            on_complete=lambda project: self.mark_feed_started("googlecode", project),
        )
        sources: list[FeedSource] = [
            GoogleCodeSource(self.aliases, self.sink, self.registry, googlecode_sequencer),
        ]
        return {source.source_name(): source for source in sources}

    def _register_feeds(self) -> None:
        source = self._sources["googlecode"]
        for entry in self._config.feeds.googlecode:
            for target in entry.targets or [self._config.feeds.default_target]:
                source.try_link(entry.url, target)

    @property
    def started(self) -> frozenset[tuple[str, str]]:
        return frozenset(self._started)

    def source(self, name: str) -> FeedSource:
        return self._sources[name]

    def mark_feed_started(self, source_name: str, project: str) -> None:
        if (source_name, project) not in self._started:
            logger.debug("%s feed for %s started", source_name, project)
        self._started.add((source_name, project))

    def refresh_credits(self, text: str | None) -> int | None:
        """Rebuild the alias table. A failed fetch (None) leaves it untouched."""
        if text is None:
            return None
        return self.aliases.parse(text)

    def feed_urls(self) -> dict[str, str]:
        """Project → feed URL for the host's fetcher."""
        return {
            project: source.feed_url(project)
            for source in self._sources.values()
            for project in source.registry
        }

    def poll(self, project: str, feed_text: str | None, source_name: str = "googlecode"):
        """Process one fetched feed document. Returns the newest timestamp seen."""
        if feed_text is None:
            return None
        items = parse_atom_feed(feed_text)
        return self.process(project, items, source_name)

    def process(self, project: str, items: Sequence[FeedItem], source_name: str = "googlecode"):
        return self._sources[source_name].process_feed(project, items, self._dispatch)
