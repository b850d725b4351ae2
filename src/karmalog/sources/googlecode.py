"""Google Code source — recognises project URLs and renders svn change feeds.

Two URL shapes are understood::

    http://code.google.com/p/pynie/
    http://partcl.googlecode.com/
"""

from __future__ import annotations

import logging
import re

from karmalog.aliases import AliasTable
from karmalog.formatters.commit import CommitFormatter
from karmalog.models import DEFAULT_TARGET, FeedItem, FeedTarget
from karmalog.registry import FeedRegistry
from karmalog.sequencer import FeedSequencer
from karmalog.sinks.base import Sink
from karmalog.sources.base import FeedSource

logger = logging.getLogger("karmalog.sources.googlecode")

PROJECT_URL_RES = (
    re.compile(r"^http://code\.google\.com/p/([^/]+)/?$"),
    re.compile(r"^http://([^.]+)\.googlecode\.com/$"),
)
FEED_URL_TEMPLATE = "http://code.google.com/feeds/p/{project}/svnchanges/basic"


def parse_project_url(url: str) -> str | None:
    for pattern in PROJECT_URL_RES:
        match = pattern.match(url)
        if match:
            return match.group(1)
    return None


class GoogleCodeSource(FeedSource):
    def __init__(
        self,
        aliases: AliasTable,
        sink: Sink,
        registry: FeedRegistry,
        sequencer: FeedSequencer | None = None,
    ) -> None:
        super().__init__(aliases, sink, registry, sequencer)
        self._formatter = CommitFormatter(self.renderer)

    def source_name(self) -> str:
        return "googlecode"

    def try_link(self, url: str, target: FeedTarget | tuple[str, str] | None = None) -> str | None:
        project = parse_project_url(url)
        if project is None:
            logger.warning("googlecode try_link(): I can't handle %s", url)
            return None

        if self.registry.add(project, target or DEFAULT_TARGET):
            logger.info("%s google code ATOM parser autoloaded.", project)
        return project

    def feed_url(self, project: str) -> str:
        return FEED_URL_TEMPLATE.format(project=project)

    def format_item(self, feed_id: str, revision: str | None, item: FeedItem) -> list[str]:
        return self._formatter.format(feed_id, revision, item)
