"""Karma message assembly and the emitter capability shared by all sources.

A commit karma message looks like::

    feedname: r1234 | username++ | commonprefix:
    feedname: One or more lines of commit log message
    feedname: review: http://link/to/diff/page
"""

from __future__ import annotations

from collections.abc import Sequence

from karmalog.aliases import AliasTable
from karmalog.formatters.ticket import TicketFormatter
from karmalog.models import FeedTarget
from karmalog.sinks.base import Sink


class KarmaRenderer:
    """Line assembly and username rendering for commit karma."""

    def __init__(self, aliases: AliasTable) -> None:
        self._aliases = aliases

    def render_karma_message(
        self,
        feed: str,
        rev: str,
        user: str | None,
        log_lines: Sequence[str] | None = None,
        link: str | None = None,
        prefix: str | None = None,
    ) -> list[str]:
        log_lines = list(log_lines or [])
        end = prefix if prefix is not None else "/"
        if log_lines or link is not None:
            end += ":"

        lines = [f"{rev} | {self._aliases.render(user)} | {end}"]
        lines.extend(log_lines)
        if link is not None:
            lines.append(f"review: {link}")
        return [f"{feed}: {line}" for line in lines]


class KarmaEmitter:
    """Capability for anything that puts karma messages on a sink.

    Username aliases are handled internally; callers pass raw identities.
    """

    def __init__(self, aliases: AliasTable, sink: Sink) -> None:
        self.aliases = aliases
        self.sink = sink
        self.renderer = KarmaRenderer(aliases)
        self.tickets = TicketFormatter(aliases)

    def format_karma_message(self, **kwargs) -> list[str]:
        return self.renderer.render_karma_message(**kwargs)

    def emit_karma_message(self, targets: Sequence[FeedTarget], **kwargs) -> None:
        self.sink.put(targets, self.format_karma_message(**kwargs))

    def format_ticket_karma(self, **kwargs) -> list[str]:
        return self.tickets.format(**kwargs)

    def emit_ticket_karma(self, targets: Sequence[FeedTarget], **kwargs) -> None:
        self.sink.put(targets, self.format_ticket_karma(**kwargs))
