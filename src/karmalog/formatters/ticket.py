"""Ticket state-change karma.

    TT #699 closed by jkeenan++: manifest_tests Makefile target does not work
"""

from __future__ import annotations

from karmalog.aliases import AliasTable

DEFAULT_TICKET_PREFIX = "Ticket #"


class TicketFormatter:
    def __init__(self, aliases: AliasTable) -> None:
        self._aliases = aliases

    def format(
        self,
        *,
        ticket: int | str,
        action: str,
        prefix: str | None = None,
        user: str | None = None,
        summary: str | None = None,
        url: str | None = None,
    ) -> list[str]:
        """Render one or two lines. Spaces in the username are left unwrapped."""
        if user is None:
            user = "unknown"
        if summary is None:
            summary = ""
        if prefix is None:
            prefix = DEFAULT_TICKET_PREFIX
        user = self._aliases.resolve(user)

        lines = [f"{prefix}{ticket} {action} by {user}++: {summary}"]
        if url is not None:
            lines.append(f"{prefix}{ticket}: {url}")
        return lines
