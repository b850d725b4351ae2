"""Terminal/stdout sink — show karma lines instead of sending them to IRC."""

from __future__ import annotations

from collections.abc import Sequence

import click

from karmalog.models import FeedTarget
from karmalog.sinks.base import Sink


class StdoutSink(Sink):
    def __init__(self, show_targets: bool = False) -> None:
        self._show_targets = show_targets

    def put(self, targets: Sequence[FeedTarget], lines: Sequence[str]) -> None:
        if self._show_targets and targets:
            names = ", ".join(str(t) for t in targets)
            click.echo(click.style(f"[{names}]", dim=True))
        for line in lines:
            click.echo(line)
