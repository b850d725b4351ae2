"""Core data models: credits entries → feed items → commit descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class FeedTarget(NamedTuple):
    """An output destination: IRC network and channel."""

    network: str
    channel: str

    def __str__(self) -> str:
        return f"{self.network}/{self.channel}"


DEFAULT_TARGET = FeedTarget("magnet", "#parrot")


@dataclass
class AliasRecord:
    """One blank-line-delimited entry of a credits document."""

    username: str | None = None
    display_name: str | None = None
    aliases: list[str] = field(default_factory=list)

    @property
    def usable(self) -> bool:
        return self.username is not None


@dataclass(frozen=True)
class FeedItem:
    """One already-fetched feed entry, stored as-is."""

    author: str | None
    link: str
    updated: str
    content: str = ""


@dataclass
class CommitDescription:
    """Fields extracted from a commit's free-text description."""

    files: list[str] = field(default_factory=list)
    log: str = ""
    prefix: str | None = None


@dataclass
class CommitEvent:
    """A commit ready for rendering."""

    feed: str
    revision: str | None
    description: CommitDescription
    author: str | None = None
    link: str | None = None
