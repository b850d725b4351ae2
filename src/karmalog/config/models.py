"""Configuration dataclasses for karmalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from karmalog.models import DEFAULT_TARGET, FeedTarget

DEFAULT_CONFIG_DIR = Path.home() / ".karmalog"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_CREDITS_URL = "https://github.com/parrot/parrot/raw/master/CREDITS"


@dataclass
class CreditsConfig:
    """Where the alias table comes from and how often it is rebuilt."""

    url: str = DEFAULT_CREDITS_URL
    refresh_interval: int = 3600


@dataclass
class FeedEntryConfig:
    """One monitored project URL and the channels it reports to."""

    url: str
    targets: list[FeedTarget] = field(default_factory=list)


@dataclass
class FeedsConfig:
    """Feed polling configuration."""

    poll_interval: int = 260
    default_target: FeedTarget = DEFAULT_TARGET
    googlecode: list[FeedEntryConfig] = field(default_factory=list)


@dataclass
class KarmalogConfig:
    """Main karmalog configuration."""

    credits: CreditsConfig = field(default_factory=CreditsConfig)
    feeds: FeedsConfig = field(default_factory=FeedsConfig)
