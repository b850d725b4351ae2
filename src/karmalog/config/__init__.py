"""Configuration management for karmalog."""

from __future__ import annotations

from karmalog.config.loader import load_config
from karmalog.config.models import (
    CreditsConfig,
    FeedEntryConfig,
    FeedsConfig,
    KarmalogConfig,
)
from karmalog.config.serializer import generate_config_toml

__all__ = [
    "KarmalogConfig",
    "CreditsConfig",
    "FeedsConfig",
    "FeedEntryConfig",
    "load_config",
    "generate_config_toml",
]
