"""Load and validate karmalog configuration from TOML files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from karmalog.config.models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_CREDITS_URL,
    CreditsConfig,
    FeedEntryConfig,
    FeedsConfig,
    KarmalogConfig,
)
from karmalog.config.validation import ConfigValidator
from karmalog.models import DEFAULT_TARGET, FeedTarget


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> KarmalogConfig:
    """Load config from TOML file, validate, and return."""
    if not path.exists():
        msg = f"Config not found at {path}. Run 'karmalog init' to create one."
        raise FileNotFoundError(msg)

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = _from_dict(data)

    validator = ConfigValidator()
    errors = validator.validate(config)
    if errors:
        error_msgs = "\n".join(f"  {e.path}: {e.message}" for e in errors)
        msg = f"Config validation failed:\n{error_msgs}"
        raise ValueError(msg)

    return config


def _target(value: Any) -> Any:
    """Turn a [network, channel] pair into a FeedTarget; leave anything else for validation."""
    if isinstance(value, list | tuple) and len(value) == 2:
        return FeedTarget(*value)
    return value


def _from_dict(data: dict[str, Any]) -> KarmalogConfig:
    """Convert TOML dict to KarmalogConfig dataclass."""
    credits_data = data.get("credits", {})
    feeds_data = data.get("feeds", {})

    default_target = _target(feeds_data.get("default_target", list(DEFAULT_TARGET)))
    entries = [
        FeedEntryConfig(
            url=entry.get("url", ""),
            targets=[_target(t) for t in entry.get("targets", [])] or [default_target],
        )
        for entry in feeds_data.get("googlecode", [])
    ]

    return KarmalogConfig(
        credits=CreditsConfig(
            url=credits_data.get("url", DEFAULT_CREDITS_URL),
            refresh_interval=credits_data.get("refresh_interval", 3600),
        ),
        feeds=FeedsConfig(
            poll_interval=feeds_data.get("poll_interval", 260),
            default_target=default_target,
            googlecode=entries,
        ),
    )
