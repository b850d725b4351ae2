"""TOML serialization for karmalog configuration."""

from __future__ import annotations

from karmalog.config.models import KarmalogConfig
from karmalog.models import FeedTarget


def _format_target(target: FeedTarget) -> str:
    return f'["{target.network}", "{target.channel}"]'


def generate_config_toml(config: KarmalogConfig) -> str:
    """Generate TOML string from config for writing to file."""
    feeds_toml = ""
    for entry in config.feeds.googlecode:
        targets = ", ".join(_format_target(t) for t in entry.targets)
        feeds_toml += f'\n[[feeds.googlecode]]\nurl = "{entry.url}"\ntargets = [{targets}]\n'

    return f"""[credits]
url = "{config.credits.url}"
refresh_interval = {config.credits.refresh_interval}

[feeds]
poll_interval = {config.feeds.poll_interval}
default_target = {_format_target(config.feeds.default_target)}
{feeds_toml}"""
