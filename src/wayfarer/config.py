"""Configuration loading and defaults for Wayfarer."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .messages import MessageCatalog
from .urls import PROTOCOL_PREFIX


def get_config_dir() -> Path:
    """Get the wayfarer config directory (XDG-style)."""
    return Path.home() / ".config" / "wayfarer"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class Config:
    """Application configuration."""

    protocol_prefix: str = PROTOCOL_PREFIX
    start_url: str = ""  # empty = start on a blank page
    messages_file: Path | None = None

    def load_messages(self) -> MessageCatalog:
        """Build the message catalog, applying the override file if present."""
        if self.messages_file is not None and self.messages_file.exists():
            return MessageCatalog.load(self.messages_file)
        return MessageCatalog()

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        protocol_prefix = data.get("protocol_prefix", PROTOCOL_PREFIX)
        start_url = data.get("start_url", "")

        # Empty string means use the built-in messages
        messages = data.get("messages_file", "")
        messages_file = Path(messages).expanduser() if messages else None

        return cls(
            protocol_prefix=protocol_prefix,
            start_url=start_url,
            messages_file=messages_file,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        messages = self.messages_file if self.messages_file is not None else ""

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# Wayfarer Configuration',
            '',
            '# Prefix added to addresses typed without a scheme',
            f'protocol_prefix = "{self.protocol_prefix}"',
            '',
            '# Page opened at launch (empty = blank page)',
            f'start_url = "{self.start_url}"',
            '',
            '# TOML file with a [messages] table overriding error texts',
            f'messages_file = "{messages}"',
        ]

        config_path.write_text("\n".join(lines) + "\n")
