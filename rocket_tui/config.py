"""Configuration management for rocket-tui."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


CONFIG_DIR = Path.home() / ".config" / "rocket-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_APPS = [
    {"name": "Notes", "path": "/opt/bin/notes"},
    {"name": "Reader", "path": "/opt/bin/reader"},
    {"name": "Terminal", "path": "/opt/bin/terminal"},
]

# Command lines run once at startup, typically gesture bindings
DEFAULT_COMMANDS = [
    "on Swipe:Up:3 show",
    "on Swipe:Down:3 hide",
    "on Swipe:Left:3 \"switch next\"",
    "on Swipe:Right:3 \"switch prev\"",
    "on Tap:2 \"switch last\"",
]


@dataclass
class Config:
    """Application configuration."""

    apps: List[Dict[str, str]] = field(default_factory=lambda: [dict(a) for a in DEFAULT_APPS])
    commands: List[str] = field(default_factory=lambda: DEFAULT_COMMANDS.copy())
    log_level: str = "WARNING"
    log_file: Optional[str] = str(CONFIG_DIR / "rocket-tui.log")
    log_json: bool = False

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load config from file, or return defaults."""
        if not path.exists():
            return cls()

        defaults = cls()
        try:
            with open(path) as f:
                data = json.load(f)
                return cls(
                    apps=data.get("apps", defaults.apps),
                    commands=data.get("commands", defaults.commands),
                    log_level=data.get("log_level", defaults.log_level),
                    log_file=data.get("log_file", defaults.log_file),
                    log_json=data.get("log_json", defaults.log_json),
                )
        except (json.JSONDecodeError, OSError, AttributeError):
            return defaults

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "apps": self.apps,
            "commands": self.commands,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "log_json": self.log_json,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
