"""
Configuration management with XDG-compliant persistent settings.

Provides cross-platform configuration storage following OS conventions:
- Linux/Unix: XDG_CONFIG_HOME (~/.config/colortty/)
- macOS: ~/Library/Application Support/colortty/
- Windows: %APPDATA%/colortty/
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .constants import (
    APP_NAME,
    DEFAULT_PROVIDER,
    DOWNLOAD_BATCH_SIZE,
    HTTP_TIMEOUT_SEC,
    MAX_SCHEME_HISTORY,
    SETTINGS_FILE,
)


@dataclass
class AppSettings:
    """Application settings that persist across sessions."""

    # Provider settings
    default_provider: str = DEFAULT_PROVIDER
    cache_dir: str = ""  # empty: platform cache directory

    # Network settings
    http_timeout_sec: float = HTTP_TIMEOUT_SEC
    download_batch_size: int = DOWNLOAD_BATCH_SIZE

    # Schemes fetched with `get`, most recent first
    recent_schemes: list[str] = None

    def __post_init__(self):
        """Initialize mutable defaults."""
        if self.recent_schemes is None:
            self.recent_schemes = []


class SettingsManager:
    """Manages application settings with automatic persistence."""

    APP_NAME = APP_NAME
    CONFIG_FILE = SETTINGS_FILE
    MAX_SCHEME_HISTORY = MAX_SCHEME_HISTORY

    def __init__(self):
        """Initialize settings manager."""
        self.config_dir = Path(user_config_dir(self.APP_NAME))
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.settings = AppSettings()

    def load(self) -> AppSettings:
        """
        Load settings from disk.

        Returns:
            Loaded settings (or defaults if file doesn't exist)
        """
        if not self.config_file.exists():
            return self.settings

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)

            self.settings = AppSettings(**data)
            self._trim_history()
            return self.settings

        except (json.JSONDecodeError, TypeError, ValueError):
            # If config is corrupted, start fresh with defaults
            self.settings = AppSettings()
            return self.settings

    def save(self, settings: AppSettings | None = None) -> None:
        """
        Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self.settings = settings

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._trim_history()

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(self.settings), f, indent=2)

    def _trim_history(self) -> None:
        if len(self.settings.recent_schemes) > self.MAX_SCHEME_HISTORY:
            self.settings.recent_schemes = self.settings.recent_schemes[
                : self.MAX_SCHEME_HISTORY
            ]

    def add_scheme_to_history(self, provider: str, name: str) -> None:
        """
        Add a fetched scheme to history (most recent first).

        Args:
            provider: Provider name the scheme came from
            name: Scheme name
        """
        if not name or not name.strip():
            return

        entry = f"{provider}:{name.strip()}"

        if entry in self.settings.recent_schemes:
            self.settings.recent_schemes.remove(entry)

        self.settings.recent_schemes.insert(0, entry)
        self._trim_history()
