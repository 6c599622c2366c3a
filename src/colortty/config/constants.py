"""
Configuration constants for colortty.

This module centralizes hardcoded values (palette layout, provider
repositories, network limits) so they are easy to maintain.
"""

# Application name used for config and cache directories
APP_NAME = "colortty"
SETTINGS_FILE = "settings.json"

# Palette layout
ANSI_COLOR_COUNT = 16
ANSI_COLOR_NAMES = [
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
]
BRIGHT_OFFSET = 8

# Float channel precision for to_float_triplet
FLOAT_CHANNEL_DIGITS = 8

# Default serialization target
DEFAULT_TARGET_FORMAT = "alacritty"

# Provider repositories (user, repo, list path, extension, parser format)
PROVIDERS = {
    "iterm": ("mbadolato", "iTerm2-Color-Schemes", "schemes", ".itermcolors", "iterm"),
    "gogh": ("Gogh-Co", "Gogh", "themes", ".sh", "gogh"),
}
DEFAULT_PROVIDER = "iterm"

# GitHub endpoints
RAW_CONTENT_URL = "https://raw.githubusercontent.com/{user}/{repo}/master/{path}/{name}{ext}"
CONTENTS_API_URL = "https://api.github.com/repos/{user}/{repo}/contents/{path}"

# HTTP settings
USER_AGENT = "colortty"
HTTP_TIMEOUT_SEC = 30.0
DOWNLOAD_BATCH_SIZE = 10

# History limits
MAX_SCHEME_HISTORY = 10

# Response summary truncation for fetch logging
RESPONSE_PREVIEW_LENGTH = 60
