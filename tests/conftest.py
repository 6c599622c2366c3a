"""
Pytest configuration and shared fixtures.

Provides sample schemes, theme inputs and network/config isolation.
"""

import json
import urllib.error
import urllib.request
from unittest.mock import patch

import pytest

from colortty.color import ColorValue
from colortty.scheme import ColorScheme
from tests.fixtures.sample_data import (
    XTERM_COLORS,
    make_gogh_script,
    make_itermcolors,
    make_minttyrc,
    read_fixture,
)

# ===== Scheme Fixtures =====


@pytest.fixture
def xterm_scheme():
    """Scheme with the xterm palette, white on black, no optional colors."""
    return ColorScheme(
        name="xterm",
        ansi_colors=tuple(ColorValue(*rgb) for rgb in XTERM_COLORS),
        foreground=ColorValue(255, 255, 255),
        background=ColorValue(0, 0, 0),
        cursor=ColorValue(255, 255, 255),
    )


@pytest.fixture
def selection_scheme(xterm_scheme):
    """xterm scheme with cursor text and selection colors."""
    return ColorScheme(
        name="xterm-selection",
        ansi_colors=xterm_scheme.ansi_colors,
        foreground=xterm_scheme.foreground,
        background=xterm_scheme.background,
        cursor=ColorValue(0x11, 0x22, 0x33),
        cursor_text=ColorValue(0x44, 0x55, 0x66),
        selection_foreground=ColorValue(0xff, 0xff, 0xff),
        selection_background=ColorValue(0x44, 0x47, 0x5a),
    )


# ===== Theme Input Fixtures =====


@pytest.fixture
def minttyrc_text():
    """Minimal valid mintty theme (no cursor)."""
    return make_minttyrc()


@pytest.fixture
def itermcolors_bytes():
    """Minimal valid iTerm2 theme (no cursor, no selection)."""
    return make_itermcolors()


@pytest.fixture
def gogh_text():
    """Minimal valid Gogh theme (no cursor)."""
    return make_gogh_script()


@pytest.fixture
def dracula_minttyrc():
    return read_fixture("Dracula.minttyrc")


@pytest.fixture
def dracula_itermcolors():
    return read_fixture("Dracula.itermcolors")


@pytest.fixture
def dracula_gogh():
    return read_fixture("dracula.sh")


# ===== Environment Isolation =====


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create temporary config directory used by SettingsManager."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    with patch(
        "colortty.config.settings.user_config_dir", return_value=str(config_dir)
    ):
        yield config_dir


@pytest.fixture
def temp_cache_dir(tmp_path):
    """Create temporary cache directory used by providers."""
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    with patch("colortty.providers.user_cache_dir", return_value=str(cache_dir)):
        yield cache_dir


class FakeResponse:
    """Minimal stand-in for the object returned by urllib.request.urlopen."""

    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeGitHub:
    """In-memory GitHub serving registered URLs; anything else is a 404."""

    def __init__(self):
        self.routes: dict[str, bytes] = {}
        self.requests: list[urllib.request.Request] = []

    def add(self, url: str, body) -> None:
        if isinstance(body, (list, dict)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[url] = body

    @property
    def requested_urls(self) -> list[str]:
        return [request.full_url for request in self.requests]

    def urlopen(self, request, timeout=None):
        self.requests.append(request)
        url = request.full_url
        if url not in self.routes:
            raise urllib.error.HTTPError(url, 404, "Not Found", {}, None)
        return FakeResponse(self.routes[url])


@pytest.fixture
def fake_github():
    """Patch urlopen with a FakeGitHub."""
    github = FakeGitHub()
    with patch("urllib.request.urlopen", side_effect=github.urlopen):
        yield github
