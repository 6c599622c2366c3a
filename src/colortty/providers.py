"""
Remote color scheme repositories with a file system cache.

A Provider is a GitHub repository that distributes color schemes in one
source format. Schemes can be fetched one at a time or downloaded in bulk
into the user cache directory and listed from there.
"""

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from platformdirs import user_cache_dir

from .config.constants import (
    APP_NAME,
    CONTENTS_API_URL,
    DOWNLOAD_BATCH_SIZE,
    HTTP_TIMEOUT_SEC,
    PROVIDERS,
    RAW_CONTENT_URL,
    USER_AGENT,
)
from .convert import parse
from .errors import ColorSchemeError, FetchError, UnknownProvider
from .scheme import ColorScheme

LogCallback = Callable[[str, str], None]
SchemeList = list[tuple[str, ColorScheme]]
SchemeFiles = list[Path]


class Provider:
    """A GitHub repository that provides color schemes."""

    def __init__(
        self,
        user_name: str,
        repo_name: str,
        list_path: str,
        extension: str,
        format_name: str,
        cache_root: str | Path | None = None,
        timeout_sec: float = HTTP_TIMEOUT_SEC,
        batch_size: int = DOWNLOAD_BATCH_SIZE,
        log_callback: LogCallback | None = None,
    ):
        """
        Initialize provider.

        Args:
            user_name: GitHub user or organization
            repo_name: GitHub repository
            list_path: Directory holding the scheme files
            extension: Scheme file extension, including the dot
            format_name: Parser used for the scheme files
            cache_root: Cache directory (platform cache directory if None)
            timeout_sec: HTTP timeout per request
            batch_size: Number of files downloaded in parallel
            log_callback: Optional callback(message, level) for status updates
        """
        self.user_name = user_name
        self.repo_name = repo_name
        self.list_path = list_path
        self.extension = extension
        self.format_name = format_name
        self.cache_root = Path(cache_root or user_cache_dir(APP_NAME))
        self.timeout_sec = timeout_sec
        self.batch_size = max(1, batch_size)
        self._log = log_callback or (lambda message, level: None)

    @classmethod
    def iterm(cls, **kwargs) -> "Provider":
        """Returns a provider for mbadolato/iTerm2-Color-Schemes."""
        return cls(*PROVIDERS["iterm"], **kwargs)

    @classmethod
    def gogh(cls, **kwargs) -> "Provider":
        """Returns a provider for Gogh-Co/Gogh."""
        return cls(*PROVIDERS["gogh"], **kwargs)

    def get(self, name: str) -> ColorScheme:
        """
        Fetch and parse the color scheme with the given name.

        Raises:
            FetchError: If the download fails
            ColorSchemeError: If the scheme cannot be parsed
        """
        body = self._http_get(self.individual_url(name))
        return self.parse_color_scheme(body, name)

    def list(self, refresh: bool = False) -> SchemeList:
        """
        Return all color schemes in the provider, sorted by name.

        Schemes are read from the cache; the repository is downloaded when
        the cache is empty or a refresh is requested.
        """
        if refresh or not self.cached_files():
            self.download_all()
        return self.read_color_schemes()

    def download_all(self) -> int:
        """
        Download every color scheme file into the cache directory.

        Returns:
            Number of files downloaded
        """
        repo_dir = self.repo_dir()
        self._log(f"Downloading color schemes into {repo_dir}", "info")
        repo_dir.mkdir(parents=True, exist_ok=True)

        listing = self._http_get(self.list_url())
        try:
            items = json.loads(listing)
        except json.JSONDecodeError as exc:
            raise FetchError(f"failed to parse a color scheme list: {exc}") from exc
        if not isinstance(items, list):
            raise FetchError("color scheme list is not a JSON array")

        names = []
        for item in items:
            filename = item.get("name", "") if isinstance(item, dict) else ""
            # Gogh keeps helper scripts in files starting with "_"
            if filename.startswith("_") or not filename.endswith(self.extension):
                continue
            names.append(filename[: -len(self.extension)])

        with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
            list(executor.map(self.download_color_scheme, names))

        self._log(f"Downloaded {len(names)} color schemes", "info")
        return len(names)

    def download_color_scheme(self, name: str) -> None:
        """Download one color scheme file and save it in the cache directory."""
        body = self._http_get(self.individual_url(name))
        self.individual_path(name).write_bytes(body)

    def read_color_schemes(self) -> SchemeList:
        """
        Read color schemes from the cache directory.

        Files that fail to parse are reported and skipped.
        """
        color_schemes = []
        for file_path in self.cached_files():
            name = file_path.name[: -len(self.extension)]
            try:
                scheme = self.parse_color_scheme(file_path.read_bytes(), name)
            except ColorSchemeError as exc:
                self._log(f"Skipping {name}: {exc}", "warning")
                continue
            color_schemes.append((name, scheme))

        return color_schemes

    def cached_files(self) -> SchemeFiles:
        """Scheme files in the cache directory, sorted by name."""
        repo_dir = self.repo_dir()
        if not repo_dir.is_dir():
            return []
        return sorted(repo_dir.glob(f"*{self.extension}"))

    def repo_dir(self) -> Path:
        """The repository cache directory."""
        return self.cache_root / "repositories" / self.user_name / self.repo_name

    def individual_path(self, name: str) -> Path:
        """Returns the cache path for the given color scheme name."""
        return self.repo_dir() / f"{name}{self.extension}"

    def individual_url(self, name: str) -> str:
        """Returns the URL for a color scheme on GitHub."""
        return RAW_CONTENT_URL.format(
            user=self.user_name,
            repo=self.repo_name,
            path=self.list_path,
            name=urllib.parse.quote(name),
            ext=self.extension,
        )

    def list_url(self) -> str:
        """Returns the URL for the color scheme list on GitHub API."""
        return CONTENTS_API_URL.format(
            user=self.user_name, repo=self.repo_name, path=self.list_path
        )

    def parse_color_scheme(self, body: bytes | str, name: str) -> ColorScheme:
        return parse(self.format_name, body, name=name)

    def _http_get(self, url: str) -> bytes:
        """
        Send a GET request and return the response body.

        Sends "colortty" as User-Agent.

        Raises:
            FetchError: On transport failure or a non-success status code
        """
        request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout_sec) as resp:
                return resp.read()
        except urllib.error.HTTPError as exc:
            raise FetchError(
                f"received non-success status code {exc.code} from {url}"
            ) from exc
        except (urllib.error.URLError, OSError) as exc:
            raise FetchError(f"failed to send an HTTP request to {url}: {exc}") from exc


def get_provider(name: str, **kwargs) -> Provider:
    """
    Create a provider by name ("iterm" or "gogh").

    Raises:
        UnknownProvider: If the name is not recognized
    """
    if name not in PROVIDERS:
        raise UnknownProvider(name)
    return Provider(*PROVIDERS[name], **kwargs)


def list_available_providers() -> list[str]:
    return sorted(PROVIDERS.keys())
