"""
Logging wrapper for color scheme providers.

Automatically logs all HTTP requests a provider sends for debugging and
monitoring.
"""

from typing import Callable

from ..config.constants import RESPONSE_PREVIEW_LENGTH
from ..providers import Provider


class LoggingProviderWrapper:
    """Wrapper that intercepts provider methods to log HTTP traffic."""

    def __init__(self, provider: Provider, log_callback: Callable[[str, str], None]):
        """
        Initialize logging wrapper.

        Args:
            provider: Provider instance to wrap
            log_callback: Callback function(message, level) for logging
        """
        self._provider = provider
        self._log = log_callback

        self._wrap_http_methods()

    def _wrap_http_methods(self):
        """Wrap the provider's HTTP method with logging."""
        original_http_get = self._provider._http_get

        def logged_http_get(url: str) -> bytes:
            self._log(f"GET {url}", "tx")
            body = original_http_get(url)

            # Log response (truncated if needed)
            text = body.decode("utf-8", errors="replace").strip()
            if len(text) > RESPONSE_PREVIEW_LENGTH:
                first_line = text.splitlines()[0][:RESPONSE_PREVIEW_LENGTH]
                self._log(f"[{len(body)} bytes: {first_line}...]", "rx")
            else:
                self._log(text, "rx")

            return body

        # Replace method on the provider instance
        self._provider._http_get = logged_http_get

    def __getattr__(self, name):
        """Pass through all other attributes to wrapped provider."""
        return getattr(self._provider, name)
