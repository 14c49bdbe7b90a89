"""Browser launching for resolved project URLs."""

import logging
import webbrowser

logger = logging.getLogger(__name__)


class BrowserError(Exception):
    """Raised when no browser could open the URL."""
    pass


def open_url(url: str) -> None:
    """Open a URL in the operator's default browser.

    Args:
        url: Absolute URL to open

    Raises:
        BrowserError: If no usable browser was found or launching failed
    """
    logger.debug(f"Opening {url}")
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise BrowserError(f"Failed to open browser: {e}") from e

    if not opened:
        raise BrowserError(
            f"No browser available to open {url}\n"
            "Set the BROWSER environment variable or use --print-only"
        )
