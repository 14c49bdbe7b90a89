"""Utility modules for hubrowse CLI."""

from hubrowse.utils.browser import BrowserError, open_url
from hubrowse.utils.target import TARGET_ERRORS, resolve_target

__all__ = [
    "BrowserError",
    "TARGET_ERRORS",
    "open_url",
    "resolve_target",
]
