"""Browse issues, pull requests and releases of the project in the current repository."""

__version__ = "0.1.0"
