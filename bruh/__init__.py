"""bruh — personal developer-workflow commands."""

__version__ = "0.1.0"
