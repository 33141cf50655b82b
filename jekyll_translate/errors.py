"""
Exception hierarchy for jekyll-translate.

Kept in its own module so the client, parser and orchestrator can share it
without importing each other.
"""

from __future__ import annotations

from typing import Optional


class JekyllTranslateError(Exception):
    """Base class for every error the CLI turns into a non-zero exit."""


class UsageError(JekyllTranslateError):
    """Bad or missing command-line input."""


class DirtyWorkingTree(JekyllTranslateError):
    """Working directory has uncommitted changes."""


class ConfigError(JekyllTranslateError):
    """Missing credential or invalid configuration value."""


class MalformedDocument(JekyllTranslateError):
    """Input does not have a `---` delimited front matter block."""


class FileSystemError(JekyllTranslateError):
    """Input unreadable or output not writable."""


class TranslationError(JekyllTranslateError):
    """Base error for DeepL API calls."""


class TransportError(TranslationError):
    """Network-level failure talking to DeepL."""


class BackendError(TranslationError):
    """DeepL answered with a non-200 status."""

    def __init__(self, status_code: int, body: str, message: Optional[str] = None):
        super().__init__(message or f"API request failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(TranslationError):
    """DeepL answered 200 but the payload is not what we expect."""
