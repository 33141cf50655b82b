"""
Pytest configuration and fixtures for the jekyll-translate test suite.

Provides:
- Sample Jekyll documents
- A deterministic fake translator that records every call
- A working directory isolated from the developer's real .env / git state
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Ensure project root is on sys.path to import jekyll_translate.* modules
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jekyll_translate.errors import BackendError  # noqa: E402


SAMPLE_DOCUMENT = (
    "---\n"
    "layout: post\n"
    "title: Hello World\n"
    "description: A short greeting\n"
    "# translators: keep the permalink\n"
    "permalink: /hello/\n"
    "lang: en\n"
    "---\n"
    "<h1>Hello</h1>\n<p>Welcome to the site.</p>\n"
)


class FakeTranslator:
    """Translator stub: looks text up in a mapping, else returns it unchanged."""

    def __init__(self, mapping: Optional[Dict[str, str]] = None, fail_on: Optional[str] = None):
        self.mapping = mapping or {}
        self.fail_on = fail_on
        self.calls: List[Tuple[str, str, str]] = []

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.fail_on is not None and text == self.fail_on:
            raise BackendError(456, '{"message":"Quota exceeded"}')
        return self.mapping.get(text, text)


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory with no DEEPL_API_KEY in the env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEEPL_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def sample_file(workdir: Path, sample_document: str) -> Path:
    path = workdir / "hello.html"
    path.write_text(sample_document, encoding="utf-8")
    return path
