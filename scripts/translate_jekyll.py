#!/usr/bin/env python3
"""
Translate a Jekyll HTML file with DeepL from a repository checkout.

Usage:
  python scripts/translate_jekyll.py index.html --target-lang FR
  python scripts/translate_jekyll.py _posts/hello.html --dry-run
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure repository root on sys.path so "python scripts/translate_jekyll.py" works everywhere
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from jekyll_translate.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
