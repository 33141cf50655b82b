"""
jekyll-translate: translate Jekyll HTML files with DeepL while keeping
front matter and markup intact.
"""

__version__ = "0.1.0"
