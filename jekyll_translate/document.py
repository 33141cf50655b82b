"""
Jekyll document model: front matter parsing and reconstruction.

Front matter support is deliberately limited to flat single-line
`key: value` pairs. Anything else (comments, lists, nested maps) is kept
verbatim in the raw block and never rewritten.

Usage:
    doc = parse_document(text)
    out = reconstruct_document(
        doc.front_matter_raw, {"title": "Bonjour"}, translated_body, "FR"
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping

from .errors import MalformedDocument

DELIMITER = "---"

# Lazy front matter: the first closing delimiter line ends the block
DOCUMENT_PATTERN = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)
FIELD_PATTERN = re.compile(r"([a-zA-Z_-]+):\s*(.*)")

LANG_FIELD = "lang"


@dataclass(frozen=True)
class Document:
    """A parsed Jekyll file."""

    front_matter_raw: str
    body: str
    front_matter: Dict[str, str] = field(default_factory=dict)


def parse_front_matter(front_matter_raw: str) -> Dict[str, str]:
    """
    Extract `key: value` pairs from a raw front matter block.

    Lines that do not match the field grammar are skipped. A repeated key
    keeps its last value.
    """
    fields: Dict[str, str] = {}
    for line in front_matter_raw.split("\n"):
        match = FIELD_PATTERN.fullmatch(line)
        if match:
            fields[match.group(1)] = match.group(2)
    return fields


def parse_document(content: str) -> Document:
    """
    Split file content into front matter and body.

    Args:
        content: Full file text

    Returns:
        Document with the raw front matter, its field map and the body

    Raises:
        MalformedDocument: If the text does not start with a `---` line
            followed by a front matter block closed by another `---` line
    """
    match = DOCUMENT_PATTERN.match(content)
    if not match:
        raise MalformedDocument(
            "No valid Jekyll front matter found (must start with --- and end with ---)"
        )

    front_matter_raw, body = match.group(1), match.group(2)
    return Document(
        front_matter_raw=front_matter_raw,
        body=body,
        front_matter=parse_front_matter(front_matter_raw),
    )


def lang_code(target_lang: str) -> str:
    """Short code written to the `lang` field, e.g. 'PT-BR' -> 'pt'."""
    return target_lang.lower()[:2]


def reconstruct_document(
    front_matter_raw: str,
    translated_fields: Mapping[str, str],
    translated_body: str,
    target_lang: str,
) -> str:
    """
    Rebuild a Jekyll file from the original front matter and translations.

    The raw block is rewritten line by line so ordering, comments and any
    unparsed lines survive untouched. The `lang` field is always set to the
    target language short code, whether or not it was translated.
    """
    lines = []
    for line in front_matter_raw.split("\n"):
        match = FIELD_PATTERN.fullmatch(line)
        if match:
            key = match.group(1)
            if key == LANG_FIELD:
                line = f"{LANG_FIELD}: {lang_code(target_lang)}"
            elif translated_fields.get(key):
                line = f"{key}: {translated_fields[key]}"
        lines.append(line)

    new_front_matter = "\n".join(lines)
    return f"{DELIMITER}\n{new_front_matter}\n{DELIMITER}\n{translated_body}"


def count_characters(
    body: str, front_matter: Mapping[str, str], fields: Iterable[str]
) -> int:
    """
    Estimate billable characters for a run.

    Counts the body plus the raw values of requested fields that exist.
    Translated lengths are not known up front, so this is an estimate only.
    """
    total = len(body)
    for name in fields:
        value = front_matter.get(name)
        if value:
            total += len(value)
    return total
