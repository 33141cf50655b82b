"""
Translate a Jekyll file end to end.

Pipeline: read -> parse -> count -> (dry run stops here) -> translate body
-> translate fields -> reconstruct -> write. Requests are issued one at a
time and any failure aborts the run before the output file is touched.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Protocol

from .config import TranslateConfig
from .document import Document, count_characters, parse_document, reconstruct_document
from .errors import FileSystemError, TranslationError
from .logging_utils import log


class Translator(Protocol):
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        ...


@dataclass
class TranslationOutcome:
    output_path: Path
    char_count: int
    dry_run: bool
    fields: List[str] = field(default_factory=list)


def read_document(path: Path) -> Document:
    """
    Load and parse a Jekyll file.

    Raises:
        FileSystemError: If the file is missing or unreadable
        MalformedDocument: If the front matter block is missing
    """
    if not path.exists():
        raise FileSystemError(f"File not found: {path}")
    try:
        # newline="" keeps line endings byte for byte
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"Cannot read {path}: {e}") from e
    return parse_document(content)


def write_document(path: Path, content: str) -> None:
    """
    Write output, creating parent directories and replacing any existing file.

    The document is encoded up front and written to a sibling temp file that
    is renamed over `path`, so a failed write leaves the previous file intact.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeError as e:
        raise FileSystemError(f"Cannot encode output for {path}: {e}") from e

    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
        if path.exists():
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)
        raise FileSystemError(f"Cannot write {path}: {e}") from e


def fields_to_translate(doc: Document, requested: List[str]) -> List[str]:
    """Requested fields that exist in the front matter with a non-empty value."""
    return [name for name in requested if doc.front_matter.get(name)]


def translate_fields(
    doc: Document,
    names: List[str],
    translator: Translator,
    source_lang: str,
    target_lang: str,
) -> Dict[str, str]:
    translated: Dict[str, str] = {}
    for name in names:
        print(f"Translating front matter field: {name}...")
        try:
            translated[name] = translator.translate(
                doc.front_matter[name], source_lang, target_lang
            )
        except TranslationError as e:
            log(f'Failed to translate field "{name}": {e}', logging.ERROR)
            raise
    return translated


def translate_file(config: TranslateConfig, translator: Translator) -> TranslationOutcome:
    """
    Translate `config.input_path` and write the result.

    Args:
        config: Run options
        translator: Anything with translate(text, source_lang, target_lang)

    Returns:
        TranslationOutcome with the output path and character estimate
    """
    output_path = config.resolved_output_path

    print(f"Reading: {config.input_path}")
    doc = read_document(config.input_path)

    char_count = count_characters(doc.body, doc.front_matter, config.translate_fields)
    print(f"Character count: {char_count:,}")

    if config.dry_run:
        print("Dry run complete (no translation performed)")
        print(f"  Fields to translate: {', '.join(config.translate_fields)}")
        print(f"  Output would be: {output_path}")
        return TranslationOutcome(
            output_path=output_path,
            char_count=char_count,
            dry_run=True,
            fields=fields_to_translate(doc, config.translate_fields),
        )

    translated_body = ""
    if doc.body:
        print(f"Translating content ({config.source_lang} -> {config.target_lang})...")
        try:
            translated_body = translator.translate(
                doc.body, config.source_lang, config.target_lang
            )
        except TranslationError as e:
            log(f"Translation failed: {e}", logging.ERROR)
            raise

    names = fields_to_translate(doc, config.translate_fields)
    translated = translate_fields(
        doc, names, translator, config.source_lang, config.target_lang
    )

    result = reconstruct_document(
        doc.front_matter_raw, translated, translated_body, config.target_lang
    )
    write_document(output_path, result)

    print("Translation complete!")
    print(f"Written to: {output_path}")
    print(f"Total characters used: ~{char_count:,}")
    log(f"Wrote {len(result)} chars to {output_path}", logging.DEBUG)

    return TranslationOutcome(
        output_path=output_path,
        char_count=char_count,
        dry_run=False,
        fields=names,
    )
