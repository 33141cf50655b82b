"""
Run configuration and credential resolution.

The DeepL key comes from the DEEPL_API_KEY environment variable, falling
back to a `.env` file in the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Literal, Mapping, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, Field

from .document import lang_code
from .errors import ConfigError

API_KEY_ENV = "DEEPL_API_KEY"
ENV_FILENAME = ".env"

DEFAULT_TARGET_LANG = "ES"
DEFAULT_SOURCE_LANG = "EN"
DEFAULT_TRANSLATE_FIELDS = ("title", "description")

ApiTier = Literal["free", "pro"]


class TranslateConfig(BaseModel):
    """Options for a single translation run."""

    input_path: Path = Field(..., description="Jekyll file to translate")
    output_path: Optional[Path] = Field(
        None, description="Destination; defaults to <lang>/<basename>"
    )
    target_lang: str = Field(DEFAULT_TARGET_LANG, description="DeepL target language code")
    source_lang: str = Field(DEFAULT_SOURCE_LANG, description="DeepL source language code")
    translate_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TRANSLATE_FIELDS),
        description="Front matter fields to translate, in order",
    )
    dry_run: bool = Field(False, description="Count characters only; no API calls or writes")
    skip_git_check: bool = Field(False, description="Skip the uncommitted-changes check")
    api_tier: ApiTier = Field("free", description="DeepL API tier")

    @property
    def resolved_output_path(self) -> Path:
        if self.output_path is not None:
            return self.output_path
        return default_output_path(self.input_path, self.target_lang)


def default_output_path(input_path: Union[str, Path], target_lang: str) -> Path:
    """`<lang short code>/<input basename>`, relative to the working directory."""
    return Path(lang_code(target_lang)) / Path(input_path).name


def parse_field_list(value: str) -> List[str]:
    """Split a comma separated field list, dropping blanks and repeats."""
    fields: List[str] = []
    for raw in value.split(","):
        name = raw.strip()
        if name and name not in fields:
            fields.append(name)
    return fields


def get_api_key(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> str:
    """
    Resolve the DeepL API key.

    Args:
        environ: Environment mapping (defaults to os.environ)
        env_file: Path of the .env file (defaults to ./.env)

    Returns:
        The API key

    Raises:
        ConfigError: If the key is in neither place
    """
    env = os.environ if environ is None else environ
    value = env.get(API_KEY_ENV)
    if value:
        return value

    path = Path(env_file) if env_file is not None else Path.cwd() / ENV_FILENAME
    if path.is_file():
        file_value = dotenv_values(path).get(API_KEY_ENV)
        if file_value and file_value.strip():
            return file_value.strip()

    raise ConfigError(
        f"{API_KEY_ENV} not found\n\n"
        "Please set your DeepL API key:\n"
        f"  1. Set environment variable: export {API_KEY_ENV}=your-key-here\n"
        f"  2. Or create {ENV_FILENAME} file with: {API_KEY_ENV}=your-key-here"
    )
