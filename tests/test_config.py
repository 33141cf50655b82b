"""
Tests for run configuration and API key resolution.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from jekyll_translate.config import (
    TranslateConfig,
    default_output_path,
    get_api_key,
    parse_field_list,
)
from jekyll_translate.errors import ConfigError


class TestGetApiKey:
    """Environment variable first, then .env file."""

    def test_environment_wins(self, workdir):
        (workdir / ".env").write_text("DEEPL_API_KEY=from-file\n")

        assert get_api_key({"DEEPL_API_KEY": "from-env"}) == "from-env"

    def test_reads_os_environ_by_default(self, workdir, monkeypatch):
        monkeypatch.setenv("DEEPL_API_KEY", "shell-key")

        assert get_api_key() == "shell-key"

    def test_falls_back_to_env_file_in_cwd(self, workdir):
        (workdir / ".env").write_text("OTHER=1\nDEEPL_API_KEY=file-key  \n")

        assert get_api_key({}) == "file-key"

    def test_empty_env_value_falls_back_to_file(self, workdir):
        (workdir / ".env").write_text("DEEPL_API_KEY=file-key\n")

        assert get_api_key({"DEEPL_API_KEY": ""}) == "file-key"

    def test_explicit_env_file(self, tmp_path, workdir):
        env_file = tmp_path / "secrets.env"
        env_file.write_text("DEEPL_API_KEY=abc:fx\n")

        assert get_api_key({}, env_file=env_file) == "abc:fx"

    def test_missing_everywhere_raises(self, workdir):
        with pytest.raises(ConfigError) as exc_info:
            get_api_key({})

        message = str(exc_info.value)
        assert "DEEPL_API_KEY not found" in message
        assert "export DEEPL_API_KEY" in message
        assert ".env" in message

    def test_env_file_without_key_raises(self, workdir):
        (workdir / ".env").write_text("SOMETHING_ELSE=1\n")

        with pytest.raises(ConfigError):
            get_api_key({})

    def test_env_file_with_blank_key_raises(self, workdir):
        (workdir / ".env").write_text("DEEPL_API_KEY=\n")

        with pytest.raises(ConfigError):
            get_api_key({})


class TestDefaultOutputPath:
    def test_uses_lang_short_code_directory(self):
        assert default_output_path("_posts/hello.html", "FR") == Path("fr/hello.html")

    def test_region_code_trimmed(self):
        assert default_output_path("index.html", "PT-BR") == Path("pt/index.html")


class TestParseFieldList:
    def test_splits_and_strips(self):
        assert parse_field_list("title, description ,excerpt") == [
            "title",
            "description",
            "excerpt",
        ]

    def test_drops_blanks_and_duplicates(self):
        assert parse_field_list("title,,title, ,description") == ["title", "description"]

    def test_empty_string(self):
        assert parse_field_list("") == []


class TestTranslateConfig:
    def test_defaults(self):
        config = TranslateConfig(input_path=Path("index.html"))

        assert config.target_lang == "ES"
        assert config.source_lang == "EN"
        assert config.translate_fields == ["title", "description"]
        assert config.dry_run is False
        assert config.skip_git_check is False
        assert config.api_tier == "free"

    def test_default_fields_not_shared(self):
        first = TranslateConfig(input_path=Path("a.html"))
        first.translate_fields.append("excerpt")

        assert TranslateConfig(input_path=Path("b.html")).translate_fields == [
            "title",
            "description",
        ]

    def test_resolved_output_path_default(self):
        config = TranslateConfig(input_path=Path("pages/about.html"), target_lang="DE")

        assert config.resolved_output_path == Path("de/about.html")

    def test_resolved_output_path_explicit(self):
        config = TranslateConfig(
            input_path=Path("about.html"), output_path=Path("out/about.de.html")
        )

        assert config.resolved_output_path == Path("out/about.de.html")

    def test_invalid_tier_rejected(self):
        with pytest.raises(ValidationError):
            TranslateConfig(input_path=Path("a.html"), api_tier="enterprise")
