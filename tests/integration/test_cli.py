"""Integration tests for the typer CLI."""

import json
import sys

import pytest
import yaml
from loguru import logger
from typer.testing import CliRunner

from cli.commands.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    """Keep log records out of captured output and restore the default sink afterwards."""
    monkeypatch.setenv("LINGUABRIDGE_LOG_LEVEL", "ERROR")
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def offline_config(tmp_path):
    """Config whose providers all point at a closed local port."""
    config = {
        "providers": {
            name: {"endpoint": "http://127.0.0.1:9", "timeout": 1.0}
            for name in ("google", "bing", "mymemory", "libretranslate")
        }
    }
    path = tmp_path / "offline.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


class TestTranslateCommand:
    """Test `linguabridge translate`."""

    def test_dictionary_phrase_as_json(self):
        result = runner.invoke(app, ["translate", "hello", "-s", "en", "-t", "hi", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["translated"] == "नमस्ते"
        assert payload["provider"] == "dictionary"
        assert payload["success"] is True

    def test_plain_output(self):
        result = runner.invoke(app, ["translate", "thank you", "-s", "English", "-t", "Spanish"])

        assert result.exit_code == 0
        assert "Gracias" in result.stdout
        assert "dictionary" in result.stdout

    def test_fallback_when_providers_unreachable(self, offline_config):
        result = runner.invoke(
            app,
            ["translate", "xyz123", "-s", "en", "-t", "fr", "-c", str(offline_config), "--json"],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["translated"] == "[en → fr] xyz123"
        assert payload["isFallback"] is True

    def test_same_language_exits_with_error(self):
        result = runner.invoke(app, ["translate", "good morning", "-s", "en", "-t", "English"])

        assert result.exit_code == 1
        assert "cannot be the same" in result.stdout

    def test_empty_message_exits_with_error(self):
        result = runner.invoke(app, ["translate", "   ", "-s", "en", "-t", "fr"])

        assert result.exit_code == 1

    def test_bad_strategy_is_configuration_error(self):
        result = runner.invoke(app, ["translate", "hello", "--strategy", "fastest"])

        assert result.exit_code == 2
        assert "Configuration error" in result.stdout


class TestInfoCommands:
    """Test the listing commands."""

    def test_languages(self):
        result = runner.invoke(app, ["languages"])

        assert result.exit_code == 0
        assert "Hindi" in result.stdout
        assert "Arabic" in result.stdout

    def test_phrases(self):
        result = runner.invoke(app, ["phrases", "-s", "hi", "-t", "en"])

        assert result.exit_code == 0
        assert "Thank you" in result.stdout

    def test_phrases_unknown_direction(self):
        result = runner.invoke(app, ["phrases", "-s", "ja", "-t", "ko"])

        assert result.exit_code == 0
        assert "No verified phrases" in result.stdout

    def test_providers_without_check(self):
        result = runner.invoke(app, ["providers"])

        assert result.exit_code == 0
        assert "mymemory" in result.stdout
        assert "*-hi" in result.stdout


class TestChatCommand:
    """Test `linguabridge chat` with scripted input."""

    def test_chat_translates_and_swaps(self):
        result = runner.invoke(
            app,
            ["chat", "-s", "en", "-t", "hi"],
            input="hello\n/swap\nनमस्ते\n/quit\n",
        )

        assert result.exit_code == 0
        assert "नमस्ते" in result.stdout
        assert "Hello" in result.stdout
        assert "hi → en" in result.stdout
