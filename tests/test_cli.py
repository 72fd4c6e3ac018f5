"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from handle_agent import cli
from handle_agent.cli import main, parse_args, run
from handle_agent.core.config import Config
from handle_agent.core.platforms import PLATFORM_CONFIGS

ENV_KEYS = [
    "LOGGING_LEVEL",
    "LOGGING_DIRECTORY",
    "LOGGING_JSON_FORMAT",
    "OUTPUT_FORMAT",
    "OUTPUT_TITLE",
    "CLIPBOARD_ENABLED",
    "CLIPBOARD_DECORATED",
    "CLIPBOARD_RESET_MS",
    "GENERATION_SALT",
]

SALT = "1700000000000"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> Path:
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class FakeClipboard:
    """Records writes instead of touching a window system."""

    instances = []

    def __init__(self, root=None, fail=False):
        self.written = []
        self.closed = False
        self.fail = fail
        FakeClipboard.instances.append(self)

    def write_text(self, value):
        if self.fail:
            raise RuntimeError("no display")
        self.written.append(value)

    def close(self):
        self.closed = True


@pytest.fixture
def clipboard():
    FakeClipboard.instances = []
    with patch.object(cli, "TkClipboard", FakeClipboard), patch.object(
        cli, "clipboard_available", return_value=True
    ):
        yield FakeClipboard


def _run(argv, config=None):
    return run(parse_args(argv), config=config or Config())


class TestParseArgs:
    def test_suggest_defaults(self):
        args = parse_args(["suggest", "Lunar Labs"])
        assert args.command == "suggest"
        assert args.name == "Lunar Labs"
        assert args.salt is None
        assert args.format is None
        assert args.platform == []
        assert args.copy is None
        assert args.bare is False

    def test_suggest_options(self):
        args = parse_args(
            ["suggest", "Lunar Labs", "--salt", "42", "-f", "json", "-p", "tiktok", "-p", "x"]
        )
        assert args.salt == 42
        assert args.format == "json"
        assert args.platform == ["tiktok", "x"]

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            parse_args(["suggest", "Lunar Labs", "--format", "yaml"])


class TestSuggest:
    def test_table_output(self, capsys):
        assert _run(["suggest", "Lunar Labs", "--salt", SALT]) == 0

        out = capsys.readouterr().out
        assert "@lunar_labsjournal" in out
        assert "@withlunarlabsthreads" in out

    def test_json_output(self, capsys):
        assert _run(["suggest", "Lunar Labs", "--salt", SALT, "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [entry["platform"] for entry in data] == [p.platform for p in PLATFORM_CONFIGS]
        assert data[2]["handles"] == ["@lunar_labslive", "@itslunarlabslive", "@thelunarlabslive"]

    def test_fixed_salt_is_reproducible(self, capsys):
        _run(["suggest", "Lunar Labs", "--salt", "42", "-f", "json"])
        first = capsys.readouterr().out
        _run(["suggest", "Lunar Labs", "--salt", "42", "-f", "json"])
        assert capsys.readouterr().out == first

    def test_salt_from_config(self, capsys):
        config = Config()
        config.set("generation.salt", int(SALT))

        assert _run(["suggest", "Lunar Labs", "-f", "json"], config) == 0

        data = json.loads(capsys.readouterr().out)
        assert data[3]["handles"][0] == "@lunarlabstv"

    def test_format_from_config(self, capsys):
        config = Config()
        config.set("output.format", "csv")

        _run(["suggest", "Lunar Labs", "--salt", SALT], config)

        assert capsys.readouterr().out.startswith("index,platform,handle,highlight")

    def test_platform_filter(self, capsys):
        args = ["suggest", "Lunar Labs", "--salt", SALT, "-f", "json", "-p", "YOUTUBE"]
        assert _run(args) == 0

        data = json.loads(capsys.readouterr().out)
        assert [entry["platform"] for entry in data] == ["YouTube"]

    def test_unknown_platform(self, capsys):
        assert _run(["suggest", "Lunar Labs", "-p", "myspace"]) == 1
        assert "Unknown platform 'myspace'" in capsys.readouterr().err

    def test_bare_handles(self, capsys):
        _run(["suggest", "Lunar Labs", "--salt", SALT, "-f", "text", "--bare"])

        out = capsys.readouterr().out
        assert "  - lunar_labsjournal" in out
        assert "@" not in out

    def test_title(self, capsys):
        _run(["suggest", "Lunar Labs", "--salt", SALT, "-f", "markdown", "--title", "Lunar"])
        assert capsys.readouterr().out.startswith("# Lunar\n")

    def test_blank_name(self, capsys):
        assert _run(["suggest", "   "]) == 1
        assert "Please enter a name" in capsys.readouterr().err

    def test_name_without_usable_characters(self, capsys):
        assert _run(["suggest", "!!!"]) == 1
        assert "No usable characters" in capsys.readouterr().err


class TestCopy:
    def test_copy_decorated_handle(self, capsys, clipboard):
        assert _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "1"]) == 0

        assert clipboard.instances[0].written == ["@lunar_labsjournal"]
        assert clipboard.instances[0].closed is True
        assert "Copied @lunar_labsjournal" in capsys.readouterr().out

    def test_copy_numbering_spans_platforms(self, clipboard):
        _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "4"])
        assert clipboard.instances[0].written == ["@watchlunarlabsloops"]

    def test_copy_bare_when_configured(self, clipboard):
        config = Config()
        config.set("clipboard.decorated", False)

        _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "1"], config)

        assert clipboard.instances[0].written == ["lunar_labsjournal"]

    def test_copy_out_of_range(self, capsys, clipboard):
        assert _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "16"]) == 1
        assert clipboard.instances == []
        assert "choose 1-15" in capsys.readouterr().err

    def test_copy_disabled(self, capsys, clipboard):
        config = Config()
        config.set("clipboard.enabled", False)

        assert _run(["suggest", "Lunar Labs", "--copy", "1"], config) == 0
        assert clipboard.instances == []
        assert "disabled" in capsys.readouterr().err

    def test_copy_bare_handle_matches_display(self, capsys, clipboard):
        args = ["suggest", "Lunar Labs", "--salt", "42", "-f", "text", "--bare", "--copy", "1"]
        assert _run(args) == 0

        assert "  - lunarlabspixels" in capsys.readouterr().out
        assert clipboard.instances[0].written == ["lunarlabspixels"]

    def test_copy_without_clipboard(self, capsys, clipboard):
        with patch.object(cli, "clipboard_available", return_value=False):
            assert _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "1"]) == 0

        assert clipboard.instances == []
        assert "No clipboard available" in capsys.readouterr().err

    def test_copy_failure_keeps_exit_code(self, capsys, clipboard):
        with patch.object(cli, "TkClipboard", lambda: FakeClipboard(fail=True)):
            assert _run(["suggest", "Lunar Labs", "--salt", SALT, "--copy", "2"]) == 0

        captured = capsys.readouterr()
        assert "Could not copy" in captured.err
        assert "@lunar_labsjournal" in captured.out


class TestOtherCommands:
    def test_platforms_text(self, capsys):
        assert _run(["platforms"]) == 0

        out = capsys.readouterr().out
        for platform in PLATFORM_CONFIGS:
            assert platform.platform in out

    def test_platforms_json(self, capsys):
        assert _run(["platforms", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data) == len(PLATFORM_CONFIGS)
        assert data[0]["prefixes"] == list(PLATFORM_CONFIGS[0].prefixes)

    def test_validate_ok(self, capsys):
        assert _run(["validate", "--strict"]) == 0
        assert "Configuration is valid." in capsys.readouterr().out

    def test_validate_strict_failure(self, capsys):
        config = Config()
        config.set("output.format", "yaml")

        assert _run(["validate"], config) == 0
        assert _run(["validate", "--strict"], config) == 1
        assert "Invalid output format" in capsys.readouterr().out

    def test_main_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["suggest", "Lunar Labs", "--salt", "42"])
        assert exc_info.value.code == 0

    def test_main_reports_errors(self, capsys):
        with patch.object(cli, "run", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                main(["platforms"])

        assert exc_info.value.code == 1
        assert "Error: boom" in capsys.readouterr().err

    def test_main_keyboard_interrupt(self):
        with patch.object(cli, "run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main(["platforms"])

        assert exc_info.value.code == 130
