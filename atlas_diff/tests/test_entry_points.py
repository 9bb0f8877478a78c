"""Tests for the command line entry point."""

import pytest
from textual.app import App

from atlas_diff import VERSION_STRING
from atlas_diff.entry_points import USAGE, AtlasDiffApp, main
from atlas_diff.utils import config as config_module
from atlas_diff.utils.config import DiffPaths
from atlas_diff.utils.logger import log


@pytest.fixture
def fake_run(monkeypatch):
    """Replace App.run so no terminal session starts; records the app instance."""
    created = {}

    def _fake_run(self, *args, **kwargs):
        created['app'] = self

    monkeypatch.setattr(App, 'run', _fake_run, raising=True)
    return created


class TestMain:
    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, flag, capsys, fake_run):
        assert main([flag]) == 0

        assert capsys.readouterr().out.strip() == VERSION_STRING
        assert 'app' not in fake_run

    def test_version_string(self):
        assert VERSION_STRING == "atlas.diff v0.1.0"

    def test_no_arguments_prints_usage(self, capsys, fake_run):
        assert main([]) == 0

        assert capsys.readouterr().out.strip() == USAGE
        assert 'app' not in fake_run

    def test_single_path_prints_usage(self, capsys, fake_run, write_file):
        assert main([write_file("only.txt", "x\n")]) == 0

        assert capsys.readouterr().out.strip() == USAGE
        assert 'app' not in fake_run

    def test_missing_first_file(self, capsys, fake_run, tmp_path, write_file):
        missing = str(tmp_path / "missing.txt")

        assert main([missing, write_file("b.txt", "b\n")]) == 1

        err = capsys.readouterr().err
        assert err.strip() == f"Error reading {missing}: no such file or directory"
        assert 'app' not in fake_run

    def test_read_error_is_reported_once(self, capsys, fake_run, tmp_path, write_file):
        log.set_console(True)
        missing = str(tmp_path / "missing.txt")

        assert main([missing, write_file("b.txt", "b\n")]) == 1

        err_lines = capsys.readouterr().err.splitlines()
        assert err_lines == [f"Error reading {missing}: no such file or directory"]
        assert log.console_enabled

    def test_missing_second_file(self, capsys, fake_run, tmp_path, write_file):
        missing = str(tmp_path / "gone.txt")

        assert main([write_file("a.txt", "a\n"), missing]) == 1

        assert f"Error reading {missing}:" in capsys.readouterr().err
        assert 'app' not in fake_run

    def test_directory_argument(self, capsys, fake_run, tmp_path, write_file):
        assert main([str(tmp_path), write_file("b.txt", "b\n")]) == 1

        assert "is a directory" in capsys.readouterr().err

    def test_starts_session_with_file_contents(self, fake_run, file_pair):
        left, right = file_pair

        assert main([left, right]) == 0

        app = fake_run['app']
        assert isinstance(app, AtlasDiffApp)
        assert app.paths == DiffPaths(left, right)
        assert app.left_text.startswith("alpha\nbeta\n")
        assert app.right_text.startswith("alpha\nBETA\n")

    def test_extra_paths_are_ignored(self, fake_run, file_pair):
        left, right = file_pair

        assert main([left, right, "third.txt"]) == 0

        assert fake_run['app'].paths == DiffPaths(left, right)

    @pytest.mark.parametrize("key, value, message", [
        ("ATLAS_TAB_WIDTH", "0", "tab_width must be between 1 and 16, got 0"),
        ("ATLAS_MIN_WIDTH", "10", "min_width must be between 30 and 500, got 10"),
        ("ATLAS_DIFF_TIMEOUT", "-1", "diff_timeout must be between 0.0 and 60.0, got -1.0"),
    ])
    def test_invalid_config_is_reported(self, key, value, message, monkeypatch, capsys, fake_run, file_pair):
        monkeypatch.setenv(key, value)
        monkeypatch.setattr(config_module, "_config", None)

        assert main(list(file_pair)) == 1

        assert capsys.readouterr().err.strip() == f"Error: {message}"
        assert 'app' not in fake_run

    def test_invalid_config_does_not_block_version(self, monkeypatch, capsys, fake_run):
        monkeypatch.setenv("ATLAS_TAB_WIDTH", "0")
        monkeypatch.setattr(config_module, "_config", None)

        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == VERSION_STRING

    def test_session_failure_is_reported(self, monkeypatch, capsys, file_pair):
        def _broken_run(self, *args, **kwargs):
            raise RuntimeError("not a terminal")

        monkeypatch.setattr(App, 'run', _broken_run, raising=True)

        assert main(list(file_pair)) == 1

        assert "Error: not a terminal" in capsys.readouterr().err


class TestAtlasDiffApp:
    def test_uses_bundled_theme(self):
        app = AtlasDiffApp(DiffPaths("a", "b"), "a\n", "b\n")

        assert app.theme == "atlas"
        assert "atlas" in app.available_themes
