"""Unit tests for the main CLI application and the layouts command."""

from pathlib import Path

import pytest
from treeplate import __version__
from treeplate.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"treeplate version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("write", "validate", "snapshot", "diff", "layouts"):
            assert command in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "Usage" in result.output


class TestLayoutsCommand:
    """Tests for the layouts command."""

    @pytest.fixture
    def config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        return tmp_path

    def test_empty(self, config_home: Path) -> None:
        result = runner.invoke(app, ["layouts"])

        assert result.exit_code == 0
        assert "No named layouts" in result.output
        assert (config_home / "treeplate" / "layouts").is_dir()

    def test_lists_sorted_names(self, config_home: Path) -> None:
        layouts_dir = config_home / "treeplate" / "layouts"
        layouts_dir.mkdir(parents=True)
        (layouts_dir / "web.toml").write_text("")
        (layouts_dir / "lib.toml").write_text("")
        (layouts_dir / "notes.txt").write_text("")

        result = runner.invoke(app, ["layouts"])

        assert result.exit_code == 0
        assert result.output.split() == ["lib", "web"]


class TestQuietOption:
    """Tests for the --quiet global option."""

    def test_silences_success(self, layout_file: Path, tmp_path: Path) -> None:
        target = tmp_path / "out"

        result = runner.invoke(app, ["--quiet", "write", str(layout_file), str(target)])

        assert result.exit_code == 0
        assert "Wrote" not in result.output
        assert (target / "README.md").exists()

    def test_errors_still_shown(self, tmp_path: Path) -> None:
        """Errors are printed in quiet mode; only the info hint is dropped."""
        result = runner.invoke(app, ["-q", "write", str(tmp_path / "nope.toml"), str(tmp_path)])

        assert result.exit_code == 1
        assert "Layout not found" in result.output
        assert "treeplate layouts" not in result.output

    def test_reset_between_runs(self, layout_file: Path, tmp_path: Path) -> None:
        runner.invoke(app, ["--quiet", "write", str(layout_file), str(tmp_path / "one")])

        result = runner.invoke(app, ["write", str(layout_file), str(tmp_path / "two")])

        assert "Wrote" in result.output
