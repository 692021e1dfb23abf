"""Unit tests for config commands."""

import os
import tomllib
from pathlib import Path

from sessionlink.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _config_path() -> Path:
    return Path(os.environ["XDG_CONFIG_HOME"]) / "sessionlink" / "config.toml"


class TestConfigShow:
    """Tests for config show."""

    def test_defaults(self) -> None:
        """Without a file the defaults are printed."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "# source: defaults" in result.stdout
        assert "preview_limit = 5" in result.stdout
        assert "confirm_destructive_threshold = 1" in result.stdout

    def test_reads_file(self) -> None:
        """Values from the config file are printed with its path."""
        path = _config_path()
        path.parent.mkdir(parents=True)
        path.write_text("preview_limit = 7\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "preview_limit = 7" in result.stdout
        assert "# source: defaults" not in result.stdout

    def test_invalid_file(self) -> None:
        """A broken file is reported as an error."""
        path = _config_path()
        path.parent.mkdir(parents=True)
        path.write_text("preview_limit = 500\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid config content" in result.output


class TestConfigInit:
    """Tests for config init."""

    def test_writes_defaults(self) -> None:
        """init writes a loadable config file."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "Config written to" in result.stdout
        with open(_config_path(), "rb") as f:
            data = tomllib.load(f)
        assert data["preview_limit"] == 5
        assert data["sessions_root"] == str(Path.home() / ".pi" / "agent" / "sessions")

    def test_refuses_to_overwrite(self) -> None:
        """An existing file is kept unless --force is given."""
        path = _config_path()
        path.parent.mkdir(parents=True)
        path.write_text("preview_limit = 9\n")

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert path.read_text() == "preview_limit = 9\n"

    def test_force_overwrites(self) -> None:
        """--force replaces an existing file."""
        path = _config_path()
        path.parent.mkdir(parents=True)
        path.write_text("preview_limit = 9\n")

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert "preview_limit = 5" in path.read_text()
