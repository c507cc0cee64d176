"""Unit tests for pathpick CLI commands.

Tests for the pathpick ls, check, pick and config commands.
"""

import json
from pathlib import Path

import pytest
from pathpick.cli.main import app
from pathpick.configs.picker import PickerConfig, load_picker_config, save_picker_config
from pathpick.core.paths import get_picker_config_path
from pathpick.utils import formatting
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_consoles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long temporary paths."""
    monkeypatch.setattr(formatting.console, "_width", 400)
    monkeypatch.setattr(formatting.err_console, "_width", 400)


def _write_config(config: PickerConfig) -> Path:
    return save_picker_config(config, get_picker_config_path())


# =============================================================================
# global options
# =============================================================================


class TestMain:
    """Tests for the top-level app."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "pathpick version" in result.stdout

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "Usage" in result.output


# =============================================================================
# ls tests
# =============================================================================


class TestLs:
    """Tests for pathpick ls command."""

    def test_ls_table(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree)])

        assert result.exit_code == 0
        assert f"(dir) {sample_tree / 'src'}" in result.stdout
        assert "Maat.rs" in result.stdout
        assert ".hidden" not in result.stdout
        assert "5 entries (2 selectable)" in result.stdout

    def test_ls_reports_skipped_entries(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree), "--symlinks"])
        assert "Warning:" in result.output
        assert "dangling" in result.output

    def test_ls_hidden_symlinks_not_reported(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree)])
        assert result.exit_code == 0
        assert "Warning:" not in result.output

    def test_ls_json(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree), "--format", "json", "--mode", "file:rs"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        by_path = {Path(item["path"]).name: item for item in data}
        assert list(by_path) == ["docs", "src", "Maat.rs", "notes.MD", "README"]
        assert by_path["Maat.rs"]["selectable"] is True
        assert by_path["src"]["selectable"] is False
        assert by_path["src"]["kind"] == "directory"
        assert by_path["src"]["display"].startswith("(dir) ")
        assert by_path["README"]["symlink"] is None

    def test_ls_hidden_and_symlinks(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, ["ls", str(sample_tree), "--hidden", "--symlinks", "--format", "json"]
        )

        data = json.loads(result.stdout)
        displays = [item["display"] for item in data]
        assert any(d.startswith(f"{sample_tree / 'link_to_src'} -> ") for d in displays)
        assert any(Path(item["path"]).name == ".hidden" for item in data)

    def test_ls_filter_matches_name_only(self, sample_tree: Path) -> None:
        """Filtering by a parent directory name matches nothing."""
        result = runner.invoke(
            app, ["ls", str(sample_tree), "--filter", "root", "--format", "json"]
        )
        assert json.loads(result.stdout) == []

    def test_ls_filter(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree), "-F", "MA", "--format", "json"])
        assert [Path(item["path"]).name for item in json.loads(result.stdout)] == ["Maat.rs"]

    def test_ls_selectable_only(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, ["ls", str(sample_tree), "--mode", "dir", "--selectable-only", "-f", "json"]
        )
        assert [Path(item["path"]).name for item in json.loads(result.stdout)] == ["docs", "src"]

    def test_ls_uses_config_defaults(self, sample_tree: Path) -> None:
        _write_config(PickerConfig(show_hidden=True, selection_mode="file:md"))

        result = runner.invoke(app, ["ls", str(sample_tree), "--format", "json"])

        data = json.loads(result.stdout)
        names = [Path(item["path"]).name for item in data]
        assert ".hidden" in names
        assert [Path(i["path"]).name for i in data if i["selectable"]] == ["notes.MD"]

    def test_ls_flag_overrides_config(self, sample_tree: Path) -> None:
        _write_config(PickerConfig(show_hidden=True))
        result = runner.invoke(app, ["ls", str(sample_tree), "--no-hidden", "-f", "json"])
        assert ".hidden" not in [Path(i["path"]).name for i in json.loads(result.stdout)]

    def test_ls_empty(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["ls", str(empty)])
        assert result.exit_code == 0
        assert "No entries to show" in result.stdout

    def test_ls_missing_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["ls", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Cannot resolve" in result.output

    def test_ls_invalid_mode(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["ls", str(sample_tree), "--mode", "folder"])
        assert result.exit_code == 1
        assert "Unknown selection mode term" in result.output

    def test_ls_invalid_config(self, sample_tree: Path) -> None:
        path = get_picker_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("page_size = -1\n")
        result = runner.invoke(app, ["ls", str(sample_tree)])
        assert result.exit_code == 1
        assert "Invalid picker config content" in result.output


# =============================================================================
# check tests
# =============================================================================


class TestCheck:
    """Tests for pathpick check command."""

    def test_check_all_selectable(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, ["check", str(sample_tree / "Maat.rs"), str(sample_tree / "src" / "lib.rs"), "-m", "file:RS"]
        )
        assert result.exit_code == 0
        assert "All 2 path(s) selectable" in result.stdout

    def test_check_not_selectable(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["check", str(sample_tree / "README"), "--mode", "dir"])
        assert result.exit_code == 1
        assert "1 not selectable, 0 unresolvable" in result.output

    def test_check_symlink_display(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["check", str(sample_tree / "link_to_src")])
        assert result.exit_code == 0
        assert f"{sample_tree / 'link_to_src'} -> " in result.stdout

    def test_check_unresolvable(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["check", str(sample_tree / "dangling"), str(sample_tree / "src")])
        assert result.exit_code == 1
        assert "Cannot resolve" in result.output
        assert "0 not selectable, 1 unresolvable" in result.output

    def test_check_requires_paths(self) -> None:
        result = runner.invoke(app, ["check"])
        assert result.exit_code != 0


# =============================================================================
# pick tests
# =============================================================================


class TestPick:
    """Tests for pathpick pick command."""

    def test_pick_single(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["pick", str(sample_tree / "src")])
        assert result.exit_code == 0
        assert result.stdout == f"{sample_tree / 'src'}\n"

    def test_pick_multiple_keeps_order(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app,
            [
                "pick",
                str(sample_tree / "README"),
                str(sample_tree / "Maat.rs"),
                "--mode",
                "file",
                "--multiple",
            ],
        )
        assert result.exit_code == 0
        assert result.stdout == f"{sample_tree / 'README'}, {sample_tree / 'Maat.rs'}\n"

    def test_pick_symlink_prints_resolved_path(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["pick", str(sample_tree / "link_to_notes"), "-m", "file:md"])
        assert result.exit_code == 0
        assert result.stdout == f"{(sample_tree / 'notes.MD').resolve()}\n"

    def test_pick_duplicates_collapse(self, sample_tree: Path) -> None:
        """A link and its target are one selection, so single mode accepts them."""
        target = (sample_tree / "src").resolve()
        result = runner.invoke(app, ["pick", str(sample_tree / "link_to_src"), str(target)])
        assert result.exit_code == 0
        assert result.stdout == f"{target}\n"

    def test_pick_multiple_rejected_in_single_mode(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["pick", str(sample_tree / "src"), str(sample_tree / "docs")])
        assert result.exit_code == 1
        assert "multiple selection is off" in result.output

    def test_pick_multiple_from_config(self, sample_tree: Path) -> None:
        _write_config(PickerConfig(select_multiple=True))
        result = runner.invoke(app, ["pick", str(sample_tree / "src"), str(sample_tree / "docs")])
        assert result.exit_code == 0
        assert result.stdout == f"{sample_tree / 'src'}, {sample_tree / 'docs'}\n"

    def test_pick_not_selectable(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["pick", str(sample_tree / "README")])
        assert result.exit_code == 1
        assert "Not selectable" in result.output

    def test_pick_unresolvable(self, sample_tree: Path) -> None:
        result = runner.invoke(app, ["pick", str(sample_tree / "dangling"), "-m", "file"])
        assert result.exit_code == 1
        assert "Cannot resolve" in result.output


# =============================================================================
# config tests
# =============================================================================


class TestConfig:
    """Tests for pathpick config commands."""

    def test_config_show_defaults(self) -> None:
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Picker Configuration" in result.stdout
        assert "selection_mode" in result.stdout
        assert "built-in defaults" in result.stdout

    def test_config_show_file(self) -> None:
        path = _write_config(PickerConfig(selection_mode="file:rs"))
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "file:rs" in result.stdout
        assert str(path) in result.stdout

    def test_config_init(self) -> None:
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert "Picker config written" in result.stdout
        assert load_picker_config() == PickerConfig()

    def test_config_init_existing(self) -> None:
        _write_config(PickerConfig(show_hidden=True))
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert "already exists" in result.stdout
        assert load_picker_config().show_hidden is True

    def test_config_init_force(self) -> None:
        _write_config(PickerConfig(show_hidden=True))
        result = runner.invoke(app, ["config", "init", "--force"])
        assert result.exit_code == 0
        assert load_picker_config().show_hidden is False

    def test_config_init_custom_path(self, tmp_path: Path) -> None:
        target = tmp_path / "custom" / "picker.toml"
        result = runner.invoke(app, ["config", "init", "--path", str(target)])
        assert result.exit_code == 0
        assert target.exists()
