"""E2E tests for the setup, status, validate and init commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from shelfsite.cli.main import app
from tests.helpers.sites import make_local_site

runner = CliRunner()


def _active_site(settings_path: Path) -> str | None:
    if not settings_path.exists():
        return None
    return json.loads(settings_path.read_text(encoding="utf-8"))["libraryPath"]


def test_setup_ready_site_becomes_active(tmp_path: Path, settings_env: Path):
    site = make_local_site(tmp_path / "site")

    result = runner.invoke(app, ["setup", str(site)])

    assert result.exit_code == 0, result.output
    assert "Site ready!" in result.output
    assert _active_site(settings_env) == str(site.resolve())


def test_setup_initializes_missing_data_after_confirmation(tmp_path: Path, settings_env: Path):
    """
    GIVEN a folder with template files only
    WHEN setup is run and the operator confirms initialization
    THEN config.json and books/ are created and the folder is activated
    """
    site = make_local_site(tmp_path / "site", config=False, books=False)

    result = runner.invoke(app, ["setup", str(site)], input="y\n")

    assert result.exit_code == 0, result.output
    assert "Initialize Site Data?" in result.output
    assert (site / "config.json").is_file()
    assert (site / "books").is_dir()
    config = json.loads((site / "config.json").read_text(encoding="utf-8"))
    assert config["siteTitle"] == ""
    assert [shelf["folder"] for shelf in config["shelves"]] == [
        "top-5-reads",
        "good-reads",
        "current-and-future-reads",
    ]
    assert _active_site(settings_env) == str(site.resolve())


def test_setup_declined_initialization_leaves_folder_untouched(tmp_path: Path, settings_env: Path):
    site = make_local_site(tmp_path / "site", config=False, books=False)

    result = runner.invoke(app, ["setup", str(site)], input="n\nn\n")

    assert result.exit_code == 1
    assert not (site / "config.json").exists()
    assert not (site / "books").exists()
    assert _active_site(settings_env) is None


def test_setup_invalid_folder_is_rejected(tmp_path: Path, settings_env: Path):
    site = make_local_site(tmp_path / "site", templates=("index.html",), config=False, books=False)

    result = runner.invoke(app, ["setup", str(site)], input="n\n")

    assert result.exit_code == 1
    assert "Invalid Site" in result.output
    assert "app.js" in result.output
    assert not (site / "config.json").exists()
    assert _active_site(settings_env) is None


def test_setup_invalid_then_choose_different(tmp_path: Path, settings_env: Path):
    bad = make_local_site(tmp_path / "bad", templates=())
    good = make_local_site(tmp_path / "good")

    result = runner.invoke(app, ["setup", str(bad)], input=f"y\n{good}\n")

    assert result.exit_code == 0, result.output
    assert _active_site(settings_env) == str(good.resolve())


def test_setup_cancel_keeps_previous_site(tmp_path: Path, settings_env: Path):
    previous = make_local_site(tmp_path / "previous")
    runner.invoke(app, ["setup", str(previous)])

    result = runner.invoke(app, ["setup"], input="\n")

    assert result.exit_code == 0
    assert "No folder selected" in result.output
    assert _active_site(settings_env) == str(previous.resolve())


def test_status_without_active_site(settings_env: Path):
    result = runner.invoke(app, ["status"])

    assert result.exit_code == 1
    assert "No active site" in result.output


def test_status_reports_active_site(tmp_path: Path, settings_env: Path):
    runner.invoke(app, ["setup", str(make_local_site(tmp_path / "site"))])

    result = runner.invoke(app, ["status"])

    assert result.exit_code == 0
    assert "Template files" in result.output


def test_validate_exit_codes(tmp_path: Path, settings_env: Path):
    ready = make_local_site(tmp_path / "ready")
    empty = make_local_site(tmp_path / "empty", templates=(), config=False, books=False)

    assert runner.invoke(app, ["validate", str(ready)]).exit_code == 0
    result = runner.invoke(app, ["validate", str(empty)])
    assert result.exit_code == 1
    assert "styles-minimalist.css" in result.output
    assert _active_site(settings_env) is None


def test_init_creates_data_without_prompting(tmp_path: Path, settings_env: Path):
    site = make_local_site(tmp_path / "site", config=False, books=False)

    result = runner.invoke(app, ["init", str(site)])

    assert result.exit_code == 0, result.output
    assert "Created:" in result.output
    assert _active_site(settings_env) == str(site.resolve())

    again = runner.invoke(app, ["init", str(site)])
    assert again.exit_code == 0
    assert "Site data already present." in again.output


def test_init_refuses_non_site(tmp_path: Path, settings_env: Path):
    site = make_local_site(tmp_path / "site", templates=(), config=False, books=False)

    result = runner.invoke(app, ["init", str(site)])

    assert result.exit_code == 1
    assert "Site Error" in result.output
    assert not (site / "config.json").exists()
