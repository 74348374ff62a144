from __future__ import annotations

import json
from pathlib import Path

import pytest

from base16_manager.cli import main as cli_main
from base16_manager.domain.catalog import CATALOG

from conftest import FakeVcs, make_runtime_settings, seed_repository

KITTY_URL = "https://example.invalid/kdrag0n/base16-kitty.git"


@pytest.fixture()
def settings(tmp_path: Path):
    return make_runtime_settings(tmp_path / "runtime")


@pytest.fixture()
def vcs(monkeypatch: pytest.MonkeyPatch) -> FakeVcs:
    fake = FakeVcs({KITTY_URL: {"colors/base16-ocean.conf": "background #2b303b\n"}})
    monkeypatch.setattr(cli_main, "GitClient", lambda: fake)
    return fake


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str], settings) -> None:
    assert cli_main.main([], settings=settings) == 0
    assert "usage: base16-manager" in capsys.readouterr().out


def test_unknown_command_prints_help(capsys: pytest.CaptureFixture[str], settings) -> None:
    assert cli_main.main(["frobnicate"], settings=settings) == 0
    assert "usage: base16-manager" in capsys.readouterr().out


def test_missing_argument_fails(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["install"], settings=settings) == 1
    assert "install: missing repository identifier" in capsys.readouterr().err
    assert vcs.cloned == []


def test_list_support_prints_catalog(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["list-support"], settings=settings) == 0
    assert capsys.readouterr().out.splitlines() == [str(repo_id) for repo_id in CATALOG]


def test_install_then_set_theme(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["install", "kdrag0n/base16-kitty"], settings=settings) == 0
    assert vcs.cloned == [KITTY_URL]
    capsys.readouterr()

    assert cli_main.main(["list"], settings=settings) == 0
    assert capsys.readouterr().out.splitlines() == ["kdrag0n/base16-kitty"]

    assert cli_main.main(["set", "ocean"], settings=settings) == 0
    out = capsys.readouterr().out
    assert "Theme ocean applied to 1 of 1 packages" in out
    colors = settings.config_home / "kitty" / "colors.conf"
    assert colors.read_text(encoding="utf-8") == "background #2b303b\n"


def test_install_rejects_bad_identifier(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["install", "nope"], settings=settings) == 1
    assert "install: Invalid repository identifier 'nope'" in capsys.readouterr().err


def test_install_unknown_remote(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["install", "someone/base16-missing"], settings=settings) == 1
    assert "not found" in capsys.readouterr().err
    assert not (settings.data_dir / "someone" / "base16-missing").exists()


def test_set_without_packages(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    assert cli_main.main(["set", "ocean"], settings=settings) == 1
    assert "set: No packages installed" in capsys.readouterr().err


def test_set_missing_theme_reports_failure(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    seed_repository(settings.data_dir, "kdrag0n/base16-kitty", {"colors/base16-ocean.conf": "x\n"})
    assert cli_main.main(["set", "eighties"], settings=settings) == 1
    captured = capsys.readouterr()
    assert "Theme 'eighties' not found in kdrag0n/base16-kitty" in captured.err
    assert "Theme eighties applied to 0 of 1 packages" in captured.out


def test_list_themes_reverse(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    seed_repository(
        settings.data_dir,
        "kdrag0n/base16-kitty",
        {"colors/base16-ocean.conf": "", "colors/base16-eighties.conf": "", "colors/base16-tomorrow.conf": ""},
    )
    assert cli_main.main(["list-themes", "--reverse"], settings=settings) == 0
    assert capsys.readouterr().out.splitlines() == ["tomorrow", "ocean", "eighties"]


def test_clean_removes_empty_maintainers(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    (settings.data_dir / "ghost").mkdir()
    assert cli_main.main(["clean"], settings=settings) == 0
    assert not (settings.data_dir / "ghost").exists()
    assert "Removed" in capsys.readouterr().out


def test_log_report_counts_events(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs) -> None:
    cli_main.main(["install", "kdrag0n/base16-kitty"], settings=settings)
    capsys.readouterr()
    assert cli_main.main(["log", "report"], settings=settings) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["by_event"] == {"install": 1}

    assert cli_main.main(["log", "clear"], settings=settings) == 0
    assert not settings.telemetry_file.exists()


@pytest.mark.parametrize("shell", ["bash", "zsh"])
def test_completion_scripts(capsys: pytest.CaptureFixture[str], settings, vcs: FakeVcs, shell: str) -> None:
    assert cli_main.main(["completion", shell], settings=settings) == 0
    assert "base16-manager" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["--version"])
    assert excinfo.value.code == 0
    assert "base16-manager" in capsys.readouterr().out
