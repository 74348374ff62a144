from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from base16_manager.app.targets import TargetContext  # noqa: E402
from base16_manager.domain.repository import RepositoryId  # noqa: E402
from base16_manager.domain.themes import ThemeLocator  # noqa: E402
from base16_manager.errors import VersionControlError  # noqa: E402
from base16_manager.ports.system import CommandRunner, ProcessSignaler  # noqa: E402
from base16_manager.ports.vcs import VersionControl  # noqa: E402
from base16_manager.settings import RuntimeSettings  # noqa: E402


def make_runtime_settings(base: Path, *, telemetry: bool = True) -> RuntimeSettings:
    home = base / "home"
    config_home = home / ".config"
    data_dir = base / "data"
    state_dir = base / "state"
    for directory in (home, config_home, data_dir, state_dir):
        directory.mkdir(parents=True, exist_ok=True)
    return RuntimeSettings(
        home_dir=home,
        config_home=config_home,
        data_dir=data_dir,
        state_dir=state_dir,
        log_dir=state_dir / "logs",
        remote_url_template="https://example.invalid/{maintainer}/{name}.git",
        telemetry=telemetry,
        cli_version="0.0.0",
    )


def seed_repository(data_dir: Path, repo: str, files: Mapping[str, str]) -> Path:
    root = RepositoryId.parse(repo).path_under(data_dir)
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


class FakeVcs(VersionControl):
    def __init__(self, remotes: Optional[Dict[str, Mapping[str, str]]] = None) -> None:
        self.remotes: Dict[str, Mapping[str, str]] = dict(remotes or {})
        self.cloned: List[str] = []
        self.pulled: List[tuple[Path, str]] = []
        self.broken: set[Path] = set()

    def remote_exists(self, url: str) -> bool:
        return url in self.remotes

    def clone(self, url: str, destination: Path) -> None:
        destination.mkdir(parents=True, exist_ok=True)
        for relative, content in self.remotes[url].items():
            path = destination / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        self.cloned.append(url)

    def default_branch(self, repo_path: Path) -> str:
        return "master"

    def pull_reset(self, repo_path: Path, branch: str) -> None:
        if repo_path in self.broken:
            raise VersionControlError(f"git fetch failed: {repo_path.name}")
        self.pulled.append((repo_path, branch))


class FakeRunner(CommandRunner):
    def __init__(self, executables: Sequence[str] = (), exit_code: int = 0) -> None:
        self.executables = set(executables)
        self.exit_code = exit_code
        self.calls: List[List[str]] = []
        self.envs: List[Optional[Mapping[str, str]]] = []

    def run(self, argv: Sequence[str], env: Optional[Mapping[str, str]] = None) -> int:
        self.calls.append(list(argv))
        self.envs.append(env)
        return self.exit_code

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.executables else None


class FakeSignaler(ProcessSignaler):
    def __init__(self, running: Sequence[str] = ()) -> None:
        self.running = set(running)
        self.signals: List[tuple[str, str]] = []

    def signal_reload(self, process_name: str, signal_name: str = "HUP") -> bool:
        self.signals.append((process_name, signal_name))
        return process_name in self.running


@pytest.fixture()
def runtime_settings(tmp_path: Path) -> RuntimeSettings:
    return make_runtime_settings(tmp_path / "runtime")


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def signaler() -> FakeSignaler:
    return FakeSignaler()


@pytest.fixture()
def target_context(runtime_settings: RuntimeSettings, runner: FakeRunner, signaler: FakeSignaler) -> TargetContext:
    return TargetContext(
        settings=runtime_settings,
        locator=ThemeLocator(runtime_settings.data_dir),
        runner=runner,
        signaler=signaler,
        os_detector=lambda: "linux",
    )
