"""Git-backed version-control client."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import List

from base16_manager.errors import VersionControlError
from base16_manager.ports.vcs import VersionControl


class GitClient(VersionControl):
    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def remote_exists(self, url: str) -> bool:
        result = self._run(["ls-remote", "--exit-code", url, "HEAD"], check=False)
        return result.returncode == 0

    def clone(self, url: str, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        self._run(["clone", "--depth", "1", url, str(destination)])

    def default_branch(self, repo_path: Path) -> str:
        result = self._run(["symbolic-ref", "--short", "refs/remotes/origin/HEAD"], cwd=repo_path, check=False)
        ref = result.stdout.strip()
        if result.returncode == 0 and ref:
            return ref.split("/", 1)[1] if ref.startswith("origin/") else ref
        current = self._run(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_path)
        return current.stdout.strip()

    def pull_reset(self, repo_path: Path, branch: str) -> None:
        self._run(["fetch", "--depth", "1", "origin", branch], cwd=repo_path)
        self._run(["reset", "--hard", "FETCH_HEAD"], cwd=repo_path)

    def _run(self, args: List[str], *, cwd: Path | None = None, check: bool = True) -> subprocess.CompletedProcess[str]:
        env = dict(os.environ)
        env["GIT_TERMINAL_PROMPT"] = "0"
        command = [self._executable, *args]
        try:
            return subprocess.run(
                command,
                cwd=cwd,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=check,
                text=True,
            )
        except FileNotFoundError as exc:
            raise VersionControlError(f"{self._executable} executable not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip().splitlines()
            message = detail[-1] if detail else f"exit code {exc.returncode}"
            raise VersionControlError(f"git {args[0]} failed: {message}") from exc


__all__ = ["GitClient"]
