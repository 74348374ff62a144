"""Subprocess-backed process signalling and command execution."""

from __future__ import annotations

import os
import platform
import shutil
import subprocess
from typing import Mapping, Optional, Sequence

from base16_manager.errors import UnsupportedOSError
from base16_manager.ports.system import CommandRunner, ProcessSignaler

SUPPORTED_SYSTEMS = {"Linux": "linux", "Darwin": "darwin"}


def detect_os(system: str | None = None) -> str:
    name = system if system is not None else platform.system()
    try:
        return SUPPORTED_SYSTEMS[name]
    except KeyError:
        raise UnsupportedOSError(name) from None


class SubprocessRunner(CommandRunner):
    def run(self, argv: Sequence[str], env: Optional[Mapping[str, str]] = None) -> int:
        # stdout is inherited so terminal escape sequences reach the caller.
        merged = dict(os.environ)
        if env:
            merged.update(env)
        try:
            result = subprocess.run(list(argv), env=merged, stderr=subprocess.PIPE, check=False)
        except FileNotFoundError:
            return 127
        return result.returncode

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)


class PkillSignaler(ProcessSignaler):
    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or SubprocessRunner()

    def signal_reload(self, process_name: str, signal_name: str = "HUP") -> bool:
        # pkill exits 1 when nothing matched and 127 here when pkill is missing.
        code = self._runner.run(["pkill", f"-{signal_name}", "-x", process_name])
        return code == 0


__all__ = ["PkillSignaler", "SubprocessRunner", "SUPPORTED_SYSTEMS", "detect_os"]
