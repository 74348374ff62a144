"""Ports for process and session side effects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence


class ProcessSignaler(ABC):
    @abstractmethod
    def signal_reload(self, process_name: str, signal_name: str = "HUP") -> bool:
        """Signal every process called ``process_name``.

        Returns ``False`` when no such process runs; that is not an error.
        """


class CommandRunner(ABC):
    @abstractmethod
    def run(self, argv: Sequence[str], env: Optional[Mapping[str, str]] = None) -> int:
        """Run ``argv`` to completion and return its exit code."""

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on PATH."""
