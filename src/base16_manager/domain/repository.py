"""Repository identifiers (``maintainer/name``)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from base16_manager.errors import InvalidRepositoryIdError

_SEGMENT = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


@dataclass(frozen=True, order=True)
class RepositoryId:
    maintainer: str
    name: str

    def __post_init__(self) -> None:
        for segment in (self.maintainer, self.name):
            if not _SEGMENT.match(segment) or segment in {".", ".."}:
                raise InvalidRepositoryIdError(f"{self.maintainer}/{self.name}")

    @classmethod
    def parse(cls, raw: str) -> "RepositoryId":
        parts = raw.strip().strip("/").split("/")
        if len(parts) != 2:
            raise InvalidRepositoryIdError(raw)
        return cls(parts[0], parts[1])

    def path_under(self, root: Path) -> Path:
        return root / self.maintainer / self.name

    def __str__(self) -> str:
        return f"{self.maintainer}/{self.name}"


__all__ = ["RepositoryId"]
