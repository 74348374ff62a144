"""Package data: telemetry schema and shell completion scripts."""

from __future__ import annotations

from importlib import resources

COMPLETION_SCRIPTS = {
    "bash": "completion.bash",
    "zsh": "completion.zsh",
}


def read_resource(name: str) -> str:
    return (resources.files(__name__) / name).read_text(encoding="utf-8")


def completion_script(shell: str) -> str:
    try:
        filename = COMPLETION_SCRIPTS[shell]
    except KeyError:
        raise ValueError(f"No completion script for shell '{shell}'") from None
    return read_resource(filename)


__all__ = ["COMPLETION_SCRIPTS", "completion_script", "read_resource"]
