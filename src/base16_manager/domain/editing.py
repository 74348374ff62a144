"""Line-oriented editing of foreign configuration files.

Configuration files are never parsed into a syntax tree. Every operation here
works on an ordered list of lines (no trailing newlines) and is serialised
back with :func:`join_lines`. Writes go through :func:`atomic_write` so a
half-written configuration is never observable.
"""

from __future__ import annotations

import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Pattern

from base16_manager.errors import Base16ManagerError

BACKUP_SUFFIX = ".bac"
BANNER_MARKERS = ("scheme by", "Author:")


class MarkerBlockCorruptionError(Base16ManagerError):
    """Raised when start/end markers are unbalanced or duplicated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Marker block in {path} is corrupted: {reason}")


@dataclass(frozen=True)
class LineSyntax:
    """Comment prefix and assignment separator of a configuration format."""

    comment: str = "#"
    separator: str = "="


def split_lines(text: str) -> List[str]:
    return text.splitlines()


def join_lines(lines: Iterable[str]) -> str:
    lines = list(lines)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def read_lines(path: Path) -> List[str]:
    if not path.exists():
        return []
    return split_lines(path.read_text(encoding="utf-8", errors="surrogateescape"))


# ----------------------------------------------------------------------
# Line buffer transformations
# ----------------------------------------------------------------------


def assignment_key(line: str, syntax: LineSyntax) -> Optional[str]:
    """Return the left-hand side of ``line`` or ``None`` for non-assignments."""

    if syntax.separator not in line:
        return None
    key = line.split(syntax.separator, 1)[0].strip()
    return key or None


def delete_matching(lines: List[str], needle: str, comment: str) -> List[str]:
    """Delete every line containing ``needle`` literally.

    Comment lines directly above a deleted line are blanked, walking upward
    until a non-comment line is reached.
    """

    result = list(lines)
    idx = 0
    while idx < len(result):
        if needle not in result[idx]:
            idx += 1
            continue
        del result[idx]
        above = idx - 1
        while above >= 0 and result[above].startswith(comment):
            result[above] = ""
            above -= 1
    return result


def delete_exact(lines: List[str], targets: Iterable[str]) -> List[str]:
    wanted = set(targets)
    return [line for line in lines if line not in wanted]


def is_banner(line: str, comment: str) -> bool:
    if not line.startswith(comment):
        return False
    text = line[len(comment):]
    if "base16" in text.lower():
        return True
    return any(marker in text for marker in BANNER_MARKERS)


def strip_banners(lines: List[str], comment: str) -> List[str]:
    return [line for line in lines if not is_banner(line, comment)]


def collapse_duplicates(lines: List[str]) -> List[str]:
    result: List[str] = []
    for line in lines:
        if result and result[-1] == line:
            continue
        result.append(line)
    return result


def drop_leading_blank(lines: List[str]) -> List[str]:
    if lines and not lines[0].strip():
        return lines[1:]
    return list(lines)


def merge_assignments(config_lines: List[str], artifact_lines: List[str], syntax: LineSyntax) -> List[str]:
    """Remove a previously applied theme from ``config_lines``.

    Returns the scratch buffer the new artifact is appended to. Artifact
    lines without a separator (section headers, free comments) are
    removed by exact match so the merge stays idempotent.
    """

    scratch = list(config_lines)
    verbatim: List[str] = []
    for line in artifact_lines:
        key = assignment_key(line, syntax)
        if key is None:
            if line:
                verbatim.append(line)
            continue
        scratch = delete_matching(scratch, key, syntax.comment)
    scratch = delete_exact(scratch, verbatim)
    scratch = strip_banners(scratch, syntax.comment)
    scratch = collapse_duplicates(scratch)
    return drop_leading_blank(scratch)


def append_block(lines: List[str], block: str) -> str:
    """Serialise ``lines`` followed by ``block``, separated by one blank line."""

    body = join_lines(lines)
    if lines and lines[-1]:
        body += "\n"
    return body + block


def remove_section(lines: List[str], header: str, terminator: Pattern[str]) -> List[str]:
    """Drop the section starting at ``header`` up to the next ``terminator`` line."""

    start = next((idx for idx, line in enumerate(lines) if line.strip() == header), None)
    if start is None:
        return list(lines)
    end = len(lines)
    for idx in range(start + 1, len(lines)):
        if terminator.match(lines[idx]):
            end = idx
            break
    return lines[:start] + lines[end:]


def ensure_line(lines: List[str], line: str) -> tuple[List[str], bool]:
    if line in lines:
        return list(lines), False
    return list(lines) + [line], True


# ----------------------------------------------------------------------
# Marker delimited blocks
# ----------------------------------------------------------------------


def replace_marker_block(path: Path, text: str, start: str, end: str, body: Optional[str]) -> str:
    """Remove the ``start``..``end`` block from ``text`` and append a fresh one.

    ``body=None`` only removes the block.
    """

    start_count = text.count(start)
    end_count = text.count(end)
    if start_count != end_count:
        raise MarkerBlockCorruptionError(path, "unbalanced start/end markers")
    if start_count > 1:
        raise MarkerBlockCorruptionError(path, "duplicate marker blocks found")
    if start_count == 1:
        pattern = re.compile(rf"\n?{re.escape(start)}.*?{re.escape(end)}\n?", re.DOTALL)
        match = pattern.search(text)
        if match is None:
            raise MarkerBlockCorruptionError(path, "end marker precedes start marker")
        text = text[: match.start()] + ("\n" if match.start() > 0 and match.end() < len(text) else "") + text[match.end():]
    if body is None:
        return text
    normalized = body.strip("\n")
    if text and not text.endswith("\n"):
        text += "\n"
    return text + f"{start}\n{normalized}\n{end}\n"


# ----------------------------------------------------------------------
# Filesystem helpers
# ----------------------------------------------------------------------


def ensure_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def backup(path: Path) -> Optional[Path]:
    """Copy ``path`` to ``<path>.bac``, overwriting the previous backup."""

    if not path.exists():
        return None
    target = backup_path(path)
    shutil.copyfile(path, target)
    return target


def atomic_write(path: Path, data: str) -> None:
    ensure_directory(path)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data.encode("utf-8", errors="surrogateescape"))
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


__all__ = [
    "BACKUP_SUFFIX",
    "LineSyntax",
    "MarkerBlockCorruptionError",
    "append_block",
    "assignment_key",
    "atomic_write",
    "backup",
    "backup_path",
    "collapse_duplicates",
    "delete_exact",
    "delete_matching",
    "drop_leading_blank",
    "ensure_directory",
    "ensure_line",
    "is_banner",
    "join_lines",
    "merge_assignments",
    "read_lines",
    "remove_section",
    "replace_marker_block",
    "split_lines",
    "strip_banners",
]
