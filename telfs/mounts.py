"""Local inspection helpers: FUSE mount table, directory sizes, file summaries."""

from __future__ import annotations

import os
import time
from collections.abc import Iterator
from dataclasses import dataclass

from telfs.units import human_bytes

PROC_MOUNTS = "/proc/mounts"
FSTYPE = "fuse.telfs"


@dataclass(frozen=True)
class DirStats:
    """Total size and number of non-directory entries under a directory tree."""

    total_bytes: int
    file_count: int


def _mount_entries(mounts_path: str) -> Iterator[list[str]]:
    with open(mounts_path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            fields = line.split()
            if len(fields) >= 3:
                yield fields


def telfs_mounts(mounts_path: str = PROC_MOUNTS) -> list[str]:
    """Return the mountpoints of every ``fuse.telfs`` entry in the mount table.

    Raises ``OSError`` if the mount table cannot be read.
    """
    return [fields[1] for fields in _mount_entries(mounts_path) if fields[2] == FSTYPE]


def is_any_mounted(mounts_path: str = PROC_MOUNTS) -> bool:
    """Return True if any ``fuse.telfs`` mount is live; False if none or the table is unreadable."""
    try:
        return bool(telfs_mounts(mounts_path))
    except OSError:
        return False


def format_mount_table(mounts_path: str = PROC_MOUNTS) -> str:
    """Render the "Active Mounts" section listing every telfs mountpoint."""
    lines = ["== Active Mounts (FUSE) =="]
    try:
        mountpoints = telfs_mounts(mounts_path)
    except OSError:
        lines.append("  (/proc/mounts unavailable)")
        return "\n".join(lines)
    if mountpoints:
        lines.extend(f"  {mp}" for mp in mountpoints)
    else:
        lines.append("  (no telfs mounts found)")
    return "\n".join(lines)


def _entry_sizes(path: str) -> Iterator[int]:
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield from _entry_sizes(entry.path)
            else:
                yield entry.stat(follow_symlinks=False).st_size


def dir_stats(directory: str | os.PathLike[str]) -> DirStats:
    """Sum the sizes of all non-directory entries under ``directory``.

    Symlinks are counted as entries and never followed. Raises
    ``FileNotFoundError`` (or another ``OSError``) if the tree cannot be read.
    """
    path = os.fspath(directory)
    info = os.lstat(path)
    if not os.path.isdir(path) or os.path.islink(path):
        return DirStats(total_bytes=info.st_size, file_count=1)
    total = 0
    count = 0
    for size in _entry_sizes(path):
        total += size
        count += 1
    return DirStats(total_bytes=total, file_count=count)


def file_stat_line(path: str | os.PathLike[str], label: str) -> str:
    """Describe one file as ``label  size  mtime=...``, or note that it is missing."""
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return f"  {label:<14}  (missing)"
    except OSError as exc:
        return f"  {label:<14}  (error: {exc})"
    mtime = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(info.st_mtime))
    return f"  {label:<14}  {human_bytes(info.st_size)}  mtime={mtime}"