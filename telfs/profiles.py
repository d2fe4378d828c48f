"""Profile directories: listing, creation, deletion and portable bundles.

A profile is a directory under a common root holding one filesystem's
local state. Export and import move the portable part of that state
(config, session and metadata DB) as a gzipped tar bundle; the chunk
cache is left out because it can be rebuilt.
"""

from __future__ import annotations

import os
import shutil
import tarfile
from pathlib import Path

CONFIG_FILE = "config.toml"
SESSION_FILE = "session.json"
DB_FILE = "db.sqlite"

BUNDLE_FILES: tuple[str, ...] = (CONFIG_FILE, SESSION_FILE, DB_FILE)

_PRIVATE_FILE_MODE = 0o600
_PRIVATE_DIR_MODE = 0o700


class ProfileError(Exception):
    """A profile operation was refused or could not complete."""


def validate_profile_name(name: str) -> str:
    """Return ``name`` if it can be used as a profile directory name.

    Raises :class:`ProfileError` for empty names, ``.``/``..`` and names
    holding path separators or NUL characters.
    """
    if not name:
        raise ProfileError("profile name must not be empty")
    if name in (".", ".."):
        raise ProfileError(f"invalid profile name {name!r}")
    if any(ch in name for ch in ("/", "\\", "\0")):
        raise ProfileError(f"invalid profile name {name!r}: must not contain path separators")
    return name


def _is_valid_name(name: str) -> bool:
    try:
        validate_profile_name(name)
    except ProfileError:
        return False
    return True


def _profile_dir(root: str | os.PathLike[str], name: str) -> Path:
    return Path(root) / validate_profile_name(name)


def list_profiles(root: str | os.PathLike[str]) -> list[str]:
    """Return the sorted names of profile directories under ``root``.

    A missing root yields an empty list; plain files and entries with
    invalid names are ignored.
    """
    try:
        entries = list(os.scandir(root))
    except FileNotFoundError:
        return []
    return sorted(
        entry.name for entry in entries if entry.is_dir() and _is_valid_name(entry.name)
    )


def create_profile(root: str | os.PathLike[str], name: str) -> Path:
    """Create a new, empty profile directory and return its path."""
    directory = _profile_dir(root, name)
    if directory.exists():
        raise ProfileError(f"profile {name!r} already exists at {directory}")
    try:
        directory.mkdir(mode=_PRIVATE_DIR_MODE, parents=True)
    except OSError as exc:
        raise ProfileError(f"create {directory}: {exc}") from exc
    return directory


def delete_profile(root: str | os.PathLike[str], name: str, confirm: bool = False) -> Path:
    """Remove a profile directory and everything in it; return its path.

    Refuses unless ``confirm`` is true. Data on the channel is unaffected.
    """
    directory = _profile_dir(root, name)
    if not directory.exists():
        raise ProfileError(f"profile {name!r} not found")
    if not confirm:
        raise ProfileError(
            f"refusing to delete {directory} without confirmation "
            "(this removes the SQLite DB and session — channel data is unaffected)"
        )
    shutil.rmtree(directory)
    return directory


def export_bundle(
    source_dir: str | os.PathLike[str], out_path: str | os.PathLike[str]
) -> int:
    """Write the profile's portable files to a gzipped tar; return the bundle size in bytes."""
    source = Path(source_dir)
    for name in BUNDLE_FILES:
        if not (source / name).exists():
            raise ProfileError(
                f"export: {name} missing — has this profile been initialized?"
            )

    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    fd = os.open(out_path, flags, _PRIVATE_FILE_MODE)
    with os.fdopen(fd, "wb") as raw, tarfile.open(fileobj=raw, mode="w:gz") as archive:
        for name in BUNDLE_FILES:
            path = source / name
            info = os.stat(path)
            member = tarfile.TarInfo(name)
            member.mode = _PRIVATE_FILE_MODE
            member.size = info.st_size
            member.mtime = int(info.st_mtime)
            with open(path, "rb") as handle:
                archive.addfile(member, handle)
    return os.stat(out_path).st_size


def import_bundle(
    bundle_path: str | os.PathLike[str],
    dest_dir: str | os.PathLike[str],
    force: bool = False,
) -> list[str]:
    """Unpack a bundle into ``dest_dir``; return the names of the files written.

    Only the known bundle files are extracted; any other entry is skipped.
    Raises :class:`ProfileError` if the destination exists and ``force`` is
    false, if the bundle cannot be read, or if it lacks any bundle file.
    """
    dest = Path(dest_dir)
    if dest.exists() and not force:
        raise ProfileError(
            f"import: profile already exists at {dest} (use force to overwrite)"
        )
    dest.mkdir(mode=_PRIVATE_DIR_MODE, parents=True, exist_ok=True)

    written: list[str] = []
    try:
        with tarfile.open(bundle_path, mode="r:gz") as archive:
            for member in archive:
                name = member.name.removeprefix("./")
                if name not in BUNDLE_FILES or not member.isfile():
                    continue
                source = archive.extractfile(member)
                if source is None:
                    continue
                target = dest / name
                fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _PRIVATE_FILE_MODE)
                with source, os.fdopen(fd, "wb") as out:
                    shutil.copyfileobj(source, out)
                if name not in written:
                    written.append(name)
    except (tarfile.TarError, EOFError, OSError) as exc:
        if isinstance(exc, FileNotFoundError):
            raise
        raise ProfileError(f"import: read bundle: {exc}") from exc

    missing = [name for name in BUNDLE_FILES if name not in written]
    if missing:
        raise ProfileError(f"import: bundle is incomplete (missing: {missing})")
    return written