"""Command-line entry point for the local, offline parts of telfs."""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from telfs.mounts import dir_stats, file_stat_line, format_mount_table
from telfs.profiles import (
    BUNDLE_FILES,
    CONFIG_FILE,
    DB_FILE,
    SESSION_FILE,
    ProfileError,
    create_profile,
    delete_profile,
    export_bundle,
    import_bundle,
    list_profiles,
    validate_profile_name,
)
from telfs.units import human_bytes

VERSION = "dev"
COMMIT = "none"
BUILD_DATE = "unknown"

USAGE = """telfs — FUSE filesystem backed by a Telegram channel

Usage:
  telfs profile {list,show,create,delete,use,export,import}
                                    Manage multiple profiles (accounts/channels).
  telfs status                      One-screen summary of the active profile.
  telfs version                     Print version information.

Environment:
  TELFS_PROFILE    Active profile name (overrides ~/.config/telfs/active)
"""


class CommandError(Exception):
    """A subcommand was used wrongly or refused to run."""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _config_root() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return Path(base) / "telfs"


def _profiles_root() -> Path:
    return _config_root() / "profiles"


def _active_file() -> Path:
    return _config_root() / "active"


def _active_profile() -> str:
    env = os.environ.get("TELFS_PROFILE", "").strip()
    if env:
        return env
    try:
        return _active_file().read_text(encoding="utf-8").strip()
    except OSError:
        return ""


def _profile_dir(name: str) -> Path:
    return _profiles_root() / validate_profile_name(name)


def _data_dir() -> Path:
    active = _active_profile()
    return _profile_dir(active) if active else _config_root()


# ── profile ─────────────────────────────────────────────────────────


def _profile_list(args: list[str]) -> None:
    names = list_profiles(_profiles_root())
    if not names:
        print("No profiles yet. Create one with `telfs profile create <name>`.")
        return
    active = _active_profile()
    for name in names:
        print(("* " if name == active else "  ") + name)
    if not active:
        print("\nNo active profile selected. Run `telfs profile use <name>` or set TELFS_PROFILE.")


def _profile_show(args: list[str]) -> None:
    argparse.ArgumentParser(prog="telfs profile show").parse_args(args)
    active = _active_profile()
    if active:
        print(f"Active profile: {active}")
    else:
        print("Active profile: (none — using legacy path)")
    print(f"Data dir:       {_data_dir()}")


def _profile_create(args: list[str]) -> None:
    if not args:
        raise CommandError("profile create: usage: profile create <name>")
    name = args[0]
    directory = create_profile(_profiles_root(), name)
    print(f"Created profile {_quote(name)} at {directory}")
    print()
    print("Next steps:")
    print(f"  TELFS_PROFILE={name} telfs login           # authenticate this profile")
    print(f"  TELFS_PROFILE={name} telfs channel set X   # bind to a channel")
    print(f"  telfs profile use {name}                  # make this profile the default")


def _profile_delete(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="telfs profile delete")
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    parser.add_argument("name", nargs="?")
    opts = parser.parse_args(args)
    if opts.name is None:
        raise CommandError("profile delete: usage: profile delete [--yes] <name>")
    directory = delete_profile(_profiles_root(), opts.name, confirm=opts.yes)
    print(f"Deleted profile {_quote(opts.name)} ({directory})")


def _profile_use(args: list[str]) -> None:
    if not args:
        raise CommandError("profile use: usage: profile use <name>")
    name = args[0]
    directory = _profile_dir(name)
    if not directory.exists():
        raise CommandError(
            f"profile {_quote(name)} does not exist (create it with `telfs profile create {name}`)"
        )
    active = _active_file()
    active.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    active.write_text(name + "\n", encoding="utf-8")
    print(f"Active profile set to {_quote(name)} ({directory})")


def _profile_export(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="telfs profile export")
    parser.add_argument("--profile", default="", help="profile to export (default: active profile)")
    parser.add_argument("output", nargs="*")
    opts = parser.parse_args(args)
    if len(opts.output) != 1:
        raise CommandError(
            "profile export: usage: profile export [--profile name] <output.tar.gz>"
        )
    out_path = opts.output[0]
    source = _profile_dir(opts.profile) if opts.profile else _data_dir()
    size = export_bundle(source, out_path)
    print(f"Exported {len(BUNDLE_FILES)} files → {out_path} ({size} bytes)")
    print()
    print("This bundle contains MTProto session credentials and (if encryption is enabled)")
    print("the salt and canary needed to derive the data key from your passphrase.")
    print("Treat it like a private key. Anyone with the bundle + your passphrase has full")
    print("read/write access to the filesystem.")


def _profile_import(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="telfs profile import")
    parser.add_argument("--profile", default="default", help="destination profile name")
    parser.add_argument("--force", action="store_true",
                        help="overwrite an existing profile of the same name")
    parser.add_argument("bundle", nargs="*")
    opts = parser.parse_args(args)
    if len(opts.bundle) != 1:
        raise CommandError(
            "profile import: usage: profile import [--profile name] [--force] <input.tar.gz>"
        )
    dest = _profile_dir(opts.profile)
    written = import_bundle(opts.bundle[0], dest, force=opts.force)
    print(f"Imported {len(written)} files → profile {_quote(opts.profile)} ({dest})")
    print()
    print("Activate it with:")
    print(f"  telfs profile use {opts.profile}")
    print("Or run a one-off command with:")
    print(f"  TELFS_PROFILE={opts.profile} telfs mount ~/your/mountpoint")


_PROFILE_COMMANDS: dict[str, Callable[[list[str]], None]] = {
    "list": _profile_list,
    "show": _profile_show,
    "create": _profile_create,
    "delete": _profile_delete,
    "use": _profile_use,
    "export": _profile_export,
    "import": _profile_import,
}


def _cmd_profile(args: list[str]) -> None:
    if not args:
        raise CommandError(
            "profile: missing subcommand (list, show, create, delete, use, export, import)"
        )
    handler = _PROFILE_COMMANDS.get(args[0])
    if handler is None:
        raise CommandError(f"profile: unknown subcommand {_quote(args[0])}")
    handler(args[1:])


# ── status ──────────────────────────────────────────────────────────


def _cmd_status(args: list[str]) -> None:
    data_dir = _data_dir()
    active = _active_profile()
    print("== Profile ==")
    if active:
        print("  active:", active)
    else:
        print("  active: (none — using legacy path)")
    print("  data:  ", data_dir)

    print("\n== Files ==")
    for name in (CONFIG_FILE, SESSION_FILE, DB_FILE):
        print(file_stat_line(data_dir / name, name))
    try:
        stats = dir_stats(data_dir / "cache")
    except FileNotFoundError:
        print(f"  {'cache/':<14}  (not yet populated)")
    except OSError:
        pass
    else:
        print(f"  {'cache/':<14}  {stats.file_count} file(s), {human_bytes(stats.total_bytes)}")

    print()
    print(format_mount_table())


_COMMANDS: dict[str, Callable[[list[str]], None]] = {
    "profile": _cmd_profile,
    "status": _cmd_status,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one telfs subcommand and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(USAGE)
        return 2
    command, rest = args[0], args[1:]
    if command in ("-h", "--help", "help"):
        sys.stdout.write(USAGE)
        return 0
    if command in ("version", "-v", "--version"):
        print(f"telfs {VERSION} (commit {COMMIT}, built {BUILD_DATE})")
        return 0
    handler = _COMMANDS.get(command)
    if handler is None:
        sys.stderr.write(f"unknown subcommand {_quote(command)}\n\n{USAGE}")
        return 2
    try:
        handler(rest)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    except (CommandError, ProfileError, OSError) as exc:
        print(f"telfs: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())