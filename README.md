# telfs

Local tooling for a filesystem whose data is stored as chunks in a
messaging channel. The package works only on the local side: profile
directories and their portable bundles, a status view of the active
profile, the FUSE mount table, garbage classification of channel
messages, duration parsing and a few formatting helpers.

## Install

    pip install .

To run the tests:

    pip install '.[test]'
    pytest

## Command line

Installing the package gives you the `telfs` command:

    telfs --help
    telfs version
    telfs status

`telfs status` prints the active profile and its data directory, the
size and modification time of `config.toml`, `session.json` and
`db.sqlite`, the file count and total size of the `cache/` directory,
and every `fuse.telfs` mount listed in `/proc/mounts`.

Profiles hold the config, the session and the metadata database for one
account/channel pair:

    telfs profile list
    telfs profile show
    telfs profile create work
    telfs profile use work
    telfs profile export backup.tar.gz
    telfs profile export --profile work backup.tar.gz
    telfs profile import --profile restored backup.tar.gz
    telfs profile import --profile restored --force backup.tar.gz
    telfs profile delete --yes work

Profiles live under `$XDG_CONFIG_HOME/telfs/profiles/` (or
`~/.config/telfs/profiles/`). The active profile is taken from the
`TELFS_PROFILE` environment variable, or else from the `active` file
that `telfs profile use` writes next to the `profiles` directory. With no
active profile, the config directory itself is used as the data
directory. `profile delete` refuses to run without `--yes`; `profile
import` refuses to overwrite an existing profile without `--force` and
defaults to the profile name `default`.

An exported bundle holds session credentials. Keep it as safe as a
private key.

## Library

- `telfs.units.human_bytes(n)` renders byte counts as whole B, KiB, MiB
  or GiB.
- `telfs.seed.generate_pattern(n)`, `pattern_md5(n)` and
  `split_chunks(data, chunk_size)` build a deterministic repeating
  alphanumeric test file, its MD5 hex digest, and its chunks.
- `telfs.durations.parse_duration(text)` parses `300ms`, `-1.5h`,
  `2h45m` and the like into a `timedelta`; `parse_duration_loose(text)`
  also accepts a `d`/`D` day suffix such as `7d`. `short_age(seconds)`
  renders an age as one unit: `45s`, `5m`, `3h`, `12d`.
- `telfs.mounts` reads the mount table (`telfs_mounts`,
  `is_any_mounted`, `format_mount_table`), sums a directory tree with
  `dir_stats` (returning a `DirStats`), and describes one file with
  `file_stat_line`.
- `telfs.gc.find_garbage(messages, referenced, current_snapshot)` sorts
  `ChannelMessage` objects by `MessageKind` into orphan chunks and stale
  snapshots and returns a `GarbageReport`; `GarbageReport.to_delete()`
  lists the ids to remove, and `delete_batches(ids, size)` splits them
  into batches of at most 100 by default.
- `telfs.profiles` holds `validate_profile_name`, `list_profiles`,
  `create_profile`, `delete_profile`, `export_bundle` and
  `import_bundle`; refusals raise `ProfileError`. Bundles are gzipped
  tar files with `config.toml`, `session.json` and `db.sqlite`.
- `telfs.channels` has `ChannelInfo`, `format_channel_table` for an
  ID/POST/OWN/TITLE listing, and `parse_channel_id` for signed 64-bit
  channel ids.
- `telfs.cli.main(argv)` runs one subcommand and returns the exit
  status.

## What this package does not do

It never talks to the messaging channel and never opens the metadata
database. There is no login, no channel selection, no mounting, no
encryption setup, no snapshot listing or restore, no integrity walk over
stored chunks, no trash management and no web interface. `find_garbage`
only classifies messages you hand it; deleting them is up to the
caller. `telfs status` reports files and mounts but not the filesystem's
contents or settings.