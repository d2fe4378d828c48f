import pytest

from telfs.cli import main


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    monkeypatch.delenv("TELFS_PROFILE", raising=False)
    return tmp_path / "cfg" / "telfs"


def test_no_arguments_prints_usage_and_fails(home, capsys):
    assert main([]) == 2
    assert "Usage:" in capsys.readouterr().err


def test_help(home, capsys):
    assert main(["--help"]) == 0
    assert "telfs profile" in capsys.readouterr().out


def test_version(home, capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == "telfs dev (commit none, built unknown)"


def test_unknown_subcommand(home, capsys):
    assert main(["bogus"]) == 2
    assert 'unknown subcommand "bogus"' in capsys.readouterr().err


def test_profile_list_empty(home, capsys):
    assert main(["profile", "list"]) == 0
    assert "No profiles yet" in capsys.readouterr().out


def test_profile_create_use_list(home, capsys):
    assert main(["profile", "create", "work"]) == 0
    assert (home / "profiles" / "work").is_dir()
    assert main(["profile", "create", "home"]) == 0
    assert main(["profile", "use", "work"]) == 0
    capsys.readouterr()
    assert main(["profile", "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["  home", "* work"]


def test_profile_create_twice_fails(home, capsys):
    assert main(["profile", "create", "work"]) == 0
    assert main(["profile", "create", "work"]) == 1
    assert "already exists" in capsys.readouterr().err


def test_profile_use_missing(home, capsys):
    assert main(["profile", "use", "ghost"]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_profile_delete_requires_yes(home, capsys):
    main(["profile", "create", "work"])
    assert main(["profile", "delete", "work"]) == 1
    assert (home / "profiles" / "work").is_dir()
    assert main(["profile", "delete", "--yes", "work"]) == 0
    assert not (home / "profiles" / "work").exists()


def test_profile_missing_subcommand(home, capsys):
    assert main(["profile"]) == 1
    assert "missing subcommand" in capsys.readouterr().err


def test_export_import_round_trip(home, tmp_path, capsys):
    main(["profile", "create", "work"])
    src = home / "profiles" / "work"
    contents = {
        "config.toml": b"api_id = 1\n",
        "session.json": b"{}",
        "db.sqlite": b"sqlite-bytes",
    }
    for name, data in contents.items():
        (src / name).write_bytes(data)
    bundle = tmp_path / "bundle.tar.gz"
    assert main(["profile", "export", "--profile", "work", str(bundle)]) == 0
    assert bundle.is_file()
    assert main(["profile", "import", "--profile", "copy", str(bundle)]) == 0
    dest = home / "profiles" / "copy"
    for name, data in contents.items():
        assert (dest / name).read_bytes() == data
    assert main(["profile", "import", "--profile", "copy", str(bundle)]) == 1


def test_export_uninitialized_profile_fails(home, tmp_path, capsys):
    main(["profile", "create", "empty"])
    assert main(["profile", "export", "--profile", "empty", str(tmp_path / "b.tar.gz")]) == 1
    assert "missing" in capsys.readouterr().err


def test_status_reports_missing_files(home, capsys, monkeypatch):
    monkeypatch.setenv("TELFS_PROFILE", "work")
    main(["profile", "create", "work"])
    capsys.readouterr()
    assert main(["status"]) == 0
    out = capsys.readouterr().out
    assert "  active: work" in out
    assert "== Files ==" in out
    assert out.count("(missing)") == 3
    assert "(not yet populated)" in out
    assert "== Active Mounts (FUSE) ==" in out