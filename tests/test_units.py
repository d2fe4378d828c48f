import pytest

from telfs.units import human_bytes


@pytest.mark.parametrize("n", [0, 1, 512, (1 << 10) - 1])
def test_small_values_are_plain_bytes(n):
    assert human_bytes(n) == f"{n} B"


@pytest.mark.parametrize("k", [1, 2, 64, 1023])
def test_kib(k):
    assert human_bytes(k << 10) == f"{k} KiB"


@pytest.mark.parametrize("k", [1, 4, 512, 1023])
def test_mib(k):
    assert human_bytes(k << 20) == f"{k} MiB"


@pytest.mark.parametrize("k", [1, 2, 1536])
def test_gib(k):
    assert human_bytes(k << 30) == f"{k} GiB"


def test_fractions_are_truncated():
    assert human_bytes((3 << 20) + (1 << 19)) == human_bytes(3 << 20)
    assert human_bytes((1 << 20) - 1) == human_bytes(1023 << 10)


def test_boundary_switches_unit():
    assert human_bytes((1 << 30) - 1).endswith(" MiB")
    assert human_bytes(1 << 30).endswith(" GiB")
    assert human_bytes((1 << 10) - 1).endswith(" B")
    assert human_bytes(1 << 10).endswith(" KiB")


def test_negative_stays_in_bytes():
    assert human_bytes(-5) == "-5 B"