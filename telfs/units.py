"""Human-readable rendering of byte counts."""

_UNITS = (
    (30, "GiB"),
    (20, "MiB"),
    (10, "KiB"),
)


def human_bytes(n: int) -> str:
    """Render a byte count in whole KiB, MiB or GiB, or plain bytes below 1 KiB.

    Only powers of 1024 are used and fractions are dropped, which suits
    chunk sizes (always powers of two).
    """
    for shift, unit in _UNITS:
        if n >= 1 << shift:
            return f"{n >> shift} {unit}"
    return f"{n} B"