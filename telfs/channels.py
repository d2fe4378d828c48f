"""Channel descriptions and parsing of channel identifiers."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass

_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

NO_CHANNELS_MESSAGE = (
    "No channels found. Create a private channel in Telegram, then re-run this command."
)


@dataclass(frozen=True)
class ChannelInfo:
    """A channel the account can see, with the permissions that matter for storage."""

    id: int
    title: str
    username: str = ""
    can_post: bool = False
    is_creator: bool = False

    @property
    def display_title(self) -> str:
        """Title with the public handle appended when there is one."""
        if self.username:
            return f"{self.title}  (@{self.username})"
        return self.title


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def format_channel_table(channels: Iterable[ChannelInfo]) -> str:
    """Render channels as an ID/POST/OWN/TITLE table, or a hint when there are none."""
    rows = list(channels)
    if not rows:
        return NO_CHANNELS_MESSAGE
    lines = [f"{'ID':<15}  {'POST':<4}  {'OWN':<4}  TITLE"]
    lines.extend(
        f"{ch.id:<15d}  {_yes_no(ch.can_post):<4}  {_yes_no(ch.is_creator):<4}  {ch.display_title}"
        for ch in rows
    )
    return "\n".join(lines)


def parse_channel_id(text: str) -> int:
    """Parse a signed 64-bit decimal channel id; raise ``ValueError`` if it is not one."""
    quoted = json.dumps(text, ensure_ascii=False)
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"channel set: invalid id {quoted}: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"channel set: invalid id {quoted}: value out of range")
    return value