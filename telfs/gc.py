"""Classification of channel messages into live data and reclaimable garbage."""

from __future__ import annotations

import enum
from collections.abc import Collection, Iterable, Iterator, Sequence
from dataclasses import dataclass, field


class MessageKind(enum.Enum):
    """What a channel message holds."""

    CHUNK = "chunk"
    SNAPSHOT = "snapshot"
    OTHER = "other"


@dataclass(frozen=True)
class ChannelMessage:
    """A message seen while walking the backing channel."""

    id: int
    kind: MessageKind


@dataclass
class GarbageReport:
    """Outcome of a garbage scan over the channel history."""

    total_chunks: int = 0
    total_snapshots: int = 0
    referenced_count: int = 0
    current_snapshot: int = 0
    orphan_chunks: list[int] = field(default_factory=list)
    stale_snapshots: list[int] = field(default_factory=list)

    def to_delete(self) -> list[int]:
        """Message ids to remove: orphan chunks first, then stale snapshots."""
        return [*self.orphan_chunks, *self.stale_snapshots]


def find_garbage(
    messages: Iterable[ChannelMessage],
    referenced: Collection[int],
    current_snapshot: int = 0,
) -> GarbageReport:
    """Classify channel messages.

    Chunk messages whose id is not in ``referenced`` are orphans; snapshot
    messages other than ``current_snapshot`` are stale. Other kinds are ignored.
    """
    report = GarbageReport(
        referenced_count=len(referenced), current_snapshot=current_snapshot
    )
    for message in messages:
        if message.kind is MessageKind.CHUNK:
            report.total_chunks += 1
            if message.id not in referenced:
                report.orphan_chunks.append(message.id)
        elif message.kind is MessageKind.SNAPSHOT:
            report.total_snapshots += 1
            if message.id != current_snapshot:
                report.stale_snapshots.append(message.id)
    return report


def delete_batches(ids: Sequence[int], size: int = 100) -> Iterator[list[int]]:
    """Yield ``ids`` in consecutive batches of at most ``size`` elements."""
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(ids), size):
        yield list(ids[start:start + size])