"""An in-memory write cache of file blocks, flushed by offset."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import BinaryIO, Iterator

MAX_CACHE_SIZE = 1 * 1024


@dataclass
class Block:
    """A run of bytes to be written at offset ``start``."""

    start: int
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class WriteCache:
    """Blocks kept in order of offset, written to ``fp`` on flush."""

    def __init__(self, fp: BinaryIO | None = None) -> None:
        self.fp = fp
        self._blocks: list[Block] = []
        self.total_size = 0

    def add(self, start: int, data: bytes) -> Block:
        """Copy ``data`` into a new block at ``start``.

        Blocks with equal offsets keep the order in which they were added.
        """
        block = Block(start, bytes(data))
        bisect.insort_right(self._blocks, block, key=lambda b: b.start)
        self.total_size += block.size
        return block

    def flush(self) -> None:
        """Write every block to its offset in ``fp``; raise OSError on failure."""
        if self.fp is None:
            raise OSError("no file to flush to")
        for block in self._blocks:
            self.fp.seek(block.start)
            written = self.fp.write(block.data)
            if written is not None and written != block.size:
                raise OSError(
                    f"short write at offset {block.start}: {written} of {block.size}"
                )

    def reset(self) -> None:
        """Drop every block."""
        self._blocks.clear()
        self.total_size = 0

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)