"""Multi-level page table that counts accesses to each page."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, TextIO

from pagetrace.log import log_pgindices_numofaccesses

ADDRESS_BITS = 32


class PageTableError(ValueError):
    """Raised when a page table specification cannot be built."""


def extract_page_number(address: int, mask: int, shift: int) -> int:
    """Apply a bitmask to an address and shift the result right."""
    masked = address & mask
    if shift >= ADDRESS_BITS:
        return 0
    return masked >> shift


class PageTableLevel:
    """A node of the page table tree at a given depth."""

    def __init__(self, table: "PageTable", depth: int, num_entries: int) -> None:
        self.table = table
        self.depth = depth
        self.num_entries = num_entries
        self.num_accesses = 0
        self.next_level: Dict[int, PageTableLevel] = {}

    def _child(self, index: int) -> "PageTableLevel":
        child = self.next_level.get(index)
        if child is None:
            child = PageTableLevel(
                self.table, self.depth + 1, self.table.entries_at(self.depth + 1)
            )
            self.next_level[index] = child
        return child

    def record_page_access(self, address: int, path: Optional[List[int]] = None) -> int:
        """Count an access to the page of an address, creating nodes as needed.

        Returns the number of accesses to that page so far, or 0 when the
        index at this level falls outside the level's entries.
        """
        path = [] if path is None else path
        table = self.table
        index = extract_page_number(
            address, table.bitmasks[self.depth], table.shifts[self.depth]
        )
        path.append(index)
        if index >= self.num_entries:
            return 0
        child = self._child(index)
        if self.depth == table.level_count - 1:
            child.num_accesses += 1
            log_pgindices_numofaccesses(address, path, child.num_accesses, table.out)
            return child.num_accesses
        return child.record_page_access(address, path)


class PageTable:
    """A page table with one level per entry of ``bit_lengths``."""

    def __init__(self, bit_lengths: Sequence[int], out: Optional[TextIO] = None) -> None:
        lengths = list(bit_lengths)
        if not lengths:
            raise PageTableError("page table needs at least one level")
        self.level_count = len(lengths)
        self.out = out
        self.bitmasks: List[int] = []
        self.shifts: List[int] = []
        self.entry_counts: List[int] = []

        shift = ADDRESS_BITS
        total = 0
        for bits in lengths:
            if bits < 0:
                raise PageTableError(f"negative bit count: {bits}")
            total += bits
            if total > ADDRESS_BITS:
                raise PageTableError(
                    f"levels use {total} bits, more than {ADDRESS_BITS}"
                )
            shift -= bits
            self.bitmasks.append(((1 << bits) - 1) << shift)
            self.shifts.append(shift)
            self.entry_counts.append(1 << bits)

        self.root = PageTableLevel(self, 0, self.entry_counts[0])

    def entries_at(self, depth: int) -> int:
        """Number of entries of a node at the given depth; 0 below the leaves."""
        return self.entry_counts[depth] if depth < self.level_count else 0

    def record_page_access(self, address: int) -> int:
        """Count an access to the page of an address and return its count."""
        return self.root.record_page_access(address, [])