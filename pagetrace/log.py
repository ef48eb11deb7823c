"""Text output for page table bitmasks and page accesses."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def format_bitmasks(masks: Iterable[int]) -> str:
    """Render the bitmask of every page table level."""
    lines = ["Bitmasks\n"]
    lines.extend(f"level {idx} mask {mask:08X}\n" for idx, mask in enumerate(masks))
    return "".join(lines)


def log_bitmasks(masks: Iterable[int], out: Optional[TextIO] = None) -> None:
    """Write the bitmask of every page table level."""
    stream = sys.stdout if out is None else out
    stream.write(format_bitmasks(masks))
    stream.flush()


def format_page_indices(
    address: int, page_indices: Iterable[int], num_accesses: int
) -> str:
    """Render an address, its page index at each level and its access count."""
    pages = "".join(f"0x{index:X} " for index in page_indices)
    return f"0x{address:08X} -> page {pages}accessed {num_accesses} times\n"


def log_pgindices_numofaccesses(
    address: int,
    page_indices: Iterable[int],
    num_accesses: int,
    out: Optional[TextIO] = None,
) -> None:
    """Write an address, its page index at each level and its access count."""
    stream = sys.stdout if out is None else out
    stream.write(format_page_indices(address, page_indices, num_accesses))
    stream.flush()