"""Command that runs an address trace through a multi-level page table."""

from __future__ import annotations

import re
import sys
from typing import List, Optional, Sequence

from pagetrace.log import log_bitmasks
from pagetrace.pagetable import PageTable, PageTableError
from pagetrace.tracereader import read_trace

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_bit_config(text: str) -> List[int]:
    """Read the bit count of each level from a space separated string.

    Each token contributes the integer at its start; a token that does not
    begin with an integer raises ValueError.
    """
    bits = []
    for token in text.split(" "):
        if not token:
            continue
        match = _LEADING_INT.match(token)
        if match is None:
            raise ValueError(f"invalid bit count: {token!r}")
        bits.append(int(match.group(1)))
    return bits


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the page table, print its bitmasks and record every traced access."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("expecting at least 3 arguments\n")
        return 1
    trace_path, bit_config = args[0], args[1]

    try:
        table = PageTable(parse_bit_config(bit_config))
    except (PageTableError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    log_bitmasks(table.bitmasks)

    try:
        stream = open(trace_path, "rb")
    except OSError:
        return 1
    with stream:
        for trace in read_trace(stream):
            table.record_page_access(trace.addr)
    return 0


if __name__ == "__main__":
    sys.exit(main())