# pagetrace

pagetrace simulates a multi-level page table for 32-bit addresses. It reads
a binary memory address trace made of 12-byte little-endian records. For each
address it walks the page table tree and creates levels as they are needed.
It then prints the page index at each level and the number of times that page
has been accessed so far.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
pagetrace TRACE_FILE "BITS..."
```

`BITS` is a space-separated list of bit counts, one for each page table level,
starting from the root. The counts must add up to 32 or less. For example,
`"4 8 8"` builds a three-level table that uses the top 20 bits of each
address.

```
pagetrace trace.tr "4 8 8"
```

The program first prints the bitmask for each level:

```
Bitmasks
level 0 mask F0000000
level 1 mask 0FF00000
level 2 mask 000FF000
```

After that it prints one line for each address in the trace:

```
0x0041F7A0 -> page 0x0 0x4 0x1F accessed 1 times
```

The command exits with status 1 when:

- fewer than two arguments are given,
- the bit configuration is empty, holds a token that does not start with an
  integer, holds a negative count, or adds up to more than 32 bits,
- the trace file cannot be opened (the bitmasks have been printed by then).

### Dumping a trace

The `tracereader` command takes one trace file and prints every record on its
own line. Each line shows the address, the request type, the size, the
attributes, the processor and the timestamp, separated by tabs. Every 100000
records it writes a progress count to standard error.

```
tracereader trace.tr
```

## Library use

```python
import sys
from pagetrace.pagetable import PageTable
from pagetrace.tracereader import read_trace

table = PageTable([4, 8, 8], sys.stdout)
with open("trace.tr", "rb") as stream:
    for record in read_trace(stream):
        table.record_page_access(record.addr)
```

- `pagetrace.pagetable.PageTable` holds the `bitmasks`, `shifts` and
  `entry_counts` of each level. Its `record_page_access` returns the access
  count of the address's page. It returns 0 when an index falls outside a
  level. A bad specification raises `PageTableError`, which is a `ValueError`.
- `pagetrace.pagetable.extract_page_number(address, mask, shift)` masks an
  address and shifts the result right. It returns 0 for a shift of 32 or more.
- `pagetrace.tracereader.AddressTrace` decodes one 12-byte record with
  `from_bytes` and encodes it with `to_bytes`. `next_address` reads one record
  from a binary stream, and `read_trace` yields every complete record.
  `decode_address` renders a record as a line of text. `RequestType` lists the
  request type codes, and `swap_endian` reverses the bytes of a 32-bit value.
- `pagetrace.log` formats the bitmask listing and the per-access lines
  (`format_bitmasks`, `format_page_indices`). It also writes them to a stream
  (`log_bitmasks`, `log_pgindices_numofaccesses`).
- `pagetrace.cli.parse_bit_config` turns a bit configuration string into a
  list of integers.