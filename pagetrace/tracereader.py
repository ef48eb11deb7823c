"""Reading and decoding of binary address trace files.

Each record in a trace is 12 bytes, stored little-endian: a 32-bit
address, four single-byte fields (request type, size, attributes,
processor) and a 32-bit timestamp.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Iterator, Optional, Sequence

_RECORD = struct.Struct("<I4BI")
RECORD_SIZE = _RECORD.size
_PROGRESS_INTERVAL = 100000


class RequestType(IntEnum):
    """Kinds of bus request recorded in a trace."""

    FETCH = 0x00
    MEMREAD = 0x01
    MEMREADINV = 0x02
    MEMWRITE = 0x03
    IOREAD = 0x10
    IOWRITE = 0x11
    DEFERREPLY = 0x20
    INTA = 0x21
    CNTRLAGNTRES = 0x22
    BRTRACEREC = 0x23
    SHUTDOWN = 0x31
    FLUSH = 0x32
    HALT = 0x33
    SYNC = 0x34
    FLUSHACK = 0x35
    STOPCLKACK = 0x36
    SMIACK = 0x37


_LABELS = {
    RequestType.FETCH: "FETCH\t\t",
    RequestType.MEMREAD: "MEMREAD\t",
    RequestType.MEMREADINV: "MEMREADINV\t",
    RequestType.MEMWRITE: "MEMWRITE\t",
    RequestType.IOREAD: "IOREAD\t\t",
    RequestType.IOWRITE: "IOWRITE\t",
    RequestType.DEFERREPLY: "DEFERREPLY\t",
    RequestType.INTA: "INTA\t\t",
    RequestType.CNTRLAGNTRES: "CNTRLAGNTRES\t",
    RequestType.BRTRACEREC: "BRTRACEREC\t",
    RequestType.SHUTDOWN: "SHUTDOWN\t",
    RequestType.FLUSH: "FLUSH\t\t",
    RequestType.HALT: "HALT\t\t",
    RequestType.SYNC: "SYNC\t\t",
    RequestType.FLUSHACK: "FLUSHACK\t",
    RequestType.STOPCLKACK: "STOPCLKAK\t",
    RequestType.SMIACK: "SMIACK\t\t",
}


@dataclass(frozen=True)
class AddressTrace:
    """One record of an address trace."""

    addr: int
    reqtype: int = RequestType.FETCH
    size: int = 0
    attr: int = 0
    proc: int = 0
    time: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "AddressTrace":
        """Decode a record from its 12-byte little-endian form."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"trace record must be {RECORD_SIZE} bytes, got {len(data)}"
            )
        addr, reqtype, size, attr, proc, time = _RECORD.unpack(data)
        return cls(addr, reqtype, size, attr, proc, time)

    def to_bytes(self) -> bytes:
        """Encode the record in its 12-byte little-endian form."""
        try:
            return _RECORD.pack(
                self.addr, self.reqtype, self.size, self.attr, self.proc, self.time
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc


def swap_endian(num: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes((num & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def next_address(stream: BinaryIO) -> Optional[AddressTrace]:
    """Read the next record from a binary stream, or None when none is left."""
    data = stream.read(RECORD_SIZE)
    if len(data) < RECORD_SIZE:
        return None
    return AddressTrace.from_bytes(data)


def read_trace(stream: BinaryIO) -> Iterator[AddressTrace]:
    """Yield every complete record in a binary stream."""
    while (trace := next_address(stream)) is not None:
        yield trace


def decode_address(trace: AddressTrace) -> str:
    """Render a record as one line of text."""
    try:
        label = _LABELS[RequestType(trace.reqtype)]
    except ValueError:
        label = ""
    return (
        f"{trace.addr:08x} {label}"
        f"{trace.size:2d}\t{trace.attr:02x}\t{trace.proc:1d}\t{trace.time:08x}\n"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every record of a trace file in readable form."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: tracereader input_byutr_file", file=sys.stderr)
        return 1
    path = args[0]
    try:
        stream = open(path, "rb")
    except OSError:
        print(f"cannot open {path} for reading", file=sys.stderr)
        return 1
    with stream:
        for count, trace in enumerate(read_trace(stream), start=1):
            sys.stdout.write(decode_address(trace))
            if count % _PROGRESS_INTERVAL == 0:
                sys.stderr.write(
                    f"{count // _PROGRESS_INTERVAL}K samples processed\r"
                )
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())