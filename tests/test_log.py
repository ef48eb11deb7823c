import io

from pagetrace.log import (
    format_bitmasks,
    format_page_indices,
    log_bitmasks,
    log_pgindices_numofaccesses,
)


def test_format_bitmasks_example():
    assert format_bitmasks([0xF0000000, 0x0FF00000]) == (
        "Bitmasks\nlevel 0 mask F0000000\nlevel 1 mask 0FF00000\n"
    )


def test_format_bitmasks_empty_has_header_only():
    assert format_bitmasks([]) == "Bitmasks\n"


def test_format_bitmasks_masks_parse_back():
    masks = [0xFF000000, 0x00FFF000, 0x00000FFF]
    lines = format_bitmasks(masks).splitlines()
    assert lines[0] == "Bitmasks"
    assert len(lines) == len(masks) + 1
    for idx, (line, mask) in enumerate(zip(lines[1:], masks)):
        words = line.split()
        assert words[1] == str(idx)
        assert len(words[3]) == 8
        assert int(words[3], 16) == mask


def test_log_bitmasks_writes_to_stream():
    masks = [0xC0000000, 0x3C000000]
    out = io.StringIO()
    log_bitmasks(masks, out)
    assert out.getvalue() == format_bitmasks(masks)


def test_log_bitmasks_defaults_to_stdout(capsys):
    log_bitmasks([0x80000000])
    assert capsys.readouterr().out == format_bitmasks([0x80000000])


def test_format_page_indices_example():
    assert format_page_indices(0x0041F760, [0x0, 0x41, 0xF], 1) == (
        "0x0041F760 -> page 0x0 0x41 0xF accessed 1 times\n"
    )


def test_format_page_indices_parse_back():
    address, indices, count = 0xDEADBEEF, [0xDE, 0xAD, 0xBEE], 7
    words = format_page_indices(address, indices, count).split()
    assert int(words[0], 16) == address
    assert words[1:3] == ["->", "page"]
    assert [int(w, 16) for w in words[3:3 + len(indices)]] == indices
    assert words[-3:] == ["accessed", str(count), "times"]


def test_format_page_indices_uppercase_hex():
    line = format_page_indices(0xABCDEF, [0xAB], 2)
    assert line == line.upper().replace("0X", "0x").replace("ACCESSED", "accessed").replace("TIMES", "times").replace("PAGE", "page")


def test_log_pgindices_writes_to_stream():
    out = io.StringIO()
    log_pgindices_numofaccesses(0x1234, [0x1, 0x2], 3, out)
    assert out.getvalue() == format_page_indices(0x1234, [0x1, 0x2], 3)


def test_log_pgindices_defaults_to_stdout(capsys):
    log_pgindices_numofaccesses(0x10, [0x0], 5)
    assert capsys.readouterr().out == format_page_indices(0x10, [0x0], 5)