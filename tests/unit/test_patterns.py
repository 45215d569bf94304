from __future__ import annotations

import pytest

from magicsniff.core.exceptions import MagicSniffError, RuleTableError
from magicsniff.core.patterns import (
    NULL_END,
    NULL_START,
    Anchor,
    Pattern,
    Rule,
    ends_with,
    starts_with,
)
from magicsniff.domain.file_types import FileType


@pytest.mark.unit
def test_start_pattern_matches_at_offset_zero():
    pattern = starts_with(b"BM")
    assert pattern.matches(b"BM\x00\x00")
    assert pattern.matches(b"BM")
    assert not pattern.matches(b"MB\x00\x00")


@pytest.mark.unit
def test_start_pattern_matches_at_offset():
    pattern = starts_with(b"PKLITE", offset=0x1E)
    buffer = b"\x00" * 0x1E + b"PKLITE" + b"\x00" * 4
    assert pattern.matches(buffer)
    assert not pattern.matches(b"PKLITE" + b"\x00" * 0x30)


@pytest.mark.unit
@pytest.mark.parametrize("size", [0, 1, 0x1E, 0x1E + 5])
def test_start_pattern_out_of_range_is_false(size):
    buffer = (b"\x00" * 0x1E + b"PKLITE")[:size]
    assert starts_with(b"PKLITE", offset=0x1E).matches(buffer) is False


@pytest.mark.unit
def test_end_pattern_checks_tail():
    pattern = ends_with(b"\xff\xd9")
    assert pattern.matches(b"\xff\xd8\x00\xff\xd9")
    assert pattern.matches(b"\xff\xd9")
    assert not pattern.matches(b"\xff\xd9\x00")


@pytest.mark.unit
def test_end_pattern_offset_trims_trailing_bytes():
    pattern = ends_with(b"EOF", offset=2)
    assert pattern.matches(b"dataEOF\r\n")
    assert not pattern.matches(b"dataEOF")
    assert not pattern.matches(b"EOF\r")


@pytest.mark.unit
@pytest.mark.parametrize("buffer", [b"", b"O", b"OF"])
def test_end_pattern_longer_than_buffer_is_false(buffer):
    assert ends_with(b"EOF").matches(buffer) is False


@pytest.mark.unit
def test_end_pattern_offset_beyond_buffer_is_false():
    assert ends_with(b"A", offset=10).matches(b"AAAA") is False


@pytest.mark.unit
@pytest.mark.parametrize("pattern", [NULL_START, NULL_END, Pattern(b"", 50, Anchor.START)])
@pytest.mark.parametrize("buffer", [b"", b"x", b"\x00" * 100])
def test_null_pattern_always_matches(pattern, buffer):
    assert pattern.is_null
    assert pattern.matches(buffer) is True


@pytest.mark.unit
def test_pattern_accepts_bytearray_and_memoryview():
    pattern = starts_with(b"GIF", offset=1)
    assert pattern.matches(bytearray(b"xGIF89a"))
    assert pattern.matches(memoryview(b"xGIF89a"))
    assert ends_with(b"9a").matches(memoryview(b"xGIF89a"))


@pytest.mark.unit
def test_pattern_reach():
    assert starts_with(b"ustar", offset=0x101).reach == 0x106
    assert ends_with(b"TRUEVISION").reach == 10
    assert NULL_START.reach == 0


@pytest.mark.unit
def test_pattern_is_immutable():
    pattern = starts_with(b"BM")
    with pytest.raises(AttributeError):
        pattern.offset = 3  # type: ignore[misc]


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"signature": "BM"},
        {"signature": b"BM", "offset": -1},
        {"signature": b"BM", "offset": 1.5},
        {"signature": b"BM", "offset": True},
        {"signature": b"BM", "anchor": "start"},
    ],
)
def test_invalid_pattern_raises(kwargs):
    with pytest.raises(RuleTableError):
        Pattern(**kwargs)


@pytest.mark.unit
def test_pattern_describe():
    assert starts_with(b"BM").describe() == "start+0x0: 424d"
    assert ends_with(b"\xff").describe() == "end+0x0: ff"
    assert NULL_END.describe() == "-"


@pytest.mark.unit
def test_rule_requires_both_patterns():
    rule = Rule(FileType.PNG, start=starts_with(b"\x89PNG"), end=ends_with(b"IEND"))
    assert rule.matches(b"\x89PNG....IEND")
    assert not rule.matches(b"\x89PNG....")
    assert not rule.matches(b"....IEND")


@pytest.mark.unit
def test_rule_with_single_anchor():
    assert Rule(FileType.BMP, start=starts_with(b"BM")).matches(b"BM!")
    assert Rule(FileType.TGA, end=ends_with(b"X.\x00")).matches(b"abcX.\x00")


@pytest.mark.unit
def test_rule_without_signature_is_rejected():
    with pytest.raises(RuleTableError):
        Rule(FileType.BMP)


@pytest.mark.unit
def test_rule_rejects_swapped_anchors():
    with pytest.raises(RuleTableError):
        Rule(FileType.BMP, start=ends_with(b"BM"))
    with pytest.raises(RuleTableError):
        Rule(FileType.BMP, end=starts_with(b"BM"))


@pytest.mark.unit
def test_rule_rejects_raw_bytes_as_pattern():
    with pytest.raises(RuleTableError):
        Rule(FileType.BMP, start=b"BM")  # type: ignore[arg-type]


@pytest.mark.unit
def test_rule_rejects_unknown_file_type():
    with pytest.raises(RuleTableError) as exc:
        Rule("BMP", start=starts_with(b"BM"))  # type: ignore[arg-type]
    assert isinstance(exc.value, MagicSniffError)
    assert isinstance(exc.value, ValueError)
