import pytest

from edid_core.errors import EmptyEdid, MalformedFooter, MalformedHexPair
from edid_extract.classify import Dialect
from edid_extract.collect import collect_records
from edid_extract.text_dialect import read_text_edid

FOOMON = (
    b"00 FF FF FF\r\n"
    b"AA BB CC DD\r\n"
    b"\r\n"
    b"EDID Version : 1.3\r\n"
    b"Monitor Name : FooMon\r\n"
)


def test_two_rows_and_monitor_name():
    rec = read_text_edid(FOOMON)
    assert rec.data == bytes([0x00, 0xFF, 0xFF, 0xFF, 0xAA, 0xBB, 0xCC, 0xDD])
    assert rec.name == "FooMon"
    assert rec.offset == 0


def test_dash_separators_and_annotation_column():
    data = (
        b"00 FF FF FF-FF FF FF 00    ........\r\n"
        b"5A-63 47-4B    ZcGK\r\n"
        b"\r\n"
        b"EDID Version      : 1.4\r\n"
        b"Monitor Name      : VPD150\r\n"
    )
    rec = read_text_edid(data)
    assert rec.data == bytes.fromhex("00ffffffffffff00" "5a63474b")
    assert rec.name == "VPD150"


def test_annotation_text_is_ignored_until_row_end():
    data = (
        b"01 02  anything: 99 -- goes here\r\n"
        b"03\r\n\r\n"
        b"EDID Version : 1.3\r\nMonitor Name : Mon\r\n"
    )
    rec = read_text_edid(data)
    assert rec.data == b"\x01\x02\x03"


def test_invalid_character_in_table():
    with pytest.raises(MalformedHexPair):
        read_text_edid(b"00 FZ\r\n\r\nMonitor Name : X\r\n")


def test_unexpected_character_between_pairs():
    with pytest.raises(MalformedHexPair):
        read_text_edid(b"00 :1\r\n\r\nMonitor Name : X\r\n")


def test_table_must_start_at_offset_zero():
    with pytest.raises(MalformedHexPair):
        read_text_edid(b"Report\r\n00 11\r\n\r\nMonitor Name : X\r\n")


def test_empty_table():
    with pytest.raises(EmptyEdid):
        read_text_edid(b"  \r\n\r\nEDID Version : 1.3\r\nMonitor Name : X\r\n")


def test_missing_monitor_name():
    with pytest.raises(MalformedFooter):
        read_text_edid(b"00 11\r\n\r\nEDID Version : 1.3\r\n")


def test_monitor_name_requires_crlf():
    with pytest.raises(MalformedFooter):
        read_text_edid(b"00 11\r\n\r\nMonitor Name : X")


def test_overlong_monitor_name():
    data = b"00 11\r\n\r\nMonitor Name : " + b"m" * 513 + b"\r\n"
    with pytest.raises(MalformedFooter):
        read_text_edid(data)


def test_failed_text_dump_produces_no_record():
    with pytest.warns(UserWarning, match="text dump"):
        assert collect_records(b"00 11\r\n\r\nEDID Version : 1.3\r\n", Dialect.TEXT_FORMAT) == []


def test_text_dump_yields_exactly_one_record():
    records = collect_records(FOOMON, Dialect.TEXT_FORMAT)
    assert [r.name for r in records] == ["FooMon"]
