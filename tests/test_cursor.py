import pytest

from edid_core.cursor import ByteCursor
from edid_core.errors import EndOfInput


def test_peek_and_advance():
    cur = ByteCursor(b"ab")
    assert cur.peek() == ord("a")
    assert cur.peek(1) == ord("b")
    cur.advance()
    cur.advance()
    assert cur.peek() is None
    assert cur.at_end
    with pytest.raises(EndOfInput):
        cur.advance()


def test_match_literal_moves_only_on_success():
    cur = ByteCursor(b"--- End of EDID for X ---")
    assert not cur.match_literal(b"Raw")
    assert cur.position == 0
    assert cur.match_literal(b"--- End")
    assert cur.position == 7


def test_find_literal_positions_past_match():
    cur = ByteCursor(b"noise Raw EDID bytes: 00")
    assert cur.find_literal(b"Raw EDID bytes:")
    assert cur.data[cur.position:] == b" 00"


def test_find_literal_failure_leaves_cursor_at_end():
    cur = ByteCursor(b"nothing here")
    assert not cur.find_literal(b"EDID")
    assert cur.position == len(b"nothing here")


def test_find_any_literal_prefers_earlier_literal_at_same_position():
    cur = ByteCursor(b"(--) NVIDIA(GPU-0):")
    assert cur.find_any_literal((b"NVIDIA(GPU", b"NVIDIA(")) == b"NVIDIA(GPU"
    assert cur.data[cur.position:] == b"-0):"


def test_find_any_literal_nearest_match_wins():
    cur = ByteCursor(b"NVIDIA(0): x NVIDIA(GPU-1):")
    assert cur.find_any_literal((b"NVIDIA(GPU", b"NVIDIA(")) == b"NVIDIA("
    assert cur.data[cur.position:].startswith(b"0):")


def test_find_any_literal_tie_follows_given_order():
    cur = ByteCursor(b"x NVIDIA(GPU-0):")
    assert cur.find_any_literal((b"NVIDIA(", b"NVIDIA(GPU")) == b"NVIDIA("
    assert cur.data[cur.position:] == b"GPU-0):"


def test_read_until_leaves_cursor_when_missing():
    cur = ByteCursor(b"Acme ---")
    assert cur.read_until(b"\r\n") is None
    assert cur.position == 0
    assert cur.read_until(b" ---") == b"Acme"
    assert cur.at_end


def test_seek_bounds():
    cur = ByteCursor(b"abc")
    cur.seek(3)
    with pytest.raises(ValueError):
        cur.seek(4)
