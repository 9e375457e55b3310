import pytest

from usracc.framing import FrameReassembler, NifHeader


def _frame(seq: int, body: bytes, invoke: int = 1) -> bytes:
    header = NifHeader(head=0x1A2B3C4D, invoke=invoke, seq=seq, length=len(body))
    return header.pack() + body


def test_pack_unpack_round_trip():
    header = NifHeader(
        head=0x1A2B3C4D, d_ip=1, s_ip=2, version=3, invoke=4, dialog=5, seq=6, length=7
    )
    assert NifHeader.unpack(header.pack()) == header


def test_packed_size_matches_header_size():
    assert len(NifHeader().pack()) == NifHeader.SIZE


def test_head_marker_is_big_endian():
    assert NifHeader(head=0x1A2B3C4D).pack()[:4] == b"\x1a\x2b\x3c\x4d"


def test_length_is_last_field():
    packed = NifHeader(length=10086).pack()
    assert int.from_bytes(packed[-4:], "big") == 10086


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        NifHeader.unpack(b"\x00" * (NifHeader.SIZE - 1))


def test_unpack_ignores_trailing_bytes():
    header = NifHeader(seq=9, length=3)
    assert NifHeader.unpack(header.pack() + b"abc") == header


def test_single_complete_frame():
    frames = FrameReassembler().feed(_frame(1, b"hello"))
    assert len(frames) == 1
    header, body = frames[0]
    assert header.seq == 1
    assert body == b"hello"


def test_empty_body_frame():
    reassembler = FrameReassembler()
    frames = reassembler.feed(_frame(5, b""))
    assert [(h.seq, b) for h, b in frames] == [(5, b"")]
    assert reassembler.pending == b""


def test_frame_split_across_feeds():
    data = _frame(2, b"payload")
    reassembler = FrameReassembler()
    assert reassembler.feed(data[:10]) == []
    assert reassembler.feed(data[10:20]) == []
    frames = reassembler.feed(data[20:])
    assert [b for _, b in frames] == [b"payload"]


def test_multiple_frames_in_one_feed_keep_order():
    data = _frame(1, b"a") + _frame(2, b"bb") + _frame(3, b"ccc")
    frames = FrameReassembler().feed(data)
    assert [(h.seq, b) for h, b in frames] == [(1, b"a"), (2, b"bb"), (3, b"ccc")]


def test_trailing_partial_frame_is_kept():
    second = _frame(8, b"later")
    reassembler = FrameReassembler()
    frames = reassembler.feed(_frame(7, b"now") + second[:5])
    assert [h.seq for h, _ in frames] == [7]
    assert reassembler.pending == second[:5]
    rest = reassembler.feed(second[5:])
    assert [(h.seq, b) for h, b in rest] == [(8, b"later")]
    assert reassembler.pending == b""


def test_byte_at_a_time_matches_whole_feed():
    data = _frame(1, b"xyz") + _frame(2, b"") + _frame(3, b"0123456789")
    whole = FrameReassembler().feed(data)
    reassembler = FrameReassembler()
    piecewise = []
    for i in range(len(data)):
        piecewise.extend(reassembler.feed(data[i : i + 1]))
    assert piecewise == whole


def test_oversized_frame_raises_and_clears():
    reassembler = FrameReassembler()
    header = NifHeader(length=FrameReassembler.BUFFER_SIZE)
    with pytest.raises(ValueError):
        reassembler.feed(header.pack())
    assert reassembler.pending == b""