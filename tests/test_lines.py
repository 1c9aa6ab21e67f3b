import io

import pytest

from parser import iter_lines


def _lines(data, chunk_size=4096):
    return list(iter_lines(io.BytesIO(data), chunk_size))


def test_splits_on_bare_newline_only():
    assert _lines(b"a\r\nb\n") == [b"a\r", b"b"]


def test_final_unterminated_line_is_returned():
    assert _lines(b"one\ntwo") == [b"one", b"two"]


def test_trailing_newline_adds_no_empty_line():
    assert _lines(b"one\n") == [b"one"]


def test_empty_lines_are_kept():
    assert _lines(b"\n\nx\n") == [b"", b"", b"x"]


def test_empty_stream():
    assert _lines(b"") == []


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7])
def test_lines_spanning_read_chunks(chunk_size):
    data = b"first line\nsecond\r\n\nlast"
    assert _lines(data, chunk_size) == [b"first line", b"second\r", b"", b"last"]


def test_rejects_non_positive_chunk_size():
    with pytest.raises(ValueError):
        list(iter_lines(io.BytesIO(b"x"), 0))


def test_read_errors_propagate():
    class Broken(io.RawIOBase):
        def read(self, size=-1):
            raise OSError("device gone")

    with pytest.raises(OSError, match="device gone"):
        list(iter_lines(Broken()))
