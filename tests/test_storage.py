import pytest

from storage import BufferedFileSink, SinkGroup

from .conftest import RecordingSink


def test_file_sink_creates_and_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"previous")

    sink = BufferedFileSink(path)
    assert path.read_bytes() == b""

    sink.write(b"hello\n")
    sink.close()

    assert path.read_bytes() == b"hello\n"


def test_file_sink_close_is_idempotent(tmp_path):
    sink = BufferedFileSink(tmp_path / "x")
    sink.close()
    sink.close()
    with pytest.raises(ValueError):
        sink.write(b"late")


def test_file_sink_buffers_until_close(tmp_path):
    path = tmp_path / "buffered"
    sink = BufferedFileSink(path, buffer_size=1024)
    sink.write(b"abc")
    assert path.read_bytes() == b""
    sink.close()
    assert path.read_bytes() == b"abc"


def test_sink_group_writes_lines_and_ignores_none():
    a, b = RecordingSink("a"), RecordingSink("b")
    group = SinkGroup()
    group.add(a)
    group.add(None)
    group.add(b)

    group.write_line(b"x")
    assert bytes(a.data) == bytes(b.data) == b"x\n"

    group.close()
    assert a.close_calls == b.close_calls == 1

    group.close()
    assert a.close_calls == 1
