import io

import pytest


class RecordingSink:
    """In-memory sink that logs close calls into a shared event list."""

    def __init__(self, name, events=None):
        self.name = name
        self.events = events if events is not None else []
        self.data = bytearray()
        self.close_calls = 0

    def write(self, data):
        self.data += data

    def close(self):
        self.close_calls += 1
        self.events.append(("close", self.name))

    @property
    def lines(self):
        return bytes(self.data).split(b"\n")[:-1]


def bundle(*lines, terminated=True):
    body = b"\n".join(l.encode() if isinstance(l, str) else l for l in lines)
    if terminated:
        body += b"\n"
    return io.BytesIO(body)


@pytest.fixture
def events():
    return []
