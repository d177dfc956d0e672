import signal

import pytest


class RecordingWriter:
    """書き出されたフレームを記録するだけのwriter"""

    def __init__(self):
        self.frames = []
        self.events = []

    def hide_cursor(self):
        self.events.append('hide')

    def show_cursor(self):
        self.events.append('show')

    def clear_screen(self):
        self.events.append('clear')

    def write_frame(self, field):
        self.frames.append(["".join(row) for row in field])
        self.events.append('frame')

    def flush(self):
        pass


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def restore_signals():
    saved = signal.getsignal(signal.SIGINT), signal.getsignal(signal.SIGTERM)
    yield
    signal.signal(signal.SIGINT, saved[0])
    signal.signal(signal.SIGTERM, saved[1])
