import numpy as np
import pytest


class FakeCapture:
    """Stands in for cv2.VideoCapture; yields the queued frames (None = failed read)."""

    def __init__(self, frames=None, opened=True):
        self.frames = list(frames or [])
        self.opened = opened
        self.release_count = 0
        self.read_count = 0

    def isOpened(self):
        return self.opened

    def read(self):
        self.read_count += 1
        if not self.frames:
            return False, None
        frame = self.frames.pop(0)
        return frame is not None, frame

    def release(self):
        self.release_count += 1
        self.opened = False


class FakeCascade:
    """Stands in for cv2.CascadeClassifier."""

    instances = []

    def __init__(self, faces=(), valid=True):
        self.faces = faces
        self.valid = valid
        self.path = None
        self.calls = []
        FakeCascade.instances.append(self)

    def load(self, path):
        self.path = path
        return self.valid

    def empty(self):
        return not self.valid or self.path is None

    def detectMultiScale(self, image, **kwargs):
        self.calls.append((image.shape, kwargs))
        return self.faces


class FakeTimer:
    def __init__(self, task, period_ms):
        self.task = task
        self.period_ms = period_ms
        self.started = False
        self.stopped = False
        self.finishes = True

    def start(self):
        self.started = True

    def shutdown(self):
        self.stopped = True

    def is_shutdown(self):
        return self.stopped

    def await_termination(self, timeout):
        return self.finishes


@pytest.fixture(autouse=True)
def reset_fake_cascades():
    FakeCascade.instances = []
    yield


@pytest.fixture
def cascade_file(tmp_path):
    def make(name="cascade.xml"):
        path = tmp_path / name
        path.write_text("<opencv_storage></opencv_storage>")
        return str(path)
    return make


def color_frame(height=450, width=600, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
