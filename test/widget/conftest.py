import pytest


class FakeScreen:
    width = 800
    height = 600

    def __init__(self):
        self.painted = []

    def paint(self, path):
        self.painted.append(path)


class FakeBar:
    def __init__(self):
        self.screen = FakeScreen()


class FakeHandle:
    def __init__(self, func):
        self.func = func
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    """Stands in for a widget's ``timeout_add`` so timers can be fired by hand."""

    def __init__(self):
        self.scheduled = []

    def timeout_add(self, seconds, func, *args):
        handle = FakeHandle(func)
        self.scheduled.append((seconds, handle))
        return handle

    def fire(self):
        _, handle = self.scheduled[-1]
        handle.func()


@pytest.fixture(scope="function")
def fake_bar():
    return FakeBar()


@pytest.fixture(scope="function")
def fake_loop():
    return FakeLoop()


@pytest.fixture(scope="function")
def fake_qtile():
    class FakeQtile:
        def call_later(self, *args, **kwargs):
            pass

    return FakeQtile()
