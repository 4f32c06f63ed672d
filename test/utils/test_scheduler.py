# Copyright (c) 2024 elParaguayo
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
import logging

import pytest
from libqtile.log_utils import init_log

from qtile_litclock.utils.scheduler import IntervalTimer


class FakeHandle:
    def __init__(self, func):
        self.func = func
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    def __init__(self):
        self.scheduled = []

    def timeout_add(self, seconds, func):
        handle = FakeHandle(func)
        self.scheduled.append((seconds, handle))
        return handle

    def fire(self):
        _, handle = self.scheduled[-1]
        handle.func()


@pytest.fixture
def loop():
    return FakeLoop()


def test_timer_start(loop):
    calls = []
    timer = IntervalTimer(2, lambda: calls.append(1), loop.timeout_add)
    assert not timer.running

    timer.start()
    assert timer.running
    assert len(loop.scheduled) == 1
    assert loop.scheduled[0][0] == 2
    assert not calls


def test_timer_start_twice(loop):
    timer = IntervalTimer(1, lambda: None, loop.timeout_add)
    timer.start()
    timer.start()
    assert len(loop.scheduled) == 1


def test_timer_ticks_and_reschedules(loop):
    calls = []
    timer = IntervalTimer(1, lambda: calls.append(1), loop.timeout_add)
    timer.start()

    loop.fire()
    loop.fire()

    assert len(calls) == 2
    assert len(loop.scheduled) == 3


def test_timer_stop(loop):
    calls = []
    timer = IntervalTimer(1, lambda: calls.append(1), loop.timeout_add)
    timer.start()
    _, handle = loop.scheduled[-1]

    timer.stop()

    assert not timer.running
    assert handle.cancelled

    # A tick that was already queued does nothing
    handle.func()
    assert not calls


def test_timer_survives_callback_error(loop, caplog):
    init_log(logging.INFO)

    def callback():
        raise ValueError("broken")

    timer = IntervalTimer(1, callback, loop.timeout_add)
    timer.start()
    loop.fire()

    assert len(loop.scheduled) == 2
    assert "Error in timer callback" in caplog.text
