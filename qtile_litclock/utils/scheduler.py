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
from libqtile.log_utils import logger


class IntervalTimer:
    """
    Calls ``callback`` every ``interval`` seconds.

    The timer doesn't own an event loop. Scheduling is done by the
    ``timeout_add`` callable which should accept ``(seconds, func)`` and
    return a handle with a ``cancel`` method (e.g. a widget's
    ``timeout_add``).
    """

    def __init__(self, interval, callback, timeout_add):
        self.interval = interval
        self.callback = callback
        self.timeout_add = timeout_add
        self._handle = None
        self._running = False

    @property
    def running(self):
        return self._running

    def start(self):
        if self._running:
            return

        self._running = True
        self._schedule()

    def stop(self):
        self._running = False

        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self):
        self._handle = self.timeout_add(self.interval, self._tick)

    def _tick(self):
        if not self._running:
            return

        # Reschedule first so a failing callback doesn't stop the clock
        self._schedule()

        try:
            self.callback()
        except Exception:
            logger.exception("Error in timer callback %s", self.callback)
