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
import pytest

from qtile_litclock.resources.litclock.base import Settings, approximate, twelve_hour


@pytest.mark.parametrize(
    "time,settings,expected",
    [
        ((14, 20), Settings(), (14, 20, None)),
        ((14, 17), Settings(), (14, 15, None)),
        ((14, 19), Settings(), (14, 15, None)),
        ((14, 17), Settings(round=True), (14, 15, None)),
        ((14, 18), Settings(round=True), (14, 20, None)),
        ((14, 16), Settings(fuzzy_time="before"), (14, 20, "before")),
        ((14, 19), Settings(fuzzy_time="after"), (14, 15, "after")),
        ((14, 16), Settings(fuzzy_time="both"), (14, 15, "after")),
        ((14, 18), Settings(fuzzy_time="both"), (14, 20, "before")),
        ((14, 19), Settings(round=True, fuzzy_time="after"), (14, 15, "after")),
        ((14, 20), Settings(fuzzy_time="both"), (14, 20, None)),
        ((11, 57), Settings(fuzzy_time="before"), (12, 0, "before")),
        ((23, 58), Settings(fuzzy_time="both"), (0, 0, "before")),
        ((23, 58), Settings(round=True), (0, 0, None)),
    ],
)
def test_approximate(time, settings, expected):
    assert approximate(*time, settings) == expected


@pytest.mark.parametrize(
    "hours,expected", [(0, 12), (1, 1), (11, 11), (12, 12), (13, 1), (23, 11)]
)
def test_twelve_hour(hours, expected):
    assert twelve_hour(hours) == expected


def test_settings_defaults():
    settings = Settings()
    assert settings.round is False
    assert settings.fuzzy_time is None
