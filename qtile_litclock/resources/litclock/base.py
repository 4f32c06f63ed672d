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
"""
Shared helpers for litclock language packs.

Language packs receive the current time together with a ``Settings`` object
and are free to interpret it however suits the language. Most packs only
need to know which five minute mark to speak and whether the real time is a
little before or after that mark; ``approximate`` works that out so each pack
only has to turn the result into words.
"""
from __future__ import annotations

from typing import NamedTuple

BEFORE = "before"
AFTER = "after"
BOTH = "both"

FUZZY_TIMES = (None, BEFORE, AFTER, BOTH)


class Settings(NamedTuple):
    round: bool = False
    fuzzy_time: str | None = None


class Approximation(NamedTuple):
    hours: int
    minutes: int
    qualifier: str | None


def twelve_hour(hours):
    """Convert a 0-23 hour to the 1-12 hour shown on a clock face."""
    return (hours % 12) or 12


def approximate(hours, minutes, settings):
    """
    Snap the time to a five minute mark.

    Returns an ``Approximation`` where ``minutes`` is a multiple of 5 and
    ``qualifier`` is ``"before"`` if the real time is earlier than the mark,
    ``"after"`` if it is later and ``None`` if the mark is exact or the
    settings don't ask for a qualifier.
    """
    remainder = minutes % 5
    floor = minutes - remainder

    if not remainder:
        return Approximation(hours, minutes, None)

    fuzzy = settings.fuzzy_time

    if fuzzy == BEFORE:
        mark = floor + 5
    elif fuzzy == AFTER:
        mark = floor
    elif fuzzy == BOTH or settings.round:
        mark = floor + 5 if remainder >= 3 else floor
    else:
        mark = floor

    qualifier = None
    if fuzzy is not None:
        qualifier = BEFORE if mark > minutes else AFTER

    if mark == 60:
        hours = (hours + 1) % 24
        mark = 0

    return Approximation(hours, mark, qualifier)
