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
Maps the words of a time string onto the letter grid.

The grid is treated as one long strip of letters (row 0 followed by row 1
etc.) and each word is located by a greedy search through the rows. Words
must be found in the order they are spoken and a word can never span two
rows. Letters that are skipped over are fillers and remain unlit.
"""
from __future__ import annotations

from typing import NamedTuple

from libqtile.log_utils import logger


class ActiveRange(NamedTuple):
    """Inclusive start and end index of a word in the flattened grid."""

    start: int
    end: int


class ClockState(NamedTuple):
    words: list[str]
    ranges: list[ActiveRange]
    minute_points: int


def split_time_string(text):
    """Split a time string into words. No text gives no words."""
    if not text:
        return []

    return text.split(" ")


def words_to_ranges(letter_set, words):
    """
    Find the position of each word in the grid.

    Each row is searched from the end of the last match. If a word isn't in
    what's left of the row then the rest of the row is skipped and the word
    is searched for in the next one. Once the rows run out, whatever has been
    matched so far is returned: words that can't be found are dropped.
    """
    ranges = []

    # Take a copy of the rows so a pack being replaced mid-pass can't affect us
    rows = ["".join(row) for row in letter_set]

    if not rows or not words:
        return ranges

    row_index = 0
    remainder = rows[0]
    offset = 0

    for word in words:
        pos = remainder.find(word)

        while pos == -1:
            offset += len(remainder)
            row_index += 1
            if row_index == len(rows):
                return ranges
            remainder = rows[row_index]
            pos = remainder.find(word)

        ranges.append(ActiveRange(offset + pos, offset + pos + len(word) - 1))
        offset += pos + len(word)
        remainder = remainder[pos + len(word) :]

    return ranges


def is_char_active(index, ranges):
    """Is the letter at ``index`` part of a matched word?"""
    for start, end in ranges:
        if start <= index <= end:
            return True
    return False


def letter_states(letter_set, ranges):
    """On/off state of every letter in the flattened grid."""
    count = sum(len(row) for row in letter_set)
    return [is_char_active(index, ranges) for index in range(count)]


def minute_points(minute):
    """Number of minute points to light, i.e. the minutes past the last five minute mark."""
    return minute % 5


def resolve_time(pack, hours, minutes, settings):
    """
    Work out everything needed to draw the clock at the given time.

    If there's no language pack then nothing is highlighted but the minute
    points are still calculated.
    """
    points = minute_points(minutes)

    if pack is None:
        return ClockState([], [], points)

    letter_set = pack.letter_set
    words = split_time_string(pack.time_string(hours, minutes, settings))
    ranges = words_to_ranges(letter_set, words)

    if len(ranges) < len(words):
        logger.debug(
            "Unable to place %s in grid: %s",
            words[len(ranges) :],
            " ".join(words),
        )

    return ClockState(words, ranges, points)
