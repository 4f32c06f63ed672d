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
Registry of language packs for the LitClock widget.

A language pack is any object with:

    letter_set:   The grid of letters as a list of rows. Each row is a
                  sequence of single characters.
    time_string:  A function taking ``(hours, minutes, settings)`` and
                  returning the words to highlight separated by single
                  spaces. The words must appear in the grid in the order
                  they are returned and no word may be split over two rows.

The built-in packs are modules in this package. Custom packs (or modules)
can be added with ``add_language_pack``:

.. code:: python

    from qtile_litclock.resources.litclock import add_language_pack

    class Pirate:
        letter_set = [list("ARRRXAHOY"), ...]

        def time_string(self, hours, minutes, settings):
            ...

    add_language_pack("pirate", Pirate())

"""
from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from qtile_litclock.resources.litclock.base import Settings

# Built-in language codes and the module providing the pack
LANGUAGES = {
    "de": "german",
    "en": "english",
}

_packs: dict[str, LanguagePack] = {}


class LanguagePack(Protocol):
    letter_set: Sequence[Sequence[str]]

    def time_string(self, hours: int, minutes: int, settings: Settings) -> str: ...


def _key(code):
    return code.lower()


def add_language_pack(code, pack):
    """Add a pack for ``code``, replacing any existing pack."""
    _packs[_key(code)] = pack


def get_language_pack(code):
    """
    Return the pack for ``code`` or ``None`` if there isn't one.

    Built-in packs are imported the first time they're requested.
    """
    if not code:
        return None

    key = _key(code)

    if key not in _packs and key in LANGUAGES:
        module = f"qtile_litclock.resources.litclock.{LANGUAGES[key]}"
        _packs[key] = importlib.import_module(module)

    return _packs.get(key)


def available_languages():
    return sorted(set(LANGUAGES) | set(_packs))
