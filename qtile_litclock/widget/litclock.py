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
import math
import os
from datetime import datetime

import cairocffi
from libqtile import hook
from libqtile.command.base import expose_command
from libqtile.log_utils import logger
from libqtile.utils import rgb
from libqtile.widget import base

from qtile_litclock.resources.litclock import LANGUAGES, get_language_pack
from qtile_litclock.resources.litclock.base import FUZZY_TIMES, Settings
from qtile_litclock.resources.litclock.matcher import letter_states, resolve_time
from qtile_litclock.utils.scheduler import IntervalTimer


class LitClock(base._Widget):
    """
    A widget to draw a word clock to the screen.

    Like ``WordClock``, nothing is displayed in the bar. The widget works in
    the background and updates the screen wallpaper when the highlighted
    words change.

    The time is spelled out in words which are found in a grid of letters.
    The minutes since the last five minute mark are shown by up to four
    points in the corners of the screen.

    ``fuzzy_time`` controls how times between the five minute marks are
    described: ``"before"`` uses the next mark ("almost ten past"),
    ``"after"`` uses the previous one ("just after five past"), ``"both"``
    uses whichever is nearest and ``None`` shows the previous mark with no
    extra words. When ``fuzzy_time`` is ``None``, setting ``round`` to
    ``True`` shows the nearest mark instead.

    Additional languages can be added with
    ``qtile_litclock.resources.litclock.add_language_pack``.
    """

    # Dynamically update docstring for supported languages
    __doc__ += """
    .. admonition:: Supported languages

        Available languages: {}
    """.format(
        ", ".join([f"``{lang}``" for lang in LANGUAGES])
    )

    orientations = base.ORIENTATION_BOTH
    defaults = [
        (
            "language",
            "en",
            "Display language. Choose from {}.".format(", ".join(f"'{x}'" for x in LANGUAGES)),
        ),
        ("round", False, "Round the time to the nearest five minutes"),
        (
            "fuzzy_time",
            "both",
            "Describe times between five minute marks: 'before', 'after', 'both' or None",
        ),
        ("show_minute_points", True, "Show the minutes since the last five minute mark"),
        ("minute_point_size", 16, "Diameter of minute points"),
        ("background", "000000", "Background colour."),
        ("inactive", "202020", "Colour for inactive characters"),
        ("active", "00AAAA", "Colour for active characters"),
        ("update_interval", 1, "Interval to check time"),
        ("cache", "~/.cache/qtile-litclock", "Location to store wallpaper"),
        ("fontsize", 70, "Font size for letters"),
        ("font", "sans", "Font for text"),
    ]

    def __init__(self, **config):
        base._Widget.__init__(self, 0, **config)
        self.add_defaults(LitClock.defaults)
        self.words = []
        self.active_ranges = []
        self.minute_points = 0
        self.letter_set = []
        self.needs_draw = False
        self.clockfile = None
        self.timer = None

    def _configure(self, qtile, bar):
        base._Widget._configure(self, qtile, bar)

        if self.fuzzy_time not in FUZZY_TIMES:
            logger.warning("Unknown fuzzy_time value: %s. Setting to None.", self.fuzzy_time)
            self.fuzzy_time = None

        if get_language_pack(self.language) is None:
            logger.warning("Unknown language '%s'. No words will be highlighted.", self.language)

        self.cache = os.path.expanduser(self.cache)
        os.makedirs(self.cache, exist_ok=True)
        self.clockfile = os.path.join(self.cache, "litclock.png")

        hook.subscribe.screens_reconfigured(self.paint_screen)

        self.timer = IntervalTimer(self.update_interval, self.update, self.timeout_add)
        self.update()
        self.timer.start()

    @property
    def settings(self):
        return Settings(round=self.round, fuzzy_time=self.fuzzy_time)

    def update_clock(self, now=None):
        """
        Checks the time and calculates which letters should be highlighted.

        Returns ``True`` if the clock needs to be redrawn.
        """
        if now is None:
            now = datetime.now()

        pack = get_language_pack(self.language)
        state = resolve_time(pack, now.hour, now.minute, self.settings)
        letter_set = pack.letter_set if pack is not None else []

        changed = (
            state.ranges != self.active_ranges
            or state.minute_points != self.minute_points
            or letter_set != self.letter_set
        )

        self.words = state.words
        self.active_ranges = state.ranges
        self.minute_points = state.minute_points
        self.letter_set = letter_set

        return changed

    def update(self):
        if self.update_clock():
            self.needs_draw = True
            self.draw()

    def draw(self):
        if not self.configured or not self.needs_draw:
            return

        self.write_image()
        self.paint_screen()
        self.needs_draw = False

    def write_image(self):
        width = self.bar.screen.width
        height = self.bar.screen.height

        surface = cairocffi.ImageSurface(cairocffi.FORMAT_ARGB32, width, height)
        ctx = cairocffi.Context(surface)
        self.render(ctx, width, height)
        surface.write_to_png(self.clockfile)

    def render(self, ctx, width, height):
        ctx.set_source_rgba(*rgb(self.background))
        ctx.paint()

        if self.letter_set:
            self.draw_letters(ctx, width, height)

        if self.show_minute_points:
            self.draw_minute_points(ctx, width, height)

    def draw_letters(self, ctx, width, height):
        rows = self.letter_set
        cols = max(len(row) for row in rows)

        # Keep the corners clear for the minute points
        margin = self.minute_point_size * 3
        cell_width = (width - 2 * margin) / cols
        cell_height = (height - 2 * margin) / len(rows)

        ctx.select_font_face(self.font)
        ctx.set_font_size(self.fontsize)

        cells = [
            (row, col, letter)
            for row, letters in enumerate(rows)
            for col, letter in enumerate(letters)
        ]

        for (row, col, letter), active in zip(cells, letter_states(rows, self.active_ranges)):
            ctx.set_source_rgba(*rgb(self.active if active else self.inactive))

            x_bearing, y_bearing, text_width, text_height, _, _ = ctx.text_extents(letter)
            ctx.move_to(
                margin + col * cell_width + (cell_width - text_width) / 2 - x_bearing,
                margin + row * cell_height + (cell_height - text_height) / 2 - y_bearing,
            )
            ctx.show_text(letter)

    def draw_minute_points(self, ctx, width, height):
        radius = self.minute_point_size / 2
        near = self.minute_point_size + radius
        far_x = width - near
        far_y = height - near

        # Top left, top right, bottom left, bottom right
        corners = [(near, near), (far_x, near), (near, far_y), (far_x, far_y)]

        for point, (x, y) in enumerate(corners, start=1):
            on = self.minute_points >= point
            ctx.set_source_rgba(*rgb(self.active if on else self.inactive))
            ctx.arc(x, y, radius, 0, 2 * math.pi)
            ctx.fill()

    def paint_screen(self):
        if not self.clockfile or not os.path.isfile(self.clockfile):
            return

        self.bar.screen.paint(self.clockfile)

    def finalize(self):
        if self.timer is not None:
            self.timer.stop()
        base._Widget.finalize(self)

    @expose_command()
    def set_language(self, language):
        """Change the clock's language."""
        if get_language_pack(language) is None:
            logger.warning("Unknown language '%s'. Keeping '%s'.", language, self.language)
            return

        self.language = language
        self.update()

    @expose_command()
    def clock_state(self):
        """Show the current words, highlighted ranges and minute points."""
        return {
            "language": self.language,
            "time_string": " ".join(self.words),
            "active_ranges": [tuple(r) for r in self.active_ranges],
            "minute_points": self.minute_points,
        }
