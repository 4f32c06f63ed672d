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
"""English language pack for the LitClock widget.

    The time is read the way it would be on a digital clock: "IT IS TWO
    TWENTY FIVE". Hours always come before minutes in this form which means
    "FIVE" and "TEN" can appear as both an hour and a minute without the
    greedy matcher lighting the wrong one:

        - hour "TEN" is the first hour word in the grid so a minute "TEN"
          will never find it;
        - a minute "FIVE" always follows "OH", "TWENTY", "THIRTY", "FORTY"
          or "FIFTY" which all sit below the hours.
"""
from qtile_litclock.resources.litclock.base import AFTER, BEFORE, approximate

LAYOUT = (
    "ITKISNALMOST",
    "JUSTRAFTERPM",
    "TENONETWOSIX",
    "THREEFOURMKE",
    "FIVESEVENKYQ",
    "EIGHTNINEZDW",
    "ELEVENTWELVE",
    "OCLOCKXOHTEN",
    "TWENTYTHIRTY",
    "FORTYFIFTEEN",
    "FIFTYVFIVEBY",
)

letter_set = [list(row) for row in LAYOUT]

HOURS = [
    "TWELVE",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    "ELEVEN",
]

MINUTES = {
    0: "OCLOCK",
    5: "OH FIVE",
    10: "TEN",
    15: "FIFTEEN",
    20: "TWENTY",
    25: "TWENTY FIVE",
    30: "THIRTY",
    35: "THIRTY FIVE",
    40: "FORTY",
    45: "FORTY FIVE",
    50: "FIFTY",
    55: "FIFTY FIVE",
}

QUALIFIERS = {
    BEFORE: "ALMOST",
    AFTER: "JUST AFTER",
}


def time_string(hours, minutes, settings):
    hours, minutes, qualifier = approximate(hours, minutes, settings)

    words = ["IT", "IS"]

    if qualifier:
        words.append(QUALIFIERS[qualifier])

    words.append(HOURS[hours % 12])
    words.append(MINUTES[minutes])

    return " ".join(words)
