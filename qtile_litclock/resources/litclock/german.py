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
"""German language pack for the LitClock widget.

    Uses the spoken form of a digital time e.g. "ES IST ZWEI UHR ZEHN".
    As "UHR" always follows the hour, every minute word is searched for
    below the hours so "FÜNF" and "ZEHN" can safely appear in both places.
"""
from qtile_litclock.resources.litclock.base import AFTER, BEFORE, approximate, twelve_hour

LAYOUT = (
    "ESKISTAFAST",
    "KURZBNACHJM",
    "EINZWEIDREI",
    "VIERFÜNFELF",
    "SECHSSIEBEN",
    "ACHTPNEUNKL",
    "ZEHNRZWÖLFX",
    "UHRFÜNFZEHN",
    "UNDZWANZIGT",
    "DREISSIGMIN",
    "VIERZIGJAXU",
    "FÜNFZIGAMPM",
)

letter_set = [list(row) for row in LAYOUT]

# "Ein Uhr" rather than "Eins Uhr"
HOURS = {
    1: "EIN",
    2: "ZWEI",
    3: "DREI",
    4: "VIER",
    5: "FÜNF",
    6: "SECHS",
    7: "SIEBEN",
    8: "ACHT",
    9: "NEUN",
    10: "ZEHN",
    11: "ELF",
    12: "ZWÖLF",
}

MINUTES = {
    5: "FÜNF",
    10: "ZEHN",
    15: "FÜNFZEHN",
    20: "ZWANZIG",
    25: "FÜNF UND ZWANZIG",
    30: "DREISSIG",
    35: "FÜNF UND DREISSIG",
    40: "VIERZIG",
    45: "FÜNF UND VIERZIG",
    50: "FÜNFZIG",
    55: "FÜNF UND FÜNFZIG",
}

QUALIFIERS = {
    BEFORE: "FAST",
    AFTER: "KURZ NACH",
}


def time_string(hours, minutes, settings):
    hours, minutes, qualifier = approximate(hours, minutes, settings)

    words = ["ES", "IST"]

    if qualifier:
        words.append(QUALIFIERS[qualifier])

    words.extend([HOURS[twelve_hour(hours)], "UHR"])

    if minutes:
        words.append(MINUTES[minutes])

    return " ".join(words)
