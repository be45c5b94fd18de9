"""Date display helpers."""

# Chess Scoreboard
# Copyright (C) 2025  Chess Scoreboard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from datetime import date
from typing import Optional, Union

from dateutil import parser as date_parser

from chessscoreboard.constants import DATE_DISPLAY_FORMAT, UNKNOWN_DATE
from chessscoreboard.utils import setup_logger

logger = setup_logger(__name__)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(value: Optional[Union[date, str]]) -> str:
    """Render a timestamp as e.g. ``19 October 2026``.

    Accepts a ``date``/``datetime`` or any string ``dateutil`` can parse.
    Month names are fixed English regardless of the process locale.

    Returns:
        The formatted date, or ``Unknown date`` if there is nothing usable
    """
    if value is None:
        return UNKNOWN_DATE

    if isinstance(value, str):
        try:
            value = date_parser.parse(value)
        except (ValueError, OverflowError):
            logger.debug("Could not parse date %r", value)
            return UNKNOWN_DATE

    if not isinstance(value, date):
        return UNKNOWN_DATE

    return DATE_DISPLAY_FORMAT.format(
        day=value.day, month=MONTH_NAMES[value.month - 1], year=value.year
    )
