"""Report line parser.

Each player line of a tournament report carries the player's name and,
for every round, their opponent, score, board and start flag::

    Lewis, Mackay(GM) 1850 4 3 0; 412 388 50; ... board 2 1 0; ... p12 1 2 0;

The opponent, score, board and start lists are read position by position,
so the first token of each list belongs to round 1. The player id is the
1-based position of the line in the file.
"""

# TSH Results
# Copyright (C) 2025  TSH Results developers
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

import re
from typing import Iterable, List, Optional

from tshresults.constants import BOARD_ANCHOR, START_ANCHOR
from tshresults.exceptions import MalformedLineException, NameFormatException
from tshresults.report.ledger import Ledger
from tshresults.utils import setup_logger

logger = setup_logger(__name__)

REPORT_LINE_PATTERN = re.compile(
    r"^([A-Za-z,_\-{}'() ]+)([0-9]+) ([0-9 ]+); ([0-9 \-]+);"
    rf".*{BOARD_ANCHOR} ([0-9 ]+);.*{START_ANCHOR} ([0-9 ]+);"
)

# A line naming either list anchor is meant to be a player line
ANCHOR_PATTERN = re.compile(rf"\b(?:{BOARD_ANCHOR}|{START_ANCHOR})\b")


def parse_first_last_name(name: str) -> str:
    """Reorder a "Last, First" name to "First Last".

    Names without a comma are returned unchanged. A name with more than one
    comma cannot be reordered and gives an empty string.

    Examples:
        >>> parse_first_last_name("Lewis, Mackay(GM)")
        'Mackay(GM) Lewis'
        >>> parse_first_last_name("Mackay Lewis")
        'Mackay Lewis'
    """
    parts = name.split(",")
    if len(parts) == 1:
        return name
    if len(parts) == 2:
        last, first = parts
        return f"{first} {last}".lstrip(" ")
    return ""


def _parse_int_list(
    field_name: str, text: str, line_number: int, line: str
) -> List[int]:
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise MalformedLineException(
                line_number, line, f"{field_name} token {token!r} is not an integer"
            ) from None
    return values


def parse_report_line(player_id: int, line: str, ledger: Ledger) -> Ledger:
    """Decode one report line into the ledger.

    Args:
        player_id: Player id of this line (its 1-based position in the file)
        line: Raw report line
        ledger: Ledger receiving the player's per-round records

    Returns:
        The same ledger, updated with this player's rounds

    Raises:
        MalformedLineException: If the line names a list anchor but does not
            fit the report line grammar, or the player name is empty
        NameFormatException: If the player name has more than one comma
    """
    match = REPORT_LINE_PATTERN.match(line)
    if match is None:
        if ANCHOR_PATTERN.search(line):
            raise MalformedLineException(player_id, line, "does not fit report grammar")
        # Blank lines, headers and comments carry no results
        return ledger

    raw_name, _, opponents, scores, boards, starts = match.groups()

    if not raw_name.strip():
        raise MalformedLineException(player_id, line, "player name is empty")

    name = parse_first_last_name(raw_name.rstrip(" "))
    if not name:
        raise NameFormatException(raw_name.strip(), player_id)

    score_values = _parse_int_list("score", scores, player_id, line)
    board_values = _parse_int_list("board", boards, player_id, line)
    start_values = _parse_int_list("start", starts, player_id, line)

    for round_number, opponent in enumerate(opponents.split(), 1):
        ledger.slot(round_number, player_id, name).opponent = opponent

    for round_number, score in enumerate(score_values, 1):
        ledger.slot(round_number, player_id, name).score = score

    for round_number, board in enumerate(board_values, 1):
        ledger.slot(round_number, player_id, name).board = board

    for round_number, start in enumerate(start_values, 1):
        ledger.slot(round_number, player_id, name).start = start

    return ledger


def parse_report(lines: Iterable[str], ledger: Optional[Ledger] = None) -> Ledger:
    """Parse every line of a report into a ledger.

    Args:
        lines: Report lines in file order
        ledger: Ledger to fill; a fresh one is created when omitted

    Returns:
        Ledger holding one record per (round, player) found in the report
    """
    if ledger is None:
        ledger = Ledger()

    for player_id, line in enumerate(lines, 1):
        parse_report_line(player_id, line, ledger)

    logger.debug(f"Parsed {len(ledger)} player round records")
    return ledger
