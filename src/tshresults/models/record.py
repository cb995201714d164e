"""Per-player, per-round record data classes."""

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

from dataclasses import dataclass
from typing import NamedTuple

from tshresults.constants import BYE_OPPONENT_ID


class SlotKey(NamedTuple):
    """Composite ledger key: one player's slot in one round."""

    round_number: int
    player_id: int


@dataclass
class PlayerRoundRecord:
    """One player's participation in one round.

    Attributes
    ----------
    name : str
        Player display name, already in "First Last" order.
    round_number : int
        Round number (1-indexed).
    opponent : str
        Opponent reference as it appeared in the report. A numeric player
        id, or "0" / a non-numeric token for a bye.
    score : int
        Points scored by this player in the game.
    board : int
        Board (table) number the game was played on.
    start : int
        Start flag: 1 if the player moved first, 2 if they replied.
    """

    name: str
    round_number: int
    opponent: str = ""
    score: int = 0
    board: int = 0
    start: int = 0

    @property
    def opponent_id(self) -> int:
        """Opponent reference as a player id; non-numeric counts as a bye."""
        try:
            return int(self.opponent)
        except ValueError:
            return BYE_OPPONENT_ID

    @property
    def is_bye(self) -> bool:
        return self.opponent_id == BYE_OPPONENT_ID
