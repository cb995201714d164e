"""Canonical game result data class."""

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
from typing import Any, Dict

from tshresults.type_hints import ResultRow


@dataclass(frozen=True)
class CanonicalResult:
    """Represents one validated game.

    Attributes
    ----------
    division : str
        Division label the game belongs to.
    round_number : int
        Round the game was played in.
    player1 : str
        Name of the player who moved first.
    score1 : int
        Score of the player who moved first.
    player2 : str
        Name of the player who replied.
    score2 : int
        Score of the player who replied.
    """

    division: str
    round_number: int
    player1: str
    score1: int
    player2: str
    score2: int

    def to_row(self) -> ResultRow:
        """Project the result onto the exported field order."""
        return (
            self.division,
            self.round_number,
            self.player1,
            self.score1,
            self.player2,
            self.score2,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "division": self.division,
            "round": self.round_number,
            "player1": self.player1,
            "score1": self.score1,
            "player2": self.player2,
            "score2": self.score2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalResult":
        """Deserialize result from dictionary."""
        return cls(
            division=data["division"],
            round_number=data["round"],
            player1=data["player1"],
            score1=data["score1"],
            player2=data["player2"],
            score2=data["score2"],
        )
