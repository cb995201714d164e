"""Per-round bookkeeping for the reconciliation sanity check."""

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


@dataclass
class RoundTally:
    """Match and bye counts observed while reconciling one round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    expected_players : int
        Number of player slots in the round (highest player id).
    match_count : int
        Games paired in the round.
    bye_count : int
        Players with no opponent in the round.
    """

    round_number: int
    expected_players: int
    match_count: int = 0
    bye_count: int = 0

    @property
    def is_consistent(self) -> bool:
        """Every player is either in exactly one game or on a bye."""
        return 2 * self.match_count + self.bye_count == self.expected_players

    def describe(self) -> str:
        return (
            f"Round {self.round_number}, found {self.match_count} matches "
            f"and {self.bye_count} byes but expected {self.expected_players} players"
        )
