"""Pairing reconciliation for parsed reports.

Every game appears twice in a report, once on each player's line. This
module joins the two halves back into one validated result per game.
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

from dataclasses import dataclass, field
from typing import List, Set, Tuple

from tshresults.constants import START_REPLY, VALID_STARTS
from tshresults.exceptions import (
    BoardMismatchException,
    RoundCountException,
    StartMismatchException,
)
from tshresults.models.record import PlayerRoundRecord
from tshresults.models.result import CanonicalResult
from tshresults.models.round_tally import RoundTally
from tshresults.report.ledger import Ledger, scan_dimensions
from tshresults.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ReconciliationReport:
    """Outcome of reconciling one division.

    Attributes
    ----------
    division : str
        Division label the results were produced for.
    results : list of CanonicalResult
        Games in round-major, then ascending player id, order.
    rounds : list of RoundTally
        One tally per round, in round order.
    """

    division: str
    results: List[CanonicalResult] = field(default_factory=list)
    rounds: List[RoundTally] = field(default_factory=list)

    @property
    def warnings(self) -> List[RoundTally]:
        """Rounds whose match and bye counts do not cover every player."""
        return [tally for tally in self.rounds if not tally.is_consistent]

    @property
    def match_count(self) -> int:
        return sum(tally.match_count for tally in self.rounds)

    @property
    def bye_count(self) -> int:
        return sum(tally.bye_count for tally in self.rounds)


def validate_boards(first: PlayerRoundRecord, second: PlayerRoundRecord) -> None:
    """Ensure both players of a game report the same board.

    Raises:
        BoardMismatchException: If the board numbers differ
    """
    if first.board != second.board:
        raise BoardMismatchException(
            f"Round {first.round_number}: {first.name} is on board {first.board} "
            f"but {second.name} is on board {second.board}"
        )


def validate_starts(first: PlayerRoundRecord, second: PlayerRoundRecord) -> None:
    """Ensure exactly one player of a game started and the other replied.

    Raises:
        StartMismatchException: If the flags are not 1 and 2 in some order
    """
    if {first.start, second.start} == VALID_STARTS:
        return
    raise StartMismatchException(
        f"Round {first.round_number}: {first.name} has start flag {first.start} "
        f"and {second.name} has start flag {second.start}"
    )


def order_by_start(
    first: PlayerRoundRecord, second: PlayerRoundRecord
) -> Tuple[PlayerRoundRecord, PlayerRoundRecord]:
    """Return the pair with the player who moved first in front."""
    if first.start == START_REPLY:
        return second, first
    return first, second


def build_result(
    first: PlayerRoundRecord, second: PlayerRoundRecord, division: str
) -> CanonicalResult:
    """Create the canonical result for a validated pair."""
    starter, replier = order_by_start(first, second)
    return CanonicalResult(
        division=division,
        round_number=starter.round_number,
        player1=starter.name,
        score1=starter.score,
        player2=replier.name,
        score2=replier.score,
    )


class PairingReconciler:
    """Turns a ledger of per-player records into canonical game results.

    This class is responsible for:
    - Resolving each player's opponent reference to the opponent's record
    - Consuming every (round, player) slot exactly once
    - Validating board and start flags of each pair
    - Counting matches and byes per round for a sanity check
    """

    def __init__(self, strict_rounds: bool = False):
        # Raise instead of warn when a round's counts do not add up
        self.strict_rounds = strict_rounds

    def reconcile(self, ledger: Ledger, division: str) -> ReconciliationReport:
        """Reconcile every round of a ledger.

        Args:
            ledger: Ledger built from one report file
            division: Division label attached to every result

        Returns:
            ReconciliationReport with results and per-round tallies

        Raises:
            MissingRecordException: If a slot within the bounds has no record
            BoardMismatchException: If a pair reports different boards
            StartMismatchException: If a pair is not one start and one reply
            RoundCountException: In strict mode, if a round's counts are off
        """
        max_round, max_player = scan_dimensions(ledger)
        report = ReconciliationReport(division=division)

        logger.info(
            f"Reconciling division {division}: {max_round} rounds, {max_player} players"
        )

        for round_number in range(1, max_round + 1):
            tally = self._reconcile_round(
                ledger, round_number, max_player, division, report.results
            )
            report.rounds.append(tally)
            self._check_tally(tally, division)

        return report

    def _reconcile_round(
        self,
        ledger: Ledger,
        round_number: int,
        max_player: int,
        division: str,
        results: List[CanonicalResult],
    ) -> RoundTally:
        """Pair up every player of one round, appending results in order."""
        tally = RoundTally(round_number=round_number, expected_players=max_player)
        consumed: Set[int] = set()

        for player_id in range(1, max_player + 1):
            if player_id in consumed:
                continue

            first = ledger.get(round_number, player_id)
            consumed.add(player_id)

            opponent_id = first.opponent_id
            if first.is_bye:
                tally.bye_count += 1
                logger.debug(f"Round {round_number}: {first.name} has a bye")
                continue

            if opponent_id in consumed:
                continue

            second = ledger.get(round_number, opponent_id)
            consumed.add(opponent_id)
            tally.match_count += 1

            validate_boards(first, second)
            validate_starts(first, second)

            result = build_result(first, second, division)
            logger.debug(
                f"Round {round_number} board {first.board}: "
                f"{result.player1} {result.score1} - {result.player2} {result.score2}"
            )
            results.append(result)

        return tally

    def _check_tally(self, tally: RoundTally, division: str) -> None:
        if tally.is_consistent:
            return
        if self.strict_rounds:
            raise RoundCountException(f"{division}: {tally.describe()}")
        logger.warning(f"{division}: {tally.describe()}")
