"""Per-round, per-player record store built while parsing a report.

The ledger is filled by the line parser and read by the pairing
reconciler. It also derives the round and player bounds, since a report
does not declare them upfront.
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

from typing import Dict, ItemsView, Iterator

from tshresults.exceptions import LedgerKeyException, MissingRecordException
from tshresults.models.record import PlayerRoundRecord, SlotKey
from tshresults.type_hints import Dimensions


class Ledger:
    """Mapping of (round, player id) slots to player round records."""

    def __init__(self):
        self._records: Dict[SlotKey, PlayerRoundRecord] = {}

    def slot(self, round_number: int, player_id: int, name: str) -> PlayerRoundRecord:
        """Return the record for a slot, creating an empty one if needed."""
        key = SlotKey(round_number, player_id)
        record = self._records.get(key)
        if record is None:
            record = PlayerRoundRecord(name=name, round_number=round_number)
            self._records[key] = record
        return record

    def get(self, round_number: int, player_id: int) -> PlayerRoundRecord:
        """Look up a record.

        Raises:
            MissingRecordException: If the slot was never filled
        """
        try:
            return self._records[SlotKey(round_number, player_id)]
        except KeyError:
            raise MissingRecordException(round_number, player_id) from None

    def items(self) -> ItemsView[SlotKey, PlayerRoundRecord]:
        return self._records.items()

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[SlotKey]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"Ledger({len(self._records)} records)"


def scan_dimensions(ledger: Ledger) -> Dimensions:
    """Return the highest round and highest player id in the ledger.

    Both dimensions are 1-indexed; an empty ledger gives (0, 0).

    Raises:
        LedgerKeyException: If a key is not a pair of positive integers
    """
    max_round = 0
    max_player = 0

    for key in ledger:
        if not isinstance(key, SlotKey):
            raise LedgerKeyException(f"Ledger key {key!r} is not a SlotKey")

        round_number, player_id = key
        if not isinstance(round_number, int) or not isinstance(player_id, int):
            raise LedgerKeyException(f"Ledger key {key!r} is not numeric")
        if round_number < 1 or player_id < 1:
            raise LedgerKeyException(f"Ledger key {key!r} is out of range")

        max_round = max(max_round, round_number)
        max_player = max(max_player, player_id)

    return max_round, max_player
