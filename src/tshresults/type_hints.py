"""Type hints used in TSH Results."""

from typing import Tuple

# One exported game: division, round, player1, score1, player2, score2
ResultRow = Tuple[str, int, str, int, str, int]

# Highest round and highest player id present in a ledger
Dimensions = Tuple[int, int]

#  LocalWords:  ResultRow
