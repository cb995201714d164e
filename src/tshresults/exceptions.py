"""Exceptions for use in TSH Results"""

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

from typing import Optional

# ========== Base Application Exception ==========


class TshResultsException(Exception):
    """Base exception for all TSH Results errors.

    Every fatal condition met while converting a report inherits from this
    class, so a caller can abort a single file with one except clause.
    """

    pass


# ========== Report Parsing Exceptions ==========


class ReportParseException(TshResultsException):
    """Base exception for report line parsing errors."""

    pass


class MalformedLineException(ReportParseException):
    """Raised when a line carries report anchors but does not fit the grammar."""

    def __init__(self, line_number: int, line: str, reason: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        message = f"Malformed report line {line_number}: {line!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NameFormatException(ReportParseException):
    """Raised when a player name cannot be reordered to "First Last"."""

    def __init__(self, name: str, line_number: Optional[int] = None):
        self.name = name
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Cannot normalize player name {name!r}{where}")


# ========== Ledger Exceptions ==========


class LedgerException(TshResultsException):
    """Base exception for ledger errors."""

    pass


class MissingRecordException(LedgerException):
    """Raised when a (round, player) slot has no record."""

    def __init__(self, round_number: int, player_id: int):
        self.round_number = round_number
        self.player_id = player_id
        super().__init__(
            f"No record for player {player_id} in round {round_number}"
        )


class LedgerKeyException(LedgerException):
    """Raised when a ledger key is not a valid (round, player) pair."""

    pass


# ========== Pairing Exceptions ==========


class PairingException(TshResultsException):
    """Base exception for pairing reconciliation errors."""

    pass


class BoardMismatchException(PairingException):
    """Raised when two paired players report different boards."""

    pass


class StartMismatchException(PairingException):
    """Raised when a pair is not exactly one starter and one replier."""

    pass


class RoundCountException(PairingException):
    """Raised in strict mode when a round's match and bye counts do not add up."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TshResultsException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TshResultsException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
