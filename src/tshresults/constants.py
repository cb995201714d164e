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

# --- Constants ---
REPORT_FILE_EXTENSION = ".t"
DEFAULT_ENCODING = "utf-8"

# Start flags ("p12" column)
START_FIRST = 1  # Player moved first
START_REPLY = 2  # Player replied
VALID_STARTS = frozenset({START_FIRST, START_REPLY})

# Opponent id meaning "no opponent this round"
BYE_OPPONENT_ID = 0

# Anchor words introducing the board and start-flag lists
BOARD_ANCHOR = "board"
START_ANCHOR = "p12"

# Output formats
FORMAT_CSV = "csv"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_CSV, FORMAT_JSON)

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"
