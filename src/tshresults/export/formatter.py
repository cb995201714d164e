"""Result rows and writers for CSV and JSON export."""

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

import csv
import json
from typing import Iterable, TextIO

from tshresults.constants import FORMAT_CSV, FORMAT_JSON
from tshresults.exceptions import InvalidConfigurationException
from tshresults.models.result import CanonicalResult
from tshresults.type_hints import ResultRow


def format_result_row(result: CanonicalResult) -> ResultRow:
    """Map a result to (division, round, player1, score1, player2, score2)."""
    return result.to_row()


def write_csv(results: Iterable[CanonicalResult], stream: TextIO) -> int:
    """Write results as comma separated rows with no header.

    Returns:
        Number of rows written
    """
    writer = csv.writer(stream, lineterminator="\n")
    count = 0
    for result in results:
        writer.writerow(format_result_row(result))
        count += 1
    return count


def write_json(results: Iterable[CanonicalResult], stream: TextIO) -> int:
    """Write results as a JSON list of objects.

    Returns:
        Number of results written
    """
    payload = [result.to_dict() for result in results]
    json.dump(payload, stream, indent=2)
    stream.write("\n")
    return len(payload)


WRITERS = {
    FORMAT_CSV: write_csv,
    FORMAT_JSON: write_json,
}


def write_results(
    results: Iterable[CanonicalResult], stream: TextIO, output_format: str = FORMAT_CSV
) -> int:
    """Write results in the requested format."""
    try:
        writer = WRITERS[output_format]
    except KeyError:
        raise InvalidConfigurationException(
            f"Unknown output format {output_format!r}"
        ) from None
    return writer(results, stream)
