"""Conversion of report files into result tables.

Each file is parsed into its own ledger and fully reconciled before any of
its rows are written, so a fatal error never leaves partial output for that
file behind.
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
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from tshresults.constants import FORMAT_JSON
from tshresults.exceptions import TshResultsException
from tshresults.export.formatter import write_results
from tshresults.files import PathLike, division_from_path, read_report_lines
from tshresults.models.conversion_config import ConversionConfig
from tshresults.models.result import CanonicalResult
from tshresults.reconcile.reconciler import PairingReconciler, ReconciliationReport
from tshresults.report.parser import parse_report
from tshresults.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class BatchSummary:
    """Totals for a batch of converted files."""

    converted: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    results_written: int = 0

    @property
    def succeeded(self) -> bool:
        return not self.failed


def convert_report(
    path: PathLike, config: Optional[ConversionConfig] = None
) -> ReconciliationReport:
    """Read, parse and reconcile one report file.

    Args:
        path: Report file path
        config: Conversion settings (defaults when omitted)

    Returns:
        ReconciliationReport for the file's division

    Raises:
        TshResultsException: On any fatal condition in this file
    """
    config = config or ConversionConfig()
    division = division_from_path(path, config.extension)

    logger.info(f"Processing {path} (division {division})")
    lines = read_report_lines(path, config.encoding)
    ledger = parse_report(lines)

    reconciler = PairingReconciler(strict_rounds=config.strict_rounds)
    return reconciler.reconcile(ledger, division)


def convert_reports(
    paths: Sequence[PathLike],
    stream: TextIO,
    config: Optional[ConversionConfig] = None,
) -> BatchSummary:
    """Convert report files in order and write their results.

    CSV rows are written file by file once each file has reconciled. JSON is
    written as a single list after the last file.

    Args:
        paths: Report files, processed in the given order
        stream: Destination for result rows
        config: Conversion settings (defaults when omitted)

    Returns:
        BatchSummary of converted and failed files

    Raises:
        TshResultsException: On the first failing file, unless
            ``config.keep_going`` is set
    """
    config = config or ConversionConfig()
    summary = BatchSummary()
    pending: List[CanonicalResult] = []

    for path in paths:
        try:
            report = convert_report(path, config)
        except TshResultsException as e:
            summary.failed.append(Path(path))
            if not config.keep_going:
                raise
            logger.error(f"Skipping {path}: {e}")
            continue

        summary.converted.append(Path(path))
        if config.output_format == FORMAT_JSON:
            pending.extend(report.results)
        else:
            summary.results_written += write_results(
                report.results, stream, config.output_format
            )

    if config.output_format == FORMAT_JSON:
        summary.results_written += write_results(pending, stream, FORMAT_JSON)

    logger.info(
        f"Converted {len(summary.converted)} files, {len(summary.failed)} failed, "
        f"{summary.results_written} results written"
    )
    return summary
