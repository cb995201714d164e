"""Report parsing: line grammar, ledger and round dimensions."""

from tshresults.report.ledger import Ledger, scan_dimensions
from tshresults.report.parser import (
    parse_first_last_name,
    parse_report,
    parse_report_line,
)

__all__ = [
    "Ledger",
    "scan_dimensions",
    "parse_first_last_name",
    "parse_report",
    "parse_report_line",
]
