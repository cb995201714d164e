"""Command-line interface for TSH Results.

Converts tournament report files (``*.t``) into per-game result rows.
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

import argparse
import io
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from tshresults import __version__
from tshresults.constants import OUTPUT_FORMATS
from tshresults.exceptions import FileSaveException, TshResultsException
from tshresults.files import find_report_files
from tshresults.models.conversion_config import ConversionConfig, load_configuration
from tshresults.pipeline import convert_report, convert_reports
from tshresults.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "convert": {
        "description": "Convert report files to per-game results",
        "options": {
            "<files>": "Report files (default: every *.t file here)",
            "--output": "Write results to this file instead of stdout",
            "--format": "Output format (csv/json)",
            "--keep-going": "Skip failing files instead of stopping",
            "--strict-rounds": "Fail when a round's match and bye counts are off",
            "--encoding": "Report file encoding (default: utf-8)",
            "--config": "JSON configuration file",
        },
    },
    "check": {
        "description": "Validate report files and show per-round counts",
        "options": {
            "<files>": "Report files (default: every *.t file here)",
            "--strict-rounds": "Fail when a round's match and bye counts are off",
            "--encoding": "Report file encoding (default: utf-8)",
            "--config": "JSON configuration file",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Merge the optional config file with command-line overrides."""
    values = load_configuration(getattr(args, "config", None))

    if getattr(args, "format", None):
        values["output_format"] = args.format
    if getattr(args, "encoding", None):
        values["encoding"] = args.encoding
    if getattr(args, "keep_going", False):
        values["keep_going"] = True
    if getattr(args, "strict_rounds", False):
        values["strict_rounds"] = True
    if getattr(args, "verbose", False):
        values["log_level"] = "DEBUG"
    elif getattr(args, "quiet", False):
        values["log_level"] = "ERROR"

    return ConversionConfig.from_dict(values)


def run_convert_command(args: argparse.Namespace) -> int:
    """Run the convert command."""
    config = build_config(args)
    set_log_level(config.log_level)

    files = find_report_files(args.files, config.extension)
    if not files:
        logger.warning("No report files found")
        return 0

    if args.output:
        # A failing batch leaves an existing output file untouched
        buffer = io.StringIO()
        summary = convert_reports(files, buffer, config)
        output_path = Path(args.output)
        try:
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(buffer.getvalue())
        except OSError as e:
            raise FileSaveException(f"Cannot write {output_path}: {e}") from e
        logger.info("Results saved to: %s", output_path)
    else:
        summary = convert_reports(files, sys.stdout, config)

    return 0 if summary.succeeded else 1


def run_check_command(args: argparse.Namespace) -> int:
    """Run the check command."""
    config = build_config(args)
    set_log_level(config.log_level)

    files = find_report_files(args.files, config.extension)
    if not files:
        logger.warning("No report files found")
        return 0

    exit_code = 0
    for path in files:
        try:
            report = convert_report(path, config)
        except TshResultsException as e:
            print(f"{Colors.FAIL}{path}: {e}{Colors.ENDC}")
            exit_code = 1
            continue

        print(f"\n{Colors.BOLD}Division {report.division} ({path}):{Colors.ENDC}")
        print(f"  Rounds: {len(report.rounds)}")
        print(f"  Games: {report.match_count}")
        print(f"  Byes: {report.bye_count}")
        for tally in report.rounds:
            if tally.is_consistent:
                status = f"{Colors.OKGREEN}OK{Colors.ENDC}"
            else:
                status = f"{Colors.WARNING}MISMATCH{Colors.ENDC}"
            print(
                f"  Round {tally.round_number:>3}: {tally.match_count} games, "
                f"{tally.bye_count} byes, {tally.expected_players} players  {status}"
            )

    return exit_code


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="*", help="Report files")
    parser.add_argument("--encoding", help="Report file encoding")
    parser.add_argument(
        "--strict-rounds",
        action="store_true",
        help="Fail when a round's match and bye counts do not add up",
    )
    parser.add_argument("--config", help="JSON configuration file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Errors only")


def create_convert_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create parser for convert subcommand."""
    parser = argparse.ArgumentParser(
        prog=prog, description="Convert report files to per-game results"
    )
    _configure_convert_parser(parser)
    return parser


def _configure_convert_parser(parser: argparse.ArgumentParser) -> None:
    _add_common_arguments(parser)
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip files that fail instead of stopping the batch",
    )
    parser.set_defaults(func=run_convert_command)


def create_check_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create parser for check subcommand."""
    parser = argparse.ArgumentParser(
        prog=prog, description="Validate report files and show per-round counts"
    )
    _configure_check_parser(parser)
    return parser


def _configure_check_parser(parser: argparse.ArgumentParser) -> None:
    _add_common_arguments(parser)
    parser.set_defaults(func=run_check_command)


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="tsh-results",
        description="Convert tournament report files into per-game results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert every *.t file in the current directory to CSV on stdout
  tsh-results

  # Convert specific divisions into a file
  tsh-results convert a.t b.t --output results.csv

  # Check a report without writing results
  tsh-results check a.t

  # Interactive mode
  tsh-results --interactive
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser(
        "convert", help=COMMANDS["convert"]["description"]
    )
    _configure_convert_parser(convert_parser)

    check_parser = subparsers.add_parser("check", help=COMMANDS["check"]["description"])
    _configure_check_parser(check_parser)

    return parser


SUBCOMMANDS = ("convert", "check")

# Options whose value is the next token
VALUE_OPTIONS = ("--output", "-o", "--format", "--encoding", "--config")


def _first_positional(argv: List[str]) -> Optional[int]:
    """Return the index of the first token that is not an option or its value."""
    expects_value = False
    for index, token in enumerate(argv):
        if expects_value:
            expects_value = False
        elif token in VALUE_OPTIONS:
            expects_value = True
        elif not token.startswith("-"):
            return index
    return None


def _normalize_argv(argv: List[str]) -> List[str]:
    """Default to the convert command, so bare file arguments still work.

    Options given before the command name are moved after it, so
    ``-q check a.t`` reads as ``check -q a.t``.
    """
    if not argv:
        return ["convert"]
    if argv[0] in ("-h", "--help", "--version", "-i", "--interactive"):
        return argv

    index = _first_positional(argv)
    if index is not None and argv[index] in SUBCOMMANDS:
        return [argv[index]] + argv[:index] + argv[index + 1 :]
    return ["convert"] + argv


def run_command(args: argparse.Namespace) -> int:
    """Execute a parsed command, turning fatal errors into exit status 1."""
    try:
        return args.func(args)
    except TshResultsException as e:
        logger.error(f"{e}")
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the tsh-results CLI."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if "--interactive" in argv or "-i" in argv:
        from tshresults.shell import run_interactive_mode

        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(_normalize_argv(argv))
    return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
