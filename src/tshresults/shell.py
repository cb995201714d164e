"""Interactive mode for TSH Results.

A small prompt with command completion for converting and checking reports
without retyping the program name.
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

import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from tshresults.cli import (
    COMMANDS,
    Colors,
    create_check_parser,
    create_convert_parser,
    run_command,
)
from tshresults.utils import setup_logger

logger = setup_logger(__name__)

PARSERS = {
    "convert": create_convert_parser,
    "check": create_check_parser,
}


def print_banner():
    """Print the interactive mode banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}TSH Results - interactive mode{Colors.ENDC}\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} "
        "to leave interactive mode\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKBLUE}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options = [option for option in info["options"] if option.startswith("-")]
        options_completer = WordCompleter(options) if options else None
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    return NestedCompleter.from_nested_dict(completions)


def execute_line(user_input: str) -> bool:
    """Execute one line typed at the prompt.

    Returns:
        False when the session should end, True otherwise
    """
    try:
        parts = shlex.split(user_input)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True

    if not parts:
        return True

    # Strip leading "/" if present (support both "/command" and "command")
    command = parts[0].lstrip("/")
    args_list = parts[1:]

    if command in ("exit", "quit", "q"):
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if command in ("help", "?"):
        if args_list:
            print_command_help(args_list[0].lstrip("/"))
        else:
            print_commands_list()
        return True

    if command not in PARSERS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
        return True

    parser = PARSERS[command](prog=command)
    try:
        args = parser.parse_args(args_list)
    except SystemExit:
        # argparse calls sys.exit on error, catch it
        return True

    exit_code = run_command(args)
    if exit_code:
        print(f"{Colors.WARNING}{command} finished with errors{Colors.ENDC}")
    return True


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("tsh-results> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

        if not execute_line(user_input):
            break

    return 0
