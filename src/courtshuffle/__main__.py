"""Command-line interface for Court Shuffle.

Runs a single command and exits, or starts an interactive shell with
autocomplete when called without a command.
"""

# Court Shuffle
# Copyright (C) 2025  Court Shuffle developers
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
import logging
import random
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from courtshuffle import APP_NAME, APP_VERSION, display
from courtshuffle.constants import DEFAULT_DATA_FILE, MATCH_DOUBLES, MATCH_SINGLES
from courtshuffle.exceptions import ConfigurationException, ResourceException
from courtshuffle.models import Rejection, load_config
from courtshuffle.notifications import Colors, ConsoleNotifier
from courtshuffle.session import MatchSession
from courtshuffle.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


# Command definitions with their options
COMMANDS = {
    "add-player": {
        "description": "Add a player to the roster",
        "options": {"--group": "Group id (default: active group)"},
    },
    "remove-player": {"description": "Remove a player by id", "options": {}},
    "clear-players": {
        "description": "Remove all players (of the active group)",
        "options": {},
    },
    "add-group": {"description": "Create a group", "options": {}},
    "remove-group": {"description": "Delete an empty group by id", "options": {}},
    "select-group": {"description": "Make a group active", "options": {}},
    "add-court": {"description": "Add a court", "options": {}},
    "remove-court": {"description": "Delete a court by id", "options": {}},
    "select-court": {"description": "Make a court active", "options": {}},
    "singles": {"description": "Generate a singles match (2 players)", "options": {}},
    "doubles": {"description": "Generate a doubles match (4 players)", "options": {}},
    "players": {"description": "List the current players", "options": {}},
    "groups": {"description": "List groups (* = active)", "options": {}},
    "courts": {"description": "List courts (* = active)", "options": {}},
    "current": {"description": "Show the current match", "options": {}},
    "history": {
        "description": "Show recent matches",
        "options": {"--limit": "Number of matches (default: 5)"},
    },
    "help": {"description": "Show help for specific command", "options": {}},
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    print(
        f"""
{Colors.OKGREEN}{APP_NAME} v{APP_VERSION}{Colors.ENDC}
Randomly match players for singles and doubles games!

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave
"""
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
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        completions[cmd] = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
    completions["quit"] = None
    return NestedCompleter.from_nested_dict(completions)


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


# ========== Command Handlers ==========


def run_add_player(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if session.add_player(" ".join(args.name), args.group) else 1


def run_remove_player(session: MatchSession, args: argparse.Namespace) -> int:
    if session.remove_player(args.id) is None:
        print(f"No player with id {args.id}")
    return 0


def run_clear_players(session: MatchSession, args: argparse.Namespace) -> int:
    session.clear_players()
    return 0


def run_add_group(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if session.add_group(" ".join(args.name)) else 1


def run_remove_group(session: MatchSession, args: argparse.Namespace) -> int:
    if not any(g.id == args.id for g in session.groups):
        print(f"No group with id {args.id}")
        return 0
    return 0 if session.remove_group(args.id) else 1


def run_select_group(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if session.select_group(args.id) else 1


def run_add_court(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if session.add_court(" ".join(args.name)) else 1


def run_remove_court(session: MatchSession, args: argparse.Namespace) -> int:
    if session.remove_court(args.id) is None:
        print(f"No court with id {args.id}")
    return 0


def run_select_court(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if session.select_court(args.id) else 1


def _run_generate(session: MatchSession, match_type: str) -> int:
    outcome = session.generate_match(match_type)
    if isinstance(outcome, Rejection):
        return 1
    print_lines(display.format_match(outcome, session.state))
    return 0


def run_singles(session: MatchSession, args: argparse.Namespace) -> int:
    return _run_generate(session, MATCH_SINGLES)


def run_doubles(session: MatchSession, args: argparse.Namespace) -> int:
    return _run_generate(session, MATCH_DOUBLES)


def run_players(session: MatchSession, args: argparse.Namespace) -> int:
    players = session.current_group_players
    group = session.current_group
    title = f"Players ({len(players)})"
    if group is not None:
        title += f" - {group.name}"
    print(f"{Colors.BOLD}{title}{Colors.ENDC}")
    print_lines(display.format_player_list(players))
    return 0


def run_groups(session: MatchSession, args: argparse.Namespace) -> int:
    print_lines(display.format_groups(session.groups, session.state))
    return 0


def run_courts(session: MatchSession, args: argparse.Namespace) -> int:
    print_lines(display.format_courts(session.courts, session.state))
    return 0


def run_current(session: MatchSession, args: argparse.Namespace) -> int:
    if session.current_match is None:
        print("No current match.")
        return 0
    print_lines(display.format_match(session.current_match, session.state))
    return 0


def run_history(session: MatchSession, args: argparse.Namespace) -> int:
    print(f"{Colors.BOLD}Recent Matches{Colors.ENDC}")
    print_lines(display.format_recent_matches(session.recent_matches(args.limit)))
    return 0


# ========== Parsers ==========


def add_command_parsers(subparsers) -> None:
    """Register every session command on an argparse subparsers object."""
    p = subparsers.add_parser("add-player", help="Add a player")
    p.add_argument("name", nargs="+")
    p.add_argument("--group", help="Group id")
    p.set_defaults(func=run_add_player)

    p = subparsers.add_parser("remove-player", help="Remove a player")
    p.add_argument("id")
    p.set_defaults(func=run_remove_player)

    p = subparsers.add_parser("clear-players", help="Remove all players")
    p.set_defaults(func=run_clear_players)

    p = subparsers.add_parser("add-group", help="Create a group")
    p.add_argument("name", nargs="+")
    p.set_defaults(func=run_add_group)

    p = subparsers.add_parser("remove-group", help="Delete an empty group")
    p.add_argument("id")
    p.set_defaults(func=run_remove_group)

    p = subparsers.add_parser("select-group", help="Make a group active")
    p.add_argument("id")
    p.set_defaults(func=run_select_group)

    p = subparsers.add_parser("add-court", help="Add a court")
    p.add_argument("name", nargs="+")
    p.set_defaults(func=run_add_court)

    p = subparsers.add_parser("remove-court", help="Delete a court")
    p.add_argument("id")
    p.set_defaults(func=run_remove_court)

    p = subparsers.add_parser("select-court", help="Make a court active")
    p.add_argument("id")
    p.set_defaults(func=run_select_court)

    subparsers.add_parser("singles", help="Singles match").set_defaults(func=run_singles)
    subparsers.add_parser("doubles", help="Doubles match").set_defaults(func=run_doubles)
    subparsers.add_parser("players", help="List players").set_defaults(func=run_players)
    subparsers.add_parser("groups", help="List groups").set_defaults(func=run_groups)
    subparsers.add_parser("courts", help="List courts").set_defaults(func=run_courts)
    subparsers.add_parser("current", help="Current match").set_defaults(func=run_current)

    p = subparsers.add_parser("history", help="Recent matches")
    p.add_argument("--limit", type=positive_int, default=None)
    p.set_defaults(func=run_history)


def create_command_parser() -> argparse.ArgumentParser:
    """Create parser for one interactive command line."""
    parser = argparse.ArgumentParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(dest="command")
    add_command_parsers(subparsers)
    return parser


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="courtshuffle",
        description=f"{APP_NAME}: random singles and doubles matchups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  courtshuffle

  # Build a roster and draw a doubles match
  courtshuffle add-player Alice
  courtshuffle doubles

  # Use groups and courts
  courtshuffle --groups add-group Tuesday night
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--data", default=DEFAULT_DATA_FILE, help="JSON data file for the roster"
    )
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument(
        "--groups", action="store_true", help="Organize players into groups"
    )
    parser.add_argument(
        "--require-court", action="store_true", help="Require a court for matches"
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    add_command_parsers(subparsers)
    return parser


def build_session(args: argparse.Namespace) -> MatchSession:
    """Create the session described by the global options."""
    config = load_config(args.config)
    if args.groups:
        config.groups_enabled = True
        config.require_group = True
    if args.require_court:
        config.require_court = True
    rng = random.Random(args.seed) if args.seed is not None else None
    return MatchSession.open(args.data, config, ConsoleNotifier(), rng)


def execute(session: MatchSession, parts: List[str]) -> int:
    """Parse and run one interactive command line.

    Returns:
        0 on success, 1 when the action was rejected, 2 on a usage error
    """
    if not parts:
        return 0

    command = parts[0]
    if command == "help":
        if len(parts) > 1:
            print_command_help(parts[1])
        else:
            print_commands_list()
        return 0

    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return 2

    try:
        args = create_command_parser().parse_args(parts)
    except SystemExit:
        # argparse calls sys.exit on error
        return 2
    return args.func(session, args)


def run_interactive_mode(session: MatchSession) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    prompt = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = prompt.prompt("courtshuffle> ").strip()
            if not user_input:
                continue
            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            try:
                parts = shlex.split(user_input)
            except ValueError as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                continue

            try:
                execute(session, parts)
            except ResourceException as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.exception("Command execution failed")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the courtshuffle CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        session = build_session(args)
    except (ConfigurationException, ResourceException) as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    if args.interactive or args.command is None:
        return run_interactive_mode(session)

    try:
        return args.func(session, args)
    except ResourceException as e:
        logger.error("Command failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
