#!/usr/bin/env python3
"""Command-line interface for Handle Agent.

Generates platform-ready handle suggestions for a display name from the
terminal.  Every run picks a fresh salt unless ``--salt`` (or
``generation.salt`` in the config) pins one, so repeating a command is the
CLI's "remix".

Commands:
- suggest: Generate handle suggestions for a name
- platforms: List the platform catalog
- validate: Validate configuration
- gui: Launch the desktop front end
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from handle_agent.core.clipboard import CopyState, TkClipboard, clipboard_available
from handle_agent.core.config import VALID_LOG_LEVELS, Config, get_config
from handle_agent.core.data_models import undecorate_handle
from handle_agent.core.generator import generate_suggestions, new_salt
from handle_agent.core.logging_setup import configure_from_settings, log_performance
from handle_agent.core.platforms import PLATFORM_CONFIGS, get_platform
from handle_agent.utils.formatters import OutputFormat, render_suggestions, suggestion_rows

logger = logging.getLogger(__name__)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="handle-agent",
        description="Handle Agent: social handle suggestions from a name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  handle-agent suggest "Lunar Labs"
  handle-agent suggest "Lunar Labs" --salt 42 --format json
  handle-agent suggest "Zoë Saldaña" --platform tiktok --copy 1
  handle-agent platforms
  handle-agent validate --strict
        """,
    )
    parser.add_argument("--config", help="Path to a YAML or TOML config file")
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: logging.directory from config, none if unset)",
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: logging.level from config)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Use JSON structured logging format",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest_parser = subparsers.add_parser("suggest", help="Generate handle suggestions")
    suggest_parser.add_argument("name", help="Display name, brand or nickname")
    suggest_parser.add_argument(
        "--salt", type=int, default=None, help="Fixed salt for reproducible output"
    )
    suggest_parser.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: output.format from config)",
    )
    suggest_parser.add_argument(
        "--platform",
        "-p",
        action="append",
        default=[],
        help="Only show this platform (repeatable, case-insensitive)",
    )
    suggest_parser.add_argument(
        "--copy", type=int, metavar="N", help="Copy handle number N to the clipboard"
    )
    suggest_parser.add_argument(
        "--bare", action="store_true", help="Show handles without the leading @"
    )
    suggest_parser.add_argument("--title", default=None, help="Heading above the output")

    platforms_parser = subparsers.add_parser("platforms", help="List supported platforms")
    platforms_parser.add_argument("--json", action="store_true", help="Output as JSON")

    validate_parser = subparsers.add_parser("validate", help="Validate configuration")
    validate_parser.add_argument(
        "--strict", action="store_true", help="Exit with error if validation fails"
    )

    subparsers.add_parser("gui", help="Launch the desktop front end")

    return parser.parse_args(argv)


def _setup_logging(args: argparse.Namespace, config: Config) -> None:
    log_dir = args.log_dir
    if log_dir is None and config.get("logging.directory"):
        log_dir = Path(config.get("logging.directory"))
    configure_from_settings(
        log_dir=log_dir,
        level_name=args.log_level or config.get("logging.level", "WARNING"),
        use_json=args.json_logs or config.get_bool("logging.json_format"),
        file_name=config.get("logging.file", "handle_agent.log"),
    )


def handle_suggest(args: argparse.Namespace, config: Config) -> int:
    """Handle the suggest command."""
    if not args.name.strip():
        print("Please enter a name to generate handles.", file=sys.stderr)
        return 1

    platforms = []
    for wanted in args.platform:
        platform = get_platform(wanted)
        if platform is None:
            known = ", ".join(p.platform for p in PLATFORM_CONFIGS)
            print(f"Unknown platform '{wanted}'. Known platforms: {known}", file=sys.stderr)
            return 1
        platforms.append(platform.platform)

    salt = args.salt
    if salt is None:
        salt = config.get_int("generation.salt")
    if salt is None:
        salt = new_salt()

    with log_performance("suggest", logger):
        suggestions = generate_suggestions(args.name.strip(), salt)

    if not suggestions:
        print(f"No usable characters in '{args.name.strip()}'.", file=sys.stderr)
        return 1

    if platforms:
        suggestions = [s for s in suggestions if s.platform in platforms]

    fmt = args.format or str(config.get("output.format", "table")).lower()
    title = args.title if args.title is not None else config.get("output.title") or None
    print(render_suggestions(suggestions, OutputFormat(fmt), title=title, bare=args.bare))
    logger.info(f"Generated suggestions for {args.name.strip()!r} with salt {salt}")

    if args.copy is not None:
        return _copy_row(args.copy, suggestions, config, bare=args.bare)
    return 0


def _copy_row(number: int, suggestions: list, config: Config, bare: bool = False) -> int:
    rows = suggestion_rows(suggestions, bare=bare)
    if not 1 <= number <= len(rows):
        print(f"No handle number {number}; choose 1-{len(rows)}.", file=sys.stderr)
        return 1

    if not config.get_bool("clipboard.enabled", True):
        print("Clipboard is disabled in configuration.", file=sys.stderr)
        return 0

    if not clipboard_available():
        print("No clipboard available in this environment.", file=sys.stderr)
        return 0

    value = rows[number - 1]["handle"]
    if not config.get_bool("clipboard.decorated", True):
        value = undecorate_handle(value)

    clipboard = TkClipboard()
    state = CopyState(writer=clipboard)
    try:
        copied = state.copy(value)
    finally:
        try:
            clipboard.close()
        except Exception as e:
            logger.debug(f"Closing clipboard window failed: {e}")

    if copied:
        print(f"Copied {value}")
    else:
        print(f"Could not copy {value} to the clipboard.", file=sys.stderr)
    return 0


def handle_platforms(args: argparse.Namespace) -> int:
    """Handle the platforms command."""
    if args.json:
        data = [
            {
                "platform": p.platform,
                "prefixes": list(p.prefixes),
                "suffixes": list(p.suffixes),
                "highlight": p.highlight,
            }
            for p in PLATFORM_CONFIGS
        ]
        print(json.dumps(data, indent=2))
        return 0

    for p in PLATFORM_CONFIGS:
        prefixes = ", ".join(repr(x) if not x else x for x in p.prefixes)
        print(p.platform)
        print(f"  {p.highlight}")
        print(f"  prefixes: {prefixes}")
        print(f"  suffixes: {', '.join(p.suffixes)}")
    return 0


def handle_validate(args: argparse.Namespace, config: Config) -> int:
    """Handle the validate command."""
    result = config.validate()

    print(result)

    if args.strict and not result.is_valid:
        return 1

    return 0


def handle_gui(config: Config) -> int:
    from handle_agent.gui.main_window import run_app

    run_app(config)
    return 0


def run(args: argparse.Namespace, config: Optional[Config] = None) -> int:
    """Dispatch a parsed command.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if config is None:
        config = Config(args.config) if args.config else get_config()

    _setup_logging(args, config)
    logger.debug(f"Handle Agent CLI started with command: {args.command}")

    if args.command == "suggest":
        return handle_suggest(args, config)
    elif args.command == "platforms":
        return handle_platforms(args)
    elif args.command == "validate":
        return handle_validate(args, config)
    elif args.command == "gui":
        return handle_gui(config)

    return 1


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        print("\nAborted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
