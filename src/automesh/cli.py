"""CLI entrypoint for checking configurations, resolving alias messages locally and following logs."""

import argparse
import os
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import TextIO

from colorama import just_fix_windows_console

from automesh import __version__
from automesh.config import Command, Config, find_default_config, load_config
from automesh.exceptions import AliasError, ConfigError
from automesh.execution import MessageDispatcher, ShellExecutor
from automesh.log_tail import colorize_log_line, follow
from automesh.logging_config import LOG_LEVELS, configure_logging, get_log_path
from automesh.parsing import DEFAULT_TRIGGER, HelpText, resolve_alias
from automesh.transport import chunk_lines_with_footer

PrintFn = Callable[[str], None]

CONFIG_FILE_ENV = "AUTOMESH_CONFIG_FILE"
LOG_LEVEL_ENV = "AUTOMESH_LOG_LEVEL"
CHUNK_SEPARATOR = "-" * 20

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_ALIAS_ERROR = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with global options and subcommands."""
    parser = argparse.ArgumentParser(
        prog="automesh",
        description="Resolve alias messages against a declarative command tree",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        default=os.environ.get(CONFIG_FILE_ENV),
        help=f"Config file (env: {CONFIG_FILE_ENV}); searched for when omitted",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=list(LOG_LEVELS),
        default=os.environ.get(LOG_LEVEL_ENV, "info").lower(),
        help=f"Logging level (env: {LOG_LEVEL_ENV})",
    )
    parser.add_argument(
        "--no-log-file", action="store_true", help="Log to the console only"
    )
    parser.add_argument(
        "--trigger", default=DEFAULT_TRIGGER, help="Character that starts an alias message"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("check", help="Load and validate the config, then list its commands")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a message without running it")
    resolve_parser.add_argument("message")

    chunk_parser = subparsers.add_parser("chunk", help="Split stdin into transport-sized chunks")
    chunk_parser.add_argument("--max-bytes", type=_positive_int, default=None)

    run_parser = subparsers.add_parser("run", help="Resolve a message and run it in the configured shell")
    run_parser.add_argument("message")

    tail_parser = subparsers.add_parser("tail-logs", help="Follow the log file, coloured by level")
    tail_parser.add_argument("--no-color", action="store_true", help="Print lines without colours")

    return parser


def _load(args: argparse.Namespace) -> Config:
    path = args.config_file if args.config_file is not None else find_default_config()
    return load_config(path)


def describe_tree(commands: Sequence[Command], prefix: str) -> Iterator[str]:
    """Yield one summary line per node, depth first."""
    for command in commands:
        if command.is_group:
            yield f"{prefix}{command.name} (group)"
            yield from describe_tree(command.commands, f"{prefix}{command.name} ")
        else:
            yield f"{prefix}{command.name} -> {command.command}"


def _print_chunks(chunks: Sequence[str], print_fn: PrintFn) -> None:
    for idx, chunk in enumerate(chunks):
        if idx:
            print_fn(CHUNK_SEPARATOR)
        print_fn(chunk)


def _tail_logs(no_color: bool, print_fn: PrintFn) -> int:
    if not no_color:
        just_fix_windows_console()
    path = get_log_path()
    try:
        for line in follow(path):
            print_fn(line if no_color else colorize_log_line(line))
    except OSError as e:
        print(f"Unable to tail log file '{path}': {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        pass
    return EXIT_OK


def run(
    argv: list[str] | None = None,
    print_fn: PrintFn = print,
    stdin: TextIO | None = None,
) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} from {LOG_LEVEL_ENV} "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )
    configure_logging(args.log_level, log_file=False if args.no_log_file else None)

    if args.command == "tail-logs":
        return _tail_logs(args.no_color, print_fn)

    if args.command == "chunk" and args.max_bytes is not None:
        text = (stdin or sys.stdin).read()
        _print_chunks(chunk_lines_with_footer(text, args.max_bytes), print_fn)
        return EXIT_OK

    try:
        config = _load(args)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "check":
        for line in describe_tree(config.commands, args.trigger):
            print_fn(line)
        return EXIT_OK

    if args.command == "chunk":
        text = (stdin or sys.stdin).read()
        _print_chunks(chunk_lines_with_footer(text, config.max_content_bytes), print_fn)
        return EXIT_OK

    if args.command == "resolve":
        try:
            result = resolve_alias(args.message, config.commands, args.trigger)
        except (AliasError, ValueError) as e:
            print(e, file=sys.stderr)
            return EXIT_ALIAS_ERROR
        if isinstance(result, HelpText):
            print_fn(result.text)
        else:
            print_fn(result.command)
            for name, value in sorted(result.env.items()):
                print_fn(f"{name}={value}")
        return EXIT_OK

    dispatcher = MessageDispatcher(config, ShellExecutor.from_config(config), args.trigger)
    chunks = dispatcher.handle(args.message)
    if chunks is None:
        print(f"Not an alias message; messages must start with '{args.trigger}'", file=sys.stderr)
        return EXIT_ALIAS_ERROR
    _print_chunks(chunks, print_fn)
    return EXIT_OK


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())
