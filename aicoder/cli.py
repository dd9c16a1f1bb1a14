"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from aicoder.chat import dispose_client
from aicoder.config import Config, ConfigError, get_config
from aicoder.console import print_colored
from aicoder.refactor import refactor
from aicoder.scaffolder import scaffold

BANNER = """
 █████╗ ██╗ ██████╗ ██████╗ ██████╗ ███████╗██████╗ 
██╔══██╗██║██╔════╝██╔═══██╗██╔══██╗██╔════╝██╔══██╗
███████║██║██║     ██║   ██║██║  ██║█████╗  ██████╔╝
██╔══██║██║██║     ██║   ██║██║  ██║██╔══╝  ██╔══██╗
██║  ██║██║╚██████╗╚██████╔╝██████╔╝███████╗██║  ██║
╚═╝  ╚═╝╚═╝ ╚═════╝ ╚═════╝ ╚═════╝ ╚══════╝╚═╝  ╚═╝"""


def _run_root(args: argparse.Namespace, config: Config) -> None:
    print_colored(BANNER, "yellow")
    print("\nUse 'aicoder --help' for more information about using the tool.")
    print_colored("\nTry:", "yellow")
    print_colored(
        '  aicoder code -p "Create a Python FastAPI application to manage customer."',
        "cyan",
    )


def _run_code(args: argparse.Namespace, config: Config) -> None:
    if not args.prompt:
        print("Error: --prompt or -p flag is required")
        return
    scaffold(args.prompt, config)


def _run_refactor(args: argparse.Namespace, config: Config) -> None:
    if not args.file:
        print("Please provide a command. Example:")
        print_colored("aicoder re -f app.py -o app_sanitized.py", "cyan")
        return
    refactor(args.file, args.output, config)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="aicoder",
        description="aicoder a command-line tool to generate or refactor code "
        "using AI from a user's prompt",
    )
    parser.set_defaults(handler=_run_root)
    commands = parser.add_subparsers(dest="command")

    code = commands.add_parser(
        "code",
        aliases=["co"],
        help="Generate code from a prompt",
        description="Scaffold new code from a prompt using AI",
    )
    code.add_argument("-p", "--prompt", required=True, help="Prompt for the CLI")
    code.set_defaults(handler=_run_code)

    refactor_cmd = commands.add_parser(
        "refactor",
        aliases=["re"],
        help="Evaluate and refactor code for clarity and complexity",
    )
    refactor_cmd.add_argument(
        "-f", "--file", default="", help="The file path to sanitize [required]"
    )
    refactor_cmd.add_argument(
        "-o", "--output", default="", help="The output file path and name"
    )
    refactor_cmd.set_defaults(handler=_run_refactor)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool and return its exit status."""
    parser = build_parser()
    try:
        config = get_config()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    args = parser.parse_args(argv)
    try:
        args.handler(args, config)
    finally:
        dispose_client()
    return 0


if __name__ == "__main__":
    sys.exit(main())