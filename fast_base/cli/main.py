#!/usr/bin/env python3
"""FastBase CLI - validation and message tooling."""

import argparse
import sys

from .message_command import MessageCommand
from .validate_command import ValidateCommand
from .version_command import VersionCommand


def main(argv=None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="FastBase CLI - validate data and inspect message files",
        prog="fast-base"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    commands = [
        MessageCommand(),
        ValidateCommand(),
        VersionCommand(),
    ]
    
    command_map = {}
    for command in commands:
        cmd_parser = subparsers.add_parser(command.name, help=command.help)
        command.configure_parser(cmd_parser)
        command_map[command.name] = command

    args = parser.parse_args(argv)
    
    if args.command in command_map:
        status = command_map[args.command].execute(args)
        if status:
            sys.exit(status)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
