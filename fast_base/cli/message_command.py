"""Look up a message from the message files."""

import argparse
import json

from fast_base.core.message import Message, get_message_resolver

from .command_base import CommandBase


class MessageCommand(CommandBase):

    @property
    def name(self) -> str:
        return "message"

    @property
    def help(self) -> str:
        return "Print a message, or a whole message file, as resolved from the search paths"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Message file without extension, e.g. forms/login")
        parser.add_argument("key", nargs="?", default=None, help="Dotted key path, e.g. username.not_empty")
        parser.add_argument("--path", action="append", default=[], help="Additional search path (repeatable)")

    def execute(self, args: argparse.Namespace) -> int:
        messages = get_message_resolver()
        if args.path:
            messages = Message([*messages.get_paths(), *args.path]) if isinstance(messages, Message) else Message(args.path)

        result = messages.load(args.file, args.key)
        if result is None:
            print(f"🚫 No message found for {args.file}:{args.key}")
            return 1

        if isinstance(result, str):
            print(result)
        else:
            print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0
