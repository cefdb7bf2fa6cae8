"""Validate a JSON document against a JSON rule table."""

import argparse
import json
from pathlib import Path
from typing import Any

from fast_base.core.message import Message, get_message_resolver
from fast_base.core.validation import Validation

from .command_base import CommandBase

# Rule table key for rules applied to every field
ALL_FIELDS_KEY = "*"


def _read_json(path: str) -> Any:
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def build_validation(data: dict, rules: dict, labels: dict | None = None, **options: Any) -> Validation:
    """
    Build a validation from a rule table:

        {"username": [["not_empty"], ["min_length", [":value", 4]]], "*": [["max_length", [":value", 64]]]}
    """
    validation = Validation.factory(data, **options)
    for field, field_rules in rules.items():
        key = True if field == ALL_FIELDS_KEY else field
        validation.rules(key, [rule if isinstance(rule, list) else [rule] for rule in field_rules])
    if labels:
        validation.labels(labels)
    return validation


class ValidateCommand(CommandBase):

    @property
    def name(self) -> str:
        return "validate"

    @property
    def help(self) -> str:
        return "Validate a JSON data file against a JSON rule table"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("data", help="JSON file with the data object")
        parser.add_argument("rules", help="JSON file mapping fields to [rule, params] lists ('*' for every field)")
        parser.add_argument("--labels", default=None, help="JSON file mapping fields to labels")
        parser.add_argument("--messages", action="append", default=[], help="Additional message search path (repeatable)")
        parser.add_argument("--file", default="validation", help="Message file for the error messages")
        parser.add_argument("--lang", default=None, help="Translate the messages into this language")

    def execute(self, args: argparse.Namespace) -> int:
        data = _read_json(args.data)
        rules = _read_json(args.rules)
        labels = _read_json(args.labels) if args.labels else None

        options = {}
        messages = get_message_resolver()
        if args.messages:
            paths = messages.get_paths() if isinstance(messages, Message) else []
            options["messages"] = Message([*paths, *args.messages])

        validation = build_validation(data, rules, labels, **options)

        if validation.check():
            print("✅ Valid")
            return 0

        translate: bool | str = args.lang or True
        print(json.dumps(validation.errors(args.file, translate), indent=2, ensure_ascii=False, default=str))
        return 1
