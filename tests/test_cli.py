import argparse
import json

import pytest

from fast_base.cli.main import main
from fast_base.cli.message_command import MessageCommand
from fast_base.cli.validate_command import ValidateCommand, build_validation
from fast_base.config import MESSAGE_DEFAULTS_PATH
from fast_base.core.message import Message, set_message_resolver


@pytest.fixture
def bundled_messages(isolated_defaults):
    set_message_resolver(Message([MESSAGE_DEFAULTS_PATH]))


def validate_args(**kwargs):
    defaults = {"labels": None, "messages": [], "file": "validation", "lang": None}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


def test_build_validation_applies_star_rules_to_every_field(make_validation):
    validation = build_validation(
        {"first": "", "second": "abcdef"},
        {"first": [["min_length", [":value", 2]]], "*": [["not_empty"], ["max_length", [":value", 4]]]},
        {"first": "First name"},
        messages=make_validation().messages,
        error_file_name=None,
    )

    assert validation.check() is False
    assert validation.errors()["first"].error == "not_empty"
    assert validation.errors()["second"].error == "max_length"
    assert validation.get_labels()["first"] == "First name"


def test_build_validation_accepts_bare_rule_names():
    validation = build_validation({"name": ""}, {"name": ["not_empty"]}, error_file_name=None)

    assert validation.check() is False
    assert validation.errors()["name"].error == "not_empty"


def test_validate_command_reports_valid_data(tmp_path, write_json, bundled_messages, capsys):
    data = write_json("data.json", {"username": "john"})
    rules = write_json("rules.json", {"username": [["not_empty"]]})

    status = ValidateCommand().execute(validate_args(data=data, rules=rules))

    assert status == 0
    assert "✅ Valid" in capsys.readouterr().out


def test_validate_command_prints_error_messages(tmp_path, write_json, bundled_messages, capsys):
    data = write_json("data.json", {"username": "", "email": "nope"})
    rules = write_json("rules.json", {"username": [["not_empty"]], "email": [["email"]]})
    labels = write_json("labels.json", {"email": "E-mail"})

    status = ValidateCommand().execute(validate_args(data=data, rules=rules, labels=labels))

    assert status == 1
    assert json.loads(capsys.readouterr().out) == {
        "username": "username must not be empty",
        "email": "E-mail must be an email address",
    }


def test_validate_command_with_extra_message_paths(tmp_path, write_json, bundled_messages, capsys):
    data = write_json("data.json", {"username": ""})
    rules = write_json("rules.json", {"username": [["not_empty"]]})
    write_json("messages/forms/login.json", {"username": {"not_empty": "Pick a username"}})

    status = ValidateCommand().execute(validate_args(
        data=data, rules=rules, messages=[str(tmp_path / "messages")], file="forms/login",
    ))

    assert status == 1
    assert json.loads(capsys.readouterr().out) == {"username": "Pick a username"}


def test_message_command(tmp_path, write_json, bundled_messages, capsys):
    write_json("messages/forms/login.json", {"username": {"not_empty": "Pick a username"}})
    command = MessageCommand()

    status = command.execute(argparse.Namespace(file="forms/login", key="username.not_empty", path=[str(tmp_path / "messages")]))
    assert status == 0
    assert capsys.readouterr().out.strip() == "Pick a username"

    status = command.execute(argparse.Namespace(file="forms/login", key="username", path=[str(tmp_path / "messages")]))
    assert status == 0
    assert json.loads(capsys.readouterr().out) == {"not_empty": "Pick a username"}

    status = command.execute(argparse.Namespace(file="validation", key="not_empty", path=[]))
    assert status == 0
    assert capsys.readouterr().out.strip() == ":field must not be empty"


def test_message_command_reports_missing_messages(bundled_messages, capsys):
    status = MessageCommand().execute(argparse.Namespace(file="validation", key="no_such_rule", path=[]))

    assert status == 1
    assert "🚫 No message found for validation:no_such_rule" in capsys.readouterr().out


def test_main_exits_with_the_command_status(tmp_path, write_json, bundled_messages, capsys):
    data = write_json("data.json", {"username": ""})
    rules = write_json("rules.json", {"username": [["not_empty"]]})

    with pytest.raises(SystemExit) as exc_info:
        main(["validate", data, rules])

    assert exc_info.value.code == 1


def test_main_version(capsys):
    main(["version"])

    assert capsys.readouterr().out.startswith("FastBase v")
