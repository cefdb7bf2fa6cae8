"""
Pytest configuration and shared fixtures for FastBase tests.
"""

import json

import pytest
from faker import Faker

from fast_base.config import MESSAGE_DEFAULTS_PATH
from fast_base.core.localization import I18n, get_translator, set_translator
from fast_base.core.message import Message, get_message_resolver, set_message_resolver
from fast_base.core.validation import Validation

fake = Faker()


@pytest.fixture
def sample_data():
    """Provide sample registration data for tests."""
    password = fake.password(length=12)
    return {
        "username": fake.user_name(),
        "email": fake.email(),
        "password": password,
        "password_repeat": password,
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document below tmp_path and return its path."""
    def _write(relative: str, content) -> str:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def no_messages():
    return Message([])


@pytest.fixture
def default_messages():
    return Message([MESSAGE_DEFAULTS_PATH])


@pytest.fixture
def plain_translator():
    return I18n([])


@pytest.fixture
def make_validation(no_messages, plain_translator):
    """Validation factory isolated from any message or language files on disk."""
    def _make(data=None, **kwargs):
        kwargs.setdefault("messages", no_messages)
        kwargs.setdefault("translator", plain_translator)
        kwargs.setdefault("error_file_name", None)
        return Validation.factory(data or {}, **kwargs)

    return _make


@pytest.fixture
def isolated_defaults():
    """Swap the process-wide resolver and translator for empty ones during a test."""
    previous_messages = get_message_resolver()
    previous_translator = get_translator()
    set_message_resolver(Message([]))
    set_translator(I18n([]))
    yield
    set_message_resolver(previous_messages)
    set_translator(previous_translator)

