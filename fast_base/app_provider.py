import logging
from typing import Iterable, Optional

from fast_base.core.localization import I18n, get_translator
from fast_base.core.message import Message, get_message_resolver
from fast_base.utils.env_utils import configure_env
from fast_base.utils.logging import setup_logging

_booted = False


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    message_paths: Optional[Iterable[str]] = None,
    locale_paths: Optional[Iterable[str]] = None,
):
    """
    Sets up the application.
    - Loads environment variables
    - Sets up logging
    - Registers additional message and translation search paths

    Repeated calls are ignored.

    Args:
        env_file_name: Optional env file. Defaults to `.env.<ENV>` then `.env`.
        log_file_name: Optional log file name inside `LOG_DIR`.
        message_paths: Directories searched for message files, after `MESSAGE_PATH`.
        locale_paths: Directories searched for translation tables, after `LOCALE_PATH`.
    """
    global _booted
    if _booted:
        return

    configure_env(env_file_name)
    setup_logging(log_file_name)

    messages = get_message_resolver()
    if isinstance(messages, Message):
        for path in message_paths or []:
            messages.add_path(path)

    translator = get_translator()
    if isinstance(translator, I18n):
        for path in locale_paths or []:
            translator.add_path(path)

    _booted = True
    logging.debug("[BOOT] Application booted")


def is_booted() -> bool:
    return _booted
