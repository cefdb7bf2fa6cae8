"""
File-based message lookup.

Message files are JSON documents found under one or more search paths.
Every path that contains the file contributes to it, later paths overriding
earlier ones key by key.

Usage:
    from fast_base.core.message import get_message_resolver

    messages = get_message_resolver()
    messages.add_path('/srv/app/messages')

    messages.load('forms/login', 'username.not_empty')   # single message
    messages.load('validation')                          # whole file
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from fast_base.config import MESSAGE_DEFAULTS_PATH, MESSAGE_EXT, MESSAGE_PATH
from fast_base.contracts.message_resolver import MessageResolver
from fast_base.utils.arr import Arr


class Message(MessageResolver):

    def __init__(self, paths: Optional[Iterable[str | Path]] = None, *, ext: str = MESSAGE_EXT) -> None:
        self.ext = ext
        self._paths: List[str] = []
        self._messages: Dict[str, Dict[str, Any]] = {}
        for path in paths or []:
            self.add_path(path)

    def get_paths(self) -> List[str]:
        return list(self._paths)

    def add_path(self, path: str | Path) -> None:
        """Append a search path. Already registered paths are ignored."""
        path = str(path)
        if path not in self._paths:
            self._paths.append(path)
            # Files already cached may now have another source
            self._messages.clear()

    def clear_cache(self) -> None:
        self._messages.clear()

    def _read(self, file: Path) -> Dict[str, Any]:
        try:
            with file.open(encoding='utf-8') as f:
                content = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logging.warning(f"[MESSAGE] Unable to read message file {file}: {e}")
            return {}

        if not isinstance(content, dict):
            logging.warning(f"[MESSAGE] Message file {file} does not contain an object")
            return {}
        return content

    def _load_file(self, file: str) -> Dict[str, Any]:
        if file in self._messages:
            return self._messages[file]

        messages: Dict[str, Any] = {}
        for include_path in self._paths:
            candidate = Path(include_path) / f"{file}{self.ext}"
            if candidate.is_file():
                logging.debug(f"[MESSAGE] Loading {candidate}")
                messages = Arr.merge(messages, self._read(candidate))

        self._messages[file] = messages
        return messages

    def load(self, file: str, path: Optional[str] = None, default: Any = None) -> Any:
        messages = self._load_file(file)
        if path is None:
            return messages
        return Arr.path(messages, path, default)


_default_resolver: Optional[MessageResolver] = None


def get_message_resolver() -> MessageResolver:
    """Process-wide resolver searching the bundled messages, then `MESSAGE_PATH`."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = Message([MESSAGE_DEFAULTS_PATH, MESSAGE_PATH])
    return _default_resolver


def set_message_resolver(resolver: Optional[MessageResolver]) -> None:
    global _default_resolver
    _default_resolver = resolver
