import os
from pathlib import Path

# Bundled default messages (validation.json)
MESSAGE_DEFAULTS_PATH = str(Path(__file__).parent / "messages")

# Application message files, e.g. messages/forms/login.json
MESSAGE_PATH = os.getenv("MESSAGE_PATH", os.path.join(os.getcwd(), "messages"))
MESSAGE_EXT = os.getenv("MESSAGE_EXT", ".json")

# Translation tables, e.g. lang/es/es.json and lang/es.json
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))
LOCALE_EXT = os.getenv("LOCALE_EXT", ".json")
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en-us")
LOCALE_SOURCE = os.getenv("LOCALE_SOURCE", "en-us")

# Message file used by Validation.errors() when none is passed
VALIDATION_ERROR_FILE = os.getenv("VALIDATION_ERROR_FILE") or None
