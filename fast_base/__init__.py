"""
FastBase - Reusable framework facilities for Python applications

This package provides:
- Rule based validation of associative data (`Validation`)
- Default rule helpers (`Valid`)
- File based message lookup (`Message`)
- Translation with `:placeholder` substitution (`I18n`, `__`)
- Quart request validation helpers
- Exceptions, logging and environment helpers

Think of it as the validation and i18n layer of a Laravel-inspired framework.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans
from .exceptions import *  # noqa: F401,F403
from .app_provider import boot
