"""
Localization for fast-base - Laravel-inspired string translation.

Translation tables are flat JSON objects mapping source strings to their
translation, looked up from the most specific language file to the least:
`lang/es/es.json` first, then `lang/es.json`.

Usage:
    from fast_base.core.localization import __, set_locale, get_locale

    __('Hello, world')                               # Translate into the current language
    __('Hello, :user', {':user': 'John'})            # With parameters
    __('Hello, :user', {':user': 'Ana'}, 'es-es')    # Force language
    set_locale('es_ES')                              # Normalised to 'es-es'
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fast_base.config import LOCALE_DEFAULT, LOCALE_EXT, LOCALE_PATH, LOCALE_SOURCE
from fast_base.contracts.translator import Translator
from fast_base.utils.string_utils import replace_placeholders


def normalize_lang(lang: str) -> str:
    """`en_US` / `en US` -> `en-us`."""
    return lang.replace(' ', '-').replace('_', '-').lower()


class I18n(Translator):

    def __init__(self,
        paths: Optional[Iterable[str | Path]] = None,
        *,
        lang: str = LOCALE_DEFAULT,
        source: str = LOCALE_SOURCE,
        ext: str = LOCALE_EXT,
    ) -> None:
        self.ext = ext
        self.source = normalize_lang(source)
        self._paths: List[str] = []
        self._cache: Dict[str, Dict[str, str]] = {}
        self._lang: ContextVar[str] = ContextVar(f'i18n_lang_{id(self)}', default=normalize_lang(lang))
        for path in paths or []:
            self.add_path(path)

    def add_path(self, path: str | Path) -> None:
        path = str(path)
        if path not in self._paths:
            self._paths.append(path)
            self._cache.clear()

    def get_paths(self) -> List[str]:
        return list(self._paths)

    def lang(self, lang: Optional[str] = None) -> str:
        """Get the target language, or change it when `lang` is given."""
        if lang:
            self._lang.set(normalize_lang(lang))
        return self._lang.get()

    def clear_cache(self) -> None:
        self._cache.clear()

    def _read(self, file: Path) -> Dict[str, str]:
        try:
            with file.open(encoding='utf-8') as f:
                table = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logging.warning(f"[I18N] Unable to read language file {file}: {e}")
            return {}
        if not isinstance(table, dict):
            logging.warning(f"[I18N] Language file {file} does not contain an object")
            return {}
        return table

    def load(self, lang: str) -> Dict[str, str]:
        """Load the translation table of a language. Idempotent."""
        lang = normalize_lang(lang)
        if lang in self._cache:
            return self._cache[lang]

        table: Dict[str, str] = {}
        parts = lang.split('-')

        while parts:
            relative = Path(*parts)
            merged: Dict[str, str] = {}
            for include_path in self._paths:
                candidate = Path(include_path) / f"{relative}{self.ext}"
                if candidate.is_file():
                    merged.update(self._read(candidate))
            # More specific tables were loaded first and win
            for key, value in merged.items():
                table.setdefault(key, value)
            parts.pop()

        self._cache[lang] = table
        return table

    def get(self, string: str, lang: Optional[str] = None) -> str:
        table = self.load(lang or self.lang())
        translation = table.get(string)
        return translation if isinstance(translation, str) else string

    def translate(self, text: str, values: Optional[Mapping[str, Any]] = None, lang: Optional[str] = None) -> str:
        lang = normalize_lang(lang) if lang else self.lang()
        if lang != self.source:
            text = self.get(text, lang)
        return replace_placeholders(text, values)


_default_translator: Optional[Translator] = None


def get_translator() -> Translator:
    """Process-wide translator searching `LOCALE_PATH`."""
    global _default_translator
    if _default_translator is None:
        _default_translator = I18n([LOCALE_PATH])
    return _default_translator


def set_translator(translator: Optional[Translator]) -> None:
    global _default_translator
    _default_translator = translator


def __(text: str, values: Optional[Mapping[str, Any]] = None, lang: Optional[str] = None) -> str:
    """
    Translate a string and replace its `:placeholders`.

    Examples:
        __('Welcome back')
        __('Hello, :name', {':name': 'John'})
        __('Hello, :name', {':name': 'Ana'}, 'es-es')
    """
    return get_translator().translate(text, values, lang)


trans = __


def set_locale(locale: str) -> None:
    translator = get_translator()
    if isinstance(translator, I18n):
        translator.lang(locale)


def get_locale() -> Optional[str]:
    translator = get_translator()
    if isinstance(translator, I18n):
        return translator.lang()
    return None
