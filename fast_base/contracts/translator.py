from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class Translator(ABC):
    """Contract for translating `:placeholder` message templates."""

    @abstractmethod
    def translate(self, text: str, values: Optional[Mapping[str, Any]] = None, lang: Optional[str] = None) -> str:
        """
        Translate `text` into `lang` (current language when `None`) and substitute `values`.

        Untranslated text is returned with the values substituted.
        """
        raise NotImplementedError
