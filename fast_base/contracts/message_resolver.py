from abc import ABC, abstractmethod
from typing import Any, Optional


class MessageResolver(ABC):
    """
    Contract for message lookup used by `Validation.errors()`.

    Implementations must not raise for missing files or keys.
    """

    @abstractmethod
    def load(self, file: str, path: Optional[str] = None, default: Any = None) -> Any:
        """
        Load a message.

        Args:
            file: Message file name without extension, e.g. `forms/login`.
            path: Dotted key path within the file. `None` returns the whole mapping.
            default: Returned when the key path does not exist.
        """
        raise NotImplementedError
