"""
Key-path helpers for nested mappings.

    Arr.get({'a': 1}, 'a')                    # 1
    Arr.path({'a': {'b': 2}}, 'a.b')          # 2
    Arr.merge({'a': {'b': 1}}, {'a': {'c': 2}})  # {'a': {'b': 1, 'c': 2}}
    Arr.flatten({'a': [1, [2, 3]]})           # [1, 2, 3]
"""
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional


class Arr:
    delimiter = '.'

    @staticmethod
    def get(data: Any, key: Any, default: Any = None) -> Any:
        """Single-level lookup that never raises."""
        if isinstance(data, Mapping):
            try:
                return data[key] if key in data else default
            except TypeError:
                return default
        if isinstance(data, (list, tuple)) and isinstance(key, int):
            return data[key] if -len(data) <= key < len(data) else default
        return default

    @classmethod
    def path(cls, data: Any, path: Any, default: Any = None, delimiter: Optional[str] = None) -> Any:
        """Navigate nested mappings with dot notation. Missing keys return `default`."""
        if path is None:
            return data

        if isinstance(data, Mapping) and not isinstance(path, (list, tuple)):
            # Exact keys containing the delimiter take precedence
            try:
                if path in data:
                    return data[path]
            except TypeError:
                return default

        keys = path if isinstance(path, (list, tuple)) else str(path).split(delimiter or cls.delimiter)
        current = data
        for key in keys:
            if isinstance(current, (list, tuple)) and isinstance(key, str) and key.lstrip('-').isdigit():
                key = int(key)
            sentinel = object()
            current = cls.get(current, key, sentinel)
            if current is sentinel:
                return default
        return current

    @classmethod
    def merge(cls, first: Mapping, *others: Mapping) -> dict:
        """Recursively merge mappings; later values win for non-mapping keys."""
        result = dict(first)
        for other in others:
            for key, value in other.items():
                if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
                    result[key] = cls.merge(result[key], value)
                else:
                    result[key] = value
        return result

    @staticmethod
    def unique(*iterables: Iterable) -> List[Any]:
        """Ordered union of the given iterables."""
        result: List[Any] = []
        seen = set()
        for iterable in iterables:
            for item in iterable:
                if item in seen:
                    continue
                seen.add(item)
                result.append(item)
        return result

    @classmethod
    def flatten(cls, data: Any) -> List[Any]:
        if isinstance(data, Mapping):
            data = data.values()
        flat: List[Any] = []
        for item in data:
            if isinstance(item, (Mapping, list, tuple, set)):
                flat.extend(cls.flatten(item))
            else:
                flat.append(item)
        return flat
