import re
from typing import Any, Mapping, Optional


_NON_LETTERS = re.compile(r'[\W\d_]+', re.UNICODE)


def humanize_field(field: Any) -> str:
    """Default label for a field: every run of non-letters becomes one space."""
    return _NON_LETTERS.sub(' ', str(field))


def stringify(value: Any) -> str:
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    return str(value)


def replace_placeholders(text: str, values: Optional[Mapping[str, Any]] = None) -> str:
    """
    Replace `:placeholder` keys in a single pass, longest key first.

    Replaced text is never scanned again, so `:param1` inside a label cannot
    be substituted twice.
    """
    if not values:
        return text
    keys = sorted((str(key) for key in values if str(key)), key=len, reverse=True)
    if not keys:
        return text
    lookup = {str(key): value for key, value in values.items()}
    pattern = re.compile('|'.join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: stringify(lookup[match.group(0)]), text)
