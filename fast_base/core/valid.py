"""
Default rule helpers for `Validation`.

Every helper is a static predicate `(value, *params) -> bool`, so a rule
registered as `rule('username', 'min_length', [':value', 4])` is checked as
`Valid.min_length(value, 4)`.
"""

import ipaddress
import re
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Sequence

_EMAIL = re.compile(
    r"^[-_a-z0-9'+*$^&%=~!?{}]+(?:\.[-_a-z0-9'+*$^&%=~!?{}]+)*"
    r"@(?:(?![-.])[-a-z0-9.]+(?<![-.])\.[a-z]{2,}|\d{1,3}(?:\.\d{1,3}){3})$",
    re.IGNORECASE,
)
_URL = re.compile(
    r"^[-a-z0-9+.]+://"
    r"(?:[-a-z0-9$_.+!*'(),;?&=%]+(?::[-a-z0-9$_.+!*'(),;?&=%]+)?@)?"
    r"(?:\d{1,3}(?:\.\d{1,3}){3}|"
    r"((?!-)[-a-z0-9]{1,63}(?<!-)(?:\.(?!-)[-a-z0-9]{1,63}(?<!-)){0,126}))"
    r"(?::\d{1,5})?"
    r"(?:/.*)?$",
    re.IGNORECASE,
)
_COLOR = re.compile(r'^#?[0-9a-f]{3}(?:[0-9a-f]{3})?$', re.IGNORECASE)
_DATE_FORMATS = ('%Y-%m-%d', '%Y/%m/%d', '%d.%m.%Y', '%m/%d/%Y', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M')


def _length(value: Any) -> int:
    return len(value) if isinstance(value, (str, Sequence, Mapping)) else len(str(value))


class Valid:

    @staticmethod
    def not_empty(value: Any) -> bool:
        """`None`, `False`, `''` and empty containers are empty. `0` and `'0'` are not."""
        if value is None or value is False:
            return False
        if isinstance(value, str):
            return value != ''
        if isinstance(value, (list, tuple, dict, set, frozenset)):
            return len(value) > 0
        return True

    @staticmethod
    def regex(value: Any, expression: str | re.Pattern) -> bool:
        return re.search(expression, str(value)) is not None

    @staticmethod
    def min_length(value: Any, length: int) -> bool:
        return _length(value) >= int(length)

    @staticmethod
    def max_length(value: Any, length: int) -> bool:
        return _length(value) <= int(length)

    @staticmethod
    def exact_length(value: Any, length: int | Iterable[int]) -> bool:
        size = _length(value)
        if isinstance(length, (list, tuple, set)):
            return size in {int(item) for item in length}
        return size == int(length)

    @staticmethod
    def equals(value: Any, required: Any) -> bool:
        return type(value) is type(required) and value == required

    @staticmethod
    def email(value: Any, strict: bool = False) -> bool:
        value = str(value)
        if len(value) > 254:
            return False
        if strict:
            local = value.rpartition('@')[0]
            if not local or len(local) > 64 or '..' in local:
                return False
        return _EMAIL.match(value) is not None

    @staticmethod
    def url(value: Any) -> bool:
        value = str(value)
        match = _URL.match(value)
        if not match:
            return False

        # Check maximum length of the whole hostname
        host = match.group(1)
        if host is not None and len(host) > 253:
            return False
        return True

    @staticmethod
    def ip(value: Any, allow_private: bool = True) -> bool:
        try:
            address = ipaddress.ip_address(str(value))
        except ValueError:
            return False
        if address.is_reserved or address.is_unspecified:
            return False
        if not allow_private and (address.is_private or address.is_loopback):
            return False
        return True

    @staticmethod
    def luhn(number: Any) -> bool:
        number = str(number)
        if not number.isdigit():
            return False

        checksum = 0
        for index, digit in enumerate(reversed(number)):
            digit = int(digit)
            if index % 2:
                digit *= 2
                if digit > 9:
                    digit -= 9
            checksum += digit
        return checksum % 10 == 0

    @staticmethod
    def phone(number: Any, lengths: Optional[Iterable[int]] = None) -> bool:
        if lengths is None:
            lengths = (7, 10, 11)
        digits = re.sub(r'\D+', '', str(number))
        return len(digits) in {int(length) for length in lengths}

    @staticmethod
    def date(value: Any, formats: Optional[Iterable[str]] = None) -> bool:
        if isinstance(value, datetime):
            return True
        value = str(value).strip()
        try:
            datetime.fromisoformat(value)
            return True
        except ValueError:
            pass
        for fmt in formats or _DATE_FORMATS:
            try:
                datetime.strptime(value, fmt)
                return True
            except ValueError:
                continue
        return False

    @staticmethod
    def alpha(value: Any) -> bool:
        value = str(value)
        return value != '' and all(char.isalpha() for char in value)

    @staticmethod
    def alpha_numeric(value: Any) -> bool:
        value = str(value)
        return value != '' and all(char.isalnum() for char in value)

    @staticmethod
    def alpha_dash(value: Any) -> bool:
        return re.fullmatch(r'[\w-]+', str(value)) is not None

    @staticmethod
    def digit(value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return value >= 0
        return str(value).isdigit()

    @staticmethod
    def numeric(value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float, Decimal)):
            return True
        return re.fullmatch(r'-?\d+(?:\.\d+)?', str(value).strip()) is not None

    @staticmethod
    def range(number: Any, minimum: float, maximum: float, step: Optional[float] = None) -> bool:
        try:
            number = Decimal(str(number))
        except InvalidOperation:
            return False
        if not number.is_finite():
            return False
        minimum, maximum = Decimal(str(minimum)), Decimal(str(maximum))
        if number < minimum or number > maximum:
            return False
        if step:
            return (number - minimum) % Decimal(str(step)) == 0
        return True

    @staticmethod
    def decimal(value: Any, places: int = 2, digits: Optional[int] = None) -> bool:
        if digits and digits > 0:
            whole = r'\d{%d}' % int(digits)
        else:
            whole = r'\d+'
        pattern = r'[+-]?%s\.\d{%d}' % (whole, int(places))
        return re.fullmatch(pattern, str(value)) is not None

    @staticmethod
    def color(value: Any) -> bool:
        return _COLOR.match(str(value)) is not None

    @staticmethod
    def matches(array: Mapping, field: Any, match: Any) -> bool:
        """Whether two fields of `array` hold the same value."""
        return array.get(field) == array.get(match)
