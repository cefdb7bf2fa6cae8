"""
Rule based validation of associative data.

    validation = (
        Validation.factory(request_data)
        .rule('username', 'not_empty')
        .rule('username', 'min_length', [':value', 4])
        .rule('password', 'matches', [':data', ':field', 'password_repeat'])
        .label('password_repeat', 'password confirmation')
    )

    if not validation.check():
        errors = validation.errors('forms/register')

Rules may use the following placeholders in their parameters:

- `:validation` - the validation object
- `:data` - the data being checked, including labelled fields that are missing
- `:field` - the field name
- `:value` - the field value
- any key registered with `bind()`

Rules registered for the field `True` apply to every field.
"""
from __future__ import annotations

import copy as copy_module
import logging
from collections.abc import Hashable, Mapping
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from fast_base.config import VALIDATION_ERROR_FILE
from fast_base.contracts.message_resolver import MessageResolver
from fast_base.contracts.translator import Translator
from fast_base.core.localization import get_translator
from fast_base.core.message import get_message_resolver
from fast_base.core.rules import DEFAULT_PARAMS, RuleSpec, Slot, parse_rule, resolve_params
from fast_base.core.valid import Valid
from fast_base.exceptions.validation_exceptions import ReadOnlyViolationException
from fast_base.utils.arr import Arr
from fast_base.utils.serialisation import is_scalar, pascal_case_to_snake_case
from fast_base.utils.string_utils import humanize_field, replace_placeholders


class _AllFields:
    """Rule table key for rules that apply to every field."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'ALL_FIELDS'


ALL_FIELDS = _AllFields()


class ErrorEntry(NamedTuple):
    error: Any
    params: Optional[List[Any]] = None


class Validation(Mapping):

    # Class whose methods can be used as rules by name
    valid_helper_class: Any = Valid

    # Rules that still run when the value is empty
    empty_rules: Tuple[str, ...] = ('not_empty', 'matches')

    def __init__(self,
        data: Optional[Mapping[Any, Any]] = None,
        *,
        messages: Optional[MessageResolver] = None,
        translator: Optional[Translator] = None,
        error_file_name: Optional[str] = VALIDATION_ERROR_FILE,
    ):
        self._data: Dict[Any, Any] = copy_module.deepcopy(dict(data or {}))
        self._bound: Dict[str, Any] = {}
        self._rules: Dict[Any, List[Tuple[RuleSpec, List[Any]]]] = {}
        self._labels: Dict[Any, str] = {}
        self._errors: Dict[Any, ErrorEntry] = {}
        self._error_file_name = error_file_name
        self._messages = messages
        self._translator = translator

    @classmethod
    def factory(cls, data: Mapping[Any, Any], **kwargs) -> 'Validation':
        """Create a new validation instance for `data`."""
        return cls(data, **kwargs)

    # --------------- read-only keyed access ---------------
    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __setitem__(self, key: Any, value: Any) -> None:
        raise ReadOnlyViolationException(key)

    def __delitem__(self, key: Any) -> None:
        raise ReadOnlyViolationException(key)

    # Identity semantics, not mapping equality
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={list(self._data)!r}, rules={list(self._rules)!r})"

    # --------------- configuration ---------------
    @staticmethod
    def _field_key(field: Any) -> Any:
        return ALL_FIELDS if field is True else field

    def copy(self, data: Mapping[Any, Any]) -> 'Validation':
        """
        Copy the rules, labels and bindings to a new instance checking `data`.

            login = validation.copy(request_data)
        """
        duplicate = copy_module.copy(self)
        duplicate._bound = dict(self._bound)
        duplicate._rules = {field: list(rules) for field, rules in self._rules.items()}
        duplicate._labels = dict(self._labels)
        duplicate._errors = dict(self._errors)
        duplicate.set_data(data)
        return duplicate

    def label(self, field: Any, label: str) -> 'Validation':
        self._labels[field] = label
        return self

    def labels(self, labels: Mapping[Any, str]) -> 'Validation':
        for field, label in labels.items():
            self.label(field, label)
        return self

    def rule(self, field: Any, rule: Any, params: Optional[Sequence[Any]] = None) -> 'Validation':
        """
        Add a rule to a field. Rules run in the order they were added.

            # username must not be empty and at least 4 characters long
            validation.rule('username', 'not_empty') \\
                      .rule('username', 'min_length', [':value', 4])

            # password must equal password_repeat
            validation.rule('password', 'matches', [':data', ':field', 'password_repeat'])

            # callables must record their own errors
            def check_index(validation, field, value):
                if 6 < value < 10:
                    validation.error(field, 'custom')

            validation.rule('index', check_index, [':validation', ':field', ':value'])

        Args:
            field: Field name, or `True` to apply the rule to every field.
            rule: Rule name, `(target, 'method')`, `'module.Class::method'` or a callable.
            params: Rule arguments, placeholders included. Defaults to `[':value']`.
        """
        if params is None:
            params = DEFAULT_PARAMS

        field = self._field_key(field)
        if field is not ALL_FIELDS and field not in self._labels:
            self._labels[field] = humanize_field(field)

        self._rules.setdefault(field, []).append((parse_rule(rule), list(params)))
        return self

    def rules(self, field: Any, rules: Sequence[Sequence[Any]]) -> 'Validation':
        """Add several `[rule, params]` pairs to a field at once."""
        for rule in rules:
            self.rule(field, rule[0], Arr.get(rule, 1))
        return self

    def bind(self, key: str | Mapping[str, Any], value: Any = None) -> 'Validation':
        """
        Bind a value to a placeholder usable in rule parameters and rule targets.

            validation.bind(':model', model).rule('status', (':model', 'valid_status'))
        """
        if isinstance(key, Mapping):
            for name, bound_value in key.items():
                self._bound[name] = bound_value
        else:
            self._bound[key] = value
        return self

    # --------------- checking ---------------
    def check(self) -> bool:
        """
        Run every rule against the data.

            if validation.check():
                # Data is valid

        Returns:
            True if no field failed.
        """
        self._errors = {}
        original = self._data

        fields = Arr.unique(original.keys(), self._labels.keys())
        rules = {field: list(field_rules) for field, field_rules in self._rules.items() if field is not ALL_FIELDS}
        global_rules = self._rules.get(ALL_FIELDS)

        data: Dict[Any, Any] = {}
        for field in fields:
            data[field] = original.get(field)
            if global_rules:
                rules.setdefault(field, []).extend(global_rules)

        bound: Dict[str, Any] = dict(self._bound)
        bound[Slot.VALIDATION.value] = self
        bound[Slot.DATA.value] = data

        helper = self.valid_helper_class

        for field, field_rules in rules.items():
            if not field_rules:
                continue

            value = data.get(field)
            bound[Slot.FIELD.value] = field
            bound[Slot.VALUE.value] = value

            for spec, params in field_rules:
                resolved = resolve_params(params, bound)
                passed = spec.invoke(resolved, bound, helper)

                # Ignore the result of rules that do not apply to empty values
                if not spec.runs_when_empty(self.empty_rules) and not Valid.not_empty(value):
                    continue

                if passed is False and spec.error_name is not None:
                    self.error(field, spec.error_name, resolved)
                    break
                elif field in self._errors:
                    # The rule recorded its own error
                    break

        logging.debug(
            f"[VALIDATION] Checked {len(rules)} field(s): "
            f"{'passed' if not self._errors else 'failed ' + ', '.join(map(str, self._errors))}"
        )

        return not self._errors

    def error(self, field: Any, error: Any, params: Optional[Sequence[Any]] = None) -> 'Validation':
        """Record the error of a field, replacing any previous one."""
        self._errors[field] = ErrorEntry(error, list(params) if params is not None else None)
        return self

    # --------------- messages ---------------
    @property
    def messages(self) -> MessageResolver:
        return self._messages or get_message_resolver()

    @property
    def translator(self) -> Translator:
        return self._translator or get_translator()

    def _translate(self, text: str, values: Optional[Dict[str, Any]], translate: bool | str) -> str:
        lang = translate if isinstance(translate, str) else None
        return self.translator.translate(text, values, lang)

    def _load_message(self, file: str, field: Any, error: Any) -> str:
        names = [str(error)]
        # camelCase rule names share the messages of their snake_case helper
        if names[0].isidentifier() and pascal_case_to_snake_case(names[0]) != names[0]:
            names.append(pascal_case_to_snake_case(names[0]))

        candidates = (
            *((file, f"{field}.{name}") for name in names),
            (file, f"{field}.default"),
            *((file, name) for name in names),
            *(('validation', name) for name in names),
        )
        for message_file, path in candidates:
            message = self.messages.load(message_file, path)
            if message and isinstance(message, str):
                return message

        # No message exists, display the path expected
        return f"{file}.{field}.{error}"

    def _format_value(self, value: Any) -> Any:
        if isinstance(value, (Mapping, list, tuple, set)):
            return ', '.join(str(item) for item in Arr.flatten(value))
        return value

    def errors(self, file: Optional[str] = None, translate: bool | str = True) -> Dict[Any, Any]:
        """
        Get the error messages of the last check.

            # Messages from messages/forms/login.json
            errors = validation.errors('forms/login')

        Args:
            file: Message file. Defaults to the error file name; without one the
                raw `{field: ErrorEntry}` mapping is returned.
            translate: `True` to translate into the current language, a language
                code, or `False` to only replace the placeholders.
        """
        if file is None:
            if not self.get_error_file_name():
                return dict(self._errors)
            file = self.get_error_file_name()

        messages: Dict[Any, str] = {}

        for field, (error, params) in self._errors.items():
            label = self._labels.get(field, humanize_field(field))
            if translate:
                label = self._translate(label, None, translate)

            values: Dict[str, Any] = {
                Slot.FIELD.value: label,
                Slot.VALUE.value: self._format_value(self._data.get(field)),
            }

            for index, value in enumerate(params or []):
                if isinstance(value, Validation):
                    # Its data may hold secrets, eg: a password for "matches"
                    continue
                elif isinstance(value, (Mapping, list, tuple, set)):
                    value = self._format_value(value)
                elif not is_scalar(value):
                    # Objects cannot be used in message files
                    continue

                # Use the label of a related field, eg: the field name for "matches"
                if isinstance(value, Hashable) and not isinstance(value, bool) and value in self._labels:
                    value = self._labels[value]
                    if translate:
                        value = self._translate(value, None, translate)

                values[f":param{index + 1}"] = value

            message = self._load_message(file, field, error)

            if translate:
                message = self._translate(message, values, translate)
            else:
                message = replace_placeholders(message, values)

            messages[field] = message

        return messages

    # --------------- accessors ---------------
    def get_error_file_name(self) -> Optional[str]:
        return self._error_file_name

    def set_error_file_name(self, error_file_name: Optional[str]) -> None:
        self._error_file_name = error_file_name

    error_file_name = property(get_error_file_name, set_error_file_name)

    def get_data(self) -> Dict[Any, Any]:
        return dict(self._data)

    def set_data(self, data: Mapping[Any, Any]) -> None:
        self._data = copy_module.deepcopy(dict(data))

    def get_labels(self) -> Dict[Any, str]:
        return dict(self._labels)

    def get_rules(self) -> Dict[Any, List[Tuple[RuleSpec, List[Any]]]]:
        return {field: list(rules) for field, rules in self._rules.items()}
