"""
Rule specifications understood by `Validation.rule()`.

A rule is parsed once, when it is registered, into one of:

- `NamedRule('min_length')` - a method of the rule helper class, otherwise a free function
- `FreeFunctionRef('mypkg.checks.is_slug')` - a registered rule, a builtin or a dotted import path
- `StaticRef(target, 'method')` - from `(target, 'method')` or `'mypkg.Checks::method'`
- `InlineCallable(fn)` - any other callable

Nothing is resolved before the rule runs, so names may be registered or
bound after `rule()` has been called.
"""
from __future__ import annotations

import builtins
import importlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Collection, Dict, List, Mapping, Optional, Sequence

from fast_base.exceptions.validation_exceptions import RuleResolutionException
from fast_base.utils.serialisation import pascal_case_to_snake_case


class Slot(str, Enum):
    """Placeholders bound by `Validation.check()`."""

    VALUE = ':value'
    FIELD = ':field'
    VALIDATION = ':validation'
    DATA = ':data'


DEFAULT_PARAMS = (Slot.VALUE.value,)

_registry: Dict[str, Any] = {}


def register_rule(rule: Any = None, *, name: Optional[str] = None):
    """
    Register a function (or class) so rules can refer to it by name.

        @register_rule
        def is_slug(value): ...

        @register_rule(name='slug')
        def is_slug(value): ...

        Validation.factory(data).rule('handle', 'slug')
    """
    def decorator(obj: Any) -> Any:
        _registry[name or obj.__name__] = obj
        return obj

    if rule is not None:
        return decorator(rule)
    return decorator


def unregister_rule(name: str) -> None:
    _registry.pop(name, None)


def substitute(token: Any, bound: Mapping[str, Any]) -> Any:
    """Replace a placeholder token with its bound value. Other values are returned as-is."""
    if isinstance(token, str) and token in bound:
        return bound[token]
    return token


def resolve_params(params: Sequence[Any], bound: Mapping[str, Any]) -> List[Any]:
    return [substitute(param, bound) for param in params]


def resolve_symbol(path: str, rule: Any) -> Any:
    """Registered name, then builtin, then `package.module.attribute` import."""
    if path in _registry:
        return _registry[path]

    if '.' not in path:
        if not path.startswith('_') and hasattr(builtins, path):
            return getattr(builtins, path)
        raise RuleResolutionException(rule, f"`{path}` is not a registered rule or a builtin")

    parts = path.split('.')
    for index in range(len(parts) - 1, 0, -1):
        module_path = '.'.join(parts[:index])
        try:
            target = importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            if e.name is not None and not (module_path == e.name or module_path.startswith(e.name + '.')):
                raise
            continue

        for attribute in parts[index:]:
            try:
                target = getattr(target, attribute)
            except AttributeError:
                raise RuleResolutionException(rule, f"`{module_path}` has no attribute `{attribute}`") from None
        return target

    raise RuleResolutionException(rule, f"no module found for `{path}`")


class RuleSpec(ABC):

    @property
    @abstractmethod
    def error_name(self) -> Optional[str]:
        """Error recorded when the rule returns `False`; `None` means the rule reports its own errors."""

    @abstractmethod
    def resolve(self, bound: Mapping[str, Any], helper: Any) -> Callable[..., Any]:
        ...

    def runs_when_empty(self, empty_rules: Collection[str]) -> bool:
        return False

    def invoke(self, params: Sequence[Any], bound: Mapping[str, Any], helper: Any) -> Any:
        return self.resolve(bound, helper)(*params)


@dataclass(frozen=True)
class NamedRule(RuleSpec):
    name: str

    @property
    def error_name(self) -> Optional[str]:
        return self.name

    def _candidates(self) -> List[str]:
        snake = pascal_case_to_snake_case(self.name)
        return [self.name] if snake == self.name else [self.name, snake]

    def runs_when_empty(self, empty_rules: Collection[str]) -> bool:
        return any(candidate in empty_rules for candidate in self._candidates())

    def resolve(self, bound: Mapping[str, Any], helper: Any) -> Callable[..., Any]:
        if helper is not None:
            for candidate in self._candidates():
                if candidate.startswith('_'):
                    continue
                method = getattr(helper, candidate, None)
                if callable(method):
                    return method
        return FreeFunctionRef(self.name).resolve(bound, helper)


@dataclass(frozen=True)
class FreeFunctionRef(RuleSpec):
    name: str

    @property
    def error_name(self) -> Optional[str]:
        return self.name

    def resolve(self, bound: Mapping[str, Any], helper: Any) -> Callable[..., Any]:
        function = resolve_symbol(self.name, self.name)
        if not callable(function):
            raise RuleResolutionException(self.name, "resolved object is not callable")
        return function


@dataclass(frozen=True)
class StaticRef(RuleSpec):
    target: Any
    method: str
    name: str

    @property
    def error_name(self) -> Optional[str]:
        return self.name

    def resolve(self, bound: Mapping[str, Any], helper: Any) -> Callable[..., Any]:
        target = substitute(self.target, bound)
        if isinstance(target, str):
            target = resolve_symbol(target, self.name)

        method = getattr(target, self.method, None)
        if not callable(method):
            raise RuleResolutionException(self.name, f"`{self.method}` is not a callable attribute of {target!r}")
        return method


@dataclass(frozen=True)
class InlineCallable(RuleSpec):
    function: Any

    @property
    def error_name(self) -> Optional[str]:
        return None

    def resolve(self, bound: Mapping[str, Any], helper: Any) -> Callable[..., Any]:
        if not callable(self.function):
            raise RuleResolutionException(self.function, "rule is not callable")
        return self.function


def parse_rule(rule: Any) -> RuleSpec:
    if isinstance(rule, RuleSpec):
        return rule

    if isinstance(rule, (tuple, list)):
        if len(rule) == 2 and isinstance(rule[1], str):
            target, method = rule
            return StaticRef(target, method, method)
        return InlineCallable(tuple(rule))

    if isinstance(rule, str):
        if '::' in rule:
            target, _, method = rule.partition('::')
            return StaticRef(target, method, rule)
        return NamedRule(rule)

    # Non-callables are kept so the failure surfaces when the rule runs
    return InlineCallable(rule)
