import pytest

from fast_base.utils.arr import Arr
from fast_base.utils.serialisation import is_scalar, pascal_case_to_snake_case
from fast_base.utils.string_utils import humanize_field, replace_placeholders, stringify


def test_arr_get():
    assert Arr.get({"a": 1}, "a") == 1
    assert Arr.get({"a": 1}, "b", "x") == "x"
    assert Arr.get({"a": 1}, ["unhashable"]) is None
    assert Arr.get(["rule", [":value"]], 1) == [":value"]
    assert Arr.get(["rule"], 1) is None


def test_arr_path():
    data = {"username": {"not_empty": "required", "rules": ["a", "b"]}}

    assert Arr.path(data, "username.not_empty") == "required"
    assert Arr.path(data, "username.rules.1") == "b"
    assert Arr.path(data, "username.missing", "default") == "default"
    assert Arr.path(data, "username.not_empty.deeper") is None
    assert Arr.path(data, None) is data


def test_arr_merge_is_recursive():
    merged = Arr.merge({"a": {"b": 1, "c": 1}, "d": 1}, {"a": {"c": 2}}, {"d": {"e": 3}})

    assert merged == {"a": {"b": 1, "c": 2}, "d": {"e": 3}}


def test_arr_unique_keeps_order():
    assert Arr.unique(["b", "a"], ["a", "c"]) == ["b", "a", "c"]


def test_arr_flatten():
    assert Arr.flatten({"a": [1, [2, 3]], "b": {"c": 4}}) == [1, 2, 3, 4]


@pytest.mark.parametrize("field, expected", [
    ("username", "username"),
    ("password_repeat", "password repeat"),
    ("address2", "address "),
    ("first-name", "first name"),
    ("x__1__y", "x y"),
])
def test_humanize_field(field, expected):
    assert humanize_field(field) == expected


def test_stringify():
    assert stringify(None) == ""
    assert stringify(False) == ""
    assert stringify(True) == "1"
    assert stringify(0) == "0"
    assert stringify(2.5) == "2.5"


def test_replace_placeholders_prefers_the_longest_key():
    values = {":param1": "one", ":param10": "ten"}

    assert replace_placeholders(":param10 and :param1", values) == "ten and one"


def test_replace_placeholders_is_a_single_pass():
    values = {":field": ":value", ":value": "secret"}

    assert replace_placeholders(":field is :value", values) == ":value is secret"


def test_replace_placeholders_without_values():
    assert replace_placeholders("plain :field") == "plain :field"
    assert replace_placeholders("plain :field", {}) == "plain :field"


def test_is_scalar():
    assert is_scalar(None)
    assert is_scalar("x")
    assert is_scalar(1.5)
    assert not is_scalar(object())
    assert not is_scalar(["x"])


def test_pascal_case_to_snake_case():
    assert pascal_case_to_snake_case("notEmpty") == "not_empty"
    assert pascal_case_to_snake_case("MinLength") == "min_length"
    assert pascal_case_to_snake_case("alpha_dash") == "alpha_dash"
