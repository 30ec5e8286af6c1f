from __future__ import annotations

import pytest

from core.api.params import (
    encode_uri_component,
    flag_param,
    list_param,
    make_query_string,
    scalar_param,
    stringify,
    to_upper_string,
)
from core.errors import InvalidArgumentError


def test_make_query_string_empty() -> None:
    assert make_query_string({}) == ""


def test_make_query_string_encodes_values_but_keeps_commas() -> None:
    query = {"fields": "a,b", "preference": "_shards:2 custom", "realtime": False}

    assert make_query_string(query) == "?fields=a,b&preference=_shards%3A2%20custom&realtime=false"


def test_make_query_string_leaves_uri_component_marks_literal() -> None:
    assert make_query_string({"_source": "user.*", "preference": "(x)!~'"}) == "?_source=user.*&preference=(x)!~'"


@pytest.mark.parametrize(("value", "expected"), [(1.0, "1"), (-2.0, "-2"), (1.5, "1.5"), (3, "3")])
def test_stringify_renders_whole_floats_as_ints(value, expected) -> None:
    assert stringify(value) == expected


def test_encode_uri_component_matches_browser_rules() -> None:
    assert encode_uri_component("a b/c?d") == "a%20b%2Fc%3Fd"
    assert encode_uri_component("keep-_.!~*'()") == "keep-_.!~*'()"
    assert encode_uri_component("café") == "caf%C3%A9"


@pytest.mark.parametrize(("value", "expected"), [(None, ""), ("", ""), ("get", "GET"), (True, "TRUE")])
def test_to_upper_string(value, expected) -> None:
    assert to_upper_string(value) == expected


def test_scalar_param_stringifies_booleans() -> None:
    assert scalar_param("index", True) == "true"
    assert scalar_param("index", 1.5) == "1.5"


def test_scalar_param_rejects_objects() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        scalar_param("preference", {"node": 1})

    assert excinfo.value.param == "preference"


def test_list_param_stringifies_elements() -> None:
    assert list_param("fields", ("a", 1, True)) == "a,1,true"


def test_flag_param_only_treats_no_and_off_as_false_words() -> None:
    assert flag_param("OFF") is False
    assert flag_param("nO") is False
    assert flag_param("false") is True
    assert flag_param("") is False
