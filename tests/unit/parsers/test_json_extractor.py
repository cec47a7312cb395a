"""
Tests for embedded JSON literal extraction.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tubeformat.exceptions import (
    ErrorKind,
    MalformedLiteralError,
    NoLiteralFoundError,
    UnbalancedLiteralError,
    UnsupportedInputKindError,
)
from tubeformat.models.result import Err, Ok
from tubeformat.parsers.json_extractor import (
    INITIAL_DATA_VARIABLE,
    PLAYER_RESPONSE_VARIABLE,
    cut_after_json,
    find_embedded_json,
)

# A backslash right before a closing quote reads as an escape, so keep
# backslashes out of generated strings.
plain_text = st.text(alphabet=st.characters(blacklist_characters="\\"))

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | plain_text,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(plain_text, children, max_size=4),
    max_leaves=12,
)
json_containers = st.lists(json_values, max_size=4) | st.dictionaries(
    plain_text, json_values, max_size=4
)


class TestCutAfterJson:
    """Tests for cut_after_json."""

    def test_cuts_object_before_trailing_script(self) -> None:
        """Test the literal is cut where its outermost brace closes."""
        result = cut_after_json('{"a": 1, "b": 1}abcd')
        assert result == Ok('{"a": 1, "b": 1}')

    def test_cuts_array(self) -> None:
        """Test arrays are cut the same way as objects."""
        assert cut_after_json('[{"a": 1}, {"b": 1}]abcd') == Ok('[{"a": 1}, {"b": 1}]')

    def test_nested_brackets(self) -> None:
        """Test nested objects do not end the literal early."""
        text = '{"a": {"b": {"c": [1, 2]}}};var x = {};'
        assert cut_after_json(text) == Ok('{"a": {"b": {"c": [1, 2]}}}')

    def test_brackets_inside_strings_are_ignored(self) -> None:
        """Test brackets in string values are not counted."""
        text = '{"a": "}}}", "b": "{{"}tail'
        assert cut_after_json(text) == Ok('{"a": "}}}", "b": "{{"}')

    def test_open_bracket_in_string_field(self) -> None:
        """Test an unmatched bracket inside a string does not change the depth."""
        assert cut_after_json('{"a": "a[b"}]') == Ok('{"a": "a[b"}')
        assert cut_after_json('["a[b", 1], 2') == Ok('["a[b", 1]')

    def test_escaped_quote_does_not_toggle_string(self) -> None:
        """Test a backslash-escaped quote keeps the scan inside the string."""
        text = r'{"a": "say \"}\" now"}rest'
        assert cut_after_json(text) == Ok(r'{"a": "say \"}\" now"}')

    def test_unsupported_first_character(self) -> None:
        """Test text not starting with [ or { is rejected."""
        result = cut_after_json('abc{"a": 1}')
        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedInputKindError)
        assert result.error.detail == "a"

    def test_empty_input_is_unsupported(self) -> None:
        """Test empty input reports an unsupported kind with empty detail."""
        result = cut_after_json("")
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.UNSUPPORTED_INPUT_KIND
        assert result.error.detail == ""

    def test_unbalanced_input(self) -> None:
        """Test input ending before the literal closes."""
        result = cut_after_json('{"a": {"b": 1}')
        assert isinstance(result, Err)
        assert isinstance(result.error, UnbalancedLiteralError)
        assert result.error.detail == 1

    def test_unterminated_string_is_unbalanced(self) -> None:
        """Test a string that never closes swallows the closing brace."""
        result = cut_after_json('{"a": "}')
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.UNBALANCED_LITERAL

    @given(value=json_containers, tail=st.text())
    def test_serialized_containers_are_recovered(self, value: object, tail: str) -> None:
        """Test any serialized container is cut back out of arbitrary trailing text."""
        literal = json.dumps(value)
        result = cut_after_json(literal + tail)
        assert isinstance(result, Ok)
        assert json.loads(result.value) == value


class TestFindEmbeddedJson:
    """Tests for find_embedded_json."""

    def test_var_assignment(self) -> None:
        """Test a ``var NAME = {...};`` assignment."""
        html = '<script>var ytInitialPlayerResponse = {"a": [1, 2]};var meta = 1;</script>'
        assert find_embedded_json(html) == Ok({"a": [1, 2]})

    def test_window_assignment(self) -> None:
        """Test a ``window["NAME"] = {...};`` assignment."""
        html = '<script>window["ytInitialData"] = {"k": "v"};</script>'
        assert find_embedded_json(html, INITIAL_DATA_VARIABLE) == Ok({"k": "v"})

    def test_bare_assignment_without_spaces(self) -> None:
        """Test a bare ``NAME={...}`` assignment."""
        html = 'ytInitialPlayerResponse={"x":true};'
        assert find_embedded_json(html, PLAYER_RESPONSE_VARIABLE) == Ok({"x": True})

    def test_missing_variable(self) -> None:
        """Test a page without the assignment."""
        result = find_embedded_json("<html><body>nothing</body></html>")
        assert isinstance(result, Err)
        assert result.error == NoLiteralFoundError(PLAYER_RESPONSE_VARIABLE)

    def test_assignment_to_non_literal(self) -> None:
        """Test an assignment whose value is not a literal."""
        result = find_embedded_json("var ytInitialPlayerResponse = null;")
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.UNSUPPORTED_INPUT_KIND

    def test_balanced_but_invalid_json(self) -> None:
        """Test a balanced literal that is not JSON."""
        result = find_embedded_json("var ytInitialPlayerResponse = {a: 1};")
        assert isinstance(result, Err)
        assert isinstance(result.error, MalformedLiteralError)
        assert result.error.detail == PLAYER_RESPONSE_VARIABLE

    def test_page_fixture(self, watch_page: str, player_response: dict) -> None:
        """Test the full player response is recovered from a page."""
        assert find_embedded_json(watch_page) == Ok(player_response)

    @pytest.mark.parametrize("variable", [PLAYER_RESPONSE_VARIABLE, INITIAL_DATA_VARIABLE])
    def test_variable_name_is_matched_literally(self, variable: str) -> None:
        """Test only the requested variable is picked up."""
        html = (
            'var ytInitialPlayerResponse = {"which": "player"};'
            'var ytInitialData = {"which": "data"};'
        )
        result = find_embedded_json(html, variable)
        expected = "player" if variable == PLAYER_RESPONSE_VARIABLE else "data"
        assert result.unwrap()["which"] == expected
