"""
Tests for URI resolution on RequestInformation.

Covers templated paths (current path + segment) and raw URLs whose query
string is exploded into query parameters.
"""

import logging

import httpx
import pytest
from hypothesis import given, strategies as st, settings

from request_information import (
    InvalidArgumentError,
    MalformedUriError,
    RequestInformation,
)


# Strategy for path segments made of URL-safe characters
segment_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789-_"),
    min_size=1,
    max_size=20
)

# Lower-case names keep keys distinct under case-insensitive comparison
param_name_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz_"),
    min_size=1,
    max_size=15
)

param_value_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.=~"),
    min_size=0,
    max_size=20
)


class TestTemplatedUri:
    """URI resolution when the path is not a raw URL."""

    def test_concatenates_path_and_segment(self):
        info = RequestInformation()
        info.set_uri("https://graph.example.com/v1.0", "/users", False)

        assert info.uri == httpx.URL("https://graph.example.com/v1.0/users")
        assert len(info.query_parameters) == 0

    def test_none_parts_are_treated_as_empty(self):
        info = RequestInformation()
        info.set_uri("https://graph.example.com/me", None, False)

        assert str(info.uri) == "https://graph.example.com/me"

    def test_query_in_template_is_not_extracted(self):
        info = RequestInformation()
        info.set_uri("https://graph.example.com/me", "?select=id", False)

        assert info.uri.query == b"select=id"
        assert len(info.query_parameters) == 0

    def test_last_call_wins(self):
        info = RequestInformation()
        info.set_uri("https://a.example.com", "/first", False)
        info.set_uri("https://b.example.com", "/second", False)

        assert str(info.uri) == "https://b.example.com/second"

    def test_malformed_uri_raises(self):
        info = RequestInformation()
        with pytest.raises(MalformedUriError):
            info.set_uri("https://a.example.com:port", "/users", False)
        assert info.uri is None

    @given(
        segments=st.lists(segment_strategy, min_size=1, max_size=4),
        last=segment_strategy
    )
    @settings(max_examples=100)
    def test_uri_equals_parsed_concatenation(self, segments: list[str], last: str):
        """
        Property: For any path and segment, the URI equals the parsed
        concatenation and no query parameters are added.
        """
        path = "https://api.example.com/" + "/".join(segments)
        segment = "/" + last

        info = RequestInformation()
        info.set_uri(path, segment, False)

        assert info.uri == httpx.URL(path + segment)
        assert len(info.query_parameters) == 0


class TestRawUrl:
    """URI resolution for raw URLs."""

    def test_splits_path_and_query(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?x=1&y=2&y=3", "/ignored", True)

        assert str(info.uri) == "https://a.com/b"
        assert info.query_parameters == {"x": "1", "y": "3"}

    def test_token_without_equals_has_no_value(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?flag", "", True)

        assert "flag" in info.query_parameters
        assert info.query_parameters["flag"] is None

    def test_empty_value_is_not_none(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?flag=", "", True)

        assert info.query_parameters["flag"] == ""

    def test_empty_name_is_dropped(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?=v&ok=1", "", True)

        assert info.query_parameters == {"ok": "1"}

    def test_empty_name_is_logged_at_debug_level(self, caplog):
        caplog.set_level(logging.DEBUG, logger="request_information.request_information")
        info = RequestInformation()
        info.set_uri("https://a.com/b?=v&ok=1", "", True)

        debug_messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("without a name" in message for message in debug_messages)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_value_keeps_everything_after_first_equals(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?filter=name=ada&token=abc==", "", True)

        assert info.query_parameters == {"filter": "name=ada", "token": "abc=="}

    def test_only_first_question_mark_separates_query(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?x=1?y=2&z=3", "", True)

        assert str(info.uri) == "https://a.com/b"
        assert info.query_parameters == {"x": "1?y=2", "z": "3"}

    def test_trailing_question_mark_adds_nothing(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?", "", True)

        assert str(info.uri) == "https://a.com/b"
        assert len(info.query_parameters) == 0

    def test_path_segment_is_ignored(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b", "/c", True)

        assert str(info.uri) == "https://a.com/b"

    def test_space_in_path_is_percent_encoded(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b c?x=1", "", True)

        assert str(info.uri) == "https://a.com/b%20c"
        assert info.query_parameters == {"x": "1"}

    @pytest.mark.parametrize("current_path", ["", None])
    def test_empty_current_path_raises(self, current_path):
        info = RequestInformation()
        with pytest.raises(InvalidArgumentError):
            info.set_uri(current_path, "/segment", True)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            RequestInformation().set_uri("", "", True)

    def test_existing_parameters_are_overwritten_not_removed(self):
        info = RequestInformation()
        info.query_parameters["x"] = "0"
        info.query_parameters["keep"] = "yes"

        info.set_uri("https://a.com/b?x=1", "", True)

        assert info.query_parameters == {"x": "1", "keep": "yes"}

    def test_parameter_names_are_case_insensitive(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?Top=1&top=2", "", True)

        assert len(info.query_parameters) == 1
        assert info.query_parameters["TOP"] == "2"

    def test_failed_parse_leaves_request_untouched(self):
        info = RequestInformation()
        info.set_uri("https://a.com/b?x=1", "", True)

        with pytest.raises(MalformedUriError):
            info.set_uri("https://a.com:port/c?x=2&y=3", "", True)

        assert str(info.uri) == "https://a.com/b"
        assert info.query_parameters == {"x": "1"}

    def test_resolving_twice_is_idempotent(self):
        raw = "https://a.com/b?x=1&y=2&flag"
        info = RequestInformation()

        info.set_uri(raw, "", True)
        first_uri = info.uri
        first_params = dict(info.query_parameters.items())

        info.set_uri(raw, "", True)

        assert info.uri == first_uri
        assert dict(info.query_parameters.items()) == first_params
        assert len(info.query_parameters) == 3

    @given(
        params=st.dictionaries(
            keys=param_name_strategy,
            values=param_value_strategy,
            min_size=1,
            max_size=6
        )
    )
    @settings(max_examples=100)
    def test_every_parameter_of_a_raw_url_is_extracted(self, params: dict[str, str]):
        """
        Property: For any query string, every named token ends up in the
        query parameters with its value intact.
        """
        query = "&".join(f"{name}={value}" for name, value in params.items())

        info = RequestInformation()
        info.set_uri("https://api.example.com/items?" + query, "", True)

        assert str(info.uri) == "https://api.example.com/items"
        assert info.query_parameters == params
