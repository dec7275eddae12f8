"""
Spy Cat Agency console.
Error normalization tests - validates prettify and backend payload translation.
"""

import pytest

from spycats.core.errors import (
    prettify,
    get_api_error_message,
    INVALID_BREED_MESSAGE,
    UNKNOWN_ERROR
)


class TestPrettify:
    """Test single-message cleanup."""

    def test_strips_body_prefix(self):
        result = prettify("body.breed: invalid")
        assert not result.lower().startswith("body.")
        assert result == "Invalid breed. invalid"

    def test_replaces_underscores(self):
        assert prettify("years_of_experience must be positive") == "Years of experience must be positive"

    def test_body_prefix_is_case_insensitive(self):
        assert prettify("BODY.name: field required") == "Name: field required"

    def test_trims_and_collapses_whitespace(self):
        assert prettify("   name    is\n required  ") == "Name is required"

    @pytest.mark.parametrize("text", [
        "Input should be 'Persian' or 'Siamese' (type=enum)",
        "value is not a valid ENUM member",
        "body.breed: Enum validation failed for Sphinx",
    ])
    def test_enum_always_maps_to_invalid_breed(self, text):
        assert prettify(text) == INVALID_BREED_MESSAGE

    def test_invalid_breed_with_quotes(self):
        assert prettify("invalid breed: 'Sphinx'") == "Invalid breed: Sphinx. Please use a valid breed name."

    def test_invalid_breed_without_quotes(self):
        assert prettify("Invalid breed Sphinx") == "Invalid breed: Sphinx. Please use a valid breed name."

    def test_strips_value_error_marker(self):
        assert prettify("Value error, salary must be greater than 0") == "Salary must be greater than 0"

    def test_leading_breed_label(self):
        assert prettify("breed - not recognised") == "Invalid breed. not recognised"

    def test_capitalizes_first_letter(self):
        assert prettify("field required") == "Field required"

    def test_empty_string(self):
        assert prettify("   ") == ""

    @pytest.mark.parametrize("text", [
        "Name is required",
        "Field required",
        "Salary must be greater than 0",
        INVALID_BREED_MESSAGE,
        "Invalid breed: Sphinx. Please use a valid breed name.",
        "Invalid breed. invalid",
        "Name: field required; Salary: input should be greater than 0",
    ])
    def test_idempotent_on_clean_text(self, text):
        once = prettify(text)
        assert prettify(once) == once

    @pytest.mark.parametrize("text,expected", [
        ("body.body.name", "Name"),
        ("  body.  body.x", "X"),
        ("value error value error x", "X"),
        ("Value error, body.salary: must be positive", "Salary: must be positive"),
    ])
    def test_repeated_markers_fully_removed(self, text, expected):
        once = prettify(text)
        assert once == expected
        assert prettify(once) == once


class TestGetApiErrorMessage:
    """Test backend payload translation."""

    def test_detail_list_with_invalid_breed(self):
        data = {"detail": [{"loc": ["body", "breed"], "msg": "invalid breed: 'Sphinx'"}]}
        assert get_api_error_message(data) == "Invalid breed: Sphinx. Please use a valid breed name."

    def test_detail_list_joins_entries(self):
        data = {"detail": [
            {"loc": ["body", "name"], "msg": "field required"},
            {"loc": ["body", "salary"], "msg": "Input should be greater than 0"},
        ]}
        assert get_api_error_message(data) == "Name: field required; Salary: Input should be greater than 0"

    def test_detail_list_drops_non_string_location_segments(self):
        data = {"detail": [{"loc": ["body", 0, "name"], "msg": "too short"}]}
        assert get_api_error_message(data) == "Name: too short"

    def test_detail_list_without_location(self):
        data = {"detail": [{"msg": "something broke"}]}
        assert get_api_error_message(data) == "Something broke"

    def test_detail_list_uses_message_key(self):
        data = {"detail": [{"loc": [], "message": "bad_value"}]}
        assert get_api_error_message(data) == "Bad value"

    def test_detail_list_drops_empty_entries(self):
        data = {"detail": [{"msg": ""}, {"loc": [1], "msg": ""}, {"msg": "kept"}]}
        assert get_api_error_message(data) == "Kept"

    def test_detail_string(self):
        assert get_api_error_message({"detail": "Cat not found"}) == "Cat not found"

    def test_detail_object_with_message(self):
        assert get_api_error_message({"detail": {"message": "cat_has_mission"}}) == "Cat has mission"

    def test_top_level_message(self):
        assert get_api_error_message({"message": "server exploded"}) == "Server exploded"

    def test_plain_string(self):
        assert get_api_error_message("body.salary: must be positive") == "Salary: must be positive"

    def test_empty_payload(self):
        assert get_api_error_message(None) == UNKNOWN_ERROR
        assert get_api_error_message("") == UNKNOWN_ERROR

    def test_serializes_unknown_shape(self):
        assert get_api_error_message({"error": "nope"}) == '{"error":"nope"}'

    def test_unserializable_payload(self):
        assert get_api_error_message({"error": object()}) == UNKNOWN_ERROR

    def test_enum_in_detail_list(self):
        data = {"detail": [{"loc": ["body", "breed"], "msg": "Input should be a valid enum member"}]}
        assert get_api_error_message(data) == INVALID_BREED_MESSAGE
