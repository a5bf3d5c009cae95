# SPDX-License-Identifier: MIT
"""Unit tests for utility functions."""

import httpx
import pytest
from openai import APIConnectionError, BadRequestError

from sora_video_mcp.utils import (
    api_error_details,
    api_error_message,
    format_megabytes,
    format_timestamp,
    format_warnings,
    parse_size,
    size_to_params,
)


def _bad_request(body):
    request = httpx.Request("POST", "https://api.openai.com/v1/videos")
    response = httpx.Response(400, request=request)
    return BadRequestError("Error code: 400", response=response, body=body)


@pytest.mark.unit
class TestParseSize:
    def test_basic(self):
        assert parse_size("1920x1080") == (1920, 1080)

    def test_uppercase_separator(self):
        assert parse_size("720X1280") == (720, 1280)

    @pytest.mark.parametrize("bad", ["", "1920", "1920x", "axb", "1920x1080x3", "-1x100"])
    def test_invalid(self, bad):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size(bad)


@pytest.mark.unit
class TestSizeToParams:
    def test_landscape(self):
        assert size_to_params("1920x1080") == {"width": 1920, "height": 1080}

    def test_portrait_longer_edge_as_width(self):
        assert size_to_params("720x1280") == {"width": 1280, "height": 720}


@pytest.mark.unit
class TestFormatting:
    def test_megabytes(self):
        assert format_megabytes(1024 * 1024 * 3 // 2) == "1.50 MB"

    def test_timestamp(self):
        assert format_timestamp(1234567890) == "2009-02-13T23:31:30+00:00"

    def test_timestamp_none(self):
        assert format_timestamp(None) is None

    def test_warnings_empty(self):
        assert format_warnings(None) == ""
        assert format_warnings([]) == ""

    def test_warnings_listed(self):
        assert format_warnings(["one", "two"]) == "\n\nPrompt warnings:\n- one\n- two"


@pytest.mark.unit
class TestApiErrors:
    def test_message_from_body(self):
        exc = _bad_request({"message": "Invalid size", "type": "invalid_request_error"})

        assert api_error_message(exc) == "Invalid size"

    def test_message_from_nested_error(self):
        exc = _bad_request({"error": {"message": "Nested problem"}})

        assert api_error_message(exc) == "Nested problem"

    def test_message_falls_back_to_exception(self):
        exc = _bad_request(None)

        assert api_error_message(exc) == "Error code: 400"

    def test_details_dump(self):
        exc = _bad_request({"message": "Invalid size"})

        assert '"message": "Invalid size"' in api_error_details(exc)

    def test_connection_error_has_no_details(self):
        exc = APIConnectionError(request=httpx.Request("GET", "https://api.openai.com/v1/videos"))

        assert api_error_details(exc) == ""
        assert api_error_message(exc) == "Connection error."
