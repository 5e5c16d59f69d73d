"""Unit tests for bearer token extraction."""

import pytest

from forum.interface.api.auth import bearer_token


class TestBearerToken:
    """Tests for bearer_token."""

    def test_extracts_token(self):
        assert bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert bearer_token("bearer abc") == "abc"

    @pytest.mark.parametrize(
        "header", [None, "", "Bearer", "Bearer   ", "Basic dXNlcjpwYXNz", "abc"]
    )
    def test_rejects_missing_or_foreign_headers(self, header):
        assert bearer_token(header) is None
