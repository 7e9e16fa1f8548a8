"""Tests for header redaction."""

from httpy._internal.redaction import REDACTED_VALUE, redact_headers


class TestRedactHeaders:
    """Tests for redact_headers()."""

    def test_redacts_authorization(self):
        """Should redact Authorization values."""
        result = redact_headers({"Authorization": ["Bearer abc"]})
        assert result == {"Authorization": [REDACTED_VALUE]}

    def test_case_insensitive(self):
        """Should match header names case-insensitively."""
        result = redact_headers({"COOKIE": ["a=1"], "x-API-key": ["k"]})
        assert result == {"COOKIE": [REDACTED_VALUE], "x-API-key": [REDACTED_VALUE]}

    def test_keeps_one_marker_per_value(self):
        """Should keep the number of values visible."""
        result = redact_headers({"Set-Cookie": ["a=1", "b=2"]})
        assert result == {"Set-Cookie": [REDACTED_VALUE, REDACTED_VALUE]}

    def test_leaves_other_headers(self):
        """Should copy non-sensitive headers unchanged."""
        result = redact_headers({"Accept": ["application/json"], "foo": ["bar", "foobar"]})
        assert result == {"Accept": ["application/json"], "foo": ["bar", "foobar"]}

    def test_does_not_mutate_input(self):
        """Should never modify the original mapping."""
        headers = {"Authorization": ["Basic xyz"], "foo": ["bar"]}
        result = redact_headers(headers)

        assert headers == {"Authorization": ["Basic xyz"], "foo": ["bar"]}
        result["foo"].append("baz")
        assert headers["foo"] == ["bar"]

    def test_empty(self):
        """Should handle an empty mapping."""
        assert redact_headers({}) == {}
