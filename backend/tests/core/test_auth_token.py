"""Tests for bearer token parsing and comparison."""
import pytest

from core.auth import extract_bearer_token, is_valid_token
from core.errors import BookmarkNotFoundError, BookmarkValidationError, UnauthorizedError


class TestExtractBearerToken:
    """Tests for extract_bearer_token."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc123", "abc123"),
            ("bearer abc123", "abc123"),
            ("Bearer   abc123  ", "abc123"),
            ("Bearer", None),
            ("Bearer ", None),
            ("Basic abc123", None),
            ("abc123", None),
            ("", None),
            (None, None),
        ],
    )
    def test__extract_bearer_token(self, header: str | None, expected: str | None) -> None:
        assert extract_bearer_token(header) == expected


class TestIsValidToken:
    """Tests for is_valid_token."""

    def test__is_valid_token__matching(self) -> None:
        assert is_valid_token("secret", "secret") is True

    def test__is_valid_token__mismatch(self) -> None:
        assert is_valid_token("secret", "other") is False

    def test__is_valid_token__missing_token(self) -> None:
        assert is_valid_token(None, "secret") is False

    def test__is_valid_token__unset_expected_never_matches(self) -> None:
        assert is_valid_token("", "") is False
        assert is_valid_token("anything", "") is False


class TestErrors:
    """Error types carry their HTTP mapping."""

    def test__validation_error__is_400(self) -> None:
        error = BookmarkValidationError("Not a valid URL.", field="url")
        assert error.status_code == 400
        assert error.field == "url"
        assert error.to_response() == {"error": {"message": "Not a valid URL."}}

    def test__not_found_error__is_404(self) -> None:
        error = BookmarkNotFoundError(42)
        assert error.status_code == 404
        assert error.bookmark_id == 42
        assert error.to_response() == {"error": {"message": "Bookmark not found"}}

    def test__unauthorized_error__is_indistinguishable_404(self) -> None:
        error = UnauthorizedError()
        assert error.status_code == 404
        assert error.to_response() == {"error": {"message": "Unauthorized request"}}
