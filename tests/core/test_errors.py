"""Tests for error types and codes."""

from collections.abc import Generator
from contextlib import contextmanager

import pytest

from routeindex.core.errors import (
    ConfigError,
    ContentError,
    ErrorCode,
    InternalError,
    RouteIndexError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.CONTENT_MALFORMED_ITEM, 3000),
            (ErrorCode.CONTENT_MALFORMED_CONTAINER, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestRouteIndexError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = RouteIndexError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = RouteIndexError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        assert str(error) == "[9001] INTERNAL_ERROR: Something broke"

    def test_error_is_raisable(self) -> None:
        with pytest.raises(RouteIndexError):
            raise InternalError.unexpected("boom", where="test")

    def test_given_context_manager_when_error_raised_inside_then_propagates_unchanged(
        self,
    ) -> None:
        """Errors keep their type when unwinding through a @contextmanager."""

        @contextmanager
        def scope() -> Generator[None, None, None]:
            yield

        # When
        with pytest.raises(ContentError) as exc_info, scope():
            raise ContentError.malformed_item("bad")

        # Then
        assert exc_info.value.code == ErrorCode.CONTENT_MALFORMED_ITEM
        assert exc_info.value.__traceback__ is not None


class TestFactories:
    """Factory method tests."""

    def test_config_parse_error(self) -> None:
        error = ConfigError.parse_error("/etc/r.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/etc/r.yaml", "reason": "bad indent"}
        assert "/etc/r.yaml" in error.message

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("index.db_path", 5, "not a string")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "5"

    def test_content_malformed_container(self) -> None:
        error = ContentError.malformed_container("BagPart.ContentItems", "expected a list")

        assert error.code == ErrorCode.CONTENT_MALFORMED_CONTAINER
        assert error.error_name == "CONTENT_MALFORMED_CONTAINER"
        assert error.details["locator"] == "BagPart.ContentItems"
        assert error.retryable is False

    def test_content_missing_identifier(self) -> None:
        error = ContentError.missing_identifier("FlowPart.Widgets[2]")

        assert error.code == ErrorCode.CONTENT_MISSING_IDENTIFIER
        assert "FlowPart.Widgets[2]" in str(error)

    def test_internal_unexpected_keeps_details(self) -> None:
        error = InternalError.unexpected("oops", item="x")

        assert error.details == {"item": "x"}
