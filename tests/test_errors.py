"""
Tests for the error handling module.
"""

import logging

import pytest

import undoredo.constants as const
from undoredo.errors import (
    ErrorCategory,
    ErrorSeverity,
    IllegalStateError,
    InvalidArgumentError,
    UndoRedoException,
    handle_errors,
)


@pytest.fixture
def mock_publisher(mocker):
    return mocker.patch("undoredo.errors.Publisher")


class TestExceptions:
    def test_base_exception_defaults(self):
        exc = UndoRedoException("something broke")
        assert exc.message == "something broke"
        assert str(exc) == "something broke"
        assert exc.category == ErrorCategory.GENERAL
        assert exc.severity == ErrorSeverity.ERROR
        assert exc.details == {}
        assert exc.timestamp is not None

    def test_original_exception_traceback_is_kept(self):
        try:
            raise KeyError("missing")
        except KeyError as e:
            exc = UndoRedoException("wrapped", original_exception=e)
        assert exc.original_exception is not None
        assert "KeyError" in exc.details["original_traceback"]

    def test_illegal_state_error(self):
        exc = IllegalStateError(const.CANT_UNDO, details={"operation": "undo"})
        assert isinstance(exc, UndoRedoException)
        assert isinstance(exc, RuntimeError)
        assert exc.category == ErrorCategory.HISTORY
        assert exc.severity == ErrorSeverity.WARNING
        assert exc.details == {"operation": "undo"}

    def test_invalid_argument_error(self):
        exc = InvalidArgumentError("bad limit", category=ErrorCategory.CONFIGURATION)
        assert isinstance(exc, ValueError)
        assert exc.category == ErrorCategory.CONFIGURATION
        assert exc.severity == ErrorSeverity.ERROR

    def test_enum_members_are_unique(self):
        assert len({m.value for m in ErrorCategory}) == len(ErrorCategory)
        assert len({m.value for m in ErrorSeverity}) == len(ErrorSeverity)


class TestHandleErrors:
    def test_returns_value_when_no_error(self, mock_publisher):
        @handle_errors()
        def ok():
            return 42

        assert ok() == 42
        mock_publisher.sendMessage.assert_not_called()

    def test_reraises_same_exception_by_default(self, mock_publisher):
        error = IllegalStateError(const.CANT_UNDO)

        @handle_errors("Undo failed")
        def fail():
            raise error

        with pytest.raises(IllegalStateError) as exc_info:
            fail()
        assert exc_info.value is error
        mock_publisher.sendMessage.assert_called_once_with(const.ERROR_OCCURRED, error=error)

    def test_swallows_when_not_reraising(self, mock_publisher, caplog):
        @handle_errors("Undo failed", reraise=False)
        def fail():
            raise IllegalStateError(const.CANT_UNDO)

        with caplog.at_level(logging.DEBUG, logger="undoredo"):
            assert fail() is None

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "Undo failed" in record.getMessage()
        assert const.CANT_UNDO in record.getMessage()

    def test_wraps_foreign_exceptions(self, mock_publisher):
        @handle_errors(reraise=False, expected_exceptions=(IndexError,))
        def fail():
            raise IndexError("out of range")

        assert fail() is None
        error = mock_publisher.sendMessage.call_args.kwargs["error"]
        assert isinstance(error, UndoRedoException)
        assert error.message == "out of range"
        assert error.details["exception_type"] == "IndexError"
        assert isinstance(error.original_exception, IndexError)

    def test_unexpected_exceptions_pass_through(self, mock_publisher):
        @handle_errors(reraise=False)
        def fail():
            raise KeyError("not handled")

        with pytest.raises(KeyError):
            fail()
        mock_publisher.sendMessage.assert_not_called()

    def test_explicit_severity_and_no_logging(self, mock_publisher, caplog):
        @handle_errors(reraise=False, log_error=False)
        def quiet():
            raise InvalidArgumentError("bad")

        @handle_errors(reraise=False, severity=ErrorSeverity.CRITICAL)
        def loud():
            raise InvalidArgumentError("bad")

        with caplog.at_level(logging.DEBUG, logger="undoredo"):
            quiet()
            assert caplog.records == []
            loud()
        assert caplog.records[-1].levelno == logging.CRITICAL

    def test_keeps_function_metadata(self):
        @handle_errors()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
