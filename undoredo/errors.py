# --------------------------------------------------------------------------
# Software:     UndoRedo - Historico de acoes reversiveis (desfazer/refazer)
# Copyright:    (C) 2022  UndoRedo developers
# License:      GNU - GPL 3 (LICENSE.txt)
# --------------------------------------------------------------------------
#    Este programa e software livre; voce pode redistribui-lo e/ou
#    modifica-lo sob os termos da Licenca Publica Geral GNU, conforme
#    publicada pela Free Software Foundation; de acordo com a versao 3
#    da Licenca, ou (a seu criterio) qualquer versao posterior.
#
#    Este programa eh distribuido na expectativa de ser util, mas SEM
#    QUALQUER GARANTIA; sem mesmo a garantia implicita de
#    COMERCIALIZACAO ou de ADEQUACAO A QUALQUER PROPOSITO EM
#    PARTICULAR. Consulte a Licenca Publica Geral GNU para obter mais
#    detalhes.
# --------------------------------------------------------------------------

"""
Error handling for the undo/redo history.

This module provides:
- Error categories and severity levels
- The exception classes raised by commands, transactions and histories
- A decorator that logs and broadcasts errors for interactive front ends

Library code never catches its own errors: an ``IllegalStateError`` raised by
``undo()`` or ``redo()`` reaches the caller untouched, and the history is left
exactly as it was before the call.
"""

import functools
import logging
import traceback
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional, Tuple, Type

import undoredo.constants as const
from undoredo.pubsub import pub as Publisher

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Enum for categorizing undo/redo errors."""
    GENERAL = auto()
    HISTORY = auto()
    TRANSACTION = auto()
    CONFIGURATION = auto()


class ErrorSeverity(Enum):
    """Enum for error severity levels."""
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()


_LOG_LEVELS = {
    ErrorSeverity.DEBUG: logging.DEBUG,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class UndoRedoException(Exception):
    """Base exception class for all undoredo exceptions."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.GENERAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now()

        if original_exception:
            self.details["original_traceback"] = "".join(
                traceback.format_exception(
                    type(original_exception),
                    original_exception,
                    original_exception.__traceback__,
                )
            )

        super().__init__(message)


class IllegalStateError(UndoRedoException, RuntimeError):
    """Raised by undo()/redo() when the operation is not available."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.HISTORY,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            category=category,
            severity=ErrorSeverity.WARNING,
            details=details,
        )


class InvalidArgumentError(UndoRedoException, ValueError):
    """Raised for invalid constructor or method arguments."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.GENERAL,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            category=category,
            severity=ErrorSeverity.ERROR,
            details=details,
        )


def _report_error(
    e: Exception,
    func: Callable,
    error_message: str,
    log_error: bool,
    severity: Optional[ErrorSeverity],
) -> None:
    if isinstance(e, UndoRedoException):
        exc = e
    else:
        exc = UndoRedoException(
            str(e),
            details={
                "function": func.__qualname__,
                "exception_type": type(e).__name__,
            },
            original_exception=e,
        )

    level = severity or exc.severity
    if log_error:
        logger.log(
            _LOG_LEVELS[level],
            f"{error_message} in {func.__module__}.{func.__qualname__}: {exc.message}",
        )

    Publisher.sendMessage(const.ERROR_OCCURRED, error=exc)


def handle_errors(
    error_message: str = "An error occurred",
    log_error: bool = True,
    reraise: bool = True,
    expected_exceptions: Tuple[Type[Exception], ...] = (UndoRedoException,),
    severity: Optional[ErrorSeverity] = None,
):
    """
    Decorator for handling errors in front-end functions.

    The error is logged, broadcast on the ``const.ERROR_OCCURRED`` topic with
    ``error=<UndoRedoException>`` and then re-raised unchanged, or swallowed
    when ``reraise`` is False (the wrapped call then returns None).

    Parameters:
        error_message (str): Prefix of the logged message.
        log_error (bool): Whether to log the error.
        reraise (bool): Whether to reraise the exception after handling.
        expected_exceptions (tuple): The exceptions to catch.
        severity (ErrorSeverity): Log level; defaults to the severity carried
            by the exception, or ERROR for foreign exceptions.

    Returns:
        The decorated function.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except expected_exceptions as e:
                _report_error(e, func, error_message, log_error, severity)
                if reraise:
                    raise
                return None

        return wrapper

    return decorator
