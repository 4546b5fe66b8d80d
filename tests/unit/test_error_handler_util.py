#!/usr/bin/env python3
"""
Unit tests for ErrorHandlerUtil class.

Tests the log-then-raise pattern, logging integration and exception
chaining used by the loading layers of LazyKeys.
"""

import pytest
import logging
from unittest.mock import Mock, patch

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from lazykeys.error_handler_util import ErrorHandlerUtil, ErrorContext
from lazykeys.catalog import CatalogError


@pytest.fixture
def mock_logger():
    """Create mock logger for testing."""
    return Mock(spec=logging.Logger)


def test_log_and_raise_basic_functionality(mock_logger):
    """Test basic log_and_raise functionality."""
    with pytest.raises(RuntimeError, match="Test error message"):
        ErrorHandlerUtil.log_and_raise(
            message="Test error message",
            logger_instance=mock_logger
        )

    mock_logger.log.assert_called_once_with(logging.ERROR, "Test error message")


def test_log_and_raise_custom_exception_class(mock_logger):
    """Test log_and_raise with custom exception class."""
    with pytest.raises(CatalogError, match="Bad catalog"):
        ErrorHandlerUtil.log_and_raise(
            message="Bad catalog",
            exception_class=CatalogError,
            logger_instance=mock_logger
        )

    mock_logger.log.assert_called_once_with(logging.ERROR, "Bad catalog")


def test_log_and_raise_with_cause(mock_logger):
    """Test log_and_raise with exception chaining."""
    original_error = ValueError("Original error")

    with pytest.raises(RuntimeError, match="Chained error") as exc_info:
        ErrorHandlerUtil.log_and_raise(
            message="Chained error",
            logger_instance=mock_logger,
            cause=original_error
        )

    assert exc_info.value.__cause__ is original_error


def test_log_and_raise_custom_log_level(mock_logger):
    """Test log_and_raise with custom log level."""
    with pytest.raises(RuntimeError):
        ErrorHandlerUtil.log_and_raise(
            message="Warning level error",
            logger_instance=mock_logger,
            log_level=logging.WARNING
        )

    mock_logger.log.assert_called_once_with(logging.WARNING, "Warning level error")


def test_log_and_raise_default_logger():
    """Test log_and_raise uses default logger when none provided."""
    with patch('lazykeys.error_handler_util.logger') as mock_default_logger:
        with pytest.raises(RuntimeError):
            ErrorHandlerUtil.log_and_raise("Default logger test")

        mock_default_logger.log.assert_called_once_with(logging.ERROR, "Default logger test")


def test_log_and_raise_operation_error(mock_logger):
    """Test log_and_raise_operation_error convenience method."""
    with pytest.raises(RuntimeError, match="^Loading catalog failed$"):
        ErrorHandlerUtil.log_and_raise_operation_error(
            operation_name="Loading catalog",
            logger_instance=mock_logger
        )

    mock_logger.log.assert_called_once_with(logging.ERROR, "Loading catalog failed")


def test_log_and_raise_operation_error_with_details(mock_logger):
    """Test operation error with details."""
    with pytest.raises(RuntimeError, match="Loading catalog failed: permission denied"):
        ErrorHandlerUtil.log_and_raise_operation_error(
            operation_name="Loading catalog",
            details="permission denied",
            logger_instance=mock_logger
        )

    mock_logger.log.assert_called_once_with(logging.ERROR, "Loading catalog failed: permission denied")


def test_create_error_context():
    """Test error context uses a component logger under LazyKeys."""
    context = ErrorHandlerUtil.create_error_context("Catalog")

    assert isinstance(context, ErrorContext)
    assert context.component_name == "Catalog"
    assert context.logger.name == "LazyKeys.Catalog"


def test_create_error_context_custom_logger_name():
    context = ErrorHandlerUtil.create_error_context("Catalog", logger_name="Custom.Logger")
    assert context.logger.name == "Custom.Logger"


def test_error_context_log_and_raise(mock_logger):
    """Test ErrorContext delegates with its own logger."""
    context = ErrorContext("Catalog", mock_logger)
    cause = OSError("disk")

    with pytest.raises(CatalogError) as exc_info:
        context.log_and_raise("Context error", CatalogError, cause=cause)

    assert exc_info.value.__cause__ is cause
    mock_logger.log.assert_called_once_with(logging.ERROR, "Context error")


def test_error_context_operation_error(mock_logger):
    context = ErrorContext("Catalog", mock_logger)

    with pytest.raises(ValueError, match="Parsing failed: bad input"):
        context.log_and_raise_operation_error("Parsing", "bad input", ValueError)

    mock_logger.log.assert_called_once_with(logging.ERROR, "Parsing failed: bad input")
