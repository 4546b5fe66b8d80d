"""
Error handling utilities for LazyKeys.

Provides the log-then-raise pattern used by the loading layers so that
every surfaced failure also lands in the debug log.
"""

import logging
from typing import Optional, Type

logger = logging.getLogger('LazyKeys.ErrorHandler')


class ErrorHandlerUtil:
    """
    Utility class for standardized error handling patterns.

    Keeps logging and exception chaining consistent across components.
    """

    @staticmethod
    def log_and_raise(
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None,
        log_level: int = logging.ERROR
    ) -> None:
        """
        Log an error message and raise an exception.

        Args:
            message: Error message to log and include in exception
            exception_class: Type of exception to raise (default: RuntimeError)
            logger_instance: Logger to use (default: module logger)
            cause: Original exception to chain from (using 'from cause')
            log_level: Logging level to use (default: ERROR)

        Raises:
            The specified exception_class with the provided message
        """
        log_instance = logger_instance or logger
        log_instance.log(log_level, message)

        if cause:
            raise exception_class(message) from cause
        else:
            raise exception_class(message)

    @staticmethod
    def log_and_raise_operation_error(
        operation_name: str,
        details: str = "",
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None
    ) -> None:
        """
        Standard pattern for operation failures.

        Args:
            operation_name: Name of the operation that failed
            details: Additional details about the failure
            exception_class: Type of exception to raise
            logger_instance: Logger to use (default: module logger)
            cause: Original exception to chain from
        """
        message = f"{operation_name} failed"
        if details:
            message += f": {details}"

        ErrorHandlerUtil.log_and_raise(
            message=message,
            exception_class=exception_class,
            logger_instance=logger_instance,
            cause=cause
        )

    @staticmethod
    def create_error_context(
        component_name: str,
        logger_name: Optional[str] = None
    ) -> 'ErrorContext':
        """
        Create an error context for a specific component.

        Args:
            component_name: Name of the component
            logger_name: Logger name to use (default: LazyKeys.{component_name})

        Returns:
            ErrorContext instance for the component
        """
        if logger_name is None:
            logger_name = f'LazyKeys.{component_name}'

        component_logger = logging.getLogger(logger_name)
        return ErrorContext(component_name, component_logger)


class ErrorContext:
    """
    Context object for component-specific error handling.

    Carries a pre-configured logger and component name so call sites
    only pass the message and exception details.
    """

    def __init__(self, component_name: str, logger_instance: logging.Logger):
        self.component_name = component_name
        self.logger = logger_instance

    def log_and_raise(
        self,
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> None:
        """Log error and raise exception with component context."""
        ErrorHandlerUtil.log_and_raise(
            message=message,
            exception_class=exception_class,
            logger_instance=self.logger,
            cause=cause
        )

    def log_and_raise_operation_error(
        self,
        operation_name: str,
        details: str = "",
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> None:
        """Log operation error for this component."""
        ErrorHandlerUtil.log_and_raise_operation_error(
            operation_name=operation_name,
            details=details,
            exception_class=exception_class,
            logger_instance=self.logger,
            cause=cause
        )
