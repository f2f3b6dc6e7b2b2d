"""
ErrorLogger - Receives every error caught while a chain runs.
"""

import logging

logger = logging.getLogger(__name__)


class ErrorLogger:
    """
    Base class for error loggers.

    A chain hands its error logger the errors raised by commands, listeners
    and reverts, tagged with the phase in which they happened.
    """

    def log_error(self, phase, command, context, error):
        """
        Record an error.

        Args:
            phase: Where the error happened ('execute', 'commandStarted',
                'commandFinished' or 'revert')
            command: The command being processed
            context: The context passed to the chain
            error: The exception that was raised

        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement log_error()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class DefaultErrorLogger(ErrorLogger):
    """
    Error logger used by chains that are not given one.

    Writes 'Error in <phase>(<command>, <context>)' at ERROR level with the
    traceback attached. Formatting is left to the logging handlers, which
    report their own failures through Handler.handleError instead of raising.
    """

    def log_error(self, phase, command, context, error):
        if logger.isEnabledFor(logging.ERROR):
            logger.error("Error in %s(%s, %s)", phase, command, context, exc_info=error)


DEFAULT_ERROR_LOGGER = DefaultErrorLogger()
