"""
CommandListener - Observers notified around each command executed by a chain.
"""

import logging


class CommandListener:
    """
    Base class for listeners notified before and after each command.

    Both hooks do nothing by default, so subclasses override only what they need.
    Errors raised by a listener are sent to the chain's error logger and never
    interrupt the chain.
    """

    def command_started(self, command, context):
        """
        Called before a command executes.

        Args:
            command: The command about to execute
            context: The context passed to the chain
        """

    def command_finished(self, command, context, error):
        """
        Called after a command executed, whether it succeeded or not.

        Args:
            command: The command that executed
            context: The context passed to the chain
            error: The exception raised by the command, or None on success
        """

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class LoggingListener(CommandListener):
    """
    Listener that reports command lifecycle through the logging module.
    """

    def __init__(self, logger=None):
        """
        Initialize the LoggingListener.

        Args:
            logger: logging.Logger to write to (default: 'commandchain.listener')
        """
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def command_started(self, command, context):
        self.logger.debug("Starting %s", command)

    def command_finished(self, command, context, error):
        if error is None:
            self.logger.debug("Finished %s", command)
        else:
            self.logger.warning("Failed %s: %s", command, error)
