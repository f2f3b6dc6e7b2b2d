"""
SimpleChain - Runs an ordered sequence of commands against a shared context.
"""

from .command import Command
from .error_logger import DEFAULT_ERROR_LOGGER

PHASE_COMMAND_STARTED = "commandStarted"
PHASE_EXECUTE = "execute"
PHASE_COMMAND_FINISHED = "commandFinished"
PHASE_REVERT = "revert"


class Chain(Command):
    """
    A command made of zero or more sub-commands run in order.

    Since a chain is itself a command, chains can be nested inside other chains.
    """


class SimpleChain(Chain):
    """
    Executes its commands one after another on the caller's thread.

    For each command the chain:
    - Notifies the listener that the command started
    - Executes the command
    - Notifies the listener that the command finished (always)
    - Reverts the command if it failed, then re-raises its error

    Listener and revert errors go to the error logger and are swallowed.
    The first command error stops the chain and reaches the caller unchanged.
    """

    def __init__(self, commands=None, listener=None, error_logger=None):
        """
        Initialize a SimpleChain.

        Args:
            commands: Ordered iterable of commands (default: no commands)
            listener: Optional CommandListener notified around each command
            error_logger: ErrorLogger receiving caught errors
                (default: DEFAULT_ERROR_LOGGER)
        """
        self._commands = tuple(commands) if commands is not None else ()
        self._listener = listener
        self._error_logger = error_logger if error_logger is not None else DEFAULT_ERROR_LOGGER

    @property
    def commands(self):
        """The commands of this chain, in execution order."""
        return self._commands

    @property
    def listener(self):
        return self._listener

    @property
    def error_logger(self):
        return self._error_logger

    def execute(self, context):
        """
        Execute all commands of the chain in order.

        Args:
            context: Caller-supplied object passed to every command

        Raises:
            Exception: The error of the first failing command, after it was reverted
        """
        for command in self._commands:
            self._execute_command(command, context)

    def _execute_command(self, command, context):
        self._notify_command_started(command, context)

        error_in_command = None
        try:
            command.execute(context)
        except Exception as e:
            error_in_command = e
            self._log_error(PHASE_EXECUTE, command, context, e)
            raise
        finally:
            self._notify_command_finished(command, context, error_in_command)
            if error_in_command is not None:
                self._revert_command(command, context)

    def _notify_command_started(self, command, context):
        if self._listener is None:
            return
        try:
            self._listener.command_started(command, context)
        except Exception as error_in_listener:
            self._log_error(PHASE_COMMAND_STARTED, command, context, error_in_listener)

    def _notify_command_finished(self, command, context, error_in_command):
        if self._listener is None:
            return
        try:
            self._listener.command_finished(command, context, error_in_command)
        except Exception as error_in_listener:
            self._log_error(PHASE_COMMAND_FINISHED, command, context, error_in_listener)

    def _revert_command(self, command, context):
        # Objects without revert() get the no-op revert of Command.
        revert = getattr(command, 'revert', None)
        if revert is None:
            return
        try:
            revert(context)
        except Exception as error_in_revert:
            self._log_error(PHASE_REVERT, command, context, error_in_revert)

    def _log_error(self, phase, command, context, error):
        self._error_logger.log_error(phase, command, context, error)

    def command_count(self):
        """Return the number of commands in the chain."""
        return len(self._commands)

    def __repr__(self):
        return (f"SimpleChain(commands={len(self._commands)}, "
                f"listener={self._listener!r}, "
                f"error_logger={self._error_logger!r})")
