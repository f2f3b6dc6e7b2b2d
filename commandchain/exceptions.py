"""
Exceptions raised by commands in a command chain.
"""


class CommandError(Exception):
    """
    Base exception for a failed command execution.

    Commands are free to raise any exception; this one only gives them a
    common type to raise and callers a common type to catch.
    """

    def __init__(self, message, command=None):
        """
        Initialize a CommandError.

        Args:
            message: Description of what went wrong
            command: Optional command that failed
        """
        super().__init__(message)
        self.command = command
