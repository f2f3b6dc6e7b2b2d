"""
Command - Base class for stateless units of work run by a chain.
"""


class Command:
    """
    Base class for commands in a command chain.
    Each command represents a discrete unit of work on a shared context.

    Commands should be stateless - all state flows through the context.
    """

    def execute(self, context):
        """
        Execute the command logic.

        Args:
            context: Caller-supplied object shared by every command of a run

        Raises:
            Exception: Any error raised here is a command failure
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    def revert(self, context):
        """
        Undo the partial effects of a failed execute().

        Only called when execute() raised. The default does nothing.

        Args:
            context: The same context that was passed to execute()
        """

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class FunctionCommand(Command):
    """
    Command built from plain callables.

    Example:
        def reserve(context):
            context['reserved'] = True

        def release(context):
            context.pop('reserved', None)

        step = FunctionCommand(reserve, revert=release)
    """

    def __init__(self, execute, revert=None, name=None):
        """
        Initialize a FunctionCommand.

        Args:
            execute: Callable taking the context, run by execute()
            revert: Optional callable taking the context, run by revert()
            name: Display name (default: the execute callable's __name__)
        """
        if not callable(execute):
            raise TypeError(f"execute must be callable, got {execute!r}")
        if revert is not None and not callable(revert):
            raise TypeError(f"revert must be callable, got {revert!r}")
        self._execute = execute
        self._revert = revert
        self._name = name or getattr(execute, '__name__', execute.__class__.__name__)

    @property
    def name(self):
        return self._name

    def execute(self, context):
        self._execute(context)

    def revert(self, context):
        if self._revert is not None:
            self._revert(context)

    def __repr__(self):
        return f"FunctionCommand({self._name!r})"

    def __str__(self):
        return self._name
