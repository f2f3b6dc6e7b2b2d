"""
CommandChain - Ordered command execution with notification and compensation

CommandChain runs an ordered sequence of stateless commands against a shared,
caller-owned context:
- Commands are discrete units of work with an optional revert step
- Chains are commands made of commands, so they nest
- Listeners are notified before and after each command
- Error loggers receive every error caught along the way

The first failing command stops the chain, is reverted, and its error is
re-raised to the caller.

Example:
    from commandchain import Command, SimpleChain

    class Double(Command):
        def execute(self, context):
            context['output'] = context['input'] * 2

        def revert(self, context):
            context.pop('output', None)

    chain = SimpleChain([Double()])

    context = {'input': 5}
    chain.execute(context)
    print(context['output'])  # 10
"""

__version__ = "1.0.0"
__author__ = "CommandChain Contributors"

from .chain import (
    Chain,
    SimpleChain,
    PHASE_COMMAND_STARTED,
    PHASE_EXECUTE,
    PHASE_COMMAND_FINISHED,
    PHASE_REVERT,
)
from .command import Command, FunctionCommand
from .error_logger import ErrorLogger, DefaultErrorLogger, DEFAULT_ERROR_LOGGER
from .exceptions import CommandError
from .listener import CommandListener, LoggingListener

__all__ = [
    'Chain',
    'SimpleChain',
    'Command',
    'FunctionCommand',
    'CommandListener',
    'LoggingListener',
    'ErrorLogger',
    'DefaultErrorLogger',
    'DEFAULT_ERROR_LOGGER',
    'CommandError',
    'PHASE_COMMAND_STARTED',
    'PHASE_EXECUTE',
    'PHASE_COMMAND_FINISHED',
    'PHASE_REVERT',
]
