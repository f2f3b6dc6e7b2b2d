"""
Tests for ErrorLogger and the default error logger.
"""

import io
import logging
import unittest
from unittest.mock import patch

from commandchain import Command, ErrorLogger, DefaultErrorLogger, DEFAULT_ERROR_LOGGER
from commandchain import error_logger as error_logger_module


class ReserveStock(Command):
    def execute(self, context):
        pass


class UnprintableContext:
    def __str__(self):
        raise RuntimeError("cannot format context")


class TestErrorLogger(unittest.TestCase):

    def test_log_error_must_be_implemented(self):
        with self.assertRaises(NotImplementedError):
            ErrorLogger().log_error('execute', ReserveStock(), {}, ValueError())


class TestDefaultErrorLogger(unittest.TestCase):

    def test_default_instance(self):
        self.assertIsInstance(DEFAULT_ERROR_LOGGER, DefaultErrorLogger)

    def test_logs_phase_command_and_context(self):
        """Test the message format and the attached error."""
        error = ValueError("out of stock")

        with self.assertLogs('commandchain.error_logger', level='ERROR') as cm:
            DEFAULT_ERROR_LOGGER.log_error('execute', ReserveStock(), {'sku': 'W-1'}, error)

        self.assertEqual(len(cm.records), 1)
        record = cm.records[0]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertEqual(record.getMessage(), "Error in execute(ReserveStock, {'sku': 'W-1'})")
        self.assertIs(record.exc_info[1], error)

    def test_nothing_logged_when_level_disabled(self):
        with patch.object(error_logger_module.logger, 'isEnabledFor', return_value=False), \
                patch.object(error_logger_module.logger, 'error') as error:
            DEFAULT_ERROR_LOGGER.log_error('execute', ReserveStock(), {}, ValueError())

        error.assert_not_called()

    def test_never_raises_on_unprintable_context(self):
        """Test handler formatting failures stay inside logging."""
        logger = error_logger_module.logger
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        old_level, old_propagate = logger.level, logger.propagate
        logger.addHandler(handler)
        logger.setLevel(logging.ERROR)
        logger.propagate = False
        try:
            with patch.object(logging, 'raiseExceptions', False):
                DEFAULT_ERROR_LOGGER.log_error('commandStarted', ReserveStock(),
                                               UnprintableContext(), ValueError())
        finally:
            logger.removeHandler(handler)
            logger.setLevel(old_level)
            logger.propagate = old_propagate

        self.assertEqual(stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
