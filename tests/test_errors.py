#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import io
import unittest
from unittest.mock import MagicMock

from cfgini.errors.base import ErrorHandler, ErrorHandlerChain
from cfgini.errors.exceptions import (ApplicationError,
                                      ConfigurationError,
                                      FileConfigurationError,
                                      IniError,
                                      FormatError,
                                      SectionMissingError,
                                      KeyMissingError,
                                      ProtectedSectionError)
from cfgini.errors.console_handler import ConsoleErrorHandler
from cfgini.errors.logger_handler import LoggerErrorHandler


class TestExceptions(unittest.TestCase):
    """Tests pour la hiérarchie d'exceptions."""

    def test_ini_errors_are_application_errors(self):
        for error in (FormatError(1, "?"), SectionMissingError("s"),
                      KeyMissingError("s", "k"), ProtectedSectionError()):
            self.assertIsInstance(error, IniError)
            self.assertIsInstance(error, ApplicationError)

    def test_file_configuration_error(self):
        self.assertTrue(issubclass(FileConfigurationError, ConfigurationError))

    def test_attributes(self):
        error = KeyMissingError("first", "nope")
        self.assertEqual(error.section, "first")
        self.assertEqual(error.key, "nope")
        self.assertIn("nope", str(error))
        self.assertEqual(SectionMissingError("LOL").section, "LOL")

    def test_lookup_errors(self):
        self.assertIsInstance(SectionMissingError("s"), LookupError)
        self.assertIsInstance(KeyMissingError("s", "k"), LookupError)


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.stream = io.StringIO()
        self.handler = ConsoleErrorHandler(stream=self.stream)

    def test_known_error_single_line(self):
        """Une erreur connue affiche son seul message."""
        self.handler.handle(SectionMissingError("LOL"))
        self.assertEqual(self.stream.getvalue(), "section inexistante : 'LOL'\n")

    def test_unknown_error(self):
        self.handler.handle(RuntimeError("boom"))
        self.assertEqual(
            self.stream.getvalue(), "Erreur inattendue: RuntimeError: boom\n"
        )

    def test_multiline_message_is_joined(self):
        self.handler.handle(ConfigurationError("ligne 1\nligne 2"))
        self.assertEqual(self.stream.getvalue(), "ligne 1 ligne 2\n")

    def test_custom_base_error_type(self):
        handler = ConsoleErrorHandler(IniError, stream=self.stream)
        handler.handle(ConfigurationError("hors INI"))
        self.assertTrue(self.stream.getvalue().startswith("Erreur inattendue"))


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock()
        self.handler = LoggerErrorHandler(self.logger)

    def test_known_error(self):
        self.handler.handle(FormatError(3, "oops"))
        self.logger.log_error.assert_called_once_with(
            "FormatError: format incorrect ligne 3 : 'oops'"
        )

    def test_unknown_error(self):
        self.handler.handle(OSError("disque"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: OSError: disque"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_handlers_called_in_order(self):
        calls = []
        first, second = MagicMock(spec=ErrorHandler), MagicMock(spec=ErrorHandler)
        first.handle.side_effect = lambda e: calls.append("first")
        second.handle.side_effect = lambda e: calls.append("second")

        chain = ErrorHandlerChain([first])
        chain.add_handler(second)
        code = chain.handle(ApplicationError("x"))

        self.assertEqual(calls, ["first", "second"])
        self.assertEqual(code, 1)

    def test_custom_exit_code(self):
        chain = ErrorHandlerChain(exit_code=3)
        self.assertEqual(chain.handle(ApplicationError("x")), 3)


if __name__ == "__main__":
    unittest.main()
