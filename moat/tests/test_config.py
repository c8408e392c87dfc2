"""Tests for :mod:`moat.config` and :mod:`moat.logging`."""

import json
import logging as stdlib_logging
import os
import tempfile
from unittest import TestCase, mock

from pythonjsonlogger.json import JsonFormatter

from moat import config, logging


class TestGetPort(TestCase):
    """The listening port comes from the environment."""

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_default(self):
        self.assertEqual(config.get_port(), ':8080')

    @mock.patch.dict(os.environ, {'PORT': '5000'}, clear=True)
    def test_port(self):
        self.assertEqual(config.get_port(), ':5000')

    @mock.patch.dict(os.environ, {'PORT': '5000', 'MOAT_PORT': ':9000'},
                     clear=True)
    def test_moat_port_wins(self):
        self.assertEqual(config.get_port(), ':9000')

    @mock.patch.dict(os.environ, {'PORT': '5000', 'MOAT_PORT': ''},
                     clear=True)
    def test_empty_ignored(self):
        self.assertEqual(config.get_port(), ':5000')


class TestSetupLogger(TestCase):
    """Log records are written as JSON."""

    def tearDown(self):
        logging.setup_logger('INFO')

    def test_logfile(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'moat.log')
            logger = logging.setup_logger('DEBUG', path)
            self.assertEqual(logger.level, stdlib_logging.DEBUG)
            logging.getLogger('things').info('Hello',
                                             extra={'path': '/v3.0/x'})
            for handler in logger.handlers:
                handler.flush()
            with open(path) as f:
                entry = json.loads(f.readline())
            for handler in logger.handlers:
                handler.close()
        self.assertEqual(entry['message'], 'Hello')
        self.assertEqual(entry['level'], 'INFO')
        self.assertEqual(entry['name'], 'moat.things')
        self.assertEqual(entry['path'], '/v3.0/x')
        self.assertIn('timestamp', entry)

    def test_numeric_level(self):
        logger = logging.setup_logger('30')
        self.assertEqual(logger.level, stdlib_logging.WARNING)
        self.assertFalse(logger.propagate)

    def test_names(self):
        self.assertEqual(logging.getLogger('moat.routes').name, 'moat.routes')
        self.assertEqual(logging.getLogger('other').name, 'moat.other')

    def test_json_formatter(self):
        logger = logging.setup_logger('INFO')
        self.assertTrue(logger.handlers)
        for handler in logger.handlers:
            self.assertIsInstance(handler.formatter, JsonFormatter)
