import logging
from io import StringIO
from unittest import mock

from . import *

from vimopts import log


class TestColoredStreamHandler(TestCase):
    def setUp(self):
        self.handler = log.ColoredStreamHandler()
        fmt = '%(coloredlevel)s: %(message)s'
        self.handler.setFormatter(logging.Formatter(fmt))

    def test_info(self):
        record = logging.LogRecord(
            'name', log.INFO, 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1;34minfo\033[0m: message')

    def test_error(self):
        record = logging.LogRecord(
            'name', log.ERROR, 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1;31merror\033[0m: message')

    def test_unknown_level(self):
        record = logging.LogRecord(
            'name', 'unknown', 'pathname', 1, 'message', [], None
        )
        self.assertEqual(self.handler.format(record),
                         '\033[1mlevel unknown\033[0m: message')


class TestClicolor(TestCase):
    def test_clicolor(self):
        self.assertEqual(log._clicolor({}), None)
        self.assertEqual(log._clicolor({'CLICOLOR': '0'}), 'never')
        self.assertEqual(log._clicolor({'CLICOLOR': '1'}), 'auto')
        self.assertEqual(log._clicolor({'CLICOLOR_FORCE': '1',
                                        'CLICOLOR': '0'}), 'always')
        self.assertEqual(log._clicolor({'CLICOLOR_FORCE': '0'}), None)


class TestInit(TestCase):
    def setUp(self):
        self.root = logging.root
        self.level = self.root.level
        self.handlers = list(self.root.handlers)

    def tearDown(self):
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def test_color(self):
        with mock.patch('colorama.init') as m:
            log.init('always', environ={})
        m.assert_called_once_with(strip=False)

        with mock.patch('colorama.init') as m:
            log.init('never', environ={})
        m.assert_called_once_with(strip=True, convert=False)

        with mock.patch('colorama.init') as m:
            log.init('always', environ={'CLICOLOR': '0'})
        m.assert_called_once_with(strip=True, convert=False)

        with mock.patch('colorama.init') as m:
            log.init(environ={})
        m.assert_called_once_with()

    def test_output(self):
        stream = StringIO()
        with mock.patch('colorama.init'):
            handler = log.init(environ={}, stream=stream)
        self.assertIn(handler, self.root.handlers)
        self.assertEqual(self.root.level, logging.INFO)

        logger = log.getLogger('vimopts.test')
        logger.info('hello %s', 1)
        logger.debug('hidden')
        self.assertEqual(stream.getvalue(), '\033[1;34minfo\033[0m: hello 1\n')

    def test_debug(self):
        stream = StringIO()
        with mock.patch('colorama.init'):
            log.init(debug=True, environ={}, stream=stream)
        self.assertEqual(self.root.level, logging.DEBUG)

        log.getLogger('vimopts.test').debug('shown')
        self.assertEqual(stream.getvalue(), (
            '\033[1;35mdebug\033[0m: \033[90mvimopts.test:\033[0m shown\n'
        ))
