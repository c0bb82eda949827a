import colorama
import logging
import os
from logging import (getLogger, CRITICAL, ERROR, WARNING, INFO,  # noqa: F401
                     DEBUG)


class ColoredStreamHandler(logging.StreamHandler):
    _format_codes = {
        DEBUG: '1;35',
        INFO: '1;34',
        WARNING: '1;33',
        ERROR: '1;31',
        CRITICAL: '1;41;37',
    }

    def format(self, record):
        record.coloredlevel = '\033[{format}m{name}\033[0m'.format(
            format=self._format_codes.get(record.levelno, '1'),
            name=record.levelname.lower()
        )
        return super().format(record)


def _clicolor(environ):
    if environ.get('CLICOLOR_FORCE', '0') != '0':
        return 'always'
    if 'CLICOLOR' in environ:
        return 'never' if environ['CLICOLOR'] == '0' else 'auto'
    return None


def _init_logging(logger, debug, stream=None):
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = ColoredStreamHandler(stream)
    fmt = '%(coloredlevel)s: %(message)s'
    if debug:
        fmt = '%(coloredlevel)s: \033[90m%(name)s:\033[0m %(message)s'
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return handler


def init(color='auto', debug=False, environ=os.environ, stream=None):
    color = _clicolor(environ) or color
    if color == 'always':
        colorama.init(strip=False)
    elif color == 'never':
        colorama.init(strip=True, convert=False)
    else:  # color == 'auto'
        colorama.init()

    return _init_logging(logging.root, debug, stream)
