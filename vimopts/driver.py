import argparse

from . import log
from .app_version import version
from .exceptions import OptionError
from .loader import load_definitions_file
from .merge import GLOBAL, LOCAL
from .options import OptionRegistry
from .session import Session
from .setcmd import run_set

logger = log.getLogger(__name__)

description = """
vimopts is a typed, scoped option registry for editor-emulation modes. This
command loads option definitions from YAML files and runs a single `:set`
command against them, printing any values it queries.
"""


def add_generic_args(parser):
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + version)
    parser.add_argument('--debug', action='store_true',
                        help='report extra information for debugging vimopts')
    parser.add_argument('--color', metavar='WHEN',
                        choices=['always', 'never', 'auto'], default='auto',
                        help=('show colored output (one of: %(choices)s; ' +
                              'default: %(default)s)'))
    parser.add_argument('-c', action='store_const', const='always',
                        dest='color',
                        help=('show colored output (equivalent to ' +
                              '`--color=always`)'))


def make_parser():
    parser = argparse.ArgumentParser(prog='vimopts', description=description)
    add_generic_args(parser)
    parser.add_argument('-d', '--definitions', metavar='FILE',
                        action='append', default=[],
                        help='load option definitions from FILE')

    scope = parser.add_mutually_exclusive_group()
    scope.add_argument('--local', dest='scope', action='store_const',
                       const=LOCAL, help='only affect the session (:setlocal)')
    scope.add_argument('--global', dest='scope', action='store_const',
                       const=GLOBAL, help='only affect the global value ' +
                       '(:setglobal)')

    parser.add_argument('args', nargs='*', metavar='ARG',
                        help='arguments to :set')
    return parser


def run(args, registry=None):
    if registry is None:
        registry = OptionRegistry()
    session = Session('vimopts')
    for i in args.definitions:
        load_definitions_file(registry, i)
    return run_set(registry, args.args, session, args.scope)


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    log.init(args.color, debug=args.debug)

    try:
        for line in run(args):
            print(line)
    except (OptionError, OSError) as e:
        logger.error(e, exc_info=args.debug)
        return 1
    return 0
