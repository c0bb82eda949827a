import re

from . import log
from .exceptions import iserror, SetCommandError
from .iterutils import iterate
from .merge import MergeConfig, prepend_string, to_number, to_string

__all__ = ['format_option', 'run_set', 'split_args']

logger = log.getLogger(__name__)

_word_ex = re.compile(r'(?:\\.|[^\s\\])+')
_escape_ex = re.compile(r'\\(.)')
_arg_ex = re.compile(r'^(?P<name>[A-Za-z_]\w*)'
                     r'(?:(?P<suffix>[?!&])|(?P<op>[+^-]?=|:)(?P<value>.*))?$')


def split_args(text):
    return [_escape_ex.sub(r'\1', i) for i in _word_ex.findall(text)]


def format_option(name, value, type):
    if type == 'boolean':
        return name if value else 'no' + name
    return '{}={}'.format(name, to_string(value))


def _check(result, arg):
    if iserror(result):
        raise SetCommandError('{} ({})'.format(result, arg)) from result
    return result


def _resolve_name(registry, name):
    if name in registry:
        return name, None
    for prefix in ('no', 'inv'):
        if name.startswith(prefix) and name[len(prefix):] in registry:
            return name[len(prefix):], prefix
    raise SetCommandError('Unknown option: {}'.format(name))


def _prepend(registry, name, value, session, scope, arg):
    prior = _check(registry.get(name, session, {'scope': scope}), arg)
    if registry.type_of(name) == 'number':
        try:
            return to_number(prior or 0) * to_number(value)
        except ValueError:
            raise SetCommandError('Invalid argument: {}'.format(arg)) from None
    return prepend_string(to_string(prior) if prior else '', value,
                          registry.config_of(name))


def _run_one(registry, arg, session, scope):
    match = _arg_ex.match(arg)
    if not match:
        raise SetCommandError('Invalid argument: {}'.format(arg))
    name, prefix = _resolve_name(registry, match.group('name'))
    suffix, op, value = match.group('suffix', 'op', 'value')
    type = registry.type_of(name)
    replace = MergeConfig(scope=scope, append=False, remove=False)

    if prefix and (type != 'boolean' or suffix or op):
        raise SetCommandError('Invalid argument: {}'.format(arg))

    if suffix == '?' or (type != 'boolean' and not suffix and not op):
        current = _check(registry.get(name, session, {'scope': scope}), arg)
        return format_option(name, current, type)
    elif suffix == '&':
        default = registry.default_of(name)
        if default is None:
            raise SetCommandError('No default for option: {}'.format(name))
        _check(registry.set(name, default, session, replace), arg)
    elif type == 'boolean':
        if op:
            raise SetCommandError('Invalid argument: {}'.format(arg))
        if suffix == '!' or prefix == 'inv':
            current = _check(registry.get(name, session, {'scope': scope}),
                             arg)
            enable = not current
        else:
            enable = prefix != 'no'
        _check(registry.set(name, enable, session, replace), arg)
    elif suffix == '!':
        raise SetCommandError('Invalid argument: {}'.format(arg))
    elif op == '^=':
        value = _prepend(registry, name, value, session, scope, arg)
        if value is not None:
            _check(registry.set(name, value, session, replace), arg)
    else:
        config = MergeConfig(scope=scope, append=op == '+=',
                             remove=op == '-=')
        _check(registry.set(name, value, session, config), arg)

    logger.debug('set {!r} for {}'.format(
        arg, 'session {!r}'.format(session) if session else 'global'
    ))
    return None


def run_set(registry, args, session=None, scope=None):
    if isinstance(args, str):
        args = split_args(args)

    output = []
    for arg in iterate(args):
        line = _run_one(registry, arg, session, scope)
        if line is not None:
            output.append(line)
    return output
