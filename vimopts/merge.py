import math
import re

from .iterutils import ismapping, uniques

__all__ = ['GLOBAL', 'LOCAL', 'MergeConfig', 'merge_number', 'merge_string',
           'prepend_string', 'to_number', 'to_string']

LOCAL = 'local'
GLOBAL = 'global'

_hex_ex = re.compile(r'^[+-]?0[xX][0-9a-fA-F]+$')


class MergeConfig:
    __slots__ = ['scope', 'append', 'remove', 'commas', 'flags']

    def __init__(self, *, scope=None, append=None, remove=None, commas=None,
                 flags=None):
        if scope not in (None, LOCAL, GLOBAL):
            raise ValueError('invalid scope {!r}'.format(scope))
        self.scope = scope
        self.append = append
        self.remove = remove
        self.commas = commas
        self.flags = flags

    @classmethod
    def coerce(cls, thing):
        if thing is None:
            return cls()
        elif isinstance(thing, cls):
            return thing
        elif ismapping(thing):
            return cls(**thing)
        raise TypeError('expected a MergeConfig or mapping; but got {}'
                        .format(type(thing).__name__))

    def merged(self, rhs):
        result = MergeConfig()
        for i in self.__slots__:
            value = getattr(rhs, i)
            setattr(result, i, getattr(self, i) if value is None else value)
        return result

    def __eq__(self, rhs):
        return type(self) is type(rhs) and all(
            getattr(self, i) == getattr(rhs, i) for i in self.__slots__
        )

    def __ne__(self, rhs):
        return not (self == rhs)

    def __repr__(self):
        return '<MergeConfig({})>'.format(', '.join(
            '{}={!r}'.format(i, getattr(self, i)) for i in self.__slots__
            if getattr(self, i) is not None
        ))


def to_number(value):
    if isinstance(value, bool):
        return int(value)
    elif isinstance(value, (int, float)):
        if math.isnan(value):
            raise ValueError('not a number: {!r}'.format(value))
        return value
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return 0
        try:
            return int(s)
        except ValueError:
            pass
        if _hex_ex.match(s):
            return int(s, 16)
        result = float(s)
        if math.isnan(result):
            raise ValueError('not a number: {!r}'.format(value))
        return result
    raise ValueError('not a number: {!r}'.format(value))


def to_string(value):
    if value is None:
        return ''
    elif isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _split_commas(value):
    return [i for i in value.split(',') if i]


def merge_number(prior, value, config):
    prior = prior or 0
    if config.append:
        return prior + value
    elif config.remove:
        return prior - value
    return value


# Returns `None` when the merge leaves `prior` untouched.
def merge_string(prior, value, config):
    if config.commas:
        existing = _split_commas(prior)
        specified = _split_commas(value)
        if config.append:
            return ','.join(existing + uniques(specified, exclude=existing))
        elif config.remove:
            return ','.join(i for i in existing if i not in specified)
        return value
    elif config.flags and config.append:
        novel = uniques(value, exclude=prior)
        if not novel:
            return None
        return prior + ''.join(novel)

    if config.append:
        value = prior + value
    if config.remove:
        offset = prior.find(value)
        if offset < 0:
            return None
        return prior[:offset] + prior[offset + len(value):]
    return value


def prepend_string(prior, value, config):
    if config.commas:
        specified = _split_commas(value)
        existing = [i for i in _split_commas(prior) if i not in specified]
        return ','.join(uniques(specified) + existing)
    elif config.flags:
        novel = uniques(value, exclude=prior)
        if not novel:
            return None
        return ''.join(novel) + prior
    return value + prior
