"""Declare options from YAML documents.

A definitions document is either a mapping of option names to their
declarations::

    tabstop:
      type: number
      default: 8
      aliases: [ts]
    path:
      default: ''
      config: {commas: true}

or a list of declarations, each carrying its own `name`. Only declarations
are read here; option values are never written back.
"""

import yaml

from . import log
from .exceptions import ConfigurationError, DefinitionError
from .iterutils import isiterable, ismapping

__all__ = ['load_definitions', 'load_definitions_file']

logger = log.getLogger(__name__)

_fields = {'name', 'type', 'default', 'aliases', 'config'}


def _declarations(data):
    if data is None:
        return []
    elif ismapping(data):
        result = []
        for name, decl in data.items():
            if decl is None:
                decl = {}
            if not ismapping(decl):
                raise DefinitionError('expected a mapping for option {!r}'
                                      .format(name))
            result.append(dict(decl, name=name))
        return result
    elif isiterable(data):
        result = list(data)
        for i in result:
            if not ismapping(i) or 'name' not in i:
                raise DefinitionError('expected a mapping with a name; but '
                                      'got {!r}'.format(i))
        return result
    raise DefinitionError('expected a mapping or list of options')


def _define(registry, decl):
    name = decl['name']
    unknown = set(decl) - _fields
    if unknown:
        raise DefinitionError('unknown fields for option {!r}: {}'.format(
            name, ', '.join(sorted(unknown))
        ))

    aliases = decl.get('aliases')
    if isinstance(aliases, str):
        aliases = [aliases]
    try:
        registry.define(name, decl.get('default'), decl.get('type'),
                        aliases=aliases, set_config=decl.get('config'))
    except (TypeError, ValueError) as e:
        raise DefinitionError('invalid option {!r}: {}'
                              .format(name, e)) from e
    except ConfigurationError as e:
        raise DefinitionError(str(e)) from e


def load_definitions(registry, stream):
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise DefinitionError('unable to parse option definitions: {}'
                              .format(e)) from e

    names = []
    for decl in _declarations(data):
        _define(registry, decl)
        names.append(decl['name'])
    logger.debug('loaded {} option definitions'.format(len(names)))
    return names


def load_definitions_file(registry, filename):
    with open(filename, 'r') as f:
        return load_definitions(registry, f)
