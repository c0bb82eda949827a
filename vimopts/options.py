import enum

from . import log
from .exceptions import (ConfigurationError, InvalidArgumentError, iserror,
                         UnknownOptionError, UnsupportedOperationError)
from .iterutils import iterate
from .merge import (GLOBAL, LOCAL, MergeConfig, merge_number, merge_string,
                    to_number, to_string)

__all__ = ['ComputedOption', 'OptionRegistry', 'OptionType', 'StoredOption']

logger = log.getLogger(__name__)


class OptionEnum(enum.Enum):
    def __repr__(self):
        return self.name


OptionType = OptionEnum('OptionType', ['string', 'number', 'boolean'])


class BaseOption:
    __slots__ = ['name', 'type', 'default_value', 'set_config']

    def __init__(self, name, type, default_value, set_config):
        self.name = name
        self.type = type
        self.default_value = default_value
        self.set_config = set_config

    def __repr__(self):
        return '<{}({!r}, {!r})>'.format(type(self).__name__, self.name,
                                         self.type)


class StoredOption(BaseOption):
    __slots__ = ['value']

    def __init__(self, name, type, default_value, set_config, value=None):
        super().__init__(name, type, default_value, set_config)
        self.value = value


# An option whose value lives elsewhere; `callback(value=None, session=None)`
# is called to read (no value) or write it, globally or for one session.
class ComputedOption(BaseOption):
    __slots__ = ['callback']

    def __init__(self, name, type, default_value, set_config, callback):
        super().__init__(name, type, default_value, set_config)
        self.callback = callback


def _option_type(name, type):
    if not type:
        return OptionType.string
    elif isinstance(type, OptionType):
        return type
    try:
        return OptionType[type]
    except KeyError:
        raise ConfigurationError('invalid type {!r} for option {!r}'
                                 .format(type, name)) from None


class OptionRegistry:
    def __init__(self):
        # Every name and alias maps to a canonical name, which owns the one
        # descriptor shared by all of them.
        self._names = {}
        self._options = {}

    def define(self, name, default_value=None, type=OptionType.string,
               aliases=None, callback=None, set_config=None):
        if default_value is None and callback is None:
            raise ConfigurationError(
                'default value for {!r} is required unless a callback is '
                'provided'.format(name)
            )

        type = _option_type(name, type)
        set_config = MergeConfig.coerce(set_config)
        if callback is not None:
            option = ComputedOption(name, type, default_value, set_config,
                                    callback)
        else:
            # Truthy defaults are seeded through `set` below.
            option = StoredOption(name, type, default_value, set_config,
                                  None if default_value else default_value)

        self._options[name] = option
        self._names[name] = name
        for i in iterate(aliases):
            self._names[i] = name
        logger.debug('defined {} option {!r}'.format(type.name, name))

        if default_value:
            error = self.set(name, default_value)
            if error is not None:
                raise ConfigurationError('invalid default for {!r}: {}'
                                         .format(name, error)) from error

    def __contains__(self, name):
        return name in self._names

    def canonical_name(self, name):
        try:
            return self._names[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def _lookup(self, name):
        canonical = self._names.get(name)
        if canonical is None:
            return None, None
        return canonical, self._options[canonical]

    def type_of(self, name):
        canonical, option = self._lookup(name)
        return 'unknown' if option is None else option.type.name

    def default_of(self, name):
        return self._options[self.canonical_name(name)].default_value

    def config_of(self, name):
        return self._options[self.canonical_name(name)].set_config

    def get(self, name, session=None, config=None):
        canonical, option = self._lookup(name)
        if option is None:
            return UnknownOptionError(name)
        try:
            scope = MergeConfig.coerce(config).scope
        except (TypeError, ValueError):
            return InvalidArgumentError(name, config)

        if isinstance(option, ComputedOption):
            if scope != GLOBAL and session is not None:
                local = option.callback(None, session)
                if local is not None:
                    return local
            if scope != LOCAL:
                return option.callback()
            return None

        if scope != GLOBAL and session is not None:
            record = session.options.get(canonical)
            if record is not None:
                return record['value']
        if scope != LOCAL:
            return option.value
        return None

    def set(self, name, value=None, session=None, config=None):
        canonical, option = self._lookup(name)
        if option is None:
            return UnknownOptionError(name)
        try:
            config = option.set_config.merged(MergeConfig.coerce(config))
        except (TypeError, ValueError):
            return InvalidArgumentError(name, config)

        if option.type == OptionType.boolean:
            if value and value is not True:
                return InvalidArgumentError(name, value)
            elif value is not False:
                # A boolean set without a value means "enable".
                value = True
            if config.append or config.remove:
                return UnsupportedOperationError(
                    name, 'append to' if config.append else 'remove from'
                )

        prior = self.get(name, session, config)
        if iserror(prior):
            return prior

        if option.type == OptionType.number:
            try:
                value = merge_number(to_number(prior or 0), to_number(value),
                                     config)
            except (TypeError, ValueError):
                return InvalidArgumentError(name, value)
        elif option.type == OptionType.string:
            value = merge_string(to_string(prior) if prior else '',
                                 to_string(value), config)
            if value is None:
                return None

        return self._commit(canonical, option, value, session, config.scope)

    def _commit(self, canonical, option, value, session, scope):
        if isinstance(option, ComputedOption):
            if scope != LOCAL:
                result = option.callback(value)
                if iserror(result):
                    return result
            if scope != GLOBAL and session is not None:
                result = option.callback(value, session)
                if iserror(result):
                    return result
            return None

        if scope != LOCAL:
            option.value = (bool(value) if option.type == OptionType.boolean
                            else value)
        if scope != GLOBAL and session is not None:
            session.options[canonical] = {'value': value}
        return None

    def reset(self):
        count = 0
        for option in self._options.values():
            if isinstance(option, StoredOption):
                option.value = option.default_value
                count += 1
        logger.debug('reset {} stored options'.format(count))
