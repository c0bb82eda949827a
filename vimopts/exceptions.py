class OptionError(Exception):
    pass


class ConfigurationError(OptionError):
    pass


class UnknownOptionError(OptionError, LookupError):
    def __init__(self, name):
        super().__init__('Unknown option: {}'.format(name))
        self.name = name


class InvalidArgumentError(OptionError, ValueError):
    def __init__(self, name, value):
        super().__init__('Invalid argument: {}={}'.format(name, value))
        self.name = name
        self.value = value


class UnsupportedOperationError(OptionError):
    def __init__(self, name, operation):
        super().__init__('Cannot {} {}'.format(operation, name))
        self.name = name
        self.operation = operation


class SetCommandError(OptionError):
    pass


class DefinitionError(ConfigurationError):
    pass


def iserror(thing):
    return isinstance(thing, Exception)
