__all__ = ['Session']


# A minimal per-editor state container. Anything with an `options` mapping of
# option name to `{'value': ...}` records works with `OptionRegistry`.
class Session:
    def __init__(self, name=None):
        self.name = name
        self.options = {}

    def __repr__(self):
        return '<Session({!r})>'.format(self.name)
