from collections.abc import Iterable, Mapping

__all__ = ['isiterable', 'ismapping', 'iterate', 'uniques']


def isiterable(thing):
    return (isinstance(thing, Iterable) and not isinstance(thing, str) and
            not ismapping(thing))


def ismapping(thing):
    return isinstance(thing, Mapping)


def iterate(thing):
    def generate_none():
        return iter(())

    def generate_one(x):
        yield x

    if thing is None:
        return generate_none()
    elif isiterable(thing):
        return iter(thing)
    else:
        return generate_one(thing)


def uniques(iterable, exclude=()):
    def generate_uniques(iterable):
        seen = set(exclude)
        for item in iterable:
            if item not in seen:
                seen.add(item)
                yield item
    return list(generate_uniques(iterable))
