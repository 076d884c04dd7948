"""
Collection helpers.
"""

from collections.abc import (
    MutableSequence,
    MutableSet,
)

__all__ = ['add_if_not_contains', 'get_or_add', 'get_or_default', 'is_null_or_empty']


def is_null_or_empty(collection):
    return collection is None or len(collection) <= 0


def add_if_not_contains(collection, item):
    """
    Add `item` to `collection` unless it is already there.

    Returns True if the item was added.
    """
    if collection is None:
        raise ValueError('collection must not be None')
    if item in collection:
        return False
    if isinstance(collection, MutableSet):
        collection.add(item)
    elif isinstance(collection, MutableSequence):
        collection.append(item)
    else:
        raise ValueError('collection must be a mutable sequence or set, not {.__name__}'.format(type(collection)))
    return True


def get_or_default(mapping, key, default=None):
    """
    Return the value stored under `key`, or `default` if there is none.

    Unlike `mapping[key]`, this never calls a `defaultdict` factory.
    """
    if key in mapping:
        return mapping[key]
    return default


def get_or_add(mapping, key, factory):
    """
    Return the value stored under `key`, creating it with `factory(key)` if
    it is missing.

    >>> cache = {}
    >>> get_or_add(cache, 'a', str.upper)
    'A'
    >>> cache
    {'a': 'A'}
    """
    if key in mapping:
        return mapping[key]
    value = mapping[key] = factory(key)
    return value
