from collections import namedtuple
from typing import (
    Iterable,
    Optional,
)

from .dag import DAG


class ParseError(Exception):
    pass


class Dependency(namedtuple('Dependency', ('item', 'dependencies'))):
    def __format__(self, fmt):
        if fmt == 'line':
            if not self.dependencies:
                return self.item
            return '{self.item}: {dependencies}'.format(self=self, dependencies=' '.join(self.dependencies))
        return repr(self)


def parse_dependency_line(line: str, delimiter: str = ':') -> Optional[Dependency]:
    """
    Extract an item and its dependencies from a line of a dependency file.

    Returns None for blank lines and comments.

    >>> parse_dependency_line('app: lib utils')
    Dependency(item='app', dependencies=('lib', 'utils'))

    >>> parse_dependency_line('utils  # leaf')
    Dependency(item='utils', dependencies=())

    >>> parse_dependency_line(': lib')
    Traceback (most recent call last):
    ...
    ValueError: missing item name before ':'
    """
    # Strip comments first: '#' may not appear in item names.
    line = line.split('#', 1)[0].strip()
    if not line:
        return None
    item, _, remainder = line.partition(delimiter)
    item = item.strip()
    if not item:
        raise ValueError('missing item name before {!r}'.format(delimiter))
    if len(item.split()) > 1:
        raise ValueError('item name must not contain whitespace: {!r}'.format(item))
    if delimiter in remainder:
        raise ValueError('dependency name must not contain {!r}'.format(delimiter))
    return Dependency(item, tuple(remainder.split()))


def load_dependencies(lines: Iterable[str], delimiter: str = ':') -> DAG:
    """
    Build a DAG from the lines of a dependency file.
    """
    graph = DAG()
    for number, line in enumerate(lines, 1):
        try:
            dependency = parse_dependency_line(line, delimiter)
        except ValueError as exc:
            raise ParseError('line {}: {}'.format(number, exc)) from exc
        if dependency is None:
            continue
        graph.add(dependency.item)
        for name in dependency.dependencies:
            graph.add(dependency.item, name)
    return graph
