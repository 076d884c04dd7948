import collections
import enum
import functools
import logging
from collections.abc import (
    Mapping,
    Sequence,
    Set,
)
from typing import (
    Iterable,
    List,
    Optional,
    Tuple,
)

from .extensions import (
    add_if_not_contains,
    get_or_add,
)
from .types import (
    DependencyLookup,
    Graph,
    Item,
)

__all__ = ['CyclicDependencyError', 'DAG', 'VisitState', 'memoize_dependencies', 'sort_by_dependencies', 'tsort']


logger = logging.getLogger(__name__)


VisitState = enum.Enum('VisitState', ['UNVISITED', 'IN_PROGRESS', 'DONE'])

# Sentinel for an exhausted dependency iterator.
_EXHAUSTED = object()


class CyclicDependencyError(ValueError):
    """
    Raised when an item is reached again while its own dependencies are still
    being visited.

    `item` is the re-entered item and `cycle` the path that leads back to it,
    starting and ending with `item`.
    """

    def __init__(self, item, cycle=()):
        self.item = item
        self.cycle = tuple(cycle) or (item, item)
        super().__init__('cyclic dependency found: {}'.format(' -> '.join(map(str, self.cycle))))


def sort_by_dependencies(items: Iterable[Item], get_dependencies: DependencyLookup) -> List[Item]:
    """
    Order `items` and everything they depend on so that each item follows its
    dependencies.

    `get_dependencies(item)` returns the direct dependencies of `item`, or
    None if it has none. Dependencies are visited in the order it returns
    them, and roots in the order of `items`.

    Raises CyclicDependencyError if the dependencies form a cycle.

    >>> deps = {'a': ['b', 'c'], 'b': ['c']}
    >>> sort_by_dependencies(['a'], deps.get)
    ['c', 'b', 'a']
    """
    sorted_items, marks = [], {}

    for root in items:
        logger.debug('Visiting %r', root)
        _visit(root, get_dependencies, sorted_items, marks)

    return sorted_items


def _visit(root, get_dependencies, sorted_items, marks):
    # Each frame is (item, iterator over its remaining dependencies). The
    # frames on the stack are exactly the IN_PROGRESS items, in path order.
    stack = []

    def enter(item):
        mark = marks.get(item, VisitState.UNVISITED)
        if mark is VisitState.DONE:
            return
        if mark is VisitState.IN_PROGRESS:
            cycle = _cycle_path(stack, item)
            logger.debug('Cycle detected at %r', item)
            raise CyclicDependencyError(item, cycle)
        marks[item] = VisitState.IN_PROGRESS
        dependencies = get_dependencies(item)
        stack.append((item, iter(dependencies if dependencies is not None else ())))

    enter(root)
    while stack:
        item, dependencies = stack[-1]
        dependency = next(dependencies, _EXHAUSTED)
        if dependency is _EXHAUSTED:
            stack.pop()
            marks[item] = VisitState.DONE
            sorted_items.append(item)
        else:
            enter(dependency)


def _cycle_path(stack, item) -> Tuple:
    path = [frame[0] for frame in stack]
    for index, node in enumerate(path):
        if node == item:
            return tuple(path[index:]) + (item,)
    return (item, item)


def memoize_dependencies(get_dependencies: DependencyLookup) -> DependencyLookup:
    """
    Cache the result of a dependency lookup per item.
    """
    cache = {}

    def lookup(item):
        dependencies = get_dependencies(item)
        return tuple(dependencies) if dependencies is not None else ()

    @functools.wraps(get_dependencies)
    def wrapper(item):
        return get_or_add(cache, item, lookup)

    wrapper.cache = cache
    return wrapper


class DAG(collections.defaultdict):
    """
    Map each vertex to the list of vertices it depends on.
    """

    def __init__(self, graph=None):
        super().__init__(list)
        if graph is None:
            return
        if not isinstance(graph, Mapping):
            raise ValueError('graph data must be a mapping, not {.__name__}'.format(type(graph)))
        for vertex, dependencies in graph.items():
            if isinstance(dependencies, str) or not isinstance(dependencies, (Sequence, Set)):
                raise ValueError('dependencies must be sequence or set, not {.__name__}'.format(type(dependencies)))
            self.add(vertex)
            for dependency in dependencies:
                self.add(vertex, dependency)

    @property
    def edges(self):
        for vertex, dependencies in self.items():
            for dependency in dependencies:
                yield (vertex, dependency)

    @property
    def vertices(self):
        return self.keys()

    def add(self, vertex, dependency=None):
        if dependency is None:
            self[vertex]
            return
        add_if_not_contains(self[vertex], dependency)
        # Call __getitem__ for its factory side-effect. This normalizes the
        # graph by creating empty lists for sinks, so every dependency is also
        # a vertex.
        self[dependency]

    def dependencies(self, vertex) -> Optional[List]:
        return self.get(vertex)

    def copy(self):
        return type(self)(self)

    __copy__ = copy

    def __reduce__(self):
        # defaultdict pickles as (default_factory, items), which does not fit
        # this constructor.
        return (type(self), (dict(self),))


def tsort(graph: Graph, roots: Optional[Iterable] = None) -> List:
    """
    Topologically sort a mapping of vertex to dependencies.

    Sorts every vertex unless `roots` is given, in which case only the roots
    and what they depend on are returned.
    """
    if roots is None:
        roots = list(graph)
    return sort_by_dependencies(roots, graph.get)
