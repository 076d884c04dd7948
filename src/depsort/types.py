from typing import (
    Callable,
    Hashable,
    Iterable,
    Mapping,
    Optional,
    TypeVar,
)


Item = TypeVar('Item', bound=Hashable)
DependencyLookup = Callable[[Item], Optional[Iterable[Item]]]
Graph = Mapping[Item, Iterable[Item]]
