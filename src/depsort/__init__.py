"""
Sort items by their dependencies.
"""

from .dag import (
    DAG,
    CyclicDependencyError,
    VisitState,
    memoize_dependencies,
    sort_by_dependencies,
    tsort,
)
from .parser import (
    ParseError,
    load_dependencies,
)

__version__ = '0.1.0'


def main():
    from .cli import cli
    cli()
