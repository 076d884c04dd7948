import random

import pytest


@pytest.helpers.register
def assert_dependencies_precede(sorted_items, get_dependencies):
    """
    Assert that every item appears exactly once and after all of its
    dependencies.
    """
    assert len(sorted_items) == len(set(sorted_items)), 'duplicate items in {!r}'.format(sorted_items)
    index = {item: position for position, item in enumerate(sorted_items)}
    for item in sorted_items:
        for dependency in get_dependencies(item) or ():
            assert dependency in index, '{!r} missing (required by {!r})'.format(dependency, item)
            assert index[dependency] <= index[item], '{!r} sorted after {!r}'.format(dependency, item)


@pytest.helpers.register
def random_acyclic_graph(seed, size=30, density=0.2):
    """
    Generate a random acyclic dependency mapping.

    Items only depend on items with a lower number, then the numbering is
    shuffled so the input order carries no hint of the answer.
    """
    rng = random.Random(seed)
    labels = list(range(size))
    rng.shuffle(labels)
    graph = {}
    for position, label in enumerate(labels):
        graph[label] = [labels[other] for other in range(position) if rng.random() < density]
    return graph


@pytest.fixture
def diamond():
    return {
        'a': ['b', 'c'],
        'b': ['d'],
        'c': ['d'],
        'd': [],
    }


@pytest.fixture
def depfile(tmpdir):
    """
    Write a dependency file and return its path.
    """
    def write(text, name='deps.txt'):
        path = tmpdir.join(name)
        path.write(text)
        return str(path)
    return write
