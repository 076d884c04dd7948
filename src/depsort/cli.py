import importlib.metadata
import logging
import platform
import sys
import textwrap

import click

from .config import *
from .dag import (
    CyclicDependencyError,
    tsort,
)
from .extensions import (
    get_or_default,
    is_null_or_empty,
)
from .parser import (
    ParseError,
    load_dependencies,
)


logger = logging.getLogger('depsort')
logger.setLevel(DEPSORT_LOG_LEVEL)

stderr = logging.StreamHandler(sys.stderr)

logger.addHandler(stderr)


class PrefixWrapper(textwrap.TextWrapper):
    def __init__(self, prefix, *args, **kwargs):
        super().__init__(*args, initial_indent=prefix, subsequent_indent=prefix,
                         break_long_words=False, break_on_hyphens=False,
                         **kwargs)


def error(message):
    print('\n'.join(PrefixWrapper('error: ').wrap(message)), file=sys.stderr)


def hint(message):
    print('\n'.join(PrefixWrapper('hint: ').wrap(message)), file=sys.stderr)


class AliasedGroup(click.Group):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases = {}

    def command(self, *args, **kwargs):
        aliases = kwargs.pop('aliases', [])
        def decorator(func):
            cmd = click.decorators.command(*args, **kwargs)(func)
            self.add_command(cmd, aliases=aliases)
            return cmd
        return decorator

    def add_command(self, cmd, name=None, aliases=None):
        super().add_command(cmd, name)
        if aliases:
            for alias in aliases:
                self._aliases[alias] = name or cmd.name

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is None and cmd_name in self._aliases:
            command = super().get_command(ctx, self._aliases[cmd_name])
        return command


def delimiter_option(func):
    return click.option('-d', '--delimiter', default=DEPSORT_DELIMITER, show_default=True,
                        help='separator between an item and its dependencies')(func)


def load(depfile, delimiter):
    if not delimiter:
        error('The delimiter must not be empty.')
        sys.exit(1)
    try:
        graph = load_dependencies(depfile, delimiter)
    except ParseError as exc:
        error('Cannot parse {}: {}'.format(depfile.name, exc))
        hint('Each line must look like `item{} dependency ...`.'.format(delimiter))
        sys.exit(1)
    if is_null_or_empty(graph):
        logger.warning('No items found in %s.', depfile.name)
    return graph


def order(graph, roots=None):
    try:
        return tsort(graph, roots)
    except CyclicDependencyError as exc:
        error('Cyclic dependency found: {}.'.format(' -> '.join(map(str, exc.cycle))))
        hint('Remove one of the dependencies along the cycle.')
        sys.exit(1)


@click.group('depsort', cls=AliasedGroup)
@click.option('--debug', is_flag=True, help='log the traversal')
def cli(debug):
    """
    Sort items by their dependencies.
    """
    if debug:
        logger.setLevel(logging.DEBUG)


@cli.command('sort', aliases=['tsort', 'order'])
@click.argument('depfile', type=click.File(errors='replace'))
@click.option('-i', '--item', 'items', multiple=True, help='sort only ITEM and its dependencies (repeatable)')
@click.option('-r', '--reverse', is_flag=True, help='print dependents before their dependencies')
@delimiter_option
def sort(depfile, items, reverse, delimiter):
    """
    Print the items of a dependency file in dependency order.

    Each line of DEPFILE names an item followed by the items it depends on:

        \b
        # comment
        app: lib utils
        lib: utils
        utils

    Use `-` to read from standard input.
    """
    graph = load(depfile, delimiter)
    unknown = [item for item in items if item not in graph]
    if unknown:
        error('Unknown item: {}.'.format(', '.join(unknown)))
        sys.exit(1)
    sorted_items = order(graph, items or None)
    if reverse:
        sorted_items.reverse()
    for item in sorted_items:
        print(item)


@cli.command()
@click.argument('depfile', type=click.File(errors='replace'))
@delimiter_option
def check(depfile, delimiter):
    """
    Check a dependency file for cycles.
    """
    graph = load(depfile, delimiter)
    order(graph)
    logger.info('%s: no cycles (%d items)', depfile.name, len(graph))


@cli.command()
@click.argument('depfile', type=click.File(errors='replace'))
@click.argument('item')
@click.option('-t', '--transitive', is_flag=True, help='include indirect dependencies')
@delimiter_option
def deps(depfile, item, transitive, delimiter):
    """
    Print the dependencies of ITEM.
    """
    graph = load(depfile, delimiter)
    dependencies = get_or_default(graph, item)
    if dependencies is None:
        error('Unknown item: {}.'.format(item))
        sys.exit(1)
    if transitive:
        dependencies = order(graph, [item])[:-1]
    for dependency in dependencies:
        print(dependency)


@cli.command()
@click.option('-v', '--verbose', is_flag=True, help='print extra version information')
def version(verbose):
    """
    Show version and exit.
    """
    from . import __version__
    print('depsort {}'.format(__version__))
    if verbose:
        print('Python {} ({})'.format(platform.python_version(), platform.python_implementation()))
        print('click {}'.format(importlib.metadata.version('click')))
