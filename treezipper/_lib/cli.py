# -*- coding: utf-8 -*-
"""
Environment Variables:

  TREEZIPPER_INDENT : Indentation used when printing JSON documents.
    Overridden by --indent. Defaults to 2.

Examples:

  Given a document doc.json that looks like this.

  {"name": "svc", "deps": ["base", "shared"], "env": {"DEBUG": "1"}}

  Print every node with its location:

    $ treezipper walk doc.json

  Find where "shared" lives:

    $ treezipper find doc.json '"shared"'
    /deps/1

  Drop the DEBUG variable:

    $ treezipper remove doc.json '"1"'

  Rename base everywhere:

    $ treezipper replace doc.json '"base"' '"base2"'

  VALUE arguments are parsed as JSON; anything that is not valid JSON is
  taken as a plain string, so the quotes above may be left out.
"""
import argparse
import json
import logging
import os
import sys

from . import trees
from .control import Cont, Skip
from .errors import InvalidRootOperation

log = logging.getLogger(__name__)

DEFAULT_INDENT = 2


def argparser():
    desc = 'Navigate and edit JSON documents with a tree zipper'
    parser = argparse.ArgumentParser(description=desc)
    parser.add_argument(
        '--indent',
        type=int,
        help="Override TREEZIPPER_INDENT if it's set in the environment.",
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log each step of the walk, useful for debugging',
    )

    subparsers = parser.add_subparsers(help='sub-command help', dest='command')
    subparsers.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        'document',
        type=argparse.FileType('r'),
        help='JSON document to read, - for stdin',
    )

    subparsers.add_parser(
        'walk', help='prints every node in pre-order', parents=[common],
    )

    find = subparsers.add_parser(
        'find', help='prints the location of a value', parents=[common],
    )
    find.add_argument('value', type=parse_value)
    find.add_argument(
        '--prev',
        action='store_true',
        help='Search backwards from the last node',
    )

    remove = subparsers.add_parser(
        'remove', help='removes every node equal to VALUE', parents=[common],
    )
    remove.add_argument('value', type=parse_value)

    replace = subparsers.add_parser(
        'replace', help='replaces every node equal to OLD', parents=[common],
    )
    replace.add_argument('old', type=parse_value)
    replace.add_argument('new', type=parse_value)

    return parser


def parse_value(s):
    try:
        return json.loads(s)
    except ValueError:
        return s


def main(argv=None):
    arguments = argparser().parse_args(argv)
    if arguments.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return run(arguments, environ=os.environ)


def process_arguments(arguments, environ):
    indent = arguments.indent
    if indent is None:
        try:
            indent = int(environ.get('TREEZIPPER_INDENT', DEFAULT_INDENT))
        except ValueError:
            exit(
                'TREEZIPPER_INDENT must be a number.\n'
                'Run treezipper --help for more information.',
            )

    try:
        doc = json.load(arguments.document)
    except ValueError as e:
        exit('Could not read {0}: {1}'.format(arguments.document.name, e))

    return doc, indent


def run(arguments, environ):
    doc, indent = process_arguments(arguments, environ)
    loc = trees.JSON.zipper(doc)
    command = arguments.command

    if command == 'walk':
        for line in walk(loc):
            print(line)
        return

    if command == 'find':
        found = find(loc, arguments.value, arguments.prev)
        if found is None:
            return 'No node equal to {0}'.format(json.dumps(arguments.value))
        print(location(found))
        return

    try:
        if command == 'remove':
            doc = remove(loc, arguments.value)
        else:
            doc = replace(loc, arguments.old, arguments.new)
    except InvalidRootOperation:
        return "Can't {0} the whole document".format(command)

    print(json.dumps(doc, indent=indent or None))


def exit(msg):
    print(msg)
    sys.exit(1)


def same(node, value):
    if isinstance(node, trees.Entry):
        return False
    return node == value and isinstance(node, bool) == isinstance(value, bool)


# Loc -> [str]
def lineage(loc):
    """
    Returns the keys and indices leading from the root to loc.
    """

    parts = []
    while loc.path is not None:
        parent = loc.path.parent.current
        if isinstance(loc.current, trees.Entry):
            parts.append(str(loc.current.key))
        elif isinstance(parent, list):
            parts.append(str(len(loc.path.left)))
        loc = loc.up()
    parts.reverse()
    return parts


# Loc -> str
def location(loc):
    """
    Returns the lineage of loc as a JSON pointer: joined with slashes,
    with ~ and / inside keys written as ~0 and ~1.
    """

    parts = [p.replace('~', '~0').replace('/', '~1') for p in lineage(loc)]
    return '/' + '/'.join(parts)


def describe(node):
    if isinstance(node, dict):
        return 'object ({0} keys)'.format(len(node))
    if isinstance(node, list):
        return 'array ({0} items)'.format(len(node))
    return json.dumps(node)


def walk(loc):
    for l in loc.preorder_iter():
        if isinstance(l.current, trees.Entry):
            continue
        indent = '  ' * len(lineage(l))
        yield '{0}{1} {2}'.format(indent, location(l), describe(l.current))


def find(loc, value, backwards=False):
    if backwards:
        return loc.rightmost_descendant().find(
            lambda node: same(node, value), 'prev',
        )
    return loc.find(lambda node: same(node, value))


def remove(loc, value):
    def visit(l):
        if not same(l.current, value):
            return Cont(l)
        log.debug('removing %s', location(l))
        parent = l.up()
        if parent is not None and isinstance(parent.current, trees.Entry):
            return Cont(parent.remove())
        return Cont(l.remove())

    return loc.traverse_while(visit).current


def replace(loc, old, new):
    if same(loc.current, old):
        raise InvalidRootOperation('Replace at top')

    def visit(l):
        if same(l.current, old):
            log.debug('replacing %s', location(l))
            return Skip(l.replace(new))
        return Cont(l)

    return loc.traverse_while(visit).current
