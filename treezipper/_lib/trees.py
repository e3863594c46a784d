"""
Ready-made tree shapes.

A shape bundles the three functions a zipper needs to walk a kind of
tree: is_branch(node), children(node) and make_node(node, children).
make_node(n, children(n)) gives back a node equal to n for every branch
n. When handed a number of children a node cannot hold, make_node falls
back to a documented degenerate shape instead of failing.

A shape may also carry add_child(node, item, at_end), used by
Loc.insert_child and Loc.append_child for nodes where a new child does
not simply go at either end of children(node).
"""

from collections import namedtuple

from . import zipper as _zipper


class Shape(namedtuple(
    'Shape', 'is_branch, children, make_node, add_child', defaults=(None,),
)):

    def zipper(self, root):
        return _zipper.zipper(root, *self)


def isa(*types):
    """
    Returns is_<type>(obj) a function that returns true
    when its argument is an instance of one of types
    """
    def f(obj):
        return isinstance(obj, types)

    f.__name__ = 'is_{0}'.format('_or_'.join(t.__name__ for t in types))
    return f


# Nested lists and tuples

def _sequence_make_node(node, children):
    # namedtuples take their fields positionally
    if hasattr(node, '_make'):
        if len(children) == len(node):
            return node._make(children)
        return tuple(children)
    return type(node)(children)


SEQUENCE = Shape(isa(list, tuple), tuple, _sequence_make_node)


# JSON documents

class Entry(namedtuple('Entry', 'key, value')):
    """
    One key/value pair of a JSON object. The value is its only child.
    """


def _json_is_branch(node):
    return isinstance(node, (dict, list, Entry))


def _json_children(node):
    if isinstance(node, dict):
        return tuple(Entry(k, v) for k, v in node.items())
    if isinstance(node, Entry):
        return (node.value,)
    return tuple(node)


def _json_make_node(node, children):
    if isinstance(node, dict):
        taken = set(c.key for c in children if isinstance(c, Entry))
        obj = {}
        for i, child in enumerate(children):
            if isinstance(child, Entry):
                obj[child.key] = child.value
                continue
            # a stray child is keyed by its position, never over a real key
            key = str(i)
            while key in taken:
                key = '_' + key
            taken.add(key)
            obj[key] = child
        return obj
    if isinstance(node, Entry):
        if len(children) == 1:
            return node._replace(value=children[0])
        return node._replace(value=list(children))
    return list(children)


JSON = Shape(_json_is_branch, _json_children, _json_make_node)


# Syntax tree terms

class Term(namedtuple('Term', 'form, meta, args')):
    """
    A syntax tree node: a form (usually a name), a dict of metadata such
    as line numbers, and a list of argument nodes. args is None for a
    variable reference, which makes the term a leaf.

    A form that is not a string is itself a node, e.g. the callee of a
    call expression, and counts as the first child.
    """


# form of the term a pair degenerates to when it gets a third child
TUPLE = '{}'
# form of the term a call degenerates to when it loses its callee
BLOCK = '__block__'


def _term_is_branch(node):
    if isinstance(node, Term):
        return isinstance(node.args, (list, tuple))
    if isinstance(node, tuple):
        return len(node) == 2
    return isinstance(node, list)


def _term_children(node):
    if isinstance(node, Term):
        if isinstance(node.form, str):
            return tuple(node.args)
        return (node.form,) + tuple(node.args)
    return tuple(node)


def _term_make_node(node, children):
    children = list(children)
    if isinstance(node, Term):
        if isinstance(node.form, str):
            return node._replace(args=type(node.args)(children))
        if not children:
            return Term(BLOCK, node.meta, [])
        return node._replace(
            form=children[0],
            args=type(node.args)(children[1:]),
        )
    if isinstance(node, tuple):
        if len(children) == 2:
            return tuple(children)
        return Term(TUPLE, {}, children)
    return children


def _term_add_child(node, item, at_end):
    if isinstance(node, Term):
        args = list(node.args)
        args = args + [item] if at_end else [item] + args
        return node._replace(args=type(node.args)(args))
    children = _term_children(node)
    if at_end:
        return _term_make_node(node, children + (item,))
    return _term_make_node(node, (item,) + children)


TERM = Shape(
    _term_is_branch, _term_children, _term_make_node, _term_add_child,
)
