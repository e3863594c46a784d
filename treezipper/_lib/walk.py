"""
Whole-tree drivers built on Loc.next and Loc.skip.

Every driver walks in depth-first pre-order and returns the top of the
tree it walked. When started below the root, only the subtree at the
starting loc is walked, as if it were a tree of its own, and the edited
subtree is put back in place of the original before returning.
"""

import logging

from .control import NO_ACC, Cont, Halt, Skip

log = logging.getLogger(__name__)


def _detach(loc):
    return loc._replace(path=None)


def _splice(loc, result):
    if loc.path is None:
        return result
    log.debug('splicing walked subtree back under %r', loc.path.parent)
    return loc.replace(result.current)


def traverse(loc, visit):
    """
    Calls visit(loc) on every loc and continues from the loc it returns.
    """

    start = loc
    loc = _detach(loc)
    while True:
        loc = visit(loc)
        n = loc.next()
        if n is None:
            return _splice(start, loc.top())
        loc = n


def traverse_acc(loc, visit, acc):
    """
    Like traverse, but threads an accumulator through the walk.
    visit(loc, acc) must return a (loc, acc) pair, and so does this
    function.
    """

    start = loc
    loc = _detach(loc)
    while True:
        loc, acc = visit(loc, acc)
        n = loc.next()
        if n is None:
            return _splice(start, loc.top()), acc
        loc = n


def _step(msg):
    if not isinstance(msg, (Cont, Skip, Halt)):
        raise TypeError(
            'visitor must return Cont, Skip or Halt, got {0!r}'.format(msg),
        )

    loc = msg.loc
    if isinstance(msg, Halt):
        log.debug('walk halted at %r', loc)
        return loc, None
    if isinstance(msg, Skip):
        return loc, loc.skip('next')
    return loc, loc.next()


def traverse_while(loc, visit):
    """
    Calls visit(loc) on every loc. The visitor returns a control message
    wrapping the (possibly edited) loc:

      Cont(loc) carries on into the children of loc,
      Skip(loc) carries on past the subtree at loc,
      Halt(loc) stops.
    """

    start = loc
    loc = _detach(loc)
    while True:
        loc, following = _step(visit(loc))
        if following is None:
            return _splice(start, loc.top())
        loc = following


def traverse_while_acc(loc, visit, acc):
    """
    Like traverse_while, but visit(loc, acc) returns control messages
    that also carry the accumulator, e.g. Cont(loc, acc). Returns a
    (loc, acc) pair.
    """

    start = loc
    loc = _detach(loc)
    while True:
        msg = visit(loc, acc)
        loc, following = _step(msg)
        if msg.acc is NO_ACC:
            raise TypeError(
                'visitor must return a message carrying the accumulator, '
                'e.g. Cont(loc, acc), got {0!r}'.format(msg),
            )
        acc = msg.acc
        if following is None:
            return _splice(start, loc.top()), acc
        loc = following
