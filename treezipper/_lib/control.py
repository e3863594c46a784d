from collections import namedtuple


"""
messages a traverse_while visitor returns to steer the walk
"""

# acc of a message built without one
NO_ACC = object()


class Control(object):
    """
    Base class for all control messages
    """


class Cont(Control, namedtuple('Cont', 'loc, acc', defaults=(NO_ACC,))):
    """
    Keep walking in pre-order, descending into the children of loc.
    """


class Skip(Control, namedtuple('Skip', 'loc, acc', defaults=(NO_ACC,))):
    """
    Keep walking but bypass the subtree rooted at loc.
    """


class Halt(Control, namedtuple('Halt', 'loc, acc', defaults=(NO_ACC,))):
    """
    Stop the walk here.
    """
