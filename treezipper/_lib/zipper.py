from collections import namedtuple

from . import walk
from .errors import InvalidRootOperation

# left holds the siblings already passed, nearest first
Path = namedtuple('Path', 'left, right, parent, changed')

_DIRECTIONS = ('next', 'prev')


def zipper(root, is_branch, children, make_node, add_child=None):
    return Loc(root, None, is_branch, children, make_node, add_child)


_Loc = namedtuple(
    'Loc',
    [
        'current', 'path', 'is_branch', 'get_children', 'make_node',
        'add_child',
    ],
    defaults=(None,),
)


class Loc(_Loc):

    def __repr__(self):
        path = self.path
        parts = []
        if path is None:
            parts.append('#root')
        elif path.left:
            parts.append('#...')
        parts.append(repr(self.current))
        if path is not None and path.right:
            parts.append('#...')
        return '<Loc {}>'.format(' '.join(parts))

    ## Context
    def node(self):
        return self.current

    def children(self):
        if self.branch():
            return tuple(self.get_children(self.current))

    def branch(self):
        return self.is_branch(self.current)

    def at_top(self):
        return self.path is None

    def root(self):
        return self.top().current

    ## Navigation
    def down(self):
        children = self.children()
        if children:
            path = Path(
                left=(),
                right=children[1:],
                parent=self,
                changed=False,
            )
            return self._replace(current=children[0], path=path)

    def up(self):
        path = self.path
        if path is None:
            return None

        parent = path.parent
        if not path.changed:
            return parent

        children = tuple(reversed(path.left)) + (self.current,) + path.right
        ppath = parent.path
        return parent._replace(
            current=self.make_node(parent.current, children),
            path=ppath and ppath._replace(changed=True),
        )

    def top(self):
        loc = self
        while loc.path is not None:
            loc = loc.up()
        return loc

    def ancestor(self, filter):
        """
        Return the first ancestor above the current loc that
        matches the filter(ancestor) function.

        The filter function is invoked with the loc of each ancestor
        in turn, nearest first, until the top of the tree is passed.
        """

        u = self.up()
        while u:
            if filter(u):
                return u
            u = u.up()

    def left(self):
        path = self.path
        if path and path.left:
            return self._replace(current=path.left[0], path=path._replace(
                left=path.left[1:],
                right=(self.current,) + path.right,
            ))

    def right(self):
        path = self.path
        if path and path.right:
            return self._replace(current=path.right[0], path=path._replace(
                left=(self.current,) + path.left,
                right=path.right[1:],
            ))

    def leftmost(self):
        """Returns the left most sibling at this location or self"""

        path = self.path
        if path and path.left:
            t = tuple(reversed(path.left)) + (self.current,) + path.right
            return self._replace(current=t[0], path=path._replace(
                left=(),
                right=t[1:],
            ))
        return self

    def rightmost(self):
        """Returns the right most sibling at this location or self"""

        path = self.path
        if path and path.right:
            t = tuple(reversed(path.right)) + (self.current,) + path.left
            return self._replace(current=t[0], path=path._replace(
                left=t[1:],
                right=(),
            ))
        return self

    def rightmost_descendant(self):
        loc = self
        while loc.branch():
            d = loc.down()
            if d:
                loc = d.rightmost()
            else:
                break
        return loc

    ## Enumeration
    def next(self):
        """
        Visits nodes in depth-first pre-order.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        starting from a, next will visit the nodes in the following
        order b, c, d, e, f, g and then return None.
        """

        if self.branch():
            d = self.down()
            if d:
                return d
        return self.skip('next')

    def prev(self):
        """
        The inverse of next. Returns None once the root has been
        passed.
        """

        l = self.left()
        if l:
            return l.rightmost_descendant()
        return self.up()

    def skip(self, direction='next'):
        """
        Move to the sibling in the given direction, climbing up until an
        ancestor has one. This bypasses the subtree at this loc.
        """

        if direction == 'next':
            step = Loc.right
        elif direction == 'prev':
            step = Loc.left
        else:
            raise ValueError(
                'direction must be one of {0}, got {1!r}'.format(
                    _DIRECTIONS, direction,
                ),
            )

        loc = self
        while loc:
            sibling = step(loc)
            if sibling:
                return sibling
            loc = loc.up()

    def preorder_iter(self):
        loc = self
        while loc:
            yield loc
            loc = loc.next()

    def find(self, func, direction='next'):
        """
        Scan from this loc in the given direction and return the first
        loc whose node satisfies func(node), or None.
        """

        if direction not in _DIRECTIONS:
            raise ValueError(
                'direction must be one of {0}, got {1!r}'.format(
                    _DIRECTIONS, direction,
                ),
            )

        loc = self
        while loc:
            if func(loc.current):
                return loc
            loc = loc.next() if direction == 'next' else loc.prev()

    def traverse(self, visit):
        return walk.traverse(self, visit)

    def traverse_acc(self, visit, acc):
        return walk.traverse_acc(self, visit, acc)

    def traverse_while(self, visit):
        return walk.traverse_while(self, visit)

    def traverse_while_acc(self, visit, acc):
        return walk.traverse_while_acc(self, visit, acc)

    ## editing
    def replace(self, value):
        if self.path:
            return self._replace(
                current=value,
                path=self.path._replace(changed=True),
            )
        else:
            return self._replace(current=value)

    def update(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.current, *args))

    def _add_child(self, item, at_end):
        if not self.branch():
            raise TypeError(
                "Can't add children to a leaf: {0!r}".format(self.current),
            )
        if self.add_child is not None:
            return self.replace(self.add_child(self.current, item, at_end))

        children = self.children()
        children = children + (item,) if at_end else (item,) + children
        return self.replace(self.make_node(self.current, children))

    def insert_child(self, item):
        """
        Inserts the item as the leftmost child of the node at this loc,
        without moving.
        """
        return self._add_child(item, at_end=False)

    def append_child(self, item):
        """
        Inserts the item as the rightmost child of the node at this loc,
        without moving.
        """
        return self._add_child(item, at_end=True)

    def insert_left(self, item):
        """Insert item as left sibling of node without moving"""
        path = self.path
        if not path:
            raise InvalidRootOperation("Can't insert siblings at the top")

        new = path._replace(left=(item,) + path.left, changed=True)
        return self._replace(path=new)

    def insert_right(self, item):
        """Insert item as right sibling of node without moving"""
        path = self.path
        if not path:
            raise InvalidRootOperation("Can't insert siblings at the top")

        new = path._replace(right=(item,) + path.right, changed=True)
        return self._replace(path=new)

    def remove(self):
        """
        Removes the node at the current location, returning the
        node that would have preceded it in a depth-first walk.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g
            ^
          c1 c2

        Removing c would return b, removing d would return c2.
        """
        path = self.path
        if not path:
            raise InvalidRootOperation('Remove at top')

        if path.left:
            return self._replace(current=path.left[0], path=path._replace(
                left=path.left[1:],
                changed=True,
            )).rightmost_descendant()

        parent = path.parent
        ppath = parent.path
        return parent._replace(
            current=self.make_node(parent.current, path.right),
            path=ppath and ppath._replace(changed=True),
        )


del _Loc
