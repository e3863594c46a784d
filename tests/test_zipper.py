from collections import namedtuple

import pytest

from treezipper import SEQUENCE, InvalidRootOperation, zipper

Leaf = namedtuple('Leaf', 'value')
Add = namedtuple('Add', 'left, right')
Mul = namedtuple('Mul', 'left, right')


def _is_branch(node):
    return isinstance(node, (Add, Mul))


def _children(node):
    return tuple(node)


def _make_node(node, children):
    return type(node)(*children)


def expr(tree):
    return zipper(tree, _is_branch, _children, _make_node)


tree = Add(Leaf(1), Mul(Leaf(2), Leaf(3)))

#          root
#        /  |   \
#      'a' b-c  d-[e]
nested = ['a', ['b', 'c'], ['d', ['e']]]
nested_preorder = [
    nested, 'a', ['b', 'c'], 'b', 'c', ['d', ['e']], 'd', ['e'], 'e',
]


def test_navigation():
    z = expr(tree)
    one = z.down()
    assert one.node() == Leaf(1)

    mul = one.right()
    assert mul.node() == Mul(Leaf(2), Leaf(3))

    two = mul.down()
    assert two.node() == Leaf(2)

    three = two.right()
    assert three.node() == Leaf(3)

    assert three.up().node() == Mul(Leaf(2), Leaf(3))

    top = three.up().up()
    assert top.node() == tree
    assert top.at_top()
    assert top == z


def test_replace_propagates_on_root():
    two = expr(tree).down().right().down()
    assert two.replace(Leaf(20)).root() == Add(
        Leaf(1), Mul(Leaf(20), Leaf(3)),
    )


def test_find():
    found = expr(tree).find(lambda n: n == Leaf(3))
    assert found.node() == Leaf(3)
    assert found.up().node() == Mul(Leaf(2), Leaf(3))

    assert expr(tree).find(lambda n: n == Leaf(99)) is None


def test_find_passes_raw_nodes():
    seen = []

    def record(node):
        seen.append(node)
        return False

    expr(tree).find(record)
    assert seen == [
        tree, Leaf(1), Mul(Leaf(2), Leaf(3)), Leaf(2), Leaf(3),
    ]


def test_find_prev():
    last = SEQUENCE.zipper(nested).rightmost_descendant()
    assert last.node() == 'e'

    found = last.find(lambda n: n == 'b', 'prev')
    assert found.node() == 'b'
    assert found.up().node() == ['b', 'c']

    assert last.find(lambda n: n == 'x', 'prev') is None


def test_find_bad_direction():
    with pytest.raises(ValueError):
        SEQUENCE.zipper(nested).find(lambda n: True, 'sideways')


def test_round_trip():
    for t in (tree, nested, [[1], [2, [3]]], (1, (2,))):
        z = SEQUENCE.zipper(t) if not _is_branch(t) else expr(t)
        assert z.down().up() == z


def test_unchanged_up_returns_parent():
    z = SEQUENCE.zipper(nested)
    assert z.down().right().up() is z


def test_inverse_moves():
    z = SEQUENCE.zipper([1, 2, 3, 4]).down().right()
    assert z.node() == 2
    assert z.right().left() == z
    assert z.left().right() == z


def test_up_down_up():
    e = SEQUENCE.zipper(nested).down().right().right().down().right().down()
    assert e.node() == 'e'
    assert e.up().down().up() == e.up()


def test_misses_return_none():
    assert SEQUENCE.zipper([]).down() is None
    assert SEQUENCE.zipper([1]).down().down() is None
    assert SEQUENCE.zipper([1]).up() is None
    assert SEQUENCE.zipper([1]).left() is None
    assert SEQUENCE.zipper([1]).right() is None
    assert SEQUENCE.zipper([1, 2]).down().left() is None
    assert SEQUENCE.zipper([1, 2]).down().right().right() is None


def test_leftmost_rightmost():
    z = SEQUENCE.zipper([1, 2, 3, 4]).down().right()

    last = z.rightmost()
    assert last.node() == 4
    assert last == z.right().right()
    assert last.left().node() == 3
    assert last.rightmost() is last

    first = z.leftmost()
    assert first.node() == 1
    assert first == z.left()
    assert first.leftmost() is first

    assert last.root() == [1, 2, 3, 4]


def test_extremes_at_top():
    z = SEQUENCE.zipper([1, 2])
    assert z.leftmost() is z
    assert z.rightmost() is z


def test_top_and_root():
    z = SEQUENCE.zipper(nested)
    e = z.find(lambda n: n == 'e')
    assert e.top() == z
    assert e.root() == nested


def test_children_and_branch():
    z = SEQUENCE.zipper([1, [2]])
    assert z.branch()
    assert z.children() == (1, [2])
    assert not z.down().branch()
    assert z.down().children() is None


def test_ancestor():
    e = SEQUENCE.zipper(nested).find(lambda n: n == 'e')
    d = e.ancestor(lambda loc: loc.node()[0] == 'd')
    assert d.node() == ['d', ['e']]
    assert e.ancestor(lambda loc: False) is None


def test_edit_propagation():
    t = [1, [2, 3], 4]
    z = SEQUENCE.zipper(t).down().right().down()
    assert z.replace(20).root() == [1, [20, 3], 4]
    assert t == [1, [2, 3], 4]


def test_edit_keeps_sequence_type():
    z = SEQUENCE.zipper((1, (2, 3))).down().right().down()
    assert z.replace(20).root() == (1, (20, 3))


def test_edits_invisible_until_up():
    z = SEQUENCE.zipper([1, 2])
    edited = z.down().replace(10)
    assert edited.path.parent.node() == [1, 2]
    assert edited.up().node() == [10, 2]


def test_replace_at_top():
    assert SEQUENCE.zipper([1]).replace([2]).root() == [2]


def test_update():
    z = SEQUENCE.zipper([1, 2]).down().right()
    assert z.update(lambda n, k: n * k, 10).root() == [1, 20]


def test_remove_returns_rightmost_descendant_of_left_sibling():
    z = SEQUENCE.zipper([['c1', 'c2'], 'd']).down().right()
    r = z.remove()
    assert r.node() == 'c2'
    assert r.root() == [['c1', 'c2']]


def test_remove_with_leaf_left_sibling():
    z = SEQUENCE.zipper([1, 2, 3]).down().right()
    r = z.remove()
    assert r.node() == 1
    assert r.right().node() == 3
    assert r.root() == [1, 3]


def test_remove_first_child_returns_parent():
    z = SEQUENCE.zipper([0, [1, 2, 3]]).down().right().down()
    r = z.remove()
    assert r.node() == [2, 3]
    assert r.left().node() == 0
    assert r.root() == [0, [2, 3]]


def test_remove_only_child():
    z = SEQUENCE.zipper([[1]]).down().down()
    r = z.remove()
    assert r.node() == []
    assert r.root() == [[]]


def test_remove_root():
    with pytest.raises(InvalidRootOperation):
        SEQUENCE.zipper([1]).remove()

    with pytest.raises(IndexError):
        SEQUENCE.zipper([1]).remove()


def test_insert_left():
    z = SEQUENCE.zipper([1, 2, 3]).down().right()
    z = z.insert_left('a')
    assert z.node() == 2
    assert z.left().node() == 'a'
    assert z.root() == [1, 'a', 2, 3]
    assert z.insert_left('b').root() == [1, 'a', 'b', 2, 3]


def test_insert_right():
    z = SEQUENCE.zipper([1, 2, 3]).down().right()
    z = z.insert_right('x')
    assert z.node() == 2
    assert z.right().node() == 'x'
    assert z.root() == [1, 2, 'x', 3]
    assert z.insert_right('y').root() == [1, 2, 'y', 'x', 3]


def test_insert_siblings_at_top():
    z = SEQUENCE.zipper([1])
    with pytest.raises(InvalidRootOperation):
        z.insert_left(0)
    with pytest.raises(InvalidRootOperation):
        z.insert_right(0)


def test_insert_and_append_child():
    z = SEQUENCE.zipper([1, [2]]).down().right()

    first = z.insert_child(0)
    assert first.node() == [0, 2]
    assert first.root() == [1, [0, 2]]

    last = z.append_child(3)
    assert last.node() == [2, 3]
    assert last.path.parent == z.path.parent
    assert last.root() == [1, [2, 3]]


def test_append_child_at_top():
    assert SEQUENCE.zipper([]).append_child(1).root() == [1]


def test_add_child_to_leaf():
    leaf = SEQUENCE.zipper([1]).down()
    with pytest.raises(TypeError):
        leaf.insert_child(0)
    with pytest.raises(TypeError):
        leaf.append_child(0)


def test_next_visits_every_node_once():
    loc = SEQUENCE.zipper(nested)
    seen = []
    while loc:
        seen.append(loc.node())
        last = loc
        loc = loc.next()

    assert seen == nested_preorder
    assert last.next() is None


def test_preorder_iter():
    z = SEQUENCE.zipper(nested)
    assert [loc.node() for loc in z.preorder_iter()] == nested_preorder


def test_prev_walks_backwards():
    loc = SEQUENCE.zipper(nested).rightmost_descendant()
    seen = []
    while loc:
        seen.append(loc.node())
        loc = loc.prev()

    assert seen == list(reversed(nested_preorder))


def test_skip():
    z = SEQUENCE.zipper(nested)
    bc = z.down().right()
    assert bc.skip().node() == ['d', ['e']]
    assert bc.down().right().skip().node() == ['d', ['e']]
    assert z.find(lambda n: n == 'e').skip() is None

    d = bc.right()
    assert d.skip('prev').node() == ['b', 'c']
    assert bc.down().skip('prev').node() == 'a'


def test_skip_bad_direction():
    with pytest.raises(ValueError):
        SEQUENCE.zipper(nested).down().skip('up')


def test_repr():
    z = SEQUENCE.zipper([1, 2, 3])
    assert repr(z) == '<Loc #root [1, 2, 3]>'
    assert repr(z.down()) == '<Loc 1 #...>'
    assert repr(z.down().right()) == '<Loc #... 2 #...>'
    assert repr(z.down().rightmost()) == '<Loc #... 3>'
