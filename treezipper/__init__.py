from ._lib.control import Cont, Control, Halt, Skip
from ._lib.errors import InvalidRootOperation
from ._lib.trees import (
    BLOCK, JSON, SEQUENCE, TERM, TUPLE, Entry, Shape, Term,
)
from ._lib.walk import (
    traverse, traverse_acc, traverse_while, traverse_while_acc,
)
from ._lib.zipper import Loc, Path, zipper

__all__ = [
    'BLOCK',
    'Cont',
    'Control',
    'Entry',
    'Halt',
    'InvalidRootOperation',
    'JSON',
    'Loc',
    'Path',
    'SEQUENCE',
    'Shape',
    'Skip',
    'TERM',
    'TUPLE',
    'Term',
    'traverse',
    'traverse_acc',
    'traverse_while',
    'traverse_while_acc',
    'zipper',
]
