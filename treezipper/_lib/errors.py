class InvalidRootOperation(IndexError):
    """
    Raised when an edit needs a parent context that the root does not
    have: removing the root, or inserting a sibling next to it.
    """
