"""Exception types raised by flownet."""


class FlowInvariantError(AssertionError):
    """An arc's flow left the ``[0, capacity]`` range during augmentation.

    This indicates a solver bug rather than bad input; malformed networks are
    rejected with ``ValueError`` before any flow is placed.
    """
