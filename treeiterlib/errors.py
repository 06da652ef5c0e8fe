"""Exception hierarchy for TreeIterLib.

Reaching the end of a traversal is not an error: ``advance`` returns None and
Python iteration raises StopIteration as usual. Everything below signals a
broken contract between a tree and its adapter, and is never swallowed by
the library.
"""


class TreeIterError(Exception):
    """Base class for all TreeIterLib errors."""
    pass


class TreeInconsistencyError(TreeIterError):
    """Raised when a node is not among the children of the parent it reports.

    This means the tree's parent and children links are out of sync, which is
    a caller-side contract violation. Not retriable.
    """
    pass


class MissingCapabilityError(TreeIterError):
    """Raised when an adapter lacks an operation its declared capabilities require.

    Example: an adapter declares stored sibling links but does not implement
    ``next_sibling``/``prev_sibling``.
    """

    def __init__(self, adapter_name: str, capability: str, reason: str = ""):
        self.adapter_name = adapter_name
        self.capability = capability
        message = f"{adapter_name} does not provide required capability '{capability}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CapabilityMismatchError(TreeIterError):
    """Raised when configuration requirements can't be met by adapter."""
    pass
