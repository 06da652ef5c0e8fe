"""Concrete tree adapters.

Importing this package registers ``NestedSequenceAdapter`` as the default
adapter for ``list`` and ``tuple`` trees.
"""

from .nested import NestedSequenceAdapter
from .function import CallableAdapter
from .linked import LinkedNode, ParentLinkedAdapter, LinkedAdapter
from .filesystem import FileSystemNode, FileSystemAdapter

__all__ = [
    'NestedSequenceAdapter',
    'CallableAdapter',
    'LinkedNode',
    'ParentLinkedAdapter',
    'LinkedAdapter',
    'FileSystemNode',
    'FileSystemAdapter',
]
