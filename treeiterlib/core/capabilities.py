"""Capability classification for tree adapters.

Every adapter type declares, at class level, how its tree addresses nodes and
whether parent/sibling relationships are stored or must be reconstructed by
the traversal. These are type-level facts: they are read once per adapter
type and the resulting profile is what every other component dispatches on.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from cachetools import LRUCache, cached

from ..errors import MissingCapabilityError

logger = logging.getLogger(__name__)


class Addressing(Enum):
    """How a tree identifies its nodes."""
    INDEXED = "indexed"    # Looked up by an index path from the root
    REGULAR = "regular"    # Children are identity-bearing node values


class ParentLinks(Enum):
    """Whether a node can report its parent directly."""
    STORED = "stored"
    IMPLICIT = "implicit"


class SiblingLinks(Enum):
    """Whether a node can report its next/previous sibling directly."""
    STORED = "stored"
    IMPLICIT = "implicit"


class PositionKind(Enum):
    """Which position representation a traversal uses."""
    INDEX_PATH = "index_path"
    NODE_STACK = "node_stack"
    NATIVE = "native"


def missing_capability(method):
    """Mark an adapter method as a placeholder for an optional capability.

    Subclasses that really provide the capability override the method, which
    drops the marker. ``classify`` uses the marker to detect adapters that
    declare stored links without implementing the lookups.
    """
    method._missing_capability = True
    return method


def provides(adapter_type: type, method_name: str) -> bool:
    """Check whether an adapter type implements an optional capability."""
    method = getattr(adapter_type, method_name, None)
    if method is None:
        return False
    return not getattr(method, '_missing_capability', False)


@dataclass(frozen=True)
class CapabilityProfile:
    """The three capability tags of an adapter type."""

    addressing: Addressing = Addressing.REGULAR
    parent_links: ParentLinks = ParentLinks.IMPLICIT
    sibling_links: SiblingLinks = SiblingLinks.IMPLICIT

    @property
    def stores_links(self) -> bool:
        """True when both parent and sibling links are stored on the nodes."""
        return (self.parent_links is ParentLinks.STORED and
                self.sibling_links is SiblingLinks.STORED)

    @property
    def position_kind(self) -> PositionKind:
        """Position representation used by depth-first traversals."""
        if self.stores_links:
            return PositionKind.NATIVE
        if self.addressing is Addressing.INDEXED:
            return PositionKind.INDEX_PATH
        return PositionKind.NODE_STACK


@cached(cache=LRUCache(maxsize=256), lock=threading.RLock())
def classify(adapter_type: type) -> CapabilityProfile:
    """Build the capability profile for an adapter type.

    Args:
        adapter_type: A TreeAdapter subclass (not an instance)

    Returns:
        CapabilityProfile describing the adapter

    Raises:
        TypeError: If a capability attribute is not one of the tag enums
        MissingCapabilityError: If the adapter declares stored parent and
            sibling links but does not implement the sibling lookups
    """
    profile = CapabilityProfile(
        addressing=getattr(adapter_type, 'addressing', Addressing.REGULAR),
        parent_links=getattr(adapter_type, 'parent_links', ParentLinks.IMPLICIT),
        sibling_links=getattr(adapter_type, 'sibling_links', SiblingLinks.IMPLICIT),
    )

    expected = (
        ('addressing', profile.addressing, Addressing),
        ('parent_links', profile.parent_links, ParentLinks),
        ('sibling_links', profile.sibling_links, SiblingLinks),
    )
    for name, value, enum_type in expected:
        if not isinstance(value, enum_type):
            raise TypeError(
                f"{adapter_type.__name__}.{name} must be a {enum_type.__name__}, "
                f"got {value!r}"
            )

    if profile.parent_links is ParentLinks.STORED:
        for method_name in ('get_parent', 'is_root'):
            if not provides(adapter_type, method_name):
                raise MissingCapabilityError(
                    adapter_type.__name__, method_name,
                    "adapters with stored parent links must implement it"
                )

    if profile.stores_links:
        for method_name in ('next_sibling', 'prev_sibling'):
            if not provides(adapter_type, method_name):
                raise MissingCapabilityError(
                    adapter_type.__name__, method_name,
                    "adapters with stored sibling links must implement it"
                )

    logger.debug("Classified %s as %s", adapter_type.__name__, profile)
    return profile
