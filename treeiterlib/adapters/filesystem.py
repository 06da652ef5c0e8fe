"""Filesystem adapter for TreeIterLib.

Directories are branches, everything else is a leaf. Each node remembers the
node it was listed from, so the tree has stored parent links bounded by the
directory the traversal started at; siblings are found by re-listing the
parent directory.
"""

import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.adapter import TreeAdapter
from ..core.capabilities import ParentLinks


class FileSystemNode:
    """A file or directory, optionally linked to the node it was listed from.

    Designed to be lightweight - most data is computed on demand. Nodes
    compare equal when they refer to the same path.
    """

    def __init__(self,
                 path: Union[str, Path],
                 parent: Optional['FileSystemNode'] = None,
                 stat_result: Optional[os.stat_result] = None):
        """Initialize a filesystem node.

        Args:
            path: Path to the file or directory
            parent: Parent node (None for the traversal root)
            stat_result: Cached stat result to avoid repeated syscalls
        """
        self.path = Path(path) if isinstance(path, str) else path
        self.parent = parent
        self._stat_result = stat_result
        self._metadata = None

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    def identifier(self) -> str:
        """Return absolute path as unique identifier."""
        return str(self.path.absolute())

    def is_dir(self) -> bool:
        return self.path.is_dir()

    def metadata(self) -> Dict[str, Any]:
        """Return filesystem metadata for this node."""
        if self._metadata is None:
            self._metadata = self._compute_metadata()
        return self._metadata

    def _compute_metadata(self) -> Dict[str, Any]:
        metadata = {
            'name': self.name,
            'path': str(self.path),
            'exists': self.path.exists(),
        }

        try:
            if self._stat_result is None:
                self._stat_result = self.path.stat()
            st = self._stat_result
        except PermissionError:
            metadata['error'] = 'Permission denied'
            return metadata
        except FileNotFoundError:
            metadata['error'] = 'Not found'
            return metadata

        metadata.update({
            'size': st.st_size,
            'mtime': st.st_mtime,
            'mtime_dt': datetime.fromtimestamp(st.st_mtime),
            'mode': st.st_mode,
            'is_file': stat.S_ISREG(st.st_mode),
            'is_dir': stat.S_ISDIR(st.st_mode),
        })
        if metadata['is_file']:
            metadata['extension'] = self.path.suffix
        return metadata

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, FileSystemNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())

    def __repr__(self) -> str:
        return f"FileSystemNode(path={self.path!r})"


class FileSystemAdapter(TreeAdapter):
    """Adapter for filesystem tree traversal.

    Children are listed in sorted order so traversals are deterministic.
    """

    parent_links = ParentLinks.STORED

    def __init__(self,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Whether to list symbolic links
            include_hidden: Whether to include hidden files/directories
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def get_children(self, node: FileSystemNode) -> List[FileSystemNode]:
        """Get child nodes (files and subdirectories)."""
        if not node.path.is_dir():
            return []

        try:
            entries = sorted(node.path.iterdir())
        except PermissionError:
            # Can't read directory, no children
            return []

        children = []
        for child_path in entries:
            if not self.include_hidden and child_path.name.startswith('.'):
                continue
            if not self.follow_symlinks and child_path.is_symlink():
                continue
            children.append(FileSystemNode(child_path, parent=node))
        return children

    def get_parent(self, node: FileSystemNode) -> Optional[FileSystemNode]:
        return node.parent

    def is_root(self, node: FileSystemNode) -> bool:
        return node.parent is None

    def create_node(self, path: Union[str, Path]) -> FileSystemNode:
        """Create a root node for a given path.

        Args:
            path: Path to create node for

        Returns:
            FileSystemNode instance with no parent
        """
        path = Path(path) if isinstance(path, str) else path
        if self.follow_symlinks:
            path = path.resolve()
        return FileSystemNode(path)
