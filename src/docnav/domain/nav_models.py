from __future__ import annotations

"""
Navigation Tree Data Models.

Provides the node types produced by the tree builder and consumed by the
rendering layer. Pages are split into reachable pages and front-matter-only
stubs so that the absence of a URL is a distinct state rather than a
missing key.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# PARSED CONTENT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsedDocument:
    """
    Markdown document split into its front matter and body.

    Attributes:
        metadata: Flat key/value pairs from the front matter block.
        content: Remaining markdown body.
    """
    metadata: Dict[str, str] = field(default_factory=dict)
    content: str = ""

# -----------------------------------------------------------------------------
# TREE NODES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FullPage:
    """
    Markdown file with body content, reachable by URL.

    Attributes:
        title: Display title.
        description: Short summary text.
        path: Public URL path.
        data_path: Relative file path without the '.md' suffix.
        mod_time: Modification timestamp string.
    """
    title: str
    description: str
    path: str
    data_path: str
    mod_time: str

    @property
    def is_group(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "path": self.path,
            "dataPath": self.data_path,
            "modTime": self.mod_time,
            "isGroup": False,
        }


@dataclass(frozen=True)
class StubPage:
    """
    Front-matter-only markdown file.

    Present in the tree for its title and description but has no URL
    and never appears in the flat index.
    """
    title: str
    description: str
    data_path: str

    @property
    def path(self) -> Optional[str]:
        return None

    @property
    def mod_time(self) -> Optional[str]:
        return None

    @property
    def is_group(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "dataPath": self.data_path,
            "isGroup": False,
        }


@dataclass(frozen=True)
class GroupNode:
    """
    Directory node.

    A directory holding an 'index.md' adopts that page's fields. Without
    one, only the title (directory name) and children are set.

    Attributes:
        title: Display title.
        children: Sorted child nodes.
        description: Adopted index description, if any.
        data_path: Adopted index data path, if any.
        path: Adopted index URL path, if the index has body content.
        mod_time: Adopted index timestamp, if the index has body content.
    """
    title: str
    children: Tuple["NavNode", ...] = ()
    description: Optional[str] = None
    data_path: Optional[str] = None
    path: Optional[str] = None
    mod_time: Optional[str] = None

    @property
    def is_group(self) -> bool:
        return len(self.children) > 0

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"title": self.title}
        if self.description is not None:
            out["description"] = self.description
        if self.path is not None:
            out["path"] = self.path
        if self.data_path is not None:
            out["dataPath"] = self.data_path
        if self.mod_time is not None:
            out["modTime"] = self.mod_time
        out["isGroup"] = self.is_group
        out["children"] = [child.to_dict() for child in self.children]
        return out


PageNode = Union[FullPage, StubPage]
NavNode = Union[FullPage, StubPage, GroupNode]

# -----------------------------------------------------------------------------
# FLAT INDEX
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlatEntry:
    """Lookup entry for a single reachable URL path."""
    title: str
    description: str
    path: str
    data_path: Optional[str]
    mod_time: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "path": self.path,
            "dataPath": self.data_path,
            "modTime": self.mod_time,
        }


FlatIndex = Dict[str, FlatEntry]
