"""Document tree assembly.

Every document descriptor found below a directory is loaded, indexed by
prefix, and linked to the document its ``parent`` setting names. The
result is a single tree: exactly one document without a parent, every
other document reachable from it.

The prefix index is shared by all nodes, so any node can reach any other
document in one lookup::

    root = DocumentTree.load("reqs")
    tutorial = root["TUT"]
    for node, depth in root.walk():
        print("  " * depth + node.prefix)
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from reqtree.config.settings import LoadSettings
from reqtree.core.document import Document
from reqtree.lib.errors import (
    AmbiguousRootError,
    CyclicParentError,
    DanglingParentError,
    DiscoveryError,
)
from reqtree.lib.file_walker import is_document_descriptor, is_hidden_dir, walk_files
from reqtree.lib.logging_config import get_logger

logger = get_logger(__name__)


class DocumentTree:
    """A node of the document tree.

    Attributes:
        document: The document held by this node
        children: Child nodes, in discovery order
    """

    def __init__(
        self, document: Document, prefix_index: Mapping[str, "DocumentTree"]
    ) -> None:
        self.document = document
        self.children: list[DocumentTree] = []
        self._prefix_index = prefix_index

    def add_child(self, child: "DocumentTree") -> None:
        """Append a child node."""
        self.children.append(child)

    @property
    def prefix(self) -> str:
        return self.document.prefix

    @property
    def prefix_index(self) -> Mapping[str, "DocumentTree"]:
        """Read-only prefix to node mapping covering the whole tree."""
        return self._prefix_index

    def find(self, prefix: str) -> "DocumentTree | None":
        """Return the node of the document with ``prefix``, or None."""
        return self._prefix_index.get(prefix)

    def __getitem__(self, prefix: str) -> "DocumentTree":
        return self._prefix_index[prefix]

    def parent_node(self) -> "DocumentTree | None":
        """Return the parent node, or None for the root."""
        parent = self.document.parent
        return None if parent is None else self._prefix_index[parent]

    def walk(self, depth: int = 0) -> Iterator[tuple["DocumentTree", int]]:
        """Yield ``(node, depth)`` for this subtree in pre-order."""
        yield self, depth
        for child in self.children:
            yield from child.walk(depth + 1)

    def __repr__(self) -> str:
        return f"DocumentTree(prefix={self.prefix!r}, children={len(self.children)})"

    @classmethod
    def load(
        cls, root_directory: str | Path, settings: LoadSettings | None = None
    ) -> "DocumentTree":
        """Load every document below ``root_directory`` into one tree.

        Args:
            root_directory: Directory to search for document descriptors
            settings: File naming conventions, defaults to ``LoadSettings()``

        Returns:
            The root node

        Raises:
            DiscoveryError: If no descriptor is found
            ReadError: If a descriptor or item file cannot be read
            FormatError: If a descriptor or item file is malformed
            NamingError: If an item path has no usable base name
            DanglingParentError: If a parent prefix matches no document
            CyclicParentError: If parent references form a loop
            AmbiguousRootError: If more than one document has no parent
        """
        settings = settings or LoadSettings()
        descriptors = find_descriptors(root_directory, settings)
        if not descriptors:
            raise DiscoveryError(root_directory, settings.descriptor_name)

        logger.debug(f"Found {len(descriptors)} documents below {root_directory}")
        index = _build_prefix_index(descriptors, settings)
        root = _link_documents(index)
        logger.debug(f"Loaded document tree rooted at {root.prefix}")
        return root


def find_descriptors(
    root_directory: str | Path, settings: LoadSettings | None = None
) -> list[Path]:
    """Find document descriptor files, skipping hidden directories.

    Args:
        root_directory: Directory to search recursively
        settings: File naming conventions, defaults to ``LoadSettings()``

    Returns:
        Sorted descriptor paths; empty if the directory does not exist
    """
    settings = settings or LoadSettings()
    return walk_files(
        root_directory,
        lambda p: is_document_descriptor(p, settings.descriptor_name),
        skip_dir=lambda p: is_hidden_dir(p, settings.hidden_marker),
    )


def _build_prefix_index(
    descriptors: list[Path], settings: LoadSettings
) -> dict[str, DocumentTree]:
    index: dict[str, DocumentTree] = {}
    # Every node shares one read-only view of the index being built
    view = MappingProxyType(index)

    for path in descriptors:
        document = Document.load(path, settings)
        previous = index.get(document.prefix)
        if previous is not None:
            # TODO: make this a hard error once existing trees are checked
            # for colliding prefixes
            logger.warning(
                f"Prefix '{document.prefix}' is used by both "
                f"{previous.document.root_path} and {path}; "
                f"keeping {path}"
            )
        index[document.prefix] = DocumentTree(document, view)

    return index


def _link_documents(index: dict[str, DocumentTree]) -> DocumentTree:
    roots: list[DocumentTree] = []

    for prefix, node in index.items():
        parent = node.document.parent
        if parent is None:
            roots.append(node)
        elif parent == prefix:
            raise CyclicParentError([prefix], "document names itself as parent")
        elif parent not in index:
            raise DanglingParentError(prefix, parent, node.document.root_path)
        else:
            index[parent].add_child(node)

    if len(roots) > 1:
        raise AmbiguousRootError(node.prefix for node in roots)
    if not roots:
        raise CyclicParentError(
            index, "every document has a parent, so no root document exists"
        )

    root = roots[0]
    reachable = {node.prefix for node, _ in root.walk()}
    stranded = [prefix for prefix in index if prefix not in reachable]
    if stranded:
        raise CyclicParentError(
            stranded, f"documents are not reachable from root '{root.prefix}'"
        )
    return root
