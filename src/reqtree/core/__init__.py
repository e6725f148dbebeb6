"""Document and document tree loading."""

from reqtree.core.document import Document
from reqtree.core.document_tree import DocumentTree, find_descriptors

__all__ = [
    "Document",
    "DocumentTree",
    "find_descriptors",
]
