"""reqtree - Read doorstop requirement documents into a navigable tree.

reqtree loads a directory of doorstop-style requirement documents: one
``.doorstop.yml`` descriptor per document and one YAML file per item.

Main features:
- Items indexed by uid and in outline (level) order
- Level algebra: depth and relative depth of dotted outline levels
- Documents linked into a single tree through their parent prefixes
- Descriptive errors for dangling, cyclic or ambiguous parent settings
"""

from reqtree.config.settings import LoadSettings
from reqtree.core.document import Document
from reqtree.core.document_tree import DocumentTree
from reqtree.lib.errors import LoadError, ReqTreeError
from reqtree.models.item import Item
from reqtree.models.level import LevelRelation, RelationKind

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Document",
    "DocumentTree",
    "Item",
    "LevelRelation",
    "LoadError",
    "LoadSettings",
    "RelationKind",
    "ReqTreeError",
]
