"""Record models for reqtree: levels, items and document descriptors."""

from reqtree.models.document_config import (
    DocumentAttributes,
    DocumentConfig,
    DocumentSettings,
)
from reqtree.models.item import Item
from reqtree.models.level import (
    LevelKey,
    LevelRelation,
    RelationKind,
    level_depth,
    level_relation,
    parse_level,
    strip_trailing_zeros,
)

__all__ = [
    "DocumentAttributes",
    "DocumentConfig",
    "DocumentSettings",
    "Item",
    "LevelKey",
    "LevelRelation",
    "RelationKind",
    "level_depth",
    "level_relation",
    "parse_level",
    "strip_trailing_zeros",
]
