"""Requirement item model.

An item is one requirement record stored in its own YAML file. Its uid is
always the file's base name; a ``uid`` or ``id`` key inside the file is
ignored.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from reqtree.config.defaults import DEFAULT_LEVEL
from reqtree.config.validator import flatten_pydantic_errors
from reqtree.lib.errors import FormatError, NamingError
from reqtree.lib.logging_config import get_logger
from reqtree.lib.yaml_reader import read_yaml_mapping
from reqtree.models.level import (
    LevelKey,
    LevelRelation,
    level_depth,
    level_relation,
    parse_level,
)

logger = get_logger(__name__)

# Unquoted numeric levels keep their source text: "1.10" must not become "1.1"
_TEXT_KEYS = ("level",)


class Item(BaseModel):
    """A single requirement record.

    Items are immutable once loaded. Unknown keys written by other tools
    (``links``, ``ref``, ...) are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    uid: str = Field(..., description="Identifier taken from the file base name")
    level: str = Field(
        default=DEFAULT_LEVEL, description="Dotted outline level, e.g. '1.2.0'"
    )
    active: bool | None = Field(None, description="Item is active")
    derived: bool | None = Field(None, description="Item is derived (no parent link)")
    normative: bool | None = Field(None, description="Item is normative")
    reviewed: str | None = Field(None, description="Review stamp")
    header: str | None = Field(None, description="Short heading")
    text: str | None = Field(None, description="Body text")

    @field_validator("level", mode="before")
    @classmethod
    def default_missing_level(cls, v: Any) -> Any:
        """Treat an explicit null level like an absent one."""
        return DEFAULT_LEVEL if v is None else v

    @property
    def level_key(self) -> LevelKey:
        """Parsed level, ordering items in outline order."""
        return parse_level(self.level)

    @property
    def depth(self) -> int:
        """0-based nesting depth; a trailing ``.0`` heading marker is ignored."""
        return level_depth(self.level_key)

    def level_relation(self, other: "Item") -> LevelRelation:
        """Classify the depth of ``other`` relative to this item."""
        return level_relation(self.level_key, other.level_key)

    @classmethod
    def load(cls, file_path: str | Path) -> "Item":
        """Load an item from its YAML file.

        Args:
            file_path: Path to the item file, e.g. ``reqs/REQ001.yml``

        Returns:
            Item whose uid is the file's base name

        Raises:
            NamingError: If the path has no base name to use as uid
            ReadError: If the file cannot be read
            FormatError: If the content is not a valid item mapping
        """
        path = Path(file_path)
        uid = path.stem
        if not uid:
            raise NamingError(path)

        content = read_yaml_mapping(path, text_keys=_TEXT_KEYS)
        try:
            # The file base name always wins over any uid key in the content
            item = cls.model_validate({**content, "uid": uid})
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise FormatError(path, f"invalid item:\n{error_text}") from e

        logger.debug(f"Loaded item {uid} (level {item.level}) from {path}")
        return item
