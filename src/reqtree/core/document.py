"""Document loading.

A document is the set of items found below one descriptor file. Items are
indexed twice, by uid and by level, and both indexes always hold the same
items. Several items may share a level; the level index orders them by uid.
"""

from collections import defaultdict
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from reqtree.config.settings import LoadSettings
from reqtree.lib.errors import FormatError
from reqtree.lib.file_walker import is_item_file, walk_files
from reqtree.lib.logging_config import get_logger
from reqtree.models.document_config import DocumentConfig
from reqtree.models.item import Item
from reqtree.models.level import LevelKey, parse_level

logger = get_logger(__name__)

# (level key, uid); unique even when items share a level
LevelIndexKey = tuple[LevelKey, str]


class Document:
    """Items loaded from one descriptor's directory tree.

    Instances are built by ``Document.load`` and are read-only afterwards.

    Attributes:
        config: Parsed descriptor
        root_path: Path of the descriptor file
        settings: File naming conventions the document was loaded with
        items: Items keyed by uid
        items_by_level: Items keyed by ``(level key, uid)``, in ascending
            outline order
    """

    def __init__(
        self,
        config: DocumentConfig,
        root_path: Path,
        items: list[Item] | None = None,
        settings: LoadSettings | None = None,
    ) -> None:
        """Build the document and both of its item indexes.

        Args:
            config: Parsed descriptor
            root_path: Path of the descriptor file
            items: Items belonging to the document
            settings: File naming conventions, defaults to ``LoadSettings()``

        Raises:
            FormatError: If two item files share a uid
        """
        self.config = config
        self.root_path = root_path
        self.settings = settings or LoadSettings()

        by_uid: dict[str, Item] = {}
        uids_by_level: dict[LevelKey, list[str]] = defaultdict(list)
        for item in items or []:
            if item.uid in by_uid:
                raise FormatError(
                    root_path, f"item '{item.uid}' is defined by more than one file"
                )
            by_uid[item.uid] = item
            uids_by_level[item.level_key].append(item.uid)

        for key, uids in uids_by_level.items():
            if len(uids) > 1:
                level = ".".join(str(n) for n in key)
                logger.warning(
                    f"Document {config.settings.prefix}: items "
                    f"{', '.join(sorted(uids))} share level {level}"
                )

        self._items = by_uid
        self._items_by_level = {
            (item.level_key, item.uid): item
            for item in sorted(by_uid.values(), key=lambda i: (i.level_key, i.uid))
        }

    @classmethod
    def load(
        cls, descriptor_path: str | Path, settings: LoadSettings | None = None
    ) -> "Document":
        """Load a document from its descriptor file.

        Item files are searched recursively from the descriptor's directory.
        A single bad item file fails the whole document.

        Args:
            descriptor_path: Path to the ``.doorstop.yml`` descriptor
            settings: File naming conventions, defaults to ``LoadSettings()``

        Returns:
            Fully loaded Document

        Raises:
            ReadError: If the descriptor or an item file cannot be read
            FormatError: If the descriptor or an item file is malformed
            NamingError: If an item path has no usable base name
        """
        settings = settings or LoadSettings()
        path = Path(descriptor_path)
        config = DocumentConfig.load(path)

        item_paths = cls._find_item_files(path, config.settings.prefix, settings)
        logger.debug(
            f"Document {config.settings.prefix}: found {len(item_paths)} "
            f"item files below {path.parent}"
        )
        items = [Item.load(item_path) for item_path in item_paths]
        return cls(config, path, items, settings)

    @staticmethod
    def _find_item_files(
        descriptor_path: Path, prefix: str, settings: LoadSettings
    ) -> list[Path]:
        return walk_files(
            descriptor_path.parent,
            lambda p: is_item_file(p, prefix, settings.item_extension),
        )

    def item_files(self, settings: LoadSettings | None = None) -> list[Path]:
        """Return the item file paths that belong to this document.

        Uses the settings the document was loaded with unless others are given.
        """
        return self._find_item_files(
            self.root_path, self.prefix, settings or self.settings
        )

    @property
    def items(self) -> Mapping[str, Item]:
        return MappingProxyType(self._items)

    @property
    def items_by_level(self) -> Mapping[LevelIndexKey, Item]:
        return MappingProxyType(self._items_by_level)

    def items_at_level(self, level: str) -> list[Item]:
        """Return the items whose level matches ``level``, ordered by uid."""
        key = parse_level(level)
        return [item for (k, _), item in self._items_by_level.items() if k == key]

    @property
    def prefix(self) -> str:
        return self.config.settings.prefix

    @property
    def parent(self) -> str | None:
        """Prefix of the parent document, None for the root document."""
        return self.config.settings.parent

    def find_item(self, uid: str) -> Item | None:
        """Return the item with ``uid``, or None."""
        return self._items.get(uid)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        """Iterate items in outline order."""
        return iter(self._items_by_level.values())

    def __contains__(self, uid: object) -> bool:
        return uid in self._items

    def __repr__(self) -> str:
        return (
            f"Document(prefix={self.prefix!r}, items={len(self)}, "
            f"path={str(self.root_path)!r})"
        )
