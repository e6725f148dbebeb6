"""YAML reading with error translation for reqtree files."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from reqtree.lib.errors import FormatError, ReadError

_STR_TAG = "tag:yaml.org,2002:str"
_NUMBER_TAGS = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})


class TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps numeric values of selected keys as source text.

    ``level: 1.10`` resolves to the float ``1.1`` with a plain SafeLoader; with
    ``level`` in ``text_keys`` it stays the string ``"1.10"``.
    """

    def __init__(self, stream: str, text_keys: Iterable[str] = ()) -> None:
        super().__init__(stream)
        self.text_keys = frozenset(text_keys)

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Any:
        for key_node, value_node in node.value:
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key_node.value in self.text_keys
                and isinstance(value_node, yaml.ScalarNode)
                and value_node.tag in _NUMBER_TAGS
            ):
                value_node.tag = _STR_TAG
        return super().construct_mapping(node, deep=deep)


def read_yaml_mapping(
    file_path: str | Path, text_keys: Iterable[str] = ()
) -> dict[str, Any]:
    """Parse a YAML file whose top-level value must be a mapping.

    Args:
        file_path: Path to the YAML file to parse
        text_keys: Keys whose numeric values are kept as their source text

    Returns:
        Parsed mapping, or an empty dict if the file is empty

    Raises:
        ReadError: If the file cannot be opened or decoded
        FormatError: If YAML parsing fails or the content is not a mapping
    """
    path = Path(file_path)

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReadError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise ReadError(path, f"File is not valid UTF-8: {e}") from e

    loader = TextScalarLoader(raw_text, text_keys)
    try:
        content = loader.get_single_data()
    except yaml.YAMLError as e:
        raise FormatError(path, f"failed to parse YAML: {e}") from e
    finally:
        loader.dispose()

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise FormatError(
            path,
            f"expected a YAML mapping at the top level, got {type(content).__name__}",
        )
    return content
