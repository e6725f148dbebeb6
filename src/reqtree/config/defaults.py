"""Default naming conventions for reqtree document layouts."""

# Per-document configuration file
DEFAULT_DESCRIPTOR_NAME = ".doorstop.yml"

# Extension of item files; the base name before it is the item uid
DEFAULT_ITEM_EXTENSION = ".yml"

# Directories whose name starts with this marker are never searched
DEFAULT_HIDDEN_MARKER = "."

# Outline level of an item file that does not declare one
DEFAULT_LEVEL = "1"

DEFAULT_LOAD_SETTINGS: dict[str, str] = {
    "descriptor_name": DEFAULT_DESCRIPTOR_NAME,
    "item_extension": DEFAULT_ITEM_EXTENSION,
    "hidden_marker": DEFAULT_HIDDEN_MARKER,
}
