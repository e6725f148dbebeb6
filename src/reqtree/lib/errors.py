"""Custom exception hierarchy for reqtree loading operations."""

from collections.abc import Iterable
from pathlib import Path


class ReqTreeError(Exception):
    """Base exception for all reqtree errors.

    All reqtree-specific exceptions inherit from this class, enabling
    centralized exception handling in callers and in the CLI.
    """

    pass


class LoadError(ReqTreeError):
    """Base exception for failures while loading items, documents or trees.

    Loading is all-or-nothing: the first LoadError aborts the whole load.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        """Initialize LoadError with a message.

        Args:
            message: Descriptive error message
        """
        self.message = message
        super().__init__(message)


class ReadError(LoadError):
    """Exception raised when a file cannot be opened or read.

    Attributes:
        path: Path to the unreadable file
        message: Human-readable error message
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        """Initialize ReadError with path and optional reason.

        Args:
            path: Path to the file that could not be read
            reason: Underlying reason, usually the OSError text
        """
        self.path = str(path)
        message = f"Cannot read file: {self.path}"
        if reason:
            message += f"\n{reason}"
        super().__init__(message)


class FormatError(LoadError):
    """Exception raised when file content does not match the expected shape.

    Attributes:
        path: Path to the malformed file
        message: Human-readable error message
    """

    def __init__(self, path: str | Path, message: str) -> None:
        """Initialize FormatError with path and message.

        Args:
            path: Path to the file with malformed content
            message: Description of what is wrong with the content
        """
        self.path = str(path)
        super().__init__(f"Invalid content in {self.path}: {message}")


class NamingError(LoadError):
    """Exception raised when a path has no usable base name for an identifier.

    Attributes:
        path: The offending path
    """

    def __init__(self, path: str | Path) -> None:
        """Create a naming error for the given path."""
        self.path = str(path)
        super().__init__(f"Cannot derive an item identifier from path '{self.path}'")


class DiscoveryError(LoadError):
    """Exception raised when no document descriptors exist under a root.

    Attributes:
        root: The directory that was searched
    """

    def __init__(self, root: str | Path, descriptor_name: str) -> None:
        """Initialize DiscoveryError with the searched directory.

        Args:
            root: Directory searched for descriptors
            descriptor_name: Descriptor file name that was looked for
        """
        self.root = str(root)
        super().__init__(
            f"No documents found in {self.root}\n"
            f"Expected at least one '{descriptor_name}' file below this directory."
        )


class DanglingParentError(LoadError):
    """Exception raised when a document names a parent prefix nobody owns.

    Attributes:
        prefix: Prefix of the document with the bad reference
        parent: The parent prefix that could not be resolved
        path: Descriptor path of the document with the bad reference
    """

    def __init__(self, prefix: str, parent: str, path: str | Path) -> None:
        """Initialize DanglingParentError with the broken reference.

        Args:
            prefix: Prefix of the child document
            parent: Parent prefix named by the child document
            path: Path to the child document's descriptor
        """
        self.prefix = prefix
        self.parent = parent
        self.path = str(path)
        super().__init__(
            f"Document '{prefix}' ({self.path}) names parent '{parent}', "
            f"but no document with that prefix was found"
        )


class CyclicParentError(LoadError):
    """Exception raised when parent references loop back on themselves.

    Attributes:
        prefixes: Prefixes of the documents caught in the loop
    """

    def __init__(self, prefixes: Iterable[str], detail: str) -> None:
        """Create a cyclic parent error for the given documents."""
        self.prefixes = list(prefixes)
        super().__init__(
            f"Cyclic parent reference between documents "
            f"{', '.join(self.prefixes)}: {detail}"
        )


class AmbiguousRootError(LoadError):
    """Exception raised when more than one document has no parent.

    Attributes:
        prefixes: Prefixes of every root candidate
    """

    def __init__(self, prefixes: Iterable[str]) -> None:
        """Create an ambiguous root error listing the candidates."""
        self.prefixes = list(prefixes)
        super().__init__(
            f"Found {len(self.prefixes)} documents without a parent "
            f"({', '.join(self.prefixes)}); exactly one root document is required"
        )
