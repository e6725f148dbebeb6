"""Pytest configuration and shared fixtures for reqtree tests."""

import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def fixture_dir() -> Path:
    """Get path to test fixtures directory.

    Returns:
        Path to tests/fixtures directory
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def reqs_dir(fixture_dir: Path) -> Path:
    """Sample tree: REQ at the top, TUT and EXT below it, plus a hidden HID.

    Returns:
        Path to tests/fixtures/reqs
    """
    return fixture_dir / "reqs"


@pytest.fixture
def write_document() -> Callable[..., Path]:
    """Return a helper that writes a document descriptor and its items.

    The helper signature is ``(directory, prefix, parent=None, items=None)``
    where ``items`` maps uid to the item's YAML content. It returns the
    descriptor path.
    """

    def _write(
        directory: Path,
        prefix: str,
        parent: str | None = None,
        items: dict[str, dict[str, Any]] | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        descriptor = directory / ".doorstop.yml"
        descriptor.write_text(
            yaml.dump(
                {
                    "settings": {
                        "digits": 3,
                        "parent": parent,
                        "prefix": prefix,
                        "sep": "",
                    }
                }
            )
        )
        for uid, content in (items or {}).items():
            (directory / f"{uid}.yml").write_text(yaml.dump(content))
        return descriptor

    return _write
