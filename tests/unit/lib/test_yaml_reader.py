"""Tests for YAML reading and error translation."""

from pathlib import Path

import pytest

from reqtree.lib.errors import FormatError, ReadError
from reqtree.lib.yaml_reader import read_yaml_mapping


class TestReadYamlMapping:
    """Tests for read_yaml_mapping()."""

    def test_reads_mapping(self, temp_dir: Path) -> None:
        """Test that a YAML mapping is returned as a dict."""
        path = temp_dir / "doc.yml"
        path.write_text("settings:\n  prefix: REQ\n")

        assert read_yaml_mapping(path) == {"settings": {"prefix": "REQ"}}

    def test_empty_file_is_empty_mapping(self, temp_dir: Path) -> None:
        """Test that an empty file reads as an empty dict."""
        path = temp_dir / "empty.yml"
        path.write_text("")

        assert read_yaml_mapping(str(path)) == {}

    def test_text_keys_keep_numeric_source(self, temp_dir: Path) -> None:
        """Test that only the selected keys keep numbers as written."""
        path = temp_dir / "item.yml"
        path.write_text("level: 1.10\ndigits: 3\nratio: 1.10\n")

        content = read_yaml_mapping(path, text_keys=["level"])

        assert content == {"level": "1.10", "digits": 3, "ratio": 1.1}

    def test_numbers_resolved_without_text_keys(self, temp_dir: Path) -> None:
        """Test that plain reads resolve numbers as usual."""
        path = temp_dir / "item.yml"
        path.write_text("level: 1.10\n")

        assert read_yaml_mapping(path) == {"level": 1.1}

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test that a missing file raises ReadError chained from OSError."""
        with pytest.raises(ReadError) as exc_info:
            read_yaml_mapping(temp_dir / "nope.yml")

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_is_read_error(self, temp_dir: Path) -> None:
        """Test that opening a directory raises ReadError."""
        with pytest.raises(ReadError):
            read_yaml_mapping(temp_dir)

    def test_invalid_utf8_is_read_error(self, temp_dir: Path) -> None:
        """Test that undecodable bytes raise ReadError."""
        path = temp_dir / "latin.yml"
        path.write_bytes(b"text: caf\xe9\n")

        with pytest.raises(ReadError):
            read_yaml_mapping(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test that a YAML syntax error raises FormatError."""
        path = temp_dir / "bad.yml"
        path.write_text("key: 'unterminated\n")

        with pytest.raises(FormatError) as exc_info:
            read_yaml_mapping(path)

        assert str(path) in str(exc_info.value)

    @pytest.mark.parametrize("content", ["- a\n- b\n", "just text\n", "42\n"])
    def test_non_mapping_is_format_error(self, temp_dir: Path, content: str) -> None:
        """Test that scalars and lists are rejected."""
        path = temp_dir / "scalar.yml"
        path.write_text(content)

        with pytest.raises(FormatError):
            read_yaml_mapping(path)
