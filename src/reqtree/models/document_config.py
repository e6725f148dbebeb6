"""Document descriptor models.

A descriptor (``.doorstop.yml``) sits at the top of each document
directory::

    settings:
      digits: 3
      parent: REQ
      prefix: TUT
      sep: ''
    attributes:
      publish:
        - CUSTOM-ATTRIB
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from reqtree.config.validator import flatten_pydantic_errors
from reqtree.lib.errors import FormatError
from reqtree.lib.yaml_reader import read_yaml_mapping


class DocumentSettings(BaseModel):
    """Numbering and linking settings of a document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    digits: int = Field(..., description="Digits in generated item numbers")
    parent: str | None = Field(None, description="Prefix of the parent document")
    prefix: str = Field(..., description="Prefix of item file names and tree key")
    sep: str = Field(..., description="Separator between prefix and number")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Ensure the prefix is not empty; it would match every item file."""
        if not v.strip():
            raise ValueError("prefix must be non-empty")
        return v

    @field_validator("sep", mode="before")
    @classmethod
    def default_null_sep(cls, v: object) -> object:
        """Accept ``sep:`` with no value as an empty separator."""
        return "" if v is None else v


class DocumentAttributes(BaseModel):
    """Optional publishing attributes of a document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    publish: list[str] | None = Field(
        None, description="Custom item attributes to include when publishing"
    )


class DocumentConfig(BaseModel):
    """Content of a document descriptor file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    settings: DocumentSettings
    attributes: DocumentAttributes | None = None

    @classmethod
    def load(cls, file_path: str | Path) -> "DocumentConfig":
        """Load a descriptor file.

        Raises:
            ReadError: If the file cannot be read
            FormatError: If the content is not a valid descriptor
        """
        content = read_yaml_mapping(file_path)
        try:
            return cls.model_validate(content)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise FormatError(
                file_path, f"invalid document descriptor:\n{error_text}"
            ) from e
