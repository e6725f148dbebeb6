"""Load settings for reqtree.

Settings control the on-disk naming conventions used while discovering
documents and items. Values come from, in order of precedence:

1. Explicit keyword arguments
2. Environment variables (``REQTREE_*``)
3. Defaults from ``reqtree.config.defaults``
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reqtree.config.defaults import DEFAULT_LOAD_SETTINGS
from reqtree.lib.logging_config import get_logger

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "descriptor_name": "REQTREE_DESCRIPTOR_NAME",
    "item_extension": "REQTREE_ITEM_EXTENSION",
    "hidden_marker": "REQTREE_HIDDEN_MARKER",
}


class LoadSettings(BaseModel):
    """File naming conventions used by document and tree loading."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    descriptor_name: str = Field(
        default=DEFAULT_LOAD_SETTINGS["descriptor_name"],
        description="File name of the per-document descriptor",
    )
    item_extension: str = Field(
        default=DEFAULT_LOAD_SETTINGS["item_extension"],
        description="Extension of item files, including the leading dot",
    )
    hidden_marker: str = Field(
        default=DEFAULT_LOAD_SETTINGS["hidden_marker"],
        description="Directories starting with this marker are skipped",
    )

    @field_validator("descriptor_name", "item_extension", "hidden_marker")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Reject empty naming conventions, they would match every file."""
        if not v.strip():
            raise ValueError("must be non-empty")
        return v

    @classmethod
    def from_env(
        cls,
        env_vars: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "LoadSettings":
        """Build settings from environment variables and explicit overrides.

        Args:
            env_vars: Environment mapping, defaults to ``os.environ``
            **overrides: Field values that win over the environment

        Returns:
            LoadSettings instance
        """
        if env_vars is None:
            env_vars = os.environ

        values: dict[str, Any] = {}
        for field_name, env_var_name in ENV_VAR_MAP.items():
            if env_var_name in env_vars:
                logger.debug(f"Using {env_var_name} for {field_name}")
                values[field_name] = env_vars[env_var_name]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
