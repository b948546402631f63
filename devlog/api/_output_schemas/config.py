"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    config_path: str = Field(..., description="Config file location")
    exists: bool = Field(..., description="Whether the config file exists")
    content: dict[str, Any] = Field(..., description="Effective configuration, empty on error")
    paths: dict[str, str] = Field(..., description="Resolved runtime/state/raw paths, empty on error")


register_output_schema("config", "show", ConfigShowOutput)
