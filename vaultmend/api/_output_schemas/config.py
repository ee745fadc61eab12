"""Output schemas for config commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
