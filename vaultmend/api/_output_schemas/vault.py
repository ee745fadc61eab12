"""Output schemas for vault commands."""

from pydantic import BaseModel, Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class OccurrenceOutput(BaseModel):
    source_file: str = Field(..., description="Referencing document, relative to the vault root")
    line_number: int = Field(..., ge=1, description="1-based line of the reference")


class MissingTargetOutput(BaseModel):
    target: str = Field(..., description="Link target exactly as written inside [[...]]")
    file: str = Field(..., description="Document that would satisfy the link, relative to the vault root")
    occurrences: list[OccurrenceOutput] = Field(..., description="Every place the target is referenced")


class VaultCheckOutput(BaseOutputSchema):
    """Output schema for vault check command.

    Output structure:
    - root: str - vault root that was scanned, empty string if none was resolved
    - documents_scanned: int - number of documents read
    - links_found: int - number of distinct link targets
    - missing_count: int - number of targets with no document
    - missing: list - one entry per missing target with its occurrences
    - duplicates: dict[str, list[str]] - basenames shared by several documents
    - success: bool - whether the scan completed
    """

    root: str = Field(..., description="Vault root that was scanned")
    documents_scanned: int = Field(..., description="Number of documents read")
    links_found: int = Field(..., description="Number of distinct link targets")
    missing_count: int = Field(..., description="Number of link targets with no document")
    missing: list[MissingTargetOutput] = Field(..., description="Missing targets with their occurrences")
    duplicates: dict[str, list[str]] = Field(..., description="Basenames shared by more than one document")
    success: bool = Field(..., description="Whether the scan completed")


class VaultCreateOutput(BaseOutputSchema):
    """Output schema for vault create command."""

    root: str = Field(..., description="Vault root that was scanned")
    missing_count: int = Field(..., description="Number of link targets with no document")
    created: list[str] = Field(..., description="Documents created (or that would be created on a dry run)")
    skipped: list[str] = Field(..., description="Documents that already existed and were left untouched")
    dry_run: bool = Field(..., description="Whether the filesystem was left unchanged")
    success: bool = Field(..., description="Whether every missing document is in place")


schema_registry.register_output_schema("vault", "check", VaultCheckOutput)
schema_registry.register_output_schema("vault", "create", VaultCreateOutput)
