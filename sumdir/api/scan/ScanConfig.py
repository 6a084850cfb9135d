"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .sniff_content import DEFAULT_SNIFF_BYTES


class ScanConfig(BaseModel):
    """Scanner tuning."""

    model_config = ConfigDict(extra="forbid")

    sniff_bytes: int = Field(
        DEFAULT_SNIFF_BYTES,
        ge=512,
        le=1024 * 1024,
        description="Maximum number of leading bytes read from each file for content detection",
    )
