"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, adschema.toml only contains
overrides. No section is required.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    report_ignored_fields: bool = True
    coerce_numeric_strings: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)


class SchemaConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
