"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, finset.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, PositiveInt

# --- finset.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    # Upper bound on results the CLI materializes from lazy producers.
    max_materialize: PositiveInt = 4096


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: PositiveInt = 120


class SumTypeConfig(BaseModel):
    """[sumtype] section."""

    model_config = {"frozen": True}

    require_disjoint: bool = False


class FinsetConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    engine: EngineConfig = Field(default_factory=EngineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    sumtype: SumTypeConfig = Field(default_factory=SumTypeConfig)
