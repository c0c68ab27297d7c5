"""Pydantic models describing pipeline progress and results."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class PipelineStage(str, Enum):
    """Combine pipeline states."""

    START = "start"
    LOADED = "loaded"
    FORMATS_VALIDATED = "formats_validated"
    RESIZED = "resized"
    INTERLEAVED = "interleaved"
    SAVED = "saved"
    FAILED = "failed"


class CombineResult(BaseModel):
    """Outcome of a successful combine run."""

    output: str = Field(..., description="Path the combined image was written to")
    format: str = Field(..., description="Pillow format identifier used to encode")
    width: int = Field(..., ge=1, description="Output width in pixels")
    height: int = Field(..., ge=1, description="Output height in pixels")
    resized: Literal["image1", "image2"] | None = Field(
        default=None, description="Which input was resized, if any"
    )
    stages: list[PipelineStage] = Field(
        default_factory=list, description="Stages visited, in order"
    )
