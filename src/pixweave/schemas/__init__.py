"""Pydantic schemas for configuration and pipeline status."""

from pixweave.schemas.config import PixweaveConfig
from pixweave.schemas.status import CombineResult, PipelineStage

__all__ = ["PixweaveConfig", "PipelineStage", "CombineResult"]
