"""Data models for ripbullets."""

from ripbullets.models.block import Block
from ripbullets.models.config import Config, LogseqConfig, TransformOptions

__all__ = ["Block", "Config", "LogseqConfig", "TransformOptions"]
