"""Data models for the systems package."""

from systems.models.channel import (
    Channel,
    EMPTY_CHANNEL,
    LATEST_TRACK,
    Match,
    Risk,
)
from systems.models.base import Base
from systems.models.system import System

__all__ = [
    # Channel models
    "Channel",
    "EMPTY_CHANNEL",
    "LATEST_TRACK",
    "Match",
    "Risk",
    # Base/System models
    "Base",
    "System",
]
