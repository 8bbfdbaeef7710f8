"""
Systems - release channel grammar and OS base descriptors.

This package provides tools for:
- Parsing and normalizing channels (track/risk/branch)
- Resolving channel updates, optionally against a pinned track
- Matching a requested channel against a candidate
- Validating Base (OS + channel) and System (OS + channel, or resource)
  descriptors and converting them to and from legacy series names
"""

__version__ = "0.1.0"

from systems.errors import (
    ChannelError,
    EmptyChannelError,
    TooManyComponentsError,
    InvalidRiskError,
    InvalidTrackError,
    InvalidBranchError,
    InvalidChannelError,
    InvalidPinnedTrackError,
    PinnedTrackSwitchError,
    NotValidError,
    DuplicateSeriesError,
)
from systems.models import Base, Channel, EMPTY_CHANNEL, Match, Risk, System
from systems.engine import full, must_parse, parse, parse_verbatim, resolve, resolve_pinned
from systems.store.registry import BASE_REGISTRY, SYSTEM_REGISTRY, SeriesRegistry

__all__ = [
    "__version__",
    # Errors
    "ChannelError",
    "EmptyChannelError",
    "TooManyComponentsError",
    "InvalidRiskError",
    "InvalidTrackError",
    "InvalidBranchError",
    "InvalidChannelError",
    "InvalidPinnedTrackError",
    "PinnedTrackSwitchError",
    "NotValidError",
    "DuplicateSeriesError",
    # Models
    "Base",
    "Channel",
    "EMPTY_CHANNEL",
    "Match",
    "Risk",
    "System",
    # Series registries
    "BASE_REGISTRY",
    "SYSTEM_REGISTRY",
    "SeriesRegistry",
    # Channel grammar
    "full",
    "must_parse",
    "parse",
    "parse_verbatim",
    "resolve",
    "resolve_pinned",
]
