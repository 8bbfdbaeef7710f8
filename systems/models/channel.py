"""
Channel data models.

A channel names a release stream as ``[track/]risk[/branch]``, for example
``20.04/stable`` or ``candidate/hotfix``. This module holds the value types;
parsing lives in systems.engine.parser.
"""

from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from systems.errors import InvalidRiskError


# Track name that means "the default track"
LATEST_TRACK = "latest"


class Risk(str, Enum):
    """Stability tier of a release within a track."""
    UNKNOWN = ""
    STABLE = "stable"
    CANDIDATE = "candidate"
    BETA = "beta"
    EDGE = "edge"

    @classmethod
    def is_known(cls, value: str) -> bool:
        """Check whether value names one of the concrete risks."""
        return value in _RISK_LEVELS

    @classmethod
    def parse(cls, value: str, channel: Optional[str] = None) -> "Risk":
        """
        Parse a risk name.

        Args:
            value: The risk segment, matched exactly (case-sensitive)
            channel: The full channel string, used in the error message

        Raises:
            InvalidRiskError: If value is not stable, candidate, beta or edge
        """
        if not cls.is_known(value):
            raise InvalidRiskError(value if channel is None else channel)
        return cls(value)

    @property
    def level(self) -> int:
        """Permissiveness rank: stable < candidate < beta < edge, -1 if unknown."""
        return _RISK_LEVELS.get(self.value, -1)


_RISK_LEVELS: Dict[str, int] = {
    Risk.STABLE.value: 0,
    Risk.CANDIDATE.value: 1,
    Risk.BETA.value: 2,
    Risk.EDGE.value: 3,
}


class Match(BaseModel):
    """Which fields of a candidate channel satisfy a requested channel."""
    track: bool = Field(False, description="Tracks are equal")
    risk: bool = Field(False, description="Candidate is at least as stable as requested")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        """Render as "track:risk", "track", "risk" or ""."""
        matching = []
        if self.track:
            matching.append("track")
        if self.risk:
            matching.append("risk")
        return ":".join(matching)


class Channel(BaseModel):
    """
    A store channel.

    Channels produced by parse() are normalized: risk is never unknown, the
    default track is empty and name is ``[track/]risk[/branch]``. Channels
    produced by parse_verbatim() keep exactly what was written and have no
    name; call clean() to normalize them.
    """
    name: str = Field("", description="Normalized display name")
    track: str = Field("", description="Track, empty for the default track")
    risk: Risk = Field(Risk.UNKNOWN, description="Risk")
    branch: str = Field("", description="Optional branch")

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def omit_empty_branch(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.branch:
            data.pop("branch", None)
        return data

    def __str__(self) -> str:
        return self.name

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_CHANNEL

    def clean(self) -> "Channel":
        """Return a copy with normalized track, risk and name."""
        track = self.track
        risk = self.risk

        if track == LATEST_TRACK:
            track = ""
        if risk == Risk.UNKNOWN:
            risk = Risk.STABLE

        name = risk.value
        if track:
            name = f"{track}/{name}"
        if self.branch:
            name = f"{name}/{self.branch}"

        return Channel(name=name, track=track, risk=risk, branch=self.branch)

    def full(self) -> str:
        """Return the name including the track, "latest" when it is the default."""
        from systems.engine.parser import full

        return full(self.name)

    def verbatim_track_only(self) -> bool:
        """Check whether a verbatim channel holds only a track."""
        return self.track != "" and self.risk == Risk.UNKNOWN and self.branch == ""

    def verbatim_risk_only(self) -> bool:
        """Check whether a verbatim channel holds only a risk."""
        return self.track == "" and self.risk != Risk.UNKNOWN and self.branch == ""

    def match(self, candidate: "Channel") -> Match:
        """
        Compare this (requested) channel against a candidate channel.

        Tracks match on equality. The risk matches when the candidate is at
        least as stable as requested, so requesting edge accepts stable but
        requesting stable does not accept edge. An unknown risk ranks -1 and
        only matches another unknown risk.
        """
        return Match(
            track=self.track == candidate.track,
            risk=self.risk.level >= candidate.risk.level,
        )


EMPTY_CHANNEL = Channel()
