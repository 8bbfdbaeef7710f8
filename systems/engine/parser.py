"""
Channel Parser - strict and permissive channel string handling.

Two deliberately different code paths live here:
- parse_verbatim()/parse(): strict, field-specific errors, used for new input
- full(): permissive expansion that tolerates doubled or trailing slashes
  still found in channel strings produced by older store clients
"""

from typing import List, Optional

from systems.errors import (
    EmptyChannelError,
    InvalidBranchError,
    InvalidChannelError,
    InvalidTrackError,
    TooManyComponentsError,
)
from systems.models.channel import Channel, LATEST_TRACK, Risk


MAX_COMPONENTS = 3


def parse_verbatim(value: str) -> Channel:
    """
    Parse a channel string without normalizing it.

    The segment count decides what each segment is:
    - 1: a risk if it names one, otherwise a track
    - 2: risk/branch if the first names a risk, otherwise track/risk
    - 3: track/risk/branch

    parse() should be used in most cases.

    Args:
        value: The channel string

    Returns:
        A Channel with only the written fields set and no name

    Raises:
        EmptyChannelError, TooManyComponentsError, InvalidRiskError,
        InvalidTrackError, InvalidBranchError
    """
    if value == "":
        raise EmptyChannelError()

    parts = value.split("/")
    track: Optional[str] = None
    risk: Optional[str] = None
    branch: Optional[str] = None

    if len(parts) > MAX_COMPONENTS:
        raise TooManyComponentsError(value)
    elif len(parts) == 3:
        track, risk, branch = parts
    elif len(parts) == 2:
        if Risk.is_known(parts[0]):
            risk, branch = parts
        else:
            track, risk = parts
    elif Risk.is_known(parts[0]):
        risk = parts[0]
    else:
        track = parts[0]

    fields = {}
    if risk is not None:
        fields["risk"] = Risk.parse(risk, channel=value)
    if track is not None:
        if track == "":
            raise InvalidTrackError(value)
        fields["track"] = track
    if branch is not None:
        if branch == "":
            raise InvalidBranchError(value)
        fields["branch"] = branch

    return Channel(**fields)


def parse(value: str) -> Channel:
    """Parse a channel string and return it with track, risk and name normalized."""
    return parse_verbatim(value).clean()


def must_parse(value: str) -> Channel:
    """Parse a channel string that is known to be valid, e.g. in constant tables."""
    return parse(value)


def full(value: str) -> str:
    """
    Expand a channel string so it always carries a track and a risk.

    Empty segments are dropped first, so "//stable//" expands like "stable".
    Only the component count is checked; risk names are only used to decide
    where the default track goes.

    Examples:
        "stable"        -> "latest/stable"
        "1.0"           -> "1.0/stable"
        "candidate/foo" -> "latest/candidate/foo"
        ""              -> ""

    Raises:
        InvalidChannelError: If there are more than three components
    """
    if value == "":
        return ""

    components: List[str] = [c for c in value.split("/") if c]
    if len(components) == 0:
        return ""
    if len(components) == 1:
        if Risk.is_known(components[0]):
            return f"{LATEST_TRACK}/{components[0]}"
        return f"{components[0]}/{Risk.STABLE.value}"
    if len(components) == 2 and Risk.is_known(components[0]):
        return f"{LATEST_TRACK}/" + "/".join(components)
    if len(components) <= MAX_COMPONENTS:
        return "/".join(components)
    raise InvalidChannelError(value)
