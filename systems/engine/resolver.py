"""
Channel Resolver - apply a (possibly partial) channel update.

A risk-only or risk/branch update keeps the current track; anything that
names a track replaces the channel outright. With a pinned track, updates
may not move to another track.
"""

from systems.errors import InvalidPinnedTrackError, PinnedTrackSwitchError
from systems.engine.parser import parse_verbatim
from systems.models.channel import Risk


def _starts_with_risk(channel: str) -> bool:
    return Risk.is_known(channel.split("/")[0])


def resolve(current: str, new: str) -> str:
    """
    Resolve new with respect to current.

    Args:
        current: The channel in effect, may be empty
        new: The requested channel, may be empty or partial

    Returns:
        The effective channel string

    Raises:
        ChannelError: If both are set and current does not parse
    """
    if new == "":
        return current
    if current == "":
        return new
    channel = parse_verbatim(current)
    if _starts_with_risk(new) and channel.track:
        return f"{channel.track}/{new}"
    return new


def resolve_pinned(track: str, new: str) -> str:
    """
    Resolve new with respect to a pinned track.

    new may be risk/branch only, or name the pinned track itself.

    Raises:
        InvalidPinnedTrackError: If track is not a bare track name
        PinnedTrackSwitchError: If new names a different track
    """
    if track == "":
        return new
    try:
        pinned = parse_verbatim(track)
    except ValueError as e:
        raise InvalidPinnedTrackError(track) from e
    if not pinned.verbatim_track_only():
        raise InvalidPinnedTrackError(track)
    if new == "":
        return track

    prefix = f"{pinned.track}/"
    if _starts_with_risk(new):
        return prefix + new
    if new != track and not new.startswith(prefix):
        raise PinnedTrackSwitchError(track, new)
    return new
