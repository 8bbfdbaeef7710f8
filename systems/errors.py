"""
Error types for the systems package.

Every error raised while parsing or validating channels, bases and systems
is a ValueError, so callers that only care about "bad input" can catch
that. The subclasses let callers tell the failure kinds apart.
"""


class ChannelError(ValueError):
    """Base class for channel parsing and resolution errors."""

    def __init__(self, message: str, channel: str = ""):
        super().__init__(message)
        self.channel = channel


class EmptyChannelError(ChannelError):
    """The channel string was empty."""

    def __init__(self, channel: str = ""):
        super().__init__("channel name cannot be empty", channel)


class TooManyComponentsError(ChannelError):
    """The channel string had more than track/risk/branch."""

    def __init__(self, channel: str):
        super().__init__(f"channel name has too many components: {channel}", channel)


class InvalidRiskError(ChannelError):
    """A risk segment was not one of the known risks."""

    def __init__(self, channel: str):
        super().__init__(f"invalid risk in channel name: {channel}", channel)


class InvalidTrackError(ChannelError):
    def __init__(self, channel: str):
        super().__init__(f"invalid track in channel name: {channel}", channel)


class InvalidBranchError(ChannelError):
    def __init__(self, channel: str):
        super().__init__(f"invalid branch in channel name: {channel}", channel)


class InvalidChannelError(ChannelError):
    """Raised by the permissive full() expansion on too many components."""

    def __init__(self, channel: str):
        super().__init__(f"invalid channel: {channel}", channel)


class InvalidPinnedTrackError(ChannelError):
    """The pinned track was not a bare track name."""

    def __init__(self, track: str):
        super().__init__(f"invalid pinned track: {track}", track)


class PinnedTrackSwitchError(ChannelError):
    """A new channel tried to move away from the pinned track."""

    def __init__(self, track: str, channel: str):
        super().__init__(f"cannot switch pinned track {track} to {channel}", channel)
        self.track = track


class NotValidError(ValueError):
    """A Base or System failed structural validation."""

    def __init__(self, reason: str):
        super().__init__(f"{reason} not valid")
        self.reason = reason


class DuplicateSeriesError(RuntimeError):
    """Two series names map to the same value, or a series is defined twice."""
