"""
Base data model.

A Base is an operating system pinned to a channel, e.g. ubuntu on
20.04/stable. Bases are what artifacts declare they can be installed on.
"""

from pydantic import BaseModel, Field

from systems.errors import ChannelError, NotValidError
from systems.engine.parser import parse as parse_channel
from systems.models.channel import Channel
from systems.store.builtin import VALID_OS


class Base(BaseModel):
    """An OS name and a normalized channel. Both are required."""
    name: str = Field("", description="OS name, e.g. ubuntu")
    channel: Channel = Field(default_factory=Channel, description="Normalized channel")

    model_config = {"frozen": True}

    def validate(self) -> None:
        """
        Check the base is complete.

        Raises:
            NotValidError: If the name is missing or unknown, or the channel
                is missing or not normalized
        """
        if not self.name:
            raise NotValidError("name")
        if self.name not in VALID_OS:
            raise NotValidError(f'os "{self.name}"')
        if self.channel.is_empty:
            raise NotValidError("channel")
        if self.channel != self.channel.clean():
            raise NotValidError(f'unnormalized channel "{self.channel.name}"')

    def __str__(self) -> str:
        """Legacy series name when one is registered, otherwise os/channel."""
        from systems.store.registry import BASE_REGISTRY

        series = BASE_REGISTRY.reverse_lookup(self)
        if series is not None:
            return series
        if self.channel.is_empty:
            return self.name
        return f"{self.name}/{self.channel}"

    @classmethod
    def parse(cls, value: str) -> "Base":
        """
        Parse a legacy series name ("focal") or an os/channel string
        ("ubuntu/20.04/edge").

        Raises:
            NotValidError: If the string does not describe a valid base
        """
        from systems.store.registry import BASE_REGISTRY

        base = BASE_REGISTRY.lookup(value)
        if base is not None:
            return base
        return cls.from_string(value)

    @classmethod
    def from_string(cls, value: str) -> "Base":
        """Parse an os/channel string, ignoring legacy series names."""
        name, _, channel_str = value.partition("/")
        if name not in VALID_OS:
            raise NotValidError(f'series "{value}"')

        channel = Channel()
        if channel_str:
            try:
                channel = parse_channel(channel_str)
            except ChannelError as e:
                raise NotValidError(f'invalid base string "{value}": {e}') from e

        base = cls(name=name, channel=channel)
        try:
            base.validate()
        except NotValidError as e:
            raise NotValidError(f'invalid base string "{value}": {e.reason}') from e
        return base
