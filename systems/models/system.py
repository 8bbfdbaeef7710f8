"""
System data model.

A System is either an OS pinned to a channel or a named resource (such as
an image), never both. Systems convert to and from series strings so they
can travel through fields that historically held a series name:

    focal
    system#os=ubuntu#channel=20.04/edge
    system#resource=myimage
"""

import re
from typing import Any, Dict

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from systems.errors import ChannelError, NotValidError
from systems.engine.parser import parse as parse_channel
from systems.models.base import Base
from systems.models.channel import Channel
from systems.store.builtin import VALID_OS


SYSTEM_PREFIX = "system"

# Matches the k=v properties of a system series string
_SERIES_PROPERTY = re.compile(r"#(os|channel|resource)=([^#]+)")


class System(BaseModel):
    """An OS/channel pair or a resource."""
    os: str = Field("", description="OS name, set together with channel")
    channel: Channel = Field(default_factory=Channel, description="Normalized channel")
    resource: str = Field("", description="Resource name, exclusive with os/channel")

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if not self.os:
            data.pop("os", None)
        if self.channel.is_empty:
            data.pop("channel", None)
        if not self.resource:
            data.pop("resource", None)
        return data

    @classmethod
    def from_base(cls, base: Base) -> "System":
        return cls(os=base.name, channel=base.channel)

    def validate(self) -> None:
        """
        Check the system is either os+channel or resource.

        Raises:
            NotValidError: With the reason the system is invalid
        """
        if not self.os and not self.resource:
            raise NotValidError("one of os or resource must be specified")

        if self.os:
            if self.resource:
                raise NotValidError("resource cannot be specified with os")
            if self.os not in VALID_OS:
                raise NotValidError(f'os "{self.os}"')
            if self.channel.is_empty:
                raise NotValidError("missing channel")

        if self.resource and not self.channel.is_empty:
            raise NotValidError("channel cannot be specified with resource")

    def __str__(self) -> str:
        """Legacy series name when one is registered, otherwise a system series string."""
        from systems.store.registry import SYSTEM_REGISTRY

        series = SYSTEM_REGISTRY.reverse_lookup(self)
        if series is not None:
            return series

        result = SYSTEM_PREFIX
        if self.os:
            result += f"#os={self.os}"
        if not self.channel.is_empty:
            result += f"#channel={self.channel}"
        if self.resource:
            result += f"#resource={self.resource}"
        return result

    @classmethod
    def parse(cls, value: str) -> "System":
        """
        Parse a legacy series like "focal" or a system series string like
        "system#os=ubuntu#channel=18.04#resource=imagename".

        Raises:
            NotValidError: If the string is unsupported or malformed, or the
                parsed system does not validate
        """
        from systems.store.registry import SYSTEM_REGISTRY

        if not value.startswith(SYSTEM_PREFIX):
            system = SYSTEM_REGISTRY.lookup(value)
            if system is None:
                raise NotValidError(f'series "{value}"')
            return system

        props = value[len(SYSTEM_PREFIX):]
        matches = list(_SERIES_PROPERTY.finditer(props))
        if not matches:
            raise NotValidError(f'invalid system series string "{value}"')

        matched = 0
        fields: Dict[str, Any] = {}
        for m in matches:
            matched += len(m.group(0))
            key, prop = m.group(1), m.group(2)
            if key == "channel":
                try:
                    fields["channel"] = parse_channel(prop)
                except ChannelError as e:
                    raise NotValidError(f'invalid channel "{prop}" in system series string "{value}": {e}') from e
            else:
                fields[key] = prop

        if matched != len(props):
            raise NotValidError(f'system series string "{value}"')

        system = cls(**fields)
        try:
            system.validate()
        except NotValidError as e:
            raise NotValidError(f'invalid system series string "{value}": {e.reason}') from e
        return system
