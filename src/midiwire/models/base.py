"""Base message classes and midiwire-specific Pydantic configuration.

This module provides the BaseMessage class that all MIDI message variants inherit from,
plus the ChannelVoice and MetaMessage groupings.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..codec.raw import MetaEvent, RawMessage, ShortMessage
from .fields import Channel


class BaseMessage(BaseModel):
    """Base class for all MIDI messages.

    Messages are immutable value objects: equality and hashing are structural,
    and invalid field values are rejected at construction with
    ``pydantic.ValidationError``. Fields may be passed positionally in
    declaration order.

    Example:
        >>> NoteOn(3, 60, 90) == NoteOn(channel=3, pitch=60, velocity=90)
        True
    """

    model_config = ConfigDict(
        # Lax validation, so IntEnum fields accept their integer codes
        strict=False,
        # Messages are immutable values
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        field_names = list(type(self).model_fields)
        if len(args) > len(field_names):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(field_names)} positional "
                f"arguments ({len(args)} given)"
            )
        for name, value in zip(field_names, args):
            if name in kwargs:
                raise TypeError(f"{type(self).__name__} got multiple values for argument '{name}'")
            kwargs[name] = value
        super().__init__(**kwargs)

    def __str__(self) -> str:
        return repr(self)

    def to_raw(self) -> RawMessage:
        """Return the raw transport message for this value."""
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        """Return the wire bytes for this value."""
        return self.to_raw().to_bytes()


class ChannelVoice(BaseMessage):
    """A performance message addressed to one of the 16 MIDI channels.

    Subclasses set ``command`` and list their data fields in wire order.
    """

    command: ClassVar[int]

    channel: Channel

    def data_bytes(self) -> tuple[int, int]:
        raise NotImplementedError

    def to_raw(self) -> ShortMessage:
        data1, data2 = self.data_bytes()
        return ShortMessage.create(self.command, self.channel, data1, data2)


class MetaMessage(BaseMessage):
    """A non-performance metadata event identified by a one-byte type code.

    Attributes:
        meta_type: Type code on the wire (not a model field)
        payload_length: Required payload length, or None when variable
    """

    meta_type: ClassVar[int]
    payload_length: ClassVar[int | None] = None

    def encode_payload(self) -> bytes:
        raise NotImplementedError

    @classmethod
    def from_payload(cls, data: bytes) -> MetaMessage:
        """Build the message from a payload of the correct length.

        Raises:
            ValueError: If the payload content is invalid for this type
        """
        raise NotImplementedError

    def to_raw(self) -> MetaEvent:
        return MetaEvent(self.meta_type, self.encode_payload())
