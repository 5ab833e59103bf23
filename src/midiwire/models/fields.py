"""Field type helpers and constrained aliases for MIDI message fields.

The aliases carry their bounds as Pydantic metadata, so out-of-range values
raise ``ValidationError`` when a message is constructed.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.fields import SMPTE_MAX, UINT24_MAX


def BoundedInt(*, ge: int, le: int, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() that sets both
    ge= and le= constraints.

    Example:
        >>> class Message(BaseMessage):
        ...     channel: Annotated[int, BoundedInt(ge=0, le=15)]
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


Channel = Annotated[int, BoundedInt(ge=0, le=15)]
"""Zero-indexed MIDI channel."""

DataByte = Annotated[int, BoundedInt(ge=0, le=127)]
"""7-bit data value: pitch, velocity, controller number/value, program."""

UnsignedByte = Annotated[int, BoundedInt(ge=0, le=255)]

SignedByte = Annotated[int, BoundedInt(ge=-128, le=127)]

UInt24 = Annotated[int, BoundedInt(ge=0, le=UINT24_MAX)]

SMPTECode = Annotated[int, BoundedInt(ge=0, le=SMPTE_MAX)]
"""Packed 40-bit SMPTE offset."""
