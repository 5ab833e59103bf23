"""System-exclusive messages."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ..codec.raw import SysexMessage
from .base import BaseMessage

PREVIEW_BYTES = 8


class SysEx(BaseMessage):
    """Manufacturer-defined payload, without the 0xF0/0xF7 framing.

    Example:
        >>> SysEx(data=[0x7E, 0x7F, 0x09, 0x01])
        SysEx(data = 7e 7f 09 01)
    """

    data: bytes

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value: Any) -> Any:
        if isinstance(value, (bytearray, memoryview, list, tuple)):
            return bytes(value)
        return value

    def __repr__(self) -> str:
        preview = " ".join(f"{b:02x}" for b in self.data[:PREVIEW_BYTES])
        if len(self.data) > PREVIEW_BYTES:
            preview += f"..., size = {len(self.data)}"
        return f"SysEx(data = {preview})"

    def to_raw(self) -> SysexMessage:
        return SysexMessage(self.data)
