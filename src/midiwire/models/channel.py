"""Channel voice messages."""

from __future__ import annotations

from typing import ClassVar

from ..codec.raw import Command
from .base import ChannelVoice
from .fields import DataByte


class NoteOn(ChannelVoice):
    """Note On: key pressed.

    A NoteOn with velocity 0 is valid to build and encode, but decodes as
    NoteOff per the MIDI convention.
    """

    command: ClassVar[int] = Command.NOTE_ON

    pitch: DataByte
    velocity: DataByte

    def data_bytes(self) -> tuple[int, int]:
        return self.pitch, self.velocity


class NoteOff(ChannelVoice):
    """Note Off: key released."""

    command: ClassVar[int] = Command.NOTE_OFF

    pitch: DataByte
    velocity: DataByte

    def data_bytes(self) -> tuple[int, int]:
        return self.pitch, self.velocity


class ControlChange(ChannelVoice):
    """Control Change: controller ``num`` set to ``value``."""

    command: ClassVar[int] = Command.CONTROL_CHANGE

    num: DataByte
    value: DataByte

    def data_bytes(self) -> tuple[int, int]:
        return self.num, self.value


class ProgramChange(ChannelVoice):
    """Program Change: select ``patch`` on the channel."""

    command: ClassVar[int] = Command.PROGRAM_CHANGE

    patch: DataByte

    def data_bytes(self) -> tuple[int, int]:
        # second data byte is unused by receivers
        return self.patch, 0
