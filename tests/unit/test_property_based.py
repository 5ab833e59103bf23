"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from midiwire import (
    ControlChange,
    CuePoint,
    KeyMode,
    KeySignature,
    Lyrics,
    NoteOff,
    NoteOn,
    ProgramChange,
    SMPTEOffset,
    SysEx,
    Tempo,
    TimeSignature,
    TrackName,
    decode,
    encode,
    encode_raw,
    parse_raw,
    try_decode,
)
from midiwire.codec.fields import (
    denominator_to_exponent,
    exponent_to_denominator,
    from_signed_byte,
    pack_smpte,
    read_vlq,
    smpte_from_bytes,
    smpte_to_bytes,
    to_signed_byte,
    unpack_smpte,
    write_vlq,
)

channels = st.integers(min_value=0, max_value=15)
data_bytes = st.integers(min_value=0, max_value=127)
unsigned_bytes = st.integers(min_value=0, max_value=255)
# UTF-8 encodable text (no surrogates)
texts = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=0xD7FF), max_size=200)


class TestChannelVoiceProperties:
    """Property-based tests for channel voice messages."""

    @given(channel=channels, pitch=data_bytes, velocity=st.integers(min_value=1, max_value=127))
    def test_note_on_roundtrip(self, channel: int, pitch: int, velocity: int) -> None:
        """Test note on with non-zero velocity survives encode/decode."""
        msg = NoteOn(channel, pitch, velocity)
        assert decode(encode(msg)) == msg

    @given(channel=channels, pitch=data_bytes)
    def test_note_on_zero_velocity(self, channel: int, pitch: int) -> None:
        """Test note on with zero velocity always comes back as note off."""
        assert decode(encode(NoteOn(channel, pitch, 0))) == NoteOff(channel, pitch, 0)

    @given(channel=channels, pitch=data_bytes, velocity=data_bytes)
    def test_note_off_roundtrip(self, channel: int, pitch: int, velocity: int) -> None:
        """Test note off survives encode/decode."""
        msg = NoteOff(channel, pitch, velocity)
        assert decode(encode(msg)) == msg

    @given(channel=channels, num=data_bytes, value=data_bytes)
    def test_control_change_roundtrip(self, channel: int, num: int, value: int) -> None:
        """Test control change survives encode/decode."""
        msg = ControlChange(channel, num, value)
        assert decode(encode(msg)) == msg

    @given(channel=channels, patch=data_bytes)
    def test_program_change_roundtrip(self, channel: int, patch: int) -> None:
        """Test program change survives encode/decode and leaves data2 at 0."""
        msg = ProgramChange(channel, patch)
        assert encode_raw(msg).data2 == 0  # type: ignore[union-attr]
        assert decode(encode(msg)) == msg

    @given(channel=channels, pitch=data_bytes, velocity=data_bytes)
    def test_status_byte(self, channel: int, pitch: int, velocity: int) -> None:
        """Test the status byte combines command and channel."""
        assert encode(NoteOff(channel, pitch, velocity))[0] == 0x80 | channel


class TestMetaProperties:
    """Property-based tests for meta messages."""

    @given(shift=st.integers(min_value=-128, max_value=127), mode=st.sampled_from(KeyMode))
    def test_key_signature_roundtrip(self, shift: int, mode: KeyMode) -> None:
        """Test key signature survives encode/decode."""
        msg = KeySignature(shift, mode)
        assert decode(encode(msg)) == msg

    @given(
        num=unsigned_bytes,
        exponent=unsigned_bytes,
        clocks=unsigned_bytes,
        num32=unsigned_bytes,
    )
    def test_time_signature_roundtrip(
        self, num: int, exponent: int, clocks: int, num32: int
    ) -> None:
        """Test time signature survives encode/decode for every exponent."""
        msg = TimeSignature(num, 2**exponent, clocks, num32)
        assert decode(encode(msg)) == msg

    @given(micros=st.integers(min_value=0, max_value=0xFFFFFF))
    def test_tempo_roundtrip(self, micros: int) -> None:
        """Test tempo survives encode/decode."""
        msg = Tempo(micros)
        assert decode(encode(msg)) == msg

    @given(bpm=st.floats(min_value=4.0, max_value=1000.0))
    def test_tempo_from_bpm_is_close(self, bpm: float) -> None:
        """Test from_bpm rounds to the nearest microsecond."""
        tempo = Tempo.from_bpm(bpm)
        assert abs(tempo.micros_per_quarter - 60_000_000 / bpm) <= 0.5 + 1e-6

    @given(code=st.integers(min_value=0, max_value=(1 << 40) - 1))
    def test_smpte_roundtrip(self, code: int) -> None:
        """Test SMPTE offset survives encode/decode."""
        msg = SMPTEOffset(code)
        assert decode(encode(msg)) == msg

    @given(text=texts)
    def test_text_roundtrip(self, text: str) -> None:
        """Test valid UTF-8 text survives encode/decode."""
        for cls in (TrackName, Lyrics, CuePoint):
            msg = cls(text)
            assert decode(encode(msg)) == msg


class TestSysExProperties:
    """Property-based tests for system-exclusive messages."""

    @given(data=st.binary(max_size=300))
    def test_sysex_raw_roundtrip(self, data: bytes) -> None:
        """Test sysex payloads are kept verbatim through the raw form."""
        msg = SysEx(data)
        assert decode(encode_raw(msg)) == msg


class TestFieldProperties:
    """Property-based tests for field codecs."""

    @given(exponent=unsigned_bytes)
    def test_denominator_inverse(self, exponent: int) -> None:
        """Test denominator and exponent conversions are inverses."""
        assert denominator_to_exponent(exponent_to_denominator(exponent)) == exponent

    @given(value=st.integers(min_value=-128, max_value=127))
    def test_signed_byte_inverse(self, value: int) -> None:
        """Test signed byte conversions are inverses."""
        assert from_signed_byte(to_signed_byte(value)) == value

    @given(
        fps=st.integers(min_value=0, max_value=3),
        hours=st.integers(min_value=0, max_value=63),
        minutes=unsigned_bytes,
        seconds=unsigned_bytes,
        frames=unsigned_bytes,
        subframes=unsigned_bytes,
    )
    def test_smpte_inverse(
        self, fps: int, hours: int, minutes: int, seconds: int, frames: int, subframes: int
    ) -> None:
        """Test SMPTE packing and unpacking are inverses."""
        fields = (fps, hours, minutes, seconds, frames, subframes)
        code = pack_smpte(*fields)
        assert unpack_smpte(code) == fields
        assert smpte_from_bytes(smpte_to_bytes(code)) == code

    @given(value=st.integers(min_value=0, max_value=0x0FFFFFFF))
    def test_vlq_inverse(self, value: int) -> None:
        """Test variable-length quantities decode to what was encoded."""
        encoded = write_vlq(value)
        assert 1 <= len(encoded) <= 4
        assert read_vlq(encoded) == (value, len(encoded))


class TestDecodeRobustness:
    """Property-based tests for decoding arbitrary input."""

    @given(data=st.binary(max_size=64))
    def test_try_decode_never_raises(self, data: bytes) -> None:
        """Test fail-soft decoding handles any byte string."""
        try_decode(data)

    @given(data=st.binary(min_size=1, max_size=64))
    def test_decoded_messages_reencode(self, data: bytes) -> None:
        """Test anything that decodes re-encodes to a message that parses."""
        msg = try_decode(data)
        if msg is not None:
            parse_raw(encode(msg))
