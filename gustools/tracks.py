"""Reading and writing multi-track float32 audio containers."""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, BinaryIO

_COUNT = struct.Struct("<I")
_HEADER = struct.Struct("<II64s")
_SAMPLE_SIZE = 4
NAME_SIZE = 64
_UINT32_MAX = 0xFFFFFFFF


class TrackFormatError(ValueError):
    """Raised when track data is malformed or truncated."""


@dataclass(frozen=True)
class Header:
    """Per-track header: sample rate, sample count and a 64-byte name."""

    sample_rate: int
    sample_count: int
    sound_name: bytes = b""

    def __post_init__(self) -> None:
        for label, number in (("sample_rate", self.sample_rate), ("sample_count", self.sample_count)):
            if not 0 <= number <= _UINT32_MAX:
                raise TrackFormatError(f"{label} {number} does not fit in 32 bits")
        if len(self.sound_name) > NAME_SIZE:
            raise TrackFormatError(f"sound name longer than {NAME_SIZE} bytes")

    def name(self) -> str:
        """Return the track name up to its first NUL byte."""
        return self.sound_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Track:
    """A header together with its samples."""

    header: Header
    samples: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.samples = list(self.samples)
        if len(self.samples) != self.header.sample_count:
            raise TrackFormatError(
                f"header announces {self.header.sample_count} samples, got {len(self.samples)}"
            )


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise TrackFormatError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def read_raw(stream: BinaryIO, count: int | None = None) -> list[float]:
    """Read ``count`` float32 samples, or all remaining ones when ``count`` is None."""
    if count is None:
        data = stream.read()
        if len(data) % _SAMPLE_SIZE:
            raise TrackFormatError("sample data is not a whole number of floats")
    else:
        data = _read_exact(stream, count * _SAMPLE_SIZE, "sample data")
    return list(struct.unpack(f"<{len(data) // _SAMPLE_SIZE}f", data))


def write_raw(track: Track, stream: BinaryIO) -> None:
    """Write the samples of ``track`` as bare float32 values."""
    stream.write(struct.pack(f"<{len(track.samples)}f", *track.samples))


def read_tracks(stream: BinaryIO) -> list[Track]:
    """Read a track count, all headers, then all sample blocks."""
    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size, "track count"))
    headers = [
        Header(*_HEADER.unpack(_read_exact(stream, _HEADER.size, "header")))
        for _ in range(count)
    ]
    return [Track(header, read_raw(stream, header.sample_count)) for header in headers]


def write_tracks(tracks: Sequence[Track], stream: BinaryIO) -> None:
    """Write tracks in the layout read by :func:`read_tracks`."""
    stream.write(_COUNT.pack(len(tracks)))
    for track in tracks:
        header = track.header
        if len(track.samples) != header.sample_count:
            raise TrackFormatError("sample count does not match header")
        stream.write(_HEADER.pack(header.sample_rate, header.sample_count, header.sound_name))
    for track in tracks:
        write_raw(track, stream)


def choose_track(
    tracks: Sequence[Track],
    read: Callable[[str], str] = input,
    write: Callable[[str], Any] = print,
) -> int:
    """Ask for a track number until a valid one is entered and return it."""
    if not tracks:
        raise TrackFormatError("there are no tracks to choose from")
    while True:
        answer = read("Select a track: ")
        try:
            index = int(answer.strip())
        except ValueError:
            index = -1
        if 0 <= index < len(tracks):
            return index
        write("Invalid track")