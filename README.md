# gustools

A small collection of helpers:

- `gustools.sorting`: `shell_sort`, `bubble_sort`, `binary_search` and `sort_and_search`.
- `gustools.arrays`: `resize`, `remove_item`, `insert_item` and `concat` on lists, plus the interactive `prompt_remove` and `prompt_insert`. Invalid positions raise `InvalidPositionError` (a subclass of `IndexError`).
- `gustools.bits`: `format_bin`, `format_hex32`, `extract_bits`, `swap_segments16`, `set_bit`, `invert_bit`, `rotate32`, `bit_at16` and `bits_equal16` for fixed-width unsigned integers.
- `gustools.tracks`: reading and writing multi-track float32 audio containers (`read_tracks`, `write_tracks`), bare float32 sample data (`write_raw`, `read_raw`), and an interactive `choose_track`.
- `gustools.cli`: the `gustools` command.

All list and bit functions return new values; they never modify their arguments.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Library use

```python
from gustools.sorting import shell_sort, binary_search
from gustools.bits import format_bin, set_bit, rotate32

values = shell_sort([3.0, 1.0, 2.0])     # [1.0, 2.0, 3.0]
index = binary_search(values, 2)         # 1 (None when absent)

print(format_bin(set_bit(0, 3, True), 8))  # 0000-1000
print(rotate32(1, -1))                     # 2147483648
```

`format_bin` takes a width that is a positive multiple of four. Bit positions outside the value's width raise `ValueError`.

The prompt functions take `read` and `write` callables, defaulting to `input` and `print`, and keep asking until a valid answer is given.

### Track containers

A container holds a little-endian `uint32` track count, then one header per track (`uint32` sample rate, `uint32` sample count, a 64-byte NUL-padded name), then each track's samples as little-endian `float32` values, in track order.

```python
from gustools.tracks import read_tracks, write_raw

with open("audio_list.raw", "rb") as stream:
    tracks = read_tracks(stream)

for number, track in enumerate(tracks):
    print(number, track.header.name(), track.header.sample_rate)

with open("sound.raw", "wb") as out:
    write_raw(tracks[0], out)
```

`Header` and `Track` are dataclasses; a `Track` whose sample list does not match its header's `sample_count` is rejected. Truncated or malformed data raises `TrackFormatError` (a subclass of `ValueError`).

## Command line

```
gustools [INPUT] [-o OUTPUT]
```

`INPUT` defaults to `audio_list.raw` and `OUTPUT` to `sound.raw`. The command lists the tracks in the container, asks for a track number, writes that track's samples to the output file as bare float32 data, reads the file back to check it, and exits with status 0 on success or 1 on any error.

## What it does not do

There is no audio playback: the package reads, writes and checks sample data, but never sends it to a sound device.

## Running the tests

```
pytest
```