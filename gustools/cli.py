"""Command line: list tracks of a container and export one as raw float32."""

from __future__ import annotations

import argparse
import sys

from gustools.tracks import TrackFormatError, choose_track, read_raw, read_tracks, write_raw


def main(argv: list[str] | None = None) -> int:
    """List tracks, ask for one, write its samples to a raw file and verify it."""
    parser = argparse.ArgumentParser(
        prog="gustools", description="Export a track from a multi-track audio container."
    )
    parser.add_argument("input", nargs="?", default="audio_list.raw", help="container file")
    parser.add_argument("-o", "--output", default="sound.raw", help="raw output file")
    args = parser.parse_args(argv)

    try:
        with open(args.input, "rb") as source:
            tracks = read_tracks(source)
    except (OSError, TrackFormatError) as exc:
        print(f"error reading {args.input}: {exc}", file=sys.stderr)
        return 1

    print(f"number of tracks: [{len(tracks)}]")
    if not tracks:
        return 1
    for index, track in enumerate(tracks):
        print(f"Track [{index}]: {track.header.name()}")

    try:
        index = choose_track(tracks, input, print)
    except EOFError:
        print("no track selected", file=sys.stderr)
        return 1

    chosen = tracks[index]
    try:
        with open(args.output, "wb") as target:
            write_raw(chosen, target)
        with open(args.output, "rb") as written:
            samples = read_raw(written, chosen.header.sample_count)
    except (OSError, TrackFormatError) as exc:
        print(f"error writing {args.output}: {exc}", file=sys.stderr)
        return 1

    if samples != chosen.samples:
        print(f"verification of {args.output} failed", file=sys.stderr)
        return 1
    print(f"Track [{index}] written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())