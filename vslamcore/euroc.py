"""Loading of EuRoC sequences: image file names and timestamps from a times file."""

from __future__ import annotations

import os
from typing import Iterator

_NANOSECONDS = 1e9


def _read_stamps(times_path) -> Iterator[tuple[str, float]]:
    """Yield each non-empty line of the times file with its timestamp in seconds."""
    path = os.fspath(times_path)
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\r\n")
            if not line:
                continue
            fields = line.split()
            if not fields:
                raise ValueError(f"bad timestamp line in {path}: {line!r}")
            try:
                stamp = float(fields[0])
            except ValueError as exc:
                raise ValueError(f"bad timestamp line in {path}: {line!r}") from exc
            yield line, stamp / _NANOSECONDS


def load_euroc_mono(image_path, times_path) -> tuple[list[str], list[float]]:
    """Image paths (``<image_path>/<line>.png``) and timestamps in seconds.

    Each line of the times file holds a timestamp in nanoseconds that also
    names the image.
    """
    folder = os.fspath(image_path)
    images: list[str] = []
    stamps: list[float] = []
    for name, stamp in _read_stamps(times_path):
        images.append(f"{folder}/{name}.png")
        stamps.append(stamp)
    return images, stamps


def load_euroc_stereo(left_path, right_path, times_path) -> tuple[list[str], list[str], list[float]]:
    """Left and right image paths and timestamps in seconds from one times file."""
    left_folder = os.fspath(left_path)
    right_folder = os.fspath(right_path)
    left: list[str] = []
    right: list[str] = []
    stamps: list[float] = []
    for name, stamp in _read_stamps(times_path):
        left.append(f"{left_folder}/{name}.png")
        right.append(f"{right_folder}/{name}.png")
        stamps.append(stamp)
    return left, right, stamps