"""Loading of KITTI odometry sequences: timestamps and image file names."""

from __future__ import annotations

import os


def _load_times(sequence_path: str) -> list[float]:
    times_path = os.path.join(sequence_path, "times.txt")
    stamps: list[float] = []
    with open(times_path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.split()
            if not fields:
                continue
            try:
                stamps.append(float(fields[0]))
            except ValueError as exc:
                raise ValueError(f"bad timestamp line in {times_path}: {line.strip()!r}") from exc
    return stamps


def _image_names(sequence_path: str, folder: str, count: int) -> list[str]:
    prefix = os.path.join(sequence_path, folder)
    return [os.path.join(prefix, f"{i:06d}.png") for i in range(count)]


def load_kitti_mono(sequence_path) -> tuple[list[str], list[float]]:
    """Left image paths (``image_0``) and timestamps of a sequence."""
    path = os.fspath(sequence_path)
    stamps = _load_times(path)
    return _image_names(path, "image_0", len(stamps)), stamps


def load_kitti_stereo(sequence_path) -> tuple[list[str], list[str], list[float]]:
    """Left (``image_0``) and right (``image_1``) image paths and timestamps of a sequence."""
    path = os.fspath(sequence_path)
    stamps = _load_times(path)
    count = len(stamps)
    return _image_names(path, "image_0", count), _image_names(path, "image_1", count), stamps