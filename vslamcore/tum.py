"""Loading of TUM RGB-D sequences: image lists and association files."""

from __future__ import annotations

import itertools
import os
from typing import Iterator

_HEADER_LINES = 3


def _records(lines, path: str, min_fields: int) -> Iterator[list[str]]:
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        fields = line.split()
        if len(fields) < min_fields:
            raise ValueError(f"malformed line in {path}: {line!r}")
        yield fields


def _stamp(text: str, path: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"bad timestamp in {path}: {text!r}") from exc


def load_tum_mono(sequence_path) -> tuple[list[str], list[float]]:
    """Image file names (relative to the sequence) and timestamps from ``rgb.txt``.

    The first three lines of the file are a header and are skipped.
    """
    path = f"{os.fspath(sequence_path)}/rgb.txt"
    names: list[str] = []
    stamps: list[float] = []
    with open(path, encoding="utf-8") as handle:
        body = itertools.islice(handle, _HEADER_LINES, None)
        for fields in _records(body, path, 2):
            stamps.append(_stamp(fields[0], path))
            names.append(fields[1])
    return names, stamps


def load_tum_rgbd(association_path) -> tuple[list[str], list[str], list[float]]:
    """Colour and depth file names and colour timestamps from an association file.

    Each line reads ``t_rgb rgb_file t_depth depth_file``.
    """
    path = os.fspath(association_path)
    rgb: list[str] = []
    depth: list[str] = []
    stamps: list[float] = []
    with open(path, encoding="utf-8") as handle:
        for fields in _records(handle, path, 4):
            stamps.append(_stamp(fields[0], path))
            rgb.append(fields[1])
            _stamp(fields[2], path)
            depth.append(fields[3])
    return rgb, depth, stamps