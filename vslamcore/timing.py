"""Frame-rate estimation, playback pacing and tracking-time statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class TimingStats:
    """Median and mean of per-frame tracking times, in seconds."""

    median: float
    mean: float


def estimate_frame_rate(timestamps: Sequence[float]) -> int:
    """Number of frames per second spanned by the timestamps, rounded half away from zero."""
    stamps = list(timestamps)
    if not stamps:
        raise ValueError("no timestamps")
    span = stamps[-1] - stamps[0]
    if span == 0:
        raise ValueError("timestamps span no time")
    rate = len(stamps) / span
    return int(math.copysign(math.floor(abs(rate) + 0.5), rate))


def frame_wait(timestamps: Sequence[float], index: int, elapsed: float) -> float:
    """Seconds to wait after frame ``index`` took ``elapsed`` seconds to track.

    The frame period is the gap to the next timestamp, or to the previous one
    for the last frame.
    """
    stamps = list(timestamps)
    if not 0 <= index < len(stamps):
        raise IndexError("frame index out of range")
    period = 0.0
    if index < len(stamps) - 1:
        period = stamps[index + 1] - stamps[index]
    elif index > 0:
        period = stamps[index] - stamps[index - 1]
    return period - elapsed if elapsed < period else 0.0


def timing_stats(times: Sequence[float]) -> TimingStats:
    """Median (upper middle element) and mean of the tracking times."""
    ordered = sorted(times)
    if not ordered:
        raise ValueError("no tracking times")
    return TimingStats(median=ordered[len(ordered) // 2], mean=sum(ordered) / len(ordered))