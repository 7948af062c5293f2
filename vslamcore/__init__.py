"""Pose conversions, plane detection, playback timing and dataset loaders for visual SLAM."""

__version__ = "0.1.0"

__all__ = ["converter", "euroc", "kitti", "plane", "timing", "tum"]