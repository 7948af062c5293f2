# vslamcore

Small, NumPy-based pieces for working with a feature-based visual SLAM system:
pose conversions, plane detection on map points, playback timing and loaders
for common dataset layouts.

## Modules

- `vslamcore.converter`: conversions between 4x4 transforms and their parts.
  - `to_se3(rotation, translation)` builds a single-precision 4x4 rigid transform.
  - `split_se3(transform)` returns the rotation and the translation.
  - `sim3_to_matrix(rotation, translation, scale)` builds `[sR | t]`.
  - `to_matrix3d`, `to_vector3d` and `to_descriptor_vector` convert to double-precision 3x3 blocks, 3-vectors and lists of descriptor rows.
  - `to_quaternion(matrix)` converts a rotation into `[x, y, z, w]`.
- `vslamcore.plane`: axis-angle rotations (`exp_so3`, `exp_so3_vector`) and RANSAC plane detection.
  - `detect_plane(camera_pose, map_points, iterations=50, rng=None)` looks only at map points with more than five observations. It returns `None` when fewer than 50 such points exist. Otherwise it returns a `Plane` fitted to the inliers.
  - `Plane` holds a `normal`, an `origin` and a 4x4 transform `tpw` whose y axis is the normal.
  - `Plane.recompute()` refits the plane to the map points that are not bad.
  - `Plane.gl_matrix()` gives the transform as 16 column-major values.
  - `Plane.from_normal(normal, origin, rang)` builds a plane with no map points.
  - Map points are duck-typed: anything with `world_pos`, `observations` and `is_bad` works.
- `vslamcore.timing`: playback pacing and tracking-time statistics.
  - `estimate_frame_rate(timestamps)` estimates the frame rate of a sequence.
  - `frame_wait(timestamps, index, elapsed)` gives the seconds left to wait so that playback keeps pace with the timestamps.
  - `timing_stats(times)` returns a `TimingStats` with the median and mean tracking time.
- `vslamcore.kitti`: `load_kitti_mono` and `load_kitti_stereo` read `times.txt` and list `image_0` (and `image_1`) file names.
- `vslamcore.euroc`: `load_euroc_mono` and `load_euroc_stereo` read a times file in nanoseconds. They return image paths and timestamps in seconds.
- `vslamcore.tum`: `load_tum_mono` reads `rgb.txt` and skips its three header lines. `load_tum_rgbd` reads an association file.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.

## Example

```python
from vslamcore.kitti import load_kitti_stereo
from vslamcore.timing import estimate_frame_rate

left, right, timestamps = load_kitti_stereo("/data/kitti/sequences/00")
print("Estimated frame rate", estimate_frame_rate(timestamps))
```

```python
import numpy as np
from vslamcore.converter import to_se3, to_quaternion

transform = to_se3(np.eye(3), np.array([1.0, 2.0, 3.0]))
print(to_quaternion(transform[:3, :3]))  # x, y, z, w
```

## What it does not do

This package provides no tracking pipeline. It does not:

- extract or match features;
- build frames;
- initialise a map from two views;
- draw tracking output;
- read images.

It has no command-line program. The dataset loaders only return file names and timestamps. Loading and processing the images is left to the caller.