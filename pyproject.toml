[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vslamcore"
version = "0.1.0"
description = "Pose conversions, plane detection, playback timing and dataset loaders for visual SLAM"
requires-python = ">=3.10"
keywords = ["slam", "computer-vision", "se3", "quaternion", "plane-detection", "ransac", "datasets", "kitti", "euroc", "tum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vslamcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
