[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mahigui"
version = "1.0.0"
description = "2D vectors, affine transforms, rounded polygon shapes, colors, keyframe sequences and desktop helpers"
requires-python = ">=3.10"
dependencies = [
    "shapely",
]
keywords = ["geometry", "transform", "polygon", "shape", "color", "tween", "keyframe", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mahigui"]

[tool.pytest.ini_options]
addopts = "-ra"
