[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "h264enc"
version = "0.1.0"
description = "Building blocks for writing H.264 elementary streams: Exp-Golomb bit coding, NAL units, sequence parameter sets and YUV frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["h264", "avc", "video", "nal", "sps", "exp-golomb", "yuv", "bitstream"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
h264enc = "h264enc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["h264enc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
