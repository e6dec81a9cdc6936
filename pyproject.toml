[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picscale"
version = "0.1.7"
description = "Resampling kernels, transfer functions and nearest-neighbour scaling for raw image buffers"
requires-python = ">=3.10"
keywords = ["scale", "resize", "image-resize", "resampling", "transfer-function", "gamma"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["picscale"]

[tool.pytest.ini_options]
addopts = "-ra"
