[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mino"
version = "0.1.0"
description = "Small game toolkit: 2D affine geometry, simple wave synthesis, colours and input state tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "input", "gamepad", "synth", "affine", "geometry", "color"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
