[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canadianexperience"
version = "0.1.0"
description = "Keyframe animation of hierarchical drawable actors on a timeline"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["animation", "keyframe", "timeline", "tweening", "actors"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["canadianexperience"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
