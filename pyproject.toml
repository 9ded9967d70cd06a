[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gustools"
version = "0.1.0"
description = "Sorting, list editing, bit manipulation and multi-track float32 audio container helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "binary search", "bits", "bit manipulation", "audio", "raw audio", "float32"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gustools = "gustools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gustools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
