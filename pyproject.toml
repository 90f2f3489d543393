[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidez"
version = "0.1.0"
description = "Building blocks of a SID tune player: a cycle-exact 6510 CPU core, player-routine identification, per-author chip profiles and MD5 tune fingerprints."
requires-python = ">=3.10"
dependencies = []
keywords = ["sid", "c64", "commodore", "6502", "6510", "emulation", "chiptune", "sidid", "md5"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sidez"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
