[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsp56emu"
version = "0.1.0"
description = "Building blocks of a DSP 56300 family emulator: memory, address generation, instruction cache, OMF loading, audio and host interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "dsp56300", "emulator", "audio", "esai", "essi", "hdi08", "omf"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsp56emu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
