[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memfs"
version = "0.1.0"
description = "An asyncio-safe in-memory file system storing files as byte arrays"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "in-memory", "asyncio", "virtual", "bytes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["memfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
