[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsimproved"
version = "1.1.0"
description = "List directory contents as a tree, together with a short description of each entry"
requires-python = ">=3.11"
keywords = ["ls", "description", "cli", "directory", "filesystem", "tree"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lsi = "lsimproved.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lsimproved"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
