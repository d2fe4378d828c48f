[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telfs"
version = "0.1.0"
description = "Local tooling for a channel-backed filesystem: profiles, bundles, garbage reports, durations and status views"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "fuse", "profiles", "backup", "garbage-collection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
telfs = "telfs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["telfs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
