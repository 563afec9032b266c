[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatch"
version = "0.1.0"
description = "Polling file system watcher: create, modify, delete and rename events for files and directories."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "notify", "watch", "events", "polling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fswatch = "fswatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fswatch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
