[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termctl"
version = "0.1.0"
description = "Terminal control sequences as command objects, with key, mouse and event value types"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "escape-codes", "cursor", "keyboard", "mouse", "tui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termctl"]

[tool.pytest.ini_options]
addopts = "-ra"
