[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relinput"
version = "0.1.0"
description = "Key code tables and xdotool-driven input injection for relaying remote keyboard and mouse events"
requires-python = ">=3.10"
dependencies = []
keywords = ["xdotool", "keymap", "virtual-key", "remote-input", "x11"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["relinput"]

[tool.pytest.ini_options]
addopts = "-ra"
