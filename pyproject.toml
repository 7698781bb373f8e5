[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zmkstudio"
version = "0.2.0"
description = "Building blocks for the ZMK Studio RPC protocol: keycodes, HID usages, framing, keymap data, errors and a serial transport"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["zmk", "keyboard", "keymap", "studio", "hid", "serial", "framing"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zmkstudio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
